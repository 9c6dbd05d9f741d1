""" Map the genes of JSON models to gene products

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from .core import Mapper
from gem_json.core import EntityList, GeneProduct
from gem_json.ids import CanonicalId, gen_canonical_id


class GeneMapper(Mapper):
    """ Create a gene product for each gene of a JSON model. The label of each gene product is
    the raw identifier of its gene.

    Attributes:
        prefix (:obj:`str`): gene product prefix
        prefixes (:obj:`tuple` of :obj:`str`): recognized entity prefixes
    """

    def __init__(self, diagnostics=None, normalizer=None, annotations=None,
                 prefix='G', prefixes=CanonicalId.PREFIXES):
        super(GeneMapper, self).__init__(diagnostics=diagnostics, normalizer=normalizer,
                                         annotations=annotations)
        self.prefix = prefix
        self.prefixes = prefixes

    def run(self, records):
        """ Map genes

        Args:
            records (:obj:`list` of :obj:`GeneRecord`): genes

        Returns:
            :obj:`list` of :obj:`GeneProduct`: gene products
        """
        self.diagnostics.info('NUM_GENES', count=len(records))
        gene_products = EntityList()
        for i_record, record in enumerate(records):
            if not record.id:
                self.diagnostics.warning('EMPTY_ID', entity='gene', index=i_record)
                continue

            id = gen_canonical_id(self.normalizer, record.id, self.prefix, prefixes=self.prefixes)
            if gene_products.has_id(id):
                self.diagnostics.warning('DUPLICATE_ID', entity='gene', id=id)
                continue

            gene_product = GeneProduct(id, label=record.id, name=record.name or record.id)
            self.annotations.apply(record, gene_product)
            gene_products.append(gene_product)
        return list(gene_products)
