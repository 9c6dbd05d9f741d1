""" Map the metabolites of JSON models to species

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from .core import Mapper
from gem_json.core import EntityList, Species
from gem_json.ids import CanonicalId, PrefixExemption, gen_canonical_id


class MetaboliteMapper(Mapper):
    """ Create a species for each metabolite of a JSON model

    * Records without ids are skipped
    * Identifiers are normalized and prefixed with the metabolite prefix unless they already
      have an entity prefix or are exempt (e.g. biomass)
    * Names default to the raw identifiers
    * Invalid formulae are dropped; the species are still created
    * Compartments are copied verbatim and are not checked against the compartments of the model

    Attributes:
        prefix (:obj:`str`): metabolite prefix
        is_exempt (:obj:`callable`): predicate which determines if an identifier is exempt from the prefix
        prefixes (:obj:`tuple` of :obj:`str`): recognized entity prefixes
    """

    def __init__(self, diagnostics=None, normalizer=None, annotations=None,
                 prefix='M', is_exempt=None, prefixes=CanonicalId.PREFIXES):
        super(MetaboliteMapper, self).__init__(diagnostics=diagnostics, normalizer=normalizer,
                                               annotations=annotations)
        self.prefix = prefix
        self.is_exempt = is_exempt or PrefixExemption()
        self.prefixes = prefixes

    def run(self, records):
        """ Map metabolites

        Args:
            records (:obj:`list` of :obj:`MetaboliteRecord`): metabolites

        Returns:
            :obj:`list` of :obj:`Species`: species
        """
        self.diagnostics.info('NUM_METABOLITES', count=len(records))
        species = EntityList()
        for i_record, record in enumerate(records):
            if not record.id:
                self.diagnostics.warning('EMPTY_ID', entity='metabolite', index=i_record)
                continue

            id = gen_canonical_id(self.normalizer, record.id, self.prefix,
                                  is_exempt=self.is_exempt, prefixes=self.prefixes)
            if species.has_id(id):
                self.diagnostics.warning('DUPLICATE_ID', entity='metabolite', id=id)
                continue

            species.append(self.map(record, id))
        return list(species)

    def map(self, record, id):
        """ Map a metabolite

        Args:
            record (:obj:`MetaboliteRecord`): metabolite
            id (:obj:`str`): canonical identifier

        Returns:
            :obj:`Species`: species
        """
        spec = Species(id, name=record.name or record.id, compartment=record.compartment, charge=record.charge)
        if record.formula:
            try:
                spec.formula = record.formula
            except ValueError:
                self.diagnostics.warning('INVALID_FORMULA', id=id, formula=record.formula)
        self.annotations.apply(record, spec)
        return spec
