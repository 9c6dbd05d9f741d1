""" Build models from decoded JSON models

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.config import get_config
from gem_json.core import Model
from gem_json.diagnostics import Diagnostics
from gem_json.ids import IdNormalizer, PrefixExemption
from gem_json.mappers import (AnnotationPassthrough, CompartmentMapper, FluxBoundBuilder, GeneMapper,
                              MetaboliteMapper, ObjectiveAssembler, ReactionMapper)


class ModelBuilder(object):
    """ Build a model from a decoded JSON model

    The compartments, metabolites and genes are mapped before the reactions so that the
    reactions can refer to them.

    Attributes:
        config (:obj:`configobj.ConfigObj`): configuration
        diagnostics (:obj:`Diagnostics`): sink for diagnostics
        normalizer (:obj:`IdNormalizer`): normalizer of identifiers
        annotations (:obj:`AnnotationPassthrough`): handler of annotations and notes
        compartment_mapper (:obj:`CompartmentMapper`): mapper of compartments
        metabolite_mapper (:obj:`MetaboliteMapper`): mapper of metabolites
        gene_mapper (:obj:`GeneMapper`): mapper of genes
        reaction_mapper (:obj:`ReactionMapper`): mapper of reactions
    """

    def __init__(self, config=None, diagnostics=None, gpr_builder=None, annotations=None, is_exempt=None):
        """
        Args:
            config (:obj:`configobj.ConfigObj`, optional): configuration; defaults to :obj:`get_config`
            diagnostics (:obj:`Diagnostics`, optional): sink for diagnostics
            gpr_builder (:obj:`callable`, optional): builder of gene product associations; defaults to
                :obj:`gem_json.gpr.GprParser`
            annotations (:obj:`AnnotationPassthrough`, optional): handler of annotations and notes
            is_exempt (:obj:`callable`, optional): predicate which determines if a metabolite identifier
                is exempt from the metabolite prefix; defaults to the configured pattern
        """
        if config is None:
            config = get_config()
        self.config = config
        config = config['gem_json']

        if diagnostics is None:
            diagnostics = Diagnostics(warn_level=config['diagnostics']['warn_level'],
                                      record_level=config['diagnostics']['record_level'])
        self.diagnostics = diagnostics
        self.normalizer = IdNormalizer(diagnostics)
        self.annotations = annotations or AnnotationPassthrough()

        ids = config['ids']
        prefixes = (ids['metabolite_prefix'], ids['gene_product_prefix'], ids['reaction_prefix'])
        if is_exempt is None:
            is_exempt = PrefixExemption(ids['prefix_exempt_pattern'])

        kwargs = {
            'diagnostics': diagnostics,
            'normalizer': self.normalizer,
            'annotations': self.annotations,
        }
        self.compartment_mapper = CompartmentMapper(**kwargs)
        self.metabolite_mapper = MetaboliteMapper(prefix=ids['metabolite_prefix'], is_exempt=is_exempt,
                                                  prefixes=prefixes, **kwargs)
        self.gene_mapper = GeneMapper(prefix=ids['gene_product_prefix'], prefixes=prefixes, **kwargs)
        self.reaction_mapper = ReactionMapper(
            prefix=ids['reaction_prefix'],
            metabolite_prefix=ids['metabolite_prefix'],
            gene_product_prefix=ids['gene_product_prefix'],
            is_exempt=is_exempt,
            prefixes=prefixes,
            flux_bounds=FluxBoundBuilder(default_lower_bound=config['reactions']['default_lower_bound'],
                                         default_upper_bound=config['reactions']['default_upper_bound'],
                                         diagnostics=diagnostics),
            gpr_builder=gpr_builder,
            objective=ObjectiveAssembler(id=config['objective']['id'], type=config['objective']['type']),
            **kwargs)

    def run(self, model_record):
        """ Build a model

        Args:
            model_record (:obj:`ModelRecord`): decoded JSON model

        Returns:
            :obj:`Model`: model
        """
        id = self.normalizer.normalize(model_record.id)
        model = Model(id, name=model_record.name or id, version=model_record.version)
        model.annotation = self.annotations.annotation(model_record.annotation)
        model.notes = self.annotations.notes(model_record.notes)
        self.diagnostics.info('JSON_PARSER_STARTED', model=id)

        for compartment in self.compartment_mapper.run(model_record.compartments):
            model.add_compartment(compartment)

        for species in self.metabolite_mapper.run(model_record.metabolites):
            model.add_species(species)

        for gene_product in self.gene_mapper.run(model_record.genes):
            model.add_gene_product(gene_product)

        self.reaction_mapper.run(model_record.reactions, model)

        return model
