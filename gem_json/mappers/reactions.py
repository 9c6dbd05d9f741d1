""" Map the reactions of JSON models

A reaction is mapped in several steps, each implemented by a separate class:

* :obj:`FluxBoundBuilder`: reversibility and the flux bound parameters
* :obj:`StoichiometrySplitter`: reactants and products
* the gene-reaction rule builder (by default :obj:`gem_json.gpr.GprParser`): gene product association
* :obj:`SubsystemGrouper`: subsystem group
* :obj:`ObjectiveAssembler`: flux objective

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from .core import Mapper
from gem_json.core import (FLUX_UNITS_ID, Group, GroupKind, Objective, ObjectiveType,
                           Parameter, Reaction, Species, is_negative)
from gem_json.diagnostics import Diagnostics
from gem_json.gpr import GprParser
from gem_json.ids import CanonicalId, IdNormalizer, PrefixExemption, gen_canonical_id


class FluxBoundBuilder(object):
    """ Set the reversibility of reactions and create their flux bound parameters

    A reaction is reversible iff its lower bound is negative, including negative zero.
    Both bound parameters are always created. Parameters and reactions share a namespace in
    SBML, so a parameter whose id is the id of a reaction is reported as an `ID_CLASH`.

    Attributes:
        diagnostics (:obj:`Diagnostics`): sink for clashes of ids
        default_lower_bound (:obj:`float`): lower bound of reactions which don't define one
        default_upper_bound (:obj:`float`): upper bound of reactions which don't define one
        units (:obj:`str`): id of the unit definition of the bounds
    """

    def __init__(self, default_lower_bound=0., default_upper_bound=0., units=FLUX_UNITS_ID, diagnostics=None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.default_lower_bound = default_lower_bound
        self.default_upper_bound = default_upper_bound
        self.units = units

    def run(self, reaction, lower_bound, upper_bound):
        """ Set the reversibility and flux bounds of a reaction

        Args:
            reaction (:obj:`Reaction`): reaction which belongs to a model
            lower_bound (:obj:`float`): lower bound, or :obj:`None` to use the default
            upper_bound (:obj:`float`): upper bound, or :obj:`None` to use the default
        """
        if lower_bound is None:
            lower_bound = self.default_lower_bound
        if upper_bound is None:
            upper_bound = self.default_upper_bound

        reaction.reversible = is_negative(lower_bound)
        reaction.lower_bound = self.gen_parameter(reaction, reaction.id + '_lb', lower_bound)
        reaction.upper_bound = self.gen_parameter(reaction, reaction.id + '_ub', upper_bound)

    def gen_parameter(self, reaction, id, value):
        if reaction.model.reactions.has_id(id):
            self.diagnostics.warning('ID_CLASH', id=id, entity='flux bound parameter', other='reaction')
        parameter = Parameter(id, name=id, value=value, constant=True, units=self.units)
        return reaction.model.add_parameter(parameter)


class StoichiometrySplitter(object):
    """ Split the stoichiometry of reactions into reactants and products

    * Zero coefficients are dropped
    * Negative coefficients are reactants, and their absolute values are their stoichiometries
    * Positive coefficients are products
    * Species which the model doesn't define are created

    Unlike :obj:`gem_json.mappers.metabolites.MetaboliteMapper`, the metabolite prefix is
    applied even if an identifier already has an entity prefix. For example, `G_x` becomes `M_x`
    whereas the metabolite mapper keeps `G_x`. As a result, a reaction refers to the species
    `M_x` rather than to a species defined as `G_x`.

    Attributes:
        diagnostics (:obj:`Diagnostics`): sink for undefined species
        normalizer (:obj:`IdNormalizer`): normalizer of metabolite identifiers
        prefix (:obj:`str`): metabolite prefix
        is_exempt (:obj:`callable`): predicate which determines if an identifier is exempt from the prefix
        prefixes (:obj:`tuple` of :obj:`str`): recognized entity prefixes
    """

    def __init__(self, diagnostics=None, normalizer=None, prefix='M', is_exempt=None,
                 prefixes=CanonicalId.PREFIXES):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.normalizer = normalizer or IdNormalizer(self.diagnostics)
        self.prefix = prefix
        self.is_exempt = is_exempt or PrefixExemption()
        self.prefixes = prefixes

    def run(self, reaction, stoichiometry):
        """ Add the reactants and products of a reaction

        Args:
            reaction (:obj:`Reaction`): reaction which belongs to a model
            stoichiometry (:obj:`dict` of :obj:`str`: :obj:`float`): dictionary which maps the ids of
                metabolites to their coefficients
        """
        for i_participant, (met_id, coefficient) in enumerate(stoichiometry.items()):
            if coefficient == 0:
                continue

            if not met_id:
                self.diagnostics.warning('EMPTY_ID', entity="participant of reaction '{}'".format(reaction.id),
                                         index=i_participant)
                continue

            species = self.get_or_create_species(reaction, met_id)
            if coefficient < 0:
                reaction.add_reactant(species, abs(coefficient))
            else:
                reaction.add_product(species, coefficient)

    def get_or_create_species(self, reaction, met_id):
        """ Get the species of a participant of a reaction, creating it if the model doesn't define it

        Args:
            reaction (:obj:`Reaction`): reaction which belongs to a model
            met_id (:obj:`str`): raw identifier of the metabolite

        Returns:
            :obj:`Species`: species
        """
        id = gen_canonical_id(self.normalizer, met_id, self.prefix, is_exempt=self.is_exempt,
                              replace_prefix=True, prefixes=self.prefixes)
        model = reaction.model
        species = model.species.get_one(id=id)
        if species is None:
            species = model.add_species(Species(id))
            self.diagnostics.info('SPECIES_UNDEFINED', species=id, reaction=reaction.id)
        return species


class SubsystemGrouper(object):
    """ Add reactions to the groups of their subsystems

    Groups are looked up by the name of each reaction rather than by the name of its
    subsystem, and new groups are named after the reaction. The subsystem only determines
    whether a reaction is grouped. Consequently, reactions with the same name share a
    group even if their subsystems differ.

    Attributes:
        kind (:obj:`GroupKind`): kind of the groups
    """

    def __init__(self, kind=GroupKind.partonomy):
        self.kind = kind

    def run(self, reaction, subsystem):
        """ Add a reaction to a group

        Args:
            reaction (:obj:`Reaction`): reaction which belongs to a model
            subsystem (:obj:`str`): subsystem of the reaction

        Returns:
            :obj:`Group`: group, or :obj:`None` if `subsystem` is empty
        """
        if not subsystem:
            return None

        model = reaction.model
        group = model.get_group_by_name(reaction.name)
        if group is None:
            group = model.add_group(Group(name=reaction.name, kind=self.kind))
        group.add_member(reaction)
        reaction.subsystem = group
        return group


class ObjectiveAssembler(object):
    """ Add the reactions with nonzero objective coefficients to the objective of the model

    The objective is created when the first reaction with a nonzero coefficient is added.

    Attributes:
        id (:obj:`str`): id of the objective
        type (:obj:`ObjectiveType`): sense of the objective
    """

    def __init__(self, id='obj', type=ObjectiveType.maximize):
        self.id = id
        self.type = ObjectiveType(type)

    def run(self, reaction, coefficient):
        """ Add a reaction to the objective

        Args:
            reaction (:obj:`Reaction`): reaction which belongs to a model
            coefficient (:obj:`float`): objective coefficient

        Returns:
            :obj:`FluxObjective`: flux objective, or :obj:`None` if `coefficient` is zero
        """
        if not coefficient:
            return None
        return self.get_or_create_objective(reaction.model).add_flux_objective(reaction, coefficient)

    def get_or_create_objective(self, model):
        if model.objective is None:
            model.objective = Objective(self.id, type=self.type, active=True)
            model.objective.model = model
        return model.objective


class ReactionMapper(Mapper):
    """ Create a reaction for each reaction of a JSON model

    Reactions are added to the model as they are mapped because their participants, gene
    products, groups and objective are looked up in and added to the model.

    Attributes:
        prefix (:obj:`str`): reaction prefix
        prefixes (:obj:`tuple` of :obj:`str`): recognized entity prefixes
        flux_bounds (:obj:`FluxBoundBuilder`): builder of flux bounds
        stoichiometry (:obj:`StoichiometrySplitter`): builder of reactants and products
        gpr_builder (:obj:`callable`): function which sets the gene product association of a reaction
            from its reaction and gene-reaction rule and raises :obj:`ValueError` for invalid rules
        subsystems (:obj:`SubsystemGrouper`): builder of subsystem groups
        objective (:obj:`ObjectiveAssembler`): builder of the objective
    """

    def __init__(self, diagnostics=None, normalizer=None, annotations=None,
                 prefix='R', metabolite_prefix='M', gene_product_prefix='G', is_exempt=None,
                 prefixes=CanonicalId.PREFIXES, flux_bounds=None, gpr_builder=None, objective=None,
                 subsystems=None):
        super(ReactionMapper, self).__init__(diagnostics=diagnostics, normalizer=normalizer,
                                             annotations=annotations)
        self.prefix = prefix
        self.prefixes = prefixes
        self.flux_bounds = flux_bounds or FluxBoundBuilder(diagnostics=self.diagnostics)
        self.stoichiometry = StoichiometrySplitter(diagnostics=self.diagnostics, normalizer=self.normalizer,
                                                   prefix=metabolite_prefix, is_exempt=is_exempt,
                                                   prefixes=prefixes)
        self.gpr_builder = gpr_builder or GprParser(diagnostics=self.diagnostics, normalizer=self.normalizer,
                                                    prefix=gene_product_prefix, prefixes=prefixes)
        self.subsystems = subsystems or SubsystemGrouper()
        self.objective = objective or ObjectiveAssembler()

    def run(self, records, model):
        """ Map reactions and add them to a model

        Args:
            records (:obj:`list` of :obj:`ReactionRecord`): reactions
            model (:obj:`Model`): model

        Returns:
            :obj:`list` of :obj:`Reaction`: reactions
        """
        self.diagnostics.info('NUM_REACTIONS', count=len(records))
        reactions = []
        for i_record, record in enumerate(records):
            reaction = self.map(record, model, index=i_record)
            if reaction is not None:
                reactions.append(reaction)
        return reactions

    def map(self, record, model, index=None):
        """ Map a reaction and add it to a model

        Args:
            record (:obj:`ReactionRecord`): reaction
            model (:obj:`Model`): model
            index (:obj:`int`, optional): position of the reaction in the JSON model

        Returns:
            :obj:`Reaction`: reaction, or :obj:`None` if the reaction has no id or its id is already used
        """
        if not record.id:
            self.diagnostics.warning('EMPTY_ID', entity='reaction', index='?' if index is None else index)
            return None

        id = gen_canonical_id(self.normalizer, record.id, self.prefix, prefixes=self.prefixes)
        if model.reactions.has_id(id):
            self.diagnostics.warning('DUPLICATE_ID', entity='reaction', id=id)
            return None

        if model.parameters.has_id(id):
            self.diagnostics.warning('ID_CLASH', id=id, entity='reaction', other='flux bound parameter')

        reaction = model.add_reaction(Reaction(id, name=record.name or record.id))
        self.annotations.apply(record, reaction)

        self.flux_bounds.run(reaction, record.lower_bound, record.upper_bound)
        self.stoichiometry.run(reaction, record.metabolites)
        if record.gene_reaction_rule:
            try:
                self.gpr_builder(reaction, record.gene_reaction_rule)
            except ValueError as error:
                reaction.gene_product_association = None
                self.diagnostics.warning('INVALID_GPR', reaction=id, error=str(error))
        self.subsystems.run(reaction, record.subsystem)
        self.objective.run(reaction, record.objective_coefficient)

        return reaction
