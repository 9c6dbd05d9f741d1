""" Data model to represent genome-scale metabolic models decoded from JSON.

This module defines classes that represent the schema of a constraint-based model:

* :obj:`Model`
* :obj:`UnitDefinition`
* :obj:`Compartment`
* :obj:`Species`
* :obj:`GeneProduct`
* :obj:`Parameter`
* :obj:`Reaction`
* :obj:`SpeciesReference`
* :obj:`Group`
* :obj:`Objective`
* :obj:`FluxObjective`

A model owns an ordered list of each of these classes, interlinked by object references.
For example, a :obj:`Reaction` references the :obj:`Parameter` instances which hold its
flux bounds and the :obj:`SpeciesReference` instances which hold its participants.

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from enum import Enum
import math
import pint
import re


unit_registry = pint.UnitRegistry()
unit_registry.define('gram_dry_weight = gram = gDW')

FLUX_UNITS_ID = 'mmol_per_gDW_per_hr'
# :obj:`str`: id of the unit definition of fluxes and flux bounds

CHEMICAL_FORMULA_PATTERN = re.compile(r'^([A-Z][a-z]?[0-9]*)*$')
# :obj:`re.Pattern`: element symbols, each followed by an optional count


class GemJsonWarning(UserWarning):
    """ Warning raised while mapping or exporting a model """
    pass


class GroupKind(str, Enum):
    """ Kind of a group """
    classification = 'classification'
    partonomy = 'partonomy'
    collection = 'collection'


class ObjectiveType(str, Enum):
    """ Sense of an objective """
    maximize = 'maximize'
    minimize = 'minimize'


class EntityList(list):
    """ List of model entities which can be looked up by the values of their attributes

    Entities are indexed by their `id` so that lookups by id do not scan the list.
    """

    def __init__(self, *args):
        super(EntityList, self).__init__(*args)
        self._index = {}
        for obj in self:
            self._add_to_index(obj)

    def append(self, obj):
        super(EntityList, self).append(obj)
        self._add_to_index(obj)

    def extend(self, objs):
        for obj in objs:
            self.append(obj)

    def _add_to_index(self, obj):
        id = getattr(obj, 'id', None)
        if id is not None and id not in self._index:
            self._index[id] = obj

    def has_id(self, id):
        """ Determine if the list contains an entity with id `id`

        Args:
            id (:obj:`str`): id

        Returns:
            :obj:`bool`: :obj:`True` if an entity has id `id`
        """
        return id in self._index

    def get(self, **kwargs):
        """ Get the entities whose attributes have the values in `kwargs`

        Args:
            kwargs (:obj:`dict`): dictionary of attribute names and values

        Returns:
            :obj:`list`: matching entities
        """
        if list(kwargs.keys()) == ['id']:
            obj = self._index.get(kwargs['id'])
            return [obj] if obj is not None else []

        return [obj for obj in self
                if all(getattr(obj, attr, None) == value for attr, value in kwargs.items())]

    def get_one(self, **kwargs):
        """ Get the entity whose attributes have the values in `kwargs`

        Args:
            kwargs (:obj:`dict`): dictionary of attribute names and values

        Returns:
            :obj:`object`: matching entity or :obj:`None` if no entity matches

        Raises:
            :obj:`ValueError`: if multiple entities match
        """
        objs = self.get(**kwargs)
        if len(objs) > 1:
            raise ValueError('Multiple entities match the attribute values: {}'.format(
                ', '.join('{}={}'.format(attr, value) for attr, value in sorted(kwargs.items()))))
        if objs:
            return objs[0]
        return None


class BaseUnit(object):
    """ Unit of an SBML unit definition: `(multiplier * 10^scale * kind)^exponent`

    Attributes:
        kind (:obj:`str`): SBML unit kind (e.g. `mole`, `gram`, `second`)
        exponent (:obj:`float`): exponent
        scale (:obj:`int`): decimal scale
        multiplier (:obj:`float`): multiplier
    """

    def __init__(self, kind, exponent=1., scale=0, multiplier=1.):
        self.kind = kind
        self.exponent = exponent
        self.scale = scale
        self.multiplier = multiplier

    def __eq__(self, other):
        return isinstance(other, BaseUnit) \
            and (self.kind, self.exponent, self.scale, self.multiplier) == \
            (other.kind, other.exponent, other.scale, other.multiplier)

    def __repr__(self):
        return 'BaseUnit({!r}, exponent={}, scale={}, multiplier={})'.format(
            self.kind, self.exponent, self.scale, self.multiplier)


class UnitDefinition(object):
    """ Unit definition

    Attributes:
        id (:obj:`str`): unique identifier
        name (:obj:`str`): name
        units (:obj:`list` of :obj:`BaseUnit`): units whose product is the defined unit
    """

    def __init__(self, id, name=None, units=None):
        self.id = id
        self.name = name
        self.units = list(units or [])

    def to_pint(self):
        """ Get the value of this unit definition as a `pint` quantity

        Returns:
            :obj:`pint.Quantity`: quantity equal to one of this unit
        """
        quantity = unit_registry.Quantity(1.)
        for unit in self.units:
            factor = unit.multiplier * pow(10., unit.scale) * unit_registry.Quantity(1., unit.kind)
            quantity = quantity * factor ** unit.exponent
        return quantity


def gen_flux_unit_definition():
    """ Generate the definition of the units of fluxes, mmol per gram dry weight per hour

    Returns:
        :obj:`UnitDefinition`: flux units
    """
    return UnitDefinition(FLUX_UNITS_ID, units=[
        BaseUnit('mole', exponent=1., scale=-3, multiplier=1.),
        BaseUnit('gram', exponent=-1., scale=0, multiplier=1.),
        BaseUnit('second', exponent=-1., scale=0, multiplier=3600.),
    ])


class Model(object):
    """ Model

    Attributes:
        id (:obj:`str`): unique identifier
        name (:obj:`str`): name
        version (:obj:`str`): version of the model
        annotation (:obj:`object`): opaque annotation
        notes (:obj:`object`): opaque notes
        unit_definitions (:obj:`EntityList` of :obj:`UnitDefinition`): unit definitions
        compartments (:obj:`EntityList` of :obj:`Compartment`): compartments
        species (:obj:`EntityList` of :obj:`Species`): species
        gene_products (:obj:`EntityList` of :obj:`GeneProduct`): gene products
        parameters (:obj:`EntityList` of :obj:`Parameter`): parameters
        reactions (:obj:`EntityList` of :obj:`Reaction`): reactions
        groups (:obj:`EntityList` of :obj:`Group`): groups
        objective (:obj:`Objective`): objective; :obj:`None` until the first flux objective is added
    """

    def __init__(self, id, name=None, version=None):
        if not id:
            raise ValueError('Model id must be a non-empty string')
        self.id = id
        self.name = name or id
        self.version = version
        self.annotation = None
        self.notes = None
        self.unit_definitions = EntityList([gen_flux_unit_definition()])
        self.compartments = EntityList()
        self.species = EntityList()
        self.gene_products = EntityList()
        self.parameters = EntityList()
        self.reactions = EntityList()
        self.groups = EntityList()
        self.objective = None

    def _add(self, entities, obj):
        """ Add an entity to one of the model's lists, unless its id is already used

        Args:
            entities (:obj:`EntityList`): list of entities
            obj (:obj:`object`): entity

        Returns:
            :obj:`object`: `obj`, or the entity which already uses the id of `obj`
        """
        existing = entities.get_one(id=obj.id)
        if existing is not None:
            return existing
        obj.model = self
        entities.append(obj)
        return obj

    def add_compartment(self, compartment):
        """ Add a compartment

        Args:
            compartment (:obj:`Compartment`): compartment

        Returns:
            :obj:`Compartment`: added compartment or the compartment which already has its id
        """
        return self._add(self.compartments, compartment)

    def add_species(self, species):
        """ Add a species

        Args:
            species (:obj:`Species`): species

        Returns:
            :obj:`Species`: added species or the species which already has its id
        """
        return self._add(self.species, species)

    def add_gene_product(self, gene_product):
        """ Add a gene product

        Args:
            gene_product (:obj:`GeneProduct`): gene product

        Returns:
            :obj:`GeneProduct`: added gene product or the gene product which already has its id
        """
        return self._add(self.gene_products, gene_product)

    def add_parameter(self, parameter):
        """ Add a parameter

        Args:
            parameter (:obj:`Parameter`): parameter

        Returns:
            :obj:`Parameter`: added parameter or the parameter which already has its id
        """
        return self._add(self.parameters, parameter)

    def add_reaction(self, reaction):
        """ Add a reaction

        Args:
            reaction (:obj:`Reaction`): reaction

        Returns:
            :obj:`Reaction`: added reaction or the reaction which already has its id
        """
        return self._add(self.reactions, reaction)

    def add_group(self, group):
        """ Add a group; groups are not required to have ids

        Args:
            group (:obj:`Group`): group

        Returns:
            :obj:`Group`: added group
        """
        if group.id is not None:
            return self._add(self.groups, group)
        group.model = self
        self.groups.append(group)
        return group

    def get_group_by_name(self, name):
        """ Get the first group named `name`

        Args:
            name (:obj:`str`): name

        Returns:
            :obj:`Group`: group or :obj:`None` if no group is named `name`
        """
        for group in self.groups:
            if group.name == name:
                return group
        return None


class Compartment(object):
    """ Compartment

    Attributes:
        id (:obj:`str`): unique identifier
        name (:obj:`str`): name
        model (:obj:`Model`): model
    """

    def __init__(self, id, name=None):
        self.id = id
        self.name = name
        self.model = None


class Species(object):
    """ Species (metabolite)

    Attributes:
        id (:obj:`str`): unique identifier
        name (:obj:`str`): name
        compartment (:obj:`str`): id of the compartment; not checked against the compartments of the model
        formula (:obj:`str`): chemical formula
        charge (:obj:`int` or :obj:`float`): charge
        annotation (:obj:`object`): opaque annotation
        notes (:obj:`object`): opaque notes
        model (:obj:`Model`): model
    """

    def __init__(self, id, name=None, compartment=None, formula=None, charge=None):
        self.id = id
        self.name = name
        self.compartment = compartment
        self._formula = None
        self.formula = formula
        self.charge = charge
        self.annotation = None
        self.notes = None
        self.model = None

    @property
    def formula(self):
        return self._formula

    @formula.setter
    def formula(self, value):
        """ Set the chemical formula

        Args:
            value (:obj:`str`): chemical formula

        Raises:
            :obj:`ValueError`: if `value` is not a chemical formula
        """
        if value is not None and not CHEMICAL_FORMULA_PATTERN.match(value):
            raise ValueError("'{}' is not a valid chemical formula".format(value))
        self._formula = value


class GeneProduct(object):
    """ Gene product

    Attributes:
        id (:obj:`str`): unique identifier
        label (:obj:`str`): original identifier of the gene
        name (:obj:`str`): name
        annotation (:obj:`object`): opaque annotation
        notes (:obj:`object`): opaque notes
        model (:obj:`Model`): model
    """

    def __init__(self, id, label=None, name=None):
        self.id = id
        self.label = label
        self.name = name
        self.annotation = None
        self.notes = None
        self.model = None


class Parameter(object):
    """ Parameter

    Attributes:
        id (:obj:`str`): unique identifier
        name (:obj:`str`): name
        value (:obj:`float`): value
        constant (:obj:`bool`): whether the value is constant
        units (:obj:`str`): id of the unit definition of the value
        model (:obj:`Model`): model
    """

    def __init__(self, id, name=None, value=None, constant=True, units=None):
        self.id = id
        self.name = name
        self.value = value
        self.constant = constant
        self.units = units
        self.model = None


class SpeciesReference(object):
    """ A tuple of a species and its stoichiometry in a reaction

    Attributes:
        species (:obj:`Species`): species
        stoichiometry (:obj:`float`): positive stoichiometry
    """

    def __init__(self, species, stoichiometry):
        self.species = species
        self.stoichiometry = stoichiometry

    def __repr__(self):
        return 'SpeciesReference({!r}, {})'.format(self.species.id, self.stoichiometry)


class Reaction(object):
    """ Reaction

    Attributes:
        id (:obj:`str`): unique identifier
        name (:obj:`str`): name
        reversible (:obj:`bool`): indicates if the reaction is reversible
        lower_bound (:obj:`Parameter`): lower flux bound
        upper_bound (:obj:`Parameter`): upper flux bound
        reactants (:obj:`list` of :obj:`SpeciesReference`): reactants
        products (:obj:`list` of :obj:`SpeciesReference`): products
        gene_product_association (:obj:`gem_json.gpr.Association`): association of gene products
            which catalyze the reaction
        subsystem (:obj:`Group`): group of the subsystem of the reaction
        flux_objective (:obj:`FluxObjective`): contribution of the reaction to the objective
        annotation (:obj:`object`): opaque annotation
        notes (:obj:`object`): opaque notes
        model (:obj:`Model`): model
    """

    def __init__(self, id, name=None, reversible=False):
        self.id = id
        self.name = name
        self.reversible = reversible
        self.lower_bound = None
        self.upper_bound = None
        self.reactants = []
        self.products = []
        self.gene_product_association = None
        self.subsystem = None
        self.flux_objective = None
        self.annotation = None
        self.notes = None
        self.model = None

    def add_reactant(self, species, stoichiometry):
        """ Add a reactant

        Args:
            species (:obj:`Species`): species
            stoichiometry (:obj:`float`): positive stoichiometry

        Returns:
            :obj:`SpeciesReference`: reactant
        """
        reactant = SpeciesReference(species, stoichiometry)
        self.reactants.append(reactant)
        return reactant

    def add_product(self, species, stoichiometry):
        """ Add a product

        Args:
            species (:obj:`Species`): species
            stoichiometry (:obj:`float`): positive stoichiometry

        Returns:
            :obj:`SpeciesReference`: product
        """
        product = SpeciesReference(species, stoichiometry)
        self.products.append(product)
        return product


class Group(object):
    """ Group of model entities, such as the reactions of a subsystem

    Attributes:
        id (:obj:`str`): identifier; optional
        name (:obj:`str`): name
        kind (:obj:`GroupKind`): kind
        members (:obj:`list` of :obj:`Reaction`): members
        model (:obj:`Model`): model
    """

    def __init__(self, name=None, kind=GroupKind.partonomy, id=None):
        self.id = id
        self.name = name
        self.kind = kind
        self.members = []
        self.model = None

    def add_member(self, member):
        """ Add a member

        Args:
            member (:obj:`Reaction`): member
        """
        self.members.append(member)


class Objective(object):
    """ Objective

    Attributes:
        id (:obj:`str`): unique identifier
        type (:obj:`ObjectiveType`): sense
        active (:obj:`bool`): whether the objective is the active objective of the model
        flux_objectives (:obj:`EntityList` of :obj:`FluxObjective`): flux objectives
        model (:obj:`Model`): model
    """

    def __init__(self, id, type=ObjectiveType.maximize, active=True):
        self.id = id
        self.type = type
        self.active = active
        self.flux_objectives = EntityList()
        self.model = None

    def add_flux_objective(self, reaction, coefficient, id=None):
        """ Add the flux of a reaction to the objective

        Args:
            reaction (:obj:`Reaction`): reaction
            coefficient (:obj:`float`): coefficient
            id (:obj:`str`, optional): id; defaults to `fo_` followed by the id of the reaction

        Returns:
            :obj:`FluxObjective`: flux objective
        """
        flux_objective = FluxObjective(id or 'fo_' + reaction.id, coefficient, reaction)
        flux_objective.objective = self
        reaction.flux_objective = flux_objective
        self.flux_objectives.append(flux_objective)
        return flux_objective


class FluxObjective(object):
    """ Contribution of the flux of a reaction to an objective

    Attributes:
        id (:obj:`str`): unique identifier
        coefficient (:obj:`float`): coefficient
        reaction (:obj:`Reaction`): reaction
        objective (:obj:`Objective`): objective
    """

    def __init__(self, id, coefficient, reaction):
        self.id = id
        self.coefficient = coefficient
        self.reaction = reaction
        self.objective = None


def is_negative(value):
    """ Determine if a number is negative, counting negative zero as negative

    Args:
        value (:obj:`float`): number

    Returns:
        :obj:`bool`: :obj:`True` if `value` is negative or negative zero
    """
    if math.isnan(value):
        return False
    return math.copysign(1., value) < 0
