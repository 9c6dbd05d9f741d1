""" Typed records of the COBRA/BiGG JSON encoding of a model

The records are decoded from the parsed JSON tree with the defaults that the JSON encoding
implies for absent fields. Structurally invalid input raises :obj:`ValueError` so that
decoding fails before any part of a model is built.

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

import numbers


def decode_str(value, path, default=None):
    """ Decode a string, coercing numbers to strings

    Args:
        value (:obj:`object`): value
        path (:obj:`str`): location of the value, for error messages
        default (:obj:`str`, optional): value if `value` is :obj:`None`

    Returns:
        :obj:`str`: string

    Raises:
        :obj:`ValueError`: if `value` is not a string or number
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return str(value)
    raise ValueError("{} must be a string, not {}".format(path, type(value).__name__))


def decode_float(value, path, default=0.):
    """ Decode a number, coercing numeric strings to floats

    Args:
        value (:obj:`object`): value
        path (:obj:`str`): location of the value, for error messages
        default (:obj:`float`, optional): value if `value` is :obj:`None`

    Returns:
        :obj:`float`: number

    Raises:
        :obj:`ValueError`: if `value` is not a number
    """
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError("{} must be a number, not bool".format(path))
    if isinstance(value, numbers.Number):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            raise ValueError("{} must be a number, not '{}'".format(path, value))
    raise ValueError("{} must be a number, not {}".format(path, type(value).__name__))


def decode_charge(value, path):
    """ Decode a charge; integral charges are returned as integers

    Args:
        value (:obj:`object`): value
        path (:obj:`str`): location of the value, for error messages

    Returns:
        :obj:`int` or :obj:`float`: charge
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    charge = decode_float(value, path, default=0)
    if float(charge).is_integer():
        return int(charge)
    return charge


def get_field(data, *keys):
    """ Get the value of the first of several alternative keys which is present

    Args:
        data (:obj:`dict`): object
        keys (:obj:`list` of :obj:`str`): alternative keys, such as the snake and camel case spellings
            of a field

    Returns:
        :obj:`object`: value or :obj:`None` if no key is present
    """
    for key in keys:
        if key in data:
            return data[key]
    return None


def decode_dict(value, path):
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError("{} must be an object, not {}".format(path, type(value).__name__))
    return value


def decode_list(value, path):
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError("{} must be an array, not {}".format(path, type(value).__name__))
    return value


class MetaboliteRecord(object):
    """ Metabolite of the JSON encoding

    Attributes:
        id (:obj:`str`): identifier; empty if absent
        name (:obj:`str`): name
        compartment (:obj:`str`): id of the compartment
        formula (:obj:`str`): chemical formula
        charge (:obj:`int` or :obj:`float`): charge; 0 if absent
        annotation (:obj:`object`): annotation
        notes (:obj:`object`): notes
    """

    def __init__(self, id='', name=None, compartment=None, formula=None, charge=0,
                 annotation=None, notes=None):
        self.id = id
        self.name = name
        self.compartment = compartment
        self.formula = formula
        self.charge = charge
        self.annotation = annotation
        self.notes = notes

    @classmethod
    def from_dict(cls, data, path='metabolites'):
        data = decode_dict(data, path)
        return cls(id=decode_str(data.get('id'), path + '.id', default=''),
                   name=decode_str(data.get('name'), path + '.name'),
                   compartment=decode_str(data.get('compartment'), path + '.compartment'),
                   formula=decode_str(data.get('formula'), path + '.formula'),
                   charge=decode_charge(data.get('charge'), path + '.charge'),
                   annotation=data.get('annotation'),
                   notes=data.get('notes'))


class GeneRecord(object):
    """ Gene of the JSON encoding

    Attributes:
        id (:obj:`str`): identifier; empty if absent
        name (:obj:`str`): name
        annotation (:obj:`object`): annotation
        notes (:obj:`object`): notes
    """

    def __init__(self, id='', name=None, annotation=None, notes=None):
        self.id = id
        self.name = name
        self.annotation = annotation
        self.notes = notes

    @classmethod
    def from_dict(cls, data, path='genes'):
        data = decode_dict(data, path)
        return cls(id=decode_str(data.get('id'), path + '.id', default=''),
                   name=decode_str(data.get('name'), path + '.name'),
                   annotation=data.get('annotation'),
                   notes=data.get('notes'))


class ReactionRecord(object):
    """ Reaction of the JSON encoding

    Attributes:
        id (:obj:`str`): identifier; empty if absent
        name (:obj:`str`): name
        metabolites (:obj:`dict` of :obj:`str`: :obj:`float`): stoichiometry; negative
            coefficients for reactants and positive coefficients for products
        lower_bound (:obj:`float`): lower flux bound; :obj:`None` if absent
        upper_bound (:obj:`float`): upper flux bound; :obj:`None` if absent
        gene_reaction_rule (:obj:`str`): gene-reaction rule
        subsystem (:obj:`str`): subsystem
        objective_coefficient (:obj:`float`): objective coefficient
        annotation (:obj:`object`): annotation
        notes (:obj:`object`): notes
    """

    def __init__(self, id='', name=None, metabolites=None, lower_bound=None, upper_bound=None,
                 gene_reaction_rule='', subsystem='', objective_coefficient=0., annotation=None, notes=None):
        self.id = id
        self.name = name
        self.metabolites = metabolites or {}
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.gene_reaction_rule = gene_reaction_rule
        self.subsystem = subsystem
        self.objective_coefficient = objective_coefficient
        self.annotation = annotation
        self.notes = notes

    @classmethod
    def from_dict(cls, data, path='reactions'):
        data = decode_dict(data, path)
        metabolites = {}
        for met_id, coefficient in decode_dict(data.get('metabolites'), path + '.metabolites').items():
            metabolites[met_id] = decode_float(coefficient, '{}.metabolites.{}'.format(path, met_id))
        lower_bound = get_field(data, 'lower_bound', 'lowerBound')
        upper_bound = get_field(data, 'upper_bound', 'upperBound')
        gene_reaction_rule = get_field(data, 'gene_reaction_rule', 'geneReactionRule')
        objective_coefficient = get_field(data, 'objective_coefficient', 'objectiveCoefficient')
        return cls(id=decode_str(data.get('id'), path + '.id', default=''),
                   name=decode_str(data.get('name'), path + '.name'),
                   metabolites=metabolites,
                   lower_bound=decode_float(lower_bound, path + '.lower_bound', default=None),
                   upper_bound=decode_float(upper_bound, path + '.upper_bound', default=None),
                   gene_reaction_rule=decode_str(gene_reaction_rule, path + '.gene_reaction_rule', default=''),
                   subsystem=decode_str(data.get('subsystem'), path + '.subsystem', default=''),
                   objective_coefficient=decode_float(objective_coefficient, path + '.objective_coefficient'),
                   annotation=data.get('annotation'),
                   notes=data.get('notes'))


class ModelRecord(object):
    """ Model of the JSON encoding

    Attributes:
        id (:obj:`str`): identifier
        name (:obj:`str`): name
        version (:obj:`str`): version
        compartments (:obj:`dict` of :obj:`str`: :obj:`str`): names of the compartments
        metabolites (:obj:`list` of :obj:`MetaboliteRecord`): metabolites
        genes (:obj:`list` of :obj:`GeneRecord`): genes
        reactions (:obj:`list` of :obj:`ReactionRecord`): reactions
        annotation (:obj:`object`): annotation
        notes (:obj:`object`): notes
    """

    def __init__(self, id, name=None, version=None, compartments=None, metabolites=None,
                 genes=None, reactions=None, annotation=None, notes=None):
        self.id = id
        self.name = name
        self.version = version
        self.compartments = compartments or {}
        self.metabolites = metabolites or []
        self.genes = genes or []
        self.reactions = reactions or []
        self.annotation = annotation
        self.notes = notes

    @classmethod
    def from_dict(cls, data):
        """ Decode a model from a parsed JSON tree

        Args:
            data (:obj:`dict`): parsed JSON tree

        Returns:
            :obj:`ModelRecord`: model

        Raises:
            :obj:`ValueError`: if the tree is not a valid encoding of a model
        """
        if not isinstance(data, dict):
            raise ValueError('Model must be a JSON object, not {}'.format(type(data).__name__))

        id = decode_str(data.get('id'), 'id', default='')
        if not id:
            raise ValueError('Model must have an id')

        compartments = {}
        for comp_id, comp_name in decode_dict(data.get('compartments'), 'compartments').items():
            compartments[comp_id] = decode_str(comp_name, 'compartments.' + comp_id, default='')

        return cls(
            id=id,
            name=decode_str(data.get('name'), 'name'),
            version=decode_str(data.get('version'), 'version'),
            compartments=compartments,
            metabolites=[MetaboliteRecord.from_dict(met, 'metabolites[{}]'.format(i_met))
                         for i_met, met in enumerate(decode_list(data.get('metabolites'), 'metabolites'))],
            genes=[GeneRecord.from_dict(gene, 'genes[{}]'.format(i_gene))
                   for i_gene, gene in enumerate(decode_list(data.get('genes'), 'genes'))],
            reactions=[ReactionRecord.from_dict(rxn, 'reactions[{}]'.format(i_rxn))
                       for i_rxn, rxn in enumerate(decode_list(data.get('reactions'), 'reactions'))],
            annotation=data.get('annotation'),
            notes=data.get('notes'))
