""" Gene-reaction rules

A gene-reaction rule such as ``b0001 and (b0002 or b0003)`` is parsed into a tree of
:obj:`And`, :obj:`Or` and :obj:`GeneProductRef` nodes which references the gene products of
the model. Gene products which the rule references, but which the model does not define, are
created.

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.core import GeneProduct
from gem_json.diagnostics import Diagnostics
from gem_json.ids import CanonicalId, IdNormalizer, gen_canonical_id
from sympy import Symbol
from sympy.logic import boolalg
from sympy.parsing.sympy_parser import parse_expr
from tokenize import TokenError


class GprSyntaxError(ValueError):
    """ Gene-reaction rule could not be parsed """
    pass


class Association(object):
    """ Node of a gene product association """

    def get_gene_products(self):
        """ Get the gene products referenced by the association

        Returns:
            :obj:`list` of :obj:`GeneProduct`: gene products, in order of first reference
        """
        gene_products = []
        self._collect_gene_products(gene_products)
        return gene_products

    def _collect_gene_products(self, gene_products):
        pass  # pragma: no cover


class GeneProductRef(Association):
    """ Reference to a gene product

    Attributes:
        gene_product (:obj:`GeneProduct`): gene product
    """

    def __init__(self, gene_product):
        self.gene_product = gene_product

    def _collect_gene_products(self, gene_products):
        if self.gene_product not in gene_products:
            gene_products.append(self.gene_product)

    def __str__(self):
        return self.gene_product.id


class Operator(Association):
    """ Boolean combination of associations

    Attributes:
        children (:obj:`list` of :obj:`Association`): operands
    """
    SYMBOL = None

    def __init__(self, children=None):
        self.children = list(children or [])

    def _collect_gene_products(self, gene_products):
        for child in self.children:
            child._collect_gene_products(gene_products)

    def __str__(self):
        operands = []
        for child in self.children:
            if isinstance(child, Operator):
                operands.append('(' + str(child) + ')')
            else:
                operands.append(str(child))
        return ' {} '.format(self.SYMBOL).join(operands)


class And(Operator):
    """ All of the operands are required """
    SYMBOL = 'and'


class Or(Operator):
    """ Any of the operands is sufficient """
    SYMBOL = 'or'


class GprParser(object):
    """ Parse gene-reaction rules into associations of gene products

    The operators of a rule are translated into sympy's `&` and `|` and the rule is parsed with
    :obj:`sympy.parsing.sympy_parser.parse_expr`. As a result, `or` binds less tightly than `and`,
    nested operators of the same kind are flattened and repeated operands are merged. The operands
    of each operator are ordered by their first appearance in the rule.

    Attributes:
        diagnostics (:obj:`Diagnostics`): sink for undefined gene products
        normalizer (:obj:`IdNormalizer`): normalizer of gene identifiers
        prefix (:obj:`str`): entity prefix of gene products
        prefixes (:obj:`tuple` of :obj:`str`): recognized entity prefixes
    """

    OPERATORS = {
        'and': '&',
        'or': '|',
        '(': '(',
        ')': ')',
    }
    # :obj:`dict` of :obj:`str`: :obj:`str`: sympy equivalents of the lower case operators of rules

    def __init__(self, diagnostics=None, normalizer=None, prefix='G', prefixes=CanonicalId.PREFIXES):
        """
        Args:
            diagnostics (:obj:`Diagnostics`, optional): sink for undefined gene products
            normalizer (:obj:`IdNormalizer`, optional): normalizer of gene identifiers
            prefix (:obj:`str`, optional): entity prefix of gene products
            prefixes (:obj:`tuple` of :obj:`str`, optional): recognized entity prefixes
        """
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.normalizer = normalizer or IdNormalizer(self.diagnostics)
        self.prefix = prefix
        self.prefixes = prefixes

    def run(self, reaction, rule):
        """ Set the gene product association of a reaction from a gene-reaction rule

        Args:
            reaction (:obj:`Reaction`): reaction which belongs to a model
            rule (:obj:`str`): gene-reaction rule

        Returns:
            :obj:`Association`: association, or :obj:`None` if the rule has no genes

        Raises:
            :obj:`GprSyntaxError`: if the rule cannot be parsed
        """
        tokens = rule.replace('(', ' ( ').replace(')', ' ) ').split()
        if not tokens:
            return None

        # canonical id of each gene -> first identifier of the gene in the rule
        labels = {}
        expr_tokens = []
        for token in tokens:
            operator = self.OPERATORS.get(token.lower())
            if operator is not None:
                expr_tokens.append(operator)
            else:
                id = gen_canonical_id(self.normalizer, token, self.prefix, prefixes=self.prefixes)
                labels.setdefault(id, token)
                expr_tokens.append(id)

        local_dict = {id: Symbol(id) for id in labels}
        try:
            expr = parse_expr(' '.join(expr_tokens), local_dict=local_dict)
        except (SyntaxError, TokenError, TypeError) as error:
            raise GprSyntaxError("'{}' is not a valid gene-reaction rule: {}".format(rule, error)) from error

        positions = {id: i_id for i_id, id in enumerate(labels)}
        association = self.convert(expr, positions, rule)

        for ref in self.get_refs(association):
            ref.gene_product = self.get_or_create_gene_product(ref.gene_product, labels[ref.gene_product],
                                                               reaction)

        reaction.gene_product_association = association
        return association

    __call__ = run

    @classmethod
    def convert(cls, expr, positions, rule):
        """ Convert a parsed rule into an association whose references hold the ids of gene products

        Args:
            expr (:obj:`sympy.Basic`): parsed rule
            positions (:obj:`dict` of :obj:`str`: :obj:`int`): order of the first appearance of each gene
            rule (:obj:`str`): gene-reaction rule

        Returns:
            :obj:`Association`: association

        Raises:
            :obj:`GprSyntaxError`: if the rule is not a boolean combination of genes
        """
        if isinstance(expr, Symbol):
            return GeneProductRef(expr.name)

        if isinstance(expr, boolalg.And):
            operator_cls = And
        elif isinstance(expr, boolalg.Or):
            operator_cls = Or
        else:
            raise GprSyntaxError("'{}' is not a boolean combination of genes".format(rule))

        children = [cls.convert(arg, positions, rule) for arg in expr.args]
        children.sort(key=lambda child: min(positions[ref.gene_product] for ref in cls.get_refs(child)))
        return operator_cls(children)

    @staticmethod
    def get_refs(association):
        """ Get the references to gene products of an association

        Args:
            association (:obj:`Association`): association

        Returns:
            :obj:`list` of :obj:`GeneProductRef`: references
        """
        if isinstance(association, GeneProductRef):
            return [association]
        refs = []
        for child in association.children:
            refs.extend(GprParser.get_refs(child))
        return refs

    def get_or_create_gene_product(self, id, label, reaction):
        """ Get the gene product of a gene referenced by a rule, creating it if the model doesn't define it

        Args:
            id (:obj:`str`): canonical identifier of the gene product
            label (:obj:`str`): identifier of the gene in the rule
            reaction (:obj:`Reaction`): reaction

        Returns:
            :obj:`GeneProduct`: gene product
        """
        model = reaction.model
        gene_product = model.gene_products.get_one(id=id)
        if gene_product is None:
            gene_product = model.add_gene_product(GeneProduct(id, label=label, name=label))
            self.diagnostics.info('GENE_PRODUCT_UNDEFINED', gene_product=id, reaction=reaction.id)
        return gene_product
