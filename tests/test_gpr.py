""" Tests of gene-reaction rules

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.core import GeneProduct, Model, Reaction
from gem_json.diagnostics import DiagnosticLevel, Diagnostics
from gem_json.gpr import And, GeneProductRef, GprParser, GprSyntaxError, Or
import unittest


class GprParserTestCase(unittest.TestCase):
    def setUp(self):
        self.diagnostics = Diagnostics()
        self.model = Model('model')
        self.model.add_gene_product(GeneProduct('G_b0001', label='b0001'))
        self.model.add_gene_product(GeneProduct('G_b0002', label='b0002'))
        self.reaction = self.model.add_reaction(Reaction('R_R1'))
        self.parser = GprParser(diagnostics=self.diagnostics)

    def test_single_gene(self):
        association = self.parser.run(self.reaction, 'b0001')
        self.assertIsInstance(association, GeneProductRef)
        self.assertEqual(association.gene_product, self.model.gene_products[0])
        self.assertEqual(self.reaction.gene_product_association, association)
        self.assertEqual(self.diagnostics.get(code='GENE_PRODUCT_UNDEFINED'), [])

    def test_prefixed_gene(self):
        association = self.parser(self.reaction, 'G_b0002')
        self.assertEqual(association.gene_product, self.model.gene_products[1])

    def test_and_or(self):
        association = self.parser.run(self.reaction, 'b0001 and b0002 or b0003')
        self.assertIsInstance(association, Or)
        self.assertEqual(len(association.children), 2)
        self.assertIsInstance(association.children[0], And)
        self.assertIsInstance(association.children[1], GeneProductRef)
        self.assertEqual(str(association), '(G_b0001 and G_b0002) or G_b0003')

    def test_parentheses(self):
        association = self.parser.run(self.reaction, 'b0001 and (b0002 or b0003)')
        self.assertIsInstance(association, And)
        self.assertEqual(str(association), 'G_b0001 and (G_b0002 or G_b0003)')
        self.assertEqual([gene_product.id for gene_product in association.get_gene_products()],
                         ['G_b0001', 'G_b0002', 'G_b0003'])

    def test_flatten(self):
        association = self.parser.run(self.reaction, '(b0001 or b0002) or (b0003 or b0001)')
        self.assertIsInstance(association, Or)
        self.assertEqual(str(association), 'G_b0001 or G_b0002 or G_b0003')
        self.assertEqual(len(association.get_gene_products()), 3)

        association = self.parser.run(self.reaction, 'b0003 AND (b0002 Or b0001)')
        self.assertEqual(str(association), 'G_b0003 and (G_b0002 or G_b0001)')

        association = self.parser.run(self.reaction, '((b0001))')
        self.assertIsInstance(association, GeneProductRef)

    def test_undefined_gene(self):
        self.parser.run(self.reaction, 'b0001 or s0001')
        gene_product = self.model.gene_products.get_one(id='G_s0001')
        self.assertEqual(gene_product.label, 's0001')
        self.assertEqual(gene_product.name, 's0001')
        self.assertEqual(gene_product.model, self.model)

        events = self.diagnostics.get(code='GENE_PRODUCT_UNDEFINED')
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0].level, DiagnosticLevel.info)
        self.assertEqual(events[0].context, {'gene_product': 'G_s0001', 'reaction': 'R_R1'})

        rxn_2 = self.model.add_reaction(Reaction('R_R2'))
        association = self.parser.run(rxn_2, 's0001')
        self.assertEqual(association.gene_product, gene_product)
        self.assertEqual(len(self.diagnostics.get(code='GENE_PRODUCT_UNDEFINED')), 1)

    def test_normalized_gene(self):
        self.parser.run(self.reaction, 'Q0045-1')
        self.assertTrue(self.model.gene_products.has_id('G_Q0045_1'))

    def test_empty(self):
        self.assertEqual(self.parser.run(self.reaction, ' '), None)
        self.assertEqual(self.reaction.gene_product_association, None)

    def test_syntax_errors(self):
        for rule in ['b0001 and', 'and b0001', '(b0001 or b0002', 'b0001 b0002', 'b0001 )', '()']:
            with self.assertRaises(GprSyntaxError, msg=rule):
                self.parser.run(self.reaction, rule)
        self.assertEqual(self.reaction.gene_product_association, None)
        self.assertEqual(len(self.model.gene_products), 2)

    def test_syntax_error_is_value_error(self):
        with self.assertRaisesRegex(ValueError, r"'\(b0001' is not a valid gene-reaction rule"):
            self.parser.run(self.reaction, '(b0001')

    def test_not_boolean(self):
        with self.assertRaisesRegex(GprSyntaxError, 'not a boolean combination of genes'):
            self.parser.run(self.reaction, '()')

    def test_genes_normalized_to_same_id(self):
        association = self.parser.run(self.reaction, 'b-1 and b_1')
        self.assertIsInstance(association, GeneProductRef)
        self.assertEqual(association.gene_product.id, 'G_b_1')
        self.assertEqual(association.gene_product.label, 'b-1')

        association = self.parser.run(self.reaction, 'b0001 or (b-1 and b_1)')
        self.assertEqual(str(association), 'G_b0001 or G_b_1')
        self.assertEqual(len(self.diagnostics.get(code='GENE_PRODUCT_UNDEFINED')), 1)
