""" Tests of the data model

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.core import (FLUX_UNITS_ID, BaseUnit, Compartment, EntityList, GeneProduct, Group,
                           GroupKind, Model, Objective, ObjectiveType, Parameter, Reaction, Species,
                           UnitDefinition, gen_flux_unit_definition, is_negative, unit_registry)
import math
import unittest


class EntityListTestCase(unittest.TestCase):
    def test_get(self):
        objs = EntityList([Compartment('c', name='cytosol'), Compartment('e', name='extracellular')])
        objs.append(Compartment('p', name='cytosol'))

        self.assertTrue(objs.has_id('p'))
        self.assertFalse(objs.has_id('m'))
        self.assertEqual(objs.get(id='e'), [objs[1]])
        self.assertEqual(objs.get(id='m'), [])
        self.assertEqual(objs.get(name='cytosol'), [objs[0], objs[2]])
        self.assertEqual(objs.get_one(id='c'), objs[0])
        self.assertEqual(objs.get_one(id='m'), None)

        with self.assertRaisesRegex(ValueError, 'Multiple entities'):
            objs.get_one(name='cytosol')

    def test_extend(self):
        objs = EntityList()
        objs.extend([Compartment('c'), Compartment('e')])
        self.assertEqual([obj.id for obj in objs], ['c', 'e'])
        self.assertTrue(objs.has_id('e'))


class UnitsTestCase(unittest.TestCase):
    def test_flux_units(self):
        unit_def = gen_flux_unit_definition()
        self.assertEqual(unit_def.id, FLUX_UNITS_ID)
        self.assertEqual(unit_def.units, [
            BaseUnit('mole', exponent=1., scale=-3, multiplier=1.),
            BaseUnit('gram', exponent=-1., scale=0, multiplier=1.),
            BaseUnit('second', exponent=-1., scale=0, multiplier=3600.),
        ])

        quantity = unit_def.to_pint()
        expected = unit_registry.Quantity(1., 'mmol / gDW / hour')
        self.assertAlmostEqual(quantity.to(expected.units).magnitude, 1.)
        self.assertEqual(quantity.dimensionality, expected.dimensionality)

    def test_base_unit_eq(self):
        self.assertEqual(BaseUnit('mole'), BaseUnit('mole', exponent=1., scale=0, multiplier=1.))
        self.assertNotEqual(BaseUnit('mole'), BaseUnit('mole', scale=-3))
        self.assertNotEqual(BaseUnit('mole'), 'mole')

    def test_dimensionless(self):
        self.assertEqual(UnitDefinition('one').to_pint().magnitude, 1.)


class ModelTestCase(unittest.TestCase):
    def test_init(self):
        model = Model('e_coli_core')
        self.assertEqual(model.name, 'e_coli_core')
        self.assertEqual(model.version, None)
        self.assertEqual([unit_def.id for unit_def in model.unit_definitions], [FLUX_UNITS_ID])
        self.assertEqual(model.objective, None)

        model = Model('e_coli_core', name='E. coli core', version='1')
        self.assertEqual(model.name, 'E. coli core')
        self.assertEqual(model.version, '1')

    def test_empty_id(self):
        with self.assertRaisesRegex(ValueError, 'non-empty'):
            Model('')

    def test_add(self):
        model = Model('model')
        spec = model.add_species(Species('M_atp_c'))
        self.assertEqual(spec.model, model)
        self.assertEqual(model.add_species(Species('M_atp_c')), spec)
        self.assertEqual(len(model.species), 1)

        model.add_compartment(Compartment('c'))
        model.add_gene_product(GeneProduct('G_b0001'))
        model.add_parameter(Parameter('R_R1_lb', value=-10.))
        model.add_reaction(Reaction('R_R1'))
        self.assertEqual(len(model.compartments), 1)
        self.assertEqual(len(model.gene_products), 1)
        self.assertEqual(len(model.parameters), 1)
        self.assertEqual(len(model.reactions), 1)

    def test_groups(self):
        model = Model('model')
        group_1 = model.add_group(Group(name='Glycolysis'))
        group_2 = model.add_group(Group(name='Glycolysis'))
        self.assertEqual(len(model.groups), 2)
        self.assertEqual(group_1.model, model)
        self.assertEqual(group_1.kind, GroupKind.partonomy)
        self.assertEqual(model.get_group_by_name('Glycolysis'), group_1)
        self.assertNotEqual(model.get_group_by_name('Glycolysis'), group_2)
        self.assertEqual(model.get_group_by_name('TCA'), None)

        group_3 = model.add_group(Group(name='TCA', id='g_tca'))
        self.assertEqual(model.add_group(Group(name='TCA cycle', id='g_tca')), group_3)
        self.assertEqual(len(model.groups), 3)


class SpeciesTestCase(unittest.TestCase):
    def test_formula(self):
        spec = Species('M_atp_c', formula='C10H12N5O13P3')
        self.assertEqual(spec.formula, 'C10H12N5O13P3')

        spec.formula = None
        self.assertEqual(spec.formula, None)

        spec.formula = ''
        self.assertEqual(spec.formula, '')

    def test_invalid_formula(self):
        with self.assertRaisesRegex(ValueError, 'not a valid chemical formula'):
            Species('M_x', formula='C10H12(N5)')

        spec = Species('M_x')
        with self.assertRaises(ValueError):
            spec.formula = 'c6h12o6'
        self.assertEqual(spec.formula, None)


class ReactionTestCase(unittest.TestCase):
    def test_participants(self):
        rxn = Reaction('R_R1', name='R1')
        atp = Species('M_atp_c')
        adp = Species('M_adp_c')
        reactant = rxn.add_reactant(atp, 1.)
        product = rxn.add_product(adp, 2.)
        self.assertEqual(rxn.reactants, [reactant])
        self.assertEqual(rxn.products, [product])
        self.assertEqual(product.species, adp)
        self.assertEqual(product.stoichiometry, 2.)
        self.assertEqual(repr(reactant), "SpeciesReference('M_atp_c', 1.0)")


class ObjectiveTestCase(unittest.TestCase):
    def test_add_flux_objective(self):
        objective = Objective('obj')
        self.assertEqual(objective.type, ObjectiveType.maximize)
        self.assertTrue(objective.active)

        rxn = Reaction('R_BIOMASS')
        flux_objective = objective.add_flux_objective(rxn, 1.)
        self.assertEqual(flux_objective.id, 'fo_R_BIOMASS')
        self.assertEqual(flux_objective.reaction, rxn)
        self.assertEqual(flux_objective.objective, objective)
        self.assertEqual(rxn.flux_objective, flux_objective)
        self.assertEqual(list(objective.flux_objectives), [flux_objective])

        flux_objective = objective.add_flux_objective(Reaction('R_ATPM'), -0.5, id='fo_atpm')
        self.assertEqual(flux_objective.id, 'fo_atpm')
        self.assertEqual(flux_objective.coefficient, -0.5)


class IsNegativeTestCase(unittest.TestCase):
    def test(self):
        self.assertTrue(is_negative(-10.))
        self.assertTrue(is_negative(-1e-300))
        self.assertTrue(is_negative(-0.))
        self.assertTrue(is_negative(-float('inf')))
        self.assertFalse(is_negative(0.))
        self.assertFalse(is_negative(0))
        self.assertFalse(is_negative(1000))
        self.assertFalse(is_negative(math.nan))
