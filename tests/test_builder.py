""" Tests of building models from decoded JSON models

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.builder import ModelBuilder
from gem_json.config import get_config
from gem_json.core import FLUX_UNITS_ID, GemJsonWarning, ObjectiveType
from gem_json.diagnostics import DiagnosticLevel, Diagnostics
from gem_json.records import ModelRecord
import unittest


E_COLI_CORE = {
    "id": "e_coli_core",
    "compartments": {"c": "cytosol"},
    "metabolites": [{"id": "atp_c", "name": "ATP", "compartment": "c", "formula": "C10H12N5O13P3", "charge": -4}],
    "genes": [],
    "reactions": [{"id": "R1", "lowerBound": -10, "upperBound": 1000, "metabolites": {"atp_c": -1},
                   "objectiveCoefficient": 1}],
}


class ModelBuilderTestCase(unittest.TestCase):
    def setUp(self):
        self.diagnostics = Diagnostics()
        self.builder = ModelBuilder(diagnostics=self.diagnostics)

    def build(self, data):
        return self.builder.run(ModelRecord.from_dict(data))

    def test_e_coli_core(self):
        model = self.build(E_COLI_CORE)

        self.assertEqual(model.id, 'e_coli_core')
        self.assertEqual(model.name, 'e_coli_core')
        self.assertEqual([unit_def.id for unit_def in model.unit_definitions], [FLUX_UNITS_ID])

        self.assertEqual([(comp.id, comp.name) for comp in model.compartments], [('c', 'cytosol')])

        self.assertEqual(len(model.species), 1)
        atp = model.species[0]
        self.assertEqual(atp.id, 'M_atp_c')
        self.assertEqual(atp.name, 'ATP')
        self.assertEqual(atp.formula, 'C10H12N5O13P3')
        self.assertEqual(atp.charge, -4)
        self.assertEqual(atp.compartment, 'c')

        self.assertEqual(len(model.gene_products), 0)

        self.assertEqual(len(model.reactions), 1)
        rxn = model.reactions[0]
        self.assertEqual(rxn.id, 'R_R1')
        self.assertEqual(rxn.name, 'R1')
        self.assertTrue(rxn.reversible)
        self.assertEqual(rxn.lower_bound.id, 'R_R1_lb')
        self.assertEqual(rxn.lower_bound.value, -10.)
        self.assertEqual(rxn.upper_bound.id, 'R_R1_ub')
        self.assertEqual(rxn.upper_bound.value, 1000.)
        self.assertEqual([(ref.species, ref.stoichiometry) for ref in rxn.reactants], [(atp, 1.0)])
        self.assertEqual(rxn.products, [])
        self.assertEqual(rxn.subsystem, None)
        self.assertEqual(len(model.groups), 0)

        self.assertEqual(model.objective.id, 'obj')
        self.assertEqual(model.objective.type, ObjectiveType.maximize)
        self.assertTrue(model.objective.active)
        self.assertEqual(len(model.objective.flux_objectives), 1)
        flux_objective = model.objective.flux_objectives[0]
        self.assertEqual(flux_objective.id, 'fo_R_R1')
        self.assertEqual(flux_objective.coefficient, 1.)
        self.assertIs(flux_objective.reaction, rxn)

    def test_diagnostics(self):
        self.build(E_COLI_CORE)
        codes = [event.code for event in self.diagnostics.events if event.level >= DiagnosticLevel.info]
        self.assertEqual(codes, ['JSON_PARSER_STARTED', 'NUM_COMPARTMENTS', 'NUM_METABOLITES', 'NUM_GENES',
                                 'NUM_REACTIONS'])
        self.assertEqual(self.diagnostics.get(code='NUM_METABOLITES')[0].context, {'count': 1})

    def test_model_identity(self):
        model = self.build({'id': 'iJO1366-v2', 'name': 'E. coli iJO1366', 'version': '2',
                            'annotation': {'taxonomy': '511145'}, 'notes': 'note'})
        self.assertEqual(model.id, 'iJO1366_v2')
        self.assertEqual(model.name, 'E. coli iJO1366')
        self.assertEqual(model.version, '2')
        self.assertEqual(model.annotation, {'taxonomy': '511145'})
        self.assertEqual(model.notes, 'note')
        self.assertEqual(model.objective, None)

    def test_species_before_reactions(self):
        """ Participants refer to the species defined by the metabolites rather than to new species """
        data = {
            'id': 'model',
            'metabolites': [{'id': 'a', 'name': 'A', 'compartment': 'c'}],
            'reactions': [{'id': 'R1', 'metabolites': {'a': -1, 'b': 1}}],
        }
        model = self.build(data)
        self.assertEqual([spec.id for spec in model.species], ['M_a', 'M_b'])
        self.assertEqual(model.reactions[0].reactants[0].species.name, 'A')
        self.assertEqual(model.reactions[0].products[0].species.name, None)
        self.assertEqual(len(self.diagnostics.get(code='SPECIES_UNDEFINED')), 1)

    def test_genes_before_reactions(self):
        data = {
            'id': 'model',
            'genes': [{'id': 'b0001', 'name': 'thrL'}],
            'reactions': [{'id': 'R1', 'gene_reaction_rule': 'b0001'}],
        }
        model = self.build(data)
        self.assertEqual(len(model.gene_products), 1)
        self.assertIs(model.reactions[0].gene_product_association.gene_product, model.gene_products[0])
        self.assertEqual(model.gene_products[0].name, 'thrL')

    def test_duplicate_species(self):
        data = {
            'id': 'model',
            'metabolites': [{'id': 'a', 'name': 'first'}, {'id': 'a', 'name': 'second'}],
        }
        with self.assertWarnsRegex(GemJsonWarning, "Skipped metabolite 'M_a'"):
            model = self.build(data)
        self.assertEqual([spec.name for spec in model.species], ['first'])

    def test_reversibility_negative_zero(self):
        model = self.build({'id': 'model', 'reactions': [
            {'id': 'R1', 'lower_bound': -0.0, 'upper_bound': 0.0},
            {'id': 'R2', 'lower_bound': 0.0, 'upper_bound': 0.0},
        ]})
        self.assertEqual([rxn.reversible for rxn in model.reactions], [True, False])

    def test_no_objective(self):
        model = self.build({'id': 'model', 'reactions': [
            {'id': 'R1', 'objective_coefficient': 0},
            {'id': 'R2'},
        ]})
        self.assertEqual(model.objective, None)

    def test_config(self):
        config = get_config(extra={'gem_json': {
            'ids': {'reaction_prefix': 'X', 'prefix_exempt_pattern': '^EX_'},
            'reactions': {'default_lower_bound': -1000., 'default_upper_bound': 1000.},
            'objective': {'id': 'growth', 'type': 'minimize'},
        }})
        builder = ModelBuilder(config=config, diagnostics=Diagnostics())
        model = builder.run(ModelRecord.from_dict({'id': 'model', 'reactions': [
            {'id': 'R1', 'metabolites': {'EX_a': -1, 'biomass': 1}, 'objective_coefficient': 1},
        ]}))
        rxn = model.reactions[0]
        self.assertEqual(rxn.id, 'X_R1')
        self.assertTrue(rxn.reversible)
        self.assertEqual(rxn.lower_bound.value, -1000.)
        self.assertEqual(rxn.upper_bound.value, 1000.)
        self.assertEqual([ref.species.id for ref in rxn.reactants], ['EX_a'])
        self.assertEqual([ref.species.id for ref in rxn.products], ['M_biomass'])
        self.assertEqual(model.objective.id, 'growth')
        self.assertEqual(model.objective.type, ObjectiveType.minimize)

    def test_warn_level_from_config(self):
        config = get_config(extra={'gem_json': {'diagnostics': {'warn_level': 'info'}}})
        builder = ModelBuilder(config=config)
        self.assertEqual(builder.diagnostics.warn_level, DiagnosticLevel.info)
        with self.assertWarnsRegex(GemJsonWarning, "Building model 'model' from JSON"):
            builder.run(ModelRecord.from_dict({'id': 'model'}))

    def test_record_level_from_config(self):
        config = get_config(extra={'gem_json': {'diagnostics': {'record_level': 'info'}}})
        builder = ModelBuilder(config=config)
        builder.run(ModelRecord.from_dict({'id': 'model-1', 'genes': [{'id': 'b-1'}]}))
        self.assertEqual(builder.diagnostics.get(code='CHANGED_ID'), [])
        self.assertEqual(len(builder.diagnostics.get(code='NUM_GENES')), 1)
