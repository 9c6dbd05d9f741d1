""" Encoding models in SBML and writing SBML-encoded models to XML files

Models are exported to SBML Level 3 with the `fbc` (version 2) and `groups` (version 1)
packages with the following class mapping:

==================  =====================================
gem_json            SBML
==================  =====================================
Model               Model
UnitDefinition      UnitDefinition
Compartment         Compartment
Species             Species (fbc: charge, chemicalFormula)
Parameter           Parameter
GeneProduct         fbc:GeneProduct
Reaction            Reaction (fbc: flux bounds)
SpeciesReference    SpeciesReference
And, Or             fbc:And, fbc:Or
GeneProductRef      fbc:GeneProductRef
Objective           fbc:Objective
FluxObjective       fbc:FluxObjective
Group               groups:Group
==================  =====================================

The versions, annotations and notes of models are not exported. Species which reactions
reference, but which the model does not define, have no compartment. SBML requires
compartments, so documents with such species fail verification.

:Author: Jonathan Karr <karr@mssm.edu>
:Author: Arthur Goldberg <Arthur.Goldberg@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.core import GemJsonWarning
from gem_json.gpr import And, GeneProductRef, Or
from gem_json.sbml.util import LibSbmlInterface
import libsbml
import warnings

PACKAGES = {
    'fbc': 2,
    'groups': 1,
}
# :obj:`dict` of :obj:`str`: :obj:`int`: versions of the SBML packages used to encode models


class SbmlWriter(object):
    """ Write models to SBML-encoded XML files """

    def run(self, model, path, level=3, version=1, verify=False):
        """ Write a model to an SBML-encoded XML file

        Args:
            model (:obj:`gem_json.core.Model`): model
            path (:obj:`str`): path to the XML file
            level (:obj:`int`, optional): SBML level
            version (:obj:`int`, optional): SBML version
            verify (:obj:`bool`, optional): if :obj:`True`, verify that the SBML document is valid

        Raises:
            :obj:`ValueError`: if the model could not be written to a SBML-encoded file
        """
        sbml_doc = SbmlExporter.run(model, level=level, version=version, verify=verify)
        if not LibSbmlInterface.call_libsbml(libsbml.writeSBMLToFile, sbml_doc, path, returns_int=True):
            raise ValueError("Model '{}' could not be written to SBML at '{}'.".format(model.id, path))

    def write_string(self, model, level=3, version=1, verify=False):
        """ Encode a model as an SBML-encoded XML string

        Args:
            model (:obj:`gem_json.core.Model`): model
            level (:obj:`int`, optional): SBML level
            version (:obj:`int`, optional): SBML version
            verify (:obj:`bool`, optional): if :obj:`True`, verify that the SBML document is valid

        Returns:
            :obj:`str`: XML
        """
        sbml_doc = SbmlExporter.run(model, level=level, version=version, verify=verify)
        return LibSbmlInterface.call_libsbml(libsbml.writeSBMLToString, sbml_doc)


class SbmlExporter(object):
    """ Encode a model into SBML """

    @classmethod
    def run(cls, model, level=3, version=1, verify=False):
        """ Encode a model into SBML

        * Create SBML document
        * Create SBML model
        * Encode model objects in SBML and add to SBML model in dependent order

        Args:
            model (:obj:`gem_json.core.Model`): model
            level (:obj:`int`, optional): SBML level
            version (:obj:`int`, optional): SBML version
            verify (:obj:`bool`, optional): if :obj:`True`, verify that the SBML document is valid

        Returns:
            :obj:`libsbml.SBMLDocument`: SBML document with SBML-encoded model

        Raises:
            :obj:`LibSbmlError`: if the model cannot be encoded or, if `verify` is :obj:`True`,
                the SBML document is invalid
        """
        call_libsbml = LibSbmlInterface.call_libsbml

        sbml_doc = LibSbmlInterface.create_doc(level=level, version=version, packages=PACKAGES)
        sbml_model = LibSbmlInterface.init_model(model, sbml_doc, packages=PACKAGES)
        sbml_fbc = call_libsbml(sbml_model.getPlugin, 'fbc')
        sbml_groups = call_libsbml(sbml_model.getPlugin, 'groups')

        for unit_def in model.unit_definitions:
            LibSbmlInterface.create_unit_definition(unit_def, sbml_model)

        for compartment in model.compartments:
            cls.export_compartment(compartment, sbml_model)

        for species in model.species:
            cls.export_species(species, sbml_model)

        for parameter in model.parameters:
            LibSbmlInterface.create_parameter(sbml_model, parameter.id, parameter.value, parameter.units,
                                              name=parameter.name, constant=parameter.constant)

        for gene_product in model.gene_products:
            cls.export_gene_product(gene_product, sbml_fbc)

        for reaction in model.reactions:
            cls.export_reaction(reaction, sbml_model)

        if model.objective is not None:
            cls.export_objective(model.objective, sbml_fbc)

        for group in model.groups:
            cls.export_group(group, sbml_groups)

        if verify:
            no_compartment = [species.id for species in model.species if not species.compartment]
            if no_compartment:
                warnings.warn(("Species {} have no compartment, which SBML requires; "
                               "the document will fail verification").format(', '.join(no_compartment)),
                              GemJsonWarning)
            LibSbmlInterface.verify_doc(sbml_doc, level=level, version=version)

        return sbml_doc

    @staticmethod
    def export_compartment(compartment, sbml_model):
        call_libsbml = LibSbmlInterface.call_libsbml
        sbml = call_libsbml(sbml_model.createCompartment)
        call_libsbml(sbml.setIdAttribute, compartment.id)
        if compartment.name:
            call_libsbml(sbml.setName, compartment.name)
        call_libsbml(sbml.setConstant, True)
        return sbml

    @staticmethod
    def export_species(species, sbml_model):
        """ Add a species to an SBML model; the charge and formula are encoded with the `fbc` package

        Args:
            species (:obj:`gem_json.core.Species`): species
            sbml_model (:obj:`libsbml.Model`): SBML model

        Returns:
            :obj:`libsbml.Species`: SBML species
        """
        call_libsbml = LibSbmlInterface.call_libsbml
        sbml = call_libsbml(sbml_model.createSpecies)
        call_libsbml(sbml.setIdAttribute, species.id)
        if species.name:
            call_libsbml(sbml.setName, species.name)
        if species.compartment:
            call_libsbml(sbml.setCompartment, species.compartment)
        call_libsbml(sbml.setHasOnlySubstanceUnits, False)
        call_libsbml(sbml.setBoundaryCondition, False)
        call_libsbml(sbml.setConstant, False)

        sbml_fbc = call_libsbml(sbml.getPlugin, 'fbc')
        # fbc charges are integers
        if species.charge is not None and float(species.charge).is_integer():
            call_libsbml(sbml_fbc.setCharge, int(species.charge))
        if species.formula:
            call_libsbml(sbml_fbc.setChemicalFormula, species.formula)
        return sbml

    @staticmethod
    def export_gene_product(gene_product, sbml_fbc):
        call_libsbml = LibSbmlInterface.call_libsbml
        sbml = call_libsbml(sbml_fbc.createGeneProduct)
        call_libsbml(sbml.setIdAttribute, gene_product.id)
        call_libsbml(sbml.setLabel, gene_product.label or gene_product.id)
        if gene_product.name:
            call_libsbml(sbml.setName, gene_product.name)
        return sbml

    @classmethod
    def export_reaction(cls, reaction, sbml_model):
        """ Add a reaction, its participants, flux bounds and gene product association to an SBML model

        Args:
            reaction (:obj:`gem_json.core.Reaction`): reaction
            sbml_model (:obj:`libsbml.Model`): SBML model

        Returns:
            :obj:`libsbml.Reaction`: SBML reaction
        """
        call_libsbml = LibSbmlInterface.call_libsbml
        sbml = call_libsbml(sbml_model.createReaction)
        call_libsbml(sbml.setIdAttribute, reaction.id)
        if reaction.name:
            call_libsbml(sbml.setName, reaction.name)
        call_libsbml(sbml.setReversible, reaction.reversible)
        call_libsbml(sbml.setFast, False)

        for participants, create in [(reaction.reactants, sbml.createReactant),
                                     (reaction.products, sbml.createProduct)]:
            for participant in participants:
                sbml_participant = call_libsbml(create)
                call_libsbml(sbml_participant.setSpecies, participant.species.id)
                call_libsbml(sbml_participant.setStoichiometry, participant.stoichiometry)
                call_libsbml(sbml_participant.setConstant, True)

        sbml_fbc = call_libsbml(sbml.getPlugin, 'fbc')
        if reaction.lower_bound is not None:
            call_libsbml(sbml_fbc.setLowerFluxBound, reaction.lower_bound.id)
        if reaction.upper_bound is not None:
            call_libsbml(sbml_fbc.setUpperFluxBound, reaction.upper_bound.id)

        if reaction.gene_product_association is not None:
            sbml_association = call_libsbml(sbml_fbc.createGeneProductAssociation)
            cls.export_association(reaction.gene_product_association, sbml_association)

        return sbml

    @classmethod
    def export_association(cls, association, sbml_parent):
        """ Add a node of a gene product association to its SBML parent

        Args:
            association (:obj:`gem_json.gpr.Association`): node of a gene product association
            sbml_parent (:obj:`libsbml.GeneProductAssociation`, :obj:`libsbml.FbcAnd`, or :obj:`libsbml.FbcOr`):
                SBML parent
        """
        call_libsbml = LibSbmlInterface.call_libsbml
        if isinstance(association, GeneProductRef):
            sbml = call_libsbml(sbml_parent.createGeneProductRef)
            call_libsbml(sbml.setGeneProduct, association.gene_product.id)
        else:
            if isinstance(association, And):
                sbml = call_libsbml(sbml_parent.createAnd)
            elif isinstance(association, Or):
                sbml = call_libsbml(sbml_parent.createOr)
            else:
                raise ValueError('Unsupported association {}'.format(association.__class__.__name__))
            for child in association.children:
                cls.export_association(child, sbml)

    @staticmethod
    def export_objective(objective, sbml_fbc):
        """ Add an objective and its flux objectives to the `fbc` plugin of an SBML model

        Args:
            objective (:obj:`gem_json.core.Objective`): objective
            sbml_fbc (:obj:`libsbml.FbcModelPlugin`): `fbc` plugin of an SBML model

        Returns:
            :obj:`libsbml.Objective`: SBML objective
        """
        call_libsbml = LibSbmlInterface.call_libsbml
        sbml = call_libsbml(sbml_fbc.createObjective)
        call_libsbml(sbml.setIdAttribute, objective.id)
        call_libsbml(sbml.setType, objective.type.value)
        if objective.active:
            call_libsbml(sbml_fbc.setActiveObjectiveId, objective.id)

        for flux_objective in objective.flux_objectives:
            sbml_flux_objective = call_libsbml(sbml.createFluxObjective)
            call_libsbml(sbml_flux_objective.setIdAttribute, flux_objective.id)
            call_libsbml(sbml_flux_objective.setReaction, flux_objective.reaction.id)
            call_libsbml(sbml_flux_objective.setCoefficient, flux_objective.coefficient)
        return sbml

    @staticmethod
    def export_group(group, sbml_groups):
        call_libsbml = LibSbmlInterface.call_libsbml
        sbml = call_libsbml(sbml_groups.createGroup)
        if group.id:
            call_libsbml(sbml.setIdAttribute, group.id)
        if group.name:
            call_libsbml(sbml.setName, group.name)
        call_libsbml(sbml.setKind, group.kind.value)
        for member in group.members:
            sbml_member = call_libsbml(sbml.createMember)
            call_libsbml(sbml_member.setIdRef, member.id)
        return sbml
