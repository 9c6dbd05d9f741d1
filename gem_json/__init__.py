from ._version import __version__
# :obj:`str`: version

# API
from .core import (GroupKind, ObjectiveType,
                   Model, UnitDefinition, BaseUnit,
                   Compartment, Species, GeneProduct, Parameter,
                   Reaction, SpeciesReference, Group, Objective, FluxObjective,
                   EntityList, GemJsonWarning,
                   unit_registry)
from .diagnostics import Diagnostic, DiagnosticLevel, Diagnostics
from .ids import IdNormalizer, CanonicalId, PrefixExemption
from .gpr import GprParser, GprSyntaxError
from .builder import ModelBuilder
from .io import Reader, convert
