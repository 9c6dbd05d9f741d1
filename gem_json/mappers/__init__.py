from .core import AnnotationPassthrough, Mapper
from .compartments import CompartmentMapper
from .metabolites import MetaboliteMapper
from .genes import GeneMapper
from .reactions import (FluxBoundBuilder, StoichiometrySplitter, SubsystemGrouper,
                        ObjectiveAssembler, ReactionMapper)
