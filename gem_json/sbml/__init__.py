from .util import LibSbmlError, LibSbmlInterface
from .io import SbmlExporter, SbmlWriter
