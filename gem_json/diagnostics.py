""" Diagnostics emitted while mapping a model

Mappers report conditions such as corrected identifiers, undefined species and invalid
formulae to a :obj:`Diagnostics` sink, which is passed explicitly to each mapper. The sink
logs each event, records it and forwards events at or above its warning level to :obj:`warnings`.

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from enum import Enum
from gem_json.core import GemJsonWarning
import logging
import warnings

logger = logging.getLogger(__name__)


class DiagnosticLevel(int, Enum):
    """ Severity of a diagnostic """
    debug = 10
    info = 20
    warning = 30
    error = 40


MESSAGES = {
    'JSON_PARSER_STARTED': "Building model '{model}' from JSON",
    'NUM_COMPARTMENTS': 'Processing {count} compartment(s)',
    'NUM_METABOLITES': 'Processing {count} metabolite(s)',
    'NUM_GENES': 'Processing {count} gene(s)',
    'NUM_REACTIONS': 'Processing {count} reaction(s)',
    'CHANGED_ID': "Changed identifier '{old}' to '{new}'",
    'EMPTY_ID': 'Skipped {entity} #{index} because it has no identifier',
    'DUPLICATE_ID': "Skipped {entity} '{id}' because its identifier is already used",
    'INVALID_FORMULA': "Invalid formula for metabolite '{id}': {formula}",
    'SPECIES_UNDEFINED': "Species '{species}' of reaction '{reaction}' is not defined; created it",
    'GENE_PRODUCT_UNDEFINED': "Gene product '{gene_product}' of reaction '{reaction}' is not defined; created it",
    'INVALID_GPR': "Invalid gene-reaction rule for reaction '{reaction}': {error}",
    'ID_CLASH': "Identifier '{id}' of {entity} is already the identifier of a {other}",
}
# :obj:`dict` of :obj:`str`: :obj:`str`: templates of the messages of each diagnostic code


class Diagnostic(object):
    """ Diagnostic event

    Attributes:
        level (:obj:`DiagnosticLevel`): severity
        code (:obj:`str`): code
        message (:obj:`str`): human-readable message
        context (:obj:`dict`): values used to format the message
    """

    def __init__(self, level, code, message, context=None):
        self.level = level
        self.code = code
        self.message = message
        self.context = context or {}

    def __str__(self):
        return '{}: {}: {}'.format(self.level.name, self.code, self.message)


class Diagnostics(object):
    """ Sink of diagnostic events

    Every event is logged to the `gem_json.diagnostics` logger at the level of the event.
    Events at or above `record_level` are also kept in :obj:`events`, and events at or above
    `warn_level` are also issued as :obj:`GemJsonWarning`.

    Attributes:
        events (:obj:`list` of :obj:`Diagnostic`): recorded events
        warn_level (:obj:`DiagnosticLevel`): minimum level of the events which are issued as warnings
        record_level (:obj:`DiagnosticLevel`): minimum level of the events which are recorded
        callback (:obj:`callable`): optional function which receives each event
    """

    def __init__(self, warn_level=DiagnosticLevel.warning, record_level=DiagnosticLevel.debug, callback=None):
        """
        Args:
            warn_level (:obj:`DiagnosticLevel` or :obj:`str`, optional): minimum level of the events
                which are issued as warnings
            record_level (:obj:`DiagnosticLevel` or :obj:`str`, optional): minimum level of the events
                which are recorded
            callback (:obj:`callable`, optional): function which receives each event
        """
        if isinstance(warn_level, str):
            warn_level = DiagnosticLevel[warn_level]
        if isinstance(record_level, str):
            record_level = DiagnosticLevel[record_level]
        self.events = []
        self.warn_level = warn_level
        self.record_level = record_level
        self.callback = callback

    def emit(self, level, code, **context):
        """ Report a diagnostic event

        Args:
            level (:obj:`DiagnosticLevel`): severity
            code (:obj:`str`): code; a key of :obj:`MESSAGES`
            context (:obj:`dict`): values used to format the message

        Returns:
            :obj:`Diagnostic`: event
        """
        message = MESSAGES[code].format(**context)
        event = Diagnostic(level, code, message, context)
        logger.log(int(level), '%s: %s', code, message)
        if level >= self.record_level:
            self.events.append(event)
        if self.callback is not None:
            self.callback(event)
        if level >= self.warn_level:
            warnings.warn(message, GemJsonWarning)
        return event

    def debug(self, code, **context):
        return self.emit(DiagnosticLevel.debug, code, **context)

    def info(self, code, **context):
        return self.emit(DiagnosticLevel.info, code, **context)

    def warning(self, code, **context):
        return self.emit(DiagnosticLevel.warning, code, **context)

    def error(self, code, **context):
        return self.emit(DiagnosticLevel.error, code, **context)

    def get(self, code=None, level=None):
        """ Get the recorded events with a code and/or at a level

        Args:
            code (:obj:`str`, optional): code
            level (:obj:`DiagnosticLevel`, optional): level

        Returns:
            :obj:`list` of :obj:`Diagnostic`: matching events
        """
        return [event for event in self.events
                if (code is None or event.code == code)
                and (level is None or event.level == level)]

    def count(self):
        """ Count the recorded events of each code

        Returns:
            :obj:`dict` of :obj:`str`: :obj:`int`: number of events of each code
        """
        counts = {}
        for event in self.events:
            counts[event.code] = counts.get(event.code, 0) + 1
        return counts
