""" Base classes of the mappers from JSON records to model entities

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from abc import ABC, abstractmethod
from gem_json.diagnostics import Diagnostics
from gem_json.ids import IdNormalizer


class AnnotationPassthrough(object):
    """ Carries the annotations and notes of JSON records to model entities without interpreting them """

    def annotation(self, raw):
        """ Get the annotation of an entity from the annotation of a record

        Args:
            raw (:obj:`object`): annotation of a record

        Returns:
            :obj:`object`: opaque annotation
        """
        return raw

    def notes(self, raw):
        """ Get the notes of an entity from the notes of a record

        Args:
            raw (:obj:`object`): notes of a record

        Returns:
            :obj:`object`: opaque notes
        """
        return raw

    def apply(self, record, obj):
        """ Carry the annotation and notes of a record to an entity

        Args:
            record (:obj:`object`): record with `annotation` and `notes` attributes
            obj (:obj:`object`): entity
        """
        obj.annotation = self.annotation(record.annotation)
        obj.notes = self.notes(record.notes)


class Mapper(ABC):
    """ Map JSON records to model entities

    Attributes:
        diagnostics (:obj:`Diagnostics`): sink for diagnostics
        normalizer (:obj:`IdNormalizer`): normalizer of identifiers
        annotations (:obj:`AnnotationPassthrough`): handler of annotations and notes
    """

    def __init__(self, diagnostics=None, normalizer=None, annotations=None):
        """
        Args:
            diagnostics (:obj:`Diagnostics`, optional): sink for diagnostics
            normalizer (:obj:`IdNormalizer`, optional): normalizer of identifiers
            annotations (:obj:`AnnotationPassthrough`, optional): handler of annotations and notes
        """
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.normalizer = normalizer or IdNormalizer(self.diagnostics)
        self.annotations = annotations or AnnotationPassthrough()

    @abstractmethod
    def run(self, records):
        """ Map records to entities

        Args:
            records (:obj:`object`): records

        Returns:
            :obj:`list`: entities
        """
        pass  # pragma: no cover
