""" Map the compartments of JSON models

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from .core import Mapper
from gem_json.core import Compartment


class CompartmentMapper(Mapper):
    """ Create a compartment for each entry of the compartment table of a JSON model.
    The keys of the table are used verbatim as ids. """

    def run(self, table):
        """ Map compartments

        Args:
            table (:obj:`dict` of :obj:`str`: :obj:`str`): dictionary that maps the ids of compartments to their names

        Returns:
            :obj:`list` of :obj:`Compartment`: compartments
        """
        self.diagnostics.info('NUM_COMPARTMENTS', count=len(table))
        return [Compartment(id, name=name) for id, name in table.items()]
