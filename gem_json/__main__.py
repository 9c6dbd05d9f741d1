""" Command line programs for converting JSON models to SBML

:Author: Jonathan Karr <karr@mssm.edu>
:Author: Arthur Goldberg <Arthur.Goldberg@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.config import get_config
from gem_json.io import Reader, convert
from gem_json.sbml import LibSbmlError
import cement
import gem_json


class BaseController(cement.Controller):
    """ Base controller for command line application """

    class Meta:
        label = 'base'
        description = "Command line utilities for converting genome-scale metabolic models from JSON to SBML"
        help = "Command line utilities for converting genome-scale metabolic models from JSON to SBML"
        arguments = [
            (['-v', '--version'], dict(action='version', version=gem_json.__version__)),
        ]

    @cement.ex(hide=True)
    def _default(self):
        self._parser.print_help()


class ConvertController(cement.Controller):
    """ Convert a model from JSON to SBML """

    class Meta:
        label = 'convert'
        description = 'Convert a model from JSON to SBML'
        help = 'Convert a model from JSON to SBML'
        stacked_on = 'base'
        stacked_type = 'nested'
        arguments = [
            (['source'], dict(type=str, help='Path to the JSON-encoded model')),
            (['destination'], dict(type=str, help='Path to save the SBML-encoded model')),
            (['--verify'], dict(action='store_true', default=False,
                                help='If set, verify that the SBML document is valid')),
        ]

    @cement.ex(hide=True)
    def _default(self):
        args = self.app.pargs
        extra = None
        if args.verify:
            extra = {'gem_json': {'sbml': {'verify': True}}}
        try:
            model = convert(args.source, args.destination, config=get_config(extra=extra))
        except (ValueError, LibSbmlError) as exception:
            raise SystemExit('Model could not be converted: ' + str(exception))
        print("Model '{}' written to '{}'".format(model.id, args.destination))


class SummaryController(cement.Controller):
    """ Display the numbers of entities of a model and the diagnostics of reading it """

    class Meta:
        label = 'summary'
        description = 'Display the numbers of entities of a model and the diagnostics of reading it'
        help = 'Display the numbers of entities of a model and the diagnostics of reading it'
        stacked_on = 'base'
        stacked_type = 'nested'
        arguments = [
            (['path'], dict(type=str, help='Path to the JSON-encoded model')),
        ]

    @cement.ex(hide=True)
    def _default(self):
        args = self.app.pargs
        reader = Reader()
        try:
            model = reader.run(args.path)
        except ValueError as exception:
            raise SystemExit('Model is invalid: ' + str(exception))

        n_flux_objectives = len(model.objective.flux_objectives) if model.objective else 0
        print("Model: {}".format(model.id))
        print("  Compartments: {}".format(len(model.compartments)))
        print("  Species: {}".format(len(model.species)))
        print("  Gene products: {}".format(len(model.gene_products)))
        print("  Reactions: {}".format(len(model.reactions)))
        print("  Groups: {}".format(len(model.groups)))
        print("  Flux objectives: {}".format(n_flux_objectives))

        counts = reader.diagnostics.count()
        print("Diagnostics:")
        for code in sorted(counts.keys()):
            print("  {}: {}".format(code, counts[code]))


class App(cement.App):
    """ Command line application """
    class Meta:
        label = 'gem-json'
        base_controller = 'base'
        handlers = [
            BaseController,
            ConvertController,
            SummaryController,
        ]


def main():
    with App() as app:
        app.run()
