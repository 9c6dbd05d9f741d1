""" Reading models from COBRA/BiGG JSON files and converting them to SBML

:Author: Jonathan Karr <karr@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from gem_json.builder import ModelBuilder
from gem_json.config import get_config
from gem_json.records import ModelRecord
from gem_json.sbml import SbmlWriter
import json


class Reader(object):
    """ Read models from JSON files

    Attributes:
        config (:obj:`configobj.ConfigObj`): configuration
        builder (:obj:`ModelBuilder`): builder of models
    """

    def __init__(self, config=None, diagnostics=None, gpr_builder=None, annotations=None):
        """
        Args:
            config (:obj:`configobj.ConfigObj`, optional): configuration; defaults to :obj:`get_config`
            diagnostics (:obj:`gem_json.diagnostics.Diagnostics`, optional): sink for diagnostics
            gpr_builder (:obj:`callable`, optional): builder of gene product associations
            annotations (:obj:`gem_json.mappers.AnnotationPassthrough`, optional): handler of annotations
                and notes
        """
        if config is None:
            config = get_config()
        self.config = config
        self.builder = ModelBuilder(config=config, diagnostics=diagnostics, gpr_builder=gpr_builder,
                                    annotations=annotations)

    @property
    def diagnostics(self):
        return self.builder.diagnostics

    def run(self, path):
        """ Read a model from a JSON file

        Args:
            path (:obj:`str`): path to the JSON file

        Returns:
            :obj:`gem_json.core.Model`: model

        Raises:
            :obj:`ValueError`: if the file is not valid JSON or does not encode a model
        """
        with open(path, 'r', encoding='utf-8') as file:
            try:
                data = json.load(file)
            except json.JSONDecodeError as error:
                raise ValueError("'{}' is not valid JSON: {}".format(path, error))

        return self.build(data)

    def build(self, data):
        """ Build a model from a parsed JSON tree

        Args:
            data (:obj:`dict`): parsed JSON tree

        Returns:
            :obj:`gem_json.core.Model`: model

        Raises:
            :obj:`ValueError`: if `data` does not encode a model
        """
        return self.builder.run(ModelRecord.from_dict(data))


def convert(in_path, out_path, config=None, diagnostics=None):
    """ Convert a model from a JSON file to an SBML-encoded XML file

    Args:
        in_path (:obj:`str`): path to the JSON file
        out_path (:obj:`str`): path to save the SBML-encoded XML file
        config (:obj:`configobj.ConfigObj`, optional): configuration; defaults to :obj:`get_config`
        diagnostics (:obj:`gem_json.diagnostics.Diagnostics`, optional): sink for diagnostics

    Returns:
        :obj:`gem_json.core.Model`: model
    """
    if config is None:
        config = get_config()
    model = Reader(config=config, diagnostics=diagnostics).run(in_path)

    sbml_config = config['gem_json']['sbml']
    SbmlWriter().run(model, out_path,
                     level=sbml_config['level'],
                     version=sbml_config['version'],
                     verify=sbml_config['verify'])
    return model
