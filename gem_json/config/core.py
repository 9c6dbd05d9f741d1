""" Configuration

:Author: Jonathan Karr <jonrkarr@gmail.com>
:Author: Arthur Goldberg <Arthur.Goldberg@mssm.edu>
:Date: 2026-10-19
:Copyright: 2026, Karr Lab
:License: MIT
"""

from configobj import ConfigObj, flatten_errors
from configobj.validate import Validator
from pathlib import Path
import os


def get_package_root(file_in_package):
    """ Get root directory of a package

    Args:
        file_in_package (:obj:`str`): pathname of a file in a package

    Returns:
        :obj:`str`: pathname of root of package
    """
    path = Path(file_in_package)
    # go up directory hierarchy from path and get first directory that does not contain '__init__.py'
    dir = path.parent
    found_package = False
    while True:
        if not dir.joinpath('__init__.py').is_file():
            break
        # exit at / root
        if dir == dir.parent:
            break
        found_package = True
        dir = dir.parent
    if found_package:
        return str(dir)


def get_resource_filename(*args):
    """ Get pathname of resource file

    Args:
        args (:obj:`list`): pathname components of resource file

    Returns:
        :obj:`str`: pathname of resource file
    """
    package_root = get_package_root(__file__)
    return os.path.join(package_root, *args)


DEFAULT_PATH = get_resource_filename('gem_json', 'config', 'core.default.cfg')
SCHEMA_PATH = get_resource_filename('gem_json', 'config', 'core.schema.cfg')
USER_PATHS = (
    'gem_json.cfg',
    os.path.expanduser('~/.wc/gem_json.cfg'),
)


def get_config(extra=None):
    """ Get configuration

    The configuration is the package defaults, overridden by the first user configuration file
    which exists, overridden by `extra`.

    Args:
        extra (:obj:`dict`, optional): additional configuration to override

    Returns:
        :obj:`configobj.ConfigObj`: nested dictionary with the configuration settings loaded from the configuration source(s).

    Raises:
        :obj:`ValueError`: if the configuration does not match the schema or is invalid
    """
    schema = ConfigObj(SCHEMA_PATH, list_values=False, _inspec=True)
    config = ConfigObj(configspec=schema)
    config.merge(ConfigObj(DEFAULT_PATH))
    for user_path in USER_PATHS:
        if os.path.isfile(user_path):
            config.merge(ConfigObj(user_path))
            break
    if extra:
        config.merge(extra)

    result = config.validate(Validator(), preserve_errors=True)
    if result is not True:
        errors = []
        for sections, key, error in flatten_errors(config, result):
            errors.append('  {}: {}'.format('.'.join(sections + [key or '']), error or 'missing'))
        raise ValueError('Invalid configuration:\n' + '\n'.join(errors))

    validate_config(config)
    return config


def validate_config(config):
    """ Validate configuration

    * Check that the entity prefixes are single letters
    * Check that default_lower_bound <= default_upper_bound

    Args:
        config (:obj:`configobj.ConfigObj`): nested dictionary with the configuration settings

    Raises:
        :obj:`ValueError`: if a prefix is not a single letter or the default lower flux
            bound is greater than the default upper flux bound
    """
    ids = config['gem_json']['ids']
    for key in ['metabolite_prefix', 'gene_product_prefix', 'reaction_prefix']:
        prefix = ids[key]
        if len(prefix) != 1 or not prefix.isalpha():
            raise ValueError("{} must be a single letter, not '{}'".format(key, prefix))

    reactions = config['gem_json']['reactions']
    if reactions['default_lower_bound'] > reactions['default_upper_bound']:
        raise ValueError(("default lower flux bound must be less than or equal to "
                          "the default upper flux bound:\n"
                          "  default_lower_bound={}\n"
                          "  default_upper_bound={}").format(
            reactions['default_lower_bound'],
            reactions['default_upper_bound']))
