# This file is part of the TileGate project.
# Copyright (C) 2026 TileGate contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Configuration loading and system initializing.
"""
import json
import os

from tilegate.config.configuration.base import ConfigurationError
from tilegate.config.configuration.gateway import GatewayConfiguration
from tilegate.config.validator import validate
from tilegate.util.yaml import load_yaml_file, YAMLError

import logging

log = logging.getLogger('tilegate.config')

__all__ = ['ConfigurationError', 'load_configuration', 'load_configuration_file',
           'merge_dict']


def load_configuration(tilegate_conf):
    conf_base_dir = os.path.abspath(os.path.dirname(tilegate_conf))

    # A configuration is checked three times, each step has a different
    # focus and returns different errors. The steps are:
    # 1. YAML loading: checks YAML syntax like tabs vs. space, indention errors, etc.
    # 2. Validation: checks all options against the schema and all references
    #                between tilesets, grids and services
    # 3. Initialization: creates all grids, tilesets and services, returns on first error

    try:
        conf_dict = load_configuration_file([os.path.basename(tilegate_conf)], conf_base_dir)
        log.debug('Loaded configuration file: %s', json.dumps(conf_dict, indent=2, default=str))
    except YAMLError as ex:
        raise ConfigurationError(ex)

    config_files = conf_dict.pop('__config_files__')
    errors = validate(conf_dict)
    for error in errors:
        log.warning(error)
    if errors:
        raise ConfigurationError('invalid configuration')
    conf_dict['__config_files__'] = config_files

    services = conf_dict.get('services')
    if services is not None and 'demo' in services:
        log.warning('Application has demo page enabled. It is recommended to disable this in production.')

    return GatewayConfiguration(conf_dict, conf_base_dir=conf_base_dir)


def load_configuration_file(files, working_dir):
    """
    Return configuration dict from imported files
    """
    # record all config files with timestamp for reloading
    conf_dict = {'__config_files__': {}}
    for conf_file in files:
        conf_file = os.path.normpath(os.path.join(working_dir, conf_file))
        log.info('reading: %s' % conf_file)
        current_dict = load_yaml_file(conf_file)
        conf_dict['__config_files__'][os.path.abspath(conf_file)] = os.path.getmtime(conf_file)
        if 'base' in current_dict:
            current_working_dir = os.path.dirname(conf_file)
            base_files = current_dict.pop('base')
            if isinstance(base_files, str):
                base_files = [base_files]
            imported_dict = load_configuration_file(base_files, current_working_dir)
            current_dict = merge_dict(current_dict, imported_dict)
        conf_dict = merge_dict(conf_dict, current_dict)

    return conf_dict


def merge_dict(conf, base):
    """
    Return `base` dict with values from `conf` merged in.

    >>> merge_dict({'a': {'b': 1}, 'c': [3]}, {'a': {'d': 2}, 'c': [4]})
    {'a': {'d': 2, 'b': 1}, 'c': [4, 3]}
    """
    for k, v in conf.items():
        if k not in base:
            base[k] = v
        else:
            if isinstance(base[k], dict):
                if v is not None:
                    base[k] = merge_dict(v, base[k])
            elif isinstance(base[k], list):
                if v is not None:
                    if k in ['bbox', 'tile_size', 'grids', 'res']:
                        base[k] = v
                    elif len(v) == 0:  # delete
                        base[k] = None
                    else:
                        base[k] = base[k] + v
            else:
                base[k] = v
    return base
