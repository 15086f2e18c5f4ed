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

import json
import os.path
from typing import Iterable

from jsonschema.exceptions import ValidationError
from jsonschema.validators import Draft202012Validator

import tilegate.config.defaults

import logging
log = logging.getLogger('tilegate.config')


with open(os.path.join(os.path.dirname(__file__), 'config-schema.json')) as schema_file:
    schema = json.load(schema_file)


def get_error_messages(errors: Iterable[ValidationError]) -> list[str]:
    msgs = []
    for error in errors:
        path = error.json_path.replace('$', 'root')
        msg = f'{error.message} in {path}'
        msgs.append(msg)
        if error.context is not None:
            msgs += get_error_messages(error.context)
    return msgs


def validate(conf_dict: dict) -> list[str]:
    """
    Validate `conf_dict` against the configuration schema and check all
    references between the sections. Returns a list of error messages.
    """
    validator = Draft202012Validator(schema=schema)
    errors = get_error_messages(validator.iter_errors(conf_dict))
    if errors:
        # reference checks expect a well-formed configuration
        return errors
    return validate_references(conf_dict)


def validate_references(conf_dict: dict) -> list[str]:
    errors = []
    errors += _validate_grids(conf_dict)
    errors += _validate_tilesets(conf_dict)
    errors += _validate_services(conf_dict)
    return errors


def _get_known_grids(conf_dict: dict) -> set[str]:
    grids_conf = conf_dict.get('grids')
    known_grids = set(tilegate.config.defaults.grids.keys())
    if grids_conf:
        known_grids.update(grids_conf.keys())
    return known_grids


def _validate_grids(conf_dict: dict) -> list[str]:
    errors = []
    known_grids = _get_known_grids(conf_dict)
    for name, grid in (conf_dict.get('grids') or {}).items():
        base = grid.get('base')
        if base is not None and base not in known_grids:
            errors.append(f"Base grid '{base}' for grid '{name}' not found in config")
        if 'res' in grid:
            for key in ('min_res', 'max_res', 'num_levels', 'res_factor'):
                if key in grid:
                    errors.append(f"Grid '{name}' has 'res' and '{key}', use only one")
    return errors


def _validate_tilesets(conf_dict: dict) -> list[str]:
    errors = []
    known_grids = _get_known_grids(conf_dict)
    # demo layers are script variables named <tileset>_<grid>
    layer_names = {}
    for name, tileset in (conf_dict.get('tilesets') or {}).items():
        for grid in tileset.get('grids') or []:
            if grid not in known_grids:
                errors.append(f"Grid '{grid}' for tileset '{name}' not found in config")
                continue
            layer_name = f'{name}_{grid}'
            if layer_name in layer_names:
                other_name, other_grid = layer_names[layer_name]
                errors.append(
                    f"Layer '{layer_name}' of tileset '{name}' and grid '{grid}' already"
                    f" used by tileset '{other_name}' and grid '{other_grid}'"
                )
                continue
            layer_names[layer_name] = (name, grid)
    return errors


def _validate_services(conf_dict: dict) -> list[str]:
    errors = []
    prefixes = {}
    for name, service in (conf_dict.get('services') or {}).items():
        if name == 'demo':
            prefix = 'demo'
        else:
            prefix = (service or {}).get('url_prefix', name)
        if prefix in prefixes:
            errors.append(
                f"url_prefix '{prefix}' of service '{name}' already used by service '{prefixes[prefix]}'"
            )
            continue
        prefixes[prefix] = name
    return errors
