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

import os
from collections import OrderedDict
from copy import deepcopy

from tilegate.config import defaults
from tilegate.config.config import load_base_config
from tilegate.config.configuration.grid import GridConfiguration, TileSetConfiguration
from tilegate.config.configuration.service import ServiceConfiguration


class GatewayConfiguration(object):
    """
    The loaded configuration: grids, tile sets and services.
    Everything is created once and only read afterwards.
    """
    def __init__(self, conf, conf_base_dir=None):
        self.configuration = conf
        self.config_files = conf.pop('__config_files__', {})

        if conf_base_dir is None:
            conf_base_dir = os.getcwd()

        self.load_globals(conf_base_dir=conf_base_dir)
        self.load_metadata()
        self.load_grids()
        self.load_tilesets()
        self.load_services()

    def load_globals(self, conf_base_dir):
        self.base_config = load_base_config(self.configuration.get('globals') or {},
                                            conf_base_dir=conf_base_dir)

    def load_metadata(self):
        self.metadata = dict(self.configuration.get('metadata') or {})

    def load_grids(self):
        self.grids = OrderedDict()
        grid_configs = deepcopy(defaults.grids)
        grid_configs.update(self.configuration.get('grids') or {})
        for grid_name, grid_conf in grid_configs.items():
            grid_conf = dict(grid_conf)
            grid_conf['name'] = grid_name
            self.grids[grid_name] = GridConfiguration(grid_conf, context=self)

    def load_tilesets(self):
        self.tilesets = OrderedDict()
        for tileset_name, tileset_conf in (self.configuration.get('tilesets') or {}).items():
            tileset_conf = dict(tileset_conf)
            tileset_conf['name'] = tileset_name
            conf = TileSetConfiguration(tileset_conf, context=self)
            self.tilesets[tileset_name] = conf.tileset()

    def load_services(self):
        services_conf = ServiceConfiguration(self.configuration.get('services') or {}, context=self)
        self.services = services_conf.services()

    def configured_services(self):
        return self.services.configured()
