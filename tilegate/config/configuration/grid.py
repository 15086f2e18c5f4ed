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

from tilegate.config import defaults
from tilegate.config.configuration.base import ConfigurationError
from tilegate.config.configuration.base import ConfigurationBase
from tilegate.grid import Grid, TileSet, GridLink, Unit, resolutions
from tilegate.srs import unit_for_srs, SRSError, WEBMERCATOR_EPSG

import logging

log = logging.getLogger('tilegate.config')


def default_bbox(srs):
    srs = srs.upper()
    if srs in ('EPSG:4326', 'CRS:84'):
        return (-180, -90, 180, 90)
    if srs in WEBMERCATOR_EPSG:
        return defaults.WEBMERCATOR_BBOX
    return None


class GridConfiguration(ConfigurationBase):
    def __init__(self, conf, context):
        ConfigurationBase.__init__(self, conf, context)
        self._grid = None

    def _resolved_conf(self, seen=()):
        if 'base' not in self.conf:
            return dict(self.conf)
        name = self.conf['name']
        base_grid_name = self.conf['base']
        if base_grid_name not in self.context.grids:
            raise ConfigurationError('unknown base %s for grid %s' % (base_grid_name, name))
        if base_grid_name in seen:
            raise ConfigurationError('recursive base %s for grid %s' % (base_grid_name, name))
        conf = self.context.grids[base_grid_name]._resolved_conf(seen + (name,))
        own_conf = dict(self.conf)
        own_conf.pop('base')
        if 'res' in own_conf:
            for key in ('min_res', 'max_res', 'num_levels'):
                conf.pop(key, None)
        elif 'res' in conf and set(own_conf) & set(('min_res', 'max_res', 'num_levels')):
            conf.pop('res')
        if 'srs' in own_conf and 'units' not in own_conf:
            # units of the base srs
            conf.pop('units', None)
        conf.update(own_conf)
        return conf

    def grid(self):
        if self._grid is None:
            self._grid = self._create_grid()
        return self._grid

    def _create_grid(self):
        conf = self._resolved_conf()
        name = conf['name']

        srs = conf.get('srs')
        if not srs:
            raise ConfigurationError('grid %s requires an srs' % name)

        bbox = conf.get('bbox') or default_bbox(srs)
        if not bbox:
            raise ConfigurationError('need a bbox for grid %s with %s' % (name, srs))
        if bbox[0] >= bbox[2] or bbox[1] >= bbox[3]:
            raise ConfigurationError('invalid bbox %r for grid %s' % (list(bbox), name))

        if conf.get('units'):
            unit = Unit(conf['units'])
        else:
            try:
                unit = unit_for_srs(srs)
            except SRSError as ex:
                raise ConfigurationError('grid %s: %s' % (name, ex))
            log.debug('using units %s of %s for grid %s', unit.value, srs, name)

        tile_size = tuple(conf.get('tile_size') or self.context.base_config.grid.tile_size)

        if conf.get('res'):
            levels = list(conf['res'])
        else:
            levels = resolutions(
                min_res=conf.get('min_res'),
                max_res=conf.get('max_res'),
                res_factor=conf.get('res_factor', 2.0),
                num_levels=conf.get('num_levels'),
                bbox=bbox,
                tile_size=tile_size,
            )
        if not levels:
            raise ConfigurationError('grid %s has no resolutions' % name)

        return Grid(name=name, srs=srs, unit=unit, extent=bbox, levels=levels,
                    tile_size=tile_size)


class TileSetConfiguration(ConfigurationBase):
    def tileset(self):
        links = []
        for grid_name in self.conf.get('grids') or []:
            if grid_name not in self.context.grids:
                raise ConfigurationError('unknown grid %s for tileset %s'
                                         % (grid_name, self.conf['name']))
            links.append(GridLink(self.context.grids[grid_name].grid()))
        if not links:
            log.warning('tileset %s has no grids', self.conf['name'])
        return TileSet(self.conf['name'], links)
