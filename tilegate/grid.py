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
Grids and tile sets.
"""
import math
from enum import Enum


class Unit(Enum):
    METERS = 'm'
    FEET = 'ft'
    DEGREES = 'dd'


class Grid(object):
    """
    A tile grid with a fixed extent and a ladder of resolutions.

    :param name: the name of the grid
    :param srs: the spatial reference identifier (e.g. ``EPSG:4326``)
    :param unit: the `Unit` of the SRS
    :param extent: the (minx, miny, maxx, maxy) of the grid
    :param levels: the resolutions, starting with the coarsest level
    """
    def __init__(self, name, srs, unit, extent, levels, tile_size=(256, 256)):
        self.name = name
        self.srs = srs
        self.unit = unit
        self.extent = tuple(float(v) for v in extent)
        self.levels = tuple(levels)
        self.tile_size = tuple(tile_size)

    @property
    def nlevels(self):
        return len(self.levels)

    def __repr__(self):
        return '%s(%r, %r, %r, %r)' % (self.__class__.__name__, self.name, self.srs,
                                       self.extent, self.levels)


class GridLink(object):
    """
    Publishes a `TileSet` on a `Grid`. The grid is shared, not copied.
    """
    def __init__(self, grid):
        self.grid = grid

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.grid.name)


class TileSet(object):
    def __init__(self, name, grid_links=None):
        self.name = name
        self.grid_links = list(grid_links or [])

    @property
    def grids(self):
        return [link.grid for link in self.grid_links]

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__, self.name, self.grid_links)


def get_resolution(bbox, size):
    """
    Calculate the highest resolution needed to draw the bbox
    into an image with given size.

    >>> get_resolution((-180,-90,180,90), (256, 256))
    0.703125

    :returns: the resolution
    :rtype: float
    """
    w = abs(bbox[0] - bbox[2])
    h = abs(bbox[1] - bbox[3])
    return min(w/size[0], h/size[1])


def resolutions(min_res=None, max_res=None, res_factor=2.0, num_levels=None,
                bbox=None, tile_size=(256, 256)):
    """
    Calculate a resolution ladder, starting with the coarsest resolution.

    Without `min_res` the coarsest level shows the whole `bbox` in a single tile.
    With `max_res` and `num_levels` the resolutions are spaced evenly on a log
    scale, otherwise each level is `res_factor` finer than the previous one.

    >>> resolutions(min_res=100, num_levels=3)
    [100, 50.0, 25.0]
    >>> resolutions(bbox=(0, 0, 1024, 512), max_res=1)
    [4.0, 2.0]
    """
    if res_factor == 'sqrt2':
        res_factor = math.sqrt(2)

    res = []
    if not min_res:
        width = bbox[2] - bbox[0]
        height = bbox[3] - bbox[1]
        min_res = max(width/tile_size[0], height/tile_size[1])

    if max_res:
        if num_levels == 1:
            res = [min_res]
        elif num_levels:
            res_step = (math.log10(min_res) - math.log10(max_res)) / (num_levels-1)
            res = [10**(math.log10(min_res) - res_step*i) for i in range(num_levels)]
        else:
            res = [min_res]
            while True:
                next_res = res[-1]/res_factor
                if max_res >= next_res:
                    break
                res.append(next_res)
    else:
        if not num_levels:
            num_levels = 20 if res_factor != math.sqrt(2) else 40
        res = [min_res]
        while len(res) < num_levels:
            res.append(res[-1]/res_factor)

    return res
