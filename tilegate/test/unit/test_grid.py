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

import math

import pytest

from tilegate.grid import Grid, GridLink, TileSet, Unit, get_resolution, resolutions


class TestResolutions(object):
    def test_min_res_num_levels(self):
        assert resolutions(min_res=100, num_levels=3) == [100, 50.0, 25.0]

    def test_from_bbox(self):
        res = resolutions(bbox=(-180, -90, 180, 90), num_levels=3)
        assert res == [1.40625, 0.703125, 0.3515625]

    def test_max_res(self):
        assert resolutions(bbox=(0, 0, 1024, 512), max_res=1) == [4.0, 2.0]

    def test_min_max_num_levels(self):
        res = resolutions(min_res=1000, max_res=10, num_levels=3)
        assert len(res) == 3
        assert res[0] == pytest.approx(1000)
        assert res[1] == pytest.approx(100)
        assert res[2] == pytest.approx(10)

    def test_max_res_single_level(self):
        assert resolutions(min_res=100, max_res=10, num_levels=1) == [100]

    def test_res_factor(self):
        assert resolutions(min_res=81, res_factor=3, num_levels=3) == [81, 27.0, 9.0]

    def test_sqrt2(self):
        res = resolutions(min_res=4, res_factor='sqrt2', num_levels=3)
        assert res[1] == pytest.approx(4 / math.sqrt(2))
        assert res[2] == pytest.approx(2)

    def test_default_num_levels(self):
        assert len(resolutions(min_res=1)) == 20

    def test_tile_size(self):
        assert resolutions(bbox=(0, 0, 512, 512), tile_size=(512, 512), num_levels=1) == [1.0]


def test_get_resolution():
    assert get_resolution((0, 0, 100, 50), (100, 100)) == 0.5


class TestGrid(object):
    def test_grid(self):
        grid = Grid('g', 'EPSG:4326', Unit.DEGREES, [-180, -90, 180, 90], [1, 0.5])
        assert grid.extent == (-180.0, -90.0, 180.0, 90.0)
        assert grid.levels == (1, 0.5)
        assert grid.nlevels == 2
        assert grid.tile_size == (256, 256)

    def test_tileset_grids_are_shared(self):
        grid = Grid('g', 'EPSG:4326', Unit.DEGREES, (-180, -90, 180, 90), [1])
        a = TileSet('a', [GridLink(grid)])
        b = TileSet('b', [GridLink(grid)])
        assert a.grids[0] is b.grids[0]

    def test_tileset_without_grids(self):
        assert TileSet('a').grids == []
