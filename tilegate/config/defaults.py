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

debug_mode = False

# directory with tilegate/service/templates/* files
template_dir = None

demo = dict(
    single_tile=False,
)

grid = dict(
    tile_size=(256, 256),
)

WEBMERCATOR_BBOX = (-20037508.3427892480, -20037508.3427892480,
                    20037508.3427892480, 20037508.3427892480)

grids = dict(
    WGS84=dict(
        srs='EPSG:4326', units='dd', bbox=[-180, -90, 180, 90],
        min_res=0.703125, num_levels=18,
    ),
    g=dict(
        srs='EPSG:900913', units='m', bbox=list(WEBMERCATOR_BBOX),
        min_res=156543.0339280410, num_levels=19,
    ),
    GoogleMapsCompatible=dict(
        srs='EPSG:3857', units='m', bbox=list(WEBMERCATOR_BBOX),
        min_res=156543.0339280410, num_levels=19,
    ),
)
