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
Formatting helpers and fixed document parts for the OpenLayers demo.

All numbers are formatted with ``%`` formatting, which does not depend
on the current locale.
"""
import math

from tilegate.grid import Unit

__all__ = ['unit_token', 'format_resolution', 'format_resolutions',
           'demo_layer', 'demo_layer_name', 'DEMO_HEAD', 'DEMO_FOOT']

RESOLUTION_PRECISION = 20

DEMO_HEAD = (
    "<html xmlns=\"http://www.w3.org/1999/xhtml\">\n"
    "  <head>\n"
    "    <style type=\"text/css\">\n"
    "    #map {\n"
    "    width: 100%;\n"
    "    height: 100%;\n"
    "    border: 1px solid black;\n"
    "    }\n"
    "    </style>\n"
    "    <script src=\"http://www.openlayers.org/api/OpenLayers.js\"></script>\n"
    "    <script type=\"text/javascript\">\n"
    "var map;\n"
    "function init(){\n"
    "    map = new OpenLayers.Map( 'map' );\n"
)

DEMO_LAYER = (
    "    var %(var)s = new OpenLayers.Layer.WMS( \"%(tileset)s-%(grid)s\",\n"
    "        \"%(url)s\",{layers: '%(tileset)s'},\n"
    "        { gutter:0,buffer:0,isBaseLayer:true,transitionEffect:'resize',\n"
    "          resolutions:[%(resolutions)s],\n"
    "          units:\"%(unit)s\",\n"
    "          maxExtent: new OpenLayers.Bounds(%(minx)f,%(miny)f,%(maxx)f,%(maxy)f),\n"
    "          projection: new OpenLayers.Projection(\"%(srs)s\")\n"
    "        }\n"
    "    );\n"
)

DEMO_LAYER_SINGLETILE = (
    "    var %(var)s = new OpenLayers.Layer.WMS( \"%(tileset)s-%(grid)s (singleTile)\",\n"
    "        \"%(url)s\",{layers: '%(tileset)s'},\n"
    "        { gutter:0,ratio:1,isBaseLayer:true,transitionEffect:'resize',\n"
    "          resolutions:[%(resolutions)s],\n"
    "          units:\"%(unit)s\",\n"
    "          singleTile:true,\n"
    "          maxExtent: new OpenLayers.Bounds(%(minx)f,%(miny)f,%(maxx)f,%(maxy)f),\n"
    "          projection: new OpenLayers.Projection(\"%(srs)s\")\n"
    "        }\n"
    "    );\n"
)

DEMO_FOOT = (
    "    map.addLayers([%s]);\n"
    "    if(!map.getCenter())\n"
    "     map.zoomToMaxExtent();\n"
    "    map.addControl(new OpenLayers.Control.LayerSwitcher());\n"
    "    map.addControl(new OpenLayers.Control.MousePosition());\n"
    "}\n"
    "    </script>\n"
    "  </head>\n"
    "\n"
    "<body onload=\"init()\">\n"
    "    <div id=\"map\">\n"
    "    </div>\n"
    "</body>\n"
    "</html>\n"
)

_unit_tokens = {
    Unit.METERS: 'm',
    Unit.FEET: 'ft',
}


def unit_token(unit):
    """
    >>> unit_token(Unit.METERS)
    'm'
    >>> unit_token(Unit.DEGREES)
    'dd'
    >>> unit_token(None)
    'dd'
    """
    return _unit_tokens.get(unit, 'dd')


def format_resolution(res):
    """
    Format `res` with at least 20 fractional digits, and more if
    needed to parse back to the same float.

    >>> format_resolution(0.5)
    '0.50000000000000000000'
    """
    precision = RESOLUTION_PRECISION
    text = '%.*f' % (precision, res)
    while math.isfinite(res) and float(text) != res:
        precision += 1
        text = '%.*f' % (precision, res)
    return text


def format_resolutions(levels):
    """
    >>> format_resolutions([2.0, 1.0])
    '2.00000000000000000000,1.00000000000000000000'
    """
    return ','.join(format_resolution(res) for res in levels)


def demo_layer_name(tileset, grid, single_tile=False):
    return '%s_%s_%s' % (tileset.name, grid.name, 'slayer' if single_tile else 'layer')


def demo_layer(tileset, grid, url, single_tile=False):
    """
    Return the OpenLayers WMS layer declaration of `tileset` in `grid`.
    """
    template = DEMO_LAYER_SINGLETILE if single_tile else DEMO_LAYER
    minx, miny, maxx, maxy = grid.extent
    return template % dict(
        var=demo_layer_name(tileset, grid, single_tile=single_tile),
        tileset=tileset.name,
        grid=grid.name,
        url=url,
        resolutions=format_resolutions(grid.levels),
        unit=unit_token(grid.unit),
        minx=minx, miny=miny, maxx=maxx, maxy=maxy,
        srs=grid.srs,
    )
