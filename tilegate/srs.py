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
Spatial reference systems.
"""
from pyproj import CRS
from pyproj.exceptions import CRSError

from tilegate.grid import Unit

import logging
log_proj = logging.getLogger('tilegate.proj')

WEBMERCATOR_EPSG = set((
    'EPSG:900913',
    'EPSG:3857',
    'EPSG:102100',
    'EPSG:102113',
))


class SRSError(ValueError):
    pass


def get_epsg_num(epsg_code):
    """
    >>> get_epsg_num('ePsG:4326')
    4326
    >>> get_epsg_num(4313)
    4313
    >>> get_epsg_num('31466')
    31466
    >>> get_epsg_num('IGNF:ETRS89UTM28') is None
    True
    """
    if isinstance(epsg_code, str):
        if ':' in epsg_code and epsg_code.upper().startswith('EPSG'):
            epsg_code = int(epsg_code.split(':')[1])
        elif epsg_code.isdigit():
            epsg_code = int(epsg_code)
        else:
            return
    return epsg_code


def crs_for(srs_code):
    """
    Return the pyproj `CRS` for `srs_code`. Web mercator aliases and
    ``CRS:84`` are mapped to their EPSG codes.

    :raises SRSError: for unknown codes
    """
    if srs_code.upper() in WEBMERCATOR_EPSG:
        epsg_num = 3857
    elif srs_code.upper() == 'CRS:84':
        epsg_num = 4326
    else:
        epsg_num = get_epsg_num(srs_code)

    try:
        if epsg_num is not None:
            return CRS.from_epsg(epsg_num)
        return CRS.from_user_input(srs_code)
    except CRSError as ex:
        raise SRSError('unknown srs %s: %s' % (srs_code, ex))


def unit_for_srs(srs_code):
    """
    Return the `Unit` of the first axis of `srs_code`.
    Geographic systems and units other than metre or foot are
    treated as `Unit.DEGREES`.

    >>> unit_for_srs('EPSG:4326')
    <Unit.DEGREES: 'dd'>
    >>> unit_for_srs('EPSG:900913')
    <Unit.METERS: 'm'>
    """
    crs = crs_for(srs_code)
    if crs.is_geographic or not crs.axis_info:
        return Unit.DEGREES
    unit_name = (crs.axis_info[0].unit_name or '').lower()
    log_proj.debug('axis unit of %s is %r', srs_code, unit_name)
    if unit_name in ('metre', 'meter'):
        return Unit.METERS
    if 'foot' in unit_name or 'feet' in unit_name:
        return Unit.FEET
    return Unit.DEGREES
