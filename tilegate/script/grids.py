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
import sys
import optparse

from tilegate.config.loader import load_configuration, ConfigurationError


def format_conf_value(value):
    if isinstance(value, tuple):
        # YAMl only supports lists, convert for clarity
        value = list(value)
    return repr(value)


def grid_sizes(grid):
    width = grid.extent[2] - grid.extent[0]
    height = grid.extent[3] - grid.extent[1]
    for res in grid.levels:
        yield (int(math.ceil(width / (res * grid.tile_size[0]) - 1e-9)),
               int(math.ceil(height / (res * grid.tile_size[1]) - 1e-9)))


def display_grid(grid_conf):
    grid = grid_conf.grid()
    print('%s:' % (grid.name,))
    print('    Configuration:')
    conf_dict = dict(grid_conf.conf)
    if 'tile_size' not in conf_dict:
        conf_dict['tile_size*'] = grid.tile_size
    if 'bbox' not in conf_dict:
        conf_dict['bbox*'] = grid.extent
    if 'units' not in conf_dict:
        conf_dict['units*'] = grid.unit.value

    for key in sorted(conf_dict):
        if key == 'name':
            continue
        print('        %s: %s' % (key, format_conf_value(conf_dict[key])))
    print('    Levels: Resolutions, # x * y = total tiles')
    max_digits = max([len("%r" % (res,)) for res in grid.levels])
    for level, (res, (tiles_in_x, tiles_in_y)) in enumerate(zip(grid.levels, grid_sizes(grid))):
        total_tiles = tiles_in_x * tiles_in_y
        spaces = max_digits - len("%r" % (res,)) + 1
        print("        %.2d:  %r,%s# %6d * %-6d = %10s" % (
            level, res, ' '*spaces, tiles_in_x, tiles_in_y, human_readable_number(total_tiles)))


def human_readable_number(num):
    if num > 10**6:
        return '%7.2fM' % (num/10**6)
    if math.isnan(num):
        return '?'
    return '%d' % int(num)


def display_grids_list(grids):
    for grid_name in sorted(grids.keys()):
        print(grid_name)


def display_grids(grids):
    for i, grid_name in enumerate(sorted(grids.keys())):
        if i != 0:
            print()
        display_grid(grids[grid_name])


def grids_command(args=None):
    parser = optparse.OptionParser("%prog grids [options] tilegate_conf")
    parser.add_option("-f", "--tilegate-conf", dest="tilegate_conf",
        help="TileGate configuration.")
    parser.add_option("-g", "--grid", dest="grid_name",
        help="Display only information about the specified grid.")
    parser.add_option("--all", dest="show_all", action="store_true", default=False,
        help="Show also grids that are not referenced by any tileset.")
    parser.add_option("-l", "--list", dest="list_grids", action="store_true", default=False,
        help="List names of configured grids, which are used by any tileset")

    from tilegate.script.util import setup_logging
    import logging
    setup_logging(logging.WARN)

    if args:
        args = args[1:] # remove script name

    (options, args) = parser.parse_args(args)
    if not options.tilegate_conf:
        if len(args) != 1:
            parser.print_help()
            sys.exit(1)
        else:
            options.tilegate_conf = args[0]
    try:
        gateway_configuration = load_configuration(options.tilegate_conf)
    except IOError as e:
        print('ERROR: ', "%s: '%s'" % (e.strerror, e.filename), file=sys.stderr)
        sys.exit(2)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        print('ERROR: invalid configuration (see above)', file=sys.stderr)
        sys.exit(2)

    if options.show_all or options.grid_name:
        grids = gateway_configuration.grids
    else:
        used = set()
        for tileset in gateway_configuration.tilesets.values():
            used.update(grid.name for grid in tileset.grids)
        grids = dict((name, conf) for name, conf in gateway_configuration.grids.items()
                     if name in used)

    if options.grid_name:
        options.grid_name = options.grid_name.lower()
        # ignore case for keys
        grids = dict((key.lower(), value) for (key, value) in grids.items())
        if not grids.get(options.grid_name, False):
            print('grid not found: %s' % (options.grid_name,))
            sys.exit(1)

    try:
        if options.list_grids:
            display_grids_list(grids)
        elif options.grid_name:
            display_grids({options.grid_name: grids[options.grid_name]})
        else:
            display_grids(grids)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        sys.exit(2)
