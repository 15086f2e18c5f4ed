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
System-wide configuration.
"""
import copy
import os

from tilegate.config import defaults


class Options(dict):
    """
    Dictionary with attribute style access.

    >>> o = Options(bar='foo')
    >>> o.bar
    'foo'
    """
    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, dict.__repr__(self))

    def __getattr__(self, name):
        if name in self:
            return self[name]
        else:
            raise AttributeError(name)

    __setattr__ = dict.__setitem__

    def __delattr__(self, name):
        if name in self:
            del self[name]
        else:
            raise AttributeError(name)

    def update(self, other=None, **kw):
        if other is None:
            other = kw
        for key, value in other.items():
            if key in self and isinstance(self[key], Options) and isinstance(value, dict):
                self[key].update(value)
            else:
                self[key] = value

    def __deepcopy__(self, memo):
        return Options(copy.deepcopy(list(self.items()), memo))


def _to_options_map(mapping):
    if isinstance(mapping, dict):
        opt = Options()
        for key, value in mapping.items():
            opt[key] = _to_options_map(value)
        return opt
    elif isinstance(mapping, list):
        return [_to_options_map(m) for m in mapping]
    else:
        return mapping


def load_default_config():
    """
    Return the built-in defaults as `Options`.
    """
    defaults_conf = {}
    for key, value in vars(defaults).items():
        if key.startswith('_') or key.isupper():
            continue
        defaults_conf[key] = copy.deepcopy(value)
    return _to_options_map(defaults_conf)


def load_base_config(globals_conf=None, conf_base_dir=None):
    """
    Return the system wide base configuration: the defaults updated
    with the ``globals`` section of the configuration.
    Relative ``template_dir`` paths are resolved against `conf_base_dir`.
    """
    conf = load_default_config()
    if globals_conf:
        conf.update(_to_options_map(globals_conf))
    if conf_base_dir is None:
        conf_base_dir = os.getcwd()
    conf.conf_base_dir = conf_base_dir
    if conf.template_dir:
        conf.template_dir = os.path.join(conf_base_dir, conf.template_dir)
    return conf
