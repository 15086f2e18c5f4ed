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
Loading of template files (e.g. the demo landing page)
"""
from importlib import resources as importlib_resources

from jinja2 import Environment, FileSystemLoader, select_autoescape
from jinja2.exceptions import TemplateNotFound

import logging

LOGGER = logging.getLogger(__name__)

__all__ = ['template_loader']


def template_loader(module_name, location='templates', template_dir=None):
    """
    Return a function that loads Jinja2 templates from the `location`
    directory of the `module_name` package, or from `template_dir` if set.
    """
    if template_dir is None:
        template_dir = str(importlib_resources.files(module_name).joinpath(location))

    env = Environment(
        loader=FileSystemLoader([template_dir]),
        autoescape=select_autoescape(['html', 'xml']),
    )

    def get_template(name):
        try:
            return env.get_template(name)
        except TemplateNotFound:
            LOGGER.debug('template %s not found in %s', name, template_dir)
            raise

    return get_template
