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
import shutil

import pytest

from webtest import TestApp as _TestApp

from tilegate.wsgiapp import make_wsgi_app


class WSGITestApp(_TestApp):
    """
    Wraps webtest.TestApp and explicitly converts URLs to strings.
    """

    def get(self, url, *args, **kw):
        return _TestApp.get(self, str(url), *args, **kw)


class SysTest(object):
    """
    Baseclass for pytest-based system tests.
    Provides `app` fixture with a configured TileGate instance, wrapped in
    webtest.TestApp.

    `app` is reused within each test class.
    """

    @pytest.fixture(scope="class")
    def app(self, base_dir, config_file):
        filename = base_dir.join(config_file)
        app = make_wsgi_app(filename.strpath)
        app.base_config.debug_mode = True
        return WSGITestApp(app, use_unicode=False)

    @pytest.fixture(scope="class")
    def base_config(self, app):
        return app.app.base_config

    @pytest.fixture(scope="class")
    def base_dir(self, tmpdir_factory, config_file):
        dir = tmpdir_factory.mktemp("base_dir")

        fixture_dir = os.path.join(os.path.dirname(__file__), "fixture")
        fixture_layer_conf = os.path.join(fixture_dir, config_file)
        shutil.copy(fixture_layer_conf, dir.strpath)

        return dir
