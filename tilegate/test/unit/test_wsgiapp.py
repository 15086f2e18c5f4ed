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

import logging
import textwrap

import pytest
from werkzeug.debug import DebuggedApplication

from tilegate.config.loader import ConfigurationError
from tilegate.service.base import ServiceType
from tilegate.wsgiapp import TileGateApp, init_logging_system, make_wsgi_app


@pytest.fixture
def conf_file(tmp_path):
    filename = tmp_path / 'tilegate.yaml'
    filename.write_text('services:\n  demo:\n  wms:\n')
    return str(filename)


class TestMakeWSGIApp(object):
    def test_app(self, conf_file):
        app = make_wsgi_app(conf_file)
        assert isinstance(app, TileGateApp)
        assert set(app.handlers) == set(['demo', 'wms'])
        assert conf_file in app.config_files
        assert not app.base_config.debug_mode

    def test_debug(self, conf_file):
        app = make_wsgi_app(conf_file, debug=True)
        assert isinstance(app, DebuggedApplication)
        assert app.app.base_config.debug_mode
        assert conf_file in app.config_files

    def test_invalid(self, tmp_path):
        filename = tmp_path / 'tilegate.yaml'
        filename.write_text('services:\n  foo:\n')
        with pytest.raises(ConfigurationError):
            make_wsgi_app(str(filename))


class TestInternalError(object):
    def test_internal_error(self, conf_file):
        app = make_wsgi_app(conf_file)

        class Broken(object):
            url_prefix = 'broken'
            type = ServiceType.KML

            def handle(self, req):
                raise ValueError('boom')
        app.handlers['broken'] = Broken()

        result = {}

        def start_response(status, headers):
            result['status'] = status

        def environ():
            return {
                'PATH_INFO': '/broken', 'SCRIPT_NAME': '', 'SERVER_NAME': 'localhost',
                'SERVER_PORT': '80', 'wsgi.url_scheme': 'http',
            }
        body = b''.join(app(environ(), start_response))
        assert result['status'] == '500 Internal Server Error'
        assert body == b'internal error'

        app.base_config.debug_mode = True
        with pytest.raises(ValueError):
            app(environ(), start_response)


def test_init_logging_system(tmp_path):
    log_conf = tmp_path / 'log.ini'
    log_conf.write_text(textwrap.dedent('''\
        [loggers]
        keys=root,tilegate_demo

        [handlers]
        keys=file

        [formatters]
        keys=default

        [logger_root]
        level=WARNING
        handlers=

        [logger_tilegate_demo]
        level=DEBUG
        handlers=file
        qualname=tilegate.demo

        [handler_file]
        class=FileHandler
        formatter=default
        args=(r"%(here)s/demo.log", "a")

        [formatter_default]
        format=%(levelname)s %(message)s
    '''))
    init_logging_system(str(log_conf), str(tmp_path))
    try:
        assert logging.getLogger('tilegate.demo').level == logging.DEBUG
        logging.getLogger('tilegate.demo').debug('hello')
        for handler in logging.getLogger('tilegate.demo').handlers:
            handler.flush()
        assert 'DEBUG hello' in (tmp_path / 'demo.log').read_text()
    finally:
        for handler in logging.getLogger('tilegate.demo').handlers[:]:
            handler.close()
            logging.getLogger('tilegate.demo').removeHandler(handler)
        logging.getLogger('tilegate.demo').setLevel(logging.NOTSET)
        # fileConfig disables all other existing loggers
        for logger in logging.root.manager.loggerDict.values():
            if isinstance(logger, logging.Logger):
                logger.disabled = False


def test_init_logging_system_missing(tmp_path, capsys):
    init_logging_system(str(tmp_path / 'missing.ini'), str(tmp_path))
    assert 'log configuration' in capsys.readouterr().err
