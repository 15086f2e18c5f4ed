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
The WSGI application.
"""
import os
import sys

from tilegate.request import Request
from tilegate.response import Response
from tilegate.config.loader import load_configuration, ConfigurationError
from tilegate.service.base import ServiceType
from tilegate.version import version

import logging
log = logging.getLogger('tilegate.config')
log_wsgiapp = logging.getLogger('tilegate.wsgiapp')


def app_factory(global_options, tilegate_conf, **local_options):
    """
    Paster app_factory.
    """
    conf = global_options.copy()
    conf.update(local_options)
    log_conf = conf.get('log_conf', None)
    init_logging_system(log_conf, os.path.dirname(tilegate_conf))
    return make_wsgi_app(tilegate_conf)


def init_logging_system(log_conf, base_dir):
    import logging.config
    if log_conf:
        if not os.path.exists(log_conf):
            print('ERROR: log configuration %s not found.' % log_conf, file=sys.stderr)
            return
        logging.config.fileConfig(log_conf, dict(here=base_dir))


def make_wsgi_app(services_conf=None, debug=False):
    """
    Create a TileGateApp with the given services conf.

    :param services_conf: the file name of the tilegate.yaml configuration
    """
    try:
        conf = load_configuration(services_conf)
    except ConfigurationError as e:
        log.fatal(e)
        raise

    app = TileGateApp(conf.configured_services(), conf.base_config)
    app.config_files = conf.config_files
    if debug:
        from werkzeug.debug import DebuggedApplication
        conf.base_config.debug_mode = True
        debug_app = DebuggedApplication(app, evalex=True)
        debug_app.config_files = app.config_files
        return debug_app
    return app


class TileGateApp(object):
    """
    The TileGate WSGI application.
    """
    def __init__(self, services, base_config):
        self.handlers = {}
        self.base_config = base_config
        self.config_files = {}
        for service in services:
            self.handlers[service.url_prefix] = service

    def __call__(self, environ, start_response):
        resp = None
        req = Request(environ)

        handler_name = req.pop_path()
        if handler_name in self.handlers:
            try:
                resp = self.handlers[handler_name].handle(req)
            except Exception:
                if self.base_config.debug_mode:
                    raise
                log_wsgiapp.fatal('fatal error in %s for %s %s',
                                  handler_name, environ.get('PATH_INFO'),
                                  environ.get('QUERY_STRING'), exc_info=True)
                resp = Response('internal error', status=500)
        if resp is None:
            if not handler_name:
                resp = self.welcome_response(req.root_url)
            else:
                resp = Response('not found', mimetype='text/plain', status=404)
        return resp(environ, start_response)

    def welcome_response(self, root_url):
        html = "<html><body><h1>Welcome to TileGate %s</h1>" % version
        demo = [h for h in self.handlers.values() if h.type is ServiceType.DEMO]
        if demo:
            html += ('<p>See all configured services at: <a href="%s/%s/">demo</a>'
                     % (root_url, demo[0].url_prefix))
        return Response(html, mimetype='text/html')
