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
Demo service handler
"""
import logging
from typing import Optional

from tilegate.exception import NotFound, UnsupportedDemo, AllocationFailure
from tilegate.response import Response
from tilegate.service.base import Server, ServiceType
from tilegate.service.template_helper import (
    DEMO_HEAD, DEMO_FOOT, demo_layer, demo_layer_name,
)
from tilegate.template import template_loader

logger = logging.getLogger('tilegate.demo')


class RoutingDecision(object):
    """
    The service a demo page was requested for. ``service`` is ``None``
    for the landing page.
    """
    def __init__(self, service=None):
        self.service = service

    @property
    def landing_page(self):
        return self.service is None

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.service)


class CapabilityDocument(object):
    def __init__(self, body, content_type):
        self.body = body
        self.content_type = content_type

    def __repr__(self):
        return '%s(content_type=%r, %d chars)' % (
            self.__class__.__name__, self.content_type, len(self.body))


def classify(path_fragment: Optional[str], services) -> RoutingDecision:
    """
    Select the service for `path_fragment`, the request path below the
    demo prefix (e.g. ``/wms`` or ``/wms/foo``).

    `services` is iterated in order, ``None`` entries are skipped. The first
    service whose ``url_prefix`` matches the start of the path, followed by
    ``/`` or the end of the path, is selected.

    :raises NotFound: if no service matches
    """
    if not path_fragment or path_fragment == '/':
        return RoutingDecision(None)

    path = path_fragment[1:] if path_fragment.startswith('/') else path_fragment
    for service in services:
        if service is None:
            continue
        prefix = service.url_prefix
        if not path.startswith(prefix):
            continue
        # prefix matched, but it is only part of a longer path segment
        if len(path) > len(prefix) and path[len(prefix)] != '/':
            continue
        logger.debug('demo request %r for %r', path_fragment, service)
        return RoutingDecision(service)

    raise NotFound('demo service "%s" not recognised or not enabled' % path)


class DemoServer(Server):
    """
    Landing page with links to all configured services, and an
    OpenLayers demo for the WMS service with all tile sets.

    :param services: the `ServiceRegistry` (or a list with ``None`` slots)
    :param tilesets: ordered mapping of names to `TileSet`
    :param md: service metadata, ``md['url']`` overrides the request URL
    :param single_tile: also add a single-tile variant of each WMS layer
    """
    url_prefix = 'demo'

    def __init__(self, services, tilesets, md=None, single_tile=False, template_dir=None):
        Server.__init__(self, self.url_prefix, ServiceType.DEMO)
        self.services = services
        self.tilesets = tilesets
        self.md = md or {}
        self.single_tile = single_tile
        self.get_template = template_loader(__package__, 'templates', template_dir=template_dir)

    def parse_request(self, req):
        if req.args:
            logger.debug('query arguments %r are not used by demo pages', req.args)
        return classify(req.path, self.services)

    def respond(self, decision, req):
        doc = self.capabilities(decision, req.root_url)
        return Response(doc.body, mimetype=doc.content_type)

    def online_resource(self, request_url):
        """
        The base URL for all links, ``md['url']`` if configured.
        """
        return (self.md.get('url') or request_url).rstrip('/')

    def capabilities(self, decision, request_url):
        """
        Build the `CapabilityDocument` for the `RoutingDecision`.

        :raises UnsupportedDemo: for a demo of the demo service
        :raises AllocationFailure: if the document could not be assembled
        """
        url = self.online_resource(request_url)
        service = decision.service
        if service is None:
            generator = DemoServer._landing_page
        else:
            generator = self.generators[service.type]
        try:
            return generator(self, url)
        except MemoryError:
            logger.error('out of memory while creating demo for %r', service)
            raise AllocationFailure('failed to allocate demo document')

    def _landing_page(self, url):
        services = [s for s in self.services
                    if s is not None and s.type is not ServiceType.DEMO]
        template = self.get_template('demo/index.html')
        body = template.render(services=services, base_url=url)
        return CapabilityDocument(body, 'text/html')

    def _wms_demo(self, url):
        wms_url = url + '/wms?'
        parts = [DEMO_HEAD]
        layers = []
        for tileset in self.tilesets.values():
            for link in tileset.grid_links:
                parts.append(demo_layer(tileset, link.grid, wms_url))
                layers.append(demo_layer_name(tileset, link.grid))
                if self.single_tile:
                    parts.append(demo_layer(tileset, link.grid, wms_url, single_tile=True))
                    layers.append(demo_layer_name(tileset, link.grid, single_tile=True))
        parts.append(DEMO_FOOT % ','.join(layers))
        return CapabilityDocument(''.join(parts), 'text/html')

    def _not_implemented(self, url):
        return CapabilityDocument('not implemented', 'text/plain')

    def _unsupported(self, url):
        raise UnsupportedDemo('selected service does not provide a demo page')

    generators = {
        ServiceType.WMS: _wms_demo,
        ServiceType.TMS: _not_implemented,
        ServiceType.WMTS: _not_implemented,
        ServiceType.KML: _not_implemented,
        ServiceType.GMAPS: _not_implemented,
        ServiceType.VE: _not_implemented,
        ServiceType.DEMO: _unsupported,
    }


def check_generators(generators):
    missing = set(ServiceType) - set(generators)
    if missing:
        raise TypeError('no demo generator for %s'
                        % ', '.join(sorted(t.value for t in missing)))


check_generators(DemoServer.generators)
