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
Service handler (demo) and the registry of configured services.
"""
from enum import Enum

from tilegate.exception import RequestError
from tilegate.response import Response


class ServiceType(Enum):
    """
    Protocol types of the gateway services. The declaration order is
    the slot order of the `ServiceRegistry`.
    """
    TMS = 'tms'
    WMTS = 'wmts'
    DEMO = 'demo'
    GMAPS = 'gmaps'
    KML = 'kml'
    VE = 've'
    WMS = 'wms'


class Service(object):
    """
    A configured service, identified by its URL prefix.

    Services without their own implementation in this package answer
    every request with ``501 not implemented``.
    """
    def __init__(self, url_prefix, type):
        self.url_prefix = url_prefix
        self.type = type

    def handle(self, req):
        return Response('not implemented', status=501, mimetype='text/plain')

    def __repr__(self):
        return '%s(%r, %s)' % (self.__class__.__name__, self.url_prefix, self.type.name)


class Server(Service):
    """
    A service that parses and answers requests itself.
    """
    def handle(self, req):
        try:
            parsed_req = self.parse_request(req)
            return self.respond(parsed_req, req)
        except RequestError as e:
            return e.render()

    def parse_request(self, req):
        raise NotImplementedError()

    def respond(self, parsed_req, req):
        raise NotImplementedError()


class ServiceRegistry(object):
    """
    Fixed-size table with one slot per `ServiceType`.
    Unconfigured slots are ``None``; iteration yields all slots in order.
    """
    def __init__(self, services=()):
        self._slots = [None] * len(ServiceType)
        for service in services:
            self.register(service)

    @staticmethod
    def _slot(service_type):
        return list(ServiceType).index(service_type)

    def register(self, service):
        """
        :raises ValueError: if the slot is taken or the URL prefix is
            invalid or already used by another service
        """
        prefix = service.url_prefix
        if not prefix or prefix.startswith('/') or prefix.endswith('/'):
            raise ValueError('invalid url_prefix %r for %s service'
                             % (prefix, service.type.value))
        idx = self._slot(service.type)
        if self._slots[idx] is not None:
            raise ValueError('%s service already configured' % service.type.value)
        for other in self.configured():
            if other.url_prefix == prefix:
                raise ValueError('url_prefix %r of %s service already used by %s service'
                                 % (prefix, service.type.value, other.type.value))
        self._slots[idx] = service

    def __getitem__(self, service_type):
        return self._slots[self._slot(service_type)]

    def __iter__(self):
        return iter(self._slots)

    def __len__(self):
        return len(self._slots)

    def configured(self):
        return [service for service in self._slots if service is not None]
