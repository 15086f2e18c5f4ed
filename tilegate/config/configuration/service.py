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

from tilegate.config.configuration.base import ConfigurationBase
from tilegate.config.configuration.base import ConfigurationError
from tilegate.service.base import Service, ServiceRegistry, ServiceType

import logging

log = logging.getLogger('tilegate.config')


class ServiceConfiguration(ConfigurationBase):
    def services(self):
        """
        Return the `ServiceRegistry` with all configured services.
        The demo service is created last and references the same registry.
        """
        registry = ServiceRegistry()
        service_types = []
        for service_name in self.conf:
            try:
                service_types.append(ServiceType(service_name))
            except ValueError:
                raise ConfigurationError('unknown service: %s' % service_name)

        service_types.sort(key=lambda t: t is ServiceType.DEMO)
        for service_type in service_types:
            creator = getattr(self, service_type.value + '_service', self.protocol_service)
            service = creator(registry, service_type, self.conf[service_type.value] or {})
            try:
                registry.register(service)
            except ValueError as ex:
                raise ConfigurationError(str(ex))
        return registry

    def protocol_service(self, registry, service_type, conf):
        url_prefix = conf.get('url_prefix', service_type.value)
        return Service(url_prefix, service_type)

    def demo_service(self, registry, service_type, conf):
        from tilegate.service.demo import DemoServer

        single_tile = conf.get('single_tile', self.context.base_config.demo.single_tile)
        return DemoServer(
            services=registry,
            tilesets=self.context.tilesets,
            md=self.context.metadata,
            single_tile=single_tile,
            template_dir=self.context.base_config.template_dir,
        )
