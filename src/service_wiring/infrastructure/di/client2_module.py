"""DI module wiring Client2 to a service set up for client2."""

import logging

from injector import Module, provider

from service_wiring.core.client.client2 import Client2
from service_wiring.core.service.qualifiers import Client2Service, GenericService

logger = logging.getLogger(__name__)


class Client2Module(Module):

    def configure(self, binder) -> None:  # type: ignore[no-untyped-def,override]
        binder.bind(Client2)
        logger.info("Client2Module configured")

    @provider
    def provide_client2_service(self, service: GenericService) -> Client2Service:
        """Apply the client2 setup to the generic service and hand it on."""
        service.setup_client2()
        return service
