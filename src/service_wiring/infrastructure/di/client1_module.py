"""DI module wiring Client1 to a service set up for client1."""

import logging

from injector import Module, provider

from service_wiring.core.client.client1 import Client1
from service_wiring.core.service.qualifiers import Client1Service, GenericService

logger = logging.getLogger(__name__)


class Client1Module(Module):

    def configure(self, binder) -> None:  # type: ignore[no-untyped-def,override]
        binder.bind(Client1)
        logger.info("Client1Module configured")

    @provider
    def provide_client1_service(self, service: GenericService) -> Client1Service:
        """Apply the client1 setup to the generic service and hand it on."""
        service.setup_client1()
        return service
