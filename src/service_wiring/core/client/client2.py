from injector import inject

from service_wiring.core.client.client import Client
from service_wiring.core.service.qualifiers import Client2Service


class Client2(Client):
    """Client receiving the service configured for client2."""

    @inject
    def __init__(self, service: Client2Service) -> None:
        super().__init__(service)
