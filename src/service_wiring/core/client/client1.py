from injector import inject

from service_wiring.core.client.client import Client
from service_wiring.core.service.qualifiers import Client1Service


class Client1(Client):
    """Client receiving the service configured for client1."""

    @inject
    def __init__(self, service: Client1Service) -> None:
        super().__init__(service)
