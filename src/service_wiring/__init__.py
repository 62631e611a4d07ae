"""
Named-binding wiring of a shared service into multiple clients.

A generic service is bound once, and each client module derives a
client-specific binding from it by applying that client's setup before the
service reaches the client.
"""

from service_wiring.core.client import Client, Client1, Client2
from service_wiring.core.service import IService, ServiceImpl
from service_wiring.infrastructure.bootstrap import (
    ComposedClients,
    CompositionRoot,
    bootstrap_clients,
)

__version__ = "1.0.0"

__all__ = [
    "IService",
    "ServiceImpl",
    "Client",
    "Client1",
    "Client2",
    "CompositionRoot",
    "ComposedClients",
    "bootstrap_clients",
]
