"""
Interface for the shared service handed to every client.

The service exposes one configuration hook per client identity. Providers
call exactly one hook before the service reaches a client.
"""
from abc import ABC, abstractmethod


class IService(ABC):

    @abstractmethod
    def setup_client1(self) -> None:
        """Configure the service for use by Client1."""
        pass

    @abstractmethod
    def setup_client2(self) -> None:
        """Configure the service for use by Client2."""
        pass
