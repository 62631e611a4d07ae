from .client import Client
from .client1 import Client1
from .client2 import Client2

__all__ = ["Client", "Client1", "Client2"]
