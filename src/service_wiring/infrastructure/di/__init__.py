from .client1_module import Client1Module
from .client2_module import Client2Module
from .generic_module import GenericModule
from .wiring_module import WiringModule

__all__ = ["GenericModule", "Client1Module", "Client2Module", "WiringModule"]
