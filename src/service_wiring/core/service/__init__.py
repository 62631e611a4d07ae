from .qualifiers import (
    CLIENT1,
    CLIENT2,
    GENERIC,
    Client1Service,
    Client2Service,
    GenericService,
)
from .service_impl import ServiceImpl
from .service_interface import IService

__all__ = [
    "IService",
    "ServiceImpl",
    "GENERIC",
    "CLIENT1",
    "CLIENT2",
    "GenericService",
    "Client1Service",
    "Client2Service",
]
