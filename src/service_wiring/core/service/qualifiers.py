"""Named binding keys for the service.

Each alias is a distinct key for the injector, so the same interface can be
bound once per tag.
"""
from typing import Annotated

from service_wiring.core.service.service_interface import IService

GENERIC = "generic"
CLIENT1 = "client1"
CLIENT2 = "client2"

GenericService = Annotated[IService, GENERIC]
Client1Service = Annotated[IService, CLIENT1]
Client2Service = Annotated[IService, CLIENT2]
