"""DI module providing the service bound under the ``generic`` tag."""

import logging

from injector import Module, provider

from service_wiring.core.service.qualifiers import GenericService
from service_wiring.core.service.service_impl import ServiceImpl

logger = logging.getLogger(__name__)


class GenericModule(Module):
    """Binds the ``generic`` service tag to a fresh ServiceImpl per request."""

    @provider
    def provide_generic_service(self) -> GenericService:
        service = ServiceImpl()
        logger.debug(f"Provided generic service {id(service):#x}")
        return service
