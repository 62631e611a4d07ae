from service_wiring.core.service.service_interface import IService


class Client:
    """Holds the single service instance a client works with."""

    def __init__(self, service: IService) -> None:
        self._service = service

    @property
    def service(self) -> IService:
        return self._service

    def __repr__(self) -> str:
        return f"{type(self).__name__}(service={self._service!r})"
