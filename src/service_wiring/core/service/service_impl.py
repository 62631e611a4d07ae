import logging
from typing import List, Tuple

from service_wiring.core.service.qualifiers import CLIENT1, CLIENT2
from service_wiring.core.service.service_interface import IService

logger = logging.getLogger(__name__)


class ServiceImpl(IService):
    """Default service implementation.

    Setup calls carry no behavior of their own; each one is logged and
    recorded so the wiring can be inspected after composition.
    """

    def __init__(self) -> None:
        self._applied_setups: List[str] = []

    def setup_client1(self) -> None:
        self._record_setup(CLIENT1)

    def setup_client2(self) -> None:
        self._record_setup(CLIENT2)

    @property
    def setup_client1_calls(self) -> int:
        return self._applied_setups.count(CLIENT1)

    @property
    def setup_client2_calls(self) -> int:
        return self._applied_setups.count(CLIENT2)

    @property
    def applied_setups(self) -> Tuple[str, ...]:
        """Client tags in the order their setup was applied."""
        return tuple(self._applied_setups)

    def _record_setup(self, client_tag: str) -> None:
        self._applied_setups.append(client_tag)
        logger.info(f"Service {id(self):#x} configured for {client_tag}")

    def __repr__(self) -> str:
        return f"ServiceImpl(applied_setups={self._applied_setups!r})"
