"""
Composition root for the service wiring.

This is the single place where the object graph is assembled: configuration
is loaded, logging is set up, the injector is built from the DI modules and
fully wired clients are resolved from it.
"""

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Type, TypeVar

from injector import Injector, Module

from service_wiring.core.client.client import Client
from service_wiring.core.client.client1 import Client1
from service_wiring.core.client.client2 import Client2
from service_wiring.infrastructure.config.config_loader import load_wiring_config, resolve_config_dir
from service_wiring.infrastructure.config.wiring_config import WiringConfig
from service_wiring.infrastructure.di.client1_module import Client1Module
from service_wiring.infrastructure.di.client2_module import Client2Module
from service_wiring.infrastructure.di.generic_module import GenericModule
from service_wiring.infrastructure.di.wiring_module import WiringModule
from service_wiring.infrastructure.logging.logging_setup import configure_logging

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT", bound=Client)


@dataclass(frozen=True)
class ComposedClients:
    """Clients resolved in one composition pass."""
    client1: Client1
    client2: Client2


class CompositionRoot:
    """Builds the injector once and hands out wired clients.

    The injector is created with ``auto_bind=False``: every requested key
    must come from one of the dependency modules, so a missing binding fails
    composition immediately instead of being silently constructed.
    """

    def __init__(self, config: Optional[WiringConfig] = None) -> None:
        self.config = config or WiringConfig()
        self.injector: Optional[Injector] = None

    def get_dependency_modules(self) -> List[Module]:
        """Return DI modules using the already-loaded config instance."""
        return [
            WiringModule(self.config),
            GenericModule(),
            Client1Module(),
            Client2Module(),
        ]

    def compose(self) -> Injector:
        if self.injector is None:
            try:
                self.injector = Injector(self.get_dependency_modules(), auto_bind=False)
            except Exception as e:
                logger.error(f"Failed to build injector for {self.config.app_name}: {e}", exc_info=True)
                raise
            logger.info(f"Dependency injection container initialized for {self.config.app_name}")
        return self.injector

    def client1(self) -> Client1:
        return self._resolve(Client1)

    def client2(self) -> Client2:
        return self._resolve(Client2)

    def compose_clients(self) -> ComposedClients:
        return ComposedClients(client1=self.client1(), client2=self.client2())

    def _resolve(self, client_class: Type[ClientT]) -> ClientT:
        injector = self.compose()
        try:
            client = injector.get(client_class)
        except Exception as e:
            logger.error(f"Failed to resolve {client_class.__name__}: {e}", exc_info=True)
            raise
        logger.debug(f"Resolved {client!r}")
        return client


def bootstrap_clients(config_dir: Optional[str] = None, stage: Optional[str] = None) -> ComposedClients:
    """
    Compose both clients the way a process entry point does.

    Loads configuration when a config directory is given or CONFIG_DIR is
    set, configures logging, then resolves the clients. Startup failure is
    fatal: the error is logged and the process exits with status 1.

    Args:
        config_dir: Optional directory holding application.yaml
        stage: Optional stage name selecting application-{stage}.yaml

    Returns:
        The composed clients
    """
    try:
        config = _load_configuration(config_dir, stage)
        configure_logging(config.app_name, config.logging)
        clients = CompositionRoot(config).compose_clients()
    except Exception as e:
        logger.error(f"Failed to compose clients: {e}", exc_info=True)
        sys.exit(1)
    logger.info(f"Composed {clients.client1!r} and {clients.client2!r}")
    return clients


def _load_configuration(config_dir: Optional[str], stage: Optional[str]) -> WiringConfig:
    resolved_dir = resolve_config_dir(config_dir)
    if resolved_dir is None:
        return WiringConfig()
    return load_wiring_config(resolved_dir, stage)
