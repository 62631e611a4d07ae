"""Dependency injection module for the wiring configuration."""
from typing import Optional

from injector import Module, provider, singleton

from service_wiring.infrastructure.config.wiring_config import WiringConfig


class WiringModule(Module):
    """Provides the one authoritative WiringConfig instance."""

    def __init__(self, config: Optional[WiringConfig] = None) -> None:
        """Initialize the module with optional configuration.

        Args:
            config: Already-loaded WiringConfig. Defaults are used when omitted.
        """
        self._config = config

    @provider
    @singleton
    def provide_wiring_config(self) -> WiringConfig:
        if self._config is None:
            self._config = WiringConfig()
        return self._config
