"""
Shared test fixtures for service-wiring tests.

Provides the composition root, a default configuration and logging isolation
following the Given/When/Then structure used throughout the suite.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest
from injector import Injector

from service_wiring.infrastructure.bootstrap.composition_root import CompositionRoot
from service_wiring.infrastructure.config.wiring_config import DEFAULT_APP_NAME, LoggingSettings, WiringConfig


@pytest.fixture(autouse=True)
def isolated_logging() -> Generator[None, None, None]:
    """
    Undo logging configuration applied by a test.

    configure_logging stops propagation on the package loggers; restoring it keeps
    caplog working for the tests that follow.
    """
    root = logging.getLogger()
    root_handlers = list(root.handlers)
    root_level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in root_handlers:
                root.removeHandler(handler)
        for handler in root_handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(root_level)
        for name in ("service_wiring", "injector", "test-service", "wired-app", DEFAULT_APP_NAME):
            configured = logging.getLogger(name)
            for handler in list(configured.handlers):
                configured.removeHandler(handler)
                handler.close()
            configured.propagate = True
            configured.setLevel(logging.NOTSET)


@pytest.fixture
def wiring_config() -> WiringConfig:
    """Provide a WiringConfig logging to the console only."""
    return WiringConfig(
        app_name="service-wiring-test",
        logging=LoggingSettings(level="DEBUG"),
    )


@pytest.fixture
def composition_root(wiring_config: WiringConfig) -> CompositionRoot:
    return CompositionRoot(wiring_config)


@pytest.fixture
def injector(composition_root: CompositionRoot) -> Injector:
    return composition_root.compose()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """
    Provide a config directory holding a minimal application.yaml.

    Returns:
        Path to the directory
    """
    (tmp_path / "application.yaml").write_text(
        """
app_name: "wired-app"
stage: "local"
logging:
  level: "INFO"
  library_levels:
    injector: "WARNING"
"""
    )
    return tmp_path
