"""
Configuration models for the composition root.

Every field has a default so an empty ``WiringConfig()`` is valid; the YAML
files only ever narrow naming and logging.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_APP_NAME = "service-wiring"


class LoggingSettings(BaseModel):
    """Log level, line format and optional log file for the wired clients."""

    model_config = ConfigDict(extra="forbid")

    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file_path: Optional[str] = None
    # logger name -> level, e.g. {"injector": "WARNING"}
    library_levels: Dict[str, str] = Field(default_factory=dict)


class WiringConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app_name: str = DEFAULT_APP_NAME
    stage: str = "local"
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
