"""
Configuration Management for StarStyle

Process-wide settings for the style compiler and the prop router,
with presets per environment and overrides from environment variables.
"""

import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class StyleConfig(BaseModel):
    """Complete StarStyle configuration"""
    model_config = ConfigDict(frozen=True)

    environment: Environment = Environment.DEVELOPMENT
    # Class-name prefix for compiled classes (`css-1x2y3z`)
    key: str = Field(default="css", pattern=r"^[a-z][a-z0-9-]*$")
    # Log the names the attribute router drops (development only)
    log_dropped_props: bool = False
    log_level: str = "WARNING"

    @classmethod
    def for_environment(cls, environment: Environment) -> 'StyleConfig':
        """Create configuration for specific environment"""
        environment = Environment(environment)

        if environment == Environment.DEVELOPMENT:
            return cls(environment=environment, log_dropped_props=True, log_level="DEBUG")

        elif environment == Environment.TESTING:
            return cls(environment=environment, log_level="WARNING")

        return cls(environment=environment, log_level="INFO")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'StyleConfig':
        """Create configuration from dictionary, starting from the environment preset"""
        base = cls.for_environment(config_dict.get("environment", Environment.DEVELOPMENT))
        overrides = {k: v for k, v in config_dict.items() if k in cls.model_fields}
        return cls.model_validate({**base.model_dump(), **overrides})

    @classmethod
    def from_environment(cls) -> 'StyleConfig':
        """Create configuration from environment variables"""
        config: Dict[str, Any] = {"environment": os.getenv("STARSTYLE_ENV", "development")}

        if os.getenv("STARSTYLE_KEY"):
            config["key"] = os.getenv("STARSTYLE_KEY")

        if os.getenv("STARSTYLE_LOG_DROPPED_PROPS"):
            config["log_dropped_props"] = os.getenv("STARSTYLE_LOG_DROPPED_PROPS").lower() == "true"

        if os.getenv("STARSTYLE_LOG_LEVEL"):
            config["log_level"] = os.getenv("STARSTYLE_LOG_LEVEL").upper()

        return cls.from_dict(config)


_config: Optional[StyleConfig] = None


def get_config() -> StyleConfig:
    """Return the process-wide configuration, loading it from the environment on first use."""
    global _config
    if _config is None:
        _config = StyleConfig.from_environment()
    return _config


def configure(config: Optional[StyleConfig] = None, **overrides) -> StyleConfig:
    """
    Install the process-wide configuration.

    Args:
        config: Complete configuration. Defaults to the current one.
        **overrides: Individual fields to replace, e.g. `log_dropped_props=False`.

    Returns:
        The configuration now in effect
    """
    global _config
    config = config or get_config()
    if overrides:
        config = StyleConfig.model_validate({**config.model_dump(), **overrides})
    _config = config

    logging.getLogger("starstyle").setLevel(config.log_level)
    logger.debug(f"StarStyle configured for {config.environment.value}")
    return config
