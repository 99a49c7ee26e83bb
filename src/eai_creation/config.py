"""Configuration management for the EntityAddressInfo creation handler."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import structlog
import yaml

from .constants import (
    NE_TYPE_ATTR,
    PLATFORM_TYPE_ATTR,
    PTR_FDN,
    REMOTE_HOST_ATTR,
    REMOTE_PORT_ATTR,
)
from .utils.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


@runtime_checkable
class Configuration(Protocol):
    """Key based property lookup supplied by the mediation engine."""

    def get_string_property(self, name: str) -> str:
        """Return the property value. Never returns None."""
        ...

    def get_all_properties(self) -> dict[str, Any]:
        """Return every property, for diagnostics."""
        ...


@dataclass
class PropertiesConfiguration:
    """
    Mapping backed Configuration.

    Used when the handler runs outside the mediation engine, e.g. from a
    YAML file or the process environment.
    """

    properties: dict[str, Any] = field(default_factory=dict)

    def get_string_property(self, name: str) -> str:
        """
        Get a property as a string.

        Args:
            name: Property name

        Returns:
            Property value converted to str

        Raises:
            ConfigurationError: If the property is not set
        """
        value = self.properties.get(name)
        if value is None:
            raise ConfigurationError(name)
        return str(value)

    def get_all_properties(self) -> dict[str, Any]:
        """Return a copy of all properties."""
        return dict(self.properties)

    @classmethod
    def from_file(cls, config_path: Path) -> "PropertiesConfiguration":
        """
        Load properties from a YAML file.

        The file is either a flat mapping of property names or a mapping with
        a top-level ``properties`` section.

        Args:
            config_path: Path to YAML config file

        Returns:
            PropertiesConfiguration instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid YAML or not a mapping
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid configuration file structure in {config_path}: "
                f"expected dictionary, got {type(data).__name__}"
            )

        properties = data.get("properties", data)
        if not isinstance(properties, dict):
            raise ValueError(
                f"Invalid 'properties' section in {config_path}: "
                f"expected dictionary, got {type(properties).__name__}"
            )
        return cls(properties=properties)

    @classmethod
    def from_env(cls, prefix: str = "EAI_") -> "PropertiesConfiguration":
        """
        Create properties from environment variables.

        Environment variables:
            EAI_REMOTE_HOST: Persistence service host
            EAI_REMOTE_PORT: Persistence service port
            EAI_PTR_FDN: FDN of the target managed object
            EAI_NE_TYPE: Network element type
            EAI_PLATFORM_TYPE: Platform type

        Unset variables are left out so the extractor reports them.

        Args:
            prefix: Environment variable prefix

        Returns:
            PropertiesConfiguration instance
        """
        env_names = {
            REMOTE_HOST_ATTR: "REMOTE_HOST",
            REMOTE_PORT_ATTR: "REMOTE_PORT",
            PTR_FDN: "PTR_FDN",
            NE_TYPE_ATTR: "NE_TYPE",
            PLATFORM_TYPE_ATTR: "PLATFORM_TYPE",
        }
        properties = {}
        for prop, env_name in env_names.items():
            value = os.environ.get(f"{prefix}{env_name}")
            if value is not None:
                properties[prop] = value
        return cls(properties=properties)


@dataclass(frozen=True)
class HandlerConfig:
    """Validated handler parameters. Immutable once extracted."""

    remote_host: str
    remote_port: str
    target_fdn: str
    ne_type: str
    platform_type: str


@dataclass
class TransportConfig:
    """HTTP transport settings for the naming and persistence services."""

    scheme: str = "http"
    timeout: float = 30.0
    verify_ssl: bool = True
    naming_path: str = "naming"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"
    file: Path | None = None

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create logging configuration from LOG_LEVEL, LOG_FORMAT and LOG_FILE."""
        log_file = os.environ.get("LOG_FILE")
        return cls(
            level=os.environ.get("LOG_LEVEL", "INFO"),
            format=os.environ.get("LOG_FORMAT", "json"),
            file=Path(log_file) if log_file else None,
        )


def _verify_not_empty(value: str, property_name: str) -> str:
    # None is already rejected by Configuration.get_string_property
    if value == "":
        raise ConfigurationError(property_name)
    return value


def extract_parameters(config: Configuration) -> HandlerConfig:
    """
    Read and validate the five required handler properties.

    Args:
        config: Property source supplied by the mediation engine

    Returns:
        HandlerConfig with every field non-empty

    Raises:
        ConfigurationError: On the first empty property
    """
    logger.debug("The config attributes are", properties=config.get_all_properties())

    remote_host = _verify_not_empty(config.get_string_property(REMOTE_HOST_ATTR), REMOTE_HOST_ATTR)
    remote_port = _verify_not_empty(config.get_string_property(REMOTE_PORT_ATTR), REMOTE_PORT_ATTR)
    target_fdn = _verify_not_empty(config.get_string_property(PTR_FDN), PTR_FDN)
    ne_type = _verify_not_empty(config.get_string_property(NE_TYPE_ATTR), NE_TYPE_ATTR)
    platform_type = _verify_not_empty(
        config.get_string_property(PLATFORM_TYPE_ATTR), PLATFORM_TYPE_ATTR
    )

    return HandlerConfig(
        remote_host=remote_host,
        remote_port=remote_port,
        target_fdn=target_fdn,
        ne_type=ne_type,
        platform_type=platform_type,
    )
