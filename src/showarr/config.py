"""Configuration for showarr clients and CLI."""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

API_KEY_PATTERN = re.compile(r"[a-z0-9]{32}")

DEFAULT_PORT = 80
DEFAULT_MAX_RESULTS = 20
DEFAULT_TIMEOUT = 120.0
DEFAULT_LOG_LEVEL = "info"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""


class InvalidConfiguration(ConfigurationError):  # noqa: N818
    """Raised when a client configuration cannot produce a usable base URL."""


class InvalidAPIKey(ConfigurationError):  # noqa: N818
    """Raised when an API key is not 32 lowercase alphanumeric characters."""


@dataclass(frozen=True)
class ClientConfig:
    """Sonarr connection configuration.

    Attributes:
        hostname: Host name of the Sonarr instance. A leading ``http://`` or
            ``https://`` is tolerated and stripped when the URL is built.
        api_key: The 32 character Sonarr API key.
        port: TCP port. Port 80 is left out of the URL.
        ssl: Use ``https`` instead of ``http``.
        url_base: Optional path prefix when Sonarr is served under a sub-path.
        username: Optional HTTP basic auth user.
        password: Optional HTTP basic auth password.
        max_results: Upper bound on the number of search results returned.
    """

    hostname: str
    api_key: str
    port: int = DEFAULT_PORT
    ssl: bool = False
    url_base: str = ""
    username: str = ""
    password: str = ""
    max_results: int = DEFAULT_MAX_RESULTS

    def validate(self) -> None:
        """Check the configuration before any network activity.

        Raises:
            InvalidConfiguration: If the hostname is empty or max_results is negative
            InvalidAPIKey: If the API key has the wrong format
        """
        if not self.hostname:
            raise InvalidConfiguration("hostname is empty")
        if API_KEY_PATTERN.fullmatch(self.api_key) is None:
            raise InvalidAPIKey(f"api key is invalid format: {self.api_key}")
        if self.max_results < 0:
            raise InvalidConfiguration(f"max_results must not be negative: {self.max_results}")

    def build_api_url(self) -> str:
        """Compose the base API URL, e.g. ``https://example.com:8989/sonarr/api``."""
        hostname = self.hostname.removeprefix("http://").removeprefix("https://")
        url_base = self.url_base.removeprefix("/")

        scheme = "https" if self.ssl else "http"
        # Only port 80 is dropped; 443 stays explicit even with ssl enabled
        host = hostname if self.port == 80 else f"{hostname}:{self.port}"
        path = f"/{url_base}/api" if url_base else "/api"

        return f"{scheme}://{host}{path}"

    @property
    def has_basic_auth(self) -> bool:
        """Whether both basic auth credentials are set."""
        return bool(self.username and self.password)


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = DEFAULT_LOG_LEVEL


_TRUE_VALUES = ("true", "1", "yes")


def _parse_int(value: Any, name: str) -> int:
    """Convert a config value to int, raising ConfigurationError on failure."""
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from e


def _parse_sonarr_from_dict(data: dict[str, Any]) -> ClientConfig | None:
    """Parse the [sonarr] section of a config dictionary.

    Args:
        data: The full config dictionary

    Returns:
        ClientConfig if hostname and api_key are both present, None otherwise
    """
    if "sonarr" not in data:
        return None
    section = data["sonarr"]
    hostname = section.get("hostname")
    api_key = section.get("api_key")
    if not hostname or not api_key:
        return None
    return ClientConfig(
        hostname=hostname,
        api_key=api_key,
        port=_parse_int(section.get("port", DEFAULT_PORT), "sonarr.port"),
        ssl=bool(section.get("ssl", False)),
        url_base=section.get("url_base", ""),
        username=section.get("username", ""),
        password=section.get("password", ""),
        max_results=_parse_int(
            section.get("max_results", DEFAULT_MAX_RESULTS), "sonarr.max_results"
        ),
    )


def _parse_sonarr_from_env(base: ClientConfig | None) -> ClientConfig | None:
    """Override Sonarr settings with environment variables.

    Hostname and API key must both be available, either from the environment
    or from the base config, for a Sonarr section to exist.

    Args:
        base: Sonarr config loaded from file, if any

    Returns:
        ClientConfig with environment overrides, or None
    """
    hostname = os.environ.get("SHOWARR_SONARR_HOSTNAME") or (base.hostname if base else None)
    api_key = os.environ.get("SHOWARR_SONARR_API_KEY") or (base.api_key if base else None)
    if not hostname or not api_key:
        return None

    defaults = base or ClientConfig(hostname=hostname, api_key=api_key)

    port_str = os.environ.get("SHOWARR_SONARR_PORT")
    ssl_str = os.environ.get("SHOWARR_SONARR_SSL")
    max_results_str = os.environ.get("SHOWARR_SONARR_MAX_RESULTS")

    return ClientConfig(
        hostname=hostname,
        api_key=api_key,
        port=_parse_int(port_str, "SHOWARR_SONARR_PORT") if port_str else defaults.port,
        ssl=ssl_str.lower() in _TRUE_VALUES if ssl_str is not None else defaults.ssl,
        url_base=os.environ.get("SHOWARR_SONARR_URL_BASE", defaults.url_base),
        username=os.environ.get("SHOWARR_SONARR_USERNAME", defaults.username),
        password=os.environ.get("SHOWARR_SONARR_PASSWORD", defaults.password),
        max_results=(
            _parse_int(max_results_str, "SHOWARR_SONARR_MAX_RESULTS")
            if max_results_str
            else defaults.max_results
        ),
    )


def _parse_logging_from_dict(data: dict[str, Any]) -> LoggingConfig:
    """Parse LoggingConfig from a config dictionary."""
    if "logging" not in data:
        return LoggingConfig()
    return LoggingConfig(level=data["logging"].get("level", DEFAULT_LOG_LEVEL))


def _parse_logging_from_env(base: LoggingConfig) -> LoggingConfig:
    """Parse LoggingConfig from environment variables."""
    level = os.environ.get("SHOWARR_LOG_LEVEL")
    if not level:
        return base
    return LoggingConfig(level=level)


@dataclass
class Config:
    """Application configuration."""

    sonarr: ClientConfig | None = None
    timeout: float = DEFAULT_TIMEOUT
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls) -> Self:
        """Load configuration from environment and config file.

        Configuration precedence (highest to lowest):
        1. Environment variables
        2. Config file (~/.config/showarr/config.toml)

        Environment variables:
        - SHOWARR_SONARR_HOSTNAME
        - SHOWARR_SONARR_API_KEY
        - SHOWARR_SONARR_PORT
        - SHOWARR_SONARR_SSL
        - SHOWARR_SONARR_URL_BASE
        - SHOWARR_SONARR_USERNAME
        - SHOWARR_SONARR_PASSWORD
        - SHOWARR_SONARR_MAX_RESULTS
        - SHOWARR_TIMEOUT (request timeout in seconds)
        - SHOWARR_LOG_LEVEL

        Returns:
            Config instance with loaded values

        Raises:
            ConfigurationError: If config file exists but is invalid
        """
        config = cls()

        # Load from config file first (lower precedence)
        config_file = Path.home() / ".config" / "showarr" / "config.toml"
        if config_file.exists():
            config = cls._load_from_file(config_file)

        # Override with environment variables (higher precedence)
        return cls._load_from_env(config)

    @classmethod
    def _load_from_file(cls, path: Path) -> Self:
        """Load configuration from TOML file.

        Args:
            path: Path to the TOML config file

        Returns:
            Config instance

        Raises:
            ConfigurationError: If file cannot be parsed
        """
        data = _load_toml_file(path)

        try:
            timeout = float(data.get("timeout", DEFAULT_TIMEOUT))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"timeout must be a number: {e}") from e

        return cls(
            sonarr=_parse_sonarr_from_dict(data),
            timeout=timeout,
            logging=_parse_logging_from_dict(data),
        )

    @classmethod
    def _load_from_env(cls, base: Self) -> Self:
        """Override configuration with environment variables.

        Args:
            base: Base config to override

        Returns:
            Config instance with environment overrides
        """
        timeout_str = os.environ.get("SHOWARR_TIMEOUT")
        try:
            timeout = float(timeout_str) if timeout_str else base.timeout
        except ValueError as e:
            raise ConfigurationError(f"SHOWARR_TIMEOUT must be a number: {e}") from e

        return cls(
            sonarr=_parse_sonarr_from_env(base.sonarr),
            timeout=timeout,
            logging=_parse_logging_from_env(base.logging),
        )

    def require_sonarr(self) -> ClientConfig:
        """Get Sonarr config, raising if not configured.

        Returns:
            ClientConfig instance

        Raises:
            ConfigurationError: If Sonarr is not configured
        """
        if self.sonarr is None:
            raise ConfigurationError(
                "Sonarr is not configured. Set SHOWARR_SONARR_HOSTNAME and "
                "SHOWARR_SONARR_API_KEY environment variables, or create "
                "~/.config/showarr/config.toml"
            )
        return self.sonarr


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Parsed TOML data as dictionary

    Raises:
        ConfigurationError: If file cannot be parsed
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid config file: {e}") from e
