"""Configuration management for wrkrdocs.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from wrkrdocs.core.site import DEFAULT_BASE_PATH, DEFAULT_ORIGIN, SiteConfig

CONFIG_FILENAME = "wrkrdocs.toml"

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    """Preview server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    site: SiteConfig = field(default_factory=SiteConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for wrkrdocs.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            logger.debug("No configuration file found, using defaults")
            return cls()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        logger.info(f"Loading configuration from {path}")
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        server = cls._parse_server(data.get("server"))
        site = cls._parse_site(data.get("site"))

        return cls(server=server, site=site, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section."""
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance with trailing slashes stripped
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        origin = data.get("origin", DEFAULT_ORIGIN)
        if not isinstance(origin, str):
            raise ValueError("site.origin must be a string")

        base_path = data.get("base_path", DEFAULT_BASE_PATH)
        if not isinstance(base_path, str):
            raise ValueError("site.base_path must be a string")

        return make_site(origin, base_path)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        origin: str | None = None,
        base_path: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Raises:
            ValueError: If an overridden site value is invalid
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        site = self.site
        if origin is not None or base_path is not None:
            site = make_site(
                origin if origin is not None else self.site.origin,
                base_path if base_path is not None else self.site.base_path,
            )

        return replace(self, server=server, site=site)


def make_site(origin: str, base_path: str) -> SiteConfig:
    """Validate and normalize site settings.

    Raises:
        ValueError: If origin is not absolute or base_path lacks leading slash
    """
    origin = origin.rstrip("/")
    if not origin.startswith(("http://", "https://")):
        raise ValueError(f"site.origin must be an absolute http(s) URL: {origin!r}")

    base_path = base_path.rstrip("/")
    if base_path and not base_path.startswith("/"):
        raise ValueError(f"site.base_path must start with '/': {base_path!r}")

    return SiteConfig(origin=origin, base_path=base_path)
