"""
Configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables through :meth:`Settings.from_env`.  Only the
admin password is mandatory; everything else has a default.  The
listen address is fixed and is not exposed through the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing at startup."""


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Instances are immutable.  Build one with :meth:`from_env` in
    production, or pass values directly in tests.
    """

    admin_password: str
    project_name: str = "Coaster API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # The listener always binds to port 8080 on all interfaces.
    host: str = field(default="0.0.0.0", init=False)
    port: int = field(default=8080, init=False)

    def __post_init__(self) -> None:
        if not self.admin_password:
            raise ConfigurationError("need to set env variable for ADMIN_PASSWORD")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises
        ------
        ConfigurationError
            If ``ADMIN_PASSWORD`` is unset or empty.
        """
        env = os.environ if environ is None else environ
        return cls(
            admin_password=env.get("ADMIN_PASSWORD", ""),
            project_name=env.get("PROJECT_NAME", "Coaster API"),
            api_version=env.get("API_VERSION", "1.0.0"),
            log_level=env.get("LOG_LEVEL", "INFO"),
            log_file=env.get("LOG_FILE") or None,
        )
