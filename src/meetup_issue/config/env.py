"""Environment configuration for the meetup issue tools.

Settings are read from environment variables prefixed with ``MEETUP_``
and from a ``.env`` file when present:

```bash
export MEETUP_TIMEZONE="Europe/Oslo"
export MEETUP_LOG_LEVEL=DEBUG
```

these are rendered to the AppConfig class and can be accessed like this:

```python
from meetup_issue.config import load_config
cfg = load_config()
print(cfg.timezone)
```
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils import DEFAULT_TIMEZONE, resolve_timezone


class AppConfig(BaseSettings):
    """Application configuration settings loaded from environment variables.

    All environment variables are prefixed with MEETUP_ (e.g., MEETUP_TIMEZONE).
    """

    # ---- meetup semantics ----
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA timezone used to read human Date/Time values",
    )

    # ---- runtime ----
    log_level: str = Field(default="INFO", description="Root logging level")
    server_name: str = Field(
        default="meetup-issue", description="Name announced by the MCP server"
    )

    # pydantic-settings v2 config
    model_config = SettingsConfigDict(
        env_prefix="MEETUP_",
        case_sensitive=False,
        env_file=(".env",),  # will read if present
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,  # make settings immutable
    )

    # ---- validators ----
    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        resolve_timezone(v)
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables.

    • All variables are prefixed with MEETUP_ (e.g., MEETUP_TIMEZONE).
    • Missing values fall back to the documented defaults.
    """
    return AppConfig()
