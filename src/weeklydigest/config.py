"""Application configuration.

Configuration is loaded from environment variables. For local use, you can provide a
`.env` file and set `WEEKLYDIGEST_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DigestSettings(BaseModel):
    """Text fragments placed between the page outline and the journal backlog."""

    separator: str = "----"
    backlog_heading: str = "## Backlog"


class Settings(BaseSettings):
    """weeklydigest settings.

    All fields are environment-configurable. Prefix is `WEEKLYDIGEST_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="WEEKLYDIGEST_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    # Default graph snapshot used by the CLI when --snapshot is not given
    snapshot_path: Path | None = Field(default=None)

    # Document layout
    separator: str = Field(default="----", min_length=1)
    backlog_heading: str = Field(default="## Backlog", min_length=1)

    def digest_settings(self) -> DigestSettings:
        """Return the subset of settings that shapes the digest text."""

        return DigestSettings(separator=self.separator, backlog_heading=self.backlog_heading)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("WEEKLYDIGEST_ENV_FILE")
    if env_file_override:
        return Settings(_env_file=Path(env_file_override))

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
