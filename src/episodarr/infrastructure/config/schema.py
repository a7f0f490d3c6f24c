"""Pydantic configuration models with validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import APP_VERSION

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _normalize_path(value: Any) -> Path:
    """
    Normalize a path-like value without causing filesystem side-effects.

    This function MUST NOT create directories or files.
    """
    if isinstance(value, Path):
        return value.expanduser()
    if isinstance(value, str):
        return Path(value).expanduser()
    raise TypeError(f"Expected path-like value, got: {type(value)!r}")


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (stores/http/submission/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="episodarr", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # Stores (YAML section: stores.*)
    contents_path: Path = Field(
        default=Path("./contents.yaml"),
        validation_alias=AliasChoices(
            "contents_path",
            AliasPath("stores", "contents"),
        ),
        description="YAML store of tracked contents (rewritten on every advance).",
    )
    crawlers_path: Path = Field(
        default=Path("./crawlers.yaml"),
        validation_alias=AliasChoices(
            "crawlers_path",
            AliasPath("stores", "crawlers"),
        ),
        description="YAML store of crawler (discovery) configurations.",
    )
    fetchers_path: Path = Field(
        default=Path("./fetchers.yaml"),
        validation_alias=AliasChoices(
            "fetchers_path",
            AliasPath("stores", "fetchers"),
        ),
        description="YAML store of fetcher (submission) configurations.",
    )

    # Discovery HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds for crawler requests.",
    )
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Whether the crawler HTTP client follows redirects.",
    )

    # Download service (YAML section: submission.*)
    submission_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "submission_timeout_seconds",
            AliasPath("submission", "timeout_seconds"),
        ),
        description="Per-request timeout for the download service.",
    )
    submission_user_agent: str = Field(
        default=f"episodarr/{APP_VERSION}",
        validation_alias=AliasChoices(
            "submission_user_agent",
            AliasPath("submission", "user_agent"),
        ),
        description="User-Agent sent to the download service.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )
    log_file: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_file",
            AliasPath("logging", "file"),
        ),
        description="Optional file every log line is appended to.",
    )

    @field_validator("contents_path", "crawlers_path", "fetchers_path", mode="before")
    @classmethod
    def _validate_paths(cls, v: Any) -> Path:
        return _normalize_path(v)

    @field_validator("log_file", mode="before")
    @classmethod
    def _validate_log_file(cls, v: Any) -> Path | None:
        if v is None or v == "":
            return None
        return _normalize_path(v)

    @field_validator("http_timeout_seconds", "submission_timeout_seconds")
    @classmethod
    def _validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be > 0")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read EPISODARR_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - EPISODARR_CONTENTS_PATH
    - EPISODARR_HTTP_TIMEOUT_SECONDS
    - EPISODARR_LOG_LEVEL
    - EPISODARR_LOG_FILE
    """

    model_config = SettingsConfigDict(
        env_prefix="EPISODARR_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    contents_path: Optional[Path] = None
    crawlers_path: Optional[Path] = None
    fetchers_path: Optional[Path] = None

    http_timeout_seconds: Optional[float] = None
    http_follow_redirects: Optional[bool] = None

    submission_timeout_seconds: Optional[float] = None
    submission_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None
    log_file: Optional[Path] = None

    def to_update_dict(self) -> dict[str, Any]:
        """Return only explicitly-set env values (flat keys)."""
        return self.model_dump(exclude_none=True)
