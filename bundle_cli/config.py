"""Configuration, read from BUNDLE_ANALYZER_* environment variables."""

import shlex
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_ENGINE_COMMAND = "tuist inspect bundle {path} --json"
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseSettings):
    """Settings for one invocation.

    BUNDLE_ANALYZER_ENGINE_COMMAND is a shell-style command line; the
    `{path}` token is replaced by the archive path.
    """

    model_config = SettingsConfigDict(
        env_prefix="BUNDLE_ANALYZER_",
        env_ignore_empty=True,
        frozen=True,
    )

    engine_command: Annotated[List[str], NoDecode] = shlex.split(DEFAULT_ENGINE_COMMAND)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("engine_command", mode="before")
    @classmethod
    def split_engine_command(cls, v):
        if isinstance(v, str):
            return shlex.split(v)
        return v

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.upper()


def load_settings() -> Settings:
    return Settings()


def get_engine_command() -> List[str]:
    """Get the analyzer command line, split shell-style."""
    return load_settings().engine_command


def get_log_level() -> str:
    """Get the log level name."""
    return load_settings().log_level
