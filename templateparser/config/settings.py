"""
settings.py

Application configuration for the template engine.

Features:
- Centralized configuration using Pydantic settings
- Environment overrides with the `TPL_` prefix
- Default token delimiters and scope keyword for new parsers

Usage:
Import appsettings for configuration values.
"""

from typing import Final
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with TPL_ prefix.

    Attributes:
        beQuiet: Suppress debug logging output
        noComplain: Suppress warnings about tolerated template faults
        tokenOpen: Character that opens a token
        tokenClose: Character that closes a token
        scopeKeyword: Keyword that opens a scope; "/" + keyword closes it
    """

    beQuiet: bool = False
    noComplain: bool = False

    tokenOpen: str = "["
    tokenClose: str = "]"
    scopeKeyword: str = "with"

    model_config = SettingsConfigDict(
        env_prefix="TPL_",
        case_sensitive=False,
        extra="allow",
    )

    @field_validator("tokenOpen", "tokenClose")
    @classmethod
    def delimiter_check(cls, value: str) -> str:
        """Token delimiters are single characters."""
        if len(value) != 1:
            raise ValueError(f"Token delimiter must be a single character: {value!r}")
        return value

    @field_validator("scopeKeyword")
    @classmethod
    def keyword_check(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            raise ValueError(f"Invalid scope keyword: {value!r}")
        return value


# Create the application settings instance
appsettings: Final[App] = App()
