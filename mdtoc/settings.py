from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from mdtoc.models.configs import DEFAULT_MARKER, DEFAULT_MAX_LEVEL, DEFAULT_MIN_LEVEL, TOCOptions

load_dotenv(override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() not in {"", "0", "false", "no"}


class Settings(BaseModel):
    """Environment-driven defaults for TOC generation."""

    min_level: int = Field(default_factory=lambda: int(os.getenv("MDTOC_MIN_LEVEL", str(DEFAULT_MIN_LEVEL))))
    max_level: int = Field(default_factory=lambda: int(os.getenv("MDTOC_MAX_LEVEL", str(DEFAULT_MAX_LEVEL))))
    ordered: bool = Field(default_factory=lambda: _env_flag("MDTOC_ORDERED"))
    line_number: bool = Field(default_factory=lambda: _env_flag("MDTOC_LINE_NUMBER"))
    section_toc: bool = Field(default_factory=lambda: _env_flag("MDTOC_SECTION_TOC"))
    marker: str = Field(default_factory=lambda: os.getenv("MDTOC_MARKER", DEFAULT_MARKER))
    log_level: str = Field(default_factory=lambda: os.getenv("MDTOC_LOG_LEVEL", "WARNING"))

    model_config = {
        "frozen": True,
    }

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported MDTOC_LOG_LEVEL '{value}'")
        return level

    def to_options(self) -> TOCOptions:
        return TOCOptions.model_validate(self.model_dump(exclude={"log_level"}))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from the environment."""

    return Settings()


__all__ = ["Settings", "get_settings"]
