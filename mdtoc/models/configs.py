from __future__ import annotations

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

DEFAULT_MARKER = "<!--TOC-->"
DEFAULT_MIN_LEVEL = 1
DEFAULT_MAX_LEVEL = 3


class TOCOptions(BaseModel):
    """Read-only settings shared by the parser, generator and marker handler."""

    min_level: int = Field(default=DEFAULT_MIN_LEVEL, description="Shallowest heading level to list (1-6)")
    max_level: int = Field(default=DEFAULT_MAX_LEVEL, description="Deepest heading level to list (1-6)")
    ordered: bool = False
    line_number: bool = False
    section_toc: bool = False
    marker: str = DEFAULT_MARKER

    model_config = {
        "frozen": True,
    }

    @field_validator("min_level", "max_level")
    @classmethod
    def _check_level(cls, value: int, info: ValidationInfo) -> int:
        if value < 1 or value > 6:
            raise ValueError(f"{info.field_name} must be between 1 and 6, got {value}")
        return value

    @field_validator("marker", mode="before")
    @classmethod
    def _default_marker(cls, value: object) -> str:
        if value is None:
            return DEFAULT_MARKER
        text = str(value).strip()
        return text or DEFAULT_MARKER

    @model_validator(mode="after")
    def _check_range(self) -> "TOCOptions":
        if self.min_level > self.max_level:
            raise ValueError(
                f"min_level ({self.min_level}) must not be greater than max_level ({self.max_level})"
            )
        return self


def default_options() -> TOCOptions:
    """Return the default configuration."""

    return TOCOptions()


__all__ = [
    "DEFAULT_MARKER",
    "DEFAULT_MAX_LEVEL",
    "DEFAULT_MIN_LEVEL",
    "TOCOptions",
    "default_options",
]
