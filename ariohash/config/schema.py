# ariohash/config/schema.py
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.constants import (
    DEFAULT_CHARACTER_SET, DEFAULT_OUTPUT_LENGTH, DEFAULT_PROGRESS_INTERVAL, UINT32_MAX,
)

class HashSettings(BaseModel):
    """Defaults applied to every hash request unless overridden on the command line."""
    salt: int = Field(default=0, ge=0, le=UINT32_MAX)
    output_length: int = Field(default=DEFAULT_OUTPUT_LENGTH, ge=1)
    character_set: str = DEFAULT_CHARACTER_SET
    proof_of_work_key: int = Field(default=0, ge=0, le=UINT32_MAX)
    max_iterations: Optional[int] = Field(default=None, ge=1) # None -> unbounded search
    progress_interval: int = Field(default=DEFAULT_PROGRESS_INTERVAL, ge=1)
    log_level: str = "INFO"

    @field_validator("character_set")
    @classmethod
    def _non_empty_bmp(cls, value: str) -> str:
        if not value:
            raise ValueError("character_set must not be empty")
        if any(ord(ch) > 0xFFFF for ch in value):
            raise ValueError("character_set may only contain Basic Multilingual Plane characters")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level
