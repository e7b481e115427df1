from __future__ import annotations

import logging
import os

from pydantic import BaseModel, field_validator, model_validator

from .exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM_NAME = "filecopy"
DEFAULT_STRATEGY = "buffer"
DEFAULT_MIN_BUFFER_SIZE = 512
DEFAULT_MAX_BUFFER_SIZE = 1024**2
FALLBACK_PATH_MAX = 4096


def platform_path_max() -> int:
    """Longest path, in bytes, the platform accepts."""
    try:
        path_max = os.pathconf("/", "PC_PATH_MAX")
    except (AttributeError, OSError, ValueError):
        logger.debug(f"PC_PATH_MAX not available, using {FALLBACK_PATH_MAX}")
        return FALLBACK_PATH_MAX
    if path_max <= 0:
        return FALLBACK_PATH_MAX
    return path_max


class CopyConfig(BaseModel):
    program_name: str = DEFAULT_PROGRAM_NAME
    strategy: str = DEFAULT_STRATEGY
    min_buffer_size: int = DEFAULT_MIN_BUFFER_SIZE
    max_buffer_size: int = DEFAULT_MAX_BUFFER_SIZE
    path_max: int = platform_path_max()

    @field_validator("program_name", "strategy")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ConfigValidationError(
                "Names in the copy configuration cannot be empty"
            )
        return value

    @field_validator("strategy")
    @classmethod
    def normalize_strategy(cls, strategy: str) -> str:
        return strategy.strip().lower()

    @field_validator("min_buffer_size", "max_buffer_size", "path_max")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        if value <= 0:
            raise ConfigValidationError(
                f"Sizes in the copy configuration must be positive, got {value}"
            )
        return value

    @model_validator(mode="after")
    def validate_buffer_bounds(self) -> CopyConfig:
        if self.min_buffer_size > self.max_buffer_size:
            raise ConfigValidationError(
                f"min_buffer_size ({self.min_buffer_size}) cannot exceed "
                f"max_buffer_size ({self.max_buffer_size})"
            )
        return self

    def clamp_buffer_size(self, block_size: int) -> int:
        return max(self.min_buffer_size, min(block_size, self.max_buffer_size))
