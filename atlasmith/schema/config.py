"""Packing configuration."""

from __future__ import annotations
from typing import Any, Literal
from pydantic import BaseModel, Field, ConfigDict, ValidationError

from atlasmith.exceptions import ConfigError

DEFAULT_MIN_SIZE = 256
DEFAULT_MAX_SIZE = 1024


class PackConfig(BaseModel):
    """
    Canvas bounds for the doubling search plus the output image format.

    A minimum larger than its maximum is allowed; that axis then only
    tries the maximum.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    min_width: int = Field(DEFAULT_MIN_SIZE, gt=0, description="First canvas width tried.")
    min_height: int = Field(DEFAULT_MIN_SIZE, gt=0, description="First canvas height tried.")
    max_width: int = Field(DEFAULT_MAX_SIZE, gt=0, description="Largest canvas width; also the record width limit.")
    max_height: int = Field(DEFAULT_MAX_SIZE, gt=0, description="Largest canvas height; also the record height limit.")
    output_format: Literal['PNG'] = Field('PNG', description="Pillow format name for page images.")


def make_config(**overrides: Any) -> PackConfig:
    """
    Build a PackConfig, dropping None overrides.

    Raises:
        ConfigError: If any value is invalid (e.g. non-positive dimensions)
    """
    values = {k: v for k, v in overrides.items() if v is not None}
    try:
        return PackConfig(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
