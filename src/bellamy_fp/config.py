"""
Configuration for bellamy_fp.
"""

import logging
import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# --- Environment Variables ---
ENV_PREFIX: Final[str] = "BELLAMY_FP_"
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = f"{ENV_PREFIX}BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = f"{ENV_PREFIX}BEARTYPE_ALL"

# --- Flag Parsing ---
ENABLED_FLAG_VALUE: Final[str] = "1"

# --- Array Defaults ---
DEFAULT_RANGE_STEP: Final[int] = 1


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""
    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
    )


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "0").strip() == ENABLED_FLAG_VALUE


class RuntimeSettings(ImmutableModel):
    """
    Runtime switches read once when the package is imported.
    """
    beartype_this_package: bool = Field(
        default=False,
        description="Instrument bellamy_fp itself with beartype runtime checks.",
    )
    beartype_all: bool = Field(
        default=False,
        description="Instrument every later import, reporting violations as UserWarning.",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RuntimeSettings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        source = os.environ if environ is None else environ
        settings = cls(
            beartype_this_package=_flag(source, BEARTYPE_THIS_PACKAGE_ENV),
            beartype_all=_flag(source, BEARTYPE_ALL_ENV),
        )
        logger.debug("Resolved runtime settings: %s", settings)
        return settings


# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "DEFAULT_RANGE_STEP",
    "ENABLED_FLAG_VALUE",
    "ENV_PREFIX",
    "ImmutableModel",
    "RuntimeSettings",
]
