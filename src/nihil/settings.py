"""nihil configuration using Pydantic settings.

Settings are loaded from environment variables with the ``NIHIL_`` prefix.
The core lookup functions never read configuration; only the recursive
shape utilities consult it.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NihilSettings(BaseSettings):
    """Configuration for the recursive shape utilities.

    Environment Variables:
        NIHIL_DETECT_CYCLES: Track containers on the recursion path and raise
            CyclicReferenceError when one is re-entered (default: true)

    Example:
        >>> settings = NihilSettings()
        >>> settings.detect_cycles
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="NIHIL_",
        extra="ignore",
    )

    detect_cycles: bool = Field(
        default=True,
        description="Raise on cyclic container graphs instead of recursing forever",
    )


@lru_cache(maxsize=1)
def get_settings() -> NihilSettings:
    """Get cached nihil settings singleton.

    Clear cache with ``get_settings.cache_clear()`` for testing.

    Returns:
        NihilSettings instance loaded from environment.
    """
    return NihilSettings()
