"""Hook configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_ID_FIELD = "id"
DEFAULT_DEBUG_LEVEL = "INFO"


@dataclass
class HooksConfig:
    """Settings shared by the built-in hooks.

    Attributes:
        id_field: Primary-key field used to match the record being updated
            when the data service does not advertise its own ``id``.
        debug_level: Logging level name used by ``debug`` hooks.
    """

    id_field: str = DEFAULT_ID_FIELD
    debug_level: str = DEFAULT_DEBUG_LEVEL

    def __post_init__(self) -> None:
        self.debug_level = self.debug_level.upper()

    @classmethod
    def from_env(cls) -> HooksConfig:
        """Create config from environment variables.

        Resolution order for each setting:
        1. HOOKKIT_ID_FIELD / HOOKKIT_DEBUG_LEVEL env vars
        2. Built-in defaults ("id", "INFO")
        """
        return cls(
            id_field=os.environ.get("HOOKKIT_ID_FIELD") or DEFAULT_ID_FIELD,
            debug_level=os.environ.get("HOOKKIT_DEBUG_LEVEL") or DEFAULT_DEBUG_LEVEL,
        )

    @property
    def debug_level_number(self) -> int:
        """Numeric level for ``debug_level``.

        Checked on use so that only ``debug`` hooks fail on a bad level.

        Raises:
            ValueError: If ``debug_level`` is not a logging level name
        """
        level = logging.getLevelName(self.debug_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {self.debug_level}")
        return level
