"""Per-request trace of handling steps, returned to callers for diagnostics."""
from __future__ import annotations
import logging

LOGGER = logging.getLogger("food_advice.trace")


class RequestTrace:
    """Append-only list of step messages for a single request."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._entries: list[str] = []

    def log(self, msg: str) -> None:
        LOGGER.debug(msg)
        self._entries.append(msg)

    def entries(self) -> list[str] | None:
        """Copy of the trace, or None when it should not be sent back."""
        if not self.enabled:
            return None
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
