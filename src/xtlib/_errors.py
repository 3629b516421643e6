from __future__ import annotations

from typing import Any


class NotFoundError(LookupError):
    """Raised by ``Set.remove`` and ``Set.pop`` when the value has no equal element."""

    message = "value is not present in the set"

    def __init__(self, value: Any) -> None:
        super().__init__(self.message)
        self.value = value
