"""Exception types shared across crudgen."""

from __future__ import annotations


class CrudGenError(Exception):
    """Base class for recoverable, user-facing errors.

    Every error is scoped to the configuration field it concerns so callers
    can attach the message next to the offending input.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
