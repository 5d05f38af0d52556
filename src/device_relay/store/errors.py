"""Domain errors raised by the in-memory stores.

The HTTP layer maps each error to a response using its `status_code`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(eq=False)
class RelayError(Exception):
    message: str

    status_code: ClassVar[int] = 400

    def __str__(self) -> str:
        return self.message


class MissingField(RelayError):
    """A required input field was absent or empty."""


@dataclass(eq=False)
class InvalidType(RelayError):
    """The trigger type is not one of the supported values."""

    valid_types: tuple[str, ...] = field(default_factory=tuple)


class NotFound(RelayError):
    status_code: ClassVar[int] = 404
