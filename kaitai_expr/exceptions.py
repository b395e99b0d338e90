from __future__ import annotations

from enum import Enum


class InvalidFloatKind(Enum):
    """Reason a raw double cannot become a float literal payload."""

    NEGATIVE = "negative"
    NON_FINITE = "non-finite"


class InvalidFloatError(ValueError):
    """Raised when a raw double is NaN, infinite or carries a negative sign."""

    def __init__(self, kind: InvalidFloatKind, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.value} float is not a valid literal: {value!r}")


class UnsupportedStringError(AssertionError):
    """Raised when a string literal cannot be written in single-quoted form.

    Single-quoted strings are read completely literally, so there is no way
    to embed a single quote in one. Trees carrying such strings are a defect
    of whatever built them; this is never caught inside the package.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"strings containing a single quote (') not supported yet (got {value})"
        )


class TreeFormatError(ValueError):
    """Raised when a serialized expression tree cannot be loaded."""

    pass
