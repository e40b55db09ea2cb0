from __future__ import annotations


class LibraryError(Exception):
    """Base class for catalog errors."""


class ValidationError(LibraryError, ValueError):
    """A caller-supplied argument is not acceptable (e.g. an empty title)."""


class DecodeError(LibraryError):
    """A stored line does not match the record grammar.

    Returned by the codec rather than raised, so the loader can skip the line
    and keep going.
    """

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason
