"""
SLHA errors.

Every exception raised by slhakit derives from SLHAError and from the
builtin exception a caller would expect for the same failure, so
``except KeyError`` keeps working around ``doc.at("MASS")``.
"""

from __future__ import annotations


class SLHAError(Exception):
    """Base class for slhakit errors."""


class SLHAKeyFormatError(SLHAError, ValueError):
    """A field key string is not of the form <block>;<tokens>;<field>."""


class SLHANotFoundError(SLHAError, KeyError):
    """An at-style lookup found nothing."""

    def __init__(self, message: str, key: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.message


class SLHAOutOfRangeError(SLHAError, IndexError):
    """Checked field access outside the line."""
