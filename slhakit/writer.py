"""
SLHA Writer - turns a document back into text.

Every line is written at the columns recorded for it (see SLHALine) and
terminated with a newline; blocks are written one after the other.
"""

from __future__ import annotations

from typing import TextIO

from slhakit.document import SLHADocument
from slhakit.spec import LINE_TERMINATOR


class SLHAWriter:
    """Serialize SLHADocument objects."""

    @staticmethod
    def serialize(doc: SLHADocument, plain: bool = False) -> str:
        """
        Serialize a document to a string.

        With ``plain=True`` the recorded columns are ignored and the fields
        of every line are joined by single spaces.
        """
        parts: list[str] = []
        for block in doc:
            for line in block:
                parts.append(line.serialize_plain() if plain else line.serialize())
                parts.append(LINE_TERMINATOR)
        return "".join(parts)

    @classmethod
    def write(cls, doc: SLHADocument, handle: TextIO, plain: bool = False) -> int:
        """Write a document to a text stream. Returns characters written."""
        text = cls.serialize(doc, plain=plain)
        handle.write(text)
        return len(text)
