"""
SLHA Line - one physical line split into fields.

A line is a list of whitespace-delimited tokens, optionally followed by a
single comment token that starts with "#" and runs to the end of the line.
Next to the tokens the line keeps a format descriptor: the output column of
every token. Parsing records the columns the tokens were found at, so an
untouched line is written back exactly as it was read. reformat() replaces
the recorded columns with the canonical SLHA layout.

Known limitation: columns are recovered by searching for each token's text
from the end of the previous match. The search does not check that the hit
is a whole token, so the recovered layout is only as good as that scan.
"""

from __future__ import annotations

from typing import Iterator

from slhakit.errors import SLHAOutOfRangeError
from slhakit.spec import BLOCK_KEYWORDS, COMMENT_CHAR, DATA_INDENT, MIN_GAP, TAB_WIDTH


class SLHALine:
    """
    Tokens of one line plus the columns they are written at.

    Usage:
        line = SLHALine.parse("   1   1.0   # m0")
        line[1]             -> "1.0"
        line.data_size()    -> 2
        line[1] = "2.0"
        line.serialize()    -> "   1   2.0   # m0"
    """

    def __init__(self, text: str = "") -> None:
        self._fields: list[str] = []
        self._columns: list[int] = []
        if text:
            self.assign(text)

    @classmethod
    def parse(cls, text: str) -> SLHALine:
        """Build a line from one physical line of text."""
        return cls(text)

    # -------------------------------------------------------------------------
    # Parsing / serialization
    # -------------------------------------------------------------------------

    def assign(self, text: str) -> SLHALine:
        """Replace the contents of this line by parsing ``text``.

        Anything after the first newline is ignored.
        """
        self.clear()
        text = text.split("\n", 1)[0]
        stripped = text.strip()
        if not stripped:
            return self

        comment_pos = stripped.find(COMMENT_CHAR)
        if comment_pos < 0:
            comment_pos = len(stripped)
        data = stripped[:comment_pos].strip()
        comment = stripped[comment_pos:].strip()

        if data:
            self._fields = data.split()
        if comment:
            self._fields.append(comment)

        pos = 0
        for token in self._fields:
            pos = text.find(token, pos)
            self._columns.append(pos)
            pos += len(token)
        return self

    def serialize(self) -> str:
        """Render the tokens at their recorded columns."""
        out = ""
        for i, (column, token) in enumerate(zip(self._columns, self._fields)):
            if i:
                out += " "
            if len(out) < column:
                out = out.ljust(column)
            out += token
        return out

    def serialize_plain(self) -> str:
        """Tokens joined by single spaces, ignoring the recorded columns."""
        return " ".join(self._fields)

    def reformat(self) -> SLHALine:
        """Drop the recorded columns and compute the canonical layout."""
        self._columns = []
        if not self._fields:
            return self

        first = self._fields[0]
        if first.upper() in BLOCK_KEYWORDS:
            # Keyword at column 0, block name one space after it
            self._columns.append(0)
            pos = len(first)
            start = 1
            if len(self._fields) > 1:
                pos += 1
                self._columns.append(pos)
                pos += len(self._fields[1])
                start = 2
        elif first.startswith(COMMENT_CHAR):
            self._columns.append(0)
            pos = len(first)
            start = 1
        else:
            self._columns.append(DATA_INDENT)
            pos = DATA_INDENT + len(first)
            start = 1

        for token in self._fields[start:]:
            pos += _tab_padding(pos)
            self._columns.append(pos)
            pos += len(token)
        return self

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def append(self, text: str) -> SLHALine:
        """Append raw text to the serialized line and parse the result again."""
        return self.assign(self.serialize() + text)

    def add_field(self, value: object) -> SLHALine:
        """Add ``value`` as a new field, or extend the trailing comment."""
        text = str(value)
        trimmed = text.strip()
        if not trimmed:
            return self
        if self._fields and COMMENT_CHAR in self._fields[-1]:
            self._fields[-1] += text
            return self
        self._fields.append(trimmed)
        self.reformat()
        return self

    def clear(self) -> None:
        self._fields = []
        self._columns = []

    def swap(self, other: SLHALine) -> None:
        self._fields, other._fields = other._fields, self._fields
        self._columns, other._columns = other._columns, self._columns

    def copy(self) -> SLHALine:
        line = SLHALine()
        line._fields = list(self._fields)
        line._columns = list(self._columns)
        return line

    def __iadd__(self, text: str) -> SLHALine:
        return self.append(text)

    def __lshift__(self, value: object) -> SLHALine:
        return self.add_field(value)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def is_block_def(self) -> bool:
        return bool(self._fields) and self._fields[0].upper() in BLOCK_KEYWORDS

    def is_comment_line(self) -> bool:
        return bool(self._fields) and self._fields[0].startswith(COMMENT_CHAR)

    def is_data_line(self) -> bool:
        return bool(self._fields) and not self.is_block_def() and not self.is_comment_line()

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    def at(self, index: int) -> str:
        """Checked access: only 0 <= index < len(self) is accepted."""
        if not 0 <= index < len(self._fields):
            raise SLHAOutOfRangeError(
                f"SLHALine.at({index}): line has {len(self._fields)} fields"
            )
        return self._fields[index]

    def front(self) -> str:
        return self._fields[0]

    def back(self) -> str:
        return self._fields[-1]

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._fields)

    @property
    def columns(self) -> tuple[int, ...]:
        return tuple(self._columns)

    def __getitem__(self, index: int) -> str:
        return self._fields[index]

    def __setitem__(self, index: int, value: object) -> None:
        self._fields[index] = str(value)

    # -------------------------------------------------------------------------
    # Capacity / iteration
    # -------------------------------------------------------------------------

    def size(self) -> int:
        return len(self._fields)

    def data_size(self) -> int:
        """Number of fields, not counting a trailing comment."""
        size = len(self._fields)
        if size and self._fields[-1].startswith(COMMENT_CHAR):
            size -= 1
        return size

    def empty(self) -> bool:
        return not self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __bool__(self) -> bool:
        return bool(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._fields)

    def __contains__(self, token: object) -> bool:
        return token in self._fields

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return self._fields == other._fields and self.serialize() == other.serialize()

    def __lt__(self, other: SLHALine) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return self._fields < other._fields

    def __gt__(self, other: SLHALine) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return other._fields < self._fields

    def __le__(self, other: SLHALine) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return not other._fields < self._fields

    def __ge__(self, other: SLHALine) -> bool:
        if not isinstance(other, SLHALine):
            return NotImplemented
        return not self._fields < other._fields

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"SLHALine({self.serialize()!r})"


def _tab_padding(end: int) -> int:
    """Spaces after a token ending at ``end`` to reach the next tab stop."""
    pad = (TAB_WIDTH - 1) - ((end - 1) % TAB_WIDTH)
    if pad < MIN_GAP:
        pad += TAB_WIDTH
    return pad


def split_lines(text: str) -> list[str]:
    """Split ``text`` into physical lines at "\\n" only.

    A final newline does not start another line. A "\\r" left over from
    "\\r\\n" is whitespace and is dropped when the line is parsed.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines
