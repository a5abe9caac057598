"""
SLHA Document - ordered blocks of lines.

    doc = SLHADocument.parse(text)
    doc["MASS"]                 -> SLHABlock (created if missing)
    doc.at("mass").at(25)[1]    -> "1.15e+02" (block names are case-insensitive)
    doc.field("MASS;25;1")      -> "1.15e+02"
    doc.set_field("MASS;25;1", "1.20e+02")
    print(doc.serialize())

Blocks are kept in file order. Several blocks may share a name; lookups by
name return the first one, get_blocks() returns all of them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, TextIO, Union

from slhakit.errors import SLHANotFoundError, SLHAOutOfRangeError
from slhakit.key import SLHAFieldKey
from slhakit.line import SLHALine, split_lines
from slhakit.spec import LINE_TERMINATOR, WILDCARD

logger = logging.getLogger(__name__)

# What a caller may pass as a line key
LineKey = Union[str, int, Iterable[Union[str, int]]]


def to_key_tokens(keys: LineKey) -> list[str]:
    """Normalize a line key to a list of string tokens.

    A string is split on whitespace, an int becomes its decimal form and any
    other iterable is converted element by element.
    """
    if isinstance(keys, str):
        return keys.split()
    if isinstance(keys, int):
        return [str(keys)]
    return [str(k) for k in keys]


def key_matches(keys: list[str], line: SLHALine) -> bool:
    """True if ``keys`` equal the leading fields of ``line``, honouring the wildcard."""
    if len(keys) > len(line):
        return False
    return all(k == WILDCARD or k == f for k, f in zip(keys, line))


def name_matches(name: str, block: SLHABlock) -> bool:
    return name.casefold() == block.name.casefold()


class SLHABlock:
    """
    A named, ordered list of lines.

    Lines are looked up by their leading fields: block.at(1, 2) returns the
    first line starting with "1" "2". The token "(any)" matches every value.
    """

    def __init__(self, name: str = "", lines: Iterable[SLHALine | str] = ()) -> None:
        self.name = name
        self._lines: list[SLHALine] = []
        for line in lines:
            self.append(line)

    @classmethod
    def parse(cls, text: str, name: str | None = None) -> SLHABlock:
        """Build a block with one line per physical line of ``text``.

        Without an explicit ``name`` the block is named after the first
        block definition found in the text.
        """
        block = cls(name or "")
        for raw in split_lines(text):
            line = SLHALine(raw)
            if name is None and not block.name and line.is_block_def() and line.data_size() > 1:
                block.name = line[1]
            block._lines.append(line)
        return block

    def serialize(self) -> str:
        return "".join(line.serialize() + LINE_TERMINATOR for line in self._lines)

    # -------------------------------------------------------------------------
    # Key lookup
    # -------------------------------------------------------------------------

    def find(self, keys: LineKey) -> int | None:
        """Position of the first line matching ``keys``, or None."""
        tokens = to_key_tokens(keys)
        if not tokens:
            return None
        for pos, line in enumerate(self._lines):
            if key_matches(tokens, line):
                return pos
        return None

    def lookup(self, keys: LineKey) -> SLHALine | None:
        pos = self.find(keys)
        return None if pos is None else self._lines[pos]

    def at(self, *keys: str | int) -> SLHALine:
        """First line matching the key; raises SLHANotFoundError otherwise.

        Accepts a single key (string, int or list) or several tokens:
            block.at("1 2") == block.at([1, 2]) == block.at(1, 2)
        """
        tokens = to_key_tokens(keys[0] if len(keys) == 1 else keys)
        line = self.lookup(tokens)
        if line is None:
            raise SLHANotFoundError(
                f"SLHABlock.at({' '.join(tokens)!r}): no matching line in block {self.name!r}",
                key=tokens,
            )
        return line

    def __getitem__(self, keys: LineKey) -> SLHALine:
        """First line matching the key; appends an empty line if there is none."""
        line = self.lookup(keys)
        if line is None:
            logger.debug("Block %r: no line for key %r, appending empty line", self.name, keys)
            line = SLHALine()
            self._lines.append(line)
        return line

    def __contains__(self, keys: LineKey) -> bool:
        return self.find(keys) is not None

    # -------------------------------------------------------------------------
    # Sequence access
    # -------------------------------------------------------------------------

    @property
    def lines(self) -> list[SLHALine]:
        """The lines of this block (live list)."""
        return self._lines

    def front(self) -> SLHALine:
        return self._lines[0]

    def back(self) -> SLHALine:
        return self._lines[-1]

    def append(self, line: SLHALine | str) -> SLHALine:
        if isinstance(line, str):
            line = SLHALine(line)
        self._lines.append(line)
        return line

    def insert(self, pos: int, line: SLHALine | str) -> SLHALine:
        if isinstance(line, str):
            line = SLHALine(line)
        self._lines.insert(pos, line)
        return line

    def pop(self, pos: int = -1) -> SLHALine:
        return self._lines.pop(pos)

    def remove(self, line: SLHALine) -> None:
        self._lines.remove(line)

    def clear(self) -> None:
        self._lines.clear()

    def swap(self, other: SLHABlock) -> None:
        self.name, other.name = other.name, self.name
        self._lines, other._lines = other._lines, self._lines

    def copy(self) -> SLHABlock:
        block = SLHABlock(self.name)
        block._lines = [line.copy() for line in self._lines]
        return block

    def size(self) -> int:
        return len(self._lines)

    def empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[SLHALine]:
        return iter(self._lines)

    def __reversed__(self) -> Iterator[SLHALine]:
        return reversed(self._lines)

    # -------------------------------------------------------------------------
    # Comparison: tokens only, the layout of the lines is ignored.
    # Ordering is only defined between blocks of the same size.
    # -------------------------------------------------------------------------

    def _tokens(self) -> list[list[str]]:
        return [list(line) for line in self._lines]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SLHABlock):
            return NotImplemented
        return len(self) == len(other) and self._tokens() == other._tokens()

    def __lt__(self, other: SLHABlock) -> bool:
        if not isinstance(other, SLHABlock) or len(self) != len(other):
            return NotImplemented
        return self._tokens() < other._tokens()

    def __gt__(self, other: SLHABlock) -> bool:
        if not isinstance(other, SLHABlock) or len(self) != len(other):
            return NotImplemented
        return other._tokens() < self._tokens()

    def __le__(self, other: SLHABlock) -> bool:
        if not isinstance(other, SLHABlock) or len(self) != len(other):
            return NotImplemented
        return not other._tokens() < self._tokens()

    def __ge__(self, other: SLHABlock) -> bool:
        if not isinstance(other, SLHABlock) or len(self) != len(other):
            return NotImplemented
        return not self._tokens() < other._tokens()

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"SLHABlock(name={self.name!r}, lines={len(self._lines)})"


class SLHADocument:
    """
    An SLHA file: blocks in file order.

    Usage:
        doc = SLHADocument.parse(text)

        # Read from any line source
        with open("spectrum.slha") as f:
            doc = SLHADocument().read(f)

        # Address one field
        doc.field("MINPAR;1;1")
        doc["MINPAR"][3][1] = "10"
    """

    def __init__(self, blocks: Iterable[SLHABlock] = ()) -> None:
        self._blocks: list[SLHABlock] = list(blocks)

    @classmethod
    def parse(cls, data: str | bytes) -> SLHADocument:
        """Parse a complete SLHA text into a new document."""
        from slhakit.reader import SLHAReader
        return SLHAReader.parse(data)

    def read(self, source: str | Iterable[str] | TextIO) -> SLHADocument:
        """Parse ``source`` and append its blocks to this document."""
        from slhakit.reader import SLHAReader
        lines = split_lines(source) if isinstance(source, str) else source
        return SLHAReader.read_into(self, lines)

    def serialize(self, plain: bool = False) -> str:
        from slhakit.writer import SLHAWriter
        return SLHAWriter.serialize(self, plain=plain)

    # -------------------------------------------------------------------------
    # Name lookup
    # -------------------------------------------------------------------------

    def find(self, name: str) -> int | None:
        """Position of the first block named ``name`` (case-insensitive), or None."""
        for pos, block in enumerate(self._blocks):
            if name_matches(name, block):
                return pos
        return None

    def lookup(self, name: str) -> SLHABlock | None:
        pos = self.find(name)
        return None if pos is None else self._blocks[pos]

    def at(self, name: str) -> SLHABlock:
        block = self.lookup(name)
        if block is None:
            raise SLHANotFoundError(f"SLHADocument.at({name!r}): no such block", key=name)
        return block

    def get_blocks(self, name: str) -> list[SLHABlock]:
        """All blocks named ``name``, in file order."""
        return [b for b in self._blocks if name_matches(name, b)]

    @property
    def names(self) -> list[str]:
        return [b.name for b in self._blocks]

    def __getitem__(self, name: str) -> SLHABlock:
        """First block named ``name``; appends an empty one if there is none."""
        block = self.lookup(name)
        if block is None:
            logger.debug("No block %r, appending empty block", name)
            block = SLHABlock(name)
            self._blocks.append(block)
        return block

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    # -------------------------------------------------------------------------
    # Field access
    # -------------------------------------------------------------------------

    def field(self, key: SLHAFieldKey | str) -> str:
        """Resolve a field key; raises SLHANotFoundError if any step fails."""
        line, index = self._resolve(key)
        return line[index]

    def set_field(self, key: SLHAFieldKey | str, value: object) -> None:
        """Replace the field addressed by ``key``; the line keeps its layout."""
        line, index = self._resolve(key)
        line[index] = value

    def _resolve(self, key: SLHAFieldKey | str) -> tuple[SLHALine, int]:
        if isinstance(key, str):
            key = SLHAFieldKey.parse(key)
        line = self.at(key.block).at(list(key.line))
        try:
            line.at(key.field)
        except SLHAOutOfRangeError as e:
            raise SLHANotFoundError(
                f"SLHADocument.field({str(key)!r}): {e}", key=key
            ) from e
        return line, key.field

    # -------------------------------------------------------------------------
    # Sequence access
    # -------------------------------------------------------------------------

    @property
    def blocks(self) -> list[SLHABlock]:
        """The blocks of this document (live list)."""
        return self._blocks

    def front(self) -> SLHABlock:
        return self._blocks[0]

    def back(self) -> SLHABlock:
        return self._blocks[-1]

    def append(self, block: SLHABlock) -> SLHABlock:
        self._blocks.append(block)
        return block

    def insert(self, pos: int, block: SLHABlock) -> SLHABlock:
        self._blocks.insert(pos, block)
        return block

    def pop(self, pos: int = -1) -> SLHABlock:
        return self._blocks.pop(pos)

    def remove(self, block: SLHABlock) -> None:
        self._blocks.remove(block)

    def clear(self) -> None:
        self._blocks.clear()

    def swap(self, other: SLHADocument) -> None:
        self._blocks, other._blocks = other._blocks, self._blocks

    def copy(self) -> SLHADocument:
        return SLHADocument(block.copy() for block in self._blocks)

    def size(self) -> int:
        return len(self._blocks)

    def empty(self) -> bool:
        return not self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[SLHABlock]:
        return iter(self._blocks)

    def __reversed__(self) -> Iterator[SLHABlock]:
        return reversed(self._blocks)

    # -------------------------------------------------------------------------
    # Comparison: block by block, names are not compared.
    # Ordering is only defined between documents with as many blocks.
    # -------------------------------------------------------------------------

    def _tokens(self) -> list[list[list[str]]]:
        return [block._tokens() for block in self._blocks]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SLHADocument):
            return NotImplemented
        return len(self) == len(other) and self._blocks == other._blocks

    def __lt__(self, other: SLHADocument) -> bool:
        if not isinstance(other, SLHADocument) or len(self) != len(other):
            return NotImplemented
        return self._tokens() < other._tokens()

    def __gt__(self, other: SLHADocument) -> bool:
        if not isinstance(other, SLHADocument) or len(self) != len(other):
            return NotImplemented
        return other._tokens() < self._tokens()

    def __le__(self, other: SLHADocument) -> bool:
        if not isinstance(other, SLHADocument) or len(self) != len(other):
            return NotImplemented
        return not other._tokens() < self._tokens()

    def __ge__(self, other: SLHADocument) -> bool:
        if not isinstance(other, SLHADocument) or len(self) != len(other):
            return NotImplemented
        return not self._tokens() < other._tokens()

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        names = ", ".join(self.names)
        return f"SLHADocument(blocks=[{names}])"
