"""
SLHA field keys - detached locators for a single field.

    key = SLHAFieldKey.parse("RVHMIX;1,3;2")
    key.block  -> "RVHMIX"
    key.line   -> ("1", "3")
    key.field  -> 2
    str(key)   -> "RVHMIX;1,3;2"

A key holds no reference to any document. It is resolved again every time
it is used, so it stays valid only while the document keeps its shape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field as dc_field

from slhakit.errors import SLHAKeyFormatError
from slhakit.spec import KEY_SEPARATOR, KEY_TOKEN_SEPARATOR

_FIELD_INDEX = re.compile(r"\d+")


def _split_compressed(text: str, sep: str) -> list[str]:
    """Split on runs of ``sep``; empty pieces survive only at either end."""
    return re.split(f"{re.escape(sep)}+", text)


@dataclass(frozen=True)
class SLHAFieldKey:
    """Block name, line-prefix tokens and field index."""

    block: str
    line: tuple[str, ...] = dc_field(default_factory=tuple)
    field: int = 0

    def __post_init__(self) -> None:
        # Accept any iterable of tokens, store a tuple
        if isinstance(self.line, str):
            tokens = tuple(_split_compressed(self.line, KEY_TOKEN_SEPARATOR))
        else:
            tokens = tuple(str(t) for t in self.line)
        object.__setattr__(self, "line", tokens)
        if isinstance(self.field, bool) or not isinstance(self.field, int) or self.field < 0:
            raise SLHAKeyFormatError(f"Invalid field index: {self.field!r}")

    @classmethod
    def parse(cls, text: str) -> SLHAFieldKey:
        """Parse the canonical "<block>;<tok1>,<tok2>,...;<field>" form.

        Runs of separators count as one, so "MASS;;1" has two segments and
        is rejected, and "1,,2" names the tokens "1" and "2".
        """
        segments = _split_compressed(text, KEY_SEPARATOR)
        if len(segments) != 3:
            raise SLHAKeyFormatError(
                f"Invalid field key {text!r}: expected 3 '{KEY_SEPARATOR}'-separated segments, "
                f"got {len(segments)}"
            )
        block, tokens, index = segments
        if not _FIELD_INDEX.fullmatch(index):
            raise SLHAKeyFormatError(f"Invalid field key {text!r}: bad field index {index!r}")
        return cls(block, tokens, int(index))

    def to_string(self) -> str:
        return f"{self.block}{KEY_SEPARATOR}{KEY_TOKEN_SEPARATOR.join(self.line)}{KEY_SEPARATOR}{self.field}"

    def __str__(self) -> str:
        return self.to_string()
