"""
SLHA Reader - groups the lines of an SLHA file into blocks.

Reading rules:
  - Blank and whitespace-only lines are skipped and never stored
  - A BLOCK/DECAY line with a name opens a new block at the end of the
    document; the definition line itself is the block's first line
  - Every other line goes to the most recently opened block
  - Lines before the first block definition go to the block named ""
  - Repeated block names give separate blocks, in file order
"""

from __future__ import annotations

import logging
from typing import Iterable

from slhakit.document import SLHABlock, SLHADocument
from slhakit.line import SLHALine, split_lines
from slhakit.spec import ENCODING

logger = logging.getLogger(__name__)


class SLHAReader:
    """
    SLHA text reader.

    Usage:
        # Whole text (str or bytes)
        doc = SLHAReader.parse(text)

        # Any line source: open file, io.StringIO, list of strings
        with open("spectrum.slha") as f:
            doc = SLHAReader.read(f)
    """

    @classmethod
    def parse(cls, data: str | bytes, encoding: str = ENCODING) -> SLHADocument:
        """Parse a complete SLHA text into a new document."""
        if isinstance(data, bytes):
            data = data.decode(encoding)
        return cls.read_into(SLHADocument(), split_lines(data))

    @classmethod
    def read(cls, handle: Iterable[str]) -> SLHADocument:
        """Parse lines from a text stream (or any iterable of lines)."""
        return cls.read_into(SLHADocument(), handle)

    @staticmethod
    def read_into(doc: SLHADocument, lines: Iterable[str]) -> SLHADocument:
        """Parse ``lines`` and append the resulting blocks to ``doc``."""
        current: SLHABlock | None = None
        skipped = 0
        for raw in lines:
            if not raw.strip():
                skipped += 1
                continue
            line = SLHALine(raw)
            if line.is_block_def() and line.data_size() > 1:
                current = doc.append(SLHABlock(line[1]))
                logger.debug("Opened block %r (block %d)", current.name, len(doc))
            elif current is None:
                current = doc[""]
            current.append(line)
        if skipped:
            logger.debug("Skipped %d blank lines", skipped)
        return doc
