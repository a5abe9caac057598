"""slhakit - read, edit and write SUSY Les Houches Accord (SLHA) files."""

from slhakit.document import SLHABlock, SLHADocument
from slhakit.errors import SLHAError, SLHAKeyFormatError, SLHANotFoundError, SLHAOutOfRangeError
from slhakit.key import SLHAFieldKey
from slhakit.line import SLHALine
from slhakit.reader import SLHAReader
from slhakit.writer import SLHAWriter

__version__ = "1.0.0"

__all__ = [
    "SLHABlock",
    "SLHADocument",
    "SLHAError",
    "SLHAFieldKey",
    "SLHAKeyFormatError",
    "SLHALine",
    "SLHANotFoundError",
    "SLHAOutOfRangeError",
    "SLHAReader",
    "SLHAWriter",
]
