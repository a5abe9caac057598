"""
SLHA Format Description
=======================

Layout:
    # SUSY Les Houches Accord spectrum      <- Whole-line comment
    BLOCK MODSEL                            <- Block definition (BLOCK/DECAY <name> ...)
        1     1   # sugra                   <- Data line: tokens + optional trailing comment
    BLOCK MASS
       25     1.15e+02   # h0
    DECAY   1000022   0.0                   <- DECAY opens a block named by the PDG code
    ...

Design Decisions:
    - Line oriented, whitespace delimited: no quoting, no escaping
    - "#" starts a comment that runs to the end of the line
    - BLOCK / DECAY keywords are case-insensitive, block names keep their case
    - Blank lines carry no information and are dropped when reading
    - The same block name may appear several times (e.g. one block per Q scale)
    - Untouched lines are written back at the columns they were read from

Fields are addressed with a key of the form
    <block>;<tok1>,<tok2>,...;<field>
e.g. "MASS;25;1" or "1000022;(any),2,11,24;0".
"""

# Keywords that open a block (compared case-insensitively)
BLOCK_KEYWORDS = ("BLOCK", "DECAY")

# Comment introducer
COMMENT_CHAR = "#"

# Key token that matches any value at its position
WILDCARD = "(any)"

# Field key separators: segments, then line tokens within the middle segment
KEY_SEPARATOR = ";"
KEY_TOKEN_SEPARATOR = ","

# Canonical layout (used by SLHALine.reformat)
DATA_INDENT = 1      # first column of an ordinary data line
TAB_WIDTH = 4        # later tokens land on tab stops of this width
MIN_GAP = 2          # never place two tokens closer than this

# Written after every line
LINE_TERMINATOR = "\n"

# Default encoding for byte input
ENCODING = "utf-8"
