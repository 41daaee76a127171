"""Constants used across the unislug package."""

from __future__ import annotations

import string

DEFAULT_SEPARATOR = "-"

# ASCII letters and digits pass through transliteration untouched.
ALPHANUMERICS = frozenset(string.ascii_letters + string.digits)
ALPHANUMERIC_CODEPOINTS = frozenset(ord(char) for char in ALPHANUMERICS)

MAX_CODEPOINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)

# Unidecode carries no romanization past the Supplementary Special-purpose Plane.
LAST_MAPPED_CODEPOINT = 0xEFFFF
BLOCK_SIZE = 256
