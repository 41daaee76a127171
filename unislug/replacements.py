"""Codepoint to ASCII replacement table."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import lru_cache

from unidecode import unidecode

from .constants import (
    ALPHANUMERICS,
    BLOCK_SIZE,
    LAST_MAPPED_CODEPOINT,
    SURROGATE_RANGE,
)

__all__ = ["REPLACEMENTS", "ReplacementTable"]

# Placeholder Unidecode stores for unassigned codepoints inside a known block.
_UNKNOWN = "[?]"


class ReplacementTable(Mapping[int, str]):
    """Read-only mapping from non-ASCII codepoints to ASCII replacements.

    Replacements come from the Unidecode romanization data, reduced to ASCII
    letters and digits, so a value may be empty (``"，"`` maps to ``""``) or span
    several characters (``"字"`` maps to ``"Zi"``). ASCII codepoints and
    surrogates are never keys.

    Blocks of 256 codepoints are built on first lookup and cached for the life
    of the process. Instances hold no state of their own, so every instance
    shares the same cache.

    Examples:
        REPLACEMENTS[ord("ß")]  # "ss"
        ord("a") in REPLACEMENTS  # False
    """

    def __getitem__(self, codepoint: int) -> str:
        if isinstance(codepoint, bool) or not isinstance(codepoint, int):
            raise KeyError(codepoint)
        if not 0x80 <= codepoint <= LAST_MAPPED_CODEPOINT:
            raise KeyError(codepoint)

        replacement = _load_block(codepoint // BLOCK_SIZE)[codepoint % BLOCK_SIZE]
        if replacement is None:
            raise KeyError(codepoint)
        return replacement

    def __iter__(self) -> Iterator[int]:
        for block in range(0x80 // BLOCK_SIZE, LAST_MAPPED_CODEPOINT // BLOCK_SIZE + 1):
            base = block * BLOCK_SIZE
            for offset, replacement in enumerate(_load_block(block)):
                if replacement is not None:
                    yield base + offset

    def __len__(self) -> int:
        """Count the keys.

        The first call builds every block up to 0xEFFFF, which takes seconds; the
        count is cached afterwards.
        """
        return _count_keys()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@lru_cache(maxsize=None)
def _count_keys() -> int:
    return sum(1 for _ in ReplacementTable())


@lru_cache(maxsize=None)
def _load_block(block: int) -> tuple[str | None, ...]:
    base = block * BLOCK_SIZE
    return tuple(_replacement_for(base + offset) for offset in range(BLOCK_SIZE))


def _replacement_for(codepoint: int) -> str | None:
    if codepoint < 0x80 or codepoint in SURROGATE_RANGE:
        return None

    romanized = unidecode(chr(codepoint), errors="ignore")
    if not romanized or romanized == _UNKNOWN:
        return None
    # Drop spacing and punctuation; only letters and digits survive into slugs.
    return "".join(char for char in romanized if char in ALPHANUMERICS)


REPLACEMENTS = ReplacementTable()
