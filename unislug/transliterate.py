"""Unicode normalization and per-word transliteration."""

from __future__ import annotations

import unicodedata
from collections.abc import Collection, Iterable, Mapping

from .constants import ALPHANUMERIC_CODEPOINTS
from .replacements import REPLACEMENTS

__all__ = ["normalize_to_codepoints", "transliterate"]


def normalize_to_codepoints(text: str) -> list[int]:
    """Return the codepoints of `text` in Normalization Form C.

    Examples:
        normalize_to_codepoints("e\\u0301")  # [233]
    """
    return [ord(char) for char in unicodedata.normalize("NFC", text)]


def transliterate(
    word: str | Iterable[int],
    ignored_codepoints: Collection[int] = frozenset(),
    table: Mapping[int, str] = REPLACEMENTS,
) -> str:
    """Transliterate a single word to ASCII.

    Each codepoint is handled by the first rule that applies: ASCII letters and
    digits are kept, ignored codepoints are kept as the literal character, and
    anything else is replaced through `table` or dropped when it has no entry.

    Args:
        word: Word to transliterate. Strings are NFC-normalized first; an
            iterable of codepoints is assumed to be normalized already.
        ignored_codepoints: Codepoints to keep verbatim.
        table: Codepoint to ASCII replacement mapping.

    Returns:
        str: Transliterated word, possibly empty.

    Examples:
        transliterate("Straße")  # "Strasse"
        transliterate("你好", {ord("你")})  # "你Hao"
    """
    codepoints = normalize_to_codepoints(word) if isinstance(word, str) else word

    pieces: list[str] = []
    for codepoint in codepoints:
        if codepoint in ALPHANUMERIC_CODEPOINTS or codepoint in ignored_codepoints:
            pieces.append(chr(codepoint))
            continue

        replacement = table.get(codepoint)
        if replacement:
            pieces.append(replacement)

    return "".join(pieces)
