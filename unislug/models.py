"""Data models for unislug."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class SlugOptions:
    """Canonical options for a single `slugify` call.

    Attributes:
        separator: String inserted between words.
        lowercase: Whether the joined slug is case-folded.
        truncate_length: Maximum slug length in characters, or None for no limit.
        ignored_codepoints: Codepoints emitted literally instead of being
            transliterated or dropped. Always contains the separator's codepoints.
    """

    separator: str = DEFAULT_SEPARATOR
    lowercase: bool = True
    truncate_length: int | None = None
    ignored_codepoints: frozenset[int] = field(default_factory=frozenset)
