"""Normalization of caller-supplied slug options.

Every option is optional and no value is ever rejected: anything that cannot be
interpreted falls back to its default, so `resolve_options` always succeeds.
"""

from __future__ import annotations

from .constants import DEFAULT_SEPARATOR, MAX_CODEPOINT, SURROGATE_RANGE
from .models import SlugOptions
from .transliterate import normalize_to_codepoints

__all__ = ["resolve_options"]


def resolve_options(**options: object) -> SlugOptions:
    """Build canonical `SlugOptions` from keyword options.

    Args:
        options: Any of ``separator``, ``lowercase``, ``truncate`` and
            ``ignore``. Unknown keys are ignored.

    Returns:
        SlugOptions: Resolved options with defaults applied.

    Examples:
        resolve_options(separator="_", truncate=20)
        resolve_options(separator=ord("."), ignore=["é", "ü"])
    """
    separator = get_separator(options.get("separator"))
    return SlugOptions(
        separator=separator,
        lowercase=get_lowercase(options.get("lowercase")),
        truncate_length=get_truncate_length(options.get("truncate")),
        ignored_codepoints=get_ignored_codepoints(separator, options.get("ignore")),
    )


def get_separator(value: object) -> str:
    """Return the separator for a string or codepoint, or the default for anything else."""
    if isinstance(value, str):
        return value
    if _is_integer(value) and 0 <= value <= MAX_CODEPOINT and value not in SURROGATE_RANGE:
        return chr(value)
    return DEFAULT_SEPARATOR


def get_lowercase(value: object) -> bool:
    """Return `value` when it is a bool, True otherwise."""
    return value if isinstance(value, bool) else True


def get_truncate_length(value: object) -> int | None:
    """Return the truncation length, clamped at zero, or None for non-integers."""
    if not _is_integer(value):
        return None
    return max(value, 0)


def get_ignored_codepoints(separator: str, value: object) -> frozenset[int]:
    """Collect the codepoints to keep verbatim, the separator's included.

    Occurrences of the separator are removed from the ignore input before the
    separator itself is appended, so it is counted once.
    """
    if isinstance(value, str):
        characters = value.replace(separator, "") if separator else value
    elif isinstance(value, (list, tuple)):
        characters = "".join(
            item for item in value if isinstance(item, str) and item != separator
        )
    else:
        characters = ""

    return frozenset(normalize_to_codepoints(characters + separator))


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
