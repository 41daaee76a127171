"""Slug generation for text in any script."""

from __future__ import annotations

from collections.abc import Sequence

from .options import resolve_options
from .transliterate import transliterate

__all__ = ["join_words", "lower_case", "slugify", "validate_slug"]


def slugify(text: str, **options: object) -> str | None:
    """Generate a slug from `text`.

    Splits the text on whitespace, transliterates each word to ASCII, drops
    words that end up empty, and joins the rest with the separator. Punctuation
    and characters without a known romanization are removed.

    Args:
        text: Text to convert into a slug.
        options: Optional settings, all of which fall back to their default when
            missing or malformed:

            - ``separator``: String (or codepoint) placed between words.
              Defaults to ``"-"``.
            - ``lowercase``: Set to False to keep capitalization. Defaults to True.
            - ``truncate``: Maximum slug length, shortened to the nearest whole
              word. Values of zero or less produce no slug.
            - ``ignore``: String or list of strings holding characters to keep
              as they are.

    Returns:
        str | None: The slug, or None when nothing usable remains.

    Examples:
        slugify("Hello, World!")  # "hello-world"
        slugify("Madam, I'm Adam", separator="")  # "madamimadam"
        slugify("StUdLy CaPs", lowercase=False)  # "StUdLy-CaPs"
        slugify("Call me maybe", truncate=10)  # "call-me"
        slugify("你好，世界", ignore=["你", "好"])  # "你好shijie"
    """
    resolved = resolve_options(**options)

    words = [transliterate(word, resolved.ignored_codepoints) for word in text.split()]
    slug = join_words([word for word in words if word], resolved.separator, resolved.truncate_length)
    return validate_slug(lower_case(slug, resolved.lowercase))


def join_words(words: Sequence[str], separator: str, maximum_length: int | None = None) -> str:
    """Join `words` with `separator`, keeping at most `maximum_length` characters.

    Words are taken in order until the next one would push the slug past the
    limit; a word is never cut short.

    Examples:
        join_words(["call", "me", "maybe"], "-", 10)  # "call-me"
    """
    if maximum_length is None:
        return separator.join(words)

    kept: list[str] = []
    length = 0
    for word in words:
        new_length = length + len(separator) + len(word) if kept else len(word)
        if new_length > maximum_length:
            break
        kept.append(word)
        length = new_length
        if new_length == maximum_length:
            break

    return separator.join(kept)


def lower_case(text: str, lowercase: bool) -> str:
    """Lowercase `text` when `lowercase` is set, leaving it untouched otherwise."""
    return text.lower() if lowercase else text


def validate_slug(text: str) -> str | None:
    """Return `text`, or None when it is empty."""
    return text or None
