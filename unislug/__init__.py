"""
unislug: Slugs from text in any script.

Usage:
    from unislug import slugify

    slugify("你好，世界")  # "nihaoshijie"
    slugify("Call me maybe", truncate=10)  # "call-me"
"""

from .models import SlugOptions
from .options import resolve_options
from .replacements import REPLACEMENTS, ReplacementTable
from .slugify import join_words, slugify
from .transliterate import normalize_to_codepoints, transliterate

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "slugify",
    "transliterate",
    "normalize_to_codepoints",
    "join_words",
    "resolve_options",
    # Data models
    "SlugOptions",
    "ReplacementTable",
    "REPLACEMENTS",
    # Version
    "__version__",
]
