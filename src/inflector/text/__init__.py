"""
text.
=====

Shared text helpers: CamelCase boundary rewrites and ASCII transliteration.
"""

from .case import (
    NON_WORD_RE,
    capitalize_token,
    split_camel_boundaries,
    tidy_underscores,
)
from .transliterate import transliterate

__all__ = [
    "NON_WORD_RE",
    "capitalize_token",
    "split_camel_boundaries",
    "tidy_underscores",
    "transliterate",
]
