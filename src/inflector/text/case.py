# src/inflector/text/case.py
# ──────────────────────────────────────────────────────────────
# Compiled rewrites shared by underscore()/parameterize()/humanize()
# ──────────────────────────────────────────────────────────────
"""
case.

Does: Hold the fixed regex pipeline steps used to turn CamelCase identifiers
      into snake_case, plus small token helpers.
Returns: split_camel_boundaries(), tidy_underscores(), capitalize_token(),
         NON_WORD_RE.
Used by: inflector.engine.Inflector.
"""

from __future__ import annotations

import re

__all__ = [
    "NON_WORD_RE",
    "capitalize_token",
    "split_camel_boundaries",
    "tidy_underscores",
]

# FOOBar -> FOO_Bar
_UPPER_RUN_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
# FooBar -> Foo_Bar, v2Beta -> v2_Beta
_LOWER_UPPER_RE = re.compile(r"([a-z\d])([A-Z])")
# spaces and dashes
_SPACE_DASH_RE = re.compile(r"[\s-]+")
_MULTI_UNDERSCORE_RE = re.compile(r"_{2,}")

# anything that is not [A-Za-z0-9_]; ASCII so it agrees with transliterated input
NON_WORD_RE = re.compile(r"[^\w]", re.ASCII)


def split_camel_boundaries(word: str) -> str:
    """Does: Insert '_' at upper-run/Upper+lower and lower-or-digit/Upper boundaries."""
    word = _UPPER_RUN_RE.sub(r"\1_\2", word)
    return _LOWER_UPPER_RE.sub(r"\1_\2", word)


def tidy_underscores(word: str) -> str:
    """Does: Whitespace/hyphen runs -> '_', collapse '__', trim edges."""
    word = _SPACE_DASH_RE.sub("_", word)
    word = _MULTI_UNDERSCORE_RE.sub("_", word)
    return word.strip("_")


def capitalize_token(token: str) -> str:
    """Does: First letter upper, rest lower ("usER" -> "User"); "" stays ""."""
    return token[:1].upper() + token[1:].lower()
