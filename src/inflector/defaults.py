# src/inflector/defaults.py
"""
defaults.

Does: Build the standard English inflector from the packaged data/english.json
      and expose module-level shortcuts bound to one cached default instance.
Returns: english_inflector(), get_default_inflector() and the shortcut functions.
Used by: inflector/__init__.py (public API), quick scripts.

Notes:
- english_inflector() always returns a fresh, independent instance; prefer it
  (or Inflector()) when a caller wants to register its own rules/acronyms.
- get_default_inflector() is built lazily on first use and then reused.
"""

from __future__ import annotations

from functools import lru_cache

from inflector.engine import Inflector
from inflector.utils.load_config import PACKAGE_DATA_DIR

__all__ = [
    "english_inflector",
    "get_default_inflector",
    "pluralize",
    "singularize",
    "camelize",
    "underscore",
    "dasherize",
    "humanize",
    "titleize",
    "tableize",
    "parameterize",
    "transliterate",
    "ordinal",
    "ordinalize",
]


def english_inflector() -> Inflector:
    """Does: New Inflector pre-populated with the packaged English table (INFLECTOR_DATA_DIR is ignored)."""
    return Inflector.from_config("english", base_dir=PACKAGE_DATA_DIR)


@lru_cache(maxsize=1)
def get_default_inflector() -> Inflector:
    """Does: Shared English instance behind the module-level shortcuts."""
    return english_inflector()


def pluralize(word: str) -> str:
    return get_default_inflector().pluralize(word)


def singularize(word: str) -> str:
    return get_default_inflector().singularize(word)


def camelize(word: str, uppercase_first_letter: bool = True) -> str:
    return get_default_inflector().camelize(word, uppercase_first_letter)


def underscore(word: str) -> str:
    return get_default_inflector().underscore(word)


def dasherize(word: str) -> str:
    return get_default_inflector().dasherize(word)


def humanize(word: str, capitalize: bool = True) -> str:
    return get_default_inflector().humanize(word, capitalize)


def titleize(word: str) -> str:
    return get_default_inflector().titleize(word)


def tableize(word: str) -> str:
    return get_default_inflector().tableize(word)


def parameterize(word: str, separator: str = "-") -> str:
    return get_default_inflector().parameterize(word, separator)


def transliterate(word: str) -> str:
    return get_default_inflector().transliterate(word)


def ordinal(number: int) -> str:
    return get_default_inflector().ordinal(number)


def ordinalize(number: int) -> str:
    return get_default_inflector().ordinalize(number)
