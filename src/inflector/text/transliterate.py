"""
transliterate.py.

Does: Best-effort Unicode -> ASCII mapping backed by Unidecode.
Returns: transliterate(text) -> ascii text; never raises on str input.
Used by: Inflector.parameterize() and the module-level transliterate().
"""

from __future__ import annotations

from unidecode import unidecode

__all__ = ["transliterate"]


def transliterate(text: str) -> str:
    """Does: Replace non-ASCII chars with ASCII approximations ("Крали" -> "Krali")."""
    # "ignore" drops characters Unidecode has no table entry for instead of warning
    return unidecode(text, errors="ignore")
