# src/inflector/rules/tables.py
"""
tables.

Does: Literal-word tables for the inflector: irregular noun pairs, uncountable
      nouns and the acronym table with its combined detection pattern. Also
      validates the JSON rule-table format read from data/.
Returns: IrregularNoun, AcronymTable, match_irregular(), is_uncountable(),
         validate_rule_table().
Used by: inflector.engine.Inflector.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = [
    "IrregularNoun",
    "AcronymTable",
    "is_uncountable",
    "match_irregular",
    "validate_rule_table",
]

log = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────
# Irregular / uncountable nouns
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class IrregularNoun:
    singular: str
    plural: str


def is_uncountable(word: str, uncountables: Iterable[str]) -> bool:
    """Does: True if `word` ends with any uncountable noun, ignoring case on both sides."""
    lower = word.lower()
    return any(lower.endswith(u.lower()) for u in uncountables)


def match_irregular(word: str, irregulars: Sequence[IrregularNoun], *, to_plural: bool) -> str | None:
    """
    Does: Walk irregular pairs in registration order, comparing suffixes case-insensitively.
          pluralize: a word already ending with the plural is returned unchanged, then a
          word ending with the singular gets that suffix swapped.
          singularize: the plural suffix is swapped first, then a word already ending
          with the singular is returned unchanged.
          The prefix before the swapped suffix is kept exactly as written.
    Returns: Inflected word, or None when no pair applies.
    """
    lower = word.lower()
    for noun in irregulars:
        source, target = (noun.singular, noun.plural) if to_plural else (noun.plural, noun.singular)
        if to_plural and lower.endswith(target.lower()):
            return word
        if lower.endswith(source.lower()):
            return word[: len(word) - len(source)] + target
        if not to_plural and lower.endswith(target.lower()):
            return word
    return None


# ──────────────────────────────────────────────────────────────
# Acronyms
# ──────────────────────────────────────────────────────────────


class AcronymTable:
    """
    Two-way acronym lookup ("id" <-> "ID") plus a combined pattern that finds
    display forms embedded in CamelCase identifiers. The pattern is rebuilt on
    every add() so it always reflects the whole table.
    """

    def __init__(self) -> None:
        self.lower_to_upper: dict[str, str] = {}
        self.upper_to_lower: dict[str, str] = {}
        self._uppers: list[str] = []
        self.pattern: re.Pattern[str] | None = None

    def __len__(self) -> int:
        return len(self._uppers)

    def __contains__(self, lower: object) -> bool:
        return lower in self.lower_to_upper

    def add(self, lower: str, upper: str) -> None:
        if upper not in self.upper_to_lower:
            self._uppers.append(upper)
        self.lower_to_upper[lower] = upper
        self.upper_to_lower[upper] = lower
        self._rebuild()

    def display(self, lower: str) -> str | None:
        return self.lower_to_upper.get(lower)

    def _rebuild(self) -> None:
        # longest first: "APIs" must win over "API" in the alternation
        alternation = "|".join(re.escape(u) for u in sorted(self._uppers, key=len, reverse=True))
        # soft boundary: display forms match anywhere, "UserIDToken" splits around "ID"
        self.pattern = re.compile(f"({alternation})")
        log.debug("acronym pattern rebuilt: %s", self.pattern.pattern)

    def split_out(self, word: str) -> str:
        """Does: Replace each display form in `word` with '_' + its lowercase token."""
        if self.pattern is None:
            return word
        return self.pattern.sub(lambda m: "_" + self.upper_to_lower[m.group(1)], word)


# ──────────────────────────────────────────────────────────────
# Rule-table file validation
# ──────────────────────────────────────────────────────────────

_PAIR_KEYS = ("plurals", "singulars", "irregulars", "acronyms")


def _pairs(data: dict[str, Any], key: str) -> list[tuple[str, str]]:
    out: list[tuple[str, str]] = []
    for i, item in enumerate(data.get(key, [])):
        if not (isinstance(item, (list, tuple)) and len(item) == 2 and all(isinstance(x, str) for x in item)):
            raise ValueError(f"'{key}[{i}]' must be a [str, str] pair, got {item!r}")
        out.append((item[0], item[1]))
    return out


def validate_rule_table(data: dict[str, Any]) -> dict[str, Any]:
    """
    Does: Check a rule-table mapping (plurals/singulars/irregulars/acronyms as
          [str, str] pairs, uncountables as str list) and normalize it.
    Returns: New dict with tuple pairs and a list of uncountable words.
    Raises: ValueError on unknown keys or malformed entries.
    """
    unknown = set(data) - {*_PAIR_KEYS, "uncountables"}
    if unknown:
        raise ValueError(f"unknown rule-table keys: {sorted(unknown)}")

    table: dict[str, Any] = {key: _pairs(data, key) for key in _PAIR_KEYS}

    uncountables = data.get("uncountables", [])
    if not isinstance(uncountables, list) or not all(isinstance(w, str) for w in uncountables):
        raise ValueError("'uncountables' must be a list of strings")
    table["uncountables"] = list(uncountables)

    log.debug(
        "rule table ok: %d plurals, %d singulars, %d irregulars, %d uncountables, %d acronyms",
        len(table["plurals"]),
        len(table["singulars"]),
        len(table["irregulars"]),
        len(table["uncountables"]),
        len(table["acronyms"]),
    )
    return table
