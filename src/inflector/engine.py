# src/inflector/engine.py
# ──────────────────────────────────────────────────────────────
# Inflector engine
# Ordered rule tables + the transformations built on them.
# ──────────────────────────────────────────────────────────────

"""
engine.

Does: Hold ordered pluralization/singularization rules, irregular and uncountable
      nouns and acronyms, and expose the word transformations built from them
      (pluralize, singularize, camelize, underscore, parameterize, ordinalize, ...).
Returns: Inflector class.
Used by: inflector.defaults (pre-populated English instance) and callers that
         need an isolated rule set.

Notes:
- Check order is fixed: uncountable → irregular → pattern rules → fallback.
- Rules are first-match-wins; register them from most specific to most general.
- Registration is not synchronized. Populate an instance, then share it read-only.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

from inflector.rules.patterns import PatternRule, apply_first, compile_rule
from inflector.rules.tables import (
    AcronymTable,
    IrregularNoun,
    is_uncountable,
    match_irregular,
    validate_rule_table,
)
from inflector.text.case import (
    NON_WORD_RE,
    capitalize_token,
    split_camel_boundaries,
    tidy_underscores,
)
from inflector.text.transliterate import transliterate as _transliterate
from inflector.utils.load_config import load_config

__all__ = ["Inflector"]

log = logging.getLogger(__name__)

_ID_SUFFIX_RE = re.compile(r"_id$")
_HUMAN_WORD_RE = re.compile(r"[a-z\d]+", re.IGNORECASE)
_TITLE_FIRST_RE = re.compile(r"\b(?<!\w['’`])[a-z]")


class Inflector:
    """English-style word inflector driven by mutable, ordered rule tables.

    A bare ``Inflector()`` has no rules at all: ``pluralize`` only appends "s"
    and ``singularize`` returns its input. Use ``inflector.english_inflector()``
    or ``Inflector.from_config("english")`` for the standard English tables.
    """

    def __init__(self) -> None:
        self.pluralization_rules: list[PatternRule] = []
        self.singularization_rules: list[PatternRule] = []
        self.irregular_nouns: list[IrregularNoun] = []
        self.uncountable_nouns: list[str] = []
        self.acronyms = AcronymTable()

    def __repr__(self) -> str:
        return (
            f"<Inflector plurals={len(self.pluralization_rules)} "
            f"singulars={len(self.singularization_rules)} "
            f"irregulars={len(self.irregular_nouns)} "
            f"uncountables={len(self.uncountable_nouns)} "
            f"acronyms={len(self.acronyms)}>"
        )

    # ── Construction from data/ ──────────────────────────────────────────────

    @classmethod
    def from_config(
        cls,
        name: str | os.PathLike[str] = "english",
        *,
        base_dir: Path | None = None,
        allow_comments: bool = False,
    ) -> Inflector:
        """
        Does: Build a new instance from <data>/<name>.json (see validate_rule_table()).
        Returns: Populated Inflector.
        Raises: ConfigFileNotFound / ConfigParseError / ConfigTypeError from the loader,
                InvalidPatternError for a bad rule.
        """
        table = load_config(
            name,
            base_dir=base_dir,
            validator=validate_rule_table,
            allow_comments=allow_comments,
        )
        inst = cls()
        inst.load_rule_table(table)
        return inst

    def load_rule_table(self, table: dict[str, Any]) -> None:
        """Does: Register every entry of a validated rule table, keeping file order."""
        for pattern, replacement in table["plurals"]:
            self.add_pluralization_rule(pattern, replacement)
        for pattern, replacement in table["singulars"]:
            self.add_singularization_rule(pattern, replacement)
        for singular, plural in table["irregulars"]:
            self.add_irregular_noun(singular, plural)
        for word in table["uncountables"]:
            self.add_uncountable_noun(word)
        for lower, upper in table["acronyms"]:
            self.add_acronym(lower, upper)
        log.debug("rule table loaded: %r", self)

    # ── Registration ─────────────────────────────────────────────────────────

    def add_pluralization_rule(self, pattern: str | re.Pattern[str], replacement: str) -> None:
        self.pluralization_rules.append(compile_rule(pattern, replacement))
        log.debug("plural rule #%d: %r -> %r", len(self.pluralization_rules), pattern, replacement)

    def add_singularization_rule(self, pattern: str | re.Pattern[str], replacement: str) -> None:
        self.singularization_rules.append(compile_rule(pattern, replacement))
        log.debug("singular rule #%d: %r -> %r", len(self.singularization_rules), pattern, replacement)

    def add_irregular_noun(self, singular: str, plural: str) -> None:
        self.irregular_nouns.append(IrregularNoun(singular, plural))

    def add_uncountable_noun(self, word: str) -> None:
        self.uncountable_nouns.append(word)

    def add_acronym(self, lower: str, upper: str) -> None:
        """Does: Register `lower` <-> `upper` (e.g. "api" <-> "API") and rebuild the detection pattern."""
        self.acronyms.add(lower, upper)

    # ── Nouns ────────────────────────────────────────────────────────────────

    def pluralize(self, word: str) -> str:
        """Does: Plural of an English noun ("person" -> "people", "quiz" -> "quizzes")."""
        if is_uncountable(word, self.uncountable_nouns):
            return word
        irregular = match_irregular(word, self.irregular_nouns, to_plural=True)
        if irregular is not None:
            return irregular
        ruled = apply_first(self.pluralization_rules, word)
        if ruled is not None:
            return ruled
        return word + "s"

    def singularize(self, word: str) -> str:
        """Does: Singular of an English noun ("people" -> "person"); unknown words pass through."""
        if is_uncountable(word, self.uncountable_nouns):
            return word
        irregular = match_irregular(word, self.irregular_nouns, to_plural=False)
        if irregular is not None:
            return irregular
        ruled = apply_first(self.singularization_rules, word)
        if ruled is not None:
            return ruled
        return word

    # ── Identifiers ──────────────────────────────────────────────────────────

    def camelize(self, word: str, uppercase_first_letter: bool = True) -> str:
        """
        Does: snake_case / kebab-case -> CamelCase, with registered acronyms
              emitted in display form ("restful_api" -> "RESTfulAPI").
        Returns: CamelCase string; lowerCamelCase when uppercase_first_letter=False.
        """
        tokens = word.lower().replace("-", "_").split("_")
        parts = [self.acronyms.display(t) or capitalize_token(t) for t in tokens]
        if not uppercase_first_letter and parts:
            parts[0] = tokens[0]
        return "".join(parts)

    def underscore(self, word: str) -> str:
        """
        Does: CamelCase -> snake_case. Acronyms are split out before the generic
              boundary rules so "APIKey" becomes "api_key", not "a_p_i_key".
        Returns: Lowercase, single-underscore-separated string.
        """
        word = self.acronyms.split_out(word)
        word = split_camel_boundaries(word)
        word = tidy_underscores(word)
        return word.lower()

    def dasherize(self, word: str) -> str:
        return word.replace("_", "-")

    def humanize(self, word: str, capitalize: bool = True) -> str:
        """Does: "employee_salary" -> "Employee salary", "author_id" -> "Author", "api_key" -> "API key"."""
        word = _ID_SUFFIX_RE.sub("", word.lstrip("_"))
        word = word.replace("_", " ")

        def _lower(m: re.Match[str]) -> str:
            token = m.group().lower()
            return self.acronyms.display(token) or token

        word = _HUMAN_WORD_RE.sub(_lower, word)
        if capitalize:
            word = word[:1].upper() + word[1:]
        return word

    def titleize(self, word: str) -> str:
        """Does: "TheManWithoutAPast" -> "The Man Without A Past"."""
        word = self.humanize(self.underscore(word))
        return _TITLE_FIRST_RE.sub(lambda m: m.group().upper(), word)

    def tableize(self, word: str) -> str:
        """Does: Class name -> table name ("RawScaledScorer" -> "raw_scaled_scorers")."""
        return self.pluralize(self.underscore(word))

    # ── Slugs ────────────────────────────────────────────────────────────────

    def transliterate(self, word: str) -> str:
        return _transliterate(word)

    def parameterize(self, word: str, separator: str = "-") -> str:
        """
        Does: Any text -> URL slug: transliterate, blank out non-word chars,
              underscore(), then '_' -> separator.
        Returns: e.g. "Крали Марко (ID: 31337)" -> "krali-marko-id-31337".
        """
        word = self.transliterate(word)
        word = NON_WORD_RE.sub(" ", word)
        word = self.underscore(word)
        return word.replace("_", separator)

    # ── Numbers ──────────────────────────────────────────────────────────────

    def ordinal(self, number: int) -> str:
        """Does: Ordinal suffix only: 1 -> "st", 12 -> "th", -21 -> "st" (banding uses abs())."""
        n = abs(number)
        if 11 <= n % 100 <= 13:
            return "th"
        return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")

    def ordinalize(self, number: int) -> str:
        """Does: 1 -> "1st", 111 -> "111th", -2 -> "-2nd"."""
        return f"{number}{self.ordinal(number)}"
