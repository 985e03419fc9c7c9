# src/inflector/rules/patterns.py
from __future__ import annotations

"""
rules.patterns
==============

Does: Compile (pattern, replacement) pairs into PatternRule objects and apply an
      ordered rule list with first-match-wins semantics.
Returns: PatternRule, compile_rule(), apply_first(), InvalidPatternError.
Used By: Inflector.add_pluralization_rule / add_singularization_rule and the
         pluralize/singularize passes.

Notes:
- String patterns are compiled with re.IGNORECASE; pre-compiled patterns keep their flags.
- Replacements use `re` template syntax (\\1, \\g<1>); an unmatched optional group
  expands to "", so "(?:([^f])fe|([lr])f)$" -> "\\1\\2ves" is safe.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["InvalidPatternError", "PatternRule", "compile_rule", "apply_first"]
__docformat__ = "google"

log = logging.getLogger(__name__)


class InvalidPatternError(ValueError):
    """Raise when a caller-supplied rule pattern or replacement template is malformed."""


@dataclass(frozen=True)
class PatternRule:
    pattern: re.Pattern[str]
    replacement: str

    def matches(self, word: str) -> bool:
        return self.pattern.search(word) is not None

    def apply(self, word: str) -> str:
        return self.pattern.sub(self.replacement, word)


def compile_rule(pattern: str | re.Pattern[str], replacement: str) -> PatternRule:
    """
    Does: Compile `pattern` and check `replacement` against its groups up front.
    Returns: PatternRule ready for ordered matching.
    Raises: InvalidPatternError on bad regex syntax or an invalid group reference.
    """
    try:
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidPatternError(f"invalid rule pattern {pattern!r}: {e}") from e

    # sub() parses the template before scanning, so a bad group ref fails here
    # (unknown \g<name> surfaces as IndexError rather than re.error)
    try:
        compiled.sub(replacement, "")
    except (re.error, IndexError) as e:
        raise InvalidPatternError(
            f"invalid replacement {replacement!r} for pattern {compiled.pattern!r}: {e}"
        ) from e

    return PatternRule(compiled, replacement)


def apply_first(rules: Iterable[PatternRule], word: str) -> str | None:
    """Does: Apply the first rule whose pattern matches. Returns: rewritten word or None."""
    for rule in rules:
        if rule.matches(word):
            out = rule.apply(word)
            log.debug("[rule] %s -> %s via %r", word, out, rule.pattern.pattern)
            return out
    return None
