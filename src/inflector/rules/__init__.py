# src/inflector/rules/__init__.py
"""
rules.
======

Does: Provide the building blocks of the rule tables: compiled pattern rules,
      irregular/uncountable lookups and the acronym table.
Exports: PatternRule, compile_rule, apply_first, InvalidPatternError,
         IrregularNoun, AcronymTable, validate_rule_table
Used by: inflector.engine and the default English table loader.
"""

from __future__ import annotations

from .patterns import (
    InvalidPatternError,
    PatternRule,
    apply_first,
    compile_rule,
)
from .tables import (
    AcronymTable,
    IrregularNoun,
    is_uncountable,
    match_irregular,
    validate_rule_table,
)

__all__ = [
    "InvalidPatternError",
    "PatternRule",
    "apply_first",
    "compile_rule",
    "AcronymTable",
    "IrregularNoun",
    "is_uncountable",
    "match_irregular",
    "validate_rule_table",
]
