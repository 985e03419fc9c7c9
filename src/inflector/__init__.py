"""
inflector
=========

Does: English noun pluralization/singularization, acronym-aware CamelCase <->
      snake_case conversion, URL slugs, transliteration and ordinals.
Returns: Inflector (rule-table engine), english_inflector()/get_default_inflector()
         factories and module-level shortcuts on the default instance.
Used by: Anything that needs table names, identifiers or slugs derived from words.
"""

from __future__ import annotations

from .defaults import (
    camelize,
    dasherize,
    english_inflector,
    get_default_inflector,
    humanize,
    ordinal,
    ordinalize,
    parameterize,
    pluralize,
    singularize,
    tableize,
    titleize,
    transliterate,
    underscore,
)
from .engine import Inflector
from .rules.patterns import InvalidPatternError
from .utils.load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
)

__all__ = [
    "Inflector",
    "english_inflector",
    "get_default_inflector",
    # transformations
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
    # errors
    "InvalidPatternError",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]
__docformat__ = "google"
