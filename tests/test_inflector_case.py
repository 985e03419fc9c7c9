# tests/test_inflector_case.py
from __future__ import annotations

"""
Tests for acronym-aware identifier conversion in inflector.engine.

Does:
  - camelize()/underscore() with ID/RESTful/API acronyms registered on a fresh instance.
  - Pin down the soft acronym boundary (matches inside words, case-sensitive).
  - underscore() idempotence; humanize/titleize/tableize/dasherize helpers.
"""

import pytest

from inflector import Inflector, english_inflector


@pytest.fixture
def infl() -> Inflector:
    inst = english_inflector()
    inst.add_acronym("id", "ID")
    inst.add_acronym("restful", "RESTful")
    inst.add_acronym("api", "API")
    return inst


@pytest.fixture
def plain() -> Inflector:
    return english_inflector()


# ──────────────────────────────────────────────────────────────────────────────
# camelize / underscore
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "snake,camel",
    [
        ("add_user_id_to_users", "AddUserIDToUsers"),
        ("restful_api", "RESTfulAPI"),
        ("api", "API"),
        ("user", "User"),
    ],
)
def test_acronym_round_trip(infl, snake, camel):
    assert infl.camelize(snake) == camel
    assert infl.underscore(camel) == snake


def test_camelize_lowercases_then_titles_tokens(plain):
    assert plain.camelize("product-name") == "ProductName"
    assert plain.camelize("USER_NAME") == "UserName"
    assert plain.camelize("") == ""


def test_camelize_lower_first(infl):
    assert infl.camelize("active_record", uppercase_first_letter=False) == "activeRecord"
    assert infl.camelize("id_card", uppercase_first_letter=False) == "idCard"
    assert infl.camelize("user_id", uppercase_first_letter=False) == "userID"


@pytest.mark.parametrize(
    "camel,snake",
    [
        ("FooBar", "foo_bar"),
        ("FOOBar", "foo_bar"),
        ("Version2Beta", "version2_beta"),
        ("foo bar-baz", "foo_bar_baz"),
        ("__Foo__Bar__", "foo_bar"),
        ("already_snake", "already_snake"),
    ],
)
def test_underscore_generic_boundaries(plain, camel, snake):
    assert plain.underscore(camel) == snake


def test_underscore_without_acronyms_splits_letters_runs(plain):
    assert plain.underscore("RESTfulAPI") == "res_tful_api"


def test_acronym_soft_boundary(infl):
    # display forms are found anywhere, including mid-word
    assert infl.underscore("UserIDToken") == "user_id_token"
    # matching is case-sensitive: lowercase "id" inside "Valid" is left alone
    assert infl.underscore("ValidID") == "valid_id"
    assert infl.underscore("ID") == "id"


@pytest.mark.parametrize(
    "word",
    ["add_user_id_to_users", "foo__bar", "_leading", "AddUserIDToUsers", "x-men rule"],
)
def test_underscore_idempotent(infl, word):
    once = infl.underscore(word)
    assert infl.underscore(once) == once


def test_acronym_pattern_rebuilt_on_each_add():
    inst = Inflector()
    assert inst.acronyms.pattern is None
    inst.add_acronym("rest", "REST")
    assert inst.acronyms.pattern.pattern == "(REST)"
    inst.add_acronym("restful", "RESTful")
    # longer display forms are tried first
    assert inst.acronyms.pattern.pattern == "(RESTful|REST)"
    assert inst.underscore("RESTfulAPI") == "restful_api"
    assert inst.underscore("RESTClient") == "rest_client"


def test_acronym_overwrite_keeps_single_alternative():
    inst = Inflector()
    inst.add_acronym("api", "API")
    inst.add_acronym("apis", "API")
    assert inst.acronyms.pattern.pattern == "(API)"
    assert inst.acronyms.upper_to_lower["API"] == "apis"
    assert len(inst.acronyms) == 1


def test_acronyms_isolated_per_instance(infl, plain):
    assert "id" in infl.acronyms
    assert "id" not in plain.acronyms
    assert plain.camelize("user_id") == "UserId"


# ──────────────────────────────────────────────────────────────────────────────
# humanize / titleize / tableize / dasherize
# ──────────────────────────────────────────────────────────────────────────────

def test_humanize(plain, infl):
    assert plain.humanize("employee_salary") == "Employee salary"
    assert plain.humanize("author_id") == "Author"
    assert plain.humanize("_hidden") == "Hidden"
    assert plain.humanize("employee_salary", capitalize=False) == "employee salary"
    assert infl.humanize("api_key") == "API key"


def test_titleize(plain, infl):
    assert plain.titleize("TheManWithoutAPast") == "The Man Without A Past"
    assert plain.titleize("x-men: the last stand") == "X Men: The Last Stand"
    assert infl.titleize("RESTfulAPI") == "RESTful API"


def test_tableize(plain):
    assert plain.tableize("RawScaledScorer") == "raw_scaled_scorers"
    assert plain.tableize("FancyCategory") == "fancy_categories"
    assert plain.tableize("Person") == "people"


def test_dasherize(plain):
    assert plain.dasherize("puni_puni") == "puni-puni"
