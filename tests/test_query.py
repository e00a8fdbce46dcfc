"""Tests for query normalization."""

from nutrition_search.services.query import canonical_name, expand_abbreviations


def test_expand_abbreviations_maps_known_tokens() -> None:
    assert expand_abbreviations("chkn brst") == "chicken breast"
    assert expand_abbreviations("pb") == "peanut butter"
    assert expand_abbreviations("grnd turk") == "ground turkey"


def test_expand_abbreviations_is_case_insensitive_and_collapses_whitespace() -> None:
    assert expand_abbreviations("  CHKN   Brst  ") == "chicken breast"
    assert expand_abbreviations("Greek YOG") == "greek yogurt"


def test_expand_abbreviations_passes_unknown_tokens_through() -> None:
    assert expand_abbreviations("quinoa bowl") == "quinoa bowl"


def test_expand_abbreviations_empty_input() -> None:
    assert expand_abbreviations("") == ""
    assert expand_abbreviations("   ") == ""


def test_canonical_name_strips_everything_but_letters() -> None:
    assert canonical_name("Chicken Breast") == "chickenbreast"
    assert canonical_name("CHICKEN-BREAST (2)") == "chickenbreast"
    assert canonical_name("Milk (2%)") == canonical_name("milk")
