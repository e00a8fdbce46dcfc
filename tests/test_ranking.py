"""Tests for relevance ranking and quick filters."""

from nutrition_search.domain.products import Product
from nutrition_search.services.filters import QuickFilter, apply_quick_filter
from nutrition_search.services.ranking import rank_products, relevance_score


def test_name_match_tiers() -> None:
    query = "chicken breast"

    exact = relevance_score(Product(name="Chicken Breast"), query)
    prefix = relevance_score(Product(name="Chicken Breast Strips"), query)
    word = relevance_score(Product(name="Grilled Chicken Breast"), query)
    substring = relevance_score(Product(name="Smokedchicken breastfillet"), query)

    assert (exact, prefix, word, substring) == (100, 80, 60, 40)


def test_fuzzy_match_uses_bigram_similarity() -> None:
    score = relevance_score(Product(name="chicken"), "chickens")

    assert 0 < score < 30


def test_quality_bonuses() -> None:
    base = relevance_score(Product(name="Oats"), "oats")
    decorated = relevance_score(
        Product(name="Oats", image="https://img", serving="1 cup (80g)", brand="Quaker"),
        "oats",
    )

    assert decorated - base == 10


def test_rank_products_is_stable_on_ties() -> None:
    first = Product(name="Apple Pie", source="usda")
    second = Product(name="Apple Pie", source="openFoodFacts")
    exact = Product(name="Apple")

    ranked = rank_products([first, second, exact], "apple")

    assert ranked == [exact, first, second]


def test_high_protein_filter() -> None:
    lean = Product(name="Chicken", calories=165, protein=31)
    bread = Product(name="Bread", calories=265, protein=9)
    water = Product(name="Water", calories=0, protein=0)

    assert apply_quick_filter([lean, bread, water], QuickFilter.HIGH_PROTEIN) == [lean]


def test_low_carb_and_low_calorie_filters() -> None:
    rice = Product(name="Rice", calories=130, carbs=28)
    steak = Product(name="Steak", calories=271, carbs=0)

    assert apply_quick_filter([rice, steak], QuickFilter.LOW_CARB) == [steak]
    assert apply_quick_filter([rice, steak], QuickFilter.LOW_CALORIE) == [rice]


def test_keto_filter_uses_net_carbs_and_requires_fat() -> None:
    avocado = Product(
        name="Avocado", calories=160, carbs=8.5, fat=15, micronutrients={"fiber": 6.7}
    )
    almonds = Product(
        name="Almonds", calories=579, carbs=21.6, fat=49.9, micronutrients={"fiber": 12.5}
    )
    shrimp = Product(name="Shrimp", calories=99, carbs=0.2, fat=0)

    assert apply_quick_filter(
        [avocado, almonds, shrimp], QuickFilter.KETO_FRIENDLY
    ) == [avocado, almonds]


def test_no_filter_returns_input() -> None:
    products = [Product(name="Rice")]

    assert apply_quick_filter(products, None) is products
