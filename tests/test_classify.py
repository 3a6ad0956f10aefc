from concurrent.futures import ThreadPoolExecutor

import pytest

from goal_categorizer import classify, classify_with_details
from goal_categorizer.taxonomy.schema import Category, is_valid_subcategory

SAMPLE_GOALS = [
    ("Gym", None, None),
    ("Boodschappen doen", "voor het weekend", None),
    ("Wasmiddel kopen, het is op", None, None),
    ("Training voor werk", None, None),
    ("Training in de gym", None, "18:00 - 19:00"),
    ("Meer water, gezond leven", None, None),
    ("Water koken in de keuken", None, None),
    ("Documenten gemeente paspoort", None, None),
    ("Administratie bank", None, None),
    ("Spaans leren hobby", None, None),
    ("Vriendin date vrienden", None, None),
    ("Nieuwe laptop bestellen voor werk", None, None),
    ("Actief bezig", None, "10:00 - 11:00"),
    ("", None, None),
]


@pytest.mark.parametrize("title,expected", [
    ("Gym", (Category.HEALTH, "sport")),
    ("Wasmiddel kopen, het is op", (Category.SHOPPING, "necessities")),
    ("Training voor werk", (Category.PRODUCTIVITY, "daily_work")),
    ("Training in de gym", (Category.HEALTH, "sport")),
    ("Meer water, gezond leven", (Category.HEALTH, "nutrition")),
    ("Water koken in de keuken", (Category.HOUSEHOLD, "cooking")),
    ("Documenten gemeente paspoort", (Category.PRACTICAL, "administration")),
    ("Administratie bank", (Category.FINANCE, "budgeting")),
    ("Spaans leren hobby", (Category.PERSONAL_DEVELOPMENT, "learning")),
])
def test_known_goals(title, expected, bundled_lexicon):
    res = classify(title, lexicon=bundled_lexicon)
    assert res is not None
    assert (res.category, res.subcategory) == expected


@pytest.mark.parametrize("title", ["", "   ", "?!...", None, "a" * 10_000])
def test_empty_or_meaningless_input(title, bundled_lexicon):
    assert classify(title, lexicon=bundled_lexicon) is None


def test_non_string_inputs_are_coerced(bundled_lexicon):
    assert classify("gym", 12, 7, lexicon=bundled_lexicon).category is Category.HEALTH


def test_longer_phrase_wins_over_its_words(bundled_lexicon):
    _, det = classify_with_details("boodschappen doen", lexicon=bundled_lexicon)
    assert det["matched"] == ["boodschappen doen"]
    assert det["scores"]["household"]["score"] == pytest.approx(1.29)

    _, det = classify_with_details("boodschappen", lexicon=bundled_lexicon)
    assert det["scores"]["household"]["score"] == pytest.approx(0.98)


def test_repeated_keyword_counts_once(bundled_lexicon):
    _, once = classify_with_details("gym", lexicon=bundled_lexicon)
    _, twice = classify_with_details("gym gym gym", lexicon=bundled_lexicon)
    assert once["scores"] == twice["scores"]


def test_ambiguous_relationship_keeps_raw_scores(bundled_lexicon):
    res, det = classify_with_details("Vriendin date vrienden", lexicon=bundled_lexicon)
    assert (res.category, res.subcategory) == (Category.SOCIAL, "friends")
    assert det["scores"]["social"]["subscores"] == {"friends": pytest.approx(0.85)}
    assert "romantic vs platonic" not in det["fired"]


def test_below_floor_is_none(bundled_lexicon):
    assert classify("leren", lexicon=bundled_lexicon) is None
    # sport slot bonus alone is not enough
    assert classify("Actief bezig", None, "10:00 - 11:00", lexicon=bundled_lexicon) is None


def test_wake_up_short_circuit(bundled_lexicon):
    res = classify("Wakker worden", "en dan werk", "Ochtend", lexicon=bundled_lexicon)
    assert (res.category, res.subcategory) == (Category.HEALTH, "sleep")


def test_details_shape(bundled_lexicon):
    _, det = classify_with_details("Wasmiddel kopen, het is op", lexicon=bundled_lexicon)
    assert set(det) == {"matched", "rules", "fired", "scores", "adjusted", "short_circuit"}
    assert det["rules"][0]["rule"] == "purchase intent"
    assert det["fired"][0] == "purchase intent"


@pytest.mark.parametrize("title,description,slot", SAMPLE_GOALS)
def test_results_are_valid_and_above_floor(title, description, slot, bundled_lexicon):
    res, det = classify_with_details(title, description, slot, lexicon=bundled_lexicon)
    if res is None:
        return
    assert isinstance(res.category, Category)
    assert res.category is not Category.OTHER
    assert res.subcategory is None or is_valid_subcategory(res.category, res.subcategory)
    if det["short_circuit"] is None:
        assert det["adjusted"][res.category.value] >= 0.5


def test_deterministic_across_threads(bundled_lexicon):
    def run(goal):
        return classify(*goal, lexicon=bundled_lexicon)

    expected = [run(g) for g in SAMPLE_GOALS]
    with ThreadPoolExecutor(max_workers=4) as pool:
        for _ in range(3):
            assert list(pool.map(run, SAMPLE_GOALS)) == expected


def test_default_lexicon_is_used(bundled_lexicon):
    assert classify("Gym") == classify("Gym", lexicon=bundled_lexicon)
