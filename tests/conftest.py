# Ensure `src/` is on sys.path so tests can import `goal_categorizer` without requiring editable install
import os
import sys

import pytest

HERE = os.path.dirname(__file__)
SRC = os.path.abspath(os.path.join(HERE, "..", "src"))
if os.path.isdir(SRC) and SRC not in sys.path:
    sys.path.insert(0, SRC)

from goal_categorizer.taxonomy.lexicon import build_lexicon, load_bundled_lexicon  # noqa: E402


SYNTHETIC_ENTRIES = [
    ("gym", "health", "sport", 0.95),
    ("training", "health", "sport", 0.4),
    ("werk", "productivity", "daily_work", 0.95),
    ("kopen", "shopping", "lifestyle", 0.5),
    ("bestellen", "shopping", "lifestyle", 0.6),
    ("wasmiddel", "household", "cleaning", 0.9),
    ("water", "health", "nutrition", 0.8),
    ("water drinken", "health", "nutrition", 0.9),
    ("koken", "household", "cooking", 0.95),
    ("vriend", "social", "friends", 0.7),
    ("documenten", "practical", "administration", 0.8),
    ("leren", "productivity", "professional_learning", 0.4),
    ("boodschappen", "household", "cooking", 0.98),
    ("boodschappen doen", "household", "cooking", 0.99),
    ("grote boodschappen doen", "household", "cooking", 0.9),
]


def as_records(entries):
    return [
        {"pattern": p, "category": c, "subcategory": s, "confidence": conf}
        for p, c, s, conf in entries
    ]


@pytest.fixture(scope="session")
def bundled_lexicon():
    return load_bundled_lexicon()


@pytest.fixture(scope="session")
def small_lexicon():
    return build_lexicon(as_records(SYNTHETIC_ENTRIES), version="test", source="synthetic")
