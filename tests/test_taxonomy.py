from goal_categorizer.taxonomy.schema import (
    CATEGORY_SUBCATEGORIES,
    Category,
    all_categories,
    all_subcategories,
    category_label,
    is_valid_subcategory,
    subcategories_for,
    subcategory_label,
)


def test_every_category_has_an_allowlist_and_label():
    assert set(CATEGORY_SUBCATEGORIES) == set(Category)
    cats = all_categories()
    assert [c for c, _ in cats] == list(Category)
    assert dict(cats)[Category.SHOPPING] == "Shopping & Aankopen"
    assert CATEGORY_SUBCATEGORIES[Category.OTHER] == ()


def test_parse_accepts_ids_and_member_names():
    assert Category.parse("personal_development") is Category.PERSONAL_DEVELOPMENT
    assert Category.parse("FINANCE") is Category.FINANCE
    assert Category.parse(Category.SOCIAL) is Category.SOCIAL
    assert Category.parse("hobby") is None
    assert Category.parse(None) is None


def test_subcategory_helpers():
    assert subcategories_for("shopping") == ["necessities", "lifestyle"]
    assert subcategories_for("unknown") == []
    assert is_valid_subcategory(Category.HEALTH, "sleep")
    assert not is_valid_subcategory(Category.HEALTH, "cooking")
    assert not is_valid_subcategory("nope", "sleep")
    assert not is_valid_subcategory(Category.HEALTH, ["sport"])

    subs = all_subcategories()
    assert subs == sorted(set(subs))
    assert "entertainment" in subs and "romantic" in subs


def test_labels_fall_back_to_identifier():
    assert category_label("health") == "Gezondheid & Fitness"
    assert category_label("mystery") == "mystery"
    assert subcategory_label("sport") == "Sport & Beweging"
    assert subcategory_label("skills") == "skills"
