import pandas as pd


def test_rules_engine_classify_batch_minimal():
    from goal_categorizer.taxonomy.rules_engine import classify_batch

    df = pd.DataFrame([
        {"title": "Naar de gym", "description": None, "time_slot": "10:00"},
        {"title": "Boodschappen doen", "description": "voor het weekend", "time_slot": None},
        {"title": "", "description": None, "time_slot": None},
    ])

    out = classify_batch(df.copy())

    # Columns callers rely on later
    assert "pred_category" in out.columns
    assert "pred_subcategory" in out.columns
    assert list(out["pred_category"]) == ["health", "household", None]

    # Input frame is not modified
    assert "pred_category" not in df.columns


def test_classify_batch_without_optional_columns(small_lexicon):
    from goal_categorizer.taxonomy.rules_engine import classify_batch

    df = pd.DataFrame({"title": ["gym", "niets"]})
    out = classify_batch(df, lexicon=small_lexicon)
    assert list(out["pred_category"]) == ["health", None]
    assert list(out["pred_subcategory"]) == ["sport", None]


def test_classify_batch_missing_title_column():
    import pytest
    from goal_categorizer.taxonomy.rules_engine import classify_batch

    with pytest.raises(ValueError):
        classify_batch(pd.DataFrame({"name": ["gym"]}))
