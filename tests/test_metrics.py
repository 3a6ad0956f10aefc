import numpy as np
import pandas as pd
import pytest

from goal_categorizer.evaluation.metrics import (
    NONE_LABEL,
    _labels,
    accuracy,
    macro_f1,
    report_detection_metrics,
)


def test_labels_map_missing_to_none():
    assert _labels(["health", None, np.nan, ""]) == ["health", NONE_LABEL, NONE_LABEL, NONE_LABEL]


def test_accuracy_and_macro_f1():
    y_true = ["health", "health", "social", NONE_LABEL]
    y_pred = ["health", "social", "social", NONE_LABEL]
    assert accuracy(y_true, y_pred) == pytest.approx(0.75)
    # health: p=1 r=.5 ; social: p=.5 r=1 ; none: 1
    assert macro_f1(y_true, y_pred) == pytest.approx((2 / 3 + 2 / 3 + 1.0) / 3)


def test_empty_inputs():
    assert accuracy([], []) == 0.0
    assert macro_f1([], []) == 0.0
    out = report_detection_metrics(pd.DataFrame(columns=["true_category", "pred_category"]))
    assert out.empty
    assert list(out.columns) == ["category", "n", "predicted", "tp", "precision", "recall", "f1"]


def test_report_per_category():
    df = pd.DataFrame({
        "true_category": ["health", "health", "shopping", "social"],
        "pred_category": ["health", None, "shopping", "shopping"],
        "true_subcategory": ["sport", "sleep", "necessities", "friends"],
        "pred_subcategory": ["sport", None, "lifestyle", "lifestyle"],
    })
    report = report_detection_metrics(df)
    # taxonomy order, unclassified last
    assert list(report["category"]) == ["health", "social", "shopping", NONE_LABEL]
    out = report.set_index("category")

    assert out.loc["health", "n"] == 2
    assert out.loc["health", "recall"] == pytest.approx(0.5)
    assert out.loc["shopping", "predicted"] == 2
    assert out.loc["shopping", "precision"] == pytest.approx(0.5)
    assert out.loc[NONE_LABEL, "predicted"] == 1
    assert out.loc["social", "tp"] == 0
    assert out.loc["shopping", "f1"] == pytest.approx(2 / 3, abs=1e-4)
    assert out.loc["health", "f1"] == pytest.approx(2 / 3, abs=1e-4)
