# src/goal_categorizer/evaluation/metrics.py
from __future__ import annotations
from typing import List, Optional, Sequence
import logging

import numpy as np
import pandas as pd
from sklearn.metrics import accuracy_score, classification_report, f1_score

from goal_categorizer.taxonomy.schema import Category

logger = logging.getLogger("goals.metrics")

NONE_LABEL = "none"
REPORT_COLUMNS = ["category", "n", "predicted", "tp", "precision", "recall", "f1"]


def _labels(values) -> List[str]:
    return [NONE_LABEL if (v is None or pd.isna(v) or v == "") else str(v) for v in values]

def _ordered(labels) -> List[str]:
    # taxonomy order first, then anything unexpected, "none" last
    order = [c.value for c in Category]
    return sorted(set(labels), key=lambda c: (c == NONE_LABEL, order.index(c) if c in order else len(order), c))

def accuracy(y_true: Sequence[str], y_pred: Sequence[str]) -> float:
    if not len(y_true):
        return 0.0
    return float(accuracy_score(y_true, y_pred))

def macro_f1(y_true: Sequence[str], y_pred: Sequence[str]) -> float:
    if not len(y_true):
        return 0.0
    return float(f1_score(y_true, y_pred, average="macro", zero_division=0))

def report_detection_metrics(
    df: pd.DataFrame,
    true_col: str = "true_category",
    pred_col: str = "pred_category",
    true_sub_col: Optional[str] = "true_subcategory",
    pred_sub_col: Optional[str] = "pred_subcategory",
) -> pd.DataFrame:
    """
    Log overall accuracy / macro-F1 / coverage and return a per-category frame
    (n, predicted, tp, precision, recall, f1). Unclassified rows count as "none".
    """
    total = int(len(df))
    if total == 0:
        logger.info("report_detection_metrics: empty dataframe; skipping.")
        return pd.DataFrame(columns=REPORT_COLUMNS)

    y_true = _labels(df[true_col])
    y_pred = _labels(df[pred_col])
    covered = sum(p != NONE_LABEL for p in y_pred)
    logger.info("Classified: %d/%d (%.2f%%)", covered, total, 100.0 * covered / total)
    logger.info("Category accuracy: %.4f  macro-F1: %.4f", accuracy(y_true, y_pred), macro_f1(y_true, y_pred))

    if true_sub_col in df.columns and pred_sub_col in df.columns:
        st, sp = _labels(df[true_sub_col]), _labels(df[pred_sub_col])
        both = [(a == b) and (x == y) for a, b, x, y in zip(y_true, y_pred, st, sp)]
        logger.info("Category+subcategory accuracy: %.4f", float(np.mean(both)))

    labels = _ordered(set(y_true) | set(y_pred))
    report = classification_report(y_true, y_pred, labels=labels, output_dict=True, zero_division=0)
    pred_counts = pd.Series(y_pred).value_counts()

    rows = []
    for c in labels:
        r = report[c]
        n = int(r["support"])
        rows.append({
            "category": c,
            "n": n,
            "predicted": int(pred_counts.get(c, 0)),
            "tp": int(round(r["recall"] * n)),
            "precision": round(float(r["precision"]), 4),
            "recall": round(float(r["recall"]), 4),
            "f1": round(float(r["f1-score"]), 4),
        })
    per_cat = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    logger.info("Per-category:\n%s", per_cat.to_string(index=False))
    return per_cat
