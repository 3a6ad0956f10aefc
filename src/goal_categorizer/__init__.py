# SPDX-License-Identifier: MIT
# src/goal_categorizer/__init__.py
from .taxonomy.rules_engine import classify, classify_with_details, classify_batch
from .taxonomy.schema import Category
from .taxonomy.scoring import DetectionResult

__all__ = (
    "classify",
    "classify_with_details",
    "classify_batch",
    "Category",
    "DetectionResult",
)
