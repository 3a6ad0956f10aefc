# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/selector.py
from __future__ import annotations
from typing import Dict, Optional, Tuple

from .schema import Category
from .scoring import DetectionResult, ScoreBoard, ScoringConfig

# Tie order when two categories share the best adjusted score (first wins).
SELECTION_ORDER = (
    Category.HEALTH,
    Category.PRODUCTIVITY,
    Category.HOUSEHOLD,
    Category.ENTERTAINMENT,
    Category.PERSONAL_DEVELOPMENT,
    Category.SOCIAL,
    Category.SHOPPING,
    Category.PRACTICAL,
    Category.FINANCE,
    Category.OTHER,
)


def adjusted_scores(board: ScoreBoard, cfg: ScoringConfig) -> Dict[Category, float]:
    """
    Category scores after the cross-category penalties. Conditions read the
    raw (pre-penalty) scores, so penalties never cascade.
    """
    p = cfg.penalties
    shopping = board.score(Category.SHOPPING)
    health = board.score(Category.HEALTH)
    productivity = board.score(Category.PRODUCTIVITY)

    out = {cat: cs.score for cat, cs in board}
    if shopping > p.shopping_strong:
        out[Category.HEALTH] -= p.health_penalty
    if productivity > p.productivity_strong:
        out[Category.HOUSEHOLD] -= p.household_penalty
    if health > p.activity_very_strong or productivity > p.activity_very_strong:
        out[Category.SHOPPING] -= p.shopping_penalty
    return out

def best_subcategory(board: ScoreBoard, category: Category) -> Optional[str]:
    best, best_score = None, 0.0
    for sub, score in board[category].subscores.items():
        if score > best_score:
            best, best_score = sub, score
    return best

def select_winner(board: ScoreBoard, cfg: ScoringConfig) -> Tuple[Optional[DetectionResult], Dict[Category, float]]:
    """
    Highest adjusted score at or above the confidence floor wins (earliest in
    SELECTION_ORDER on ties); below the floor there is no result.
    """
    adjusted = adjusted_scores(board, cfg)
    floor = cfg.selection.confidence_floor
    winner: Optional[Category] = None
    best = 0.0
    for cat in SELECTION_ORDER:
        score = adjusted[cat]
        if score >= floor and (winner is None or score > best):
            winner, best = cat, score
    if winner is None:
        return None, adjusted
    return DetectionResult(winner, best_subcategory(board, winner)), adjusted
