# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/time_slot.py
from __future__ import annotations
from typing import Optional

from goal_categorizer.utils.text import contains_any
from .rules.context import Ctx
from .rules.constants import EARLY_SLOT_CUES, WAKE_UP_WORDS, SPORT_SLOT_CUES, ACTIVITY_WORDS
from .schema import Category
from .scoring import DetectionResult, ScoreBoard, ScoringConfig

WAKE_UP_RESULT = DetectionResult(Category.HEALTH, "sleep")


def apply_time_slot(ctx: Ctx, board: ScoreBoard, cfg: ScoringConfig) -> Optional[DetectionResult]:
    """
    Early slot + wake-up word decides Health/sleep outright (returned).
    Gym/sport hours + activity word add a small Health/sport bonus (None returned).
    """
    slot = ctx.time_slot
    if not slot:
        return None
    if contains_any(slot, EARLY_SLOT_CUES) and ctx.has(WAKE_UP_WORDS):
        return WAKE_UP_RESULT
    if contains_any(slot, SPORT_SLOT_CUES) and ctx.has(ACTIVITY_WORDS):
        board.add(Category.HEALTH, cfg.time_slot.sport_bonus, "sport")
        ctx.fired.append("time slot sport bonus")
    return None
