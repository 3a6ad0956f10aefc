# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/scoring.py
from __future__ import annotations
from dataclasses import dataclass, field, fields, is_dataclass, replace
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple
import json
import logging

import yaml

from .schema import Category

log = logging.getLogger(__name__)


# ---------- per-call state ----------

@dataclass
class CategoryScore:
    score: float = 0.0
    subscores: Dict[str, float] = field(default_factory=dict)


class ScoreBoard:
    """Scores for every category, created and thrown away inside one call."""

    def __init__(self):
        self._scores: Dict[Category, CategoryScore] = {c: CategoryScore() for c in Category}

    def __getitem__(self, category: Category) -> CategoryScore:
        return self._scores[category]

    def __iter__(self) -> Iterator[Tuple[Category, CategoryScore]]:
        return iter(self._scores.items())

    def score(self, category: Category) -> float:
        return self._scores[category].score

    def add(self, category: Category, amount: float, subcategory: Optional[str] = None) -> None:
        """Add to the category score and, when given, to the same subcategory."""
        cs = self._scores[category]
        cs.score += amount
        if subcategory:
            cs.subscores[subcategory] = cs.subscores.get(subcategory, 0.0) + amount

    def add_sub(self, category: Category, subcategory: str, amount: float) -> None:
        """Add to a subscore only; the category score is untouched."""
        cs = self._scores[category]
        cs.subscores[subcategory] = cs.subscores.get(subcategory, 0.0) + amount

    def reduce(self, category: Category, amount: float) -> None:
        """Subtract from the category score, never below zero."""
        cs = self._scores[category]
        cs.score = max(0.0, cs.score - amount)

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        return {
            c.value: {"score": round(cs.score, 4), "subscores": {k: round(v, 4) for k, v in cs.subscores.items()}}
            for c, cs in self._scores.items()
            if cs.score or cs.subscores
        }


@dataclass(frozen=True)
class DetectionResult:
    category: Category
    subcategory: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"category": self.category.value, "subcategory": self.subcategory}


# ---------- knobs ----------

@dataclass(frozen=True)
class MatchKnobs:
    phrase_bonus_per_extra_word: float = 0.3

@dataclass(frozen=True)
class PurchaseKnobs:
    shopping_boost: float = 0.8
    clear_context_sub_boost: float = 0.7    # necessity xor lifestyle cues
    item_type_sub_boost: float = 0.6        # food/household vs clothing
    default_sub_boost: float = 0.5
    item_group_boost: float = 0.9
    item_group_sub_boost: float = 0.8
    item_group_lifestyle_sub_boost: float = 0.7
    item_group_penalty: float = 0.3
    necessity_fallback_boost: float = 0.7
    necessity_fallback_sub_boost: float = 0.6

@dataclass(frozen=True)
class ContextKnobs:
    cooking_nutrition_boost: float = 0.6
    training_boost: float = 0.6
    relationship_sub_boost: float = 0.5
    paperwork_boost: float = 0.5
    learning_boost: float = 0.4

@dataclass(frozen=True)
class TimeSlotKnobs:
    sport_bonus: float = 0.3

@dataclass(frozen=True)
class PenaltyKnobs:
    shopping_strong: float = 0.7
    health_penalty: float = 0.2
    productivity_strong: float = 0.7
    household_penalty: float = 0.15
    activity_very_strong: float = 0.8
    shopping_penalty: float = 0.1

@dataclass(frozen=True)
class SelectionKnobs:
    confidence_floor: float = 0.5

@dataclass(frozen=True)
class ScoringConfig:
    match: MatchKnobs = field(default_factory=MatchKnobs)
    purchase: PurchaseKnobs = field(default_factory=PurchaseKnobs)
    context: ContextKnobs = field(default_factory=ContextKnobs)
    time_slot: TimeSlotKnobs = field(default_factory=TimeSlotKnobs)
    penalties: PenaltyKnobs = field(default_factory=PenaltyKnobs)
    selection: SelectionKnobs = field(default_factory=SelectionKnobs)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {f.name: dict(vars(getattr(self, f.name))) for f in fields(self)}

DEFAULT_SCORING_CFG = ScoringConfig()


def _to_float(x, default: float) -> float:
    try:
        return float(x)
    except (TypeError, ValueError):
        log.warning("Ignoring non-numeric scoring knob value %r (keeping %s)", x, default)
        return default

def scoring_config_from_snapshot(snapshot: Mapping[str, Any], base: ScoringConfig = DEFAULT_SCORING_CFG) -> ScoringConfig:
    """
    New ScoringConfig with snapshot values applied on top of `base`.
    Snapshot shape mirrors to_dict(): {"penalties": {"health_penalty": 0.25}, ...}.
    Unknown sections/keys are ignored.
    """
    if not isinstance(snapshot, Mapping):
        raise ValueError(f"Scoring snapshot must be a mapping of sections, got {type(snapshot).__name__}")
    updates: Dict[str, Any] = {}
    for section in fields(base):
        knobs = getattr(base, section.name)
        raw = snapshot.get(section.name) or {}
        if not is_dataclass(knobs) or not isinstance(raw, Mapping):
            continue
        names = {f.name for f in fields(knobs)}
        changes = {k: _to_float(v, getattr(knobs, k)) for k, v in raw.items() if k in names}
        if changes:
            updates[section.name] = replace(knobs, **changes)
    return replace(base, **updates)

def load_scoring_config(path: str) -> ScoringConfig:
    """Read a YAML or JSON knob snapshot; an empty path gives the defaults."""
    if not path:
        return DEFAULT_SCORING_CFG
    with open(path, "r", encoding="utf-8") as f:
        blob = json.load(f) if path.endswith(".json") else yaml.safe_load(f)
    try:
        cfg = scoring_config_from_snapshot(blob or {})
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e
    log.info("Loaded scoring knobs from %s", path)
    return cfg
