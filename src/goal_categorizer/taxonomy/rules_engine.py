# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/rules_engine.py
from __future__ import annotations
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple
import importlib
import logging
import pkgutil

import pandas as pd  # only needed for classify_batch

from goal_categorizer.config import Settings
from goal_categorizer.utils.text import normalize_inputs
from .lexicon import Lexicon, default_lexicon
from .matcher import match_phrases, match_words
from .rules import ordered_rules, validate_registry
from .rules.context import Ctx
from .scoring import DetectionResult, ScoreBoard, ScoringConfig, load_scoring_config
from .selector import select_winner
from .time_slot import apply_time_slot

log = logging.getLogger(__name__)

_NOT_RULES = {"context", "constants", "registry", "split", "__init__"}

# --- Auto-discover and import all rule modules so they self-register ---
def _eager_import_rules():
    """
    Import every submodule in goal_categorizer.taxonomy.rules so that any
    module-level '@register' calls run and populate REGISTRY.
    """
    pkg_name = f"{__package__}.rules"
    pkg = importlib.import_module(pkg_name)
    for m in pkgutil.iter_modules(pkg.__path__):
        if m.ispkg or m.name.startswith("_") or m.name in _NOT_RULES:
            continue
        importlib.import_module(f"{pkg_name}.{m.name}")

# Ensure REGISTRY is populated and sane on import
_eager_import_rules()
validate_registry()
_RULES = tuple(ordered_rules())


@lru_cache(maxsize=None)
def default_scoring_config() -> ScoringConfig:
    return load_scoring_config(Settings().scoring_config_path)


def classify_with_details(
    title,
    description: Optional[str] = None,
    time_slot: Optional[str] = None,
    *,
    lexicon: Optional[Lexicon] = None,
    cfg: Optional[ScoringConfig] = None,
) -> Tuple[Optional[DetectionResult], Dict[str, Any]]:
    """
    Returns: (result_or_None, details_dict)
    details: {
        "matched": [phrases..., tokens...],
        "rules": [{"rule", "hits", "adjustments", "notes"}...],   # triggered rules, in order
        "fired": [rule names that changed scores],
        "scores": {category: {"score", "subscores"}},             # before penalties
        "adjusted": {category: score},                            # after penalties
        "short_circuit": "time_slot" | None,
    }
    """
    lexicon = lexicon or default_lexicon()
    cfg = cfg or default_scoring_config()

    blob, tokens = normalize_inputs(title, description, time_slot)
    ctx = Ctx(
        blob=blob,
        tokens=tokens,
        time_slot=str(time_slot or "").lower(),
    )
    board = ScoreBoard()

    match_phrases(ctx, board, lexicon, cfg)
    match_words(ctx, board, lexicon)

    rule_details: List[Dict[str, Any]] = []
    if ctx.matched:
        for rule in _RULES:
            if not rule.trigger(ctx):
                continue
            det = rule.effect(ctx, board, cfg)
            if det.applied:
                ctx.fired.append(rule.name)
            rule_details.append({
                "rule": det.rule, "hits": det.hits,
                "adjustments": det.adjustments, "notes": det.notes,
            })

    details: Dict[str, Any] = {
        "matched": list(ctx.matched),
        "rules": rule_details,
        "fired": ctx.fired,
        "scores": None,
        "adjusted": None,
        "short_circuit": None,
    }

    early = apply_time_slot(ctx, board, cfg)
    details["scores"] = board.snapshot()
    if early is not None:
        details["short_circuit"] = "time_slot"
        log.debug("classify %r -> %s (time slot)", blob, early)
        return early, details

    result, adjusted = select_winner(board, cfg)
    details["adjusted"] = {c.value: round(s, 4) for c, s in adjusted.items() if s}
    log.debug("classify %r matched=%s fired=%s -> %s", blob, ctx.matched, ctx.fired, result)
    return result, details


def classify(
    title,
    description: Optional[str] = None,
    time_slot: Optional[str] = None,
    *,
    lexicon: Optional[Lexicon] = None,
    cfg: Optional[ScoringConfig] = None,
) -> Optional[DetectionResult]:
    """Category/subcategory for a goal, or None when nothing scores above the floor."""
    return classify_with_details(title, description, time_slot, lexicon=lexicon, cfg=cfg)[0]


def classify_batch(
    df: pd.DataFrame,
    title_col: str = "title",
    description_col: Optional[str] = "description",
    time_slot_col: Optional[str] = "time_slot",
    *,
    lexicon: Optional[Lexicon] = None,
    cfg: Optional[ScoringConfig] = None,
) -> pd.DataFrame:
    """
    Returns a copy of df with 'pred_category' and 'pred_subcategory'
    (None where no confident classification). Missing optional columns are
    treated as empty.
    """
    if title_col not in df.columns:
        raise ValueError(f"Column {title_col!r} not in dataframe; have {list(df.columns)}")
    lexicon = lexicon or default_lexicon()
    cfg = cfg or default_scoring_config()

    def _col(name):
        if name and name in df.columns:
            return df[name].astype(object).where(df[name].notna(), None)
        return pd.Series([None] * len(df), index=df.index)

    out = df.copy()
    cats: List[Optional[str]] = []
    subs: List[Optional[str]] = []
    for t, d, s in zip(_col(title_col), _col(description_col), _col(time_slot_col)):
        res = classify(t or "", d, s, lexicon=lexicon, cfg=cfg)
        cats.append(res.category.value if res else None)
        subs.append(res.subcategory if res else None)

    out["pred_category"] = cats
    out["pred_subcategory"] = subs
    log.info("classify_batch: %d rows, %d classified", len(out), sum(c is not None for c in cats))
    return out
