# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/matcher.py
from __future__ import annotations
from typing import List

from .lexicon import Lexicon
from .rules.context import Ctx
from .scoring import ScoreBoard, ScoringConfig


def match_phrases(ctx: Ctx, board: ScoreBoard, lexicon: Lexicon, cfg: ScoringConfig) -> List[str]:
    """
    Score every phrase contained in the blob. Longer phrases earn a bonus per
    extra word. Matched phrases are appended to ctx.matched.
    """
    bonus = cfg.match.phrase_bonus_per_extra_word
    hits: List[str] = []
    for entry in lexicon.phrases_in(ctx.blob):
        board.add(entry.category, entry.confidence + bonus * (entry.word_count - 1), entry.subcategory)
        hits.append(entry.pattern)
    ctx.matched.extend(hits)
    return hits

def match_words(ctx: Ctx, board: ScoreBoard, lexicon: Lexicon) -> List[str]:
    """
    Score single tokens. A token already contained in something matched
    (a phrase or an earlier token) is skipped, so nothing counts twice.
    """
    hits: List[str] = []
    for tok in ctx.tokens:
        if any(tok in m for m in ctx.matched):
            continue
        entry = lexicon.lookup_word(tok)
        if entry is None:
            continue
        board.add(entry.category, entry.confidence, entry.subcategory)
        ctx.matched.append(tok)
        hits.append(tok)
    return hits
