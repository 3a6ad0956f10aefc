# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/rules/split.py
from __future__ import annotations
from typing import Optional, Sequence, Tuple

from goal_categorizer.taxonomy.schema import Category
from goal_categorizer.taxonomy.scoring import ScoreBoard, ScoringConfig
from .context import Ctx
from .registry import Details

Target = Tuple[Category, str]


class SplitRule:
    """
    Resolve an ambiguous keyword by its company.

    Fires when one of `keywords` was matched. If only side A's context terms
    occur, side A's target is boosted; if only side B's, side B's. Both or
    neither leaves the raw scores alone.
    """
    name: str = ""
    priority: int = 0
    keywords: Sequence[str] = ()
    side_a: Tuple[str, Sequence[str], Target]
    side_b: Tuple[str, Sequence[str], Target]
    boost_knob: str = ""
    subscore_only: bool = False

    @property
    def targets(self) -> Tuple[Target, Target]:
        return self.side_a[2], self.side_b[2]

    def trigger(self, ctx: Ctx) -> bool:
        return ctx.matched_any(self.keywords)

    def blocked(self, ctx: Ctx) -> bool:
        return False

    def effect(self, ctx: Ctx, board: ScoreBoard, cfg: ScoringConfig) -> Details:
        a_label, a_terms, a_target = self.side_a
        b_label, b_terms, b_target = self.side_b
        a_hits, b_hits = ctx.hits(a_terms), ctx.hits(b_terms)
        det = Details(self.name, hits={a_label: a_hits, b_label: b_hits})

        if self.blocked(ctx):
            det.notes = "blocked"
            return det

        target: Optional[Target] = None
        if a_hits and not b_hits:
            target = a_target
        elif b_hits and not a_hits:
            target = b_target
        if target is None:
            det.notes = "ambiguous" if a_hits else "no context"
            return det

        amount = getattr(cfg.context, self.boost_knob)
        cat, sub = target
        if self.subscore_only:
            board.add_sub(cat, sub, amount)
        else:
            board.add(cat, amount, sub)
        det.adjustments.append((cat.value, sub, amount))
        return det
