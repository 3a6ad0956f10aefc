# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/rules/purchase.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence

from goal_categorizer.taxonomy.schema import Category
from goal_categorizer.taxonomy.scoring import ScoreBoard, ScoringConfig
from .registry import register, Details
from .context import Ctx
from .constants import (
    PURCHASE_INDICATORS, NECESSITY_INDICATORS, LIFESTYLE_INDICATORS,
    FOOD_ITEMS, HOUSEHOLD_BASICS, CLOTHING_ITEMS,
    HEALTH_PURCHASE_ITEMS, HOUSEHOLD_PURCHASE_ITEMS, PRACTICAL_PURCHASE_ITEMS,
    PRACTICAL_URGENCY_CUES, ENTERTAINMENT_PURCHASE_ITEMS, PRODUCTIVITY_PURCHASE_ITEMS,
    PRODUCTIVITY_WORK_CUES, STRONG_NECESSITY_INDICATORS,
)

NECESSITIES = "necessities"
LIFESTYLE = "lifestyle"


@dataclass(frozen=True)
class ItemGroup:
    """
    Items whose purchase belongs to Shopping rather than `category`.
    `subcategory` fixes the Shopping subcategory; when None it is necessities
    if necessity cues (general or `necessity_cues`) are present, else lifestyle.
    """
    label: str
    category: Category
    items: Sequence[str]
    subcategory: Optional[str] = None
    necessity_cues: Sequence[str] = ()


ITEM_GROUPS = (
    ItemGroup("health_items", Category.HEALTH, HEALTH_PURCHASE_ITEMS, NECESSITIES),
    ItemGroup("household_items", Category.HOUSEHOLD, HOUSEHOLD_PURCHASE_ITEMS, NECESSITIES),
    ItemGroup("practical_items", Category.PRACTICAL, PRACTICAL_PURCHASE_ITEMS,
              necessity_cues=PRACTICAL_URGENCY_CUES),
    ItemGroup("entertainment_items", Category.ENTERTAINMENT, ENTERTAINMENT_PURCHASE_ITEMS, LIFESTYLE),
    ItemGroup("productivity_items", Category.PRODUCTIVITY, PRODUCTIVITY_PURCHASE_ITEMS,
              necessity_cues=PRODUCTIVITY_WORK_CUES),
)


@register
class PurchaseIntentRule:
    name = "purchase intent"
    priority = 10
    targets = ((Category.SHOPPING, NECESSITIES), (Category.SHOPPING, LIFESTYLE)) + tuple(
        (g.category, None) for g in ITEM_GROUPS
    )

    def trigger(self, ctx: Ctx) -> bool:
        return ctx.has(PURCHASE_INDICATORS)

    def effect(self, ctx: Ctx, board: ScoreBoard, cfg: ScoringConfig) -> Details:
        k = cfg.purchase
        necessity = ctx.hits(NECESSITY_INDICATORS)
        lifestyle = ctx.hits(LIFESTYLE_INDICATORS)
        det = Details(self.name, hits={
            "purchase": ctx.hits(PURCHASE_INDICATORS),
            "necessity": necessity,
            "lifestyle": lifestyle,
        })

        def shop(amount: float, sub: Optional[str] = None, sub_amount: float = 0.0):
            if amount:
                board.add(Category.SHOPPING, amount)
                det.adjustments.append((Category.SHOPPING.value, "", amount))
            if sub:
                board.add_sub(Category.SHOPPING, sub, sub_amount)
                det.adjustments.append((Category.SHOPPING.value, sub, sub_amount))

        # 1) intent itself, subcategory from cues or from the kind of item
        if necessity and not lifestyle:
            shop(k.shopping_boost, NECESSITIES, k.clear_context_sub_boost)
        elif lifestyle and not necessity:
            shop(k.shopping_boost, LIFESTYLE, k.clear_context_sub_boost)
        elif ctx.has(FOOD_ITEMS) or ctx.has(HOUSEHOLD_BASICS):
            shop(k.shopping_boost, NECESSITIES, k.item_type_sub_boost)
        elif ctx.has(CLOTHING_ITEMS):
            shop(k.shopping_boost, LIFESTYLE, k.item_type_sub_boost)
        else:
            shop(k.shopping_boost, NECESSITIES, k.default_sub_boost)

        # 2) item groups pull the purchase away from the item's own domain
        any_group = False
        for group in ITEM_GROUPS:
            items = ctx.hits(group.items)
            if not items:
                continue
            any_group = True
            det.hits[group.label] = items
            if group.subcategory == NECESSITIES:
                shop(k.item_group_boost, NECESSITIES, k.item_group_sub_boost)
            elif group.subcategory == LIFESTYLE:
                shop(k.item_group_boost, LIFESTYLE, k.item_group_sub_boost)
            elif necessity or ctx.has(group.necessity_cues):
                shop(k.item_group_boost, NECESSITIES, k.item_group_sub_boost)
            else:
                shop(k.item_group_boost, LIFESTYLE, k.item_group_lifestyle_sub_boost)
            board.reduce(group.category, k.item_group_penalty)
            det.adjustments.append((group.category.value, "", -k.item_group_penalty))

        # 3) unknown item but clearly needed
        if not any_group:
            strong = ctx.hits(STRONG_NECESSITY_INDICATORS)
            if strong:
                det.hits["strong_necessity"] = strong
                shop(k.necessity_fallback_boost, NECESSITIES, k.necessity_fallback_sub_boost)
        return det
