# src/goal_categorizer/taxonomy/rules/cooking.py
from __future__ import annotations
from goal_categorizer.taxonomy.schema import Category
from .registry import register
from .split import SplitRule
from .context import Ctx
from .constants import NUTRITION_KEYWORDS, HEALTH_CONTEXT, COOKING_CONTEXT


@register
class CookingVsNutritionRule(SplitRule):
    name = "cooking vs nutrition"
    priority = 20
    keywords = NUTRITION_KEYWORDS
    side_a = ("health", HEALTH_CONTEXT, (Category.HEALTH, "nutrition"))
    side_b = ("cooking", COOKING_CONTEXT, (Category.HOUSEHOLD, "cooking"))
    boost_knob = "cooking_nutrition_boost"

    def blocked(self, ctx: Ctx) -> bool:
        # a purchase of food is shopping, whatever the kitchen words say
        return "purchase intent" in ctx.fired
