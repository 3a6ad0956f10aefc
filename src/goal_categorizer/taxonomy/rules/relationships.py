# src/goal_categorizer/taxonomy/rules/relationships.py
from __future__ import annotations
from goal_categorizer.taxonomy.schema import Category
from .registry import register
from .split import SplitRule
from .constants import RELATIONSHIP_KEYWORDS, ROMANTIC_CONTEXT, FRIEND_CONTEXT


@register
class RomanticVsPlatonicRule(SplitRule):
    """Only moves the Social subcategory; the keyword already scored Social."""
    name = "romantic vs platonic"
    priority = 40
    keywords = RELATIONSHIP_KEYWORDS
    side_a = ("romantic", ROMANTIC_CONTEXT, (Category.SOCIAL, "romantic"))
    side_b = ("friends", FRIEND_CONTEXT, (Category.SOCIAL, "friends"))
    boost_knob = "relationship_sub_boost"
    subscore_only = True
