# src/goal_categorizer/taxonomy/rules/learning.py
from __future__ import annotations
from goal_categorizer.taxonomy.schema import Category
from .registry import register
from .split import SplitRule
from .constants import LEARNING_KEYWORDS, PROFESSIONAL_LEARNING_CONTEXT, PERSONAL_LEARNING_CONTEXT


@register
class ProfessionalVsPersonalLearningRule(SplitRule):
    name = "professional vs personal learning"
    priority = 60
    keywords = LEARNING_KEYWORDS
    side_a = ("professional", PROFESSIONAL_LEARNING_CONTEXT, (Category.PRODUCTIVITY, "professional_learning"))
    side_b = ("personal", PERSONAL_LEARNING_CONTEXT, (Category.PERSONAL_DEVELOPMENT, "learning"))
    boost_knob = "learning_boost"
