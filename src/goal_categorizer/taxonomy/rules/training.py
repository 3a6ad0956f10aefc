# src/goal_categorizer/taxonomy/rules/training.py
from __future__ import annotations
from goal_categorizer.taxonomy.schema import Category
from .registry import register
from .split import SplitRule
from .constants import TRAINING_KEYWORDS, WORK_TRAINING_CONTEXT, FITNESS_CONTEXT


@register
class WorkVsFitnessTrainingRule(SplitRule):
    name = "work vs fitness training"
    priority = 30
    keywords = TRAINING_KEYWORDS
    side_a = ("work", WORK_TRAINING_CONTEXT, (Category.PRODUCTIVITY, "professional_learning"))
    side_b = ("fitness", FITNESS_CONTEXT, (Category.HEALTH, "sport"))
    boost_knob = "training_boost"
