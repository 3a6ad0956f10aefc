# src/goal_categorizer/taxonomy/rules/paperwork.py
from __future__ import annotations
from goal_categorizer.taxonomy.schema import Category
from .registry import register
from .split import SplitRule
from .constants import PAPERWORK_KEYWORDS, FINANCE_CONTEXT, OFFICIAL_CONTEXT


@register
class FinanceVsAdministrationRule(SplitRule):
    name = "finance vs administration"
    priority = 50
    keywords = PAPERWORK_KEYWORDS
    side_a = ("finance", FINANCE_CONTEXT, (Category.FINANCE, "budgeting"))
    side_b = ("official", OFFICIAL_CONTEXT, (Category.PRACTICAL, "administration"))
    boost_knob = "paperwork_boost"
