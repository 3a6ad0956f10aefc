# src/goal_categorizer/taxonomy/rules/context.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List

from goal_categorizer.utils.text import contains_any, present_terms


@dataclass
class Ctx:
    blob: str
    tokens: List[str]
    time_slot: str = ""
    matched: List[str] = field(default_factory=list)  # phrases + tokens scored so far
    fired: List[str] = field(default_factory=list)    # names of rules that adjusted scores

    def has(self, terms: Iterable[str]) -> bool:
        return contains_any(self.blob, terms)

    def hits(self, terms: Iterable[str]) -> List[str]:
        return present_terms(self.blob, terms)

    def matched_any(self, keywords: Iterable[str]) -> bool:
        return any(k in self.matched for k in keywords)
