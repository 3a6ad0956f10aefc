# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/rules/registry.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from goal_categorizer.taxonomy.schema import Category, is_valid_subcategory

REGISTRY: List[Any] = []

@dataclass
class Details:
    rule: str
    hits: Dict[str, List[str]] = field(default_factory=dict)
    adjustments: List[Tuple[str, str, float]] = field(default_factory=list)  # (category, subcategory|"", delta)
    notes: str = ""

    @property
    def applied(self) -> bool:
        return bool(self.adjustments)

def register(cls):
    REGISTRY.append(cls())
    return cls

def ordered_rules() -> List[Any]:
    """Rules by ascending priority; the order is part of the scoring semantics."""
    return sorted(REGISTRY, key=lambda r: r.priority)

def validate_registry() -> None:
    """
    Fail fast on a mis-declared rule set: duplicate names or priorities, missing
    hooks, or a target subcategory outside its category's allowlist.
    """
    problems = []
    names, prios = set(), set()
    for r in REGISTRY:
        for attr in ("name", "priority", "targets", "trigger", "effect"):
            if not hasattr(r, attr):
                problems.append(f"{r!r} is missing {attr}")
        name, prio = getattr(r, "name", None), getattr(r, "priority", None)
        if name in names:
            problems.append(f"duplicate rule name {name!r}")
        if prio in prios:
            problems.append(f"duplicate rule priority {prio} ({name})")
        names.add(name); prios.add(prio)
        for cat, sub in getattr(r, "targets", ()):
            if not isinstance(cat, Category) or (sub is not None and not is_valid_subcategory(cat, sub)):
                problems.append(f"rule {name!r} targets invalid {cat}/{sub}")
    if problems:
        raise TypeError("Invalid context rule registry: " + "; ".join(problems))
