# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/schema.py
from __future__ import annotations
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple


class Category(str, Enum):
    HEALTH = "health"
    PRODUCTIVITY = "productivity"
    HOUSEHOLD = "household"
    PRACTICAL = "practical"
    PERSONAL_DEVELOPMENT = "personal_development"
    ENTERTAINMENT = "entertainment"
    SOCIAL = "social"
    FINANCE = "finance"
    SHOPPING = "shopping"
    OTHER = "other"

    @classmethod
    def parse(cls, value) -> Optional["Category"]:
        """Category from its id ("health") or member name ("HEALTH"); None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        v = value.strip()
        try:
            return cls(v.lower())
        except ValueError:
            return cls.__members__.get(v.upper())


# ---- authoritative allowlist: category -> permitted subcategories ----
CATEGORY_SUBCATEGORIES: Dict[Category, Tuple[str, ...]] = {
    Category.HEALTH: ("sport", "medical", "nutrition", "sleep"),
    Category.PRODUCTIVITY: ("daily_work", "projects", "professional_learning"),
    Category.HOUSEHOLD: ("cleaning", "cooking", "laundry", "home_maintenance"),
    Category.PRACTICAL: ("transportation", "administration", "appointments", "repairs"),
    Category.PERSONAL_DEVELOPMENT: ("learning", "creative", "mindfulness"),
    Category.ENTERTAINMENT: ("entertainment", "relaxation", "hobbies"),
    Category.SOCIAL: ("family", "friends", "romantic", "social_activities"),
    Category.FINANCE: ("budgeting", "bills", "investments"),
    Category.SHOPPING: ("necessities", "lifestyle"),
    Category.OTHER: (),
}

_ALLOWED: Dict[Category, FrozenSet[str]] = {c: frozenset(s) for c, s in CATEGORY_SUBCATEGORIES.items()}

CATEGORY_LABELS: Dict[Category, str] = {
    Category.HEALTH: "Gezondheid & Fitness",
    Category.PRODUCTIVITY: "Werk & Productiviteit",
    Category.HOUSEHOLD: "Huishouden & Wonen",
    Category.PRACTICAL: "Praktisch & Regelen",
    Category.PERSONAL_DEVELOPMENT: "Persoonlijke Ontwikkeling",
    Category.ENTERTAINMENT: "Ontspanning & Hobby's",
    Category.SOCIAL: "Sociaal & Relaties",
    Category.FINANCE: "Financieel",
    Category.SHOPPING: "Shopping & Aankopen",
    Category.OTHER: "Anders",
}

SUBCATEGORY_LABELS: Dict[str, str] = {
    # health
    "sport": "Sport & Beweging",
    "medical": "Medisch & Zorg",
    "nutrition": "Voeding & Drinken",
    "sleep": "Slaap & Rust",
    # productivity
    "daily_work": "Dagelijks Werk",
    "projects": "Werk Projecten",
    "professional_learning": "Professionele Vaardigheden",
    # household
    "cleaning": "Schoonmaken",
    "cooking": "Koken & Maaltijden",
    "laundry": "Was & Kleding",
    "home_maintenance": "Huis Onderhoud",
    # practical
    "transportation": "Auto & Vervoer",
    "administration": "Administratie & Papierwerk",
    "appointments": "Afspraken & Planning",
    "repairs": "Reparaties & Klussen",
    # personal development
    "learning": "Lezen & Studie",
    "creative": "Creativiteit & Kunst",
    "mindfulness": "Reflectie & Meditatie",
    # entertainment
    "entertainment": "TV & Gaming",
    "relaxation": "Ontspanning & Wellness",
    "hobbies": "Persoonlijke Hobby's",
    # social
    "family": "Familie",
    "friends": "Vrienden",
    "romantic": "Romantiek & Dating",
    "social_activities": "Sociale Activiteiten",
    # finance
    "budgeting": "Budget & Planning",
    "bills": "Rekeningen & Betalingen",
    "investments": "Sparen & Investeren",
    # shopping
    "necessities": "Noodzakelijke Aankopen",
    "lifestyle": "Lifestyle Shopping",
}


# ---- public helpers ----
def all_categories() -> List[Tuple[Category, str]]:
    """[(category, label), ...] in declaration order."""
    return [(c, CATEGORY_LABELS[c]) for c in Category]

def subcategories_for(category) -> List[str]:
    cat = Category.parse(category)
    return list(CATEGORY_SUBCATEGORIES.get(cat, ())) if cat else []

def all_subcategories() -> List[str]:
    return sorted({s for subs in CATEGORY_SUBCATEGORIES.values() for s in subs})

def is_valid_subcategory(category, subcategory: Optional[str]) -> bool:
    cat = Category.parse(category)
    return cat is not None and isinstance(subcategory, str) and subcategory in _ALLOWED[cat]

def category_label(category) -> str:
    cat = Category.parse(category)
    if cat is None:
        return str(category)
    return CATEGORY_LABELS[cat]

def subcategory_label(subcategory: str) -> str:
    return SUBCATEGORY_LABELS.get(subcategory, subcategory)
