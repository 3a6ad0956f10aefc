# src/goal_categorizer/utils/text.py
from typing import Iterable, List, Optional, Tuple


def _as_text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)

def clean_token(word: str) -> str:
    """Drop every character that is not alphanumeric ("koken!" -> "koken")."""
    return "".join(ch for ch in word if ch.isalnum())

def normalize_inputs(
    title,
    description: Optional[str] = None,
    time_slot: Optional[str] = None,
) -> Tuple[str, List[str]]:
    """
    Join title, description and time slot into one lowercased blob and split it
    into cleaned tokens. Tokens that clean down to nothing are dropped.
    Returns (blob, tokens).
    """
    blob = f"{_as_text(title)} {_as_text(description)} {_as_text(time_slot)}".lower()
    tokens = [t for t in (clean_token(w) for w in blob.split()) if t]
    return blob, tokens

def contains_any(text: str, terms: Iterable[str]) -> bool:
    """Plain substring containment, same as the matcher uses for phrases."""
    return any(t in text for t in terms if t)

def present_terms(text: str, terms: Iterable[str]) -> List[str]:
    """Order-preserving list of terms contained in text (for details/debugging)."""
    hits: List[str] = []
    seen = set()
    for t in terms:
        if t and t in text and t not in seen:
            seen.add(t); hits.append(t)
    return hits
