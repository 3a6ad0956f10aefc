# SPDX-License-Identifier: MIT
# src/goal_categorizer/taxonomy/lexicon/__init__.py
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
import logging
import math

import yaml

from goal_categorizer.config import Settings, DEFAULT_LEXICON_RESOURCE
from goal_categorizer.taxonomy.schema import Category, CATEGORY_SUBCATEGORIES, is_valid_subcategory
from goal_categorizer.utils.text import clean_token

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LexiconEntry:
    pattern: str
    category: Category
    subcategory: Optional[str]
    confidence: float

    @property
    def is_phrase(self) -> bool:
        return " " in self.pattern

    @property
    def word_count(self) -> int:
        return len(self.pattern.split())


class LexiconError(ValueError):
    """Raised at load time; `problems` lists every offending entry."""

    def __init__(self, problems: Iterable[str], source: str = ""):
        self.problems: List[str] = list(problems)
        self.source = source
        where = f" ({source})" if source else ""
        lines = "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(f"Invalid lexicon{where}: {len(self.problems)} problem(s)\n{lines}")


class Lexicon:
    """
    Read-only pattern table.

    Single words live in a dict keyed by pattern. Phrases are ranked by word
    count (desc) then declaration order, and indexed by their first word so a
    call only inspects phrases whose head actually occurs in the text.
    """

    def __init__(self, entries: Iterable[LexiconEntry], version: str = "", source: str = ""):
        self.version = version
        self.source = source
        self._entries: Tuple[LexiconEntry, ...] = tuple(entries)
        self._words: Dict[str, LexiconEntry] = {}
        phrases: List[LexiconEntry] = []
        for e in self._entries:
            if e.is_phrase:
                phrases.append(e)
            else:
                self._words[e.pattern] = e

        # stable sort keeps declaration order within equal word counts
        self._phrases: Tuple[LexiconEntry, ...] = tuple(sorted(phrases, key=lambda e: -e.word_count))
        self._phrase_rank: Dict[str, int] = {e.pattern: i for i, e in enumerate(self._phrases)}
        self._by_head: Dict[str, List[LexiconEntry]] = {}
        for e in self._phrases:
            self._by_head.setdefault(e.pattern.split(" ", 1)[0], []).append(e)
        self._max_head_len = max((len(h) for h in self._by_head), default=0)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, pattern: str) -> bool:
        return pattern in self._words or pattern in self._phrase_rank

    @property
    def entries(self) -> Tuple[LexiconEntry, ...]:
        return self._entries

    @property
    def phrases(self) -> Tuple[LexiconEntry, ...]:
        """Phrase entries in match order."""
        return self._phrases

    @property
    def words(self) -> Mapping[str, LexiconEntry]:
        return self._words

    def get(self, pattern: str) -> Optional[LexiconEntry]:
        e = self._words.get(pattern)
        if e is not None:
            return e
        i = self._phrase_rank.get(pattern)
        return self._phrases[i] if i is not None else None

    def lookup_word(self, token: str) -> Optional[LexiconEntry]:
        return self._words.get(token)

    def phrases_in(self, blob: str) -> List[LexiconEntry]:
        """
        Phrase entries contained in `blob` as substrings, in match order.

        A phrase's first word is always followed by a literal space, so it must
        end a space-delimited chunk of the blob: only chunk suffixes up to the
        longest indexed head are looked up.
        """
        if not self._by_head:
            return []
        seen: Dict[str, LexiconEntry] = {}
        max_len = self._max_head_len
        for chunk in blob.split(" ")[:-1]:
            n = len(chunk)
            for i in range(max(0, n - max_len), n):
                for e in self._by_head.get(chunk[i:], ()):
                    if e.pattern not in seen and e.pattern in blob:
                        seen[e.pattern] = e
        return sorted(seen.values(), key=lambda e: self._phrase_rank[e.pattern])


# ---------- validation ----------

_REQUIRED = ("pattern", "category", "confidence")

def _validate_record(idx: int, rec: Any) -> Tuple[Optional[LexiconEntry], List[str]]:
    if isinstance(rec, LexiconEntry):
        rec = {"pattern": rec.pattern, "category": rec.category,
               "subcategory": rec.subcategory, "confidence": rec.confidence}
    if not isinstance(rec, Mapping):
        return None, [f"entry #{idx}: expected a mapping, got {type(rec).__name__}"]

    pattern = rec.get("pattern")
    label = f"entry #{idx} ({pattern!r})"
    missing = [k for k in _REQUIRED if k not in rec]
    if missing:
        return None, [f"{label}: missing field(s) {', '.join(missing)}"]

    problems: List[str] = []
    if not isinstance(pattern, str) or not pattern.strip():
        problems.append(f"{label}: pattern must be a non-empty string")
    else:
        if pattern != pattern.strip():
            problems.append(f"{label}: pattern has surrounding whitespace")
        if pattern != pattern.lower():
            problems.append(f"{label}: pattern must be lowercase")
        if any(ch.isspace() and ch != " " for ch in pattern):
            problems.append(f"{label}: pattern may only contain plain spaces between words")

    category = Category.parse(rec.get("category"))
    if category is None:
        problems.append(f"{label}: unknown category {rec.get('category')!r}")

    subcategory = rec.get("subcategory") or None
    if subcategory is not None and not isinstance(subcategory, str):
        problems.append(f"{label}: subcategory must be a string, got {subcategory!r}")
    elif subcategory is not None and category is not None and not is_valid_subcategory(category, subcategory):
        allowed = ", ".join(CATEGORY_SUBCATEGORIES[category]) or "none"
        problems.append(
            f"{label}: subcategory {subcategory!r} is not allowed for {category.value} (allowed: {allowed})"
        )

    conf = rec.get("confidence")
    if isinstance(conf, bool) or not isinstance(conf, (int, float)) or math.isnan(conf) or not (0.0 < conf <= 1.0):
        problems.append(f"{label}: confidence must be a number in (0, 1], got {conf!r}")

    if problems:
        return None, problems
    return LexiconEntry(pattern, category, subcategory, float(conf)), []


def build_lexicon(records: Iterable[Any], *, version: str = "", source: str = "<records>") -> Lexicon:
    """
    Validate records and build a Lexicon. Every invalid entry is reported in a
    single LexiconError. A repeated pattern replaces the earlier entry (logged).
    """
    problems: List[str] = []
    by_pattern: Dict[str, LexiconEntry] = {}
    for idx, rec in enumerate(records):
        entry, errs = _validate_record(idx, rec)
        if errs:
            problems.extend(errs)
            continue
        prev = by_pattern.get(entry.pattern)
        if prev is not None:
            if (prev.category, prev.subcategory) == (entry.category, entry.subcategory):
                log.warning("Duplicate lexicon pattern %r in %s/%s (entry #%d); last one wins",
                            entry.pattern, entry.category.value, entry.subcategory, idx)
            else:
                log.warning("Lexicon pattern %r redefined from %s/%s to %s/%s (entry #%d); last one wins",
                            entry.pattern, prev.category.value, prev.subcategory,
                            entry.category.value, entry.subcategory, idx)
        by_pattern[entry.pattern] = entry

    if problems:
        raise LexiconError(problems, source)

    lex = Lexicon(by_pattern.values(), version=version, source=source)

    unreachable = [p for p in lex.words if clean_token(p) != p]
    if unreachable:
        log.warning("%d single-word pattern(s) never equal a cleaned token and cannot match: %s",
                    len(unreachable), ", ".join(sorted(unreachable)[:10]))

    log.info("Loaded lexicon %s from %s: %d entries (%d words, %d phrases)",
             version or "<unversioned>", source, len(lex), len(lex.words), len(lex.phrases))
    return lex


# ---------- loaders ----------

def _from_document(doc: Any, source: str) -> Lexicon:
    if isinstance(doc, list):
        return build_lexicon(doc, source=source)
    if not isinstance(doc, Mapping) or not isinstance(doc.get("entries"), list):
        raise LexiconError(["document must be a list of entries or a mapping with an 'entries' list"], source)
    return build_lexicon(doc["entries"], version=str(doc.get("lexicon_version", "")), source=source)

def load_lexicon_yaml(path: str) -> Lexicon:
    with open(path, "r", encoding="utf-8") as f:
        doc = yaml.safe_load(f)
    return _from_document(doc, path)

def load_bundled_lexicon(resource: str = DEFAULT_LEXICON_RESOURCE) -> Lexicon:
    with resources.files(__package__).joinpath(resource).open("r", encoding="utf-8") as f:
        doc = yaml.safe_load(f)
    return _from_document(doc, resource)

def load_lexicon(settings: Optional[Settings] = None) -> Lexicon:
    """LEXICON_PATH (filesystem) wins over LEXICON_RESOURCE (package data)."""
    settings = settings or Settings()
    if settings.lexicon_path:
        return load_lexicon_yaml(settings.lexicon_path)
    return load_bundled_lexicon(settings.lexicon_resource)

@lru_cache(maxsize=None)
def default_lexicon() -> Lexicon:
    return load_lexicon()


__all__ = (
    "LexiconEntry",
    "Lexicon",
    "LexiconError",
    "build_lexicon",
    "load_lexicon_yaml",
    "load_bundled_lexicon",
    "load_lexicon",
    "default_lexicon",
)
