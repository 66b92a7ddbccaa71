"""
Ranked employee search.

``rank`` merges several match tiers in a fixed priority order so that
role abbreviations ("CEO", "VP ENG") and plain substrings always come before
loose fuzzy hits. Items only need ``id``, ``name``, ``title``, ``email`` and
``department`` attributes, so ORM rows and schema objects both work.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from .acronyms import DEFAULT_ACRONYMS, AcronymMap

T = TypeVar("T")

FUZZY_WEIGHTS: dict[str, float] = {
    "name": 0.4,
    "title": 0.3,
    "email": 0.2,
    "department": 0.1,
}
SHORT_QUERY_LENGTH = 3
SHORT_QUERY_THRESHOLD = 0.6
DEFAULT_THRESHOLD = 0.4
# a perfect field match would otherwise zero out the weighted product
_MIN_DISTANCE = 1e-3


def _field(item: Any, name: str) -> str:
    return str(getattr(item, name, "") or "")


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def fuzzy_threshold(query: str) -> float:
    """Normalised distance cut-off; short queries are treated more leniently."""

    return SHORT_QUERY_THRESHOLD if len(query) <= SHORT_QUERY_LENGTH else DEFAULT_THRESHOLD


def title_initials(title: str) -> str:
    """First letter of every word: ``"Chief Executive Officer"`` -> ``"ceo"``."""

    return "".join(word[0] for word in title.split()).lower()


def field_distance(query: str, value: str) -> float:
    """0.0 for a perfect (partial) match, 1.0 for nothing in common."""

    if not value:
        return 1.0
    return 1.0 - fuzz.partial_ratio(query, value, processor=default_process) / 100.0


def matches_acronym(item: Any, query: str, acronyms: AcronymMap) -> bool:
    """The whole query is a known abbreviation of a phrase in the title."""

    phrases = acronyms.get(query.upper())
    if not phrases:
        return False
    title = _field(item, "title")
    return any(_contains(title, phrase) for phrase in phrases)


def matches_multiword_acronym(item: Any, query: str, acronyms: AcronymMap) -> bool:
    """Every token resolves to a phrase found in the title or department."""

    tokens = query.upper().split()
    if not tokens:
        return False
    title = _field(item, "title")
    department = _field(item, "department")
    for token in tokens:
        phrases = acronyms.get(token)
        if not phrases:
            return False
        if not any(_contains(title, p) or _contains(department, p) for p in phrases):
            return False
    return True


def matches_initialism(item: Any, query: str) -> bool:
    return query.lower() in title_initials(_field(item, "title"))


def matches_title_or_name(item: Any, query: str) -> bool:
    return _contains(_field(item, "title"), query) or _contains(_field(item, "name"), query)


def matches_department(item: Any, query: str) -> bool:
    return _contains(_field(item, "department"), query)


def matches_exact(item: Any, query: str) -> bool:
    return any(
        _contains(_field(item, name), query)
        for name in ("name", "title", "email", "department")
    )


def fuzzy_score(item: Any, query: str, threshold: float) -> float | None:
    """
    Weighted score over the fields that fall within ``threshold``.

    Each matching field contributes ``distance ** weight``; the product is
    the item's score (lower is better). ``None`` means no field matched.
    """

    score = 1.0
    matched = False
    for name, weight in FUZZY_WEIGHTS.items():
        distance = field_distance(query, _field(item, name))
        if distance <= threshold:
            matched = True
            score *= max(distance, _MIN_DISTANCE) ** weight
    return score if matched else None


def fuzzy_matches(items: Sequence[T], query: str) -> list[T]:
    """Items within the fuzzy threshold, best first (stable on ties)."""

    threshold = fuzzy_threshold(query)
    scored: list[tuple[float, T]] = []
    for item in items:
        score = fuzzy_score(item, query, threshold)
        if score is not None:
            scored.append((score, item))
    scored.sort(key=lambda pair: pair[0])
    return [item for _, item in scored]


def _merge_unique(tiers: Iterable[Iterable[T]], key: Callable[[T], Any]) -> list[T]:
    seen: set[Any] = set()
    merged: list[T] = []
    for tier in tiers:
        for item in tier:
            ident = key(item)
            if ident in seen:
                continue
            seen.add(ident)
            merged.append(item)
    return merged


def rank(
    items: Sequence[T],
    query: str,
    exact: bool = False,
    acronyms: AcronymMap | None = None,
) -> list[T]:
    """
    Return the subset of ``items`` matching ``query``, most relevant first.

    A blank query returns every item in its original order. In exact mode
    the result is a plain case-insensitive substring filter. Otherwise the
    tiers are concatenated in priority order and later duplicates dropped:

    1. acronym dictionary hit on the title
    2. every query token is an acronym found in title or department
    3. title initials contain the query
    4. substring of title or name
    5. substring of department
    6. fuzzy match over name, title, email and department
    """

    if not query or not query.strip():
        return list(items)

    term = query.strip()
    if exact:
        return [item for item in items if matches_exact(item, term)]

    table = DEFAULT_ACRONYMS if acronyms is None else acronyms
    tiers = [
        [item for item in items if matches_acronym(item, term, table)],
        [item for item in items if matches_multiword_acronym(item, term, table)],
        [item for item in items if matches_initialism(item, term)],
        [item for item in items if matches_title_or_name(item, term)],
        [item for item in items if matches_department(item, term)],
        fuzzy_matches(items, term),
    ]
    return _merge_unique(tiers, key=lambda item: getattr(item, "id"))
