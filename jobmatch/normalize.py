"""Canonicalize free-text terms so profile and posting values compare by set membership."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from jobmatch.models import CandidateProfile


def normalize_term(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()


def _items(values: Any) -> Iterable[Any]:
    """``None`` and scalars that are not lists become zero or one items."""
    if values is None:
        return ()
    if isinstance(values, str) or not isinstance(values, Iterable):
        return (values,)
    return values


def normalize_terms(values: Iterable[Any] | str | None) -> frozenset[str]:
    """Trimmed, lower-cased, non-empty terms; duplicates and order are dropped.

    ``None`` yields the empty set and a bare string counts as one term.
    """
    terms = (normalize_term(v) for v in _items(values))
    return frozenset(t for t in terms if t)


def ordered_terms(values: Iterable[Any] | str | None) -> list[str]:
    """Like :func:`normalize_terms` but keeps first-seen order."""
    terms = (normalize_term(v) for v in _items(values))
    return list(dict.fromkeys(t for t in terms if t))


@dataclass(frozen=True)
class NormalizedProfile:
    skills: frozenset[str]
    accessibility_needs: frozenset[str]
    industries: frozenset[str]
    work_modes: frozenset[str]
    locations: frozenset[str]
    experience_level: str


def normalize_profile(profile: CandidateProfile) -> NormalizedProfile:
    return NormalizedProfile(
        skills=normalize_terms(profile.skills),
        accessibility_needs=normalize_terms(profile.accessibility_needs),
        industries=normalize_terms(profile.preferred_industries),
        work_modes=normalize_terms(profile.preferred_work_modes),
        locations=normalize_terms(profile.preferred_locations),
        experience_level=normalize_term(profile.preferred_experience_level),
    )
