"""Rank a job catalog against one candidate profile.

Pipeline: normalize profile → score six factors per posting →
aggregate to an integer 0-100 → stable sort → top N.

Nothing here performs I/O or logs; identical inputs give identical output.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from jobmatch.aggregate import aggregate
from jobmatch.errors import InvalidArgument
from jobmatch.factors import score_factors
from jobmatch.models import CandidateProfile, JobPosting, ScoredJob
from jobmatch.normalize import NormalizedProfile, normalize_profile
from jobmatch.ranker import DEFAULT_LIMIT, top_n

ProfileLike = CandidateProfile | Mapping[str, Any]
JobLike = JobPosting | Mapping[str, Any]


def _coerce_profile(profile: Any) -> CandidateProfile:
    if isinstance(profile, CandidateProfile):
        return profile
    if isinstance(profile, Mapping):
        return CandidateProfile.from_dict(profile)
    raise InvalidArgument(f"profile must be a CandidateProfile or mapping, got {type(profile).__name__}")


def _coerce_catalog(catalog: Any) -> list[JobPosting]:
    if isinstance(catalog, (str, bytes, Mapping)):
        raise InvalidArgument(f"catalog must be a sequence of postings, got {type(catalog).__name__}")
    try:
        items = iter(catalog)
    except TypeError as exc:
        raise InvalidArgument(f"catalog is not iterable: {type(catalog).__name__}") from exc

    jobs: list[JobPosting] = []
    for i, item in enumerate(items):
        if isinstance(item, JobPosting):
            jobs.append(item)
        elif isinstance(item, Mapping):
            jobs.append(JobPosting.from_dict(item))
        else:
            raise InvalidArgument(f"catalog item {i} is not a posting: {type(item).__name__}")
    return jobs


def _check_limit(limit: Any) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidArgument(f"limit must be an integer, got {type(limit).__name__}")
    if limit < 0:
        raise InvalidArgument(f"limit must be >= 0, got {limit}")
    return limit


def _score(normalized: NormalizedProfile, job: JobPosting) -> ScoredJob:
    factors = score_factors(normalized, job)
    return ScoredJob(job=job, match_score=aggregate(factors), factors=factors)


def score_job(profile: ProfileLike, job: JobLike) -> ScoredJob:
    """Score a single posting."""
    jobs = _coerce_catalog([job])
    return _score(normalize_profile(_coerce_profile(profile)), jobs[0])


def rank(
    profile: ProfileLike,
    catalog: Iterable[JobLike],
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredJob]:
    """Return the ``limit`` best-matching postings, best first.

    Postings with equal scores keep their catalog order. ``limit=0``
    returns ``[]`` without looking at the profile or catalog.

    Raises:
        InvalidArgument: ``profile`` is not a record, ``catalog`` is not an
            iterable of records, or ``limit`` is not a non-negative int.
            The whole catalog is checked before anything is scored.
    """
    limit = _check_limit(limit)
    if limit == 0:
        return []

    candidate = _coerce_profile(profile)
    jobs = _coerce_catalog(catalog)
    normalized = normalize_profile(candidate)
    return top_n([_score(normalized, job) for job in jobs], limit)
