"""Per-facet scorers comparing a normalized profile against one posting.

Weights (ceilings):
  - skills          55  proportional to required skills covered
  - accessibility   15  any overlap between needs and offered support
  - work mode       10
  - industry         5
  - location         5  preferred location is a substring of the job's
  - experience       5

The ceilings add up to 95, so a posting never reaches 100 on skills
alone while the categorical factors are unmet.
"""
from __future__ import annotations

from jobmatch.models import FactorScores, JobPosting
from jobmatch.normalize import NormalizedProfile, normalize_term, normalize_terms, ordered_terms

SKILL_WEIGHT = 55
ACCESSIBILITY_WEIGHT = 15
WORK_MODE_WEIGHT = 10
INDUSTRY_WEIGHT = 5
LOCATION_WEIGHT = 5
EXPERIENCE_WEIGHT = 5


def skill_score(profile: NormalizedProfile, job: JobPosting) -> float:
    """Fractional share of SKILL_WEIGHT; no requirements scores 0, not full marks."""
    required = normalize_terms(job.skills_required)
    if not required:
        return 0.0
    return SKILL_WEIGHT * len(required & profile.skills) / len(required)


def accessibility_score(profile: NormalizedProfile, job: JobPosting) -> float:
    offered = normalize_terms(job.accessibility_support)
    return float(ACCESSIBILITY_WEIGHT) if offered & profile.accessibility_needs else 0.0


def industry_score(profile: NormalizedProfile, job: JobPosting) -> float:
    industry = normalize_term(job.industry)
    return float(INDUSTRY_WEIGHT) if industry and industry in profile.industries else 0.0


def work_mode_score(profile: NormalizedProfile, job: JobPosting) -> float:
    mode = normalize_term(job.work_mode)
    return float(WORK_MODE_WEIGHT) if mode and mode in profile.work_modes else 0.0


def location_score(profile: NormalizedProfile, job: JobPosting) -> float:
    where = normalize_term(job.location)
    return float(LOCATION_WEIGHT) if any(loc in where for loc in profile.locations) else 0.0


def experience_score(profile: NormalizedProfile, job: JobPosting) -> float:
    if not profile.experience_level:
        return 0.0
    level = normalize_term(job.experience_level)
    return float(EXPERIENCE_WEIGHT) if level == profile.experience_level else 0.0


def score_factors(profile: NormalizedProfile, job: JobPosting) -> FactorScores:
    required = ordered_terms(job.skills_required)
    return FactorScores(
        skills=skill_score(profile, job),
        accessibility=accessibility_score(profile, job),
        industry=industry_score(profile, job),
        work_mode=work_mode_score(profile, job),
        location=location_score(profile, job),
        experience=experience_score(profile, job),
        matched_skills=tuple(s for s in required if s in profile.skills),
        missing_skills=tuple(s for s in required if s not in profile.skills),
    )
