"""Data models for candidate profiles, job postings and scored results."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

WORK_MODES: tuple[str, ...] = ("onsite", "remote", "hybrid")
EXPERIENCE_LEVELS: tuple[str, ...] = ("entry", "mid", "senior", "lead")
EMPLOYMENT_TYPES: tuple[str, ...] = ("full-time", "part-time", "contract", "internship", "freelance")


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """First non-None value among *keys*."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _section(data: Mapping[str, Any], *keys: str) -> Mapping[str, Any]:
    value = _pick(data, *keys)
    return value if isinstance(value, Mapping) else {}


def _as_strings(value: Any) -> tuple[str, ...]:
    """Coerce a list-ish field; anything unusable becomes empty."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        return ()
    return tuple(str(v) for v in value if v is not None)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_optional_text(value: Any) -> str | None:
    text = _as_text(value).strip()
    return text or None


def _format_salary(value: Any) -> str:
    """Render the platform's {min, max, currency, period} salary object."""
    if not isinstance(value, Mapping):
        return _as_text(value)
    low, high = value.get("min"), value.get("max")
    if low is None and high is None:
        return ""
    currency = _as_text(value.get("currency") or "USD")
    span = f"{low} - {high}" if low is not None and high is not None else str(low if low is not None else high)
    period = value.get("period")
    return f"{currency} {span}" + (f" / {period}" if period else "")


@dataclass(frozen=True)
class CandidateProfile:
    """What a job seeker has declared about themselves.

    Every field is optional. Collections default to empty and the
    experience level to ``None``, which the scorers treat as "no match".
    """

    skills: tuple[str, ...] = ()
    accessibility_needs: tuple[str, ...] = ()
    preferred_industries: tuple[str, ...] = ()
    preferred_work_modes: tuple[str, ...] = ()
    preferred_locations: tuple[str, ...] = ()
    preferred_experience_level: str | None = None
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CandidateProfile:
        """Build from a flat mapping or a platform user document.

        Accepts snake_case and camelCase keys, and the nested
        ``preferences`` / ``jobPreferences`` layout of user records.
        """
        prefs = _section(data, "preferences")
        job_prefs = _section(data, "jobPreferences", "job_preferences")
        return cls(
            skills=_as_strings(data.get("skills")),
            accessibility_needs=_as_strings(
                _pick(data, "accessibility_needs", "accessibilityNeeds")
                or _pick(prefs, "accessibilityRequirements", "accessibility_requirements")
            ),
            preferred_industries=_as_strings(
                _pick(data, "preferred_industries", "preferredIndustries")
                or _pick(prefs, "preferredIndustries", "preferred_industries")
            ),
            preferred_work_modes=_as_strings(
                _pick(data, "preferred_work_modes", "preferredWorkModes")
                or _pick(job_prefs, "workModes", "work_modes")
            ),
            preferred_locations=_as_strings(
                _pick(data, "preferred_locations", "preferredLocations")
                or _pick(job_prefs, "preferredLocations", "preferred_locations")
            ),
            preferred_experience_level=_as_optional_text(
                _pick(data, "preferred_experience_level", "preferredExperienceLevel")
                or _pick(job_prefs, "experienceLevel", "experience_level")
            ),
            name=_as_text(data.get("name")),
        )


@dataclass(frozen=True)
class JobPosting:
    """A job posting as offered by the catalog.

    Only the first seven fields feed the score; the rest are carried
    through so callers can render results.
    """

    id: str = ""
    skills_required: tuple[str, ...] = ()
    accessibility_support: tuple[str, ...] = ()
    industry: str = ""
    work_mode: str = ""
    location: str = ""
    experience_level: str = ""
    title: str = ""
    company: str = ""
    employment_type: str = ""
    salary_range: str = ""
    summary: str = ""
    benefits: tuple[str, ...] = ()
    featured: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JobPosting:
        """Build from a mapping; ``_id`` is accepted for document records."""
        return cls(
            id=_as_text(_pick(data, "id", "_id")),
            skills_required=_as_strings(_pick(data, "skills_required", "skillsRequired")),
            accessibility_support=_as_strings(_pick(data, "accessibility_support", "accessibilitySupport")),
            industry=_as_text(data.get("industry")),
            work_mode=_as_text(_pick(data, "work_mode", "workMode")),
            location=_as_text(data.get("location")),
            experience_level=_as_text(_pick(data, "experience_level", "experienceLevel")),
            title=_as_text(data.get("title")),
            company=_as_text(data.get("company")),
            employment_type=_as_text(_pick(data, "employment_type", "type")),
            salary_range=_format_salary(_pick(data, "salary_range", "salaryRange")),
            summary=_as_text(data.get("summary")),
            benefits=_as_strings(data.get("benefits")),
            featured=bool(data.get("featured", False)),
        )


@dataclass(frozen=True)
class FactorScores:
    """Per-factor contribution for one posting, before rounding."""

    skills: float = 0.0
    accessibility: float = 0.0
    industry: float = 0.0
    work_mode: float = 0.0
    location: float = 0.0
    experience: float = 0.0
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()

    @property
    def total(self) -> float:
        return (
            self.skills + self.accessibility + self.industry
            + self.work_mode + self.location + self.experience
        )

    @property
    def reasons(self) -> list[str]:
        """Short labels for the factors that contributed points."""
        out: list[str] = []
        if self.matched_skills:
            out.append(f"Skills: {', '.join(self.matched_skills[:5])}")
        if self.accessibility:
            out.append("Accessibility support match")
        if self.work_mode:
            out.append("Work mode match")
        if self.location:
            out.append("Location match")
        if self.experience:
            out.append("Experience level match")
        if self.industry:
            out.append("Preferred industry")
        return out


@dataclass(frozen=True)
class ScoredJob:
    job: JobPosting
    match_score: int
    factors: FactorScores = field(default_factory=FactorScores)
