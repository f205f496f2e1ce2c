"""
Pytest configuration and shared fixtures.
"""

import pytest

from jobmatch.models import CandidateProfile, JobPosting


def make_job(job_id: str = "job", **fields) -> JobPosting:
    """Posting with nothing that scores unless overridden."""
    return JobPosting(id=job_id, **fields)


@pytest.fixture
def job_factory():
    return make_job


@pytest.fixture
def react_profile() -> CandidateProfile:
    """Profile from the worked example: React/TypeScript, remote, mid-level."""
    return CandidateProfile(
        skills=("React", "TypeScript"),
        accessibility_needs=(),
        preferred_industries=("Design Services",),
        preferred_work_modes=("remote",),
        preferred_locations=("Remote",),
        preferred_experience_level="mid",
    )


@pytest.fixture
def frontend_job() -> JobPosting:
    return JobPosting(
        id="job-a",
        title="Frontend Accessibility Engineer",
        company="Inclusion Labs",
        skills_required=("React", "TypeScript", "ARIA"),
        accessibility_support=("screen-reader",),
        industry="Technology",
        work_mode="remote",
        location="Remote",
        experience_level="mid",
        employment_type="full-time",
        salary_range="$80k - $110k",
    )


@pytest.fixture
def full_match_profile() -> CandidateProfile:
    """Matches every factor of ``frontend_job``."""
    return CandidateProfile(
        skills=("react", "typescript", "aria"),
        accessibility_needs=("Screen-Reader",),
        preferred_industries=("technology",),
        preferred_work_modes=("remote",),
        preferred_locations=("remote",),
        preferred_experience_level="mid",
    )


@pytest.fixture
def user_document() -> dict:
    """A user record as stored by the platform (camelCase, nested prefs)."""
    return {
        "_id": "64f0c0ffee",
        "name": "Asha Rao",
        "skills": ["React", " TypeScript "],
        "preferences": {
            "accessibilityRequirements": ["captioning"],
            "preferredIndustries": ["Assistive Technology"],
        },
        "jobPreferences": {
            "workModes": ["hybrid"],
            "preferredLocations": ["Bengaluru"],
            "experienceLevel": "mid",
        },
    }
