"""
Tests for the rank() / score_job() entry points.
"""

import itertools
from dataclasses import replace

import pytest

from jobmatch import InvalidArgument, rank, score_job
from jobmatch.models import CandidateProfile, JobPosting
from jobmatch.sources.sample import SAMPLE_JOBS


class TestScoreJob:
    def test_worked_example_scores_57(self, react_profile, frontend_job):
        """36.67 skills + 10 work mode + 5 location + 5 experience → 57."""
        scored = score_job(react_profile, frontend_job)
        assert scored.match_score == 57
        assert scored.job is frontend_job

    def test_everything_matches_scores_95(self, full_match_profile, frontend_job):
        assert score_job(full_match_profile, frontend_job).match_score == 95

    def test_empty_requirements_contribute_zero(self, full_match_profile, frontend_job):
        job = replace(frontend_job, skills_required=())
        scored = score_job(full_match_profile, job)
        assert scored.factors.skills == 0
        assert scored.match_score == 40

    def test_accepts_mappings(self, user_document):
        job = {
            "_id": "voice",
            "skillsRequired": ["React", "Node.js"],
            "accessibilitySupport": ["captioning"],
            "industry": "Assistive Technology",
            "workMode": "hybrid",
            "location": "Hybrid - Bengaluru",
            "experienceLevel": "mid",
        }
        scored = score_job(user_document, job)
        assert scored.job.id == "voice"
        # 27.5 + 15 + 5 + 10 + 5 + 5 = 67.5 → 68
        assert scored.match_score == 68


class TestRank:
    def test_limit_zero_returns_empty_without_scoring(self):
        """limit=0 short-circuits before the catalog is even iterated."""

        def exploding():
            raise AssertionError("catalog should not be read")
            yield  # pragma: no cover

        assert rank(CandidateProfile(), exploding(), 0) == []

    def test_empty_catalog(self, react_profile):
        assert rank(react_profile, [], 5) == []

    def test_default_limit(self, react_profile, job_factory):
        catalog = [job_factory(f"job-{i}") for i in range(8)]
        assert len(rank(react_profile, catalog)) == 5

    def test_fewer_jobs_than_limit(self, react_profile, frontend_job, job_factory):
        result = rank(react_profile, [job_factory("blank"), frontend_job], 5)
        assert [s.job.id for s in result] == ["job-a", "blank"]

    def test_ties_keep_catalog_order(self, react_profile, job_factory):
        catalog = [job_factory(f"job-{i}", work_mode="remote") for i in range(4)]
        result = rank(react_profile, catalog, 3)
        assert [s.job.id for s in result] == ["job-0", "job-1", "job-2"]
        assert {s.match_score for s in result} == {10}

    def test_scores_bounded(self, full_match_profile, react_profile):
        for profile in (CandidateProfile(), react_profile, full_match_profile):
            for s in rank(profile, SAMPLE_JOBS, len(SAMPLE_JOBS)):
                assert 0 <= s.match_score <= 100

    def test_idempotent(self, react_profile):
        first = rank(react_profile, SAMPLE_JOBS, 5)
        second = rank(react_profile, SAMPLE_JOBS, 5)
        assert first == second

    def test_inputs_not_mutated(self, react_profile):
        catalog = list(SAMPLE_JOBS)
        before = list(catalog)
        rank(react_profile, catalog, 5)
        assert catalog == before

    def test_posting_with_none_skills_still_ranked(self):
        profile = CandidateProfile(preferred_work_modes=("remote",))
        result = rank(profile, [JobPosting(id="x", skills_required=None, work_mode="remote")], 5)
        assert [(s.job.id, s.match_score) for s in result] == [("x", 10)]

    def test_monotonic_in_matching_skills(self, frontend_job):
        """Adding a required skill never lowers the score."""
        required = frontend_job.skills_required
        for n in range(len(required)):
            for subset in itertools.combinations(required, n):
                base = score_job(CandidateProfile(skills=subset), frontend_job).match_score
                for extra in set(required) - set(subset):
                    grown = CandidateProfile(skills=subset + (extra,))
                    assert score_job(grown, frontend_job).match_score >= base

    def test_sample_catalog_ranking(self):
        profile = CandidateProfile(
            skills=("React", "TypeScript", "WCAG", "ARIA", "Testing Library"),
            accessibility_needs=("screen-reader",),
            preferred_industries=("Technology",),
            preferred_work_modes=("remote",),
            preferred_locations=("Remote",),
            preferred_experience_level="mid",
        )
        result = rank(profile, SAMPLE_JOBS, 2)
        assert result[0].job.id == "frontend-accessibility-engineer"
        assert result[0].match_score == 95
        # remote + location + mid-level, no skills
        assert result[1].job.id == "content-strategist-inclusive-design"
        assert result[1].match_score == 20


class TestRankInvalidArguments:
    @pytest.mark.parametrize("catalog", [None, 42, "jobs", {"id": "x"}])
    def test_catalog_not_a_sequence(self, react_profile, catalog):
        with pytest.raises(InvalidArgument):
            rank(react_profile, catalog, 5)

    def test_catalog_item_not_a_record(self, react_profile, frontend_job):
        with pytest.raises(InvalidArgument):
            rank(react_profile, [frontend_job, "not a job"], 5)

    @pytest.mark.parametrize("profile", [None, ["React"], "React"])
    def test_profile_not_a_record(self, profile, frontend_job):
        with pytest.raises(InvalidArgument):
            rank(profile, [frontend_job], 5)

    @pytest.mark.parametrize("limit", [-1, 2.5, "5", True])
    def test_bad_limit(self, react_profile, limit):
        with pytest.raises(InvalidArgument):
            rank(react_profile, [], limit)

    def test_invalid_argument_is_a_type_error(self):
        assert issubclass(InvalidArgument, TypeError)
