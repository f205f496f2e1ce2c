"""
Job matcher for an accessibility-first job board.

Scores each posting in a catalog against a candidate's skills,
accessibility needs and work preferences, and returns the best matches.
"""

from jobmatch.engine import rank, score_job
from jobmatch.errors import CatalogError, ConfigError, InvalidArgument, MatchingError
from jobmatch.models import CandidateProfile, FactorScores, JobPosting, ScoredJob

__version__ = "1.0.0"

__all__ = [
    "rank",
    "score_job",
    "CandidateProfile",
    "JobPosting",
    "ScoredJob",
    "FactorScores",
    "MatchingError",
    "InvalidArgument",
    "CatalogError",
    "ConfigError",
]
