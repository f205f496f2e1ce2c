"""Order scored postings and keep the best N."""
from __future__ import annotations

from collections.abc import Iterable

from jobmatch.models import ScoredJob

DEFAULT_LIMIT = 5


def top_n(scored: Iterable[ScoredJob], limit: int = DEFAULT_LIMIT) -> list[ScoredJob]:
    """Highest ``match_score`` first; equal scores keep their catalog order.

    ``sorted`` is stable, so ties are never reshuffled between runs.
    """
    if limit <= 0:
        return []
    return sorted(scored, key=lambda s: -s.match_score)[:limit]
