from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from jobmatch.log import get_logger
from jobmatch.models import JobPosting

log = get_logger(__name__)


class CatalogSource(ABC):
    @abstractmethod
    def load(self) -> list[JobPosting]:
        pass


def postings_from_records(records: Iterable[Any], origin: str) -> list[JobPosting]:
    """Build postings from raw records, skipping entries that are not mappings."""
    jobs: list[JobPosting] = []
    for i, record in enumerate(records):
        if not isinstance(record, Mapping):
            log.warning("[%s] skipping record %d: expected a mapping, got %s", origin, i, type(record).__name__)
            continue
        jobs.append(JobPosting.from_dict(record))
    return jobs
