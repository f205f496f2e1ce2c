"""Catalog read from a local YAML or JSON file."""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

import yaml

from jobmatch.errors import CatalogError
from jobmatch.log import get_logger
from jobmatch.models import JobPosting
from jobmatch.sources.base import CatalogSource, postings_from_records

log = get_logger(__name__)


class FileCatalogSource(CatalogSource):
    """Postings from a file holding either a list or a ``jobs:``/``data:`` list."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read(self) -> object:
        if not self.path.is_file():
            raise CatalogError(f"Catalog file not found: {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                if self.path.suffix.lower() == ".json":
                    return json.load(f)
                return yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise CatalogError(f"Catalog file {self.path.name} could not be parsed: {exc}") from exc

    def load(self) -> list[JobPosting]:
        data = self._read()
        if data is None:
            data = []
        elif isinstance(data, Mapping):
            if "jobs" not in data and "data" not in data:
                raise CatalogError(f"Catalog file {self.path.name} has no 'jobs' or 'data' list")
            data = data.get("jobs", data.get("data")) or []
        if not isinstance(data, list):
            raise CatalogError(f"Catalog file {self.path.name} must contain a list of postings")

        jobs = postings_from_records(data, self.path.name)
        log.info("Loaded %d postings from %s", len(jobs), self.path)
        return jobs
