"""Catalog fetched from the job board's REST API.

``GET {base_url}/api/jobs?status=active&page=N&limit=M`` responds with
``{"status": "success", "data": [...], "pagination": {"pages": K, ...}}``.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

from jobmatch.errors import CatalogError
from jobmatch.log import get_logger
from jobmatch.models import JobPosting
from jobmatch.retry import is_transient_status, retry
from jobmatch.sources.base import CatalogSource, postings_from_records

log = get_logger(__name__)

JOBS_PATH = "/api/jobs"


class TransientStatusError(requests.HTTPError):
    """429 or 5xx from the API; retried before giving up."""


class ApiCatalogSource(CatalogSource):
    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        page_size: int = 50,
        max_pages: int = 20,
        timeout: float = 15,
    ) -> None:
        self.url = base_url.rstrip("/") + JOBS_PATH
        self.token = token
        self.page_size = page_size
        self.max_pages = max_pages
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    @retry(
        max_attempts=3,
        base_delay=1.0,
        retryable=(requests.ConnectionError, requests.Timeout, TransientStatusError),
    )
    def _fetch_page(self, page: int) -> Mapping[str, Any]:
        params = {"status": "active", "page": page, "limit": self.page_size}
        r = requests.get(self.url, params=params, headers=self._headers(), timeout=self.timeout)
        if is_transient_status(r.status_code):
            raise TransientStatusError(f"{r.status_code} from {self.url}", response=r)
        r.raise_for_status()
        body = r.json()
        if not isinstance(body, Mapping):
            raise CatalogError(f"Unexpected response from {self.url}: {type(body).__name__}")
        if body.get("status") == "error":
            raise CatalogError(f"Job API error: {body.get('message', 'unknown error')}")
        return body

    def load(self) -> list[JobPosting]:
        jobs: list[JobPosting] = []
        page, pages = 1, 1
        try:
            while page <= min(pages, self.max_pages):
                body = self._fetch_page(page)
                data = body.get("data") or []
                if not isinstance(data, list):
                    raise CatalogError(f"Job API page {page}: 'data' is not a list")
                jobs.extend(postings_from_records(data, f"api page {page}"))

                pagination = body.get("pagination")
                if isinstance(pagination, Mapping):
                    pages = int(pagination.get("pages") or 1)
                page += 1
        except (requests.RequestException, ValueError) as exc:
            raise CatalogError(f"Failed to fetch jobs from {self.url}: {exc}") from exc

        if pages > self.max_pages:
            log.warning("Job API reports %d pages; stopped after %d", pages, self.max_pages)
        log.info("Fetched %d postings from %s", len(jobs), self.url)
        return jobs
