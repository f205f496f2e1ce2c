from typing import Callable

from .base import CatalogSource
from .api import ApiCatalogSource
from .file import FileCatalogSource
from .sample import SampleCatalogSource

from jobmatch.log import get_logger

log = get_logger(__name__)

__all__ = [
    "CatalogSource", "ApiCatalogSource", "FileCatalogSource", "SampleCatalogSource",
    "get_catalog_source",
]

DEFAULT_API_TIMEOUT = 15.0


def _api_timeout(raw: str) -> float:
    if not raw:
        return DEFAULT_API_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        log.warning("JOBS_API_TIMEOUT=%r is not a number, using %.0fs", raw, DEFAULT_API_TIMEOUT)
        return DEFAULT_API_TIMEOUT
    if timeout <= 0:
        log.warning("JOBS_API_TIMEOUT=%r must be positive, using %.0fs", raw, DEFAULT_API_TIMEOUT)
        return DEFAULT_API_TIMEOUT
    return timeout


def get_catalog_source(env_getter: Callable[[str], str]) -> CatalogSource:
    api_url = env_getter("JOBS_API_URL")
    if api_url:
        log.info("Catalog source: job API at %s", api_url)
        return ApiCatalogSource(
            api_url,
            token=env_getter("JOBS_API_TOKEN") or None,
            timeout=_api_timeout(env_getter("JOBS_API_TIMEOUT")),
        )

    catalog_path = env_getter("JOBS_CATALOG_PATH")
    if catalog_path:
        log.info("Catalog source: file %s", catalog_path)
        return FileCatalogSource(catalog_path)

    log.info("No catalog configured, using SampleCatalogSource")
    return SampleCatalogSource()
