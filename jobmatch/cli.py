"""Command-line runner: rank the configured catalog against a profile."""
from __future__ import annotations

import argparse
import json
import sys

from jobmatch.config import PROFILE_PATH, get_env, get_int_env, load_profile
from jobmatch.engine import rank
from jobmatch.errors import CatalogError, ConfigError
from jobmatch.log import get_logger, set_level
from jobmatch.ranker import DEFAULT_LIMIT
from jobmatch.report import build_recommendations_report, to_dashboard_entry, write_report
from jobmatch.sources import FileCatalogSource, get_catalog_source

log = get_logger(__name__)

EXIT_OK = 0
EXIT_PROFILE = 1
EXIT_CATALOG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobmatch-rank",
        description="Rank job postings by compatibility with a candidate profile.",
    )
    parser.add_argument("--profile", default=str(PROFILE_PATH), help="Profile YAML (default: %(default)s)")
    parser.add_argument("--catalog", help="YAML/JSON catalog file; overrides JOBS_API_URL / JOBS_CATALOG_PATH")
    parser.add_argument(
        "--limit", type=int, default=get_int_env("MATCH_LIMIT", DEFAULT_LIMIT),
        help="Number of postings to return (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="Print dashboard entries as JSON")
    parser.add_argument("--report", action="store_true", help="Write a Markdown report to reports/")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit < 0:
        parser.error("--limit must be >= 0")
    if args.verbose:
        set_level("DEBUG")

    try:
        profile = load_profile(args.profile)
    except ConfigError as exc:
        log.error("%s", exc)
        return EXIT_PROFILE

    source = FileCatalogSource(args.catalog) if args.catalog else get_catalog_source(get_env)
    try:
        catalog = source.load()
    except CatalogError as exc:
        log.error("%s", exc)
        return EXIT_CATALOG

    results = rank(profile, catalog, args.limit)
    log.info("Ranked %d postings, returning top %d", len(catalog), len(results))

    if args.json:
        print(json.dumps([to_dashboard_entry(s) for s in results], indent=2, ensure_ascii=False))
    else:
        for i, s in enumerate(results, 1):
            where = f" @ {s.job.company}" if s.job.company else ""
            print(f"{i:>2}. {s.match_score:>3}%  {s.job.title or s.job.id}{where}  [{s.job.location}]")

    if args.report:
        path = write_report(build_recommendations_report(results, profile.name))
        log.info("Report: %s", path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
