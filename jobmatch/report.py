"""Render ranked matches for the dashboard and as a Markdown report."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from jobmatch.config import REPORTS_DIR, ensure_dirs
from jobmatch.log import get_logger
from jobmatch.models import ScoredJob

log = get_logger(__name__)

_TYPE_LABELS: dict[str, str] = {
    "full-time": "Full-time",
    "part-time": "Part-time",
    "contract": "Contract",
}


def _type_label(employment_type: str) -> str:
    return _TYPE_LABELS.get(employment_type.lower().strip(), "Full-time")


def _clip(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def to_dashboard_entry(scored: ScoredJob) -> dict[str, Any]:
    """Shape used by the job seeker dashboard's recommended-jobs list."""
    job = scored.job
    return {
        "id": job.id,
        "title": job.title,
        "company": job.company,
        "location": job.location,
        "type": _type_label(job.employment_type),
        "salary": job.salary_range,
        "matchScore": scored.match_score,
    }


def build_recommendations_report(scored_jobs: list[ScoredJob], profile_name: str = "") -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    heading = f"# Job Matches — {date}"
    if profile_name:
        heading += f" — {profile_name}"
    lines: list[str] = [heading, ""]

    if not scored_jobs:
        lines.append("_No postings to recommend._")
        lines.append("")
        return "\n".join(lines)

    lines.append(f"**{len(scored_jobs)}** recommended postings")
    lines.append("")
    lines.append("## Top Matches")
    lines.append("")
    for s in scored_jobs:
        job = s.job
        title = job.title or job.id
        lines.append(f"### {title} @ {job.company}" if job.company else f"### {title}")
        lines.append(f"- **Match:** {s.match_score}%")
        lines.append(f"- **Location:** {job.location or '—'} ({job.work_mode or 'unspecified'})")
        reasons = s.factors.reasons
        if reasons:
            lines.append(f"- **Why:** {'; '.join(reasons)}")
        if s.factors.missing_skills:
            lines.append(f"- **Skills to build:** {', '.join(s.factors.missing_skills)}")
        if job.accessibility_support:
            lines.append(f"- **Accessibility support:** {', '.join(job.accessibility_support)}")
        lines.append("")

    lines.append("---")
    lines.append("")
    lines.append("## Quick Reference")
    lines.append("")
    lines.append("| # | Role | Company | Location | Match |")
    lines.append("|--:|------|---------|----------|------:|")
    for i, s in enumerate(scored_jobs, 1):
        job = s.job
        lines.append(
            f"| {i} | {_clip(job.title or job.id, 40)} | {_clip(job.company, 22)} "
            f"| {_clip(job.location, 18)} | {s.match_score}% |"
        )
    lines.append("")

    log.info("Built match report: %d postings", len(scored_jobs))
    return "\n".join(lines)


def write_report(content: str, reports_dir: Path = REPORTS_DIR) -> Path:
    ensure_dirs(reports_dir)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = reports_dir / f"matches_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
