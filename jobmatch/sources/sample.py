"""Built-in demo catalog used when no real catalog source is configured."""
from __future__ import annotations

from jobmatch.log import get_logger
from jobmatch.models import JobPosting
from jobmatch.sources.base import CatalogSource

log = get_logger(__name__)

SAMPLE_JOBS: tuple[JobPosting, ...] = (
    JobPosting(
        id="frontend-accessibility-engineer",
        title="Frontend Accessibility Engineer",
        company="Inclusion Labs",
        location="Remote",
        work_mode="remote",
        employment_type="full-time",
        experience_level="mid",
        salary_range="$80k - $110k",
        skills_required=("React", "TypeScript", "WCAG", "ARIA", "Testing Library"),
        accessibility_support=("screen-reader", "keyboard-navigation", "high-contrast"),
        industry="Technology",
        summary="Build inclusive UI systems and drive accessibility reviews across the product surface area.",
        benefits=("Remote-first", "Flexible hours", "Assistive tech stipend"),
        featured=True,
    ),
    JobPosting(
        id="voice-ui-specialist",
        title="Voice UI Specialist",
        company="AbleTech",
        location="Hybrid - Bengaluru",
        work_mode="hybrid",
        employment_type="full-time",
        experience_level="mid",
        salary_range="₹18L - ₹24L",
        skills_required=("Conversation Design", "Speech Recognition", "JavaScript", "Node.js"),
        accessibility_support=("voice-control", "captioning", "flex-hours"),
        industry="Assistive Technology",
        summary="Design and build multimodal voice experiences with a focus on accessibility compliance.",
        benefits=("Onsite accessibility lab", "L&D stipend", "Health cover"),
    ),
    JobPosting(
        id="a11y-program-manager",
        title="Accessibility Program Manager",
        company="CareersPlus",
        location="Remote – India",
        work_mode="remote",
        employment_type="contract",
        experience_level="senior",
        salary_range="$60/hr - $80/hr",
        skills_required=("Program Management", "Accessibility Audits", "Stakeholder Management"),
        accessibility_support=("remote-first", "sign-language", "ergonomic-budget"),
        industry="Enterprise Consulting",
        summary="Lead cross-functional accessibility roadmaps and coach teams on inclusive best practices.",
        benefits=("Remote stipend", "Flexible schedule"),
    ),
    JobPosting(
        id="data-analyst-inclusive-hiring",
        title="Inclusive Hiring Data Analyst",
        company="HireBetter",
        location="Gurugram",
        work_mode="onsite",
        employment_type="full-time",
        experience_level="entry",
        salary_range="₹8L - ₹12L",
        skills_required=("Python", "SQL", "PowerBI", "Accessibility Metrics"),
        accessibility_support=("step-free-office", "ergonomic-setup"),
        industry="HR Tech",
        summary="Analyze candidate funnels and design dashboards that highlight accessibility KPIs.",
        benefits=("Onsite physiotherapy", "Transport allowance"),
    ),
    JobPosting(
        id="content-strategist-inclusive-design",
        title="Inclusive Design Content Strategist",
        company="Narrative Studio",
        location="Remote - Europe/India overlap",
        work_mode="remote",
        employment_type="part-time",
        experience_level="mid",
        salary_range="$45/hr - $55/hr",
        skills_required=("Content Design", "Plain Language", "Accessibility", "Figma"),
        accessibility_support=("async-work", "captioning", "flex-hours"),
        industry="Design Services",
        summary="Create accessible content systems, guidelines, and component documentation.",
        benefits=("Equipment budget", "Wellness allowance"),
    ),
)


class SampleCatalogSource(CatalogSource):
    def load(self) -> list[JobPosting]:
        log.info("SampleCatalogSource serving %d demo postings", len(SAMPLE_JOBS))
        return list(SAMPLE_JOBS)
