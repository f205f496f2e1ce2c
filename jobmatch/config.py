"""Load the candidate profile and env configuration."""
from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from dotenv import load_dotenv

from jobmatch.errors import ConfigError
from jobmatch.log import get_logger
from jobmatch.models import CandidateProfile

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def get_int_env(key: str, default: int) -> int:
    raw = get_env(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning("%s=%r is not an integer, using %d", key, raw, default)
        return default


def ensure_dirs(*dirs: Path) -> None:
    """Create the given directories, or the reports directory when none are given."""
    for d in dirs or (REPORTS_DIR,):
        d.mkdir(parents=True, exist_ok=True)


def load_profile(path: Path | str = PROFILE_PATH) -> CandidateProfile:
    """Read a YAML profile.

    The file may hold the profile fields at the top level or under a
    ``profile:`` key.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Profile not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Profile {path.name} is not valid YAML: {exc}") from exc

    if not isinstance(data, Mapping):
        raise ConfigError(f"Profile {path.name} must be a mapping, got {type(data).__name__}")
    if isinstance(data.get("profile"), Mapping):
        data = {**data, **data["profile"]}

    profile = CandidateProfile.from_dict(data)
    log.debug(
        "Loaded profile %s: %d skills, %d accessibility needs",
        path.name, len(profile.skills), len(profile.accessibility_needs),
    )
    return profile
