"""Load user preferences (YAML) and environment overrides (.env); set up logging."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from medibook.infrastructure.memory_model import InMemoryModel

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_ROSTER_FILE = Path("data") / "roster.json"


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent.parent


def load_env() -> None:
    """Load .env from repo root or current dir, whichever exists first."""
    for path in (_repo_root() / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    """User preferences. Carried by the model; commands never look inside."""

    roster_file_path: Path = DEFAULT_ROSTER_FILE
    default_region: str | None = None
    log_level: str = "INFO"
    gui: dict = field(default_factory=dict)


def get_prefs_path() -> Path:
    """Return path to the preferences YAML (MEDIBOOK_PREFS_PATH env or preferences.yaml)."""
    path = os.environ.get("MEDIBOOK_PREFS_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return _repo_root() / "preferences.yaml"


def load_settings(path: Path | None = None) -> Settings:
    """Read preferences YAML, then apply MEDIBOOK_* environment overrides.

    A missing file means defaults.
    """
    if path is None:
        path = get_prefs_path()
    raw: dict = {}
    if path.exists():
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError("Preferences YAML must be a dict")
        raw = loaded

    gui = raw.get("gui") or {}
    if not isinstance(gui, dict):
        raise ValueError("Preferences 'gui' must be a dict")

    roster = os.environ.get("MEDIBOOK_ROSTER_PATH", "").strip() or raw.get("roster_file_path")
    region = os.environ.get("MEDIBOOK_DEFAULT_REGION", "").strip() or raw.get("default_region")
    level = os.environ.get("MEDIBOOK_LOG_LEVEL", "").strip() or raw.get("log_level") or "INFO"
    return Settings(
        roster_file_path=Path(roster) if roster else DEFAULT_ROSTER_FILE,
        default_region=(str(region).strip().upper() or None) if region else None,
        log_level=str(level).strip().upper(),
        gui=gui,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level.upper(), logging.INFO))


def build_model(settings: Settings) -> InMemoryModel:
    """Return an empty roster carrying the given settings as its preferences."""
    return InMemoryModel(user_prefs=settings, roster_file_path=settings.roster_file_path)


def bootstrap(prefs_path: Path | None = None) -> InMemoryModel:
    """Load .env and preferences, configure logging, and return an empty roster."""
    load_env()
    settings = load_settings(prefs_path)
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info("Roster file: %s", settings.roster_file_path)
    return build_model(settings)
