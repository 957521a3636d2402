"""Infrastructure layer: concrete implementations of application ports."""

from medibook.infrastructure.factory import PersonFactory
from medibook.infrastructure.memory_model import InMemoryModel
from medibook.infrastructure.settings import (
    Settings,
    bootstrap,
    build_model,
    configure_logging,
    load_env,
    load_settings,
)

__all__ = [
    "InMemoryModel",
    "PersonFactory",
    "Settings",
    "bootstrap",
    "build_model",
    "configure_logging",
    "load_env",
    "load_settings",
]
