import logging

from anystore.functools import weakref_cache as cache
from anystore.logging import get_logger
from servicelayer.logs import configure_logging as _configure_logging

from formulary.settings import Settings

log = get_logger(__name__)


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: int | None = None) -> None:
    """Initialize logging, at DEBUG level when the debug setting is on."""
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    _configure_logging(level=level)
