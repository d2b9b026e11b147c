from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


def bootstrap(**collaborators) -> Container:
    """Load settings, configure logging and build the service container.

    Keyword arguments are passed to `build_container` so callers can inject
    their own repositories.
    """
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if getattr(settings, "DEBUG", False):
        logger.debug("[workforce-system] settings=%s", settings_module)

    return build_container(**collaborators)
