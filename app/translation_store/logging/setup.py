"""Structlog configuration and module loggers.

Importing this package never touches logging configuration. Hosts that
embed the store keep their own setup; hosts that want ours call
configure_logging() once at startup (get_translation_service() does so).

Usage:
    from translation_store.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from translation_store.configuration import Settings
from translation_store.configuration import settings as default_settings
from translation_store.logging.formatters import add_app_info, truncate_large_values

APP_NAME = "translation-store"


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _silence_for_tests() -> BoundLogger:
    # Root level above CRITICAL keeps test output clean while still running
    # every logging call through a valid processor chain.
    logging.root.setLevel(logging.CRITICAL + 1)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
    return structlog.stdlib.get_logger()


def _build_processors(settings: Settings, prod_mode: bool) -> List[Processor]:
    callsite = structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FILENAME,
            structlog.processors.CallsiteParameter.LINENO,
            structlog.processors.CallsiteParameter.FUNC_NAME,
        ]
    )
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        callsite,
        add_app_info(APP_NAME, settings.GIT_SHA),
        # Payload excerpts in parse errors can be arbitrarily large
        truncate_large_values(max_length=500),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Source of LOG_LEVEL, GIT_SHA and production mode. Defaults
            to the module-level settings singleton.
        log_level: Overrides settings.LOG_LEVEL (DEBUG, INFO, WARNING, ...).
        is_production: Overrides settings.is_production; JSON output when
            true, console output otherwise.

    Returns:
        A logger bound to the new configuration.
    """
    if _is_test_environment():
        return _silence_for_tests()

    settings = settings or default_settings
    prod_mode = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_build_processors(settings, prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s", level=getattr(logging, level_name, logging.INFO)
    )
    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    Binds component (last dotted segment) and module_path, e.g. in
    translation_store/i18n/store.py:
    {"component": "store", "module_path": "translation_store.i18n.store"}

    The result is a lazy proxy: it resolves the structlog configuration on
    first use, so loggers created at import follow a later configure_logging().
    """
    caller = inspect.currentframe()
    caller = caller.f_back if caller is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    return structlog.stdlib.get_logger(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
