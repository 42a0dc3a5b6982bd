import logging
import sys
from typing import Optional

import structlog

from cubegame.config import settings


def _renderer():
    if settings.debug:
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _renderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

# Console only; stderr keeps log lines out of the drawn cube
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr)
    ]
)


def configure_logging(level: Optional[str] = None):
    """Set the root log level, defaulting to the configured one."""
    level = (level or settings.log_level).upper()
    logging.getLogger().setLevel(getattr(logging, level))


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
