import logging
import logging.handlers
import os
import sys
import typing

import structlog

from delivery_fee.config import settings

# Setup structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


def resolve_log_dir(log_dir: str) -> str:
    """Return log_dir if writable, otherwise a .logs directory in the working dir."""
    try:
        os.makedirs(log_dir, exist_ok=True)
        if not os.access(log_dir, os.W_OK):
            raise PermissionError(f"{log_dir} is not writable")
    except (PermissionError, OSError):
        log_dir = os.path.join(os.getcwd(), ".logs")
        os.makedirs(log_dir, exist_ok=True)
    return log_dir


def setup_logging(
    log_dir: str | None = None, level: str | None = None, stream: typing.TextIO | None = None
) -> None:
    """
    Configure JSON logging to a stream and a daily rotating file.
    The stream defaults to stdout; callers that print results on stdout pass stderr.
    """
    log_dir = resolve_log_dir(log_dir or settings.log_dir)

    pre_chain: list[typing.Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=pre_chain,
    )

    handlers: list[logging.Handler] = []

    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    # File
    log_file = os.path.join(log_dir, "delivery_fee.log")
    try:
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_file, when="midnight", interval=1, backupCount=30, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    except Exception as e:
        print(f"Failed to setup file logging: {e}", file=sys.stderr)

    logging.basicConfig(level=level or settings.log_level, handlers=handlers, force=True)

    # Reduce noise from libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
