"""Game Hub log setup: structlog events and stdlib records share one pipeline.

Service modules log through structlog; the leaderboard service, uvicorn and
redis-py log through stdlib ``logging``. Both end up at the root handler and
are rendered by the same structlog renderer, so every line carries the
request id and comes out as JSON (or console text in development).
"""

import logging

import structlog

from gamehub.config import Settings

# Installed on the root logger once; later calls only swap its formatter
_handler = logging.StreamHandler()


def setup_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through ``settings.log_format``."""
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer()
    )
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        ),
    )
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root = logging.getLogger()
    if _handler not in root.handlers:
        root.addHandler(_handler)
    root.setLevel(level)
    # redis-py is chatty at DEBUG
    logging.getLogger("redis").setLevel(max(level, logging.INFO))
