import logging

import structlog

QUIET_LOGGERS = ("pymongo",)


def setup_logging(debug: bool) -> None:
    """Route stdlib logging and structlog through one processor chain.

    Debug mode renders colored console lines, otherwise every event is one JSON object.
    """
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format="%(message)s")

    # pymongo is chatty at DEBUG (topology, pool, command events)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    renderer: structlog.types.Processor = (
        structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
    )
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
