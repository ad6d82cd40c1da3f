# src/logship/core/logging.py
"""Logger access for logship.

logship emits structlog events but never configures logging: processors,
renderers and levels belong to the host process. Without host
configuration, structlog's defaults apply.

The validation core never logs. Only the settings loader does.
"""

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger for a module.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Bound structlog logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
