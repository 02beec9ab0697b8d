"""
Logging setup for typedprompt.

Log records go to stderr only; stdout belongs to the prompts.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_console_logging(level="WARNING"):
    """Attach a single stderr handler to the package logger.

    Safe to call more than once: an existing handler is reused and only
    its level changes.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'.")
        level = resolved

    package_logger = logging.getLogger("typedprompt")
    package_logger.setLevel(level)

    handler = next(
        (h for h in package_logger.handlers if getattr(h, "_typedprompt", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()  # stderr
        handler._typedprompt = True
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    handler.setLevel(level)
    return handler
