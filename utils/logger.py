"""
Root-logger setup for the command-line entry points.

Library modules only call ``logging.getLogger("LegacyCipher.<Part>")``;
handlers are attached here, once, by whoever owns the process.
"""

import logging

from config.settings import Settings

LOG_FORMAT  = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str | int | None = None,
                  log_file: str | None = None) -> logging.Logger:
    """Attach a console handler (and optionally a file handler) to root."""
    level = level or Settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(getattr(h, "_legacycipher", False)
               for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(fmt)
        console_handler._legacycipher = True
        root_logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(fmt)
            file_handler._legacycipher = True
            root_logger.addHandler(file_handler)

    return logging.getLogger(f"{Settings.APP_NAME}.Main")
