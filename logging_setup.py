"""Root logger configuration for applications embedding the calendar modules.

Library modules only call ``logging.getLogger(__name__)``; the embedding
application calls :func:`setup_logging` once from its entry point.
"""

import logging
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_configured = False  # guard against double-initialisation


def setup_logging(
    *,
    level: int | str = logging.WARNING,
    settings: Mapping | None = None,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: str | None = None,
    file_max_bytes: int = 1_000_000,
    file_backup_count: int = 3,
) -> None:
    """Attach a console handler (and optionally a rotating file handler) to the root logger.

    ``level`` accepts a logging constant or a level name. When ``settings``
    (from :func:`settings.load_settings`) is given, its ``log_level`` wins
    over ``level``. Calling it again is a no-op.
    """
    global _configured
    if _configured:
        return

    if settings is not None and "log_level" in settings:
        level = settings["log_level"]
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count, encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    _configured = True
