import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# One file per level; each file receives its level and everything above it.
FILE_LEVELS = {
    "error.log": logging.ERROR,
    "warning.log": logging.WARNING,
    "info.log": logging.INFO,
    "debug.log": logging.DEBUG,
}

_PACKAGE_LOGGER = "html_pdf_service"


def configure_logging(level: str = "info", logs_dir: str | None = "logs", *, to_files: bool = True) -> logging.Logger:
    """Install console and per-level file handlers on the package logger.

    Safe to call more than once: handlers are only attached on the first call.
    Returns the package logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    if getattr(logger, "_html_pdf_configured", False):
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.setLevel(logging.DEBUG)

    console = logging.StreamHandler()
    console.setLevel(getattr(logging, level.upper(), logging.INFO))
    console.setFormatter(formatter)
    logger.addHandler(console)

    if to_files and logs_dir:
        base = Path(logs_dir)
        base.mkdir(parents=True, exist_ok=True)
        for filename, file_level in FILE_LEVELS.items():
            handler = logging.FileHandler(base / filename, encoding="utf-8")
            handler.setLevel(file_level)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    logger.propagate = False
    logger._html_pdf_configured = True  # type: ignore[attr-defined]
    return logger
