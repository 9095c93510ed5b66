"""
Logging setup for the API process.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger. Repeated calls on the same logger are
no-ops.
"""

import logging
from pathlib import Path


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Set on handlers added here, so handlers installed by others (pytest,
# basicConfig) do not count as "already configured".
_HANDLER_MARKER = "_account_api_handler"


def setup_logging(
    level: str = "INFO",
    logfile: str | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """
    Configure the root logger (or ``logger`` when given).

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive.
            Unknown names fall back to INFO.
        logfile: Optional path of a file to also write log records to.
        logger: Logger to configure instead of the root logger.
    """
    target = logger if logger is not None else logging.getLogger()
    if any(getattr(h, _HANDLER_MARKER, False) for h in target.handlers):
        return

    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_MARKER, True)
    target.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        target.addHandler(file_handler)
