from __future__ import annotations

import logging
from contextlib import suppress
from logging.handlers import RotatingFileHandler
from pathlib import Path

from smart_quotes.env import env_str, env_truthy

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"


def default_log_dir() -> Path:
    raw = env_str("SMART_QUOTES_LOG_DIR")
    return Path(raw) if raw else DEFAULT_LOG_DIR


def ensure_file_logging(*, log_dir: Path | None = None, filename: str = "smart-quotes.log") -> Path:
    """Attach a rotating file handler to the root logger (idempotent).

    Works alongside uvicorn's logging config (we just add another handler).
    """

    log_dir = log_dir or default_log_dir()
    if env_truthy("SMART_QUOTES_DISABLE_FILE_LOG"):
        return log_dir / filename

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / filename).resolve()

    root = logging.getLogger()
    for h in root.handlers:
        if getattr(h, "_smart_quotes_file_log", False):
            base = getattr(h, "baseFilename", None)
            return Path(str(base)).resolve() if base else log_file
        base = getattr(h, "baseFilename", None)
        if base and Path(str(base)).resolve() == log_file:
            return log_file

    handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler._smart_quotes_file_log = True  # type: ignore[attr-defined]
    handler.setLevel(logging.INFO)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    lvl = env_str("SMART_QUOTES_LOG_LEVEL")
    if lvl:
        with suppress(ValueError):
            root.setLevel(lvl.upper())

    return log_file
