import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Per-request and per-statement chatter stays at WARNING regardless of LOG_LEVEL.
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        try:
            from rayzum.config import settings
            level = settings.log_level
        except Exception:
            return logging.INFO
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def _configured_log_file() -> str | None:
    try:
        from rayzum.config import settings
        return settings.log_file
    except Exception:
        return None


def setup_logging(level: int | str | None = None, log_file: str | None = None) -> None:
    """
    Configure the root logger: stdout always, plus ``log_file`` (or LOG_FILE)
    when set. Calling it again replaces the previous handlers.
    """
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    log_file = log_file or _configured_log_file()
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    if root.handlers:
        root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
