import logging
import os
import threading
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "MOSAIC_LOG_DIR"
DEFAULT_LOG_SUBDIR = Path(".mosaic") / "logs"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_log_directory() -> Path:
    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        path = Path(log_dir).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def _log_filename(name: str) -> str:
    sanitized = name.replace(os.sep, "_").replace(".", "_")
    return f"{sanitized or 'root'}.log"


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Logger already configured elsewhere; respect existing handlers.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(
            _resolve_log_directory() / _log_filename(logger.name),
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        ),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger configured with stream and rolling file handlers."""

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, log_level)
    return logger


class FrameLogSampler:
    """Rate limit log statements that would otherwise fire every frame.

    A key is emitted at most once per ``interval_seconds``; an interval of
    ``None`` disables sampling and emits every call.
    """

    def __init__(
        self,
        interval_seconds: float | None,
        *,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._interval = interval_seconds
        self._monotonic = monotonic
        self._lock = threading.Lock()
        self._next_emit: dict[str, float] = {}

    def log(
        self,
        *,
        key: str,
        logger: logging.Logger,
        level: int,
        msg: str,
        args: tuple[object, ...] = (),
        extra: dict[str, object] | None = None,
    ) -> bool:
        """Emit ``msg`` if ``key`` is due. Returns whether it was emitted."""

        if self._interval is not None:
            now = self._monotonic()
            with self._lock:
                if now < self._next_emit.get(key, 0.0):
                    return False
                self._next_emit[key] = now + self._interval

        logger.log(level, msg, *args, extra=extra)
        return True
