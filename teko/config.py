from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import Optional


_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def level_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip().upper()


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", var, raw)
        return None


def get_log_level() -> str:
    return level_from_env("TEKO_LOG_LEVEL", _DEFAULT_LOG_LEVEL)


def get_recursion_limit() -> Optional[int]:
    return int_from_env("TEKO_RECURSION_LIMIT")


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for Teko.

    Args:
        level: Logging level name; defaults to $TEKO_LOG_LEVEL, else WARNING.
        log_file: Optional path to a log file. If None, logs go to stderr.
    """
    level = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level, logging.WARNING)

    config: dict = {
        "level": numeric_level,
        "format": _LOG_FORMAT,
    }
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        config["filename"] = log_file
    else:
        # stdout belongs to the program being interpreted
        config["stream"] = sys.stderr

    logging.basicConfig(**config)
    logging.getLogger(__name__).debug("Logging initialized at %s level", level)
