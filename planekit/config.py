"""Runtime configuration: logging set-up and environment overrides.

The library itself never configures logging on import; entry points such as
the command line call :func:`configure_logging` and reads :func:`env_eps`.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from planekit.geometry.tolerance import Tolerance, get_tolerance, set_tolerance

LOG_LEVEL_ENV = "PLANEKIT_LOG_LEVEL"
LOG_FORMAT_ENV = "PLANEKIT_LOG_FORMAT"
EPS_ENV = "PLANEKIT_EPS"
_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_log_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Logging level (``"DEBUG"``, ``"INFO"``, ...). ``None`` reads
            ``PLANEKIT_LOG_LEVEL`` and falls back to ``WARNING``.
        fmt: Message format. ``None`` reads ``PLANEKIT_LOG_FORMAT`` or uses
            the default format.
    """
    level_value = _resolve_log_level(level or os.getenv(LOG_LEVEL_ENV, "WARNING"))
    fmt_value = fmt or os.getenv(LOG_FORMAT_ENV, _DEFAULT_LOG_FORMAT)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level_value)
        for handler in root_logger.handlers:
            handler.setLevel(level_value)
            handler.setFormatter(logging.Formatter(fmt_value))
        return

    logging.basicConfig(level=level_value, format=fmt_value)


def env_eps(value: Optional[str] = None) -> Optional[float]:
    """Parse a tolerance from ``value`` or ``PLANEKIT_EPS``; ``None`` when unset."""
    raw = value if value is not None else os.getenv(EPS_ENV)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{EPS_ENV} must be a positive number, got {raw!r}") from exc


def apply_env_tolerance(value: Optional[str] = None) -> Tolerance:
    """Set the process-wide tolerance from ``PLANEKIT_EPS`` when present."""
    eps = env_eps(value)
    if eps is None:
        return get_tolerance()
    set_tolerance(eps)
    logging.getLogger(__name__).debug("tolerance set to %g", eps)
    return get_tolerance()


__all__ = [
    "EPS_ENV",
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "apply_env_tolerance",
    "configure_logging",
    "env_eps",
]
