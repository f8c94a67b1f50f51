from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

# Default comparison tolerance shared by every geometric predicate.
EPS_DEFAULT = 1e-6

# Positional epsilon for near-zero determinant/length guards.
EPS_POS = 1e-12

PI_X2 = 2.0 * math.pi


@dataclass(frozen=True)
class Tolerance:
    eps: float = EPS_DEFAULT

    def __post_init__(self) -> None:
        if not float(self.eps) > 0.0:
            raise ValueError(f"tolerance must be positive, got {self.eps!r}")
        object.__setattr__(self, "eps", float(self.eps))


_current = Tolerance()


def get_tolerance() -> Tolerance:
    return _current


def set_tolerance(eps: float) -> Tolerance:
    """Replace the process-wide tolerance and return the previous one."""
    global _current
    previous = _current
    _current = Tolerance(eps)
    return previous


@contextmanager
def tolerance(eps: float) -> Iterator[Tolerance]:
    """Temporarily switch the process-wide tolerance.

    The switch is global, not thread-local: set the tolerance once at start up
    when the kernel is shared between threads.
    """
    previous = set_tolerance(eps)
    try:
        yield _current
    finally:
        set_tolerance(previous.eps)


def _eps(eps: Optional[float]) -> float:
    return _current.eps if eps is None else float(eps)


def eq_0(x: float, *, eps: Optional[float] = None) -> bool:
    e = _eps(eps)
    return -e < x < e


def eq(x: float, y: float, *, eps: Optional[float] = None) -> bool:
    return eq_0(x - y, eps=eps)


def gt(x: float, y: float, *, eps: Optional[float] = None) -> bool:
    return x - y > _eps(eps)


def ge(x: float, y: float, *, eps: Optional[float] = None) -> bool:
    return x - y > -_eps(eps)


def lt(x: float, y: float, *, eps: Optional[float] = None) -> bool:
    return x - y < -_eps(eps)


def le(x: float, y: float, *, eps: Optional[float] = None) -> bool:
    return x - y < _eps(eps)
