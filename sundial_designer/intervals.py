"""
Hour-line intervals and their drawing priority.

Every interval has a fixed step; coarser intervals outrank finer ones, so a
finer interval skips any time a coarser active interval already draws.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from sundial_designer.config import ConfigError, TimeWindow

# name -> step in hours, in priority order (Hour first)
INTERVAL_STEPS: Dict[str, float] = {
    "Hour": 1.0,
    "Half-hour": 0.5,
    "Quarter-hour": 0.25,
    "5-minute": 1.0 / 12.0,
    "2-minute": 1.0 / 30.0,
}
INTERVAL_RANKS: Dict[str, int] = {name: rank for rank, name in enumerate(INTERVAL_STEPS)}
# intervals per hour, for drift-free time generation
_PER_HOUR: Dict[str, int] = {"Hour": 1, "Half-hour": 2, "Quarter-hour": 4, "5-minute": 12, "2-minute": 30}

EPSILON_HOURS = 0.001


@dataclass(frozen=True)
class HourInterval:
    name: str
    style: int  # index into DialDesign.styles
    id: str
    active: bool = True

    @property
    def step(self) -> float:
        return INTERVAL_STEPS[self.name]

    @property
    def rank(self) -> int:
        return INTERVAL_RANKS[self.name]


def check_interval(interval: HourInterval) -> None:
    if interval.name not in INTERVAL_STEPS:
        raise ConfigError(f"unknown hour interval: {interval.name!r}")


def on_step(t: float, step: float, eps: float = EPSILON_HOURS) -> bool:
    """True when t lies within eps of a whole multiple of step."""
    r = math.fmod(t, step)
    return abs(r) < eps or step - abs(r) < eps


def is_suppressed(t: float, interval: HourInterval, intervals: Sequence[HourInterval]) -> bool:
    """True if a higher-priority active interval already owns time t."""
    for other in intervals:
        if other.id == interval.id or not other.active:
            continue
        if other.rank < interval.rank and on_step(t, other.step):
            return True
    return False


def hour_line_times(window: TimeWindow, interval: HourInterval) -> List[float]:
    """Multiples of the interval step inside the window, ends included."""
    n = _PER_HOUR[interval.name]
    first = math.ceil(window.start_hour * n - EPSILON_HOURS)
    last = math.floor(window.stop_hour * n + EPSILON_HOURS)
    return [k / n for k in range(first, last + 1)]


def plan_hour_lines(window: TimeWindow,
                    intervals: Sequence[HourInterval]) -> List[Tuple[float, HourInterval]]:
    """Every (time, interval) pair to draw, coarsest interval first."""
    plan = []
    active = sorted((i for i in intervals if i.active), key=lambda i: i.rank)
    for interval in active:
        for t in hour_line_times(window, interval):
            if is_suppressed(t, interval, intervals):
                continue
            plan.append((t, interval))
    return plan
