"""
Configuration value objects and presets.

Everything here is immutable and built per computation. String style
references ("id or name") are resolved to indices once, by `resolve_style`,
so the curve generators never look styles up by name.
"""
import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from sundial_designer.projection import Orientation


class ConfigError(ValueError):
    """Raised when a dial configuration cannot be assembled."""


# -----------------------------
# Presets
# -----------------------------

TZ_MERIDIANS: Dict[str, float] = {
    "UTC": 0.0,
    "EST": -75.0,
    "CST": -90.0,
    "MST": -105.0,
    "PST": -120.0,
    "AKST": -135.0,
    "HST": -150.0,
    "AST": -60.0,
    "NST": -52.5,
    "GMT": 0.0,
    "BST": 0.0,
    "CET": 15.0,
    "EET": 30.0,
    "MSK": 45.0,
    "IST": 82.5,
    "JST": 135.0,
    "AEST": 150.0,
    "NZST": 180.0,
}

# name -> (lat, lng, tz abbreviation)
PRESET_LOCATIONS: Dict[str, Tuple[float, float, str]] = {
    "Fort Collins, CO USA": (40.5853, -105.0844, "MST"),
    "Marble, CO USA": (39.0722, -107.1895, "MST"),
    "Spartanburg, SC USA": (34.9496, -81.9321, "EST"),
}

# name -> (width, height) in mm, portrait
PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "Letter": (215.9, 279.4),
    "A4": (210.0, 297.0),
}

DASH_PATTERNS = ("solid", "dashed", "dotted")


# -----------------------------
# Value objects
# -----------------------------

@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    tz_meridian: float

    @staticmethod
    def preset(name: str) -> "Location":
        try:
            lat, lng, tz = PRESET_LOCATIONS[name]
        except KeyError:
            raise ConfigError(f"unknown location preset: {name!r}") from None
        return Location(latitude=lat, longitude=lng, tz_meridian=TZ_MERIDIANS[tz])


@dataclass(frozen=True)
class DialConfig:
    orientation: Orientation
    gnomon_height: float  # mm


@dataclass(frozen=True)
class TimeWindow:
    start_hour: float = 6.0
    stop_hour: float = 18.0

    def minute_samples(self) -> List[float]:
        """Clock hours from start to stop at one-minute spacing."""
        n = int(round((self.stop_hour - self.start_hour) * 60))
        return [self.start_hour + i / 60.0 for i in range(n + 1)]


@dataclass(frozen=True)
class LineStyle:
    name: str
    width: str = "hairline"  # "hairline" or a length such as "0.5mm"
    color: str = "black"
    dash: str = "solid"
    id: str = ""

    @property
    def width_mm(self) -> float | None:
        """Physical stroke width, or None for a hairline."""
        if self.width == "hairline":
            return None
        text = self.width.strip().lower()
        if text.endswith("mm"):
            text = text[:-2]
        try:
            return float(text)
        except ValueError:
            raise ConfigError(f"bad line width: {self.width!r}") from None


@dataclass(frozen=True)
class PageSpec:
    width: float = PAGE_SIZES["Letter"][0]   # mm
    height: float = PAGE_SIZES["Letter"][1]  # mm

    @staticmethod
    def named(name: str) -> "PageSpec":
        try:
            w, h = PAGE_SIZES[name]
        except KeyError:
            raise ConfigError(f"unknown page size: {name!r}") from None
        return PageSpec(width=w, height=h)

    @property
    def diagonal(self) -> float:
        """Bound on the plotted radius: nothing farther out fits on the page."""
        return math.hypot(self.width, self.height)


@dataclass(frozen=True)
class LabelSettings:
    winter_side: bool = True
    summer_side: bool = True
    offset: float = 2.0  # mm
    use_24_hour: bool = True


DEFAULT_LINE_STYLES: Tuple[LineStyle, ...] = (
    LineStyle(name="default hairline", id="default-hairline"),
    LineStyle(name="dashed hairline", dash="dashed", id="dashed-hairline"),
    LineStyle(name="dotted hairline", dash="dotted", id="dotted-hairline"),
    LineStyle(name=".5mm black", width="0.5mm", id="0.5mm-black"),
)


def auto_gnomon_height(latitude: float) -> float:
    # same height either side of the equator; 0 on it
    return round(abs(math.tan(math.radians(latitude))) * 100.0, 2)


def check_time_window(window: TimeWindow) -> None:
    if not (0.0 <= window.start_hour < window.stop_hour <= 24.0):
        raise ConfigError(
            f"time window must satisfy 0 <= start < stop <= 24, got {window.start_hour}..{window.stop_hour}"
        )


def check_line_style(style: LineStyle) -> None:
    if style.dash not in DASH_PATTERNS:
        raise ConfigError(f"unknown dash pattern: {style.dash!r}")
    width = style.width_mm
    if width is not None and not width > 0:
        raise ConfigError(f"line width must be positive, got {style.width!r}")


def resolve_style(styles: Sequence[LineStyle], ref: str) -> int:
    """Index of the style whose id, or failing that name, equals ref."""
    for i, style in enumerate(styles):
        if style.id and style.id == ref:
            return i
    for i, style in enumerate(styles):
        if style.name == ref:
            return i
    raise ConfigError(f"unknown line style: {ref!r}")
