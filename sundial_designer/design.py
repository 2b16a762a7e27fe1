"""
Dial assembly: one configuration snapshot in, every curve and label out.

`build_dial` is the only entry point a front end needs. It is a pure
function of its `DialDesign`; calling it twice with equal designs gives
equal drawings.
"""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from sundial_designer.config import (DEFAULT_LINE_STYLES, ConfigError, DialConfig, LabelSettings, LineStyle,
                                     Location, PageSpec, TimeWindow, check_line_style, check_time_window,
                                     resolve_style)
from sundial_designer.curves import AnalemmaPoint, CurvePoint, generate_analemma, generate_declination_curve
from sundial_designer.daterange import DateRange, split_by_day_range
from sundial_designer.intervals import HourInterval, check_interval, plan_hour_lines
from sundial_designer.labels import HourLabel, hour_labels
from sundial_designer.marks import DeclinationMark, mark_declination


def builtin_intervals(styles: Sequence[LineStyle] = DEFAULT_LINE_STYLES) -> Tuple[HourInterval, ...]:
    return (
        HourInterval("Hour", resolve_style(styles, "0.5mm-black"), "hour", active=True),
        HourInterval("Half-hour", resolve_style(styles, "default-hairline"), "half-hour", active=True),
        HourInterval("Quarter-hour", resolve_style(styles, "dashed-hairline"), "quarter-hour", active=False),
        HourInterval("5-minute", resolve_style(styles, "dotted-hairline"), "5-minute", active=False),
        HourInterval("2-minute", resolve_style(styles, "dotted-hairline"), "2-minute", active=False),
    )


def builtin_marks(styles: Sequence[LineStyle] = DEFAULT_LINE_STYLES) -> Tuple[DeclinationMark, ...]:
    hairline = resolve_style(styles, "default-hairline")
    return (
        DeclinationMark("Summer Solstice", hairline, "summer-solstice"),
        DeclinationMark("Equinox", hairline, "equinox"),
        DeclinationMark("Winter Solstice", hairline, "winter-solstice"),
    )


@dataclass(frozen=True)
class DialDesign:
    location: Location
    dial: DialConfig
    window: TimeWindow = field(default_factory=TimeWindow)
    date_range: DateRange = DateRange.FULL_YEAR
    styles: Tuple[LineStyle, ...] = DEFAULT_LINE_STYLES
    intervals: Tuple[HourInterval, ...] = field(default_factory=builtin_intervals)
    marks: Tuple[DeclinationMark, ...] = field(default_factory=builtin_marks)
    labels: LabelSettings = field(default_factory=LabelSettings)
    page: PageSpec = field(default_factory=PageSpec)


def check_design(design: DialDesign) -> None:
    """
    Reject a design a front end should not hand to `build_dial`.

    The geometry itself never validates; this is the configuration layer's
    gate and raises ConfigError on the first problem found.
    """
    if not design.dial.gnomon_height > 0:
        raise ConfigError(f"gnomon height must be positive, got {design.dial.gnomon_height}")
    check_time_window(design.window)
    for style in design.styles:
        check_line_style(style)
    for interval in design.intervals:
        check_interval(interval)
    for owner in design.intervals + design.marks:
        if not 0 <= owner.style < len(design.styles):
            raise ConfigError(f"{owner.id!r} refers to missing line style {owner.style}")


@dataclass(frozen=True)
class HourLine:
    hour: float
    interval_id: str
    style: LineStyle
    segments: Tuple[Tuple[AnalemmaPoint, ...], ...]  # one per date interval, possibly empty
    labels: Tuple[HourLabel, ...]


@dataclass(frozen=True)
class DeclinationLine:
    mark_id: str
    declination: float  # degrees
    style: LineStyle
    segments: Tuple[Tuple[CurvePoint, ...], ...]


@dataclass(frozen=True)
class DialDrawing:
    hour_lines: Tuple[HourLine, ...]
    declination_lines: Tuple[DeclinationLine, ...]


def build_hour_lines(design: DialDesign) -> List[HourLine]:
    lines = []
    for hour, interval in plan_hour_lines(design.window, design.intervals):
        curve = generate_analemma(design.location, design.dial, hour)
        parts = split_by_day_range(curve, design.date_range)
        # one slot per date interval, empty when too short to draw
        segments = tuple(tuple(p) if len(p) >= 2 else () for p in parts)
        if not any(segments):
            continue
        lines.append(HourLine(
            hour=hour,
            interval_id=interval.id,
            style=design.styles[interval.style],
            segments=segments,
            labels=tuple(hour_labels(parts, design.date_range, hour, design.labels)),
        ))
    return lines


def build_declination_lines(design: DialDesign) -> List[DeclinationLine]:
    lines = []
    max_radius = design.page.diagonal
    for mark in design.marks:
        if not mark.active:
            continue
        declination = mark_declination(mark)
        if declination is None:
            continue
        segments = generate_declination_curve(design.location, design.dial, design.window,
                                              declination, max_radius)
        if not segments:
            continue
        lines.append(DeclinationLine(
            mark_id=mark.id,
            declination=declination,
            style=design.styles[mark.style],
            segments=tuple(tuple(s) for s in segments),
        ))
    return lines


def build_dial(design: DialDesign) -> DialDrawing:
    return DialDrawing(
        hour_lines=tuple(build_hour_lines(design)),
        declination_lines=tuple(build_declination_lines(design)),
    )
