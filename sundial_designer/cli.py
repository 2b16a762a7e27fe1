"""
Sundial Designer: command line front end.

Usage examples:
  sundial-designer --location "Fort Collins, CO USA" --orientation Horizontal --outdir ./out
  sundial-designer --lat 40.5853 --lon -105.0844 --tz MST --gnomon-height 100 \
      --intervals Hour Quarter-hour --marks "Summer Solstice" Equinox "Winter Solstice" "March 12" \
      --date-range WinterToSummer --page A4

Notes:
- All lengths are millimetres. The gnomon height defaults to |tan(latitude)| * 100, so a dial on the
  equator needs an explicit --gnomon-height.
- Longitudes are east positive; the time-zone meridian is the standard-time reference
  (e.g. -105 for MST). Hour lines are in standard clock time.
- Output is three CSV tables (hour lines, declination lines, labels) for a drawing tool.
"""
import argparse
import sys

from sundial_designer.config import (DEFAULT_LINE_STYLES, PAGE_SIZES, PRESET_LOCATIONS, TZ_MERIDIANS,
                                     ConfigError, DialConfig, LabelSettings, Location, PageSpec,
                                     TimeWindow, auto_gnomon_height, resolve_style)
from sundial_designer.daterange import DateRange
from sundial_designer.design import DialDesign, build_dial, builtin_intervals, check_design
from sundial_designer.export import write_tables
from sundial_designer.intervals import INTERVAL_STEPS, HourInterval
from sundial_designer.marks import DeclinationMark, Unparseable, parse_mark_date
from sundial_designer.projection import Orientation


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Sundial designer: analemma hour lines, declination lines and labels.")
    p.add_argument("--location", type=str, choices=sorted(PRESET_LOCATIONS), default=None,
                   help="Preset location (overrides --lat/--lon/--tz).")
    p.add_argument("--lat", type=float, default=None, help="Latitude in degrees (+N).")
    p.add_argument("--lon", type=float, default=None, help="Longitude in degrees (East positive).")
    p.add_argument("--tz-std-meridian", type=float, default=None,
                   help="Time zone standard meridian in degrees (East positive).")
    p.add_argument("--tz", type=str, choices=sorted(TZ_MERIDIANS), default=None,
                   help="Time zone abbreviation, used when --tz-std-meridian is not given.")
    p.add_argument("--orientation", type=str, default=Orientation.HORIZONTAL.value,
                   choices=[o.value for o in Orientation], help="Dial plane orientation.")
    p.add_argument("--gnomon-height", type=float, default=None,
                   help="Gnomon height in mm (default: |tan(latitude)| * 100; required near the equator).")
    p.add_argument("--hours-start", type=float, default=6.0, help="First clock hour (default 6).")
    p.add_argument("--hours-end", type=float, default=18.0, help="Last clock hour (default 18).")
    p.add_argument("--date-range", type=str, default=DateRange.FULL_YEAR.value,
                   choices=[d.value for d in DateRange], help="Part of the year the hour curves cover.")
    p.add_argument("--intervals", nargs="+", default=["Hour", "Half-hour"], choices=list(INTERVAL_STEPS),
                   help="Active hour-line intervals (default Hour Half-hour).")
    p.add_argument("--marks", nargs="*", default=["Summer Solstice", "Equinox", "Winter Solstice"],
                   help="Declination lines: named events or calendar dates such as 'March 12'.")
    p.add_argument("--mark-style", type=str, default="default-hairline",
                   help="Line style id or name for declination lines.")
    p.add_argument("--page", type=str, default="Letter", choices=list(PAGE_SIZES) + ["Custom"],
                   help="Page size bounding the plot radius.")
    p.add_argument("--page-width", type=float, default=None, help="Custom page width in mm.")
    p.add_argument("--page-height", type=float, default=None, help="Custom page height in mm.")
    # Labels
    p.add_argument("--no-winter-labels", action="store_true", help="Do not label the winter side.")
    p.add_argument("--no-summer-labels", action="store_true", help="Do not label the summer side.")
    p.add_argument("--label-offset", type=float, default=2.0, help="Label offset from the curve in mm.")
    p.add_argument("--12-hour", dest="twelve_hour", action="store_true", help="Use 12-hour label text.")
    # Output
    p.add_argument("--outdir", type=str, default=".", help="Output directory (default current).")
    p.add_argument("--prefix", type=str, default="sundial", help="Output filename prefix.")
    return p.parse_args(argv)


def _location(args) -> Location:
    if args.location is not None:
        return Location.preset(args.location)
    if args.lat is None or args.lon is None:
        raise ConfigError("give --location, or both --lat and --lon")
    if args.tz_std_meridian is not None:
        meridian = args.tz_std_meridian
    elif args.tz is not None:
        meridian = TZ_MERIDIANS[args.tz]
    else:
        # nearest whole-hour meridian
        meridian = 15.0 * round(args.lon / 15.0)
    return Location(latitude=args.lat, longitude=args.lon, tz_meridian=meridian)


def _page(args) -> PageSpec:
    if args.page == "Custom":
        if args.page_width is None or args.page_height is None:
            raise ConfigError("--page Custom needs --page-width and --page-height")
        return PageSpec(width=args.page_width, height=args.page_height)
    return PageSpec.named(args.page)


def design_from_args(args) -> DialDesign:
    location = _location(args)
    height = args.gnomon_height if args.gnomon_height is not None else auto_gnomon_height(location.latitude)

    styles = DEFAULT_LINE_STYLES
    intervals = tuple(
        HourInterval(i.name, i.style, i.id, active=i.name in args.intervals)
        for i in builtin_intervals(styles)
    )
    mark_style = resolve_style(styles, args.mark_style)
    marks = tuple(DeclinationMark(text, mark_style, f"mark-{n}") for n, text in enumerate(args.marks))

    design = DialDesign(
        location=location,
        dial=DialConfig(orientation=Orientation(args.orientation), gnomon_height=height),
        window=TimeWindow(args.hours_start, args.hours_end),
        date_range=DateRange(args.date_range),
        styles=styles,
        intervals=intervals,
        marks=marks,
        labels=LabelSettings(winter_side=not args.no_winter_labels,
                             summer_side=not args.no_summer_labels,
                             offset=args.label_offset,
                             use_24_hour=not args.twelve_hour),
        page=_page(args),
    )
    check_design(design)
    return design


def main(argv=None):
    args = parse_args(argv)
    try:
        design = design_from_args(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for mark in design.marks:
        if isinstance(parse_mark_date(mark.date), Unparseable):
            print(f"Skipping declination line {mark.date!r}: date not recognised.")

    drawing = build_dial(design)
    paths = write_tables(drawing, args.outdir, args.prefix)

    loc = design.location
    print(f"{design.dial.orientation.value} dial at lat {loc.latitude}°, lon {loc.longitude}° "
          f"(meridian {loc.tz_meridian}°), gnomon {design.dial.gnomon_height} mm")
    print(f"Hour lines: {len(drawing.hour_lines)}  |  declination lines: {len(drawing.declination_lines)}")
    for name, path in paths.items():
        print(f"{name} CSV written to: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
