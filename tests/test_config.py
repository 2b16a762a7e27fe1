import math

import pytest

from sundial_designer.config import (DEFAULT_LINE_STYLES, ConfigError, LineStyle, Location, PageSpec, TimeWindow,
                                     auto_gnomon_height, check_line_style, check_time_window, resolve_style)


def test_location_preset():
    loc = Location.preset("Spartanburg, SC USA")
    assert loc == Location(latitude=34.9496, longitude=-81.9321, tz_meridian=-75.0)
    with pytest.raises(ConfigError):
        Location.preset("Atlantis")


def test_auto_gnomon_height():
    assert auto_gnomon_height(45.0) == 100.0
    assert auto_gnomon_height(40.5853) == pytest.approx(85.67, abs=0.02)
    assert auto_gnomon_height(-45.0) == 100.0
    assert auto_gnomon_height(0.0) == 0.0


def test_resolve_style_by_id_then_name():
    assert resolve_style(DEFAULT_LINE_STYLES, "0.5mm-black") == 3
    assert resolve_style(DEFAULT_LINE_STYLES, "dashed hairline") == 1
    with pytest.raises(ConfigError):
        resolve_style(DEFAULT_LINE_STYLES, "neon")


def test_line_style_width():
    assert LineStyle(name="thin").width_mm is None
    assert LineStyle(name="thick", width="0.5mm").width_mm == 0.5
    wavy = LineStyle(name="bad", dash="wavy")
    with pytest.raises(ConfigError):
        check_line_style(wavy)
    with pytest.raises(ConfigError):
        check_line_style(LineStyle(name="bad", width="0mm"))
    check_line_style(DEFAULT_LINE_STYLES[3])


@pytest.mark.parametrize("start, stop", [(18.0, 6.0), (6.0, 6.0), (-1.0, 5.0), (5.0, 25.0), (math.nan, 18.0)])
def test_time_window_rejects_bad_ranges(start, stop):
    window = TimeWindow(start, stop)
    with pytest.raises(ConfigError):
        check_time_window(window)


def test_time_window_accepts_whole_day():
    check_time_window(TimeWindow(0.0, 24.0))


def test_minute_samples():
    samples = TimeWindow(6.0, 18.0).minute_samples()
    assert len(samples) == 721
    assert samples[0] == 6.0
    assert samples[-1] == 18.0
    assert samples[1] == pytest.approx(6.0 + 1 / 60)


def test_page_diagonal():
    assert PageSpec.named("A4").diagonal == pytest.approx(math.hypot(210.0, 297.0))
    with pytest.raises(ConfigError):
        PageSpec.named("Tabloid")
