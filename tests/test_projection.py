import math

import pytest

from sundial_designer.astronomy import solar_position
from sundial_designer.projection import Orientation, project_shadow, shadow_length
from conftest import FORT_COLLINS_LAT, FORT_COLLINS_LNG, MST_MERIDIAN


def test_horizontal_sun_due_south():
    x, y = project_shadow(math.pi / 4, math.pi, 100.0, Orientation.HORIZONTAL, 40.0)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(100.0)


def test_vertical_keeps_gnomon_height():
    x, y = project_shadow(math.pi / 4, math.pi / 2, 50.0, Orientation.VERTICAL, 40.0)
    assert x == pytest.approx(50.0)
    assert y == 50.0


def test_equatorial_at_equator_matches_vertical():
    alt, az = math.radians(30.0), math.radians(120.0)
    eq = project_shadow(alt, az, 80.0, Orientation.EQUATORIAL, 0.0)
    vert = project_shadow(alt, az, 80.0, Orientation.VERTICAL, 0.0)
    assert eq == pytest.approx(vert)


def test_equatorial_tilts_by_latitude():
    alt, az, h, lat = math.radians(40.0), math.radians(200.0), 60.0, 35.0
    length = h / math.tan(alt)
    x, y = project_shadow(alt, az, h, Orientation.EQUATORIAL, lat)
    tilt = math.radians(lat)
    assert x == pytest.approx(length * math.sin(az))
    assert y == pytest.approx(h * math.cos(tilt) - length * math.cos(az) * math.sin(tilt))


@pytest.mark.parametrize("altitude", [0.0, math.nan, math.inf])
def test_degenerate_altitude_is_omitted(altitude):
    assert shadow_length(altitude, 100.0) is None
    assert project_shadow(altitude, math.pi, 100.0, Orientation.HORIZONTAL, 40.0) is None


def test_fort_collins_summer_noon_shadow():
    pos = solar_position(172, FORT_COLLINS_LAT, FORT_COLLINS_LNG, MST_MERIDIAN, 12.0)
    length = shadow_length(pos.altitude, 100.0)
    assert length == pytest.approx(100.0 / math.tan(math.radians(73.0)), rel=0.03)

    x, y = project_shadow(pos.altitude, pos.azimuth, 100.0, Orientation.HORIZONTAL, FORT_COLLINS_LAT)
    # shadow lies along the meridian line
    assert abs(x) < 1.0
    assert abs(y) == pytest.approx(length, rel=1e-3)
    assert y > 0
