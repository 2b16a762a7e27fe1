"""
Pytest fixtures shared by the sundial designer tests.

Most scenarios use Fort Collins, CO (the application's default location)
with a 100 mm gnomon.
"""

import pytest

from sundial_designer.config import DialConfig, Location, TimeWindow
from sundial_designer.design import DialDesign
from sundial_designer.projection import Orientation

FORT_COLLINS_LAT = 40.5853
FORT_COLLINS_LNG = -105.0844
MST_MERIDIAN = -105.0


@pytest.fixture
def fort_collins():
    return Location(latitude=FORT_COLLINS_LAT, longitude=FORT_COLLINS_LNG, tz_meridian=MST_MERIDIAN)


@pytest.fixture
def horizontal_dial():
    return DialConfig(orientation=Orientation.HORIZONTAL, gnomon_height=100.0)


@pytest.fixture
def day_window():
    return TimeWindow(6.0, 18.0)


@pytest.fixture
def design(fort_collins, horizontal_dial, day_window):
    return DialDesign(location=fort_collins, dial=horizontal_dial, window=day_window)


def segment_days(segment):
    return [p.day for p in segment]
