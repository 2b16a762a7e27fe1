import math

import numpy as np
import pytest

from sundial_designer.config import LabelSettings
from sundial_designer.curves import generate_analemma
from sundial_designer.daterange import DateRange, split_by_day_range
from sundial_designer.labels import (SUMMER, WINTER, find_day_index, format_hour_label, hour_labels,
                                     label_anchor, outward_normal)


def test_normal_of_straight_line():
    xy = np.array([[0.0, 10.0], [1.0, 10.0], [2.0, 10.0]])
    np.testing.assert_allclose(outward_normal(xy, 1), [0.0, 1.0])
    assert label_anchor(xy, 1, 2.0) == pytest.approx((1.0, 12.0))


def test_ends_use_one_sided_difference():
    xy = np.array([[0.0, 10.0], [1.0, 10.0], [2.0, 12.0]])
    assert label_anchor(xy, 0, 2.0) == pytest.approx((0.0, 12.0))
    n = outward_normal(xy, 2)
    np.testing.assert_allclose(n, np.array([-2.0, 1.0]) / math.sqrt(5.0))


def test_normal_points_away_from_origin():
    xy = np.array([[0.0, -10.0], [1.0, -10.0], [2.0, -10.0]])
    assert label_anchor(xy, 1, 3.0) == pytest.approx((1.0, -13.0))


def test_find_day_index():
    days = [1, 100, 170, 180]
    assert find_day_index(days, 100) == 1
    assert find_day_index(days, 172) == 2
    assert find_day_index(days, 355) == 0


def test_find_day_index_counts_across_new_year():
    # day 20 is 30 days after the winter solstice, day 300 is 55 days before it
    assert find_day_index([20, 100, 172, 300], 355) == 0
    assert find_day_index([60, 172, 340], 355) == 2


@pytest.mark.parametrize("hour, use_24, text", [
    (13.5, True, "13:30"),
    (13.5, False, "1:30"),
    (12.0, False, "12:00"),
    (0.0, False, "12:00"),
    (6.25, True, "6:15"),
    (9 + 5 / 60, True, "9:05"),
])
def test_format_hour_label(hour, use_24, text):
    assert format_hour_label(hour, use_24) == text


def _labels(location, dial, selector, settings=LabelSettings()):
    curve = generate_analemma(location, dial, 12.0)
    parts = split_by_day_range(curve, selector)
    return parts, hour_labels(parts, selector, 12.0, settings)


def test_full_year_labels_at_solstices(fort_collins, horizontal_dial):
    parts, labels = _labels(fort_collins, horizontal_dial, DateRange.FULL_YEAR)
    by_side = {label.side: label for label in labels}
    assert by_side[SUMMER].day == 172
    assert by_side[WINTER].day == 355
    assert by_side[SUMMER].text == "12:00"

    point = next(p for p in parts[0] if p.day == 172)
    assert math.hypot(by_side[SUMMER].x - point.x, by_side[SUMMER].y - point.y) == pytest.approx(2.0)


def test_winter_to_summer_sides(fort_collins, horizontal_dial):
    _, labels = _labels(fort_collins, horizontal_dial, DateRange.WINTER_TO_SUMMER)
    by_side = {label.side: label for label in labels}
    assert by_side[WINTER].day == 355
    assert by_side[SUMMER].day == 172


def test_summer_to_winter_sides(fort_collins, horizontal_dial):
    _, labels = _labels(fort_collins, horizontal_dial, DateRange.SUMMER_TO_WINTER)
    by_side = {label.side: label for label in labels}
    assert by_side[SUMMER].day == 172
    assert by_side[WINTER].day == 355


def test_disabled_side_is_not_labelled(fort_collins, horizontal_dial):
    settings = LabelSettings(winter_side=False, offset=5.0)
    _, labels = _labels(fort_collins, horizontal_dial, DateRange.FULL_YEAR, settings)
    assert [label.side for label in labels] == [SUMMER]


def test_short_segments_get_no_label():
    assert hour_labels([[]], DateRange.FULL_YEAR, 8.0, LabelSettings()) == []
    assert hour_labels([[], []], DateRange.WINTER_TO_SUMMER, 8.0, LabelSettings()) == []
