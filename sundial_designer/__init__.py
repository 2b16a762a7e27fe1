"""
Sundial designer: solar-shadow geometry and guide-curve generation for
horizontal, vertical and equatorial dials.
"""
from sundial_designer.astronomy import SolarPosition, equation_of_time, solar_declination, solar_position
from sundial_designer.config import (ConfigError, DialConfig, LabelSettings, LineStyle, Location, PageSpec,
                                     TimeWindow)
from sundial_designer.curves import generate_analemma, generate_declination_curve
from sundial_designer.daterange import DateRange, resolve_day_range
from sundial_designer.design import DialDesign, DialDrawing, build_dial, check_design
from sundial_designer.projection import Orientation, project_shadow

__version__ = "0.1.0"
