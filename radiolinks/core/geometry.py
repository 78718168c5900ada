"""
Geospatial geometry functions for radio link display.

Provides great-circle distance and bearing on a spherical Earth, plus the
conversion of a one-way distance into cellular timing advance steps used by
the map measuring overlay.
"""
import math
from dataclasses import dataclass
from typing import Tuple


# Earth's radius in meters (mean radius)
EARTH_RADIUS_M = 6371000.0

# Distance covered by one timing advance step, per standard (meters)
GSM_TA_STEP_M = 554.0
UMTS_TA_STEP_M = 78.125
LTE_TA_STEP_M = 78.125
NR_TA_STEP_M = 39.0625  # 30 kHz subcarrier spacing


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate great-circle distance between two points using Haversine formula.

    Spherical approximation; error stays well under 0.5% for terrestrial
    microwave spans.

    Args:
        lat1: Latitude of first point (decimal degrees)
        lon1: Longitude of first point (decimal degrees)
        lat2: Latitude of second point (decimal degrees)
        lon2: Longitude of second point (decimal degrees)

    Returns:
        Distance in meters

    Example:
        >>> # Warsaw to Krakow
        >>> distance = haversine_distance(52.2297, 21.0122, 50.0647, 19.9450)
        >>> print(f"{distance/1000:.0f} km")
        252 km

    References:
        https://en.wikipedia.org/wiki/Haversine_formula
    """
    lat1_rad = math.radians(lat1)
    lon1_rad = math.radians(lon1)
    lat2_rad = math.radians(lat2)
    lon2_rad = math.radians(lon2)

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = (math.sin(dlat / 2)) ** 2 + \
        math.cos(lat1_rad) * math.cos(lat2_rad) * (math.sin(dlon / 2)) ** 2

    # Guard against rounding pushing a past 1 for antipodal points
    a = min(1.0, a)

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate initial bearing (forward azimuth) from point 1 to point 2.

    Args:
        lat1: Latitude of starting point (decimal degrees)
        lon1: Longitude of starting point (decimal degrees)
        lat2: Latitude of destination point (decimal degrees)
        lon2: Longitude of destination point (decimal degrees)

    Returns:
        Bearing in degrees in [0, 360), clockwise from north

    References:
        https://www.movable-type.co.uk/scripts/latlong.html
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlon = math.radians(lon2 - lon1)

    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - \
        math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)

    bearing_deg = (math.degrees(math.atan2(y, x)) + 360) % 360

    # (-tiny + 360) % 360 can round to exactly 360.0
    if bearing_deg >= 360.0:
        bearing_deg = 0.0

    return bearing_deg


def get_distance_and_bearing(lat1: float, lon1: float,
                             lat2: float, lon2: float) -> Tuple[float, float]:
    """
    Calculate both distance and bearing between two points.

    Returns:
        Tuple of (distance_meters, bearing_degrees)
    """
    distance = haversine_distance(lat1, lon1, lat2, lon2)
    bearing = calculate_bearing(lat1, lon1, lat2, lon2)

    return distance, bearing


@dataclass(frozen=True)
class TimingAdvance:
    """Timing advance step counts for one distance."""
    gsm: int
    umts: int
    lte: int
    nr: int


def _ta_steps(distance_m: float, step_m: float) -> int:
    # Half-up rounding
    return int(math.floor(max(0.0, distance_m) / step_m + 0.5))


def calculate_timing_advance(distance_m: float) -> TimingAdvance:
    """
    Convert a one-way distance into timing advance steps per standard.

    Negative distances are treated as zero. NaN is treated as zero as well,
    so the overlay always has something to show.

    Args:
        distance_m: One-way distance in meters

    Returns:
        TimingAdvance with GSM, UMTS, LTE and NR (30 kHz SCS) step counts

    Example:
        >>> calculate_timing_advance(5540).gsm
        10
    """
    if distance_m is None or math.isnan(distance_m):
        distance_m = 0.0

    return TimingAdvance(
        gsm=_ta_steps(distance_m, GSM_TA_STEP_M),
        umts=_ta_steps(distance_m, UMTS_TA_STEP_M),
        lte=_ta_steps(distance_m, LTE_TA_STEP_M),
        nr=_ta_steps(distance_m, NR_TA_STEP_M),
    )
