"""
Core numeric modules: geodesic geometry, timing advance and throughput.
"""
from radiolinks.core.geometry import (
    haversine_distance,
    calculate_bearing,
    get_distance_and_bearing,
    calculate_timing_advance,
    TimingAdvance,
    EARTH_RADIUS_M,
)
from radiolinks.core.throughput import (
    bits_per_symbol,
    estimate_direction_mbps,
    aggregate_mbps,
    DEFAULT_DERATING_FACTOR,
)

__all__ = [
    'haversine_distance',
    'calculate_bearing',
    'get_distance_and_bearing',
    'calculate_timing_advance',
    'TimingAdvance',
    'EARTH_RADIUS_M',
    'bits_per_symbol',
    'estimate_direction_mbps',
    'aggregate_mbps',
    'DEFAULT_DERATING_FACTOR',
]
