"""
Coarse throughput estimate for microwave channels.

One-way capacity is approximated as channel width x bits per symbol x a
fixed derating factor. This is a presentation figure, not a link budget.
"""
import math
import re
from typing import Iterable, Optional

from radiolinks.utils.error_handling import safe_numeric_operation


# Fixed spectral-efficiency derating applied to width x bits/symbol
DEFAULT_DERATING_FACTOR = 0.85

# Bits per symbol for modulation names seen in permit data
BITS_PER_SYMBOL = {
    'BPSK': 1,
    'QPSK': 2,
    '4QAM': 2,
    '8QAM': 3,
    '16QAM': 4,
    '32QAM': 5,
    '64QAM': 6,
    '128QAM': 7,
    '256QAM': 8,
    '512QAM': 9,
    '1024QAM': 10,
    '2048QAM': 11,
    '4096QAM': 12,
}

# Derived log2(N) must land in this range to count as a real constellation
MIN_DERIVED_BITS = 1
MAX_DERIVED_BITS = 14

_QAM_SUFFIX = re.compile(r'^(\d+)QAM$')
_QAM_PREFIX = re.compile(r'^QAM(\d+)$')


def _normalize_modulation(name: str) -> str:
    """Upper-case and strip separators: '256-qam' -> '256QAM', 'QAM 64' -> 'QAM64'."""
    return re.sub(r'[\s_\-]+', '', name).upper()


def bits_per_symbol(modulation: Optional[str]) -> Optional[int]:
    """
    Look up bits per symbol for a modulation name.

    Names missing from the table but shaped like ``<N>QAM`` are derived as
    log2(N) when that is an integer in [1, 14].

    Returns:
        Bits per symbol, or None when the modulation is not recognised
    """
    if not modulation or not isinstance(modulation, str):
        return None

    name = _normalize_modulation(modulation)
    if name in BITS_PER_SYMBOL:
        return BITS_PER_SYMBOL[name]

    match = _QAM_SUFFIX.match(name) or _QAM_PREFIX.match(name)
    if not match:
        return None

    order = int(match.group(1))
    if order < 2:
        return None

    bits = math.log2(order)
    if not bits.is_integer():
        return None

    bits = int(bits)
    if bits < MIN_DERIVED_BITS or bits > MAX_DERIVED_BITS:
        return None

    return bits


@safe_numeric_operation(default_value=None)
def estimate_direction_mbps(
    channel_width_mhz: Optional[float],
    modulation: Optional[str],
    derating_factor: float = DEFAULT_DERATING_FACTOR,
) -> Optional[float]:
    """
    Estimate one-way throughput for a single direction.

    Args:
        channel_width_mhz: Channel width in MHz
        modulation: Modulation name (e.g. '256QAM')
        derating_factor: Spectral-efficiency derating

    Returns:
        Estimate in Mbps, or None if width or modulation is unusable

    Example:
        >>> round(estimate_direction_mbps(28, '256QAM'), 2)
        190.4
    """
    bits = bits_per_symbol(modulation)
    if bits is None or channel_width_mhz is None:
        return None

    width = float(channel_width_mhz)
    if width <= 0:
        return None

    return width * bits * derating_factor


def aggregate_mbps(estimates: Iterable[Optional[float]]) -> Optional[float]:
    """
    Sum the available per-direction estimates.

    Returns:
        Total in Mbps, or None ("unavailable", not 0.0) when no direction
        has an estimate.
    """
    available = [e for e in estimates if e is not None]
    if not available:
        return None
    return float(sum(available))
