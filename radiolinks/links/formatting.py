"""
Text formatting for link metrics shown in tooltips and panels.
"""
from typing import Optional

from radiolinks.links.classifier import LinkArchitecture


def format_distance(distance_m: float) -> str:
    """Metres below 1 km, otherwise kilometres with two decimals."""
    if distance_m >= 1000:
        return f"{distance_m / 1000:.2f} km"
    return f"{round(distance_m)} m"


def format_frequency(frequency_mhz: float) -> str:
    """GHz at or above 1000 MHz, otherwise MHz."""
    if frequency_mhz >= 1000:
        return f"{frequency_mhz / 1000:g} GHz"
    return f"{frequency_mhz:g} MHz"


def format_throughput(mbps: Optional[float]) -> str:
    """Mbps below 1000, Gbps above; '-' when the estimate is unavailable."""
    if mbps is None:
        return "-"
    if mbps >= 1000:
        return f"{mbps / 1000:.2f} Gbps"
    return f"{mbps:.1f} Mbps"


def architecture_label(architecture: LinkArchitecture) -> Optional[str]:
    """Badge text for an architecture; None for Unknown (no badge)."""
    if architecture is LinkArchitecture.UNKNOWN:
        return None
    return architecture.value
