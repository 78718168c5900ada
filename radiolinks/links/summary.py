"""
Presentation metrics for duplex links.

Distance and bearings come from the canonical endpoints; throughput is the
sum of per-direction estimates; expiry is counted per direction for the
details panel.
"""
from dataclasses import dataclass, asdict
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from radiolinks.core.geometry import (
    calculate_bearing,
    get_distance_and_bearing,
)
from radiolinks.core.throughput import (
    DEFAULT_DERATING_FACTOR,
    aggregate_mbps,
    estimate_direction_mbps,
)
from radiolinks.data.schemas import UnidirectionalLinkRecord
from radiolinks.links.builder import DuplexLink
from radiolinks.links.classifier import is_permit_expired


SUMMARY_COLUMNS = [
    'group_key',
    'operator',
    'architecture',
    'is_expired',
    'endpoint_a',
    'endpoint_b',
    'distance_m',
    'bearing_a_to_b',
    'bearing_b_to_a',
    'direction_count',
    'expired_direction_count',
    'throughput_mbps',
    'record_ids',
]


@dataclass(frozen=True)
class LinkSummary:
    """Display metrics for one duplex link."""
    group_key: str
    operator: str
    architecture: str
    is_expired: bool
    endpoint_a: str
    endpoint_b: str
    distance_m: float
    bearing_a_to_b: float
    bearing_b_to_a: float
    direction_count: int
    expired_direction_count: int
    throughput_mbps: Optional[float]
    record_ids: str


def is_forward(record: UnidirectionalLinkRecord, link: DuplexLink) -> bool:
    """True if the record transmits from the link's endpoint A."""
    return record.tx == link.endpoint_a


def direction_label(record: UnidirectionalLinkRecord, link: DuplexLink) -> str:
    """'A→B' for forward records, 'B→A' otherwise."""
    return "A→B" if is_forward(record, link) else "B→A"


def link_throughput_mbps(
    link: DuplexLink,
    derating_factor: float = DEFAULT_DERATING_FACTOR,
) -> Optional[float]:
    """Aggregate throughput estimate, or None when no direction has one."""
    return aggregate_mbps(
        estimate_direction_mbps(r.channel_width_mhz, r.modulation, derating_factor)
        for r in link.directions
    )


def summarize_link(
    link: DuplexLink,
    as_of: Optional[date] = None,
    derating_factor: float = DEFAULT_DERATING_FACTOR,
) -> LinkSummary:
    """
    Derive display metrics for one link.

    Args:
        link: Assembled duplex link
        as_of: Reference date for per-direction expiry (defaults to today)
        derating_factor: Throughput derating factor

    Returns:
        LinkSummary
    """
    if as_of is None:
        as_of = date.today()

    a, b = link.endpoint_a, link.endpoint_b
    distance_m, bearing_a_to_b = get_distance_and_bearing(
        a.latitude, a.longitude, b.latitude, b.longitude
    )

    return LinkSummary(
        group_key=str(link.group_key),
        operator=link.group_key.operator,
        architecture=link.architecture.value,
        is_expired=link.is_expired,
        endpoint_a=a.key,
        endpoint_b=b.key,
        distance_m=distance_m,
        bearing_a_to_b=bearing_a_to_b,
        bearing_b_to_a=calculate_bearing(b.latitude, b.longitude, a.latitude, a.longitude),
        direction_count=len(link.directions),
        expired_direction_count=sum(
            1 for r in link.directions if is_permit_expired(r.permit_expiry, as_of)
        ),
        throughput_mbps=link_throughput_mbps(link, derating_factor),
        record_ids=";".join(str(i) for i in link.record_ids),
    )


def links_to_dataframe(
    links: Iterable[DuplexLink],
    as_of: Optional[date] = None,
    derating_factor: float = DEFAULT_DERATING_FACTOR,
) -> pd.DataFrame:
    """
    Tabulate link summaries, one row per link.

    Unavailable throughput is kept as a missing value, never 0.
    """
    rows: List[dict] = [
        asdict(summarize_link(link, as_of, derating_factor)) for link in links
    ]
    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    df['throughput_mbps'] = df['throughput_mbps'].astype('Float64')
    return df
