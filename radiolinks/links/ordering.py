"""
Canonical endpoint identity and direction display order for a link.
"""
from itertools import zip_longest
from typing import List, Sequence, Tuple

from radiolinks.data.schemas import Endpoint, UnidirectionalLinkRecord
from radiolinks.links.classifier import LinkArchitecture
from radiolinks.links.grouping import canonical_pair


def canonical_endpoints(
    records: Sequence[UnidirectionalLinkRecord],
) -> Tuple[Endpoint, Endpoint]:
    """
    Fix endpoints A and B of a link from its first record.

    A is the endpoint with the smaller ``"lat,lon"`` key, regardless of
    which site transmits in that record.
    """
    first = records[0]
    return canonical_pair(first.tx, first.rx)


def direction_sort_key(record: UnidirectionalLinkRecord) -> Tuple[str, float]:
    """Sort key within a direction: polarization (missing as ''), then frequency."""
    return (record.polarization or "", record.frequency_mhz)


def order_directions(
    records: Sequence[UnidirectionalLinkRecord],
    endpoint_a: Endpoint,
    architecture: LinkArchitecture,
) -> List[UnidirectionalLinkRecord]:
    """
    Produce the display order of a link's directions.

    Forward records transmit from A; everything else is reverse. XPIC links
    list all forward channels, then all reverse ones. Other links alternate
    forward/reverse and append whatever is left over.
    """
    forward = sorted(
        (r for r in records if r.tx == endpoint_a),
        key=direction_sort_key,
    )
    reverse = sorted(
        (r for r in records if r.tx != endpoint_a),
        key=direction_sort_key,
    )

    if architecture is LinkArchitecture.XPIC:
        return forward + reverse

    ordered = []
    for fwd, rev in zip_longest(forward, reverse):
        if fwd is not None:
            ordered.append(fwd)
        if rev is not None:
            ordered.append(rev)
    return ordered
