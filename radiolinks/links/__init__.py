"""
Duplex link reconstruction.

Pipeline stages:
    - Grouping: records -> physical link groups (permit or endpoint pair)
    - Classification: RF architecture (FDD, 2+0 FDD, XPIC, SD, Unknown) and expiry
    - Ordering: canonical endpoints A/B and direction display order
    - Builder: assembles DuplexLink values and resolves record ids back to links
    - Summary: distance, bearings and throughput for display
"""
from radiolinks.links.grouping import (
    GroupKey,
    canonical_pair,
    group_key_for,
    group_records,
)
from radiolinks.links.classifier import (
    Classification,
    LinkArchitecture,
    classify_link,
    is_permit_expired,
)
from radiolinks.links.ordering import (
    canonical_endpoints,
    order_directions,
)
from radiolinks.links.builder import (
    DuplexLink,
    DuplexLinkBuilder,
    DuplexLinkParams,
    build_duplex_links,
    find_link_for_record,
)
from radiolinks.links.summary import (
    LinkSummary,
    summarize_link,
    links_to_dataframe,
    direction_label,
    is_forward,
)

__all__ = [
    # Grouping
    'GroupKey',
    'canonical_pair',
    'group_key_for',
    'group_records',
    # Classification
    'Classification',
    'LinkArchitecture',
    'classify_link',
    'is_permit_expired',
    # Ordering
    'canonical_endpoints',
    'order_directions',
    # Builder
    'DuplexLink',
    'DuplexLinkBuilder',
    'DuplexLinkParams',
    'build_duplex_links',
    'find_link_for_record',
    # Summary
    'LinkSummary',
    'summarize_link',
    'links_to_dataframe',
    'direction_label',
    'is_forward',
]
