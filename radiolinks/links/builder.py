"""
Duplex link assembly.

Runs the stateless pipeline: records -> groups -> classification ->
canonical endpoints and ordered directions -> DuplexLink values. Every call
rebuilds the output from scratch; nothing is cached between calls.
"""
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from radiolinks.data.schemas import Endpoint, UnidirectionalLinkRecord
from radiolinks.links.classifier import LinkArchitecture, classify_link
from radiolinks.links.grouping import GroupKey, group_records, DEFAULT_UNKNOWN_OPERATOR
from radiolinks.links.ordering import canonical_endpoints, order_directions
from radiolinks.utils.config import EngineConfig
from radiolinks.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DuplexLink:
    """A physical point-to-point link reconstructed from its directions."""
    group_key: GroupKey
    endpoint_a: Endpoint
    endpoint_b: Endpoint
    directions: Tuple[UnidirectionalLinkRecord, ...]
    architecture: LinkArchitecture
    is_expired: bool

    @property
    def record_ids(self) -> Tuple[int, ...]:
        """Ids of the member records in display order."""
        return tuple(r.id for r in self.directions)


@dataclass
class DuplexLinkParams:
    """Parameters for duplex link building."""
    unknown_operator_label: str = DEFAULT_UNKNOWN_OPERATOR

    @classmethod
    def from_config(cls, config: Optional[EngineConfig] = None) -> 'DuplexLinkParams':
        """Build parameters from an engine config, or use defaults."""
        if config is None:
            return cls()
        return cls(unknown_operator_label=config.grouping.unknown_operator_label)


class DuplexLinkBuilder:
    """Builds duplex links from a snapshot of unidirectional records."""

    def __init__(self, params: Optional[DuplexLinkParams] = None):
        self.params = params or DuplexLinkParams()

    def build(
        self,
        records: Iterable[UnidirectionalLinkRecord],
        as_of: Optional[date] = None,
    ) -> List[DuplexLink]:
        """
        Reconstruct duplex links.

        Args:
            records: Unidirectional records for the current viewport
            as_of: Reference date for permit expiry (defaults to today)

        Returns:
            Links sorted by group key. Empty input gives an empty list.
        """
        records = list(records)
        if not records:
            logger.debug("duplex_links_skipped", reason="no records")
            return []

        if as_of is None:
            as_of = date.today()

        groups = group_records(records, self.params.unknown_operator_label)

        links = [
            self._assemble(key, members, as_of)
            for key, members in sorted(groups.items(), key=lambda item: item[0])
        ]

        logger.info(
            "duplex_links_built",
            records=len(records),
            links=len(links),
            unknown_architecture=sum(
                1 for link in links if link.architecture is LinkArchitecture.UNKNOWN
            ),
            expired=sum(1 for link in links if link.is_expired),
        )

        return links

    def _assemble(
        self,
        key: GroupKey,
        members: Sequence[UnidirectionalLinkRecord],
        as_of: date,
    ) -> DuplexLink:
        classification = classify_link(members, as_of)
        endpoint_a, endpoint_b = canonical_endpoints(members)
        directions = order_directions(members, endpoint_a, classification.architecture)

        logger.debug(
            "duplex_link_assembled",
            group_key=key,
            endpoint_a=endpoint_a,
            directions=len(directions),
            architecture=classification.architecture,
        )

        return DuplexLink(
            group_key=key,
            endpoint_a=endpoint_a,
            endpoint_b=endpoint_b,
            directions=tuple(directions),
            architecture=classification.architecture,
            is_expired=classification.is_expired,
        )


def build_duplex_links(
    records: Iterable[UnidirectionalLinkRecord],
    as_of: Optional[date] = None,
    config: Optional[EngineConfig] = None,
) -> List[DuplexLink]:
    """
    Convenience function to build duplex links.

    Args:
        records: Unidirectional records
        as_of: Reference date for permit expiry (defaults to today)
        config: Optional engine config

    Returns:
        List of DuplexLink sorted by group key
    """
    builder = DuplexLinkBuilder(DuplexLinkParams.from_config(config))
    return builder.build(records, as_of)


def find_link_for_record(
    record_id: int,
    links: Iterable[DuplexLink],
) -> Optional[DuplexLink]:
    """
    Resolve a record id back to the link that owns it.

    Used when a click on one rendered direction has to open its full duplex
    group.

    Returns:
        The owning DuplexLink, or None if no link contains the record
    """
    for link in links:
        for record in link.directions:
            if record.id == record_id:
                return link
    return None
