"""
Grouping of unidirectional radioline records into physical links.

Records sharing an operator and a permit number belong to one link. Records
without a permit fall back to the operator plus the unordered endpoint pair.
"""
from typing import Dict, Iterable, List, NamedTuple, Tuple

from radiolinks.data.schemas import Endpoint, UnidirectionalLinkRecord
from radiolinks.utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_UNKNOWN_OPERATOR = "unknown"

SCOPE_PERMIT = "permit"
SCOPE_PATH = "path"


class GroupKey(NamedTuple):
    """
    Identity of one physical link within a single engine run.

    ``scope`` is ``"permit"`` when ``value`` is a permit number and
    ``"path"`` when it is the canonical ``"latA,lonA|latB,lonB"`` pair.

    Records without an operator carry the configured label in ``operator``
    and ``operator_missing=True``, so they never compare equal to a real
    operator that happens to use the same id. Such keys render the label in
    parentheses: ``"(unknown):path:..."``.
    """
    operator: str
    scope: str
    value: str
    operator_missing: bool = False

    def __str__(self) -> str:
        operator = f"({self.operator})" if self.operator_missing else self.operator
        return f"{operator}:{self.scope}:{self.value}"


def canonical_pair(tx: Endpoint, rx: Endpoint) -> Tuple[Endpoint, Endpoint]:
    """
    Order two endpoints by their ``"lat,lon"`` string keys.

    The endpoint with the lexicographically smaller key comes first, so the
    result does not depend on which site transmits.
    """
    if tx.key <= rx.key:
        return tx, rx
    return rx, tx


def group_key_for(
    record: UnidirectionalLinkRecord,
    unknown_operator: str = DEFAULT_UNKNOWN_OPERATOR,
) -> GroupKey:
    """Compute the grouping key of a single record."""
    operator_missing = record.operator_id is None
    operator = unknown_operator if operator_missing else record.operator_id

    if record.permit_number:
        return GroupKey(operator, SCOPE_PERMIT, record.permit_number, operator_missing)

    a, b = canonical_pair(record.tx, record.rx)
    return GroupKey(operator, SCOPE_PATH, f"{a.key}|{b.key}", operator_missing)


def group_records(
    records: Iterable[UnidirectionalLinkRecord],
    unknown_operator: str = DEFAULT_UNKNOWN_OPERATOR,
) -> Dict[GroupKey, List[UnidirectionalLinkRecord]]:
    """
    Partition records into physical link groups.

    Every record lands in exactly one group. Members of each group are
    sorted by record id so later "first record" rules give the same answer
    whatever order the records arrived in.

    Args:
        records: Unidirectional records (any order)
        unknown_operator: Bucket label for records without an operator

    Returns:
        Mapping of group key to member records
    """
    groups: Dict[GroupKey, List[UnidirectionalLinkRecord]] = {}

    for record in records:
        key = group_key_for(record, unknown_operator)
        groups.setdefault(key, []).append(record)

    for members in groups.values():
        members.sort(key=lambda r: r.id)

    logger.debug(
        "records_grouped",
        groups=len(groups),
        records=sum(len(m) for m in groups.values()),
    )

    return groups
