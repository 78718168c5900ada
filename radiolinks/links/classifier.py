"""
RF architecture classification for a duplex link group.

The group is split into directional cohorts (records sharing the literal
tx -> rx pair). The largest cohort is the reference; its record count and
its distinct frequencies/polarizations decide the architecture:

    1 record                              -> FDD
    one frequency, several polarizations  -> XPIC
    several frequencies, one polarization -> 2+0 FDD
    one frequency, one polarization       -> SD (space diversity)
    anything else                         -> Unknown

The table reproduces the presentation used for the permit dataset and is
not a general RF classification.
"""
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from radiolinks.data.schemas import UnidirectionalLinkRecord


class LinkArchitecture(Enum):
    """RF architecture of a duplex link."""
    FDD = "FDD"
    TWO_PLUS_ZERO_FDD = "2+0 FDD"
    XPIC = "XPIC"
    SPACE_DIVERSITY = "SD"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Classification:
    """Architecture and expiry state of one link group."""
    architecture: LinkArchitecture
    is_expired: bool
    reference_cohort: Tuple[UnidirectionalLinkRecord, ...]


def split_directional_cohorts(
    records: Sequence[UnidirectionalLinkRecord],
) -> List[List[UnidirectionalLinkRecord]]:
    """
    Sub-partition records by their literal (tx, rx) pair.

    Cohorts are returned in order of first occurrence in ``records``.
    """
    cohorts: Dict[Tuple[str, str], List[UnidirectionalLinkRecord]] = {}
    for record in records:
        cohorts.setdefault((record.tx.key, record.rx.key), []).append(record)
    return list(cohorts.values())


def select_reference_cohort(
    cohorts: List[List[UnidirectionalLinkRecord]],
) -> List[UnidirectionalLinkRecord]:
    """
    Pick the cohort with the most records.

    Ties go to the cohort that occurred first.
    """
    ranked = sorted(
        enumerate(cohorts),
        key=lambda item: (-len(item[1]), item[0]),
    )
    return ranked[0][1]


def classify_cohort(cohort: Sequence[UnidirectionalLinkRecord]) -> LinkArchitecture:
    """Classify the architecture from a reference cohort's contents."""
    if len(cohort) == 1:
        return LinkArchitecture.FDD

    frequencies = {r.frequency_mhz for r in cohort}
    # A missing polarization counts as its own value
    polarizations = {r.polarization for r in cohort}

    if len(frequencies) == 1 and len(polarizations) > 1:
        return LinkArchitecture.XPIC
    if len(frequencies) > 1 and len(polarizations) == 1:
        return LinkArchitecture.TWO_PLUS_ZERO_FDD
    if len(frequencies) == 1 and len(polarizations) == 1:
        return LinkArchitecture.SPACE_DIVERSITY
    return LinkArchitecture.UNKNOWN


def is_permit_expired(expiry: Optional[date], as_of: Optional[date] = None) -> bool:
    """
    Check whether a permit has lapsed.

    A permit expiring today is still valid. A missing expiry date is treated
    as not expired.
    """
    if expiry is None:
        return False
    if as_of is None:
        as_of = date.today()
    return expiry < as_of


def classify_link(
    records: Sequence[UnidirectionalLinkRecord],
    as_of: Optional[date] = None,
) -> Classification:
    """
    Classify one link group.

    Args:
        records: All records of the group, in a stable order
        as_of: Reference date for permit expiry (defaults to today)

    Returns:
        Classification with architecture, expiry flag and the reference cohort

    Example:
        >>> result = classify_link(group)
        >>> result.architecture
        <LinkArchitecture.FDD: 'FDD'>
    """
    if not records:
        return Classification(LinkArchitecture.UNKNOWN, False, ())

    if as_of is None:
        as_of = date.today()

    reference = select_reference_cohort(split_directional_cohorts(records))
    architecture = classify_cohort(reference)

    # Any lapsed permit puts the whole physical link at risk
    is_expired = any(is_permit_expired(r.permit_expiry, as_of) for r in records)

    return Classification(architecture, is_expired, tuple(reference))
