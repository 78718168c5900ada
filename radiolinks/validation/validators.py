"""
Validation of reconstructed duplex links.

Checks a link set against the records it was built from and flags broken
partitions and links the UI should treat with care.
"""
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Sequence

from radiolinks.data.schemas import UnidirectionalLinkRecord
from radiolinks.links.builder import DuplexLink
from radiolinks.links.classifier import LinkArchitecture
from radiolinks.utils.logging_config import get_logger

logger = get_logger(__name__)


class IssueSeverity(Enum):
    """Severity levels for validation issues."""
    CRITICAL = "CRITICAL"  # Link set is wrong, must not be rendered
    WARNING = "WARNING"    # Renderable, but unusual
    INFO = "INFO"          # Informational flag


@dataclass
class ValidationIssue:
    """A single validation issue found in a link set."""
    subject: Any
    severity: IssueSeverity
    rule: str
    message: str
    actual_value: Any = None


@dataclass
class ValidationResult:
    """Result of validating a set of duplex links."""
    total_records: int
    total_links: int
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def critical_count(self) -> int:
        """Number of critical issues."""
        return sum(1 for i in self.issues if i.severity == IssueSeverity.CRITICAL)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return sum(1 for i in self.issues if i.severity == IssueSeverity.WARNING)

    @property
    def info_count(self) -> int:
        """Number of info flags."""
        return sum(1 for i in self.issues if i.severity == IssueSeverity.INFO)

    @property
    def is_valid(self) -> bool:
        """True when no critical issue was found."""
        return self.critical_count == 0

    def log_summary(self):
        """Log a summary of validation results."""
        logger.info(
            "Validation complete",
            records=self.total_records,
            links=self.total_links,
            critical=self.critical_count,
            warnings=self.warning_count,
            info=self.info_count
        )

        if self.critical_count > 0:
            logger.warning(
                "Link set failed partition checks",
                critical_issues=self.critical_count
            )


class DuplexLinkValidator:
    """
    Validator for a reconstructed duplex link set.

    Rules:
        PARTITION_MISSING   (CRITICAL) input record not in any link
        PARTITION_DUPLICATE (CRITICAL) record appears more than once
        PARTITION_UNKNOWN   (CRITICAL) link holds a record that was not an input
        EMPTY_LINK          (CRITICAL) link without directions
        DUPLICATE_GROUP_KEY (CRITICAL) two links share a group key
        UNKNOWN_ARCHITECTURE (WARNING) classification fell through
        ZERO_LENGTH_LINK     (WARNING) both endpoints are the same site
        EXPIRED_LINK         (INFO)    at least one permit has lapsed
    """

    def validate(
        self,
        records: Sequence[UnidirectionalLinkRecord],
        links: Sequence[DuplexLink],
    ) -> ValidationResult:
        """
        Validate links against the records they were built from.

        Parameters
        ----------
        records : Sequence[UnidirectionalLinkRecord]
            Input records
        links : Sequence[DuplexLink]
            Links built from ``records``

        Returns
        -------
        ValidationResult
            Validation results with flagged issues
        """
        issues = []
        issues.extend(self._check_partition(records, links))

        key_counts = Counter(link.group_key for link in links)
        for key, count in key_counts.items():
            if count > 1:
                issues.append(ValidationIssue(
                    subject=str(key),
                    severity=IssueSeverity.CRITICAL,
                    rule="DUPLICATE_GROUP_KEY",
                    message=f"Group key used by {count} links",
                    actual_value=count,
                ))

        for link in links:
            key = str(link.group_key)

            if not link.directions:
                issues.append(ValidationIssue(
                    subject=key,
                    severity=IssueSeverity.CRITICAL,
                    rule="EMPTY_LINK",
                    message="Link has no directions",
                ))

            if link.architecture is LinkArchitecture.UNKNOWN:
                issues.append(ValidationIssue(
                    subject=key,
                    severity=IssueSeverity.WARNING,
                    rule="UNKNOWN_ARCHITECTURE",
                    message="Frequency/polarization mix does not match a known architecture",
                    actual_value=len(link.directions),
                ))

            if link.endpoint_a == link.endpoint_b:
                issues.append(ValidationIssue(
                    subject=key,
                    severity=IssueSeverity.WARNING,
                    rule="ZERO_LENGTH_LINK",
                    message="Both endpoints are the same site",
                    actual_value=link.endpoint_a.key,
                ))

            if link.is_expired:
                issues.append(ValidationIssue(
                    subject=key,
                    severity=IssueSeverity.INFO,
                    rule="EXPIRED_LINK",
                    message="At least one permit on this link has expired",
                ))

        result = ValidationResult(
            total_records=len(records),
            total_links=len(links),
            issues=issues,
        )
        result.log_summary()
        return result

    def _check_partition(
        self,
        records: Sequence[UnidirectionalLinkRecord],
        links: Sequence[DuplexLink],
    ) -> List[ValidationIssue]:
        issues = []
        input_counts = Counter(r.id for r in records)
        output_counts = Counter(r.id for link in links for r in link.directions)

        for record_id, expected in input_counts.items():
            actual = output_counts.get(record_id, 0)
            if actual < expected:
                issues.append(ValidationIssue(
                    subject=record_id,
                    severity=IssueSeverity.CRITICAL,
                    rule="PARTITION_MISSING",
                    message="Record not assigned to any link",
                    actual_value=actual,
                ))
            elif actual > expected:
                issues.append(ValidationIssue(
                    subject=record_id,
                    severity=IssueSeverity.CRITICAL,
                    rule="PARTITION_DUPLICATE",
                    message=f"Record appears {actual} times across links",
                    actual_value=actual,
                ))

        for record_id in output_counts.keys() - input_counts.keys():
            issues.append(ValidationIssue(
                subject=record_id,
                severity=IssueSeverity.CRITICAL,
                rule="PARTITION_UNKNOWN",
                message="Link contains a record that was not in the input",
            ))

        return issues
