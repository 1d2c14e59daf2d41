"""Report Aggregator: dedup by stable id, deterministic ordering."""

from collections.abc import Iterable

from solid_architect.domain.entities import AuditReport
from solid_architect.domain.rules import Finding


class ReportAggregator:
    """Collects findings from all checkers into one AuditReport. No filtering beyond dedup."""

    def aggregate(self, findings: Iterable[Finding], type_count: int = 0) -> AuditReport:
        """Dedup by stable_id and sort by (principle, type, member)."""
        # Full-content sort first so the surviving duplicate does not depend on input order.
        ordered = sorted(
            findings,
            key=lambda f: (*f.sort_key, f.severity.value, f.message),
        )
        unique: dict[str, Finding] = {}
        for finding in ordered:
            unique.setdefault(finding.stable_id, finding)
        return AuditReport(
            findings=tuple(sorted(unique.values(), key=lambda f: f.sort_key)),
            type_count=type_count,
        )
