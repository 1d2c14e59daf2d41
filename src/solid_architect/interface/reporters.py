"""Protocol for audit reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from solid_architect.domain.entities import AuditReport
    from solid_architect.use_cases.explain_rule import RuleExplanation


class AuditReporter(Protocol):
    """Protocol for reporting audit results and rule guidance."""

    def report_audit(self, report: "AuditReport", format: str = "text") -> None:
        """Report audit results to the user. format: text (default), json or table."""
        ...

    def render_rules(self, rows: list[dict[str, str]]) -> None:
        """Render the list of registered rules."""
        ...

    def render_explanation(self, explanation: "RuleExplanation") -> None:
        """Render guidance for one principle."""
        ...
