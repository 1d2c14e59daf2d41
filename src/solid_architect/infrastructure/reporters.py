"""Report renderers: stable text/JSON serialisation and a rich terminal table."""

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from solid_architect.domain.constants import REPORT_FORMATS

if TYPE_CHECKING:
    from solid_architect.domain.entities import AuditReport
    from solid_architect.domain.protocols import TelemetryPort
    from solid_architect.use_cases.explain_rule import RuleExplanation


SEVERITY_STYLES: dict[str, str] = {
    "error": "bold #C41E3A",
    "warning": "#F9A602",
    "info": "#00EEFF",
}


class ReportSerializer:
    """Pure string rendering. Same report in, same bytes out."""

    @staticmethod
    def to_text(report: "AuditReport") -> str:
        lines = [
            f"{f.principle.value} {f.severity.value:<7} {f.subject}: {f.message}"
            for f in report.findings
        ]
        counts = report.count_by_principle()
        summary = ", ".join(f"{k}={v}" for k, v in counts.items())
        lines.append(
            f"{len(report.findings)} finding(s) in {report.type_count} type(s) [{summary}]")
        return "\n".join(lines) + "\n"

    @staticmethod
    def to_json(report: "AuditReport") -> str:
        payload = {
            "findings": report.to_records(),
            "summary": {
                "total": len(report.findings),
                "types": report.type_count,
                "by_principle": report.count_by_principle(),
            },
        }
        return json.dumps(payload, indent=2, sort_keys=True) + "\n"


class TerminalAuditReporter:
    """Terminal reporter using rich for tables. Implements AuditReporter."""

    def __init__(self, telemetry: "TelemetryPort", console: Console | None = None) -> None:
        self.console = console or Console()
        self._telemetry = telemetry

    def report_audit(self, report: "AuditReport", format: str = "text") -> None:
        """Write the report to stdout in the requested format."""
        if format not in REPORT_FORMATS:
            raise ValueError(f"Unknown report format: {format}")
        if format == "json":
            self.console.out(ReportSerializer.to_json(report), end="", highlight=False)
            return
        if format == "text":
            self.console.out(ReportSerializer.to_text(report), end="", highlight=False)
            return
        self._render_table(report)

    def _render_table(self, report: "AuditReport") -> None:
        if not report.has_findings():
            self._telemetry.step("No design principle violations detected.")
            return
        table = Table(
            title=escape("[SOLID] Design Principle Audit"),
            header_style="bold #007BFF",
        )
        table.add_column("Principle", style="#C41E3A")
        table.add_column("Severity")
        table.add_column("Default")
        table.add_column("Type / Member", style="#00EEFF")
        table.add_column("Finding")
        for f in report.findings:
            style = SEVERITY_STYLES.get(f.severity.value, "")
            table.add_row(
                f.principle.value,
                f"[{style}]{f.severity.value.upper()}[/]" if style else f.severity.value,
                escape(f.subject),
                escape(f.message),
            )
        self.console.print(table)
        counts = ", ".join(f"{k}: {v}" for k, v in report.count_by_principle().items())
        self._telemetry.step(
            f"{len(report.findings)} finding(s) in {report.type_count} type(s) ({counts})")

    def render_rules(self, rows: list[dict[str, str]]) -> None:
        """Table of registered rules: code, name, effective and default severity, description."""
        table = Table(title=escape("[SOLID] Rules"), header_style="bold #007BFF")
        table.add_column("Code", style="#C41E3A")
        table.add_column("Name")
        table.add_column("Severity")
        table.add_column("Description")
        for row in rows:
            table.add_row(*(escape(row[k]) for k in ("code", "name", "severity", "default", "description")))
        self.console.print(table)

    def render_explanation(self, explanation: "RuleExplanation") -> None:
        """Print the guidance for one principle."""
        self.console.print(
            f"[bold]{explanation.principle}: {escape(explanation.display_name)}[/bold] "
            f"(default severity: {escape(explanation.default_severity)})"
        )
        self.console.print(explanation.short_description, markup=False)
        if explanation.eli5_description:
            self.console.print(
                f"\n[italic]Why it matters:[/italic] {escape(explanation.eli5_description)}")
        self.console.print("\n[bold]How to fix[/bold]")
        self.console.print(explanation.manual_instructions, highlight=False, markup=False)
        if explanation.example:
            self.console.print("\n[bold]Example[/bold]")
            self.console.print(explanation.example.rstrip(), highlight=False, markup=False)
        for ref in explanation.references:
            self.console.print(f"  - {ref}")
