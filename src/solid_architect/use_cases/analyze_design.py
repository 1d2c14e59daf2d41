"""Use Case: Analyze Design - build the graph, run every checker, aggregate the report."""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from solid_architect.domain.entities import AuditReport, DesignGraph
from solid_architect.domain.protocols import DeclarationSourceProtocol, TelemetryPort
from solid_architect.domain.rules import Checkable, Finding

if TYPE_CHECKING:
    from solid_architect.domain.services.graph_builder import GraphBuilder
    from solid_architect.domain.services.report_aggregator import ReportAggregator


class AnalyzeDesignUseCase:
    """Orchestrate build -> analyze -> report for one declaration listing."""

    def __init__(
        self,
        declaration_source: DeclarationSourceProtocol,
        graph_builder: "GraphBuilder",
        rules: Sequence[Checkable],
        aggregator: "ReportAggregator",
        telemetry: TelemetryPort,
        parallel: bool = True,
        max_workers: int | None = None,
    ) -> None:
        self.declaration_source = declaration_source
        self.graph_builder = graph_builder
        self.rules = tuple(rules)
        self.aggregator = aggregator
        self.telemetry = telemetry
        self.parallel = parallel
        self.max_workers = max_workers

    def execute(self, source_path: str) -> AuditReport:
        """
        Execute the full pipeline.

        MalformedInputError from loading or building propagates before any
        checker runs.

        Args:
            source_path: Path to the declaration listing (YAML or JSON).

        Returns:
            AuditReport with deduplicated, ordered findings.
        """
        self.telemetry.step(f"Loading declarations from: {source_path}")
        declarations = self.declaration_source.load(source_path)

        self.telemetry.step("Building design graph...")
        graph = self.graph_builder.build(declarations)
        if not graph.types:
            self.telemetry.warning(f"No types declared in {source_path}; nothing to audit.")
        self.telemetry.debug(
            f"Graph ready: {len(graph.types)} types, {len(graph.edges)} inheritance edges, "
            f"{len(graph.dependencies)} dependencies"
        )

        findings = self.analyze(graph)
        report = self.aggregator.aggregate(findings, type_count=len(graph.types))
        self.telemetry.step(
            f"Audit complete: {len(report.findings)} finding(s) across {report.type_count} type(s)."
        )
        return report

    def analyze(self, graph: DesignGraph) -> list[Finding]:
        """Run every checker over the graph. Each checker writes only its own list."""
        self.telemetry.step(
            f"Running {len(self.rules)} checkers ({'parallel' if self.parallel else 'sequential'})..."
        )
        if self.parallel and len(self.rules) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                per_rule = list(pool.map(lambda rule: rule.check(graph), self.rules))
        else:
            per_rule = [rule.check(graph) for rule in self.rules]

        merged: list[Finding] = []
        for rule, findings in zip(self.rules, per_rule):
            self.telemetry.debug(f"{rule.code}: {len(findings)} finding(s)")
            merged.extend(findings)
        return merged
