"""CLI entry points for SOLID Architect - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer

from solid_architect.domain.config import ConfigurationLoader
from solid_architect.domain.constants import REPORT_FORMATS
from solid_architect.domain.exceptions import SolidArchitectError
from solid_architect.domain.protocols import (
    DeclarationSourceProtocol,
    GuidanceServiceProtocol,
    TelemetryPort,
)
from solid_architect.domain.rules import Checkable
from solid_architect.domain.services.graph_builder import GraphBuilder
from solid_architect.domain.services.report_aggregator import ReportAggregator
from solid_architect.interface.reporters import AuditReporter
from solid_architect.use_cases.analyze_design import AnalyzeDesignUseCase
from solid_architect.use_cases.explain_rule import ExplainRuleUseCase

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    declaration_source: DeclarationSourceProtocol
    graph_builder: GraphBuilder
    rules: tuple[Checkable, ...]
    aggregator: ReportAggregator
    reporter: AuditReporter
    guidance_service: GuidanceServiceProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        """WARNING by default; DEBUG for the solid_architect loggers with --verbose."""
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
        if verbose:
            logging.getLogger("solid_architect").setLevel(logging.DEBUG)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="solid-architect",
            help="SOLID Architect: audit a class/interface declaration listing against the five SOLID principles.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(
                False, "--verbose", "-v", help="Enable verbose (debug) logging"),
        ) -> None:
            """Audit object-oriented designs for SRP, OCP, LSP, ISP and DIP violations."""
            CLIAppFactory.configure_logging(verbose)

        @app.command()
        def check(
            path: Path = typer.Argument(..., help="Declaration listing (YAML or JSON)"),  # noqa: B008
            format: str | None = typer.Option(
                None, "--format", "-f", help="Output format: text, json or table (default from config)"),
            sequential: bool = typer.Option(
                False, "--sequential", help="Run the checkers one after another instead of in a thread pool"),
        ) -> None:
            """Build the design graph, run all five checkers, print the report. Exit 1 on findings."""
            deps.telemetry.handshake()
            output_format = format or deps.config_loader.report_format
            if output_format not in REPORT_FORMATS:
                deps.telemetry.error(
                    f"Unknown format {output_format!r}; expected one of {', '.join(REPORT_FORMATS)}")
                sys.exit(EXIT_ERROR)

            use_case = AnalyzeDesignUseCase(
                declaration_source=deps.declaration_source,
                graph_builder=deps.graph_builder,
                rules=deps.rules,
                aggregator=deps.aggregator,
                telemetry=deps.telemetry,
                parallel=deps.config_loader.parallel and not sequential,
                max_workers=deps.config_loader.max_workers,
            )
            try:
                report = use_case.execute(str(path))
            except SolidArchitectError as e:
                deps.telemetry.error(str(e))
                sys.exit(EXIT_ERROR)

            deps.reporter.report_audit(report, format=output_format)
            sys.exit(EXIT_FINDINGS if report.has_findings() else EXIT_CLEAN)

        @app.command()
        def rules() -> None:
            """List the five rules with their effective and registry default severity."""
            rows: list[dict[str, str]] = []
            for rule in deps.rules:
                entry = deps.guidance_service.get_entry(rule.code) or {}
                rows.append({
                    "code": rule.code,
                    "name": entry.get("display_name", rule.code),
                    "severity": deps.config_loader.severity_for(rule.principle).value,
                    "default": deps.guidance_service.get_default_severity(rule.code) or "-",
                    "description": rule.description,
                })
            deps.reporter.render_rules(rows)

        @app.command()
        def explain(
            principle: str = typer.Argument(..., help="Principle code (SRP, OCP, LSP, ISP, DIP) or symbol such as liskov-substitution"),
        ) -> None:
            """Explain a principle and how to resolve its findings."""
            try:
                explanation = ExplainRuleUseCase(deps.guidance_service).execute(principle)
            except SolidArchitectError as e:
                deps.telemetry.error(str(e))
                sys.exit(EXIT_ERROR)
            deps.reporter.render_explanation(explanation)

        return app
