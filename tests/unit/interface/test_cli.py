"""Unit tests for Typer-based CLI interface."""

import json
from pathlib import Path
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from solid_architect.domain.config import ConfigurationLoader
from solid_architect.domain.entities import AuditReport, Principle, Severity
from solid_architect.domain.exceptions import MalformedInputError
from solid_architect.domain.rules import Finding
from solid_architect.domain.rules.liskov_substitution import LiskovSubstitutionRule
from solid_architect.domain.rules.open_closed import OpenClosedRule
from solid_architect.domain.services.graph_builder import GraphBuilder
from solid_architect.domain.services.report_aggregator import ReportAggregator
from solid_architect.infrastructure.gateways.declaration_file_gateway import (
    DeclarationFileGateway,
)
from solid_architect.infrastructure.reporters import TerminalAuditReporter
from solid_architect.infrastructure.services.guidance_service import GuidanceService
from solid_architect.interface.cli import (
    EXIT_CLEAN,
    EXIT_ERROR,
    EXIT_FINDINGS,
    CLIAppFactory,
    CLIDependencies,
)

runner = CliRunner()

BIRDS = """
types:
  - name: Bird
    methods: [{name: fly}]
  - name: Ostrich
    extends: [Bird]
    methods: [{name: fly, behavior: throws_unsupported}]
"""


def _make_mock_deps(**overrides) -> CLIDependencies:
    """Create CLIDependencies with mock adapters/services for testing."""
    defaults: dict = {
        "config_loader": ConfigurationLoader({}),
        "telemetry": Mock(),
        "declaration_source": Mock(),
        "graph_builder": Mock(),
        "rules": (),
        "aggregator": Mock(),
        "reporter": Mock(),
        "guidance_service": Mock(),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


def _make_real_deps(**overrides) -> CLIDependencies:
    """Real pipeline, real reporter on stdout, mocked telemetry."""
    telemetry = Mock()
    defaults: dict = {
        "config_loader": ConfigurationLoader({}),
        "telemetry": telemetry,
        "declaration_source": DeclarationFileGateway(),
        "graph_builder": GraphBuilder(),
        "rules": (OpenClosedRule(), LiskovSubstitutionRule()),
        "aggregator": ReportAggregator(),
        "reporter": TerminalAuditReporter(telemetry),
        "guidance_service": GuidanceService(),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


class TestCheckCommand:
    """Test the check command."""

    @patch("solid_architect.interface.cli.AnalyzeDesignUseCase")
    def test_clean_design_exits_zero(self, mock_use_case_class) -> None:
        mock_use_case_class.return_value.execute.return_value = AuditReport(type_count=3)
        deps = _make_mock_deps()

        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", "design.yaml"])

        assert result.exit_code == EXIT_CLEAN
        mock_use_case_class.return_value.execute.assert_called_once_with("design.yaml")
        deps.telemetry.handshake.assert_called_once()
        deps.reporter.report_audit.assert_called_once_with(
            AuditReport(type_count=3), format="text")

    @patch("solid_architect.interface.cli.AnalyzeDesignUseCase")
    def test_findings_exit_one(self, mock_use_case_class) -> None:
        mock_use_case_class.return_value.execute.return_value = AuditReport(
            findings=(Finding(Principle.LSP, Severity.ERROR, "Ostrich", "fly", "msg"),),
            type_count=2,
        )
        deps = _make_mock_deps()

        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", "design.yaml"])

        assert result.exit_code == EXIT_FINDINGS

    @patch("solid_architect.interface.cli.AnalyzeDesignUseCase")
    def test_malformed_input_exits_two(self, mock_use_case_class) -> None:
        mock_use_case_class.return_value.execute.side_effect = MalformedInputError(
            "Inheritance cycle detected: A -> B -> A", names=("A", "B", "A"))
        deps = _make_mock_deps()

        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", "design.yaml"])

        assert result.exit_code == EXIT_ERROR
        deps.telemetry.error.assert_called_once_with("Inheritance cycle detected: A -> B -> A")
        deps.reporter.report_audit.assert_not_called()

    @patch("solid_architect.interface.cli.AnalyzeDesignUseCase")
    def test_sequential_flag_and_config(self, mock_use_case_class) -> None:
        mock_use_case_class.return_value.execute.return_value = AuditReport()
        deps = _make_mock_deps(config_loader=ConfigurationLoader({"max_workers": 3}))

        runner.invoke(CLIAppFactory.create_app(deps), ["check", "design.yaml", "--sequential"])

        kwargs = mock_use_case_class.call_args.kwargs
        assert kwargs["parallel"] is False
        assert kwargs["max_workers"] == 3

    @patch("solid_architect.interface.cli.AnalyzeDesignUseCase")
    def test_format_defaults_to_config(self, mock_use_case_class) -> None:
        mock_use_case_class.return_value.execute.return_value = AuditReport()
        deps = _make_mock_deps(config_loader=ConfigurationLoader({"format": "table"}))

        runner.invoke(CLIAppFactory.create_app(deps), ["check", "design.yaml"])

        assert deps.reporter.report_audit.call_args.kwargs["format"] == "table"

    def test_unknown_format_exits_two(self) -> None:
        deps = _make_mock_deps()
        result = runner.invoke(
            CLIAppFactory.create_app(deps), ["check", "design.yaml", "--format", "xml"])
        assert result.exit_code == EXIT_ERROR
        deps.telemetry.error.assert_called_once()

    def test_end_to_end_text(self, tmp_path: Path) -> None:
        listing = tmp_path / "birds.yaml"
        listing.write_text(BIRDS, encoding="utf-8")

        result = runner.invoke(CLIAppFactory.create_app(_make_real_deps()), ["check", str(listing)])

        assert result.exit_code == EXIT_FINDINGS
        assert result.stdout.startswith("LSP error   Ostrich.fly: Ostrich cannot honor Bird's contract")
        assert result.stdout.endswith(
            "1 finding(s) in 2 type(s) [SRP=0, OCP=0, LSP=1, ISP=0, DIP=0]\n")

    def test_end_to_end_json(self, tmp_path: Path) -> None:
        listing = tmp_path / "birds.yaml"
        listing.write_text(BIRDS, encoding="utf-8")

        result = runner.invoke(
            CLIAppFactory.create_app(_make_real_deps()), ["check", str(listing), "-f", "json"])

        payload = json.loads(result.stdout)
        assert [f["id"] for f in payload["findings"]] == ["LSP:Ostrich:fly"]
        assert payload["summary"]["total"] == 1

    def test_missing_listing_exits_two(self, tmp_path: Path) -> None:
        deps = _make_real_deps()
        result = runner.invoke(
            CLIAppFactory.create_app(deps), ["check", str(tmp_path / "missing.yaml")])
        assert result.exit_code == EXIT_ERROR
        assert "not found" in deps.telemetry.error.call_args.args[0]

    def test_quoted_service_layer_flag_exits_two(self, tmp_path: Path) -> None:
        listing = tmp_path / "orders.yaml"
        listing.write_text(
            'types:\n  - name: OrderService\n    service_layer: "false"\n', encoding="utf-8")
        deps = _make_real_deps()

        result = runner.invoke(CLIAppFactory.create_app(deps), ["check", str(listing)])

        assert result.exit_code == EXIT_ERROR
        assert "must be true or false" in deps.telemetry.error.call_args.args[0]


class TestRulesCommand:
    def test_lists_rules_with_configured_severity(self) -> None:
        deps = _make_mock_deps(
            rules=(LiskovSubstitutionRule(),),
            config_loader=ConfigurationLoader({"severity": {"LSP": "warning"}}),
            guidance_service=GuidanceService(),
        )

        result = runner.invoke(CLIAppFactory.create_app(deps), ["rules"])

        assert result.exit_code == 0
        deps.reporter.render_rules.assert_called_once_with([{
            "code": "LSP",
            "name": "Liskov Substitution",
            "severity": "warning",
            "default": "error",
            "description": LiskovSubstitutionRule.description,
        }])


class TestExplainCommand:
    def test_explains_known_principle(self) -> None:
        deps = _make_mock_deps(guidance_service=GuidanceService())

        result = runner.invoke(CLIAppFactory.create_app(deps), ["explain", "dip"])

        assert result.exit_code == 0
        explanation = deps.reporter.render_explanation.call_args.args[0]
        assert explanation.principle == "DIP"

    def test_explains_principle_by_symbol(self) -> None:
        deps = _make_mock_deps(guidance_service=GuidanceService())

        result = runner.invoke(CLIAppFactory.create_app(deps), ["explain", "liskov-substitution"])

        assert result.exit_code == EXIT_CLEAN
        explanation = deps.reporter.render_explanation.call_args.args[0]
        assert explanation.principle == "LSP"

    def test_unknown_principle_exits_two(self) -> None:
        deps = _make_mock_deps(guidance_service=GuidanceService())

        result = runner.invoke(CLIAppFactory.create_app(deps), ["explain", "YAGNI"])

        assert result.exit_code == EXIT_ERROR
        deps.reporter.render_explanation.assert_not_called()


class TestVerboseLogging:
    @patch("solid_architect.interface.cli.CLIAppFactory.configure_logging")
    def test_verbose_flag_enables_debug(self, mock_configure) -> None:
        deps = _make_mock_deps(guidance_service=GuidanceService())
        runner.invoke(CLIAppFactory.create_app(deps), ["-v", "explain", "LSP"])
        mock_configure.assert_called_once_with(True)
