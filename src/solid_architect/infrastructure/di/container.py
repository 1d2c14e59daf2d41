from typing import TYPE_CHECKING, Any, cast

from solid_architect.domain.config import ConfigurationLoader
from solid_architect.domain.entities import Principle
from solid_architect.domain.rules.dependency_inversion import DependencyInversionRule
from solid_architect.domain.rules.interface_segregation import InterfaceSegregationRule
from solid_architect.domain.rules.liskov_substitution import LiskovSubstitutionRule
from solid_architect.domain.rules.open_closed import OpenClosedRule
from solid_architect.domain.rules.single_responsibility import SingleResponsibilityRule
from solid_architect.domain.services.graph_builder import GraphBuilder
from solid_architect.domain.services.report_aggregator import ReportAggregator
from solid_architect.infrastructure.config_file_loader import ConfigFileLoader
from solid_architect.infrastructure.gateways.declaration_file_gateway import (
    DeclarationFileGateway,
)
from solid_architect.infrastructure.reporters import TerminalAuditReporter
from solid_architect.infrastructure.services.guidance_service import GuidanceService
from solid_architect.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from solid_architect.domain.protocols import (
        DeclarationSourceProtocol,
        GuidanceServiceProtocol,
        TelemetryPort,
    )
    from solid_architect.domain.rules import Checkable
    from solid_architect.interface.reporters import AuditReporter


class SolidContainer:
    """Dependency Injection Container for the SOLID auditor."""

    def __init__(self, config_loader: ConfigurationLoader | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    def _register_defaults(self, config_loader: ConfigurationLoader | None) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("SOLID", "cyan", "Design Principle Auditor Online")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton("DeclarationSource", DeclarationFileGateway())
        self.register_singleton("GraphBuilder", GraphBuilder())
        self.register_singleton("ReportAggregator", ReportAggregator())

        # Rules: one per principle, severity from config (defaults in constants)
        severity = config_loader.severity_for
        self.register_singleton(
            "Rules",
            (
                SingleResponsibilityRule(
                    severity(Principle.SRP), categories=config_loader.srp_categories),
                OpenClosedRule(severity(Principle.OCP)),
                LiskovSubstitutionRule(severity(Principle.LSP)),
                InterfaceSegregationRule(severity(Principle.ISP)),
                DependencyInversionRule(severity(Principle.DIP)),
            ),
        )

        # Interface
        self.register_singleton("AuditReporter", TerminalAuditReporter(telemetry=telemetry))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        """Return the guidance service (rule registry)."""
        return cast("GuidanceServiceProtocol", self.get("GuidanceService"))

    def get_declaration_source(self) -> "DeclarationSourceProtocol":
        """Return the declaration listing reader."""
        return cast("DeclarationSourceProtocol", self.get("DeclarationSource"))

    def get_graph_builder(self) -> GraphBuilder:
        return cast(GraphBuilder, self.get("GraphBuilder"))

    def get_report_aggregator(self) -> ReportAggregator:
        return cast(ReportAggregator, self.get("ReportAggregator"))

    def get_rules(self) -> "tuple[Checkable, ...]":
        """Return the five principle checkers."""
        return cast("tuple[Checkable, ...]", self.get("Rules"))

    def get_reporter(self) -> "AuditReporter":
        """Return the audit reporter."""
        return cast("AuditReporter", self.get("AuditReporter"))
