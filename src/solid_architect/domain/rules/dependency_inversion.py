"""Dependency Inversion rule (DIP): service-layer types owning concrete classes."""

from solid_architect.domain.entities import DesignGraph, Principle, Severity
from solid_architect.domain.rules import Checkable, Finding


class DependencyInversionRule(Checkable):
    """Rule for DIP: high-level (service-layer) type constructs a concrete low-level class."""

    code: str = "DIP"
    principle: Principle = Principle.DIP
    description: str = "Dependency Inversion: depend on an abstraction, not on a concrete class."

    def __init__(self, severity: Severity = Severity.WARNING) -> None:
        self._severity = severity

    def check(self, graph: DesignGraph) -> list[Finding]:
        """Check each dependency edge owned by a service-layer type."""
        findings: list[Finding] = []
        for dep in graph.dependencies:
            owner = graph.get(dep.owner)
            if owner is None or not owner.service_layer:
                continue
            target = graph.get(dep.target)
            # Undeclared targets cannot be classified.
            if target is None or target.is_interface:
                continue
            findings.append(
                Finding(
                    principle=self.principle,
                    severity=self._severity,
                    type_name=owner.name,
                    member=target.name,
                    message=(
                        f"High-level type {owner.name} depends on concrete low-level type "
                        f"{target.name} instead of an abstraction. Inject an interface."
                    ),
                )
            )
        return findings
