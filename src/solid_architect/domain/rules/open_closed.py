"""Open/Closed rule (OCP): methods that branch on a type tag."""

from solid_architect.domain.entities import BodyBehavior, DesignGraph, Principle, Severity
from solid_architect.domain.rules import Checkable, Finding


class OpenClosedRule(Checkable):
    """Rule for OCP: a TypeSwitch method needs editing for every new category."""

    code: str = "OCP"
    principle: Principle = Principle.OCP
    description: str = "Open/Closed: replace branching on a type tag with polymorphic dispatch."

    def __init__(self, severity: Severity = Severity.WARNING) -> None:
        self._severity = severity

    def check(self, graph: DesignGraph) -> list[Finding]:
        """Flag TypeSwitch methods unless their owner is an interface with implementers."""
        findings: list[Finding] = []
        for node in graph.iter_types():
            if node.is_interface and graph.implementers(node.name):
                continue
            for method in node.methods:
                if method.behavior is not BodyBehavior.TYPE_SWITCH:
                    continue
                findings.append(
                    Finding(
                        principle=self.principle,
                        severity=self._severity,
                        type_name=node.name,
                        member=method.name,
                        message=(
                            f"{node.name}.{method.name} branches on type; "
                            "consider polymorphic dispatch via an interface."
                        ),
                    )
                )
        return findings
