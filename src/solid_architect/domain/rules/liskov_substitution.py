"""Liskov Substitution rule (LSP): subtypes that refuse an inherited contract.

Both class and interface parents are checked. An interface method refused by
one implementer while a sibling implementer performs it is an Interface
Segregation finding instead, so that case is not reported twice.
"""

from solid_architect.domain.entities import (
    BodyBehavior,
    DesignGraph,
    Method,
    Principle,
    Severity,
    TypeNode,
)
from solid_architect.domain.rules import Checkable, Finding


class LiskovSubstitutionRule(Checkable):
    """Rule for LSP: an override that throws 'unsupported' where the parent performs the method."""

    code: str = "LSP"
    principle: Principle = Principle.LSP
    description: str = "Liskov Substitution: a subtype must honor every contract of its parent."

    def __init__(self, severity: Severity = Severity.ERROR) -> None:
        self._severity = severity

    def check(self, graph: DesignGraph) -> list[Finding]:
        """Check every Child -> Parent edge for overrides tagged ThrowsUnsupported."""
        findings: list[Finding] = []
        for edge in graph.edges:
            child = graph.get(edge.child)
            parent = graph.get(edge.parent)
            if child is None or parent is None:
                continue
            for method in child.methods:
                if method.behavior is not BodyBehavior.THROWS_UNSUPPORTED:
                    continue
                contract = graph.resolve_method(parent.name, method.name, method.arity)
                if contract is None:
                    continue
                # The parent never promised the behavior.
                if contract.behavior is BodyBehavior.THROWS_UNSUPPORTED:
                    continue
                if parent.is_interface and self._segregation_case(graph, child, parent, contract):
                    continue
                findings.append(
                    Finding(
                        principle=self.principle,
                        severity=self._severity,
                        type_name=child.name,
                        member=method.name,
                        message=(
                            f"{child.name} cannot honor {parent.name}'s contract for method "
                            f"{method.name}: the override throws 'unsupported' instead."
                        ),
                    )
                )
        return findings

    def _segregation_case(
        self, graph: DesignGraph, child: TypeNode, parent: TypeNode, contract: Method
    ) -> bool:
        """True when a sibling class implementer of parent performs the method itself."""
        if contract.owner != parent.name:
            return False
        for sibling in graph.class_implementers(parent.name):
            if sibling.name == child.name:
                continue
            own = sibling.get_method(contract.name, contract.arity)
            if own is not None and own.behavior is BodyBehavior.NORMAL:
                return True
        return False
