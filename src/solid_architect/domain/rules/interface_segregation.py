"""Interface Segregation rule (ISP): implementers forced to stub interface methods."""

from solid_architect.domain.entities import (
    BodyBehavior,
    DesignGraph,
    Method,
    Principle,
    Severity,
    TypeNode,
)
from solid_architect.domain.rules import Checkable, Finding


class InterfaceSegregationRule(Checkable):
    """Rule for ISP: an implementer stubs an interface method that a sibling implementer really uses."""

    code: str = "ISP"
    principle: Principle = Principle.ISP
    description: str = "Interface Segregation: interface is too broad for at least one implementer; consider splitting."

    def __init__(self, severity: Severity = Severity.WARNING) -> None:
        self._severity = severity

    def check(self, graph: DesignGraph) -> list[Finding]:
        """Check each interface method across its direct class implementers."""
        findings: list[Finding] = []
        for interface in graph.interfaces():
            implementers = graph.class_implementers(interface.name)
            if len(implementers) < 2:
                continue
            for contract in interface.methods:
                overrides = self._overrides(implementers, contract)
                users = {name for name, m in overrides if m.behavior is BodyBehavior.NORMAL}
                for type_name, method in overrides:
                    if not method.behavior.refuses_contract:
                        continue
                    if not users - {type_name}:
                        continue
                    findings.append(
                        Finding(
                            principle=self.principle,
                            severity=self._severity,
                            type_name=type_name,
                            member=method.name,
                            message=(
                                f"{type_name} is forced to implement {interface.name}.{method.name} "
                                f"which it does not use ({self._describe(method.behavior)}); "
                                f"used by {', '.join(sorted(users))}."
                            ),
                        )
                    )
        return findings

    def _overrides(
        self, implementers: tuple[TypeNode, ...], contract: Method
    ) -> list[tuple[str, Method]]:
        """(implementer name, own override) pairs; implementers that inherit are skipped."""
        pairs: list[tuple[str, Method]] = []
        for implementer in implementers:
            own = implementer.get_method(contract.name, contract.arity)
            if own is not None:
                pairs.append((implementer.name, own))
        return pairs

    def _describe(self, behavior: BodyBehavior) -> str:
        if behavior is BodyBehavior.NO_OP:
            return "empty body"
        return "throws 'unsupported'"
