"""Single Responsibility rule (SRP): types whose dependencies span several concerns.

The check is a structural proxy for a semantic judgment. Dependency names are
bucketed by suffix (``*Repository`` is persistence, ``*Sender`` is
communication, anything unrecognised is domain). A type is flagged once its
dependencies fall into two or more buckets. Names that do not follow the
suffix convention are therefore invisible to the rule, and a type with
several unrelated domain collaborators is never flagged.
"""

from solid_architect.domain.constants import DEFAULT_SRP_CATEGORIES, DOMAIN_CATEGORY
from solid_architect.domain.entities import DesignGraph, Principle, Severity
from solid_architect.domain.rules import Checkable, Finding


class SingleResponsibilityRule(Checkable):
    """Rule for SRP: one type mixing business and technical (or several technical) responsibilities."""

    code: str = "SRP"
    principle: Principle = Principle.SRP
    description: str = "Single Responsibility: a type should not mix business and technical responsibilities."

    def __init__(
        self,
        severity: Severity = Severity.INFO,
        categories: dict[str, tuple[str, ...]] | None = None,
    ) -> None:
        self._severity = severity
        self._categories = dict(
            categories if categories is not None else DEFAULT_SRP_CATEGORIES)

    def categorize(self, dependency_name: str) -> str:
        """Category of a dependency by name suffix; 'domain' when none matches."""
        for category in sorted(self._categories):
            if any(dependency_name.endswith(s) for s in self._categories[category]):
                return category
        return DOMAIN_CATEGORY

    def check(self, graph: DesignGraph) -> list[Finding]:
        """Flag each type whose dependencies fall into two or more categories."""
        findings: list[Finding] = []
        for node in graph.iter_types():
            buckets: dict[str, set[str]] = {}
            for dep in graph.dependencies_of(node.name):
                buckets.setdefault(self.categorize(dep.target), set()).add(dep.target)
            if len(buckets) < 2:
                continue
            detail = "; ".join(
                f"{category}: {', '.join(sorted(names))}"
                for category, names in sorted(buckets.items())
            )
            findings.append(
                Finding(
                    principle=self.principle,
                    severity=self._severity,
                    type_name=node.name,
                    member="",
                    message=f"{node.name} mixes business and technical responsibilities ({detail}).",
                )
            )
        return findings
