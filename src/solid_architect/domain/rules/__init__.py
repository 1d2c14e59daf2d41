"""Domain models for rules and findings."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Finding",
]

from typing import TYPE_CHECKING, Protocol

from solid_architect.domain.entities import DesignGraph, Principle, Severity

if TYPE_CHECKING:
    from solid_architect.domain.entities import FindingRecord


@dataclass(frozen=True)
class Finding:
    """A single structural issue tied to one design principle."""

    principle: Principle
    severity: Severity
    type_name: str
    member: str
    message: str

    @property
    def stable_id(self) -> str:
        """principle + type + member; the dedup and test-assertion key."""
        return f"{self.principle.value}:{self.type_name}:{self.member}"

    @property
    def sort_key(self) -> tuple[str, str, str]:
        return (self.principle.value, self.type_name, self.member)

    @property
    def subject(self) -> str:
        """Type.member, or just Type when there is no member."""
        if self.member:
            return f"{self.type_name}.{self.member}"
        return self.type_name

    def to_record(self) -> "FindingRecord":
        """Convert to dictionary for reporters."""
        return {
            "id": self.stable_id,
            "principle": self.principle.value,
            "severity": self.severity.value,
            "type": self.type_name,
            "member": self.member,
            "message": self.message,
        }


# -----------------------------------------------------------------------------
# Rule protocol: every checker is one-and-done over a whole DesignGraph.
# Checkers keep no state between calls, so any call order and any thread
# yields the same findings.
# -----------------------------------------------------------------------------


class Checkable(Protocol):
    """Graph check: given the design graph, return findings."""

    code: str
    principle: Principle
    description: str

    def check(self, graph: DesignGraph) -> list[Finding]:
        """Interrogate the graph for breaches of one principle."""
        ...
