"""Use Case: Explain Rule - guidance for one principle from the rule registry."""

from dataclasses import dataclass

from solid_architect.domain.entities import Principle
from solid_architect.domain.exceptions import SolidArchitectError
from solid_architect.domain.protocols import GuidanceServiceProtocol


@dataclass(frozen=True)
class RuleExplanation:
    """What a principle means and how to resolve its findings."""

    principle: str
    display_name: str
    short_description: str
    default_severity: str
    manual_instructions: str
    eli5_description: str
    example: str
    references: tuple[str, ...]


class ExplainRuleUseCase:
    """Look up a principle's registry entry."""

    def __init__(self, guidance_service: GuidanceServiceProtocol) -> None:
        self.guidance_service = guidance_service

    def execute(self, principle_name: str) -> RuleExplanation:
        """Raise SolidArchitectError for unknown principles or missing registry entries."""
        principle = Principle.parse(principle_name) or self._by_symbol(principle_name)
        if principle is None:
            known = ", ".join(p.value for p in Principle)
            raise SolidArchitectError(
                f"Unknown principle {principle_name!r}; expected one of {known}")
        entry = self.guidance_service.get_entry(principle.value)
        if entry is None:
            raise SolidArchitectError(f"No guidance registered for {principle.value}")
        return RuleExplanation(
            principle=principle.value,
            display_name=entry.get("display_name", principle.value),
            short_description=entry.get("short_description", ""),
            default_severity=entry.get("default_severity", ""),
            manual_instructions=self.guidance_service.get_manual_instructions(principle.value),
            eli5_description=entry.get("eli5_description", ""),
            example=entry.get("example", ""),
            references=tuple(entry.get("references", [])),
        )

    def _by_symbol(self, name: str) -> Principle | None:
        """Match a registry symbol such as 'liskov-substitution'."""
        wanted = name.strip().lower()
        for principle in Principle:
            entry = self.guidance_service.get_entry(principle.value)
            if entry and str(entry.get("symbol", "")).lower() == wanted:
                return principle
        return None
