"""Ports implemented by Infrastructure and Interface. No I/O here."""

from typing import Protocol

from solid_architect.domain.entities import Declarations
from solid_architect.domain.registry_types import RuleRegistryEntry


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class DeclarationSourceProtocol(Protocol):
    """Protocol for reading a declaration listing."""

    def load(self, path: str) -> Declarations:
        """Read and parse the listing at path. Raises MalformedInputError or DeclarationSourceError."""
        ...


class GuidanceServiceProtocol(Protocol):
    """Protocol for the rule registry (explanations, default severities)."""

    def get_entry(self, principle: str) -> RuleRegistryEntry | None:
        """Return the registry entry for a principle code (e.g. 'LSP')."""
        ...

    def get_manual_instructions(self, principle: str) -> str:
        """Human instructions for resolving findings of that principle."""
        ...

    def get_default_severity(self, principle: str) -> str | None:
        """Default severity recorded in the registry for that principle."""
        ...
