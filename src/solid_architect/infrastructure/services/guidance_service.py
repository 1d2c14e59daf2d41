"""GuidanceService: loads the rule registry and provides manual instructions per principle."""

from pathlib import Path
from typing import cast

import yaml

from solid_architect.domain.constants import REGISTRY_PREFIX
from solid_architect.domain.protocols import GuidanceServiceProtocol
from solid_architect.domain.registry_types import RuleRegistryEntry


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and serves get_entry / get_manual_instructions."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if self._path.exists():
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
                self._registry = (
                    cast(dict[str, RuleRegistryEntry],
                         data) if isinstance(data, dict) else {}
                )
        else:
            self._registry = {}

    def get_entry(self, principle: str) -> RuleRegistryEntry | None:
        """Return the full registry entry for a principle code (e.g. 'LSP') or its symbol."""
        entry = self._registry.get(f"{REGISTRY_PREFIX}{principle.upper()}")
        if entry:
            return cast(RuleRegistryEntry, dict(entry))
        # Resolve by symbol: find solid.* entry whose symbol equals principle
        for rule_id, e in self._registry.items():
            if rule_id.startswith(REGISTRY_PREFIX) and e.get("symbol") == principle:
                return cast(RuleRegistryEntry, dict(e))
        return None

    def get_manual_instructions(self, principle: str) -> str:
        """Return manual_instructions for a principle, or a generic fallback."""
        entry = self.get_entry(principle)
        if entry and entry.get("manual_instructions"):
            return str(entry["manual_instructions"]).strip()
        return f"See the {principle} rule documentation."

    def get_default_severity(self, principle: str) -> str | None:
        """Return the registry default_severity for a principle, or None."""
        entry = self.get_entry(principle)
        return entry.get("default_severity") if entry else None
