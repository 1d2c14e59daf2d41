"""Configuration loader for auditor settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from solid_architect.domain.constants import (
    DEFAULT_SEVERITIES,
    DEFAULT_SRP_CATEGORIES,
    DOMAIN_CATEGORY,
    REPORT_FORMATS,
)
from solid_architect.domain.entities import Principle, Severity
from solid_architect.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset(
    {"format", "parallel", "max_workers", "severity", "srp_categories"}
)


class ConfigurationLoader:
    """
    Immutable configuration for auditor settings.

    Created by Infrastructure from the [tool.solid-architect] table. Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config = dict(config_dict)
        if config_dict:
            self.validate_config(config_dict)
        self._severities = self._build_severities()
        self._srp_categories = self._build_srp_categories()

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values. Raises ConfigurationError on bad values."""
        unknown = sorted(set(config) - KNOWN_KEYS)
        if unknown:
            logger.warning(
                "Configuration Warning: unknown [tool.solid-architect] keys ignored: %s",
                ", ".join(unknown),
            )

        fmt = config.get("format")
        if fmt is not None and fmt not in REPORT_FORMATS:
            raise ConfigurationError(
                f"Invalid format {fmt!r}; expected one of {', '.join(REPORT_FORMATS)}")

        parallel = config.get("parallel")
        if parallel is not None and not isinstance(parallel, bool):
            raise ConfigurationError(f"parallel must be true or false, got {parallel!r}")

        workers = config.get("max_workers")
        if workers is not None and (
            not isinstance(workers, int) or isinstance(workers, bool) or workers < 1
        ):
            raise ConfigurationError(
                f"max_workers must be a positive integer, got {workers!r}")

        severity = config.get("severity", {})
        if not isinstance(severity, dict):
            raise ConfigurationError("severity must be a table of principle = level")
        for principle, level in severity.items():
            if Principle.parse(str(principle)) is None:
                raise ConfigurationError(f"Unknown principle in severity: {principle!r}")
            if Severity.parse(str(level)) is None:
                raise ConfigurationError(
                    f"Unknown severity {level!r} for {principle}")

        categories = config.get("srp_categories", {})
        if not isinstance(categories, dict):
            raise ConfigurationError("srp_categories must be a table of category = [suffixes]")
        for name, suffixes in categories.items():
            if name == DOMAIN_CATEGORY:
                raise ConfigurationError(
                    f"'{DOMAIN_CATEGORY}' is implicit and cannot be configured")
            if not isinstance(suffixes, list) or not all(
                isinstance(s, str) and s for s in suffixes
            ):
                raise ConfigurationError(
                    f"srp_categories.{name} must be a list of non-empty strings")

    def _build_severities(self) -> dict[Principle, Severity]:
        merged = dict(DEFAULT_SEVERITIES)
        raw = self._config.get("severity", {})
        if isinstance(raw, dict):
            for principle, level in raw.items():
                parsed = Principle.parse(str(principle))
                if parsed is not None:
                    merged[parsed.value] = str(level)
        return {
            Principle(key): Severity.parse(value) or Severity.WARNING
            for key, value in merged.items()
        }

    def _build_srp_categories(self) -> dict[str, tuple[str, ...]]:
        raw = self._config.get("srp_categories")
        if not isinstance(raw, dict) or not raw:
            return dict(DEFAULT_SRP_CATEGORIES)
        return {str(name): tuple(suffixes) for name, suffixes in raw.items()}

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return dict(self._config)

    @property
    def report_format(self) -> str:
        """Default output format (text, json or table)."""
        return str(self._config.get("format", "text"))

    @property
    def parallel(self) -> bool:
        """Run the checkers on a thread pool (default: True)."""
        return self._config.get("parallel", True) is True

    @property
    def max_workers(self) -> int | None:
        raw = self._config.get("max_workers")
        return raw if isinstance(raw, int) else None

    def severity_for(self, principle: Principle) -> Severity:
        """Effective severity for findings of a principle."""
        return self._severities[principle]

    @property
    def srp_categories(self) -> dict[str, tuple[str, ...]]:
        """Technical dependency categories: category name -> name suffixes."""
        return dict(self._srp_categories)
