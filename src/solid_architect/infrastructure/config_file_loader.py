"""Load [tool.solid-architect] from pyproject.toml. Infrastructure I/O only."""

import tomllib
from pathlib import Path

from solid_architect.domain.constants import CONFIG_SECTION
from solid_architect.domain.exceptions import ConfigurationError


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from a start directory.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the [tool.solid-architect] table of the nearest pyproject.toml, or {}."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except OSError:
                continue
            except tomllib.TOMLDecodeError as e:
                raise ConfigurationError(f"Cannot parse {config_file}: {e}") from e
            tool_section = data.get("tool", {}) or {}
            return tool_section.get(CONFIG_SECTION, {}) or {}
        return {}
