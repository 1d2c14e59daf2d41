"""Unit tests for ConfigurationLoader."""

import logging

import pytest

from solid_architect.domain.config import ConfigurationLoader
from solid_architect.domain.constants import DEFAULT_SRP_CATEGORIES
from solid_architect.domain.entities import Principle, Severity
from solid_architect.domain.exceptions import ConfigurationError


class TestDefaults:
    def test_empty_config_uses_defaults(self) -> None:
        loader = ConfigurationLoader({})
        assert loader.report_format == "text"
        assert loader.parallel is True
        assert loader.max_workers is None
        assert loader.severity_for(Principle.LSP) is Severity.ERROR
        assert loader.severity_for(Principle.SRP) is Severity.INFO
        assert loader.severity_for(Principle.DIP) is Severity.WARNING
        assert loader.srp_categories == DEFAULT_SRP_CATEGORIES



class TestOverrides:
    def test_format_and_parallel(self) -> None:
        loader = ConfigurationLoader({"format": "json", "parallel": False, "max_workers": 2})
        assert loader.report_format == "json"
        assert loader.parallel is False
        assert loader.max_workers == 2

    def test_severity_override_accepts_loose_spelling(self) -> None:
        loader = ConfigurationLoader({"severity": {"lsp": "WARNING", "SRP": "error"}})
        assert loader.severity_for(Principle.LSP) is Severity.WARNING
        assert loader.severity_for(Principle.SRP) is Severity.ERROR
        assert loader.severity_for(Principle.OCP) is Severity.WARNING

    def test_srp_categories_replace_defaults(self) -> None:
        loader = ConfigurationLoader({"srp_categories": {"storage": ["Store", "Cache"]}})
        assert loader.srp_categories == {"storage": ("Store", "Cache")}

    def test_config_is_a_copy(self) -> None:
        loader = ConfigurationLoader({"format": "json"})
        loader.config["format"] = "table"
        assert loader.report_format == "json"


class TestValidation:
    @pytest.mark.parametrize(
        "config",
        [
            {"format": "xml"},
            {"parallel": "false"},
            {"parallel": 0},
            {"max_workers": 0},
            {"max_workers": True},
            {"max_workers": "4"},
            {"severity": "error"},
            {"severity": {"XYZ": "error"}},
            {"severity": {"LSP": "fatal"}},
            {"srp_categories": ["Repository"]},
            {"srp_categories": {"domain": ["Service"]}},
            {"srp_categories": {"storage": "Store"}},
            {"srp_categories": {"storage": [""]}},
        ],
    )
    def test_invalid_values_raise(self, config: dict) -> None:
        with pytest.raises(ConfigurationError):
            ConfigurationLoader(config)

    def test_unknown_keys_only_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="solid_architect.domain.config"):
            loader = ConfigurationLoader({"colour": "blue"})
        assert loader.report_format == "text"
        assert "colour" in caplog.text

    def test_parallel_string_is_rejected_with_message(self) -> None:
        with pytest.raises(ConfigurationError, match="parallel must be true or false"):
            ConfigurationLoader({"parallel": "false"})
