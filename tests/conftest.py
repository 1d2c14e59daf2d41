"""Pytest configuration and shared fixtures.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the import path.
"""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from solid_architect.domain.entities import DesignGraph
from solid_architect.domain.services.graph_builder import GraphBuilder
from solid_architect.infrastructure.gateways.declaration_file_gateway import (
    DeclarationFileGateway,
)

SOURCE_DATA = Path(__file__).parent / "functional" / "source_data"


@pytest.fixture
def graph_of() -> Callable[[dict], DesignGraph]:
    """Build a DesignGraph from a listing written as a plain dict."""
    gateway = DeclarationFileGateway()
    builder = GraphBuilder()

    def _build(listing: dict) -> DesignGraph:
        return builder.build(gateway.parse(listing))

    return _build


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()


@pytest.fixture
def source_data() -> Path:
    """Directory of sample declaration listings."""
    return SOURCE_DATA
