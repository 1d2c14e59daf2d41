"""SOLID Architect - design principle auditor for class/interface declaration listings."""

from solid_architect.domain.entities import (
    AuditReport,
    BodyBehavior,
    Declarations,
    DesignGraph,
    Principle,
    Severity,
    TypeKind,
)
from solid_architect.domain.exceptions import (
    ConfigurationError,
    DeclarationSourceError,
    MalformedInputError,
    SolidArchitectError,
)
from solid_architect.domain.rules import Finding
from solid_architect.domain.services.graph_builder import GraphBuilder
from solid_architect.domain.services.report_aggregator import ReportAggregator

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "GraphBuilder",
    "ReportAggregator",
    # Models
    "AuditReport",
    "BodyBehavior",
    "Declarations",
    "DesignGraph",
    "Finding",
    "Principle",
    "Severity",
    "TypeKind",
    # Exceptions
    "SolidArchitectError",
    "MalformedInputError",
    "DeclarationSourceError",
    "ConfigurationError",
]
