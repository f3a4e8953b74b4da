"""Data models for Infer report input and SARIF output."""

from .report import Finding, NodeKind, NodeTag, TraceStep
from .sarif import (
    AnnotatedCodeLocation,
    CodeFlow,
    FileRecord,
    Hash,
    LocationKind,
    PhysicalLocation,
    Region,
    Result,
    ResultLevel,
    Rule,
    Run,
    SarifLog,
    Tool,
)

__all__ = [
    "AnnotatedCodeLocation",
    "CodeFlow",
    "FileRecord",
    "Finding",
    "Hash",
    "LocationKind",
    "NodeKind",
    "NodeTag",
    "PhysicalLocation",
    "Region",
    "Result",
    "ResultLevel",
    "Rule",
    "Run",
    "SarifLog",
    "Tool",
    "TraceStep",
]
