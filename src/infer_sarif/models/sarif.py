"""SARIF (v2.0.0 layout) output models produced by the converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

SARIF_VERSION = "2.0.0"
SARIF_SCHEMA = "http://json.schemastore.org/sarif-2.0.0"


class ResultLevel(str, Enum):
    """Severity assigned to a result."""

    ERROR = "error"
    WARNING = "warning"


class LocationKind(str, Enum):
    """Control-flow role of a code flow location."""

    CALL = "call"
    CALL_RETURN = "callReturn"
    FUNCTION_ENTER = "functionEnter"
    FUNCTION_EXIT = "functionExit"
    BRANCH = "branch"


@dataclass(slots=True)
class Region:
    start_line: Optional[int] = None
    start_column: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"startLine": self.start_line, "startColumn": self.start_column}


@dataclass(slots=True)
class PhysicalLocation:
    uri: str
    region: Region = field(default_factory=Region)

    def to_dict(self) -> dict[str, Any]:
        return {"uri": self.uri, "region": self.region.to_dict()}


@dataclass(slots=True)
class AnnotatedCodeLocation:
    """A numbered step of a code flow.

    ``kind`` stays mutable: the flow builder rewrites the previous step to
    :attr:`LocationKind.CALL` once it sees the callee's entry.
    """

    step: int
    message: str
    physical_location: PhysicalLocation
    kind: LocationKind | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "step": self.step,
            "message": self.message,
            "physicalLocation": self.physical_location.to_dict(),
        }
        if self.kind is not None:
            payload["kind"] = self.kind.value
        return payload


@dataclass(slots=True)
class CodeFlow:
    locations: List[AnnotatedCodeLocation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"locations": [location.to_dict() for location in self.locations]}


@dataclass(frozen=True, slots=True)
class Hash:
    value: str
    algorithm: str

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "algorithm": self.algorithm}


@dataclass(frozen=True, slots=True)
class FileRecord:
    """Identity and content metadata of one source file referenced by a run."""

    uri: str
    mime_type: Optional[str] = None
    hashes: tuple[Hash, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"uri": self.uri, "mimeType": self.mime_type}
        if self.hashes:
            payload["hashes"] = [file_hash.to_dict() for file_hash in self.hashes]
        return payload


@dataclass(frozen=True, slots=True)
class Rule:
    id: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(slots=True)
class Result:
    """One converted finding."""

    message: str
    level: ResultLevel
    rule_key: str
    rule_id: str
    code_flows: List[CodeFlow] = field(default_factory=list)
    locations: List[PhysicalLocation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "level": self.level.value,
            "ruleKey": self.rule_key,
            "ruleId": self.rule_id,
            "codeFlows": [flow.to_dict() for flow in self.code_flows],
            "locations": [{"resultFile": location.to_dict()} for location in self.locations],
        }


@dataclass(frozen=True, slots=True)
class Tool:
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(slots=True)
class Run:
    """Output of a single conversion."""

    tool: Tool
    rules: Dict[str, Rule] = field(default_factory=dict)
    results: List[Result] = field(default_factory=list)
    files: Dict[str, FileRecord] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tool": self.tool.to_dict(),
            "rules": {key: rule.to_dict() for key, rule in self.rules.items()},
            "results": [result.to_dict() for result in self.results],
            "files": {uri: record.to_dict() for uri, record in self.files.items()},
        }


@dataclass(slots=True)
class SarifLog:
    runs: List[Run] = field(default_factory=list)
    version: str = SARIF_VERSION
    schema: str = SARIF_SCHEMA

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "$schema": self.schema,
            "runs": [run.to_dict() for run in self.runs],
        }
