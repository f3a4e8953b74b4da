"""Models describing the findings of an Infer JSON report."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

KIND_TAG = "kind"


class NodeKind(str, Enum):
    """Values of the ``kind`` node tag that carry control-flow meaning."""

    PROCEDURE_START = "procedure_start"
    PROCEDURE_END = "procedure_end"
    BRANCH = "branch"


@dataclass(frozen=True, slots=True)
class NodeTag:
    """A single ``{tag, value}`` pair attached to a trace step."""

    tag: str
    value: str

    @property
    def node_kind(self) -> NodeKind | None:
        """Return the recognised node kind, or ``None`` for any other tag."""

        if self.tag != KIND_TAG:
            return None
        try:
            return NodeKind(self.value)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class TraceStep:
    """One program point of a finding's execution trace."""

    description: str
    filename: str
    line_number: Optional[int] = None
    column_number: Optional[int] = None
    node_tags: Tuple[NodeTag, ...] = ()


@dataclass(frozen=True, slots=True)
class Finding:
    """A defect reported by the analyzer."""

    bug_type: str
    bug_type_hum: str
    kind: str
    qualifier: str
    file: str
    line: Optional[int] = None
    column: Optional[int] = None
    bug_trace: Tuple[TraceStep, ...] = field(default_factory=tuple)
