"""Conversion helpers that turn raw Infer report JSON into report models."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Tuple

from ..adapters import ReportFormatError
from ..models import Finding, NodeTag, TraceStep


class ReportNormalizer:
    """Normalize Infer report JSON into :class:`Finding` instances."""

    def normalize(self, report: Any) -> List[Finding]:
        """Return findings for the supplied report, preserving input order."""

        if not isinstance(report, list):
            raise ReportFormatError("Infer report must be a JSON list of findings")
        return [self._normalize_finding(index, entry) for index, entry in enumerate(report)]

    # ------------------------------------------------------------------
    def _normalize_finding(self, index: int, entry: Any) -> Finding:
        if not isinstance(entry, Mapping):
            raise ReportFormatError(f"Finding #{index} is not a JSON object")

        return Finding(
            bug_type=str(entry.get("bug_type") or ""),
            bug_type_hum=str(entry.get("bug_type_hum") or ""),
            kind=str(entry.get("kind") or ""),
            qualifier=str(entry.get("qualifier") or ""),
            file=str(entry.get("file") or ""),
            line=self._coerce_int(entry.get("line")),
            column=self._coerce_int(entry.get("column")),
            bug_trace=self._normalize_trace(index, entry.get("bug_trace") or []),
        )

    def _normalize_trace(self, index: int, trace: Iterable[Any]) -> Tuple[TraceStep, ...]:
        steps: List[TraceStep] = []
        for item in trace:
            if not isinstance(item, Mapping):
                raise ReportFormatError(f"Trace entry of finding #{index} is not a JSON object")
            steps.append(
                TraceStep(
                    description=str(item.get("description") or ""),
                    filename=str(item.get("filename") or ""),
                    line_number=self._coerce_int(item.get("line_number")),
                    column_number=self._coerce_int(item.get("column_number")),
                    node_tags=self._normalize_tags(item.get("node_tags") or []),
                )
            )
        return tuple(steps)

    def _normalize_tags(self, tags: Iterable[Any]) -> Tuple[NodeTag, ...]:
        normalized: List[NodeTag] = []
        for tag in tags:
            # Unknown shapes are skipped like unknown tag names.
            if not isinstance(tag, Mapping):
                continue
            normalized.append(NodeTag(tag=str(tag.get("tag") or ""), value=str(tag.get("value") or "")))
        return tuple(normalized)

    def _coerce_int(self, value: object) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                return None
            try:
                return int(stripped)
            except ValueError:
                return None
        return None


__all__ = ["ReportNormalizer"]
