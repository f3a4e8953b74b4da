"""Assemble SARIF runs from Infer findings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Sequence

from .adapters import LocationResolver, parse_report_json
from .config import ConverterSettings
from .models import (
    Finding,
    PhysicalLocation,
    Region,
    Result,
    ResultLevel,
    Rule,
    Run,
    SarifLog,
    Tool,
)
from .normalization import CodeFlowBuilder, ReportNormalizer

logger = logging.getLogger(__name__)

_KIND_TO_LEVEL = {"ERROR": ResultLevel.ERROR}


def kind_to_level(kind: str | None) -> ResultLevel:
    """Map an Infer issue kind to a result level; anything but ``ERROR`` is a warning."""

    return _KIND_TO_LEVEL.get(kind or "", ResultLevel.WARNING)


class InferConverter:
    """Convert Infer reports into SARIF runs.

    The converter owns the file registry of the run it is building; every
    call to :meth:`convert` starts from an empty registry.
    """

    def __init__(
        self,
        settings: ConverterSettings,
        *,
        normalizer: ReportNormalizer | None = None,
    ) -> None:
        self.settings = settings
        self._resolver = LocationResolver(
            settings.project_root,
            compute_hashes=settings.compute_hashes,
            mime_types=settings.mime_types,
        )
        self._flow_builder = CodeFlowBuilder(self._resolver)
        self._normalizer = normalizer or ReportNormalizer()

    @classmethod
    def from_options(
        cls, project_root: str | os.PathLike[str], compute_hashes: bool = False
    ) -> "InferConverter":
        return cls(ConverterSettings(project_root=Path(project_root), compute_hashes=compute_hashes))

    # ------------------------------------------------------------------
    def convert(self, raw: str | bytes) -> Run:
        """Parse raw report JSON and convert it into a single run."""

        findings = self._normalizer.normalize(parse_report_json(raw))
        return self.convert_findings(findings)

    def convert_findings(self, findings: Sequence[Finding]) -> Run:
        """Convert already parsed findings into a single run."""

        self._resolver.reset()
        run = Run(tool=Tool(name=self.settings.tool_name))

        for finding in findings:
            if finding.bug_type not in run.rules:
                run.rules[finding.bug_type] = Rule(id=finding.bug_type, name=finding.bug_type_hum)
            run.results.append(self._build_result(finding))

        run.files = self._resolver.entries()
        logger.info(
            "Converted %d findings (%d rules, %d files)",
            len(run.results),
            len(run.rules),
            len(run.files),
        )
        return run

    @staticmethod
    def document(runs: Iterable[Run]) -> SarifLog:
        """Wrap runs into the top-level SARIF document."""

        return SarifLog(runs=list(runs))

    # ------------------------------------------------------------------
    def _build_result(self, finding: Finding) -> Result:
        # An Infer finding has exactly one location and one trace.
        return Result(
            message=finding.qualifier,
            level=kind_to_level(finding.kind),
            rule_key=finding.bug_type,
            rule_id=finding.bug_type,
            code_flows=[self._flow_builder.build(finding.bug_trace)],
            locations=[
                PhysicalLocation(
                    uri=self._resolver.resolve(finding.file),
                    region=Region(start_line=finding.line, start_column=finding.column),
                )
            ],
        )


__all__ = ["InferConverter", "kind_to_level"]
