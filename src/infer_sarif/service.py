"""Orchestration layer used by the CLI to execute report conversions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping

from .adapters import ReportFormatError, ReportLoader, ReportLoaderError
from .config import ConverterSettings
from .converter import InferConverter
from .models import SarifLog
from .normalization import ReportNormalizer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConversionResult:
    """Result returned by :class:`ConversionService` runs."""

    document: SarifLog
    metadata: Mapping[str, Any]


ReportLoaderFactory = Callable[[Path], ReportLoader]
ConverterFactory = Callable[[ConverterSettings], InferConverter]


class ConversionService:
    """High level service responsible for report ingestion and conversion."""

    def __init__(
        self,
        *,
        report_loader_factory: ReportLoaderFactory | None = None,
        normalizer: ReportNormalizer | None = None,
        converter_factory: ConverterFactory | None = None,
    ) -> None:
        self._report_loader_factory = report_loader_factory or ReportLoader
        self._normalizer = normalizer or ReportNormalizer()
        self._converter_factory = converter_factory or InferConverter

    # ------------------------------------------------------------------
    def convert(self, report_path: Path, settings: ConverterSettings) -> ConversionResult:
        """Load the report at ``report_path`` and convert it into a SARIF document."""

        loader = self._report_loader_factory(report_path)
        raw_report = loader.load_report()
        findings = self._normalizer.normalize(raw_report)

        converter = self._converter_factory(settings)
        run = converter.convert_findings(findings)

        metadata: dict[str, Any] = {
            "report_path": str(report_path),
            "project_root": str(settings.project_root),
            "finding_count": len(findings),
            "rule_count": len(run.rules),
            "file_count": len(run.files),
        }
        logger.info("Converted %s with %d findings", report_path, len(findings))

        return ConversionResult(document=converter.document([run]), metadata=metadata)


__all__ = ["ConversionResult", "ConversionService", "ReportFormatError", "ReportLoaderError"]
