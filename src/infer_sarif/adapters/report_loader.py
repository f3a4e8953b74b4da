from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ReportLoaderError(RuntimeError):
    """Exception raised when the analyzer report cannot be read."""


class ReportFormatError(RuntimeError):
    """Exception raised when report content is not a well-formed Infer report."""


def parse_report_json(raw: str | bytes, *, source: str = "report") -> Any:
    """Decode raw report text, failing fast on anything that is not JSON."""

    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ReportFormatError(f"Invalid JSON in {source}") from exc


class ReportLoader:
    """Load an Infer ``report.json`` artifact from disk."""

    def __init__(self, report_path: str | os.PathLike[str]) -> None:
        self.report_path = Path(report_path).resolve()

    def load_report(self) -> Any:
        """Return the decoded JSON content of the report."""

        path = self.report_path
        if not path.exists():
            raise ReportLoaderError(f"Infer report not found: {path}")

        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ReportLoaderError(f"Failed to read Infer report {path}") from exc

        logger.debug("Loaded %d bytes from %s", len(raw), path)
        return parse_report_json(raw, source=str(path))


__all__ = ["ReportFormatError", "ReportLoader", "ReportLoaderError", "parse_report_json"]
