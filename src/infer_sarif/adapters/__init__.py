"""Adapter layer for report ingestion, file resolution and output."""

from .location_resolver import HASH_ALGORITHM, LocationResolver
from .report_loader import ReportFormatError, ReportLoader, ReportLoaderError, parse_report_json
from .report_writer import OutputWriteError, render_document, write_document

__all__ = [
    "HASH_ALGORITHM",
    "LocationResolver",
    "OutputWriteError",
    "ReportFormatError",
    "ReportLoader",
    "ReportLoaderError",
    "parse_report_json",
    "render_document",
    "write_document",
]
