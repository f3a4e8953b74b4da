"""Serialize the SARIF document to a file or to the console."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from ..models import SarifLog

logger = logging.getLogger(__name__)


class OutputWriteError(RuntimeError):
    """Raised when the output document cannot be written."""


def render_document(document: SarifLog) -> str:
    return json.dumps(document.to_dict(), indent=2)


def write_document(
    document: SarifLog,
    output_path: str | os.PathLike[str] | None = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Write ``document`` to ``output_path``, or print it when no path is given."""

    content = render_document(document)
    if output_path is None:
        print(content, file=stream or sys.stdout)
        return

    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Failed to write SARIF output to {destination}: {exc}") from exc

    logger.info("Wrote SARIF output to %s", destination)


__all__ = ["OutputWriteError", "render_document", "write_document"]
