"""Resolve report file paths to file URIs and track the files a run references."""

from __future__ import annotations

import hashlib
import logging
import mimetypes
import os
from pathlib import Path
from typing import Dict, Mapping

from ..models import FileRecord, Hash

logger = logging.getLogger(__name__)

HASH_ALGORITHM = "md5"
_CHUNK_SIZE = 8192

# Source extensions Infer reports on that the built-in table does not know.
_EXTRA_MIME_TYPES = {
    ".c": "text/x-c",
    ".h": "text/x-c",
    ".cc": "text/x-c",
    ".cpp": "text/x-c",
    ".cxx": "text/x-c",
    ".hh": "text/x-c",
    ".hpp": "text/x-c",
    ".m": "text/x-objcsrc",
    ".mm": "text/x-objcsrc",
    ".java": "text/x-java-source",
    ".kt": "text/x-kotlin",
}


class LocationResolver:
    """Turn project-relative paths into file URIs, one :class:`FileRecord` per URI."""

    def __init__(
        self,
        project_root: str | os.PathLike[str],
        *,
        compute_hashes: bool = False,
        mime_types: Mapping[str, str] | None = None,
    ) -> None:
        self.project_root = Path(os.path.abspath(project_root))
        self.compute_hashes = compute_hashes
        # A fresh MimeTypes instance only knows the built-in table, so results
        # do not depend on the host's mime.types files.
        self._mime_types = mimetypes.MimeTypes()
        for extension, mime_type in {**_EXTRA_MIME_TYPES, **(mime_types or {})}.items():
            self._mime_types.add_type(mime_type, extension)
        self._files: Dict[str, FileRecord] = {}

    # ------------------------------------------------------------------
    def resolve(self, relative_path: str) -> str:
        """Return the file URI for ``relative_path``, registering it on first use."""

        absolute_path = self._absolute_path(relative_path)
        uri = absolute_path.as_uri()
        if uri not in self._files:
            self._files[uri] = self._create_record(uri, absolute_path)
        return uri

    def entries(self) -> Dict[str, FileRecord]:
        """Return the files registered since the last reset, keyed by URI."""

        return dict(self._files)

    def reset(self) -> None:
        self._files.clear()

    # ------------------------------------------------------------------
    def _absolute_path(self, relative_path: str) -> Path:
        return Path(os.path.normpath(self.project_root / relative_path))

    def _create_record(self, uri: str, path: Path) -> FileRecord:
        mime_type, _ = self._mime_types.guess_type(path.name)
        hashes: tuple[Hash, ...] = ()
        if self.compute_hashes:
            if path.is_file():
                try:
                    hashes = (Hash(value=self._hash_file(path), algorithm=HASH_ALGORITHM),)
                except OSError as exc:
                    logger.warning("Skipping hash for unreadable source file %s: %s", path, exc)
            else:
                logger.debug("Skipping hash for missing source file %s", path)

        logger.debug("Registered file %s (mime type %s)", uri, mime_type)
        return FileRecord(uri=uri, mime_type=mime_type, hashes=hashes)

    def _hash_file(self, path: Path) -> str:
        digest = hashlib.md5(usedforsecurity=False)
        with path.open("rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
                digest.update(chunk)
        return digest.hexdigest()


__all__ = ["HASH_ALGORITHM", "LocationResolver"]
