"""
app/storage/blob_storage.py

Blob storage sinks for committed data source files.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath
from typing import Protocol

from app.domain.errors import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredBlob:
    """
    Durable reference returned by a blob sink after an upload.
    """

    public_url: str
    path: str
    size_bytes: int
    checksum: str
    stored_at: datetime


class BlobStorage(Protocol):
    """
    Storage sink used by the import service.
    """

    def upload(self, content: bytes, path: str, *, overwrite: bool = False) -> StoredBlob:
        ...


def sanitize_file_name(file_name: str) -> str:
    safe_name = PurePosixPath(file_name.replace("\\", "/")).name.strip()
    if not safe_name:
        raise StorageError("Invalid file name.")
    return safe_name


def _normalize_blob_path(path: str) -> PurePosixPath:
    relative = PurePosixPath(path.strip().lstrip("/"))
    if not relative.parts or ".." in relative.parts:
        raise StorageError(f"Invalid blob path: {path!r}")
    return relative


class LocalBlobStorage:
    """
    Local filesystem blob sink.

    Files are written to a temporary sibling first and moved into place.
    """

    def __init__(self, root_dir: str | Path = "data/blobs", *, public_base_url: str | None = None) -> None:
        self._root_dir = Path(root_dir)
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None

    def upload(self, content: bytes, path: str, *, overwrite: bool = False) -> StoredBlob:
        relative_path = _normalize_blob_path(path)
        absolute_path = self._root_dir / Path(*relative_path.parts)
        if absolute_path.exists() and not overwrite:
            raise StorageError(f"Blob already exists: {relative_path.as_posix()}")

        tmp_path = absolute_path.with_suffix(f"{absolute_path.suffix}.tmp")
        try:
            absolute_path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("wb") as handle:
                handle.write(content)
            tmp_path.replace(absolute_path)
        except OSError as exc:
            logger.error("Blob write failed path=%s error=%s", relative_path.as_posix(), exc)
            raise StorageError("Failed to write file to storage.") from exc
        finally:
            if tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    pass

        return StoredBlob(
            public_url=self._public_url(relative_path, absolute_path),
            path=relative_path.as_posix(),
            size_bytes=len(content),
            checksum=hashlib.sha256(content).hexdigest(),
            stored_at=datetime.now(timezone.utc),
        )

    def _public_url(self, relative_path: PurePosixPath, absolute_path: Path) -> str:
        if self._public_base_url:
            return f"{self._public_base_url}/{relative_path.as_posix()}"
        return absolute_path.resolve().as_uri()
