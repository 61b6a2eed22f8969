"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


@dataclass(frozen=True)
class DataImportSettings:
    """
    Runtime settings for file uploads and imports.
    """

    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES


@dataclass(frozen=True)
class BlobStorageSettings:
    """
    Blob sink location and naming.
    """

    root_dir: str = "data/blobs"
    path_prefix: str = "data-sources"
    public_base_url: str | None = None


@dataclass(frozen=True)
class ConnectorProbeSettings:
    """
    HTTP behavior for connector connectivity checks.
    """

    timeout_seconds: float = 15.0


@lru_cache(maxsize=1)
def get_data_import_settings() -> DataImportSettings:
    """
    Return cached import settings from environment variables.
    """

    return DataImportSettings(
        max_upload_bytes=max(1, _get_int_env("DATA_IMPORT_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)),
    )


@lru_cache(maxsize=1)
def get_blob_storage_settings() -> BlobStorageSettings:
    """
    Return cached blob storage settings from environment variables.
    """

    return BlobStorageSettings(
        root_dir=_get_str_env("BLOB_STORAGE_DIR", "data/blobs"),
        path_prefix=_get_str_env("BLOB_STORAGE_PREFIX", "data-sources").strip("/") or "data-sources",
        public_base_url=_get_optional_str_env("BLOB_STORAGE_PUBLIC_BASE_URL"),
    )


@lru_cache(maxsize=1)
def get_connector_probe_settings() -> ConnectorProbeSettings:
    """
    Return cached connector probe settings from environment variables.
    """

    return ConnectorProbeSettings(
        timeout_seconds=max(1.0, _get_float_env("CONNECTOR_PROBE_TIMEOUT_SECONDS", 15.0)),
    )
