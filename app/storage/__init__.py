"""
app/storage package marker.
"""

from app.storage.blob_storage import BlobStorage, LocalBlobStorage, StoredBlob, sanitize_file_name

__all__ = [
    "BlobStorage",
    "LocalBlobStorage",
    "StoredBlob",
    "sanitize_file_name",
]
