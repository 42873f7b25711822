"""
Persistence adapters.

Each store exposes the same whole-document contract (ensure_initialized /
load / save plus a re-entrant lock). Services receive a store instead of
touching the JSON file directly.
"""

from __future__ import annotations

from imoveis_api.core.config import Settings

from .base import DocumentParseError, PropertyStore, StorageError, empty_document
from .json_storage import JsonFileStore
from .memory_storage import MemoryStore


def build_store(settings: Settings) -> PropertyStore:
    """Pick the backend configured through STORAGE_BACKEND."""
    if settings.storage_backend == "sql":
        from .sql_repository import SQLStore

        return SQLStore()
    return JsonFileStore(settings.data_file)


__all__ = [
    "DocumentParseError",
    "JsonFileStore",
    "MemoryStore",
    "PropertyStore",
    "StorageError",
    "build_store",
    "empty_document",
]
