"""Property use cases (list, create, update, patch, delete)."""

from __future__ import annotations

import logging
from typing import Any

from imoveis_api.domain.properties import new_property_id, validate_property
from imoveis_api.repositories.base import PropertyStore

logger = logging.getLogger(__name__)


class PropertyError(Exception):
    """Base exception for property workflow."""


class PropertyValidationError(PropertyError):
    """Raised when a candidate misses a required field or has a wrong type."""


class PropertyNotFoundError(PropertyError):
    """Raised when the referenced id is not in the collection."""


class PropertyService:
    """
    Orchestrates the Store and the Validator.

    Every mutation holds the store lock across load -> change -> save, so
    two requests served by the same process never overwrite each other.
    Storage failures (StorageError/DocumentParseError) propagate untouched.
    """

    def __init__(self, store: PropertyStore) -> None:
        self.store = store

    def list_properties(self) -> list[dict]:
        with self.store.lock:
            document = self.store.load()
        return list(document.get("properties") or [])

    def create(self, candidate: Any) -> dict:
        self._validate(candidate)
        record = dict(candidate)
        with self.store.lock:
            document = self.store.load()
            properties = document.get("properties") or []
            record["id"] = new_property_id(p.get("id") for p in properties)
            properties.append(record)
            document["properties"] = properties
            self.store.save(document)
        logger.info("Imovel %s criado.", record["id"])
        return record

    def update(self, property_id: str, candidate: Any) -> dict:
        """Full update (PUT): the payload must carry every required field."""
        self._validate(candidate)
        return self._merge(property_id, candidate)

    def patch(self, property_id: str, candidate: Any) -> dict:
        """Partial update (PATCH): only the supplied fields are validated."""
        self._validate(candidate, partial=True)
        return self._merge(property_id, candidate)

    def delete(self, property_id: str) -> None:
        with self.store.lock:
            document = self.store.load()
            properties = document.get("properties") or []
            remaining = [p for p in properties if p.get("id") != property_id]
            if len(remaining) == len(properties):
                raise PropertyNotFoundError(f"Imovel {property_id} nao encontrado")
            document["properties"] = remaining
            self.store.save(document)
        logger.info("Imovel %s apagado.", property_id)

    def _merge(self, property_id: str, candidate: dict) -> dict:
        with self.store.lock:
            document = self.store.load()
            properties = document.get("properties") or []
            for index, current in enumerate(properties):
                if current.get("id") == property_id:
                    break
            else:
                raise PropertyNotFoundError(f"Imovel {property_id} nao encontrado")
            merged = {**current, **candidate, "id": property_id}
            properties[index] = merged
            document["properties"] = properties
            self.store.save(document)
        logger.info("Imovel %s atualizado.", property_id)
        return merged

    @staticmethod
    def _validate(candidate: Any, partial: bool = False) -> None:
        error = validate_property(candidate, partial=partial)
        if error:
            raise PropertyValidationError(error)
