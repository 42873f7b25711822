"""Storage contract shared by every Document backend."""
from __future__ import annotations

from typing import Any, ContextManager, Protocol


class StorageError(Exception):
    """Raised when the underlying storage cannot be created, read or written."""


class DocumentParseError(StorageError):
    """Raised when the persisted content is not a valid Document."""


def empty_document() -> dict:
    return {"properties": []}


def check_document(document: object, source: str) -> dict:
    """Raise DocumentParseError unless `document` is {"properties": [<object>, ...]}."""
    if not isinstance(document, dict):
        raise DocumentParseError(f"Conteudo invalido em {source}: raiz nao e um objeto")
    properties = document.get("properties")
    if properties is None:
        return document
    if not isinstance(properties, list):
        raise DocumentParseError(f"Conteudo invalido em {source}: 'properties' nao e uma lista")
    for position, record in enumerate(properties):
        if not isinstance(record, dict):
            raise DocumentParseError(f"Conteudo invalido em {source}: imovel na posicao {position} nao e um objeto")
    return document


class PropertyStore(Protocol):
    """
    Whole-document persistence: every call is a full read or a full write.

    `lock` is re-entrant; callers hold it across load -> mutate -> save so
    that concurrent requests in the same process do not lose updates.
    """

    lock: ContextManager[Any]

    def ensure_initialized(self) -> None: ...

    def load(self) -> dict: ...

    def save(self, document: dict) -> None: ...
