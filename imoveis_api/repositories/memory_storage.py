"""In-memory Document store, mainly for tests and throwaway runs."""
from __future__ import annotations

import copy
import threading

from .base import empty_document


class MemoryStore:
    def __init__(self, document: dict | None = None) -> None:
        self._document: dict | None = copy.deepcopy(document) if document is not None else None
        self.lock = threading.RLock()
        self.saves = 0

    def ensure_initialized(self) -> None:
        if self._document is None:
            self._document = empty_document()

    def load(self) -> dict:
        self.ensure_initialized()
        return copy.deepcopy(self._document)

    def save(self, document: dict) -> None:
        self.ensure_initialized()
        self._document = copy.deepcopy(document)
        self.saves += 1
