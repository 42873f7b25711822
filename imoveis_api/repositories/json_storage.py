"""
JSON file persistence adapter.

The whole Document lives in a single UTF-8 file ({"properties": [...]}).
Each load reads the full file and each save rewrites it in full.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from .base import DocumentParseError, StorageError, check_document, empty_document

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Reads/writes the Document stored at `path`."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.lock = threading.RLock()

    def ensure_initialized(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.path.exists():
                return
            logger.info("%s nao encontrado; criando documento vazio.", self.path)
            self._write(empty_document())
        except OSError as exc:
            raise StorageError(f"Falha ao inicializar {self.path}: {exc}") from exc

    def load(self) -> dict:
        self.ensure_initialized()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(f"Conteudo invalido em {self.path}: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Falha ao ler {self.path}: {exc}") from exc
        return check_document(document, str(self.path))

    def save(self, document: dict) -> None:
        self.ensure_initialized()
        try:
            self._write(document)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Documento nao serializavel para {self.path}: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Falha ao gravar {self.path}: {exc}") from exc

    def _write(self, document: dict) -> None:
        # Grava num arquivo temporario e troca de uma vez: nunca deixa o db truncado
        payload = json.dumps(document, ensure_ascii=False, indent=2, allow_nan=False)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise
