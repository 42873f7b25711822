"""Document store backed by SQLAlchemy (SQLite by default, any SQL URL works)."""
from __future__ import annotations

import logging
import threading

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from imoveis_api.db.models import PropertyRow
from imoveis_api.db.session import Base, get_engine, get_session

from .base import DocumentParseError, StorageError

logger = logging.getLogger(__name__)


class SQLStore:
    """
    Keeps the whole-document contract on top of a `properties` table.

    Each row stores the full record as JSON plus its position in the
    collection, so load() returns the properties in insertion order.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._initialized = False

    def ensure_initialized(self) -> None:
        if self._initialized:
            return
        try:
            Base.metadata.create_all(bind=get_engine())
        except SQLAlchemyError as exc:
            raise StorageError(f"Falha ao inicializar o banco: {exc}") from exc
        self._initialized = True

    def load(self) -> dict:
        self.ensure_initialized()
        try:
            with get_session() as session:
                rows = session.execute(select(PropertyRow).order_by(PropertyRow.position)).scalars().all()
                properties = [row.data for row in rows]
        except SQLAlchemyError as exc:
            raise StorageError(f"Falha ao ler o banco: {exc}") from exc
        for record in properties:
            if not isinstance(record, dict):
                raise DocumentParseError("Registro invalido na tabela properties")
        return {"properties": properties}

    def save(self, document: dict) -> None:
        self.ensure_initialized()
        properties = document.get("properties") or []
        for position, record in enumerate(properties):
            if record.get("id") in (None, ""):
                raise StorageError(f"Imovel na posicao {position} sem 'id'; nao e possivel gravar no banco")
        try:
            with get_session() as session:
                session.execute(delete(PropertyRow))
                for position, record in enumerate(properties):
                    session.add(PropertyRow(id=str(record.get("id")), position=position, data=dict(record)))
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Falha ao gravar no banco: {exc}") from exc
        logger.debug("Documento gravado no banco (%d imoveis).", len(properties))
