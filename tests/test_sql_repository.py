"""
Smoke tests for the SQLStore against a temporary SQLite database.
"""
from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from imoveis_api.core import config as core_config
from imoveis_api.db import session as db_session
from imoveis_api.repositories import JsonFileStore, StorageError
from imoveis_api.repositories.sql_repository import SQLStore
from imoveis_api.services.property_service import PropertyNotFoundError, PropertyService


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e reseta caches de settings/engine."""
    db_file = tmp_path / "sql" / "imoveis.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    yield db_file

    db_session.get_engine().dispose()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    core_config.get_settings.cache_clear()


def test_load_creates_schema_and_returns_empty_document(temp_db):
    store = SQLStore()
    assert store.load() == {"properties": []}
    assert temp_db.exists()


def test_save_and_load_preserve_order_and_extra_fields(temp_db, sample_property):
    store = SQLStore()
    doc = {
        "properties": [
            {**sample_property, "id": "20", "extra": {"garage": 2}},
            {**sample_property, "id": "10", "title": "Cobertura"},
        ]
    }

    store.save(doc)

    assert store.load() == doc
    store.save(store.load())
    assert [p["id"] for p in store.load()["properties"]] == ["20", "10"]


def test_service_flow_on_sql_backend(temp_db, sample_property):
    svc = PropertyService(SQLStore())
    created = svc.create(sample_property)
    svc.patch(created["id"], {"price": 1})

    assert svc.list_properties()[0]["price"] == 1

    svc.delete(created["id"])
    assert svc.list_properties() == []
    with pytest.raises(PropertyNotFoundError):
        svc.delete(created["id"])


def test_save_rejects_records_without_id(temp_db, sample_property):
    store = SQLStore()
    store.save({"properties": [{**sample_property, "id": "1"}]})

    with pytest.raises(StorageError, match="posicao 1 sem 'id'"):
        store.save({"properties": [{**sample_property, "id": "1"}, dict(sample_property)]})

    assert [p["id"] for p in store.load()["properties"]] == ["1"]


def test_migrate_json_document_into_sql(temp_db, tmp_path, sample_property):
    script = Path(__file__).resolve().parents[1] / "scripts" / "migrate_json_to_sql.py"
    module_spec = importlib.util.spec_from_file_location("migrate_json_to_sql", script)
    migrate_module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(migrate_module)

    source = tmp_path / "db.json"
    records = [{**sample_property, "id": "2"}, {**sample_property, "id": "1", "garage": 1}]
    JsonFileStore(source).save({"properties": records})

    assert migrate_module.migrate(source) == 2
    assert SQLStore().load() == {"properties": records}

    with pytest.raises(SystemExit):
        migrate_module.migrate(tmp_path / "ausente.json")
