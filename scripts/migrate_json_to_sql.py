"""One-off migration script: JSON (db.json) -> SQL store (DATABASE_URL)."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Garantir que o pacote seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from imoveis_api.core.config import get_settings
from imoveis_api.core.logging import setup_logging
from imoveis_api.repositories import JsonFileStore
from imoveis_api.repositories.sql_repository import SQLStore

logger = logging.getLogger("imoveis_api.migrate")


def migrate(source: Path) -> int:
    if not source.exists():
        raise SystemExit(f"Arquivo nao encontrado: {source}")
    document = JsonFileStore(source).load()
    properties = document.get("properties") or []
    SQLStore().save({"properties": properties})
    return len(properties)


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copiar db.json para o banco SQL")
    ap.add_argument("--source", default=str(settings.data_file), help="Caminho do db.json")
    args = ap.parse_args()

    setup_logging(settings.log_level, settings.log_format)
    count = migrate(Path(args.source))
    logger.info("%d imoveis migrados para %s", count, settings.database_url)


if __name__ == "__main__":
    main()
