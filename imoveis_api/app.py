from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from imoveis_api.core.config import Settings, get_settings
from imoveis_api.repositories import PropertyStore, build_store
from imoveis_api.routers import properties as properties_router
from imoveis_api.services.property_service import PropertyService

logger = logging.getLogger(__name__)


def _describe_store(settings: Settings) -> str:
    if settings.storage_backend == "sql":
        return settings.database_url
    return str(settings.data_file)


def create_app(settings: Settings | None = None, store: PropertyStore | None = None) -> FastAPI:
    """Factory compatível com uvicorn/gunicorn."""
    settings = settings or get_settings()
    store = store or build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Garante que o documento existe antes de aceitar conexoes
        store.ensure_initialized()
        logger.info("Servidor backend a rodar na porta %s", settings.port)
        logger.info("Dados em: %s", _describe_store(settings))
        yield

    app = FastAPI(title="Imoveis API", lifespan=lifespan)

    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else sorted(settings.cors_origins),
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.property_service = PropertyService(store)
    app.include_router(properties_router.router)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
