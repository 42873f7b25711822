from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from imoveis_api.repositories.base import StorageError
from imoveis_api.services.property_service import (
    PropertyService,
    PropertyValidationError,
    PropertyNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/imoveis", tags=["imoveis"])


def _get_property_service(request: Request) -> PropertyService:
    svc = getattr(getattr(request.app, "state", None), "property_service", None)
    if not svc:
        raise RuntimeError("PropertyService nao configurado")
    return svc


def _message(text: str, status_code: int) -> JSONResponse:
    return JSONResponse({"message": text}, status_code=status_code)


@router.get("")
def list_properties(request: Request):
    svc = _get_property_service(request)
    try:
        return svc.list_properties()
    except StorageError:
        logger.exception("Erro em GET /api/imoveis")
        return _message("Erro ao ler os dados dos imoveis.", 500)


@router.post("", status_code=201)
def create_property(request: Request, payload: Any = Body(...)):
    svc = _get_property_service(request)
    try:
        return svc.create(payload)
    except PropertyValidationError as exc:
        return _message(str(exc), 400)
    except StorageError:
        logger.exception("Erro em POST /api/imoveis")
        return _message("Erro ao adicionar o imovel.", 500)


@router.put("/{property_id}")
def update_property(property_id: str, request: Request, payload: Any = Body(...)):
    svc = _get_property_service(request)
    try:
        return svc.update(property_id, payload)
    except PropertyValidationError as exc:
        return _message(str(exc), 400)
    except PropertyNotFoundError:
        return _message("Imovel nao encontrado.", 404)
    except StorageError:
        logger.exception("Erro em PUT /api/imoveis/%s", property_id)
        return _message("Erro ao atualizar o imovel.", 500)


@router.patch("/{property_id}")
def patch_property(property_id: str, request: Request, payload: Any = Body(...)):
    svc = _get_property_service(request)
    try:
        return svc.patch(property_id, payload)
    except PropertyValidationError as exc:
        return _message(str(exc), 400)
    except PropertyNotFoundError:
        return _message("Imovel nao encontrado.", 404)
    except StorageError:
        logger.exception("Erro em PATCH /api/imoveis/%s", property_id)
        return _message("Erro ao atualizar o imovel.", 500)


@router.delete("/{property_id}")
def delete_property(property_id: str, request: Request):
    svc = _get_property_service(request)
    try:
        svc.delete(property_id)
    except PropertyNotFoundError:
        return _message("Imovel nao encontrado para apagar.", 404)
    except StorageError:
        logger.exception("Erro em DELETE /api/imoveis/%s", property_id)
        return _message("Erro ao apagar o imovel.", 500)
    return {"message": "Imovel apagado com sucesso."}
