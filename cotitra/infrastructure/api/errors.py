"""Translate domain exceptions into HTTP responses at the API boundary."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cotitra.domain.errors import InvalidIdError, ValidationError

logger = logging.getLogger(__name__)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content=exc.to_dict())


async def _invalid_id(request: Request, exc: InvalidIdError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "ID invalide", "code": exc.code})


async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": "Requête invalide",
            "code": "RequestValidationError",
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"error": "Erreur interne du serveur"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(InvalidIdError, _invalid_id)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(Exception, _unexpected)
