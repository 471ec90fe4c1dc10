import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _validation_errors(exc: RequestValidationError) -> list:
    # keep loc / msg / type; "input" and "ctx" may echo the payload back
    return [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """
    Error bodies are always {"message": ...}; validation adds "errors".
    """

    @app.exception_handler(RequestValidationError)
    async def on_validation_error(request: Request, exc: RequestValidationError):
        errors = _validation_errors(exc)
        logger.info(
            "Request validation failed",
            extra={"props": {"path": request.url.path, "errors": len(errors)}},
        )
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid data", "errors": jsonable_encoder(errors)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def on_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def on_unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"props": {"path": request.url.path}})
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
