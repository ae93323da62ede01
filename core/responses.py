import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from core import messages
from core.stage import StageResult
from schemas.chat import ChatReply, ErrorReply

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorReply(error=message).model_dump())


def to_response(result: StageResult) -> JSONResponse:
    """Map a pipeline outcome onto the {reply} / {error} envelope."""
    if result.ok:
        return JSONResponse(status_code=200, content=ChatReply(reply=result.text).model_dump())
    status_code = 400 if result.is_client_error else 500
    return error_response(status_code, result.user_message or messages.BACKEND_DISCONNECTED)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s body: %s", request.url.path, exc.errors())
    return error_response(
        400, messages.CLIENT_ERRORS_BY_PATH.get(request.url.path, messages.INVALID_REQUEST)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return error_response(500, messages.BACKEND_DISCONNECTED)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
