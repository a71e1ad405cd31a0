from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError

from smart_quotes.converters import (
    _INTERNAL_ERROR_MESSAGE,
    _config_from_options,
    _error,
    _options_from_config,
    _request_id_from_request,
    _result_to_out,
)
from smart_quotes.env import env_int
from smart_quotes.logging_setup import default_log_dir, ensure_file_logging
from smart_quotes.models import TypesetDefaultsResponse, TypesetRequest, TypesetResponse
from smart_quotes.typesetting.config import TypesetConfig
from smart_quotes.typesetting.fixer import typeset_text

logger = logging.getLogger(__name__)

MAX_TEXT_CHARS = env_int("SMART_QUOTES_MAX_TEXT_CHARS", 1_000_000)


@asynccontextmanager
async def _lifespan(_app: FastAPI) -> AsyncIterator[None]:
    log_file = ensure_file_logging(log_dir=default_log_dir())
    logger.info("file logging enabled: %s", log_file)
    yield


app = FastAPI(lifespan=_lifespan)


@app.middleware("http")
async def _request_id_middleware(request: Request, call_next):  # noqa: ANN001
    request_id = _request_id_from_request(request)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(HTTPException)
async def _http_exception_handler(request: Request, exc: HTTPException):
    return _error(int(exc.status_code), str(exc.detail), request_id=_request_id_from_request(request))


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    msg = "bad request"
    errors = exc.errors()
    if errors:
        msg = errors[0].get("msg") or msg
    return _error(400, msg, request_id=_request_id_from_request(request))


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    request_id = _request_id_from_request(request)
    logger.exception("unhandled error (request_id=%s): %s", request_id, exc)
    return _error(500, _INTERNAL_ERROR_MESSAGE, request_id=request_id)


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.get("/api/v1/typeset/defaults", response_model=TypesetDefaultsResponse)
async def get_typeset_defaults():
    return TypesetDefaultsResponse(options=_options_from_config(TypesetConfig()), max_text_chars=MAX_TEXT_CHARS)


@app.post("/api/v1/typeset", response_model=TypesetResponse)
async def typeset(body: TypesetRequest = Body(...)):
    if len(body.text) > MAX_TEXT_CHARS:
        raise HTTPException(status_code=413, detail=f"text too large (> {MAX_TEXT_CHARS} chars)")

    result = typeset_text(body.text, _config_from_options(body.options))
    logger.info("typeset request: %s chars in, stats=%s", len(body.text), result.stats)
    return _result_to_out(result)
