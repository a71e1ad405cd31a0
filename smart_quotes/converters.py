from __future__ import annotations

import re
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from smart_quotes.models import ErrorEnvelope, TypesetOptions, TypesetResponse
from smart_quotes.typesetting.config import TypesetConfig
from smart_quotes.typesetting.fixer import TypesetResult

_INTERNAL_ERROR_MESSAGE = "internal server error"

_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _error_code_for_status(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code == 409:
        return "conflict"
    if status_code in {400, 405, 413, 422}:
        return "bad_request"
    return "internal_error"


def _error(status_code: int, message: str, *, request_id: str | None = None) -> JSONResponse:
    headers = {"X-Request-ID": request_id} if request_id else None
    return JSONResponse(
        status_code=status_code,
        content={
            "error": ErrorEnvelope(
                code=_error_code_for_status(status_code), message=message, request_id=request_id
            ).model_dump()
        },
        headers=headers,
    )


def _request_id_from_request(request: Request) -> str:
    existing = getattr(getattr(request, "state", object()), "request_id", None)
    if isinstance(existing, str) and existing:
        return existing

    incoming = str(request.headers.get("x-request-id", "") or "").strip()
    request_id = incoming if incoming and _REQUEST_ID_RE.fullmatch(incoming) else uuid.uuid4().hex

    request.state.request_id = request_id
    return request_id


def _config_from_options(opts: TypesetOptions) -> TypesetConfig:
    return TypesetConfig(
        explicit=bool(opts.explicit),
        escape=bool(opts.escape),
        curly_policy=opts.curly_policy,
        collapse_strategy=opts.collapse_strategy,
        collapse_dashes=bool(opts.collapse_dashes),
        collapse_ellipsis=bool(opts.collapse_ellipsis),
    )


def _options_from_config(cfg: TypesetConfig) -> TypesetOptions:
    return TypesetOptions(
        explicit=cfg.explicit,
        escape=cfg.escape,
        curly_policy=cfg.curly_policy,
        collapse_strategy=cfg.collapse_strategy,
        collapse_dashes=cfg.collapse_dashes,
        collapse_ellipsis=cfg.collapse_ellipsis,
    )


def _result_to_out(result: TypesetResult) -> TypesetResponse:
    return TypesetResponse(text=result.text, stats=dict(result.stats))
