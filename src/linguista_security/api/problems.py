from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from linguista_security.exceptions import (
    BreachCheckError,
    NetworkUnavailableError,
    PasswordValidationError,
)

logger = logging.getLogger(__name__)

PROBLEM_MT = "application/problem+json"


def problem_response(
    *,
    status: int,
    title: str,
    detail: str | None = None,
    type_uri: str = "about:blank",
    code: str | None = None,
    instance: str | None = None,
    **extra,
) -> JSONResponse:
    body: dict[str, object] = {"type": type_uri, "title": title, "status": status}
    if detail is not None:
        body["detail"] = detail
    if code is not None:
        body["code"] = code
    if instance is not None:
        body["instance"] = instance
    body.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(status_code=status, content=body, media_type=PROBLEM_MT)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(BreachCheckError)
    async def _breach_check(request: Request, exc: BreachCheckError):
        if isinstance(exc, NetworkUnavailableError):
            status, title, code = 502, "Bad Gateway", "NETWORK_UNAVAILABLE"
        else:
            status, title, code = 503, "Service Unavailable", "UPSTREAM_UNAVAILABLE"
        logger.warning(f"{type(exc).__name__} on {request.url.path} ({status})")
        return problem_response(
            status=status,
            title=title,
            detail=exc.message,
            code=code,
            instance=str(request.url),
        )

    @app.exception_handler(PasswordValidationError)
    async def _password_validation(request: Request, exc: PasswordValidationError):
        return problem_response(
            status=422,
            title="Unprocessable Entity",
            detail=str(exc),
            code="PASSWORD_REJECTED",
            instance=str(request.url),
            reasons=exc.reasons,
        )
