from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends, FastAPI
from pydantic import BaseModel, Field

from linguista_security.api.problems import register_error_handlers
from linguista_security.security.breach import check_breach
from linguista_security.security.passwords import PasswordPolicy, validate_password
from linguista_security.security.strength import evaluate
from linguista_security.settings import SecuritySettings, get_security_settings


class PasswordIn(BaseModel):
    password: str = Field(..., repr=False)


class StrengthOut(BaseModel):
    score: int
    feedback: list[str]
    is_strong: bool
    label: str


class BreachOut(BaseModel):
    is_leaked: bool
    count: int | None = None


def get_settings() -> SecuritySettings:
    return get_security_settings()


async def get_http_client(
    settings: SecuritySettings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        yield client


router = APIRouter(prefix="/security/password", tags=["password-security"])


@router.post("/strength", response_model=StrengthOut)
def password_strength(body: PasswordIn) -> StrengthOut:
    result = evaluate(body.password)
    return StrengthOut(
        score=result.score,
        feedback=list(result.feedback),
        is_strong=result.is_strong,
        label=result.label,
    )


@router.post("/breach", response_model=BreachOut)
async def password_breach(
    body: PasswordIn,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: SecuritySettings = Depends(get_settings),
) -> BreachOut:
    result = await check_breach(body.password, client=client, settings=settings)
    return BreachOut(is_leaked=result.is_leaked, count=result.count)


@router.post("/validate", status_code=204)
async def password_validate(
    body: PasswordIn,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: SecuritySettings = Depends(get_settings),
) -> None:
    async def _checker(pw: str):
        return await check_breach(pw, client=client, settings=settings)

    await validate_password(body.password, PasswordPolicy(), breach_checker=_checker)


def add_password_security(app: FastAPI) -> FastAPI:
    app.include_router(router)
    register_error_handlers(app)
    return app


__all__ = ["router", "add_password_security", "get_http_client", "get_settings"]
