from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from vat_number import CheckResult, VatValidator

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_STRICT = os.getenv("STRICT_JURISDICTIONS", "").lower() in ("1", "true", "yes")
_MAX_BATCH_SIZE = int(os.getenv("MAX_BATCH_SIZE", "1000"))
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Auth / API key ───────────────────────────────────────────────────────────

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled, no env var configured
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models (JSON API) ───────────────────────────────────────────────


class CheckRequest(BaseModel):
    jurisdiction: str
    code: str
    strict: bool | None = None


class CheckOut(BaseModel):
    jurisdiction: str
    code: str
    valid: bool
    supported: bool
    reason: str | None


class BatchCheckRequest(BaseModel):
    items: list[CheckRequest]
    strict: bool | None = None


class BatchCheckResponse(BaseModel):
    results: list[CheckOut]


class JurisdictionOut(BaseModel):
    code: str
    min_length: int
    max_length: int
    allowed_lengths: list[int] | None
    description: str


# ── Validator singletons ─────────────────────────────────────────────────────

# Built at import so requests served without the lifespan still find them.
_validators: dict[bool, VatValidator] = {
    False: VatValidator(strict=False),
    True: VatValidator(strict=True),
}


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(
        level=_LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(
        "vat-number API starting up (%d jurisdictions, strict default=%s)",
        len(_validators[False].jurisdictions()),
        _STRICT,
    )
    yield
    logger.info("vat-number API shutting down")


def _get_validator(strict: bool | None) -> VatValidator:
    effective = _STRICT if strict is None else strict
    return _validators[effective]


def _to_out(result: CheckResult) -> CheckOut:
    return CheckOut(
        jurisdiction=result.jurisdiction,
        code=result.code,
        valid=result.valid,
        supported=result.supported,
        reason=result.reason.value if result.reason else None,
    )


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="vat-number", lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── JSON API routes ──────────────────────────────────────────────────────────


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.get(
    "/jurisdictions",
    response_model=list[JurisdictionOut],
    dependencies=[Depends(verify_api_key)],
)
async def jurisdictions() -> list[JurisdictionOut]:
    validator = _get_validator(False)
    out: list[JurisdictionOut] = []
    for code in validator.jurisdictions():
        rule = validator.rule_for(code)
        assert rule is not None
        out.append(
            JurisdictionOut(
                code=code,
                min_length=rule.length.min_length,
                max_length=rule.length.max_length,
                allowed_lengths=list(rule.length.allowed) if rule.length.allowed else None,
                description=rule.description,
            )
        )
    return out


@app.post("/check", response_model=CheckOut, dependencies=[Depends(verify_api_key)])
async def check(request: CheckRequest) -> CheckOut:
    result = _get_validator(request.strict).explain(request.jurisdiction, request.code)
    return _to_out(result)


@app.post(
    "/check/batch",
    response_model=BatchCheckResponse,
    dependencies=[Depends(verify_api_key)],
)
async def check_batch(request: BatchCheckRequest) -> BatchCheckResponse:
    if len(request.items) > _MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Batch too large: {len(request.items)} items (max {_MAX_BATCH_SIZE})",
        )
    results: list[CheckOut] = []
    for item in request.items:
        strict = item.strict if item.strict is not None else request.strict
        results.append(_to_out(_get_validator(strict).explain(item.jurisdiction, item.code)))
    return BatchCheckResponse(results=results)
