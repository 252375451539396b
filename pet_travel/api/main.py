"""FastAPI application for the pet travel planner."""

from __future__ import annotations

import logging
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from pet_travel import __version__
from pet_travel.api.schemas import HealthResponse, OptionItem, OptionsResponse, PlanRequest, PlanResponse
from pet_travel.config.settings import resolve_settings
from pet_travel.domain.enums import Airport, Destination, Species
from pet_travel.domain.exceptions import InvalidTravelRequest
from pet_travel.domain.models import ErrorResponse
from pet_travel.observability.plan_metrics import get_plan_metrics
from pet_travel.services.plan_presenter import render_plan_markdown
from pet_travel.services.plan_service import execute_plan

_api_logger = logging.getLogger("pet-travel.api")

load_dotenv()

_settings = resolve_settings()

app = FastAPI(
    title="pet-travel-planner",
    version=__version__,
    docs_url="/docs" if _settings.enable_docs else None,
    redoc_url=None,
)


# ── middleware ────────────────────────────────────────

class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-client POST limit, single-process memory."""

    def __init__(self, app, max_requests: int = 60, window_seconds: int = 60):
        super().__init__(app)
        self._max = max_requests
        self._window = window_seconds
        self._counters: dict[str, list[float]] = {}

    def _evict_idle(self, now: float) -> None:
        idle = [ip for ip, hits in self._counters.items() if not hits or now - hits[-1] >= self._window]
        for ip in idle:
            del self._counters[ip]

    async def dispatch(self, request: Request, call_next):
        if request.method != "POST":
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        self._evict_idle(now)
        hits = [t for t in self._counters.get(client_ip, []) if now - t < self._window]
        if len(hits) >= self._max:
            return JSONResponse(
                status_code=429,
                content=ErrorResponse(
                    code="RATE_LIMITED",
                    message="Muitas requisições, tente novamente mais tarde",
                ).model_dump(),
            )
        hits.append(now)
        self._counters[client_ip] = hits
        return await call_next(request)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    RateLimitMiddleware,
    max_requests=_settings.rate_limit_max,
    window_seconds=_settings.rate_limit_window_seconds,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# ── error handlers ────────────────────────────────────

@app.exception_handler(InvalidTravelRequest)
async def _invalid_travel_request(_request: Request, exc: InvalidTravelRequest) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            code="INVALID_REQUEST",
            message="Dados do formulário inválidos",
            details=exc.details,
        ).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def _request_validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        details.append(f"{location}: {err.get('msg', 'invalid')}" if location else str(err.get("msg", "invalid")))
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(code="INVALID_REQUEST", message="Dados do formulário inválidos", details=details).model_dump(),
    )


@app.exception_handler(Exception)
async def _unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
    _api_logger.error("unexpected error: %s", type(exc).__name__, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(code="INTERNAL_ERROR", message="Erro ao calcular o cronograma").model_dump(),
    )


# ── routes ────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.get("/options", response_model=OptionsResponse)
def options():
    """Choices for the planner form selects."""
    return OptionsResponse(
        species=[OptionItem(value=item.value, label=item.value) for item in Species],
        destinations=[OptionItem(value=item.value, label=item.label) for item in Destination],
        airports=[OptionItem(value=item.value, label=item.label) for item in Airport],
    )


@app.post("/plan", response_model=PlanResponse)
def plan(req: PlanRequest):
    result = execute_plan(req.model_dump(), settings=resolve_settings())
    return PlanResponse(
        status="done" if result.complete else "incomplete",
        title=result.title,
        branch=result.branch,
        plan=result.plan,
        suggested_blood_collection_date=result.suggested_blood_collection_date,
        autofilled_fields=result.autofilled_fields,
        subtitle=result.subtitle,
        rendered=render_plan_markdown(
            result.plan, result.request.pet_name, result.request.destination, result.request.species
        ),
        trace_id=result.trace_id,
    )


@app.get("/diagnostics")
def diagnostics():
    """In-process evaluation metrics; disabled unless ENABLE_DIAGNOSTICS is set."""
    if not resolve_settings().enable_diagnostics:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(code="NOT_FOUND", message="diagnostics disabled").model_dump(),
        )
    return {"version": __version__, "metrics": get_plan_metrics().snapshot()}
