"""FastAPI 애플리케이션 진입점."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from app.api import places, trips
from app.core.config import get_settings
from app.core.errors import (
    InvalidDateError,
    NotFoundError,
    PlacesApiError,
    SynthesisError,
    SynthesisErrorKind,
    ValidationError,
)
from app.core.logger import get_logger
from app.core.logging_config import configure_logging
from app.services.container import build_service_container

configure_logging()
logger = get_logger(__name__)
settings = get_settings()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _resolve_docs_mode(mode: str) -> str:
    normalized = (mode or "").strip().lower()
    if normalized in {"disabled", "public"}:
        return normalized
    logger.warning("유효하지 않은 DOCS_MODE 값입니다. disabled로 대체합니다: %s", mode)
    return "disabled"


def _configure_trusted_hosts(app_: FastAPI) -> None:
    trusted_hosts = _split_csv(settings.TRUSTED_HOSTS)
    if not trusted_hosts:
        return

    app_.add_middleware(TrustedHostMiddleware, allowed_hosts=trusted_hosts)


def _configure_cors(app_: FastAPI) -> None:
    origins = _split_csv(settings.CORS_ALLOW_ORIGINS)
    if not origins:
        return

    allow_methods = _split_csv(settings.CORS_ALLOW_METHODS) or ["GET", "POST"]
    allow_headers = _split_csv(settings.CORS_ALLOW_HEADERS) or ["Content-Type"]
    allow_credentials = settings.CORS_ALLOW_CREDENTIALS

    if "*" in origins and allow_credentials:
        logger.warning(
            "CORS_ALLOW_ORIGINS에 '*'와 CORS_ALLOW_CREDENTIALS=true가 함께 설정되어 "
            "allow_credentials를 false로 강제합니다."
        )
        allow_credentials = False

    app_.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=allow_methods,
        allow_headers=allow_headers,
    )


docs_mode = _resolve_docs_mode(settings.DOCS_MODE)

app = FastAPI(
    title="Trip Planner AI",
    docs_url="/docs" if docs_mode == "public" else None,
    redoc_url="/redoc" if docs_mode == "public" else None,
    openapi_url="/openapi.json" if docs_mode == "public" else None,
)
app.state.services = build_service_container(settings)

_configure_trusted_hosts(app)
_configure_cors(app)

app.include_router(trips.router)
app.include_router(places.router)


@app.middleware("http")
async def add_security_headers(request: Request, call_next) -> Response:
    """기본 보안 헤더를 응답에 추가합니다."""
    response = await call_next(request)
    if not settings.SECURITY_HEADERS_ENABLED:
        return response

    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
    response.headers.setdefault("Cache-Control", "no-store")
    if settings.ENABLE_HSTS and request.url.scheme == "https":
        response.headers.setdefault("Strict-Transport-Security", f"max-age={settings.HSTS_MAX_AGE_SECONDS}")
    return response


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """입력 검증 실패를 400으로 반환합니다."""
    return JSONResponse(status_code=400, content={"detail": str(exc), "field": exc.field})


@app.exception_handler(InvalidDateError)
async def invalid_date_error_handler(request: Request, exc: InvalidDateError) -> JSONResponse:
    """잘못된 템플릿 시작일을 400으로 반환합니다."""
    return JSONResponse(status_code=400, content={"detail": exc.message, "value": exc.value})


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(SynthesisError)
async def synthesis_error_handler(request: Request, exc: SynthesisError) -> JSONResponse:
    """일정 생성 실패를 502로 반환합니다. 파싱 실패 시 모델 원문을 포함합니다."""
    if exc.kind == SynthesisErrorKind.MODEL_CALL_FAILED:
        logger.error("Itinerary synthesis failed: kind=%s message=%s", exc.kind, exc.message)
    return JSONResponse(
        status_code=502,
        content={
            "detail": exc.message,
            "kind": exc.kind.value,
            "field": exc.field,
            "raw_response": exc.raw_text,
        },
    )


@app.exception_handler(PlacesApiError)
async def places_api_error_handler(request: Request, exc: PlacesApiError) -> JSONResponse:
    logger.error("Places API error on %s: status=%s message=%s", request.url.path, exc.status, exc.message)
    return JSONResponse(status_code=502, content={"detail": exc.message, "status": exc.status})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상하지 못한 예외를 표준 형식으로 처리합니다."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    services = getattr(request.app.state, "services", None)
    runtime_settings = services.settings if services is not None else settings
    message = str(exc) if runtime_settings.EXPOSE_INTERNAL_ERRORS else "내부 서버 오류가 발생했습니다."
    return JSONResponse(status_code=500, content={"detail": message})


@app.get("/")
def health_check() -> dict:
    """헬스 체크 엔드포인트."""
    return {"status": "ok", "message": "Trip Planner AI Server is running"}
