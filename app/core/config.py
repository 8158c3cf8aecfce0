"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델.

    `OPENAI_API_KEY`와 `GOOGLE_PLACES_API_KEY`는 필수이며,
    누락 시 설정 생성 단계에서 실패하므로 서버가 기동되지 않습니다.
    """

    OPENAI_API_KEY: str
    GOOGLE_PLACES_API_KEY: str
    LLM_MODEL_NAME: str = "gpt-4o-mini"
    LLM_FALLBACK_MODEL_NAME: str | None = None
    LLM_TEMPERATURE: float = 0.7
    LLM_SYNTHESIS_MAX_ATTEMPTS: int = 1
    REQUEST_TIMEOUT_SECONDS: int = 90
    LLM_TIMEOUT_SECONDS: int = 60
    EXTERNAL_API_TIMEOUT_SECONDS: int = 15
    GOOGLE_PLACES_TIMEOUT_SECONDS: int = 10
    GOOGLE_PLACES_LANGUAGE_CODE: str = "en"
    GOOGLE_PLACES_PHOTO_MAX_WIDTH: int = 800
    GOOGLE_PLACES_SEARCH_RADIUS_METERS: int = 50000
    GOOGLE_PLACES_MAX_REVIEWS: int = 3
    APP_ENV: str = "development"
    DOCS_MODE: str = "disabled"
    EXPOSE_INTERNAL_ERRORS: bool = False
    CORS_ALLOW_ORIGINS: str = ""
    CORS_ALLOW_METHODS: str = "GET,POST,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type"
    CORS_ALLOW_CREDENTIALS: bool = False
    SECURITY_HEADERS_ENABLED: bool = True
    ENABLE_HSTS: bool = False
    HSTS_MAX_AGE_SECONDS: int = 31536000
    TRUSTED_HOSTS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("OPENAI_API_KEY", "GOOGLE_PLACES_API_KEY")
    @classmethod
    def _require_credential(cls, value: str, info) -> str:
        normalized = (value or "").strip()
        if not normalized:
            raise ValueError(f"{info.field_name} is not configured.")
        return normalized

    @field_validator("LLM_FALLBACK_MODEL_NAME", mode="before")
    @classmethod
    def _blank_fallback_model_to_none(cls, value: object) -> str | None:
        if value is None:
            return None
        normalized = str(value).strip()
        return normalized or None

    @field_validator("LLM_SYNTHESIS_MAX_ATTEMPTS", mode="before")
    @classmethod
    def _clamp_synthesis_max_attempts(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 1
        except (TypeError, ValueError):
            numeric = 1
        return min(5, max(1, numeric))

    @field_validator("GOOGLE_PLACES_MAX_REVIEWS", mode="before")
    @classmethod
    def _clamp_google_places_max_reviews(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 3
        except (TypeError, ValueError):
            numeric = 3
        return min(5, max(0, numeric))


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
