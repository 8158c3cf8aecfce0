"""생성형 텍스트 API 호출 클라이언트."""

from __future__ import annotations

from functools import lru_cache
from time import perf_counter
from typing import Any

from langchain_openai import ChatOpenAI

from app.core.config import Settings
from app.core.logger import get_logger
from app.core.timeout_policy import TimeoutPolicy, get_timeout_policy

logger = get_logger(__name__)


@lru_cache(maxsize=32)
def _get_chat_openai_client(
    model: str,
    temperature: float,
    timeout_seconds: int,
    api_key: str,
) -> ChatOpenAI:
    return ChatOpenAI(
        model=model,
        temperature=temperature,
        api_key=api_key,
        request_timeout=timeout_seconds,
    )


def clear_llm_client_cache() -> None:
    """테스트/운영 시 클라이언트 캐시를 비웁니다."""
    _get_chat_openai_client.cache_clear()


def message_text(response: Any) -> str:
    """LLM 응답 메시지에서 텍스트를 추출합니다."""
    content = getattr(response, "content", response)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return "" if content is None else str(content)


class TextGenerator:
    """자유 텍스트 지시문을 받아 자유 텍스트를 반환하는 LLM 호출기.

    기본 모델 호출이 실패하고 대체 모델이 설정되어 있으면 한 번 더 시도합니다.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        fallback_model: str | None = None,
        temperature: float = 0.7,
        timeout_seconds: int = 60,
    ) -> None:
        self._api_key = api_key
        self._model = model.strip()
        self._fallback_model = (fallback_model or "").strip() or None
        self._temperature = float(temperature)
        self._timeout_seconds = max(1, int(timeout_seconds))

    @classmethod
    def from_settings(cls, settings: Settings, timeout_policy: TimeoutPolicy | None = None) -> TextGenerator:
        """애플리케이션 설정으로 호출기를 생성합니다. 정책이 없으면 설정에서 계산합니다."""
        policy = timeout_policy or get_timeout_policy(settings)
        return cls(
            api_key=settings.OPENAI_API_KEY,
            model=settings.LLM_MODEL_NAME,
            fallback_model=settings.LLM_FALLBACK_MODEL_NAME,
            temperature=settings.LLM_TEMPERATURE,
            timeout_seconds=policy.llm_timeout_seconds,
        )

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, messages: Any) -> str:
        """메시지를 모델에 전달하고 응답 텍스트를 반환합니다."""
        started = perf_counter()
        try:
            response = await self._client(self._model).ainvoke(messages)
            self._log_success(self._model, fallback_used=False, started=started)
            return message_text(response)
        except Exception as exc:
            if not self._fallback_model or self._fallback_model == self._model:
                self._log_failure(self._model, "LLM async call failed", exc, fallback_used=False, started=started)
                raise
            self._log_failure(
                self._model,
                "LLM async call failed. Retrying with fallback model.",
                exc,
                fallback_used=False,
                started=started,
            )

        fallback_started = perf_counter()
        try:
            response = await self._client(self._fallback_model).ainvoke(messages)
        except Exception as fallback_exc:
            self._log_failure(
                self._fallback_model,
                "LLM async fallback call failed",
                fallback_exc,
                fallback_used=True,
                started=fallback_started,
            )
            raise
        self._log_success(self._fallback_model, fallback_used=True, started=fallback_started)
        return message_text(response)

    def _client(self, model: str) -> ChatOpenAI:
        return _get_chat_openai_client(model, self._temperature, self._timeout_seconds, self._api_key)

    @staticmethod
    def _log_success(model: str, *, fallback_used: bool, started: float) -> None:
        logger.info(
            "LLM call succeeded: model=%s fallback_used=%s latency_ms=%.1f",
            model,
            fallback_used,
            (perf_counter() - started) * 1000,
        )

    @staticmethod
    def _log_failure(model: str, message: str, exc: Exception, *, fallback_used: bool, started: float) -> None:
        logger.warning(
            "%s: model=%s fallback_used=%s latency_ms=%.1f",
            message,
            model,
            fallback_used,
            (perf_counter() - started) * 1000,
            exc_info=exc,
        )
