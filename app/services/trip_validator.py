"""여행 계획 요청 검증기."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError
from app.core.logger import get_logger
from app.schemas.trip import TripRequest

logger = get_logger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def _field_name(location: tuple) -> str:
    parts = [str(part) for part in location if not isinstance(part, int)]
    return parts[0] if parts else "body"


def _clean_message(message: str) -> str:
    if message.startswith(_VALUE_ERROR_PREFIX):
        return message[len(_VALUE_ERROR_PREFIX) :]
    return message


def validate_trip_request(raw: Any) -> TripRequest:
    """원본 입력을 검증해 `TripRequest`를 반환합니다.

    부분 수용은 하지 않으며, 위반이 있으면 첫 번째 필드에 대한
    `ValidationError`를 발생시킵니다.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("body", "Request body must be a JSON object")

    try:
        return TripRequest.model_validate(dict(raw))
    except PydanticValidationError as exc:
        first_error = exc.errors()[0]
        field = _field_name(first_error.get("loc", ()))
        message = _clean_message(first_error.get("msg", "invalid value"))
        logger.info("Trip request rejected: field=%s", field)
        raise ValidationError(field, message) from exc
