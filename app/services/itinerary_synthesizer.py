"""생성형 모델 기반 여행 일정 합성 서비스."""

from __future__ import annotations

import json
import re
from datetime import timedelta
from typing import Any
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import SynthesisError, SynthesisErrorKind
from app.core.logger import get_logger
from app.schemas.enums import BudgetTier
from app.schemas.itinerary import ItineraryDocument
from app.schemas.trip import TripRequest
from app.services.itinerary_prompt import build_itinerary_messages
from app.services.llm_client import TextGenerator

logger = get_logger(__name__)

_CODE_FENCE_PATTERN = re.compile(r"```(?:json)?", re.IGNORECASE)
_PLACEHOLDER_TRIP_IDS = {"", "unique-id"}
_RAW_LOG_LIMIT = 500
_PLACE_DETAILS_KEYS = frozenset({"placeDetails", "place_details"})


def strip_code_fence(text: str) -> str:
    """모델이 덧붙인 코드 펜스 표기를 모두 제거합니다."""
    return _CODE_FENCE_PATTERN.sub("", text or "").strip()


def parse_model_output(raw_text: str) -> dict[str, Any]:
    """모델 응답 텍스트를 JSON 객체로 파싱합니다."""
    try:
        payload = json.loads(strip_code_fence(raw_text))
    except ValueError as exc:
        raise SynthesisError(
            SynthesisErrorKind.UNPARSEABLE_MODEL_OUTPUT,
            f"Model output is not valid JSON: {exc}",
            raw_text=raw_text,
        ) from exc

    if not isinstance(payload, dict):
        raise SynthesisError(
            SynthesisErrorKind.STRUCTURAL_CONTRACT_VIOLATION,
            "Model output must be a JSON object",
            raw_text=raw_text,
            field="document",
        )
    return payload


def check_hotel_contract(payload: dict[str, Any], budget: BudgetTier, raw_text: str | None = None) -> None:
    """호텔이 정확히 3개이고 모두 요청한 예산 등급인지 확인합니다."""
    hotels = payload.get("hotels")
    if not isinstance(hotels, list) or len(hotels) != 3:
        count = len(hotels) if isinstance(hotels, list) else 0
        raise SynthesisError(
            SynthesisErrorKind.STRUCTURAL_CONTRACT_VIOLATION,
            f"Expected exactly 3 hotels for {budget.value} budget level, got {count}",
            raw_text=raw_text,
            field="hotels",
        )

    for index, hotel in enumerate(hotels):
        if not isinstance(hotel, dict):
            raise SynthesisError(
                SynthesisErrorKind.STRUCTURAL_CONTRACT_VIOLATION,
                f"Hotel {index + 1} is not an object",
                raw_text=raw_text,
                field=f"hotels[{index}]",
            )
        price_range = hotel.get("priceRange")
        if price_range != budget.value:
            raise SynthesisError(
                SynthesisErrorKind.STRUCTURAL_CONTRACT_VIOLATION,
                (
                    f"Hotel {index + 1} price range ({price_range}) "
                    f"does not match requested budget level ({budget.value})"
                ),
                raw_text=raw_text,
                field=f"hotels[{index}].priceRange",
            )


def _without_place_details(items: Any) -> Any:
    if not isinstance(items, list):
        return items
    return [
        {key: value for key, value in item.items() if key not in _PLACE_DETAILS_KEYS} if isinstance(item, dict) else item
        for item in items
    ]


def _format_error_location(location: tuple) -> str:
    field = ""
    for part in location:
        if isinstance(part, int):
            field += f"[{part}]"
        else:
            field += f".{part}" if field else str(part)
    return field or "document"


def reconcile_document(payload: dict[str, Any], request: TripRequest, raw_text: str | None = None) -> ItineraryDocument:
    """요청 값을 기준으로 날짜/일차/메타데이터를 맞추고 문서 모델로 검증합니다."""
    days = payload.get("itinerary")
    if not isinstance(days, list):
        raise SynthesisError(
            SynthesisErrorKind.STRUCTURAL_CONTRACT_VIOLATION,
            "Model output is missing the itinerary list",
            raw_text=raw_text,
            field="itinerary",
        )
    if len(days) != request.trip_days:
        raise SynthesisError(
            SynthesisErrorKind.STRUCTURAL_CONTRACT_VIOLATION,
            f"Expected {request.trip_days} itinerary days, got {len(days)}",
            raw_text=raw_text,
            field="itinerary",
        )

    reconciled_days = []
    for index, day in enumerate(days):
        if not isinstance(day, dict):
            raise SynthesisError(
                SynthesisErrorKind.STRUCTURAL_CONTRACT_VIOLATION,
                f"Itinerary day {index + 1} is not an object",
                raw_text=raw_text,
                field=f"itinerary[{index}]",
            )
        reconciled_days.append(
            {
                **day,
                "activities": _without_place_details(day.get("activities")),
                "day": index + 1,
                "date": (request.start_date + timedelta(days=index)).isoformat(),
            }
        )

    trip_id = str(payload.get("tripId") or "").strip()
    if trip_id in _PLACEHOLDER_TRIP_IDS:
        trip_id = uuid4().hex

    document_payload = {
        **payload,
        "tripId": trip_id,
        "destination": request.destination,
        "startDate": request.start_date.isoformat(),
        "endDate": request.end_date.isoformat(),
        "itinerary": reconciled_days,
        "hotels": _without_place_details(payload.get("hotels")),
        "duration": request.trip_days,
        "numTravelers": request.num_travelers,
        "interests": list(request.interests),
        "budget": request.budget.value,
        "travelStyle": request.travel_style.value if request.travel_style else None,
        "foodPreference": request.food_preference.value if request.food_preference else None,
    }

    try:
        return ItineraryDocument.model_validate(document_payload)
    except PydanticValidationError as exc:
        first_error = exc.errors()[0]
        field = _format_error_location(first_error.get("loc", ()))
        raise SynthesisError(
            SynthesisErrorKind.STRUCTURAL_CONTRACT_VIOLATION,
            f"Model output does not match the itinerary structure at {field}: {first_error.get('msg')}",
            raw_text=raw_text,
            field=field,
        ) from exc


class ItinerarySynthesizer:
    """검증된 여행 요청으로 일정 문서를 생성합니다."""

    def __init__(self, text_generator: TextGenerator, *, max_attempts: int = 1) -> None:
        self._text_generator = text_generator
        self._max_attempts = max(1, int(max_attempts))

    def parse(self, raw_text: str, request: TripRequest) -> ItineraryDocument:
        """모델 응답을 파싱하고 구조 계약을 검사합니다."""
        payload = parse_model_output(raw_text)
        check_hotel_contract(payload, request.budget, raw_text=raw_text)
        return reconcile_document(payload, request, raw_text=raw_text)

    async def synthesize(self, request: TripRequest) -> ItineraryDocument:
        """일정을 생성합니다. 실패 시 `SynthesisError`를 발생시킵니다."""
        messages = build_itinerary_messages(request)
        last_error: SynthesisError | None = None

        for attempt in range(1, self._max_attempts + 1):
            try:
                raw_text = await self._text_generator.generate(messages)
            except Exception as exc:
                raise SynthesisError(
                    SynthesisErrorKind.MODEL_CALL_FAILED,
                    f"Failed to generate itinerary: {exc}",
                ) from exc

            try:
                document = self.parse(raw_text, request)
            except SynthesisError as exc:
                last_error = exc
                if exc.kind == SynthesisErrorKind.UNPARSEABLE_MODEL_OUTPUT:
                    logger.warning(
                        "Unparseable model output: attempt=%d/%d raw=%s",
                        attempt,
                        self._max_attempts,
                        raw_text[:_RAW_LOG_LIMIT],
                    )
                else:
                    logger.warning(
                        "Structural contract violation: attempt=%d/%d field=%s message=%s",
                        attempt,
                        self._max_attempts,
                        exc.field,
                        exc.message,
                    )
                continue

            logger.info(
                "Itinerary synthesized: trip_id=%s destination=%s days=%d attempt=%d",
                document.trip_id,
                document.destination,
                len(document.itinerary),
                attempt,
            )
            return document

        raise last_error
