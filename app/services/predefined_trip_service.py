"""미리 작성된 여행 템플릿 조회 서비스."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, timedelta
from typing import Any

from app.core.errors import InvalidDateError, NotFoundError
from app.core.logger import get_logger
from app.schemas.itinerary import DayPlan, ItineraryDocument, PredefinedTripSummary, TripTemplate

logger = get_logger(__name__)


def load_trip_templates(raw_templates: Mapping[str, Mapping[str, Any]]) -> dict[str, TripTemplate]:
    """원본 템플릿 데이터를 스키마로 검증해 ID별 사전으로 반환합니다."""
    templates: dict[str, TripTemplate] = {}
    for template_id, raw in raw_templates.items():
        template = TripTemplate.model_validate(raw)
        if template.trip_id != template_id:
            raise ValueError(f"template key {template_id} does not match tripId {template.trip_id}")
        templates[template_id] = template
    return templates


def parse_start_date(raw_value: str | None, today: date) -> date:
    """시작일 문자열을 해석합니다. 값이 없으면 오늘이며 과거 날짜는 허용하지 않습니다."""
    if raw_value is None or not raw_value.strip():
        start_date = today
    else:
        try:
            start_date = date.fromisoformat(raw_value.strip())
        except ValueError as exc:
            raise InvalidDateError("Invalid start date format", value=raw_value) from exc

    if start_date < today:
        raise InvalidDateError("Start date cannot be in the past", value=start_date.isoformat())
    return start_date


def shift_template(template: TripTemplate, start_date: date) -> ItineraryDocument:
    """템플릿의 각 일차를 시작일 기준 날짜로 옮겨 일정 문서를 만듭니다."""
    itinerary = [
        DayPlan(
            day=day.day,
            date=start_date + timedelta(days=day.day - 1),
            activities=[activity.model_copy(deep=True) for activity in day.activities],
        )
        for day in template.itinerary
    ]
    return ItineraryDocument(
        trip_id=template.trip_id,
        destination=template.destination,
        start_date=start_date,
        end_date=start_date + timedelta(days=template.duration - 1),
        itinerary=itinerary,
        hotels=[hotel.model_copy(deep=True) for hotel in template.hotels],
        general_tips=list(template.general_tips),
        duration=template.duration,
        num_travelers=template.num_travelers,
        interests=list(template.interests) if template.interests is not None else None,
        budget=template.budget,
        travel_style=template.travel_style,
        food_preference=template.food_preference,
    )


class PredefinedTripService:
    """템플릿 ID로 날짜가 지정된 일정 문서를 만듭니다. 생성 모델은 호출하지 않습니다."""

    def __init__(self, templates: Mapping[str, TripTemplate]) -> None:
        self._templates = dict(templates)

    def get_template(self, trip_id: str) -> TripTemplate:
        template = self._templates.get(trip_id)
        if template is None:
            raise NotFoundError("Trip", trip_id)
        return template

    def list_summaries(self) -> list[PredefinedTripSummary]:
        return [
            PredefinedTripSummary(
                trip_id=template.trip_id,
                destination=template.destination,
                duration=template.duration,
                interests=list(template.interests or []),
                budget=template.budget,
                travel_style=template.travel_style,
            )
            for template in self._templates.values()
        ]

    def build_document(self, trip_id: str, start_date: str | None, today: date | None = None) -> ItineraryDocument:
        """템플릿을 찾아 시작일로 날짜를 옮긴 문서를 반환합니다."""
        template = self.get_template(trip_id)
        resolved_start = parse_start_date(start_date, today or date.today())
        document = shift_template(template, resolved_start)
        logger.info(
            "Predefined trip prepared: trip_id=%s start_date=%s end_date=%s",
            document.trip_id,
            document.start_date,
            document.end_date,
        )
        return document
