"""여행 계획 요청 처리 서비스."""

from __future__ import annotations

from datetime import date
from typing import Any

from app.core.errors import ValidationError
from app.core.logger import get_logger
from app.graph.trip.state import TripPlanState
from app.graph.trip.workflow import compiled_trip_plan_graph
from app.schemas.enums import PlaceSearchKind
from app.schemas.itinerary import ItineraryDocument
from app.schemas.place import PlaceSearchResponse
from app.services.container import ServiceContainer
from app.services.trip_validator import validate_trip_request

logger = get_logger(__name__)

_MIN_PLACE_QUERY_LENGTH = 2
_PLACE_KIND_SYNONYMS = {"place": PlaceSearchKind.ESTABLISHMENT}


async def _run_trip_plan_graph(initial_state: TripPlanState, services: ServiceContainer) -> ItineraryDocument:
    result = await compiled_trip_plan_graph.ainvoke(initial_state, config=services.graph_config())

    final = result.get("final_itinerary")
    if final is None:
        raise RuntimeError("final_itinerary 결과가 없습니다.")
    return final


async def plan_trip(raw_request: Any, services: ServiceContainer) -> ItineraryDocument:
    """요청을 검증하고 일정을 생성한 뒤 장소 정보를 보강합니다.

    검증 실패는 외부 호출 전에 `ValidationError`로, 생성 실패는
    `SynthesisError`로 전파됩니다. 장소 보강 실패는 항목 단위로 흡수됩니다.
    """
    trip_request = validate_trip_request(raw_request)
    logger.info(
        "Plan trip request accepted: destination=%s days=%d budget=%s",
        trip_request.destination,
        trip_request.trip_days,
        trip_request.budget.value,
    )
    return await _run_trip_plan_graph({"trip_request": trip_request}, services)


async def get_predefined_trip(
    trip_id: str,
    start_date: str | None,
    services: ServiceContainer,
    *,
    today: date | None = None,
) -> ItineraryDocument:
    """템플릿 일정을 시작일로 옮기고 장소 정보를 보강합니다."""
    initial_state: TripPlanState = {
        "predefined_trip_id": trip_id,
        "start_date": start_date,
        "today": today,
    }
    return await _run_trip_plan_graph(initial_state, services)


def resolve_place_search_kind(raw_kind: str | None) -> PlaceSearchKind:
    """검색 종류 문자열을 해석합니다. 값이 없으면 업장 검색입니다."""
    normalized = (raw_kind or "").strip().lower()
    if not normalized:
        return PlaceSearchKind.ESTABLISHMENT
    if normalized in _PLACE_KIND_SYNONYMS:
        return _PLACE_KIND_SYNONYMS[normalized]
    try:
        return PlaceSearchKind(normalized)
    except ValueError as exc:
        raise ValidationError("type", "must be one of destination, establishment") from exc


async def search_places(
    query: str | None,
    services: ServiceContainer,
    *,
    location_hint: str | None = None,
    kind: str | None = None,
) -> PlaceSearchResponse:
    """자동완성 후보를 조회합니다."""
    normalized_query = (query or "").strip()
    if len(normalized_query) < _MIN_PLACE_QUERY_LENGTH:
        raise ValidationError("query", "Query must be at least 2 characters long")

    resolved_kind = resolve_place_search_kind(kind)
    predictions = await services.places_service.autocomplete(
        normalized_query,
        resolved_kind,
        location_hint=location_hint,
    )
    return PlaceSearchResponse(query=normalized_query, kind=resolved_kind, predictions=predictions)
