"""여행 계획 그래프 노드."""

from __future__ import annotations

from typing import Any

from langchain_core.runnables import RunnableConfig

from app.core.logger import get_logger
from app.graph.trip.state import TripPlanState

logger = get_logger(__name__)


def _configured(config: RunnableConfig, key: str) -> Any:
    service = (config or {}).get("configurable", {}).get(key)
    if service is None:
        raise RuntimeError(f"{key} is not configured for the trip plan graph.")
    return service


def route_entry(state: TripPlanState) -> str:
    """요청 종류에 따라 생성 경로와 템플릿 경로 중 하나를 선택합니다."""
    if state.get("trip_request") is not None:
        return "synthesize_itinerary"
    return "shift_predefined_trip"


async def synthesize_itinerary(state: TripPlanState, config: RunnableConfig) -> TripPlanState:
    """생성 모델로 일정 문서를 만듭니다. 구조 계약 위반은 보강 전에 실패합니다."""
    synthesizer = _configured(config, "synthesizer")
    document = await synthesizer.synthesize(state["trip_request"])
    return {"itinerary": document}


def shift_predefined_trip(state: TripPlanState, config: RunnableConfig) -> TripPlanState:
    """템플릿을 요청한 시작일로 옮깁니다."""
    predefined_trips = _configured(config, "predefined_trips")
    document = predefined_trips.build_document(
        state["predefined_trip_id"],
        state.get("start_date"),
        today=state.get("today"),
    )
    return {"itinerary": document}


async def enrich_places(state: TripPlanState, config: RunnableConfig) -> TripPlanState:
    """모든 활동과 호텔에 장소 정보를 붙입니다. 항목별 실패는 흡수됩니다."""
    enricher = _configured(config, "enricher")
    document = state["itinerary"]
    enriched = await enricher.enrich(document, document.destination)
    return {"final_itinerary": enriched}
