"""여행 계획 그래프 상태 정의."""

from datetime import date
from typing import TypedDict

from app.schemas.itinerary import ItineraryDocument
from app.schemas.trip import TripRequest


class TripPlanState(TypedDict, total=False):
    """여행 계획 그래프 상태.

    Keys:
        trip_request: 검증된 생성 요청 (생성 경로)
        predefined_trip_id: 템플릿 ID (템플릿 경로)
        start_date: 템플릿 시작일 원문 (템플릿 경로)
        today: 과거 날짜 판정 기준일 (템플릿 경로)
        itinerary: 보강 전 일정 문서
        final_itinerary: 장소 정보가 보강된 일정 문서
    """

    trip_request: TripRequest
    predefined_trip_id: str
    start_date: str | None
    today: date | None
    itinerary: ItineraryDocument
    final_itinerary: ItineraryDocument
