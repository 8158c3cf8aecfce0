"""여행 일정 생성 및 템플릿 조회 API."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from app.api.dependencies import get_services
from app.schemas.itinerary import ItineraryDocument, PredefinedTripSummary
from app.services.container import ServiceContainer
from app.services.trip_planning_service import get_predefined_trip, plan_trip

router = APIRouter(prefix="/api", tags=["trips"])

PLAN_TRIP_ERROR_EXAMPLES = {
    400: {
        "invalid_date_range": {
            "summary": "날짜 범위 오류",
            "description": "종료일이 시작일보다 앞선 경우",
            "value": {"detail": "endDate: must be on or after startDate", "field": "endDate"},
        },
        "missing_field": {
            "summary": "필수 필드 누락",
            "description": "필수 입력이 없는 경우 첫 번째 누락 필드를 반환",
            "value": {"detail": "destination: Field required", "field": "destination"},
        },
    },
    502: {
        "unparseable_model_output": {
            "summary": "모델 응답 파싱 실패",
            "description": "생성 모델 응답이 JSON이 아닌 경우 원문을 함께 반환",
            "value": {
                "detail": "Model output is not valid JSON: Expecting value: line 1 column 1 (char 0)",
                "kind": "unparseable_model_output",
                "field": None,
                "raw_response": "Sorry, I cannot help with that.",
            },
        },
        "hotel_contract_violation": {
            "summary": "호텔 구조 계약 위반",
            "description": "호텔 수 또는 가격대가 요청과 다른 경우",
            "value": {
                "detail": "Hotel 2 price range (luxury) does not match requested budget level (mid-range)",
                "kind": "structural_contract_violation",
                "field": "hotels[1].priceRange",
                "raw_response": "{...}",
            },
        },
    },
}

PREDEFINED_TRIP_ERROR_EXAMPLES = {
    400: {
        "past_start_date": {
            "summary": "과거 시작일",
            "description": "시작일이 오늘보다 이전인 경우",
            "value": {"detail": "Start date cannot be in the past", "value": "2020-01-01"},
        }
    },
    404: {
        "unknown_trip": {
            "summary": "템플릿 없음",
            "description": "존재하지 않는 템플릿 ID",
            "value": {"detail": "Trip not found: moon-base"},
        }
    },
}


def _error_responses(examples: dict[int, dict], descriptions: dict[int, str]) -> dict[int, dict]:
    return {
        status_code: {
            "description": descriptions[status_code],
            "content": {"application/json": {"examples": status_examples}},
        }
        for status_code, status_examples in examples.items()
    }


@router.post(
    "/plan-trip",
    response_model=ItineraryDocument,
    responses=_error_responses(PLAN_TRIP_ERROR_EXAMPLES, {400: "입력 검증 실패", 502: "일정 생성 실패"}),
)
async def plan_trip_endpoint(
    payload: Any = Body(default=None),
    services: ServiceContainer = Depends(get_services),
) -> ItineraryDocument:
    """여행 조건으로 일정을 생성하고 장소 정보를 보강해 반환한다."""
    return await plan_trip(payload, services)


@router.get("/predefined-trips", response_model=list[PredefinedTripSummary])
def list_predefined_trips(services: ServiceContainer = Depends(get_services)) -> list[PredefinedTripSummary]:
    """선택 가능한 템플릿 요약 목록을 반환한다."""
    return services.predefined_trips.list_summaries()


@router.get(
    "/predefined-trips/{trip_id}",
    response_model=ItineraryDocument,
    responses=_error_responses(PREDEFINED_TRIP_ERROR_EXAMPLES, {400: "시작일 오류", 404: "템플릿 없음"}),
)
async def get_predefined_trip_endpoint(
    trip_id: str,
    start_date: str | None = Query(default=None, alias="startDate", description="여행 시작일 (YYYY-MM-DD)"),
    services: ServiceContainer = Depends(get_services),
) -> ItineraryDocument:
    """템플릿 일정을 시작일 기준으로 옮기고 장소 정보를 보강해 반환한다."""
    return await get_predefined_trip(trip_id, start_date, services)
