"""장소 자동완성 검색 API."""

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_services
from app.schemas.place import PlaceSearchResponse
from app.services.container import ServiceContainer
from app.services.trip_planning_service import search_places

router = APIRouter(prefix="/api/places", tags=["places"])


@router.get("/search", response_model=PlaceSearchResponse)
async def search_places_endpoint(
    query: str | None = Query(default=None, description="검색어 (2자 이상)"),
    location: str | None = Query(default=None, description="업장 검색 시 위치 힌트"),
    kind: str | None = Query(default=None, alias="type", description="destination 또는 establishment"),
    services: ServiceContainer = Depends(get_services),
) -> PlaceSearchResponse:
    """목적지 또는 업장 자동완성 후보를 반환한다."""
    return await search_places(query, services, location_hint=location, kind=kind)
