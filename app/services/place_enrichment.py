"""일정 항목 장소 정보 보강 서비스."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from app.core.logger import get_logger
from app.schemas.itinerary import ItineraryDocument, PlaceDetails
from app.services.places_service import PlacesServiceProtocol

logger = get_logger(__name__)


def build_lookup_query(name: str, destination: str) -> str:
    """장소명과 목적지로 텍스트 검색어를 구성합니다."""
    return f"{name.strip()} {destination.strip()}".strip()


@dataclass(frozen=True, slots=True)
class EnrichmentOutcome:
    """항목 하나의 보강 결과. 실패는 `reason`에 담기고 전파되지 않습니다."""

    key: str
    details: PlaceDetails | None = None
    reason: str | None = None

    @property
    def failed(self) -> bool:
        return self.reason is not None


@dataclass(frozen=True, slots=True)
class _LookupTarget:
    key: str
    day_index: int | None
    item_index: int


class PlaceEnricher:
    """일정의 모든 활동과 호텔을 항목당 한 번씩 동시에 조회해 장소 정보를 붙입니다."""

    def __init__(self, places_service: PlacesServiceProtocol) -> None:
        self._places_service = places_service

    async def lookup(self, name: str, destination: str) -> PlaceDetails | None:
        """첫 번째 검색 결과의 상세 정보를 반환합니다. 결과가 없으면 None입니다."""
        place_ids = await self._places_service.text_search(build_lookup_query(name, destination))
        if not place_ids:
            return None
        return await self._places_service.details(place_ids[0])

    async def lookup_outcome(self, key: str, destination: str) -> EnrichmentOutcome:
        """조회 실패를 결과 값으로 감싸 반환합니다."""
        try:
            details = await self.lookup(key, destination)
        except Exception as exc:
            reason = str(exc) or type(exc).__name__
            logger.warning("Place enrichment failed: key=%s reason=%s", key, reason)
            return EnrichmentOutcome(key=key, reason=reason)
        return EnrichmentOutcome(key=key, details=details)

    async def enrich(self, document: ItineraryDocument, destination: str | None = None) -> ItineraryDocument:
        """보강된 새 일정 문서를 반환합니다. 일자/활동/호텔 순서는 그대로 유지됩니다.

        조회 키가 비어 있는 항목을 포함해 모든 항목의 장소 정보는 이번 조회 결과로만 채워집니다.
        """
        resolved_destination = destination if destination is not None else document.destination
        targets = self._collect_targets(document)

        outcomes = await asyncio.gather(
            *[self.lookup_outcome(target.key, resolved_destination) for target in targets]
        )

        activity_details: dict[tuple[int, int], PlaceDetails | None] = {}
        hotel_details: dict[int, PlaceDetails | None] = {}
        for target, outcome in zip(targets, outcomes):
            if target.day_index is None:
                hotel_details[target.item_index] = outcome.details
            else:
                activity_details[(target.day_index, target.item_index)] = outcome.details

        itinerary = [
            day.model_copy(
                update={
                    "activities": [
                        activity.model_copy(update={"place_details": activity_details.get((day_index, item_index))})
                        for item_index, activity in enumerate(day.activities)
                    ]
                }
            )
            for day_index, day in enumerate(document.itinerary)
        ]
        hotels = [
            hotel.model_copy(update={"place_details": hotel_details.get(index)})
            for index, hotel in enumerate(document.hotels)
        ]

        enriched_count = sum(1 for outcome in outcomes if outcome.details is not None)
        failed_count = sum(1 for outcome in outcomes if outcome.failed)
        logger.info(
            "Place enrichment completed: trip_id=%s items=%d enriched=%d missing=%d failed=%d",
            document.trip_id,
            len(outcomes),
            enriched_count,
            len(outcomes) - enriched_count - failed_count,
            failed_count,
        )

        return document.model_copy(update={"itinerary": itinerary, "hotels": hotels})

    @staticmethod
    def _collect_targets(document: ItineraryDocument) -> list[_LookupTarget]:
        targets: list[_LookupTarget] = []
        for day_index, day in enumerate(document.itinerary):
            for item_index, activity in enumerate(day.activities):
                if activity.location.strip():
                    targets.append(_LookupTarget(key=activity.location, day_index=day_index, item_index=item_index))
        for index, hotel in enumerate(document.hotels):
            if hotel.name.strip():
                targets.append(_LookupTarget(key=hotel.name, day_index=None, item_index=index))
        return targets
