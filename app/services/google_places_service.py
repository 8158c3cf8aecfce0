"""Google Places API 서비스 구현."""

from __future__ import annotations

import asyncio
import re
from typing import Any
from urllib.parse import urlencode

import requests

from app.core.config import Settings
from app.core.errors import PlacesApiError
from app.core.logger import get_logger
from app.core.timeout_policy import TimeoutPolicy, get_timeout_policy, to_requests_timeout
from app.schemas.enums import BudgetTier, PlaceSearchKind
from app.schemas.itinerary import PlaceDetails, PlaceReview, PlaceStats
from app.schemas.place import PlacePrediction
from app.services.places_service import PlacesServiceProtocol

logger = get_logger(__name__)

DESTINATION_TYPES = frozenset({"locality", "country", "administrative_area_level_1"})

_COORDINATES_PATTERN = re.compile(r"^\s*-?\d+(\.\d+)?\s*,\s*-?\d+(\.\d+)?\s*$")


def map_price_level(price_level: Any) -> BudgetTier | None:
    """제공자 가격 수준(0~4)을 예산 등급으로 변환합니다. 0 또는 없음은 None입니다."""
    if not price_level:
        return None
    if price_level == 1:
        return BudgetTier.BUDGET_FRIENDLY
    if price_level == 2:
        return BudgetTier.MID_RANGE
    return BudgetTier.LUXURY


def is_destination_prediction(types: list[str]) -> bool:
    """도시, 국가, 1단계 행정구역 유형이 하나라도 있는지 확인합니다."""
    return any(place_type in DESTINATION_TYPES for place_type in types)


class GooglePlacesService(PlacesServiceProtocol):
    """Google Places Web Service 기반 Places 서비스."""

    _BASE_URL = "https://maps.googleapis.com/maps/api/place"
    _DETAILS_FIELDS = (
        "name,formatted_address,photos,website,rating,price_level,user_ratings_total,url,opening_hours,reviews"
    )

    def __init__(
        self,
        api_key: str,
        timeout_seconds: int = 10,
        language_code: str = "en",
        photo_max_width: int = 800,
        max_reviews: int = 3,
        search_radius_meters: int = 50000,
    ) -> None:
        if not api_key:
            raise PlacesApiError("GOOGLE_PLACES_API_KEY is not configured.")
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._language_code = language_code.strip() if language_code else ""
        self._photo_max_width = photo_max_width
        self._max_reviews = max_reviews
        self._search_radius_meters = search_radius_meters

    @classmethod
    def from_settings(cls, settings: Settings, timeout_policy: TimeoutPolicy | None = None) -> GooglePlacesService:
        """애플리케이션 설정으로 서비스 인스턴스를 생성합니다. 정책이 없으면 설정에서 계산합니다."""
        timeout_policy = timeout_policy or get_timeout_policy(settings)
        return cls(
            api_key=settings.GOOGLE_PLACES_API_KEY,
            timeout_seconds=timeout_policy.google_places_timeout_seconds,
            language_code=settings.GOOGLE_PLACES_LANGUAGE_CODE,
            photo_max_width=settings.GOOGLE_PLACES_PHOTO_MAX_WIDTH,
            max_reviews=settings.GOOGLE_PLACES_MAX_REVIEWS,
            search_radius_meters=settings.GOOGLE_PLACES_SEARCH_RADIUS_METERS,
        )

    async def text_search(self, query: str) -> list[str]:
        """텍스트 쿼리로 장소를 검색해 place_id 목록을 반환합니다."""
        if not query.strip():
            return []

        data = await self._request("textsearch", {"query": query})
        return [item["place_id"] for item in data.get("results", []) if item.get("place_id")]

    async def details(self, place_id: str) -> PlaceDetails | None:
        """장소 상세 정보를 조회합니다."""
        if not place_id:
            return None

        data = await self._request("details", {"place_id": place_id, "fields": self._DETAILS_FIELDS})
        result = data.get("result")
        if not result:
            return None
        return self._map_details(result)

    async def autocomplete(
        self,
        query: str,
        kind: PlaceSearchKind,
        location_hint: str | None = None,
    ) -> list[PlacePrediction]:
        """자동완성 후보를 조회합니다. 목적지 검색은 행정구역 유형만 남깁니다."""
        params: dict[str, Any] = {"input": query}
        if kind == PlaceSearchKind.DESTINATION:
            params["types"] = "geocode"
        else:
            params["types"] = "establishment"
            hint = (location_hint or "").strip()
            if hint and _COORDINATES_PATTERN.match(hint):
                params["location"] = hint.replace(" ", "")
                params["radius"] = str(self._search_radius_meters)
            elif hint and hint.lower() not in query.lower():
                params["input"] = f"{query} {hint}"

        data = await self._request("autocomplete", params)
        predictions = [self._map_prediction(item) for item in data.get("predictions", [])]
        predictions = [prediction for prediction in predictions if prediction]

        if kind == PlaceSearchKind.DESTINATION:
            before = len(predictions)
            predictions = [prediction for prediction in predictions if is_destination_prediction(prediction.types)]
            logger.info(
                "Destination predictions filtered: query=%s kept=%d dropped=%d",
                query,
                len(predictions),
                before - len(predictions),
            )
        return predictions

    def build_photo_url(self, photo_reference: str) -> str:
        """사진 참조값으로 이미지 URL을 구성합니다. 바이너리는 내려받지 않습니다."""
        query = urlencode(
            {
                "maxwidth": self._photo_max_width,
                "photoreference": photo_reference,
                "key": self._api_key,
            }
        )
        return f"{self._BASE_URL}/photo?{query}"

    async def _request(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._BASE_URL}/{endpoint}/json"
        query_params = {**params, "key": self._api_key}
        if self._language_code:
            query_params.setdefault("language", self._language_code)
        request_timeout = to_requests_timeout(self._timeout_seconds)

        def _send() -> requests.Response:
            return requests.get(url, params=query_params, timeout=request_timeout)

        try:
            response = await asyncio.to_thread(_send)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as exc:
            response = exc.response
            status_code = response.status_code if response is not None else None
            body = (response.text or "")[:200] if response is not None else ""
            logger.error("Google Places API error: endpoint=%s status=%s body=%s", endpoint, status_code, body)
            raise PlacesApiError(f"Google Places {endpoint} request failed", status=status_code) from exc
        except requests.RequestException as exc:
            logger.error("Google Places API request failed: endpoint=%s error=%s", endpoint, exc)
            raise PlacesApiError(f"Google Places {endpoint} request failed") from exc
        except ValueError as exc:
            logger.error("Google Places API response parse failed: endpoint=%s error=%s", endpoint, exc)
            raise PlacesApiError(f"Google Places {endpoint} returned invalid JSON") from exc

        if not isinstance(data, dict):
            raise PlacesApiError(f"Google Places {endpoint} returned unexpected payload")

        status = data.get("status", "OK")
        if status == "ZERO_RESULTS":
            return {}
        if status != "OK":
            logger.error(
                "Google Places API status error: endpoint=%s status=%s message=%s",
                endpoint,
                status,
                data.get("error_message"),
            )
            raise PlacesApiError(f"Google Places {endpoint} returned status {status}", status=status)
        return data

    def _map_details(self, raw: dict[str, Any]) -> PlaceDetails | None:
        name = raw.get("name")
        if not name:
            return None

        photos = raw.get("photos") or []
        photo_reference = photos[0].get("photo_reference") if photos else None
        opening_hours = raw.get("opening_hours") or {}
        open_now = opening_hours.get("open_now")

        reviews = [
            PlaceReview(
                author=review.get("author_name"),
                rating=review.get("rating"),
                text=review.get("text"),
                time=review.get("time"),
            )
            for review in (raw.get("reviews") or [])[: self._max_reviews]
        ]

        return PlaceDetails(
            name=name,
            address=raw.get("formatted_address"),
            photo_url=self.build_photo_url(photo_reference) if photo_reference else None,
            website=raw.get("website") or raw.get("url"),
            rating=raw.get("rating") or 0,
            price_level=map_price_level(raw.get("price_level")),
            is_open=open_now if isinstance(open_now, bool) else None,
            stats=PlaceStats(total_ratings=raw.get("user_ratings_total") or 0),
            reviews=reviews,
        )

    @staticmethod
    def _map_prediction(raw: dict[str, Any]) -> PlacePrediction | None:
        description = raw.get("description")
        place_id = raw.get("place_id")
        if not (description and place_id):
            return None

        formatting = raw.get("structured_formatting") or {}
        return PlacePrediction(
            description=description,
            place_id=place_id,
            types=raw.get("types") or [],
            main_text=formatting.get("main_text"),
            secondary_text=formatting.get("secondary_text"),
        )
