"""Places 서비스 추상 프로토콜 정의."""

from abc import ABC, abstractmethod

from app.schemas.enums import PlaceSearchKind
from app.schemas.itinerary import PlaceDetails
from app.schemas.place import PlacePrediction


class PlacesServiceProtocol(ABC):
    """Places 제공자 호출을 위한 인터페이스를 정의합니다."""

    @abstractmethod
    async def text_search(self, query: str) -> list[str]:
        """텍스트 쿼리로 장소를 검색합니다.

        Args:
            query: 검색 쿼리 (예: "Eiffel Tower Paris, France")

        Returns:
            제공자 순서 그대로의 place_id 목록
        """
        raise NotImplementedError

    @abstractmethod
    async def details(self, place_id: str) -> PlaceDetails | None:
        """장소 상세 정보를 조회합니다.

        Args:
            place_id: Places 고유 ID

        Returns:
            장소 상세 정보 또는 None
        """
        raise NotImplementedError

    @abstractmethod
    async def autocomplete(
        self,
        query: str,
        kind: PlaceSearchKind,
        location_hint: str | None = None,
    ) -> list[PlacePrediction]:
        """입력 중인 검색어에 대한 자동완성 후보를 조회합니다.

        Args:
            query: 검색어
            kind: 목적지 검색이면 행정구역만, 아니면 업장/명소를 대상으로 합니다
            location_hint: 업장 검색 시 위치 편향에 사용할 지역명

        Returns:
            자동완성 후보 목록
        """
        raise NotImplementedError
