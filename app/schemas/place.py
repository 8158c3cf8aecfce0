"""Places 자동완성 검색 응답 스키마."""

from typing import List, Optional

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.enums import PlaceSearchKind


class PlacePrediction(CamelModel):
    """자동완성 후보 한 건."""

    description: str = Field(..., description="표시용 전체 문자열")
    place_id: str = Field(..., description="Places 고유 ID")
    types: List[str] = Field(default_factory=list, description="제공자 유형 태그")
    main_text: Optional[str] = Field(None, description="주 텍스트 (예: 도시명)")
    secondary_text: Optional[str] = Field(None, description="보조 텍스트 (예: 국가명)")


class PlaceSearchResponse(CamelModel):
    """자동완성 검색 결과."""

    query: str = Field(..., description="검색어")
    kind: PlaceSearchKind = Field(..., description="검색 종류")
    predictions: List[PlacePrediction] = Field(default_factory=list, description="자동완성 후보 목록")
