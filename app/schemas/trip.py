"""여행 계획 요청 스키마."""

import re
from datetime import date, datetime

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.base import CamelModel
from app.schemas.enums import BudgetTier, FoodPreference, TravelStyle


_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _require_text(value: str, message: str) -> str:
    normalized = value.strip()
    if not normalized:
        raise ValueError(message)
    return normalized


class TripRequest(CamelModel):
    """여행 일정 생성 요청 모델.

    검증이 끝난 뒤에는 변경할 수 없습니다. 필드 선언 순서가 곧
    검증 오류를 보고하는 순서입니다.

    Fields:
        `destination`: 목적지 (자유 텍스트)
        `start_date`: 여행 시작일
        `end_date`: 여행 종료일 (시작일과 같거나 이후)
        `num_travelers`: 인원 수 (1 이상)
        `interests`: 관심사 태그 목록 (1개 이상)
        `budget`: 예산 등급 (기본값 mid-range)
        `travel_style`: 여행 스타일
        `food_preference`: 음식 선호
        `places_to_visit`: 반드시 포함할 장소 목록
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    destination: str = Field(..., description="목적지")
    start_date: date = Field(..., description="여행 시작일 (YYYY-MM-DD)")
    end_date: date = Field(..., description="여행 종료일 (YYYY-MM-DD)")
    num_travelers: int = Field(..., ge=1, description="인원 수")
    interests: list[str] = Field(..., min_length=1, description="관심사 태그 목록")
    budget: BudgetTier = Field(default=BudgetTier.MID_RANGE, description="예산 등급")
    travel_style: TravelStyle | None = Field(default=None, description="여행 스타일")
    food_preference: FoodPreference | None = Field(default=None, description="음식 선호")
    places_to_visit: list[str] = Field(default_factory=list, description="반드시 방문할 장소 목록")

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, value: str) -> str:
        return _require_text(value, "must not be empty")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def require_iso_date(cls, value):
        if isinstance(value, date) and not isinstance(value, datetime):
            return value
        if isinstance(value, str) and _ISO_DATE_PATTERN.match(value.strip()):
            return value.strip()
        raise ValueError("must be an ISO date (YYYY-MM-DD)")

    @field_validator("num_travelers", mode="before")
    @classmethod
    def reject_boolean_travelers(cls, value):
        if isinstance(value, bool):
            raise ValueError("must be an integer")
        return value

    @field_validator("end_date")
    @classmethod
    def validate_date_range(cls, value: date, info):
        start_date = info.data.get("start_date")
        if start_date and value < start_date:
            raise ValueError("must be on or after startDate")
        return value

    @field_validator("interests")
    @classmethod
    def validate_interests(cls, value: list[str]) -> list[str]:
        return [_require_text(item, "must not contain empty values") for item in value]

    @field_validator("places_to_visit")
    @classmethod
    def validate_places_to_visit(cls, value: list[str]) -> list[str]:
        return [_require_text(item, "must not contain empty values") for item in value]

    @property
    def trip_days(self) -> int:
        """시작일과 종료일을 포함한 여행 일수."""
        return (self.end_date - self.start_date).days + 1
