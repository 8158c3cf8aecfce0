"""여행 일정 문서 스키마."""

import datetime as dt
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from app.schemas.base import CamelModel
from app.schemas.enums import BudgetTier, FoodPreference, TimeOfDay, TravelStyle

_TIME_OF_DAY_LOOKUP = {member.value.lower(): member for member in TimeOfDay}


class PlaceReview(CamelModel):
    """장소 리뷰 발췌."""

    author: Optional[str] = Field(None, description="작성자 이름")
    rating: Optional[float] = Field(None, description="리뷰 평점")
    text: Optional[str] = Field(None, description="리뷰 본문")
    time: Optional[int] = Field(None, description="작성 시각 (epoch seconds)")


class PlaceStats(CamelModel):
    """장소 통계."""

    total_ratings: int = Field(0, ge=0, description="전체 평점 수")


class PlaceDetails(CamelModel):
    """Places 제공자에서 조회해 일정 항목에 붙이는 메타데이터.

    항상 하나의 Activity 또는 Hotel에 소속되며, 보강 요청마다 새로 만들어집니다.
    """

    name: str = Field(..., description="장소 이름")
    address: Optional[str] = Field(None, description="주소")
    photo_url: Optional[str] = Field(None, description="대표 사진 URL")
    website: Optional[str] = Field(None, description="웹사이트 또는 지도 URL")
    rating: float = Field(0, description="평점 (없으면 0)")
    price_level: Optional[BudgetTier] = Field(None, description="가격 수준")
    is_open: Optional[bool] = Field(None, description="영업 중 여부 (알 수 없으면 null)")
    stats: PlaceStats = Field(default_factory=PlaceStats, description="평점 통계")
    reviews: List[PlaceReview] = Field(default_factory=list, description="리뷰 발췌 (최대 3개)")


class Activity(CamelModel):
    """시간대별 일정 항목."""

    time_of_day: TimeOfDay = Field(..., description="시간대 (Morning, Lunch, Afternoon, Evening)")
    description: str = Field("", description="활동 설명")
    location: str = Field("", description="장소명. 보강 조회 키로 사용")
    notes: str = Field("", description="참고 사항")
    place_details: Optional[PlaceDetails] = Field(None, description="보강된 장소 정보")

    @field_validator("time_of_day", mode="before")
    @classmethod
    def normalize_time_of_day(cls, value):
        if isinstance(value, str):
            return _TIME_OF_DAY_LOOKUP.get(value.strip().lower(), value)
        return value

    @field_validator("description", "location", "notes", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value


class Hotel(CamelModel):
    """추천 숙소."""

    name: str = Field(..., description="호텔 이름. 보강 조회 키로 사용")
    price_range: BudgetTier = Field(..., description="가격대")
    description: str = Field("", description="설명")
    location: str = Field("", description="위치")
    website: Optional[str] = Field(None, description="웹사이트")
    place_details: Optional[PlaceDetails] = Field(None, description="보강된 장소 정보")

    @field_validator("description", "location", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value


class TemplateDayPlan(CamelModel):
    """날짜가 정해지지 않은 템플릿 일자 계획."""

    day: int = Field(..., ge=1, description="1부터 시작하는 일차")
    activities: List[Activity] = Field(..., description="시간 순 일정 항목")


class DayPlan(TemplateDayPlan):
    """날짜가 확정된 일자 계획."""

    date: dt.date = Field(..., description="해당 일자 (YYYY-MM-DD)")


class TripMetadata(CamelModel):
    """일정 문서에 함께 실리는 여행 조건 요약."""

    duration: Optional[int] = Field(None, ge=1, description="여행 일수")
    num_travelers: Optional[int] = Field(None, ge=1, description="인원 수")
    interests: Optional[List[str]] = Field(None, description="관심사")
    budget: Optional[BudgetTier] = Field(None, description="예산 등급")
    travel_style: Optional[TravelStyle] = Field(None, description="여행 스타일")
    food_preference: Optional[FoodPreference] = Field(None, description="음식 선호")


class ItineraryDocument(TripMetadata):
    """생성되었거나 템플릿에서 만들어진 전체 여행 일정.

    불변식:
        - 호텔은 정확히 3개입니다.
        - 일자 계획 수는 시작일~종료일(포함) 일수와 같고, 일차 번호는 위치와 일치합니다.
    """

    trip_id: str = Field(..., description="여행 식별자")
    destination: str = Field(..., description="목적지")
    start_date: dt.date = Field(..., description="여행 시작일")
    end_date: dt.date = Field(..., description="여행 종료일")
    itinerary: List[DayPlan] = Field(..., description="일자별 일정")
    hotels: List[Hotel] = Field(..., min_length=3, max_length=3, description="추천 호텔 (정확히 3개)")
    general_tips: List[str] = Field(default_factory=list, description="일반 여행 팁")

    @model_validator(mode="after")
    def validate_day_span(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must be on or after startDate")
        expected_days = (self.end_date - self.start_date).days + 1
        if len(self.itinerary) != expected_days:
            raise ValueError(f"itinerary must contain {expected_days} days, got {len(self.itinerary)}")
        for index, day in enumerate(self.itinerary, start=1):
            if day.day != index:
                raise ValueError(f"itinerary day {index} has day index {day.day}")
        return self


class TripTemplate(TripMetadata):
    """미리 작성된 여행 템플릿. 날짜는 요청 시점에 정해집니다."""

    trip_id: str = Field(..., description="템플릿 식별자")
    destination: str = Field(..., description="목적지")
    duration: int = Field(..., ge=1, description="고정 여행 일수")
    budget: BudgetTier = Field(..., description="고정 예산 등급")
    itinerary: List[TemplateDayPlan] = Field(..., description="일차별 일정")
    hotels: List[Hotel] = Field(..., min_length=3, max_length=3, description="추천 호텔")
    general_tips: List[str] = Field(default_factory=list, description="일반 여행 팁")

    @model_validator(mode="after")
    def validate_template(self):
        if len(self.itinerary) != self.duration:
            raise ValueError(f"template {self.trip_id} has {len(self.itinerary)} days for duration {self.duration}")
        for index, day in enumerate(self.itinerary, start=1):
            if day.day != index:
                raise ValueError(f"template {self.trip_id} day {index} has day index {day.day}")
        for hotel in self.hotels:
            if hotel.price_range != self.budget:
                raise ValueError(f"template {self.trip_id} hotel {hotel.name} is not {self.budget.value}")
        return self


class PredefinedTripSummary(CamelModel):
    """템플릿 목록 조회용 요약."""

    trip_id: str = Field(..., description="템플릿 식별자")
    destination: str = Field(..., description="목적지")
    duration: int = Field(..., description="여행 일수")
    interests: List[str] = Field(default_factory=list, description="관심사")
    budget: BudgetTier = Field(..., description="예산 등급")
    travel_style: Optional[TravelStyle] = Field(None, description="여행 스타일")
