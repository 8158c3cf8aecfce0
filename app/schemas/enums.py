"""여행 계획 도메인 열거형."""

from enum import StrEnum


class BudgetTier(StrEnum):
    """예산 등급. 호텔 가격대와 장소 가격 수준 분류에 함께 쓰인다."""

    BUDGET_FRIENDLY = "budget-friendly"
    MID_RANGE = "mid-range"
    LUXURY = "luxury"


class TravelStyle(StrEnum):
    """여행 스타일."""

    FAST_PACED = "fast-paced"
    RELAXED = "relaxed"
    FAMILY_FRIENDLY = "family-friendly"


class FoodPreference(StrEnum):
    """음식 선호."""

    VEG = "veg"
    NON_VEG = "non-veg"
    VEGAN = "vegan"
    NOT_SPECIFIED = "not-specified"


class TimeOfDay(StrEnum):
    """일정 항목의 시간대."""

    MORNING = "Morning"
    LUNCH = "Lunch"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"


class PlaceSearchKind(StrEnum):
    """장소 자동완성 검색 종류."""

    DESTINATION = "destination"
    ESTABLISHMENT = "establishment"
