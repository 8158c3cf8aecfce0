"""여행 요청 검증기 테스트."""

import pytest

from app.core.errors import ValidationError
from app.schemas.enums import BudgetTier, FoodPreference, TravelStyle
from app.services.trip_validator import validate_trip_request


def _valid_payload(**overrides) -> dict:
    payload = {
        "destination": "Paris, France",
        "startDate": "2030-05-01",
        "endDate": "2030-05-03",
        "numTravelers": 2,
        "interests": ["art", "food"],
    }
    payload.update(overrides)
    return payload


def test_valid_request_uses_mid_range_budget_by_default() -> None:
    request = validate_trip_request(_valid_payload())

    assert request.destination == "Paris, France"
    assert request.budget == BudgetTier.MID_RANGE
    assert request.travel_style is None
    assert request.places_to_visit == []
    assert request.trip_days == 3


def test_valid_request_accepts_optional_enums_and_places() -> None:
    request = validate_trip_request(
        _valid_payload(
            budget="luxury",
            travelStyle="relaxed",
            foodPreference="vegan",
            placesToVisit=["Louvre", "Eiffel Tower"],
        )
    )

    assert request.budget == BudgetTier.LUXURY
    assert request.travel_style == TravelStyle.RELAXED
    assert request.food_preference == FoodPreference.VEGAN
    assert request.places_to_visit == ["Louvre", "Eiffel Tower"]


def test_same_day_trip_is_valid() -> None:
    request = validate_trip_request(_valid_payload(endDate="2030-05-01"))

    assert request.trip_days == 1


def test_validated_request_is_immutable() -> None:
    request = validate_trip_request(_valid_payload())

    with pytest.raises(Exception):
        request.destination = "Rome"


def test_end_date_before_start_date_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_trip_request(_valid_payload(endDate="2030-04-30"))

    assert exc_info.value.field == "endDate"
    assert exc_info.value.message == "must be on or after startDate"
    assert str(exc_info.value) == "endDate: must be on or after startDate"


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"destination": "   "}, "destination"),
        ({"startDate": "05/01/2030"}, "startDate"),
        ({"numTravelers": 0}, "numTravelers"),
        ({"numTravelers": True}, "numTravelers"),
        ({"startDate": 1893456000, "endDate": 1893542400}, "startDate"),
        ({"endDate": 1893542400}, "endDate"),
        ({"startDate": "2030-05-01T09:00:00"}, "startDate"),
        ({"interests": []}, "interests"),
        ({"interests": ["art", " "]}, "interests"),
        ({"budget": "cheap"}, "budget"),
        ({"travelStyle": "chaotic"}, "travelStyle"),
        ({"foodPreference": "carnivore"}, "foodPreference"),
        ({"placesToVisit": "Louvre"}, "placesToVisit"),
    ],
)
def test_invalid_field_is_reported(overrides: dict, field: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_trip_request(_valid_payload(**overrides))

    assert exc_info.value.field == field


def test_first_offending_field_is_reported() -> None:
    payload = _valid_payload(numTravelers=0, budget="cheap")
    del payload["destination"]

    with pytest.raises(ValidationError) as exc_info:
        validate_trip_request(payload)

    assert exc_info.value.field == "destination"


def test_non_object_body_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_trip_request(["Paris"])

    assert exc_info.value.field == "body"


def test_unknown_keys_are_ignored() -> None:
    request = validate_trip_request(_valid_payload(userId="abc"))

    assert not hasattr(request, "user_id")


def test_boolean_traveler_count_is_not_coerced() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_trip_request(_valid_payload(numTravelers=True))

    assert str(exc_info.value) == "numTravelers: must be an integer"


def test_timestamp_dates_are_not_coerced() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_trip_request(_valid_payload(startDate=1893456000, endDate=1893542400))

    assert exc_info.value.field == "startDate"
    assert exc_info.value.message == "must be an ISO date (YYYY-MM-DD)"
