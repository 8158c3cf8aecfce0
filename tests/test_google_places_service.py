"""Google Places 서비스 매핑 테스트."""

import asyncio
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from app.core.config import Settings
from app.core.errors import PlacesApiError
from app.core.timeout_policy import TimeoutPolicy, to_requests_timeout
from app.schemas.enums import BudgetTier, PlaceSearchKind
from app.services.google_places_service import GooglePlacesService, map_price_level


def _response(payload: dict, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = str(payload)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


def _install_get(monkeypatch, *responses: MagicMock) -> MagicMock:
    mock_get = MagicMock(side_effect=list(responses))
    monkeypatch.setattr("app.services.google_places_service.requests.get", mock_get)
    return mock_get


def _service(**overrides) -> GooglePlacesService:
    options = {"api_key": "places-key", "timeout_seconds": 10}
    options.update(overrides)
    return GooglePlacesService(**options)


@pytest.mark.parametrize(
    ("price_level", "expected"),
    [
        (None, None),
        (0, None),
        (1, BudgetTier.BUDGET_FRIENDLY),
        (2, BudgetTier.MID_RANGE),
        (3, BudgetTier.LUXURY),
        (4, BudgetTier.LUXURY),
    ],
)
def test_map_price_level(price_level, expected) -> None:
    assert map_price_level(price_level) == expected


def test_missing_api_key_is_rejected() -> None:
    with pytest.raises(PlacesApiError):
        GooglePlacesService(api_key="")


def test_text_search_returns_place_ids_in_provider_order(monkeypatch) -> None:
    mock_get = _install_get(
        monkeypatch,
        _response({"status": "OK", "results": [{"place_id": "a"}, {"name": "no id"}, {"place_id": "b"}]}),
    )

    place_ids = asyncio.run(_service().text_search("Louvre Paris"))

    assert place_ids == ["a", "b"]
    url = mock_get.call_args.args[0]
    params = mock_get.call_args.kwargs["params"]
    assert url.endswith("/textsearch/json")
    assert params["query"] == "Louvre Paris"
    assert params["key"] == "places-key"
    assert params["language"] == "en"
    assert mock_get.call_args.kwargs["timeout"] == (3.0, 7.0)


def test_text_search_zero_results_is_empty(monkeypatch) -> None:
    _install_get(monkeypatch, _response({"status": "ZERO_RESULTS", "results": []}))

    assert asyncio.run(_service().text_search("Nowhere")) == []


def test_details_maps_provider_record(monkeypatch) -> None:
    _install_get(
        monkeypatch,
        _response(
            {
                "status": "OK",
                "result": {
                    "name": "Louvre Museum",
                    "formatted_address": "Rue de Rivoli, 75001 Paris, France",
                    "photos": [{"photo_reference": "photo-ref-1"}, {"photo_reference": "photo-ref-2"}],
                    "url": "https://maps.google.com/?cid=1",
                    "rating": 4.7,
                    "price_level": 2,
                    "user_ratings_total": 298000,
                    "opening_hours": {"open_now": False},
                    "reviews": [
                        {"author_name": f"Reviewer {index}", "rating": 5, "text": "Great", "time": 1700000000 + index}
                        for index in range(5)
                    ],
                },
            }
        ),
    )

    details = asyncio.run(_service().details("place-1"))

    assert details.name == "Louvre Museum"
    assert details.address == "Rue de Rivoli, 75001 Paris, France"
    assert details.website == "https://maps.google.com/?cid=1"
    assert details.rating == 4.7
    assert details.price_level == BudgetTier.MID_RANGE
    assert details.is_open is False
    assert details.stats.total_ratings == 298000
    assert [review.author for review in details.reviews] == ["Reviewer 0", "Reviewer 1", "Reviewer 2"]
    assert details.reviews[0].time == 1700000000

    photo = urlparse(details.photo_url)
    assert photo.path.endswith("/photo")
    assert parse_qs(photo.query) == {"maxwidth": ["800"], "photoreference": ["photo-ref-1"], "key": ["places-key"]}


def test_details_defaults_for_sparse_record(monkeypatch) -> None:
    _install_get(monkeypatch, _response({"status": "OK", "result": {"name": "Tiny Cafe"}}))

    details = asyncio.run(_service().details("place-2"))

    assert details.rating == 0
    assert details.price_level is None
    assert details.is_open is None
    assert details.photo_url is None
    assert details.stats.total_ratings == 0
    assert details.reviews == []
    assert details.model_dump(by_alias=True)["isOpen"] is None


def test_details_respects_configured_review_limit(monkeypatch) -> None:
    reviews = [{"author_name": "A", "rating": 4, "text": "ok", "time": 1}] * 4
    _install_get(monkeypatch, _response({"status": "OK", "result": {"name": "Cafe", "reviews": reviews}}))

    details = asyncio.run(_service(max_reviews=1).details("place-3"))

    assert len(details.reviews) == 1


def test_non_ok_status_raises_places_api_error(monkeypatch) -> None:
    _install_get(monkeypatch, _response({"status": "REQUEST_DENIED", "error_message": "bad key"}))

    with pytest.raises(PlacesApiError) as exc_info:
        asyncio.run(_service().text_search("Louvre"))

    assert exc_info.value.status == "REQUEST_DENIED"


def test_http_error_raises_places_api_error(monkeypatch) -> None:
    _install_get(monkeypatch, _response({}, status_code=500))

    with pytest.raises(PlacesApiError) as exc_info:
        asyncio.run(_service().details("place-1"))

    assert exc_info.value.status == 500


def test_network_error_raises_places_api_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "app.services.google_places_service.requests.get",
        MagicMock(side_effect=requests.ConnectionError("unreachable")),
    )

    with pytest.raises(PlacesApiError):
        asyncio.run(_service().text_search("Louvre"))


def test_destination_autocomplete_keeps_administrative_areas_only(monkeypatch) -> None:
    mock_get = _install_get(
        monkeypatch,
        _response(
            {
                "status": "OK",
                "predictions": [
                    {
                        "description": "Paris, France",
                        "place_id": "paris",
                        "types": ["locality", "political", "geocode"],
                        "structured_formatting": {"main_text": "Paris", "secondary_text": "France"},
                    },
                    {
                        "description": "Paris 15e Arrondissement, Paris, France",
                        "place_id": "paris-15",
                        "types": ["sublocality", "political", "geocode"],
                    },
                    {
                        "description": "Paris, TX, USA",
                        "place_id": "paris-tx",
                        "types": ["locality", "political", "geocode"],
                    },
                    {
                        "description": "Pas-de-Calais, France",
                        "place_id": "pas-de-calais",
                        "types": ["administrative_area_level_2", "political", "geocode"],
                    },
                ],
            }
        ),
    )

    predictions = asyncio.run(_service().autocomplete("Paris", PlaceSearchKind.DESTINATION))

    assert [prediction.place_id for prediction in predictions] == ["paris", "paris-tx"]
    assert predictions[0].main_text == "Paris"
    assert predictions[0].secondary_text == "France"
    assert mock_get.call_args.kwargs["params"]["types"] == "geocode"


def test_establishment_autocomplete_biases_by_coordinates(monkeypatch) -> None:
    mock_get = _install_get(monkeypatch, _response({"status": "OK", "predictions": []}))

    asyncio.run(
        _service(search_radius_meters=20000).autocomplete(
            "cafe",
            PlaceSearchKind.ESTABLISHMENT,
            location_hint="48.8566, 2.3522",
        )
    )

    params = mock_get.call_args.kwargs["params"]
    assert params["types"] == "establishment"
    assert params["input"] == "cafe"
    assert params["location"] == "48.8566,2.3522"
    assert params["radius"] == "20000"


def test_establishment_autocomplete_appends_text_location(monkeypatch) -> None:
    mock_get = _install_get(monkeypatch, _response({"status": "OK", "predictions": []}))

    asyncio.run(_service().autocomplete("cafe", PlaceSearchKind.ESTABLISHMENT, location_hint="Paris"))

    params = mock_get.call_args.kwargs["params"]
    assert params["input"] == "cafe Paris"
    assert "location" not in params


def test_from_settings_uses_given_timeout_policy(monkeypatch) -> None:
    mock_get = _install_get(monkeypatch, _response({"status": "ZERO_RESULTS", "results": []}))
    settings = Settings(OPENAI_API_KEY="test-key", GOOGLE_PLACES_API_KEY="places-key")
    policy = TimeoutPolicy(
        request_timeout_seconds=90,
        llm_timeout_seconds=60,
        external_api_timeout_seconds=15,
        google_places_timeout_seconds=4,
    )

    asyncio.run(GooglePlacesService.from_settings(settings, policy).text_search("Louvre Paris"))

    assert mock_get.call_args.kwargs["timeout"] == to_requests_timeout(4)
