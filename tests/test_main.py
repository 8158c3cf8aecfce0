"""애플리케이션 진입점 HTTP 동작 테스트."""

from __future__ import annotations

import importlib
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.services.container import build_service_container
from tests.mocks.mock_places_service import MockGooglePlacesService
from tests.mocks.mock_text_generator import MockTextGenerator, sample_model_output

PLAN_PAYLOAD = {
    "destination": "Paris, France",
    "startDate": "2030-05-01",
    "endDate": "2030-05-02",
    "numTravelers": 2,
    "interests": ["art", "food"],
    "budget": "mid-range",
}


def _set_required_env(monkeypatch, **overrides: str) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "places-key")
    monkeypatch.setenv("DOCS_MODE", "disabled")
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()


def _load_main_module():
    import app.main as main_module

    return importlib.reload(main_module)


def _client_with_fakes(monkeypatch, responses=None, places_service=None, **env: str):
    _set_required_env(monkeypatch, **env)
    main_module = _load_main_module()
    places_service = places_service or MockGooglePlacesService()
    generator = MockTextGenerator(responses if responses is not None else [sample_model_output()])
    main_module.app.state.services = build_service_container(
        main_module.settings,
        places_service=places_service,
        text_generator=generator,
    )
    return TestClient(main_module.app, raise_server_exceptions=False), places_service, generator


def test_health_check_endpoint(monkeypatch) -> None:
    _set_required_env(monkeypatch)
    main_module = _load_main_module()

    client = TestClient(main_module.app)
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Trip Planner AI Server is running"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_docs_are_disabled_by_default(monkeypatch) -> None:
    _set_required_env(monkeypatch)
    main_module = _load_main_module()

    client = TestClient(main_module.app)

    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_public_docs_expose_plan_trip_examples(monkeypatch) -> None:
    _set_required_env(monkeypatch, DOCS_MODE="public")
    main_module = _load_main_module()

    schema = main_module.app.openapi()
    examples = schema["paths"]["/api/plan-trip"]["post"]["responses"]["502"]["content"]["application/json"]["examples"]

    assert examples["unparseable_model_output"]["value"]["kind"] == "unparseable_model_output"


def test_missing_places_credential_prevents_startup(monkeypatch) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "")
    get_settings.cache_clear()

    with pytest.raises(Exception):
        _load_main_module()


def test_cors_preflight_allows_configured_origin(monkeypatch) -> None:
    _set_required_env(monkeypatch, CORS_ALLOW_ORIGINS="http://localhost:3000")
    main_module = _load_main_module()

    client = TestClient(main_module.app)
    response = client.options(
        "/api/plan-trip",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_plan_trip_returns_camel_case_document(monkeypatch) -> None:
    client, places_service, _ = _client_with_fakes(monkeypatch)

    response = client.post("/api/plan-trip", json=PLAN_PAYLOAD)

    assert response.status_code == 200
    body = response.json()
    assert body["destination"] == "Paris, France"
    assert body["startDate"] == "2030-05-01"
    assert body["endDate"] == "2030-05-02"
    assert [day["date"] for day in body["itinerary"]] == ["2030-05-01", "2030-05-02"]
    assert [hotel["priceRange"] for hotel in body["hotels"]] == ["mid-range"] * 3

    first = body["itinerary"][0]["activities"][0]
    assert first["timeOfDay"] == "Morning"
    assert first["placeDetails"]["name"] == "Eiffel Tower"
    assert first["placeDetails"]["stats"]["totalRatings"] == 412000
    assert body["hotels"][1]["placeDetails"] is None
    assert places_service.total_lookups == 9


def test_plan_trip_validation_error_is_400_without_external_calls(monkeypatch) -> None:
    client, places_service, generator = _client_with_fakes(monkeypatch)

    response = client.post("/api/plan-trip", json={**PLAN_PAYLOAD, "endDate": "2030-04-30"})

    assert response.status_code == 400
    assert response.json() == {"detail": "endDate: must be on or after startDate", "field": "endDate"}
    assert generator.calls == []
    assert places_service.total_lookups == 0


def test_plan_trip_without_body_is_400(monkeypatch) -> None:
    client, _, _ = _client_with_fakes(monkeypatch)

    response = client.post("/api/plan-trip")

    assert response.status_code == 400
    assert response.json()["field"] == "body"


def test_plan_trip_unparseable_output_returns_raw_response(monkeypatch) -> None:
    client, places_service, _ = _client_with_fakes(monkeypatch, responses=["I cannot do that."])

    response = client.post("/api/plan-trip", json=PLAN_PAYLOAD)

    assert response.status_code == 502
    body = response.json()
    assert body["kind"] == "unparseable_model_output"
    assert body["raw_response"] == "I cannot do that."
    assert places_service.total_lookups == 0


def test_plan_trip_hotel_violation_names_field(monkeypatch) -> None:
    client, _, _ = _client_with_fakes(monkeypatch)

    response = client.post("/api/plan-trip", json={**PLAN_PAYLOAD, "budget": "luxury"})

    assert response.status_code == 502
    body = response.json()
    assert body["kind"] == "structural_contract_violation"
    assert body["field"] == "hotels[0].priceRange"


def test_plan_trip_model_call_failure_is_502(monkeypatch) -> None:
    client, _, _ = _client_with_fakes(monkeypatch, responses=[ConnectionError("openai unreachable")])

    response = client.post("/api/plan-trip", json=PLAN_PAYLOAD)

    assert response.status_code == 502
    assert response.json()["kind"] == "model_call_failed"


def test_list_predefined_trips(monkeypatch) -> None:
    client, _, _ = _client_with_fakes(monkeypatch)

    response = client.get("/api/predefined-trips")

    assert response.status_code == 200
    trips = {trip["tripId"]: trip for trip in response.json()}
    assert set(trips) == {"paris-adventure", "tokyo-explorer", "bali-paradise"}
    assert trips["bali-paradise"]["travelStyle"] == "relaxed"


def test_get_predefined_trip_shifts_dates(monkeypatch) -> None:
    client, _, generator = _client_with_fakes(monkeypatch, responses=[])
    start = date.today() + timedelta(days=30)

    response = client.get("/api/predefined-trips/paris-adventure", params={"startDate": start.isoformat()})

    assert response.status_code == 200
    body = response.json()
    assert [day["date"] for day in body["itinerary"]] == [
        (start + timedelta(days=offset)).isoformat() for offset in range(5)
    ]
    assert body["endDate"] == (start + timedelta(days=4)).isoformat()
    assert generator.calls == []


def test_get_predefined_trip_defaults_to_today(monkeypatch) -> None:
    client, _, _ = _client_with_fakes(monkeypatch)

    response = client.get("/api/predefined-trips/bali-paradise")

    assert response.status_code == 200
    assert response.json()["startDate"] == date.today().isoformat()


def test_get_predefined_trip_past_date_is_400(monkeypatch) -> None:
    client, _, _ = _client_with_fakes(monkeypatch)
    yesterday = (date.today() - timedelta(days=1)).isoformat()

    response = client.get("/api/predefined-trips/paris-adventure", params={"startDate": yesterday})

    assert response.status_code == 400
    assert response.json() == {"detail": "Start date cannot be in the past", "value": yesterday}


def test_get_unknown_predefined_trip_is_404(monkeypatch) -> None:
    client, _, _ = _client_with_fakes(monkeypatch)

    response = client.get("/api/predefined-trips/moon-base")

    assert response.status_code == 404
    assert response.json() == {"detail": "Trip not found: moon-base"}


def test_place_search_destination(monkeypatch) -> None:
    client, _, _ = _client_with_fakes(monkeypatch)

    response = client.get("/api/places/search", params={"query": "Paris", "type": "destination"})

    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "destination"
    assert [prediction["placeId"] for prediction in body["predictions"]] == ["ChIJD7fiBh9u5kcRYJSMaMOCCwQ"]


def test_place_search_short_query_is_400(monkeypatch) -> None:
    client, places_service, _ = _client_with_fakes(monkeypatch)

    response = client.get("/api/places/search", params={"query": "P"})

    assert response.status_code == 400
    assert response.json()["field"] == "query"
    assert places_service.autocomplete_calls == []


def test_unhandled_error_hides_details(monkeypatch) -> None:
    places_service = MockGooglePlacesService()
    client, _, _ = _client_with_fakes(monkeypatch, places_service=places_service)

    async def _broken_autocomplete(*args, **kwargs):
        raise KeyError("secret internals")

    places_service.autocomplete = _broken_autocomplete
    response = client.get("/api/places/search", params={"query": "Paris"})

    assert response.status_code == 500
    assert response.json() == {"detail": "내부 서버 오류가 발생했습니다."}


def test_unhandled_error_detail_follows_container_settings(monkeypatch) -> None:
    _set_required_env(monkeypatch)
    main_module = _load_main_module()
    places_service = MockGooglePlacesService()
    main_module.app.state.services = build_service_container(
        Settings(OPENAI_API_KEY="test-key", GOOGLE_PLACES_API_KEY="places-key", EXPOSE_INTERNAL_ERRORS=True),
        places_service=places_service,
        text_generator=MockTextGenerator([]),
    )

    async def _broken_autocomplete(*args, **kwargs):
        raise RuntimeError("autocomplete exploded")

    places_service.autocomplete = _broken_autocomplete
    client = TestClient(main_module.app, raise_server_exceptions=False)
    response = client.get("/api/places/search", params={"query": "Paris"})

    assert main_module.settings.EXPOSE_INTERNAL_ERRORS is False
    assert response.status_code == 500
    assert response.json() == {"detail": "autocomplete exploded"}
