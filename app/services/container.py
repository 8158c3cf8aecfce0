"""프로세스 시작 시 한 번 구성되는 서비스 컨테이너."""

from __future__ import annotations

from dataclasses import dataclass

from app.core.config import Settings
from app.core.logger import get_logger
from app.core.predefined_trip_data import PREDEFINED_TRIP_DATA
from app.core.timeout_policy import get_timeout_policy
from app.services.google_places_service import GooglePlacesService
from app.services.itinerary_synthesizer import ItinerarySynthesizer
from app.services.llm_client import TextGenerator
from app.services.place_enrichment import PlaceEnricher
from app.services.places_service import PlacesServiceProtocol
from app.services.predefined_trip_service import PredefinedTripService, load_trip_templates

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ServiceContainer:
    """요청 처리에 필요한 설정과 협력 객체 묶음.

    타임아웃 정책은 생성 시 한 번 계산되어 외부 클라이언트에 전달됩니다.
    """

    settings: Settings
    places_service: PlacesServiceProtocol
    enricher: PlaceEnricher
    synthesizer: ItinerarySynthesizer
    predefined_trips: PredefinedTripService

    def graph_config(self) -> dict:
        """여행 계획 그래프 실행 설정을 반환합니다."""
        return {
            "configurable": {
                "synthesizer": self.synthesizer,
                "predefined_trips": self.predefined_trips,
                "enricher": self.enricher,
            }
        }


def build_service_container(
    settings: Settings,
    *,
    places_service: PlacesServiceProtocol | None = None,
    text_generator: TextGenerator | None = None,
) -> ServiceContainer:
    """설정으로 서비스 컨테이너를 생성합니다. 외부 클라이언트는 주입으로 대체할 수 있습니다."""
    timeout_policy = get_timeout_policy(settings)
    resolved_places = places_service or GooglePlacesService.from_settings(settings, timeout_policy)
    resolved_generator = text_generator or TextGenerator.from_settings(settings, timeout_policy)
    templates = load_trip_templates(PREDEFINED_TRIP_DATA)

    logger.info(
        "Service container built: model=%s fallback_model=%s llm_timeout=%ds places_timeout=%ds templates=%d",
        settings.LLM_MODEL_NAME,
        settings.LLM_FALLBACK_MODEL_NAME,
        timeout_policy.llm_timeout_seconds,
        timeout_policy.google_places_timeout_seconds,
        len(templates),
    )

    return ServiceContainer(
        settings=settings,
        places_service=resolved_places,
        enricher=PlaceEnricher(resolved_places),
        synthesizer=ItinerarySynthesizer(resolved_generator, max_attempts=settings.LLM_SYNTHESIS_MAX_ATTEMPTS),
        predefined_trips=PredefinedTripService(templates),
    )
