"""여행 계획 그래프 워크플로우 구성."""

from langgraph.graph import END, START, StateGraph

from app.graph.trip.nodes import enrich_places, route_entry, shift_predefined_trip, synthesize_itinerary
from app.graph.trip.state import TripPlanState


def _create_trip_plan_workflow() -> StateGraph:
    """생성 경로와 템플릿 경로가 같은 보강 단계로 합류하는 워크플로우를 생성합니다."""
    workflow = StateGraph(TripPlanState)

    workflow.add_node("synthesize_itinerary", synthesize_itinerary)
    workflow.add_node("shift_predefined_trip", shift_predefined_trip)
    workflow.add_node("enrich_places", enrich_places)

    workflow.add_conditional_edges(
        START,
        route_entry,
        {
            "synthesize_itinerary": "synthesize_itinerary",
            "shift_predefined_trip": "shift_predefined_trip",
        },
    )
    workflow.add_edge("synthesize_itinerary", "enrich_places")
    workflow.add_edge("shift_predefined_trip", "enrich_places")
    workflow.add_edge("enrich_places", END)

    return workflow


compiled_trip_plan_graph = _create_trip_plan_workflow().compile()
