"""여행 일정 생성 프롬프트 구성."""

from __future__ import annotations

import json

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from app.schemas.trip import TripRequest

SYSTEM_PROMPT = (
    "You are an expert travel planner who writes realistic, day-by-day itineraries.\n"
    "Rules:\n"
    "- Respond with a single JSON object only, with no commentary before or after it\n"
    "- Use real, specific place names that can be found on a map\n"
    "- Follow the requested JSON structure exactly\n"
)

USER_PROMPT = (
    "Generate a detailed, day-by-day travel itinerary for a trip to {destination} "
    "from {start_date} to {end_date} ({trip_days} days) for {num_travelers} people.\n"
    "The travelers are interested in {interests}.\n"
    "Their budget is {budget}.\n"
    "{preferences}"
    "For each day, include Morning, Lunch, Afternoon, and Evening activities, "
    "including specific locations and brief descriptions.\n"
    "Also, provide a few general travel tips for {destination}.\n"
    "IMPORTANT: Suggest EXACTLY THREE hotels in the {budget} price range. Each hotel MUST be {budget} level.\n"
    "For each hotel, include:\n"
    "- Name\n"
    "- Price range (must be {budget})\n"
    "- Brief description\n"
    "- Location\n"
    "- Website URL if available\n\n"
    "Format the response as a JSON object with the following structure:\n"
    "{output_schema}"
)


def _join_values(values: list[str]) -> str:
    return ", ".join(values) if values else "none"


def build_preference_lines(request: TripRequest) -> str:
    """선택 입력(여행 스타일, 음식 선호, 필수 방문지)을 문장으로 만듭니다."""
    lines: list[str] = []
    if request.travel_style:
        lines.append(f"They prefer a {request.travel_style.value} travel style.")
    if request.food_preference:
        lines.append(f"They prefer {request.food_preference.value} food.")
    if request.places_to_visit:
        lines.append(f"They specifically want to visit these places: {_join_values(request.places_to_visit)}.")
    return "".join(f"{line}\n" for line in lines)


def build_output_schema(request: TripRequest) -> str:
    """모델이 따라야 할 JSON 구조 예시를 생성합니다."""
    budget = request.budget.value
    skeleton = {
        "tripId": "unique-id",
        "destination": "string",
        "startDate": "YYYY-MM-DD",
        "endDate": "YYYY-MM-DD",
        "itinerary": [
            {
                "date": "YYYY-MM-DD",
                "day": "number",
                "activities": [
                    {
                        "timeOfDay": "Morning|Lunch|Afternoon|Evening",
                        "description": "string",
                        "location": "string",
                        "notes": "string",
                    }
                ],
            }
        ],
        "generalTips": ["string"],
        "hotels": [
            {
                "name": "string",
                "priceRange": budget,
                "description": "string",
                "location": "string",
                "website": "string (optional)",
            }
        ],
    }
    return json.dumps(skeleton, indent=2)


def build_itinerary_messages(request: TripRequest) -> list[BaseMessage]:
    """검증된 요청으로 일정 생성 메시지를 구성합니다."""
    prompt = ChatPromptTemplate.from_messages([("system", SYSTEM_PROMPT), ("human", USER_PROMPT)])
    return prompt.format_messages(
        destination=request.destination,
        start_date=request.start_date.isoformat(),
        end_date=request.end_date.isoformat(),
        trip_days=request.trip_days,
        num_travelers=request.num_travelers,
        interests=_join_values(request.interests),
        budget=request.budget.value,
        preferences=build_preference_lines(request),
        output_schema=build_output_schema(request),
    )
