"""여행 계획 도메인 예외 정의."""

from __future__ import annotations

from enum import StrEnum


class TripPlannerError(Exception):
    """여행 계획 처리 중 호출자에게 보고되는 오류의 기반 클래스."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TripPlannerError):
    """입력 형식/값 오류. 첫 번째로 위반된 필드를 함께 전달합니다."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class SynthesisErrorKind(StrEnum):
    """일정 생성 실패 유형."""

    UNPARSEABLE_MODEL_OUTPUT = "unparseable_model_output"
    STRUCTURAL_CONTRACT_VIOLATION = "structural_contract_violation"
    MODEL_CALL_FAILED = "model_call_failed"


class SynthesisError(TripPlannerError):
    """생성 모델 출력이 파싱 불가하거나 구조 계약을 위반한 경우의 오류.

    진단을 위해 모델의 원문 응답(`raw_text`)을 보존합니다.
    """

    def __init__(
        self,
        kind: SynthesisErrorKind,
        message: str,
        *,
        raw_text: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.raw_text = raw_text
        self.field = field


class NotFoundError(TripPlannerError):
    """요청한 리소스가 존재하지 않는 경우의 오류."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class InvalidDateError(TripPlannerError):
    """형식이 잘못되었거나 과거인 여행 시작일."""

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class PlacesApiError(TripPlannerError):
    """Places 제공자 호출 실패."""

    def __init__(self, message: str, status: str | int | None = None) -> None:
        super().__init__(message)
        self.status = status
