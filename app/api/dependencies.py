"""API 의존성 모음."""

from fastapi import HTTPException, Request, status

from app.services.container import ServiceContainer


def get_services(request: Request) -> ServiceContainer:
    """애플리케이션 시작 시 구성된 서비스 컨테이너를 제공합니다."""
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="서비스가 초기화되지 않았습니다.",
        )
    return services
