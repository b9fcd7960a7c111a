"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter

from app.config import get_settings

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    상세 상태 확인 함수.
    현재 비용 계산 기준과 자문 견적 설정도 같이 보여줍니다.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "data_dir": settings.data_dir,
            "daily_rate": settings.daily_rate,  # 1 M/D 당 단가
            "currency": settings.currency,
            "working_days_per_week": settings.working_days_per_week,
            "advisory_enabled": settings.advisory_enabled,  # 자문 견적 사용 여부
            "claude_model": settings.claude_model,
        }
    }
