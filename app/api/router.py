"""
API 라우터 설정 파일입니다.
각 기능별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from app.api.endpoints import health, auth, definitions, projects

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 인증 엔드포인트: 로그인/회원가입 (/auth)
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["auth"]
)

# 정의 카탈로그 엔드포인트: 필드/범위/기술 컴포넌트 관리 (/definitions)
api_router.include_router(
    definitions.router,
    prefix="/definitions",
    tags=["definitions"]
)

# 프로젝트 엔드포인트: 프로젝트, 공수 기록, 보고서, 자문 견적 (/projects)
api_router.include_router(
    projects.router,
    prefix="/projects",
    tags=["projects"]
)
