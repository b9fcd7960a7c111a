"""
프로젝트 공수 견적 시스템의 메인 진입점 파일입니다.
웹 서버 애플리케이션을 생성하고 설정하는 역할을 담당합니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.api.router import api_router
from app.exceptions import (
    AdvisoryError,
    ConflictError,
    EstimatorError,
    InvalidEffortInputError,
    NotFoundError,
    PermissionDeniedError,
    PersistenceError,
    ValidationError,
)
from app.models import ErrorResponse

logger = logging.getLogger(__name__)

# 커스텀 예외 → HTTP 상태 코드
STATUS_CODES: dict[type, int] = {
    ValidationError: 400,
    InvalidEffortInputError: 400,
    PermissionDeniedError: 403,
    NotFoundError: 404,
    ConflictError: 409,
    AdvisoryError: 502,
    PersistenceError: 503,
}


def status_code_for(exc: EstimatorError) -> int:
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


def _error_content(error_code: str, message: str, details=None) -> dict:
    return ErrorResponse(
        error_code=error_code, message=message, details=details
    ).model_dump(mode="json")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션의 생명주기(시작과 종료)를 관리하는 함수입니다.

    서버가 시작될 때:
    1. 필요한 설정들을 불러옵니다.
    2. 시작 로그를 출력합니다.

    서버가 종료될 때:
    1. 정리 작업이나 종료 로그를 출력합니다.
    """
    settings = get_settings()
    logger.info(f"공수 견적 시스템이 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")
    logger.info(f"데이터 저장 위치: {settings.data_dir}, 일 단가: {settings.daily_rate} {settings.currency}")
    if settings.advisory_enabled:
        logger.info("자문 견적을 위해 Claude Code CLI를 사용합니다")

    yield

    logger.info("공수 견적 시스템이 종료됩니다")


def create_app() -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 기본 앱 정보 설정 (제목, 설명 등)
    2. CORS 설정 (프론트엔드와의 통신 허용 설정)
    3. 글로벌 예외 핸들러 등록
    4. API 라우터 연결 (기능별 주소 연결)
    """
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="프로젝트 공수 견적 시스템",
        description="관리자가 정의한 필드/범위/기술 컴포넌트 기반의 단계별 공수 산정 및 보고서",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",  # 개발자용 문서 주소
        redoc_url="/redoc",
    )

    # CORS 미들웨어 설정: 프론트엔드 웹페이지가 이 서버에 접속할 수 있도록 허용하는 설정입니다.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],  # 모든 통신 방식 허용 (GET, POST 등)
        allow_headers=["*"],  # 모든 헤더 정보 허용
    )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(EstimatorError)
    async def estimator_error_handler(request: Request, exc: EstimatorError):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(f"[{exc.error_code}] {exc.message} {exc.details or ''}")
        return JSONResponse(
            status_code=status_code,
            content=_error_content(exc.error_code, exc.message, exc.details),
        )

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_content("ERR_INTERNAL", "내부 서버 오류가 발생했습니다"),
        )

    # API 라우터 포함: /api/v1 주소 아래에 모든 기능을 연결합니다.
    app.include_router(api_router, prefix="/api/v1")

    return app


# 애플리케이션 인스턴스 생성
app = create_app()


@app.get("/")
async def root():
    """
    루트 엔드포인트: 서버가 정상적으로 동작하는지 확인하는 기본 주소입니다.
    접속 시 서버의 기본 정보를 반환합니다.
    """
    return {
        "name": "프로젝트 공수 견적 시스템",
        "version": "1.0.0",
        "description": "단계별 공수 산정 및 보고서",
        "docs": "/docs",
        "api": "/api/v1",
    }


# 이 파일을 직접 실행했을 때 서버를 구동시키는 코드입니다.
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    # uvicorn 웹 서버를 실행합니다.
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,  # 코드가 변경되면 자동으로 재시작 (개발 모드)
    )
