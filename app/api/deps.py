"""
API 의존성(Dependency) 모음입니다.
엔드포인트는 서비스를 직접 만들지 않고 Depends로 주입받습니다.
테스트에서는 app.dependency_overrides로 저장소/ID 생성기를 교체합니다.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from app.exceptions import NotFoundError, PermissionDeniedError
from app.models import SessionContext
from app.services import (
    AdvisoryEstimator,
    AuthService,
    DefinitionStore,
    DocumentStore,
    ProjectRepository,
    ProjectService,
    create_definition_store,
    get_advisory_estimator,
    get_document_store,
)
from app.utils.ids import IdGenerator, get_id_generator


def get_store() -> DocumentStore:
    return get_document_store()


def get_ids() -> IdGenerator:
    return get_id_generator()


def get_definition_store(
    store: DocumentStore = Depends(get_store),
    ids: IdGenerator = Depends(get_ids),
) -> DefinitionStore:
    return create_definition_store(store, ids)


def get_project_repository(store: DocumentStore = Depends(get_store)) -> ProjectRepository:
    return ProjectRepository(store)


def get_auth_service(
    store: DocumentStore = Depends(get_store),
    ids: IdGenerator = Depends(get_ids),
) -> AuthService:
    return AuthService(store, ids)


def get_project_service(
    definitions: DefinitionStore = Depends(get_definition_store),
    projects: ProjectRepository = Depends(get_project_repository),
    ids: IdGenerator = Depends(get_ids),
) -> ProjectService:
    return ProjectService(definitions, projects, ids)


def get_advisory() -> AdvisoryEstimator:
    return get_advisory_estimator()


async def get_session(
    x_user_id: Optional[str] = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> SessionContext:
    """
    X-User-Id 헤더로 요청한 사용자를 확인합니다.
    헤더가 없거나 등록되지 않은 사용자면 401을 반환합니다.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="로그인이 필요합니다 (X-User-Id 헤더 누락)")
    try:
        return await auth.session_for(x_user_id)
    except NotFoundError:
        raise HTTPException(status_code=401, detail="등록되지 않은 사용자입니다")


async def require_admin(session: SessionContext = Depends(get_session)) -> SessionContext:
    """관리자 전용 기능 확인."""
    if not session.is_admin:
        raise PermissionDeniedError(
            "관리자만 사용할 수 있는 기능입니다",
            details={"user_id": session.user_id},
        )
    return session
