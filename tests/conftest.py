"""공유 pytest fixture 모음."""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock

from app.models import (
    ComponentComplexity,
    ComponentType,
    FieldValue,
    Project,
    ProjectComplexity,
    ProjectEffortRecord,
    ScopeSelection,
    SessionContext,
    User,
    UserRole,
)
from app.services import (
    AdvisoryEstimator,
    AuthService,
    DefinitionStore,
    DocumentStore,
    ProjectRepository,
    ProjectService,
)
from app.utils.ids import SequentialIdGenerator


SAMPLE_ESTIMATE = {
    "total_hours": 320,
    "total_cost": 16000,
    "currency": "USD",
    "timeline_weeks": 8,
    "recommended_stack": ["FastAPI", "PostgreSQL"],
    "risks": ["성능 테스트 범위 제외"],
    "tasks": [
        {"title": "요구사항 분석", "hours": 40, "description": "업무 흐름 정의", "role": "Business Analyst"},
    ],
    "summary": "8주 일정 견적",
}


@pytest.fixture
def mock_claude_client():
    """ClaudeClient mock fixture."""
    client = AsyncMock()
    client.complete = AsyncMock(return_value="mocked response")
    client.complete_json = AsyncMock(return_value=dict(SAMPLE_ESTIMATE))
    return client


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def temp_store(tmp_path):
    """임시 디렉토리 기반 DocumentStore fixture."""
    return DocumentStore(base_path=str(tmp_path))


@pytest.fixture
def definition_store(temp_store, id_generator):
    return DefinitionStore(temp_store, id_generator, seed_defaults=True)


@pytest.fixture
def project_repository(temp_store):
    return ProjectRepository(temp_store)


@pytest.fixture
def auth_service(temp_store, id_generator):
    return AuthService(temp_store, id_generator)


@pytest.fixture
def project_service(definition_store, project_repository, id_generator):
    return ProjectService(
        definition_store,
        project_repository,
        id_generator,
        daily_rate=400.0,
        currency="USD",
        working_days_per_week=5,
    )


@pytest.fixture
def admin_user():
    return User(id="u-admin", email="admin@example.com", name="관리자", role=UserRole.ADMIN)


@pytest.fixture
def regular_user():
    return User(id="u-1", email="kim@example.com", name="김개발", role=UserRole.USER)


@pytest.fixture
def other_user():
    return User(id="u-2", email="lee@example.com", name="이기획", role=UserRole.USER)


@pytest.fixture
def admin_session(admin_user):
    return SessionContext(user=admin_user)


@pytest.fixture
def user_session(regular_user):
    return SessionContext(user=regular_user)


@pytest.fixture
def other_session(other_user):
    return SessionContext(user=other_user)


@pytest.fixture
def sample_record():
    """10일 개발, 분석 20% / 설계 10% / 테스트 30% / 배포 10% → 총 17일."""
    return ProjectEffortRecord(
        id="e-1",
        component_id="c1",
        component_name="Form",
        type=ComponentType.NEW,
        complexity=ComponentComplexity.MEDIUM,
        development_days=10,
        analysis_ratio=20,
        design_ratio=10,
        test_ratio=30,
        deploy_ratio=10,
    )


@pytest.fixture
def sample_project(regular_user, sample_record):
    """공수 기록이 있는 프로젝트 fixture."""
    return Project(
        id="p-1",
        owner_id=regular_user.id,
        name="CRM 고도화",
        description="고객 관리 모듈 개선",
        complexity=ProjectComplexity.MEDIUM,
        custom_fields=[
            FieldValue(field_id="f1", label="문서명", value="CRM 모듈 개발"),
            FieldValue(field_id="f4", label="요청명", value="고객 검색 개선"),
        ],
        scope_selections=[
            ScopeSelection(definition_id="s1", category="분석", item="업무 분석", is_in_scope=True),
            ScopeSelection(definition_id="s10", category="테스트", item="성능 테스트", is_in_scope=False),
        ],
        efforts=[sample_record],
        created_at=datetime(2024, 1, 15, 9, 30),
    )


@pytest.fixture
def draft_project(regular_user):
    """공수 기록이 없는 초안 프로젝트 fixture."""
    return Project(
        id="p-draft",
        owner_id=regular_user.id,
        name="신규 포털",
        created_at=datetime(2024, 2, 1, 10, 0),
    )


@pytest.fixture
async def api_client(temp_store, id_generator, mock_claude_client):
    """
    httpx AsyncClient fixture (FastAPI 테스트용).
    저장소/ID 생성기/자문 견적 클라이언트를 테스트용으로 교체합니다.
    """
    from httpx import AsyncClient, ASGITransport
    from app.api.deps import get_advisory, get_ids, get_store
    from app.main import app

    app.dependency_overrides[get_store] = lambda: temp_store
    app.dependency_overrides[get_ids] = lambda: id_generator
    app.dependency_overrides[get_advisory] = lambda: AdvisoryEstimator(
        client=mock_claude_client, enabled=True, currency="USD"
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
