"""
프로젝트 계획 서비스입니다.

화면 단위로 흩어져 있던 흐름을 한 곳에 모읍니다:
1. 폼 열기: 저장된 프로젝트 + 현재 정의 → 편집 상태 (reconciliation)
2. 폼 제출: 필수 값 검증 후 프로젝트 저장
3. 공수 기록 추가/교체/삭제
4. 보고서 생성 (집계 → 투영)
"""

import logging
from typing import Optional, Sequence

from app.config import get_settings
from app.estimation import (
    aggregate,
    build_report,
    missing_required_fields,
    reconcile_fields,
    reconcile_scope,
)
from app.exceptions import NotFoundError, ValidationError
from app.models import (
    EffortInput,
    EffortSummary,
    EstimateResult,
    FieldValue,
    Project,
    ProjectEffortRecord,
    ProjectForm,
    ProjectReport,
    ProjectSubmission,
    SessionContext,
    TechnicalComponent,
)
from app.utils.ids import IdGenerator
from app.utils.validation import require_text, validate_effort_values

from .definition_store import DefinitionStore
from .project_repository import ProjectRepository

logger = logging.getLogger(__name__)


def new_effort_record(
    effort: EffortInput,
    component: TechnicalComponent,
    record_id: str,
) -> ProjectEffortRecord:
    """
    공수 입력을 검증하고 기록을 만듭니다.
    컴포넌트 이름은 현재 카탈로그 값을 복사해 두며 이후 다시 계산하지 않습니다.

    Raises:
        InvalidEffortInputError: 개발 일수 또는 비율이 음수인 경우
    """
    validate_effort_values(
        effort.development_days,
        effort.analysis_ratio,
        effort.design_ratio,
        effort.test_ratio,
        effort.deploy_ratio,
    )
    return ProjectEffortRecord(
        id=record_id,
        component_id=component.id,
        component_name=component.name,
        type=effort.type,
        complexity=effort.complexity,
        development_days=effort.development_days,
        analysis_ratio=effort.analysis_ratio,
        design_ratio=effort.design_ratio,
        test_ratio=effort.test_ratio,
        deploy_ratio=effort.deploy_ratio,
    )


class ProjectService:
    """프로젝트 생성/수정, 공수 계획, 보고서 흐름."""

    def __init__(
        self,
        definitions: DefinitionStore,
        projects: ProjectRepository,
        id_generator: IdGenerator,
        daily_rate: Optional[float] = None,
        currency: Optional[str] = None,
        working_days_per_week: Optional[int] = None,
    ):
        settings = get_settings()
        self.definitions = definitions
        self.projects = projects
        self.id_generator = id_generator
        self.daily_rate = settings.daily_rate if daily_rate is None else daily_rate
        self.currency = currency or settings.currency
        self.working_days_per_week = (
            settings.working_days_per_week if working_days_per_week is None else working_days_per_week
        )

    # ==================== 프로젝트 폼 ====================

    async def open_form(
        self, session: SessionContext, project_id: Optional[str] = None
    ) -> ProjectForm:
        """
        편집 가능한 폼 상태를 만듭니다.
        신규 프로젝트면 모든 범위 항목이 포함(True), 필드는 빈 값으로 시작합니다.
        """
        field_defs = await self.definitions.list_fields()
        scope_defs = await self.definitions.list_scope()

        if project_id is None:
            return ProjectForm(
                fields=reconcile_fields(None, field_defs),
                scope=reconcile_scope(None, scope_defs),
            )

        project = await self.projects.get(session, project_id)
        return ProjectForm(
            project_id=project.id,
            name=project.name,
            description=project.description,
            complexity=project.complexity,
            fields=reconcile_fields(project.custom_fields, field_defs),
            scope=reconcile_scope(project.scope_selections, scope_defs),
        )

    async def submit_form(
        self,
        session: SessionContext,
        submission: ProjectSubmission,
        project_id: Optional[str] = None,
    ) -> Project:
        """
        폼 제출을 검증하고 프로젝트를 저장합니다.

        - 프로젝트 이름과 현재 정의 중 필수 필드는 비어있으면 안 됨
        - 필드 라벨/범위 항목명은 현재 정의 값을 복사해 저장
        - 정의가 삭제된 기존 필드 값은 그대로 보존
        - 기존 프로젝트의 공수 기록, 생성일, 소유자, 자문 견적은 유지

        Raises:
            ValidationError: 이름 또는 필수 필드 누락
            NotFoundError: 수정할 프로젝트가 없는 경우
        """
        name = require_text(submission.name, "name")

        existing: Optional[Project] = None
        if project_id is not None:
            existing = await self.projects.get(session, project_id)

        field_defs = await self.definitions.list_fields()
        scope_defs = await self.definitions.list_scope()

        entries = reconcile_fields(existing.custom_fields if existing else None, field_defs)
        for entry in entries:
            if not entry.stale and entry.field_id in submission.field_values:
                entry.value = submission.field_values[entry.field_id]

        missing = missing_required_fields(entries)
        if missing:
            labels = [entry.label for entry in missing]
            raise ValidationError(
                f"필수 항목이 비어있습니다: {', '.join(labels)}",
                field=missing[0].field_id,
                details={"fields": [entry.field_id for entry in missing], "labels": labels},
            )

        scope = reconcile_scope(existing.scope_selections if existing else None, scope_defs)
        for selection in scope:
            if selection.definition_id in submission.scope:
                selection.is_in_scope = submission.scope[selection.definition_id]

        custom_fields = [
            FieldValue(field_id=entry.field_id, label=entry.label, value=entry.value)
            for entry in entries
        ]

        if existing is None:
            project = Project(
                id=self.id_generator.new_id(),
                owner_id=session.user_id,
                name=name,
                description=submission.description,
                complexity=submission.complexity,
                custom_fields=custom_fields,
                scope_selections=scope,
            )
        else:
            project = existing.model_copy(update={
                "name": name,
                "description": submission.description,
                "complexity": submission.complexity,
                "custom_fields": custom_fields,
                "scope_selections": scope,
            })

        await self.projects.save(session, project)
        return project

    # ==================== 공수 기록 ====================

    async def add_effort(
        self, session: SessionContext, project_id: str, effort: EffortInput
    ) -> Project:
        """공수 기록 하나를 추가하고 프로젝트를 저장합니다."""
        project = await self.projects.get(session, project_id)
        component = await self.definitions.get_component(effort.component_id)
        record = new_effort_record(effort, component, self.id_generator.new_id())

        updated = project.model_copy(update={"efforts": [*(project.efforts or []), record]})
        await self.projects.save(session, updated)
        logger.info(f"[ProjectService] 공수 추가: {project_id} / {component.name}")
        return updated

    async def replace_efforts(
        self, session: SessionContext, project_id: str, efforts: Sequence[EffortInput]
    ) -> Project:
        """
        공수 기록 목록을 통째로 교체합니다.
        하나라도 잘못된 입력이 있으면 아무것도 저장하지 않습니다.
        """
        project = await self.projects.get(session, project_id)
        components = {c.id: c for c in await self.definitions.list_components()}

        records = []
        for effort in efforts:
            component = components.get(effort.component_id)
            if component is None:
                raise NotFoundError(
                    "기술 컴포넌트를 찾을 수 없습니다",
                    details={"component_id": effort.component_id},
                )
            records.append(new_effort_record(effort, component, self.id_generator.new_id()))

        updated = project.model_copy(update={"efforts": records})
        await self.projects.save(session, updated)
        return updated

    async def remove_effort(
        self, session: SessionContext, project_id: str, effort_id: str
    ) -> Project:
        project = await self.projects.get(session, project_id)
        efforts = project.efforts or []
        remaining = [record for record in efforts if record.id != effort_id]
        if len(remaining) == len(efforts):
            raise NotFoundError(
                "공수 기록을 찾을 수 없습니다",
                details={"project_id": project_id, "effort_id": effort_id},
            )

        updated = project.model_copy(update={"efforts": remaining})
        await self.projects.save(session, updated)
        return updated

    # ==================== 보고서 ====================

    def summarize(self, project: Project) -> EffortSummary:
        return aggregate(
            project.efforts or [],
            daily_rate=self.daily_rate,
            working_days_per_week=self.working_days_per_week,
        )

    async def build_report(self, session: SessionContext, project_id: str) -> ProjectReport:
        project = await self.projects.get(session, project_id)
        return build_report(project, self.summarize(project), currency=self.currency)

    # ==================== 자문 견적 ====================

    async def save_estimate(
        self, session: SessionContext, project_id: str, estimate: EstimateResult
    ) -> Project:
        """자문 견적 결과를 프로젝트에 기록합니다. 공수 기록과 집계에는 영향이 없습니다."""
        project = await self.projects.get(session, project_id)
        updated = project.model_copy(update={"estimate": estimate})
        await self.projects.save(session, updated)
        return updated
