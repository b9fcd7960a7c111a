"""
프로젝트 입력 폼 관련 모델입니다.
저장된 프로젝트와 현재 정의를 병합(reconcile)한 편집 상태와,
사용자가 제출하는 입력 데이터를 정의합니다.
"""

from typing import Optional
from pydantic import BaseModel, Field

from .project import (
    ComponentComplexity,
    ComponentType,
    ProjectComplexity,
    ScopeSelection,
)


class FieldFormEntry(BaseModel):
    """
    폼에 표시되는 필드 하나입니다.
    stale=True 인 항목은 정의가 삭제된 과거 값으로, 표시만 하고 필수 검증에서 제외합니다.
    """

    field_id: str
    label: str
    placeholder: Optional[str] = None
    required: bool = False
    value: str = ""
    stale: bool = False


class ProjectForm(BaseModel):
    """프로젝트 생성/수정 화면의 편집 상태."""

    project_id: Optional[str] = None
    name: str = ""
    description: str = ""
    complexity: ProjectComplexity = ProjectComplexity.MEDIUM
    fields: list[FieldFormEntry] = Field(default_factory=list)
    scope: list[ScopeSelection] = Field(default_factory=list)


class ProjectSubmission(BaseModel):
    """프로젝트 생성/수정 요청 데이터."""

    name: str
    description: str = ""
    complexity: ProjectComplexity = ProjectComplexity.MEDIUM
    field_values: dict[str, str] = Field(default_factory=dict, description="필드 ID → 값")
    scope: dict[str, bool] = Field(default_factory=dict, description="범위 정의 ID → 포함 여부")


class EffortInput(BaseModel):
    """공수 기록 추가 요청 데이터. 음수나 NaN/무한대 값 검증은 서비스에서 수행합니다."""

    component_id: str
    type: ComponentType = ComponentType.NEW
    complexity: ComponentComplexity = ComponentComplexity.MEDIUM
    development_days: float = 0.0
    analysis_ratio: float = 0.0
    design_ratio: float = 0.0
    test_ratio: float = 0.0
    deploy_ratio: float = 0.0
