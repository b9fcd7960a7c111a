"""
프로젝트(Project) 데이터 모델입니다.
프로젝트는 필드 값, 범위 선택, 공수 기록을 내장(embedded) 형태로 소유합니다.
내장 항목들의 라벨/이름은 저장 시점의 스냅샷이며, 정의가 바뀌어도 다시 계산하지 않습니다.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from .estimate import EstimateResult


class ProjectComplexity(str, Enum):
    """프로젝트 전체 복잡도입니다."""

    SIMPLE = "SIMPLE"          # 단순
    MEDIUM = "MEDIUM"          # 보통
    COMPLEX = "COMPLEX"        # 복잡
    ENTERPRISE = "ENTERPRISE"  # 엔터프라이즈


class ComponentType(str, Enum):
    """기술 컴포넌트 작업 유형입니다."""

    NEW = "NEW"        # 신규 개발
    UPDATE = "UPDATE"  # 기존 컴포넌트 수정


class ComponentComplexity(str, Enum):
    """기술 컴포넌트 단위 복잡도입니다."""

    VERY_LOW = "VERY_LOW"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ProjectStatus(str, Enum):
    """프로젝트 상태입니다. 공수 기록이 하나라도 있으면 PLANNED."""

    DRAFT = "draft"
    PLANNED = "planned"


class FieldValue(BaseModel):
    """
    사용자 정의 필드 값입니다.
    label은 정의의 라벨이 나중에 바뀌어도 당시 의미를 보존하기 위한 복사본입니다.
    """

    field_id: str
    label: str
    value: str = ""


class ScopeSelection(BaseModel):
    """범위 항목 하나에 대한 포함/제외 표시입니다."""

    definition_id: str
    category: str
    item: str
    is_in_scope: bool = True


class ProjectEffortRecord(BaseModel):
    """
    기술 컴포넌트 하나에 대한 공수 기록입니다.

    비율(%)들은 development_days에 각각 독립적으로 적용되며 합이 100일 필요가 없습니다.
    - 단계 일수 = development_days * ratio / 100
    - 기록 총 공수 = development_days + 단계 일수의 합

    값의 유효성(음수 불가)은 기록 생성 시점에 검증되므로,
    저장된 기록은 항상 유효하다고 가정합니다.
    """

    id: str
    component_id: str
    component_name: str = Field(..., description="표시용 컴포넌트 이름 (스냅샷)")
    type: ComponentType = ComponentType.NEW
    complexity: ComponentComplexity = ComponentComplexity.MEDIUM

    # 공수 (M/D)
    development_days: float = Field(0.0, description="기본 개발 공수 (일)")

    # 비율 (%)
    analysis_ratio: float = 0.0
    design_ratio: float = 0.0
    test_ratio: float = 0.0
    deploy_ratio: float = 0.0


class Project(BaseModel):
    """
    프로젝트 레코드입니다.
    efforts가 없거나 비어있으면 초안(draft), 공수 기록이 있으면 계획됨(planned) 상태입니다.
    """

    id: str
    owner_id: str = Field(..., description="프로젝트를 생성한 사용자 ID")
    name: str
    description: str = ""
    complexity: ProjectComplexity = ProjectComplexity.MEDIUM
    custom_fields: list[FieldValue] = Field(default_factory=list)
    scope_selections: list[ScopeSelection] = Field(default_factory=list)
    efforts: Optional[list[ProjectEffortRecord]] = None
    created_at: datetime = Field(default_factory=datetime.now)
    estimate: Optional[EstimateResult] = Field(
        default=None, description="마지막 자문 견적 결과 (참고용, 집계에 사용하지 않음)"
    )

    @property
    def status(self) -> ProjectStatus:
        if self.efforts:
            return ProjectStatus.PLANNED
        return ProjectStatus.DRAFT

    def to_document(self) -> dict:
        """저장용 JSON 문서로 변환합니다. 초안 프로젝트는 efforts 키를 남기지 않습니다."""
        document = self.model_dump(mode="json")
        if self.efforts is None:
            document.pop("efforts", None)
        return document
