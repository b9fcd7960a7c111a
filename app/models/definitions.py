"""
정의(Definition) 데이터 모델입니다.
관리자가 관리하는 템플릿(사용자 정의 필드, 범위 항목, 기술 컴포넌트)을 정의합니다.
프로젝트는 이 정의들을 ID로 참조만 하고 소유하지 않습니다.
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field


class DefinitionKind(str, Enum):
    """정의 카탈로그 종류입니다."""

    FIELDS = "fields"          # 사용자 정의 필드
    SCOPE = "scope"            # 범위 항목
    COMPONENTS = "components"  # 기술 컴포넌트


class FieldDefinition(BaseModel):
    """
    프로젝트 메타데이터 입력 필드 정의입니다.
    order 값 순서대로 화면에 표시되고 검증됩니다 (연속일 필요 없음).
    """

    id: str = Field(..., description="필드 ID (프로젝트가 참조한 뒤에는 변경 불가)")
    label: str = Field(..., description="필드 라벨")
    placeholder: Optional[str] = Field(default=None, description="입력 예시 문구")
    required: bool = Field(default=False, description="필수 입력 여부")
    order: int = Field(default=0, description="표시/검증 순서")


class ScopeDefinition(BaseModel):
    """범위 항목 정의입니다. category는 화면 그룹핑용 자유 텍스트입니다."""

    id: str
    category: str = Field(..., description="그룹 라벨 (예: 분석, 테스트)")
    item: str = Field(..., description="항목명 (예: 업무 분석, 단위 테스트)")


class TechnicalComponent(BaseModel):
    """
    기술 컴포넌트 카탈로그 항목입니다.
    재사용 가능한 엔지니어링 작업 단위와 복잡도를 결정하는 기준을 설명합니다.
    자유 텍스트만 가지며 계산에는 직접 사용되지 않습니다.
    """

    id: str
    name: str = Field(..., description="컴포넌트 이름")
    description: str = Field(default="", description="컴포넌트 정의")
    usage: str = Field(default="", description="컴포넌트 사용처")
    complexity_criteria: str = Field(default="", description="복잡도를 결정하는 기준")


Definition = Union[FieldDefinition, ScopeDefinition, TechnicalComponent]

DEFINITION_MODELS: dict[DefinitionKind, type[BaseModel]] = {
    DefinitionKind.FIELDS: FieldDefinition,
    DefinitionKind.SCOPE: ScopeDefinition,
    DefinitionKind.COMPONENTS: TechnicalComponent,
}
