"""
정의 저장소(Definition Store) 서비스입니다.

세 가지 카탈로그를 각각 독립적인 문서로 관리합니다:
1. 필드 정의 (FieldDefinition)
2. 범위 정의 (ScopeDefinition)
3. 기술 컴포넌트 (TechnicalComponent)

저장은 카탈로그 단위 전체 교체(full replace)이며 항목 단위 병합을 하지 않습니다.
이 저장소는 프로젝트를 알지 못합니다. 프로젝트가 참조 중인 정의를 삭제해도
그대로 성공하며, 어긋난 참조는 reconciliation 단계에서 처리합니다.
"""

import logging
from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.config import get_settings
from app.exceptions import NotFoundError, ValidationError
from app.models import (
    DEFINITION_MODELS,
    Definition,
    DefinitionKind,
    FieldDefinition,
    ScopeDefinition,
    TechnicalComponent,
)
from app.utils.ids import IdGenerator
from app.utils.validation import require_text, validate_unique_ids

from .default_definitions import (
    DEFAULT_FIELD_DEFINITIONS,
    DEFAULT_SCOPE_DEFINITIONS,
    DEFAULT_TECHNICAL_COMPONENTS,
)
from .document_store import (
    DocumentStore,
    FIELD_DEFINITIONS_KEY,
    SCOPE_DEFINITIONS_KEY,
    TECHNICAL_COMPONENTS_KEY,
    parse_document_list,
)

logger = logging.getLogger(__name__)


DOCUMENT_KEYS: dict[DefinitionKind, str] = {
    DefinitionKind.FIELDS: FIELD_DEFINITIONS_KEY,
    DefinitionKind.SCOPE: SCOPE_DEFINITIONS_KEY,
    DefinitionKind.COMPONENTS: TECHNICAL_COMPONENTS_KEY,
}

DEFAULTS: dict[DefinitionKind, list[BaseModel]] = {
    DefinitionKind.FIELDS: DEFAULT_FIELD_DEFINITIONS,
    DefinitionKind.SCOPE: DEFAULT_SCOPE_DEFINITIONS,
    DefinitionKind.COMPONENTS: DEFAULT_TECHNICAL_COMPONENTS,
}

DefinitionInput = Union[BaseModel, dict[str, Any]]


class DefinitionStore:
    """관리자용 정의 카탈로그 저장소."""

    def __init__(
        self,
        store: DocumentStore,
        id_generator: IdGenerator,
        seed_defaults: bool = True,
    ):
        self.store = store
        self.id_generator = id_generator
        self.seed_defaults = seed_defaults

    async def list_definitions(self, kind: DefinitionKind) -> list[Definition]:
        """
        카탈로그 전체를 조회합니다.

        - 필드 정의는 order 순으로 정렬 (같은 order는 저장 순서 유지)
        - 범위/컴포넌트는 저장된 순서 그대로
        - 문서가 아예 없으면 기본 데이터로 초기화(seeding) 후 반환
        """
        key = DOCUMENT_KEYS[kind]
        document = await self.store.load(key)

        if document is None:
            if not self.seed_defaults:
                return []
            logger.info(f"[DefinitionStore] 기본 {kind.value} 정의로 초기화합니다")
            defaults = [item.model_copy(deep=True) for item in DEFAULTS[kind]]
            await self.store.save(key, [item.model_dump(mode="json") for item in defaults])
            return self._ordered(kind, defaults)

        definitions = parse_document_list(key, DEFINITION_MODELS[kind], document)
        return self._ordered(kind, definitions)

    async def upsert_all(
        self,
        kind: DefinitionKind,
        definitions: Sequence[DefinitionInput],
    ) -> list[Definition]:
        """
        카탈로그 전체를 교체합니다.

        ID가 없는 항목은 새 ID를 발급받고, order가 없는 필드 정의는 맨 뒤 순서를 받습니다.
        검증에 실패하면 아무것도 저장하지 않습니다.

        Raises:
            ValidationError: 라벨/항목명/카테고리가 비어있거나 ID가 중복된 경우
        """
        prepared = self._prepare(kind, definitions)
        self._validate(kind, prepared)

        await self.store.save(
            DOCUMENT_KEYS[kind],
            [item.model_dump(mode="json") for item in prepared],
        )
        logger.info(f"[DefinitionStore] {kind.value} 카탈로그 저장 완료: {len(prepared)}개")
        return self._ordered(kind, prepared)

    # ==================== 편의 조회 함수들 ====================

    async def list_fields(self) -> list[FieldDefinition]:
        return await self.list_definitions(DefinitionKind.FIELDS)

    async def list_scope(self) -> list[ScopeDefinition]:
        return await self.list_definitions(DefinitionKind.SCOPE)

    async def list_components(self) -> list[TechnicalComponent]:
        return await self.list_definitions(DefinitionKind.COMPONENTS)

    async def get_component(self, component_id: str) -> TechnicalComponent:
        """ID로 기술 컴포넌트를 조회합니다."""
        for component in await self.list_components():
            if component.id == component_id:
                return component
        raise NotFoundError(
            "기술 컴포넌트를 찾을 수 없습니다",
            details={"component_id": component_id},
        )

    # ==================== 내부 도우미 함수들 ====================

    def _prepare(
        self, kind: DefinitionKind, definitions: Sequence[DefinitionInput]
    ) -> list[Definition]:
        """입력 항목을 모델로 변환하면서 빠진 ID/순서를 채웁니다."""
        model_class = DEFINITION_MODELS[kind]
        raw_items = [
            item.model_dump() if isinstance(item, BaseModel) else dict(item)
            for item in definitions
        ]

        next_order = 1
        if kind == DefinitionKind.FIELDS:
            orders = [item["order"] for item in raw_items if isinstance(item.get("order"), int)]
            next_order = max(orders, default=0) + 1

        prepared = []
        for raw in raw_items:
            if not raw.get("id"):
                raw["id"] = self.id_generator.new_id()
            if kind == DefinitionKind.FIELDS and raw.get("order") is None:
                raw["order"] = next_order
                next_order += 1
            # 필수 문자열이 빠진 경우 빈 문자열로 두고 _validate에서 필드명과 함께 거부
            for name in self._required_text_fields(kind):
                if raw.get(name) is None:
                    raw[name] = ""
            try:
                prepared.append(model_class.model_validate(raw))
            except PydanticValidationError as e:
                raise ValidationError(
                    f"{kind.value} 정의 형식이 올바르지 않습니다",
                    details={"id": raw["id"], "error": str(e)},
                ) from e
        return prepared

    def _validate(self, kind: DefinitionKind, definitions: list[Definition]) -> None:
        for definition in definitions:
            for name in self._required_text_fields(kind):
                require_text(getattr(definition, name), name, context=definition.id)
        validate_unique_ids([d.id for d in definitions], kind.value)

    @staticmethod
    def _required_text_fields(kind: DefinitionKind) -> tuple[str, ...]:
        if kind == DefinitionKind.FIELDS:
            return ("label",)
        if kind == DefinitionKind.SCOPE:
            return ("category", "item")
        return ("name",)

    @staticmethod
    def _ordered(kind: DefinitionKind, definitions: list[Definition]) -> list[Definition]:
        if kind == DefinitionKind.FIELDS:
            return sorted(definitions, key=lambda d: d.order)
        return list(definitions)


def create_definition_store(
    store: DocumentStore,
    id_generator: IdGenerator,
    seed_defaults: Optional[bool] = None,
) -> DefinitionStore:
    """설정값을 반영한 DefinitionStore를 생성합니다."""
    if seed_defaults is None:
        seed_defaults = get_settings().seed_default_definitions
    return DefinitionStore(store, id_generator, seed_defaults=seed_defaults)
