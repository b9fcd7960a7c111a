"""
저장된 프로젝트 선택값과 현재 정의 카탈로그 사이의 불일치(schema drift)를 해소합니다.

범위 선택 병합 규칙:
┌──────────────────────────────┬─────────────────────────────────────────────┐
│ 상황                         │ 결과                                        │
├──────────────────────────────┼─────────────────────────────────────────────┤
│ 정의 O, 저장된 선택 O        │ is_in_scope 유지, category/item은 현재 값   │
│ 정의 O, 저장된 선택 X        │ is_in_scope = True (신규 정의 / 신규 프로젝트) │
│ 정의 X, 저장된 선택 O        │ 작업 목록에서 제외 (다음 저장 시 사라짐)    │
└──────────────────────────────┴─────────────────────────────────────────────┘

필드 값 병합 규칙도 같지만, 매칭되지 않는 현재 정의는 빈 문자열로 시작하고
정의가 삭제된 저장 값은 stale로 표시해 남겨둡니다 (필수 검증 제외).
"""

from typing import Optional, Sequence

from app.models import (
    FieldDefinition,
    FieldFormEntry,
    FieldValue,
    ScopeDefinition,
    ScopeSelection,
)


def reconcile_scope(
    stored: Optional[Sequence[ScopeSelection]],
    definitions: Sequence[ScopeDefinition],
) -> list[ScopeSelection]:
    """현재 범위 정의 전체를 덮는 작업용 선택 목록을 만듭니다 (정의 순서 유지)."""
    by_id = {selection.definition_id: selection for selection in stored or []}

    merged = []
    for definition in definitions:
        previous = by_id.get(definition.id)
        merged.append(
            ScopeSelection(
                definition_id=definition.id,
                category=definition.category,
                item=definition.item,
                is_in_scope=previous.is_in_scope if previous is not None else True,
            )
        )
    return merged


def reconcile_fields(
    stored: Optional[Sequence[FieldValue]],
    definitions: Sequence[FieldDefinition],
) -> list[FieldFormEntry]:
    """
    현재 필드 정의 순서대로 폼 항목을 만들고,
    정의가 사라진 저장 값은 stale 항목으로 뒤에 덧붙입니다.
    """
    by_id = {value.field_id: value for value in stored or []}
    current_ids = set()

    entries = []
    for definition in definitions:
        current_ids.add(definition.id)
        previous = by_id.get(definition.id)
        entries.append(
            FieldFormEntry(
                field_id=definition.id,
                label=definition.label,
                placeholder=definition.placeholder,
                required=definition.required,
                value=previous.value if previous is not None else "",
            )
        )

    for value in stored or []:
        if value.field_id not in current_ids:
            entries.append(
                FieldFormEntry(
                    field_id=value.field_id,
                    label=value.label,
                    required=False,
                    value=value.value,
                    stale=True,
                )
            )
    return entries


def missing_required_fields(entries: Sequence[FieldFormEntry]) -> list[FieldFormEntry]:
    """필수인데 값이 비어있는 항목들. stale 항목은 검사하지 않습니다."""
    return [
        entry for entry in entries
        if entry.required and not entry.stale and not entry.value.strip()
    ]
