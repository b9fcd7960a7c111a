"""
정의 카탈로그 API입니다.
필드 정의, 범위 정의, 기술 컴포넌트를 조회하고 (관리자만) 통째로 교체합니다.
"""

from typing import Any

from fastapi import APIRouter, Depends

from app.api.deps import get_definition_store, get_session, require_admin
from app.models import DefinitionKind, SessionContext
from app.services import DefinitionStore

router = APIRouter()


@router.get("/{kind}")
async def list_definitions(
    kind: DefinitionKind,
    session: SessionContext = Depends(get_session),
    definitions: DefinitionStore = Depends(get_definition_store),
) -> dict:
    """카탈로그 조회 (필드 정의는 order 순)"""
    items = await definitions.list_definitions(kind)
    return {
        "kind": kind.value,
        "total": len(items),
        "items": [item.model_dump(mode="json") for item in items],
    }


@router.put("/{kind}")
async def replace_definitions(
    kind: DefinitionKind,
    items: list[dict[str, Any]],
    session: SessionContext = Depends(require_admin),
    definitions: DefinitionStore = Depends(get_definition_store),
) -> dict:
    """
    카탈로그 전체 교체 (관리자 전용).
    id가 없는 항목은 새 id가 발급되며, 빠진 항목은 삭제됩니다.
    """
    saved = await definitions.upsert_all(kind, items)
    return {
        "kind": kind.value,
        "total": len(saved),
        "items": [item.model_dump(mode="json") for item in saved],
    }
