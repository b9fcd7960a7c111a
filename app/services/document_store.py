"""
파일 기반 문서 저장소 서비스입니다.
데이터베이스 대신 파일 시스템을 키-값 문서 저장소로 사용합니다.

관리하는 문서 (키 하나당 JSON 파일 하나):
1. 사용자 목록 (users)
2. 프로젝트 목록 (projects)
3. 현재 세션 표시 (current_session)
4. 필드/범위/기술 컴포넌트 정의 카탈로그

모든 저장은 문서 단위 전체 교체이며 마지막 저장이 우선합니다 (버전 관리 없음).
"""

import json
import logging
import os
import aiofiles
from pathlib import Path
from typing import Any, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.config import get_settings
from app.exceptions import PersistenceError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


# 문서 키
USERS_KEY = "users"
PROJECTS_KEY = "projects"
CURRENT_SESSION_KEY = "current_session"
FIELD_DEFINITIONS_KEY = "field_definitions"
SCOPE_DEFINITIONS_KEY = "scope_definitions"
TECHNICAL_COMPONENTS_KEY = "technical_components"

KNOWN_KEYS = {
    USERS_KEY,
    PROJECTS_KEY,
    CURRENT_SESSION_KEY,
    FIELD_DEFINITIONS_KEY,
    SCOPE_DEFINITIONS_KEY,
    TECHNICAL_COMPONENTS_KEY,
}


class DocumentStore:
    """JSON 파일 기반의 단순 키-값 문서 저장소 클래스입니다."""

    def __init__(self, base_path: str = "data"):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if key not in KNOWN_KEYS:
            raise PersistenceError(f"알 수 없는 문서 키입니다: {key}", details={"key": key})
        return self.base_path / f"{key}.json"

    async def load(self, key: str) -> Optional[Any]:
        """
        문서를 불러옵니다. 문서가 없으면 None을 반환합니다.
        파일이 손상되었거나 읽을 수 없으면 PersistenceError가 발생합니다.
        """
        file_path = self._path(key)
        if not file_path.exists():
            return None

        try:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                content = await f.read()
            return json.loads(content)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"[DocumentStore] 문서 로딩 실패 {file_path}: {e}", exc_info=True)
            raise PersistenceError(
                f"문서를 불러오지 못했습니다: {key}",
                details={"key": key, "error": str(e)},
            )

    async def save(self, key: str, document: Any) -> None:
        """
        문서를 통째로 저장합니다.
        임시 파일에 먼저 쓴 뒤 교체하므로 읽는 쪽은 이전 문서나 새 문서 중 하나만 봅니다.
        """
        file_path = self._path(key)
        tmp_path = file_path.with_suffix(".json.tmp")

        try:
            content = json.dumps(document, ensure_ascii=False, indent=2)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(content)
            os.replace(tmp_path, file_path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"[DocumentStore] 문서 저장 실패 {file_path}: {e}", exc_info=True)
            raise PersistenceError(
                f"문서 저장에 실패했습니다: {key}",
                details={"key": key, "error": str(e)},
            )

    async def remove(self, key: str) -> None:
        """문서를 삭제합니다. 없는 문서를 삭제해도 에러가 아닙니다."""
        file_path = self._path(key)
        try:
            if file_path.exists():
                file_path.unlink()
        except OSError as e:
            logger.error(f"[DocumentStore] 문서 삭제 실패 {file_path}: {e}", exc_info=True)
            raise PersistenceError(
                f"문서 삭제에 실패했습니다: {key}",
                details={"key": key, "error": str(e)},
            )


def parse_document_list(key: str, model_class: type[ModelT], document: Any) -> list[ModelT]:
    """
    불러온 목록 문서를 모델 리스트로 변환합니다.

    문서가 리스트가 아니거나 항목 형식이 맞지 않으면 손상된 문서로 보고
    PersistenceError를 발생시킵니다.
    """
    if not isinstance(document, list):
        logger.error(f"[DocumentStore] 목록 문서 형식 오류: {key} ({type(document).__name__})")
        raise PersistenceError(
            f"문서 형식이 올바르지 않습니다: {key}",
            details={"key": key, "error": f"expected list, got {type(document).__name__}"},
        )
    try:
        return [model_class.model_validate(item) for item in document]
    except PydanticValidationError as e:
        logger.error(f"[DocumentStore] 문서 항목 형식 오류: {key}: {e}")
        raise PersistenceError(
            f"문서 형식이 올바르지 않습니다: {key}",
            details={"key": key, "error": str(e)},
        ) from e


def parse_document(key: str, model_class: type[ModelT], document: Any) -> ModelT:
    """불러온 단일 문서를 모델로 변환합니다. 형식이 맞지 않으면 PersistenceError."""
    try:
        return model_class.model_validate(document)
    except PydanticValidationError as e:
        logger.error(f"[DocumentStore] 문서 형식 오류: {key}: {e}")
        raise PersistenceError(
            f"문서 형식이 올바르지 않습니다: {key}",
            details={"key": key, "error": str(e)},
        ) from e


# 싱글톤 인스턴스 (프로그램 전체에서 공유)
_document_store: Optional[DocumentStore] = None


def get_document_store() -> DocumentStore:
    """DocumentStore 인스턴스를 반환합니다."""
    global _document_store
    if _document_store is None:
        _document_store = DocumentStore(base_path=get_settings().data_dir)
    return _document_store
