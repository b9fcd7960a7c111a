"""
인증 서비스입니다.
사용자 디렉토리(users 문서)와 현재 세션 표시(current_session 문서)를 관리합니다.
비밀번호 없이 이메일만으로 로그인하는 단순 모델입니다.
"""

import logging
from typing import Optional

from app.exceptions import ConflictError, NotFoundError
from app.models import SessionContext, User, UserRole
from app.utils.ids import IdGenerator
from app.utils.validation import require_text

from .document_store import (
    CURRENT_SESSION_KEY,
    USERS_KEY,
    DocumentStore,
    parse_document,
    parse_document_list,
)

logger = logging.getLogger(__name__)


class AuthService:
    """로그인/회원가입/세션 관리."""

    def __init__(self, store: DocumentStore, id_generator: IdGenerator):
        self.store = store
        self.id_generator = id_generator

    async def list_users(self) -> list[User]:
        document = await self.store.load(USERS_KEY)
        if document is None:
            return []
        return parse_document_list(USERS_KEY, User, document)

    async def get_user(self, user_id: str) -> User:
        """ID로 사용자를 조회합니다."""
        for user in await self.list_users():
            if user.id == user_id:
                return user
        raise NotFoundError("사용자를 찾을 수 없습니다", details={"user_id": user_id})

    async def login(self, email: str) -> User:
        """
        이메일로 로그인합니다.

        Raises:
            NotFoundError: 등록되지 않은 이메일
        """
        for user in await self.list_users():
            if user.email == email:
                await self.store.save(CURRENT_SESSION_KEY, user.model_dump(mode="json"))
                logger.info(f"[AuthService] 로그인: {user.id}")
                return user
        raise NotFoundError("사용자를 찾을 수 없습니다", details={"email": email})

    async def register(self, name: str, email: str, role: UserRole = UserRole.USER) -> User:
        """
        새 사용자를 등록하고 바로 로그인 상태로 만듭니다.

        Raises:
            ValidationError: 이름 또는 이메일이 비어있는 경우
            ConflictError: 이미 등록된 이메일
        """
        name = require_text(name, "name")
        email = require_text(email, "email")

        users = await self.list_users()
        if any(user.email == email for user in users):
            raise ConflictError("이미 등록된 사용자입니다", details={"email": email})

        user = User(id=self.id_generator.new_id(), name=name, email=email, role=role)
        users.append(user)

        await self.store.save(USERS_KEY, [u.model_dump(mode="json") for u in users])
        await self.store.save(CURRENT_SESSION_KEY, user.model_dump(mode="json"))
        logger.info(f"[AuthService] 사용자 등록: {user.id} ({role.value})")
        return user

    async def logout(self) -> None:
        await self.store.remove(CURRENT_SESSION_KEY)

    async def current_user(self) -> Optional[User]:
        """마지막으로 로그인한 사용자를 반환합니다. 없으면 None."""
        document = await self.store.load(CURRENT_SESSION_KEY)
        return parse_document(CURRENT_SESSION_KEY, User, document) if document else None

    async def session_for(self, user_id: str) -> SessionContext:
        """사용자 ID로 세션 컨텍스트를 만듭니다."""
        return SessionContext(user=await self.get_user(user_id))
