"""
사용자 및 세션 컨텍스트 모델입니다.
현재 사용자 정보는 전역 상태가 아니라 SessionContext로 명시적으로 전달됩니다.
"""

from enum import Enum
from pydantic import BaseModel

from .project import Project


class UserRole(str, Enum):
    """사용자 역할입니다."""

    ADMIN = "ADMIN"  # 전체 카탈로그/프로젝트 조회 및 수정 권한
    USER = "USER"    # 본인이 만든 프로젝트만 조회 가능


class User(BaseModel):
    id: str
    email: str
    name: str
    role: UserRole = UserRole.USER


class SessionContext(BaseModel):
    """요청을 보낸 사용자에 대한 세션 정보입니다."""

    user: User

    @property
    def user_id(self) -> str:
        return self.user.id

    @property
    def is_admin(self) -> bool:
        return self.user.role == UserRole.ADMIN

    def can_view(self, project: Project) -> bool:
        """관리자는 모든 프로젝트, 일반 사용자는 본인 프로젝트만 볼 수 있습니다."""
        return self.is_admin or project.owner_id == self.user.id
