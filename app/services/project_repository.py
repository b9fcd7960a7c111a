"""
프로젝트 저장소입니다.
프로젝트 목록 전체를 하나의 문서(projects)로 읽고, 수정하고, 통째로 다시 저장합니다.
동시 저장 시에는 마지막 저장이 우선합니다.
"""

import logging

from app.exceptions import NotFoundError, PermissionDeniedError
from app.models import Project, SessionContext

from .document_store import PROJECTS_KEY, DocumentStore, parse_document_list

logger = logging.getLogger(__name__)


class ProjectRepository:
    """세션 권한을 확인하는 프로젝트 CRUD."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def _load_all(self) -> list[Project]:
        document = await self.store.load(PROJECTS_KEY)
        if document is None:
            return []
        return parse_document_list(PROJECTS_KEY, Project, document)

    async def _save_all(self, projects: list[Project]) -> None:
        await self.store.save(PROJECTS_KEY, [p.to_document() for p in projects])

    async def list_projects(self, session: SessionContext) -> list[Project]:
        """
        볼 수 있는 프로젝트 목록을 최신 생성순으로 반환합니다.
        관리자는 전체, 일반 사용자는 본인 프로젝트만 조회됩니다.
        """
        projects = [p for p in await self._load_all() if session.can_view(p)]
        return sorted(projects, key=lambda p: p.created_at, reverse=True)

    async def get(self, session: SessionContext, project_id: str) -> Project:
        """
        ID로 프로젝트를 조회합니다.

        Raises:
            NotFoundError: 프로젝트가 없는 경우
            PermissionDeniedError: 다른 사용자의 프로젝트인 경우
        """
        for project in await self._load_all():
            if project.id == project_id:
                if not session.can_view(project):
                    raise PermissionDeniedError(
                        "이 프로젝트에 접근할 권한이 없습니다",
                        details={"project_id": project_id},
                    )
                return project
        raise NotFoundError("프로젝트를 찾을 수 없습니다", details={"project_id": project_id})

    async def save(self, session: SessionContext, project: Project) -> Project:
        """프로젝트를 저장합니다 (같은 ID가 있으면 교체, 없으면 추가)."""
        if not session.can_view(project):
            raise PermissionDeniedError(
                "다른 사용자의 프로젝트는 저장할 수 없습니다",
                details={"project_id": project.id},
            )

        projects = await self._load_all()
        for index, existing in enumerate(projects):
            if existing.id == project.id:
                if not session.can_view(existing):
                    raise PermissionDeniedError(
                        "이 프로젝트에 접근할 권한이 없습니다",
                        details={"project_id": project.id},
                    )
                projects[index] = project
                break
        else:
            projects.append(project)

        await self._save_all(projects)
        logger.info(f"[ProjectRepository] 프로젝트 저장: {project.id} ({project.status.value})")
        return project

    async def delete(self, session: SessionContext, project_id: str) -> None:
        """
        프로젝트를 삭제합니다.

        Raises:
            NotFoundError: 프로젝트가 없는 경우
        """
        project = await self.get(session, project_id)
        projects = [p for p in await self._load_all() if p.id != project.id]
        await self._save_all(projects)
        logger.info(f"[ProjectRepository] 프로젝트 삭제: {project_id}")
