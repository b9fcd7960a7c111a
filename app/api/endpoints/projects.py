"""
프로젝트 API입니다.

프로젝트 생성/수정 폼, 공수 기록, 보고서 조회 및 내보내기, 자문 견적 요청을 제공합니다.
모든 요청은 X-User-Id 헤더로 사용자를 식별하며,
일반 사용자는 본인이 만든 프로젝트만 다룰 수 있습니다.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from app.api.deps import get_advisory, get_project_service, get_session
from app.models import (
    EffortInput,
    EstimateResult,
    Project,
    ProjectForm,
    ProjectReport,
    ProjectSubmission,
    SessionContext,
)
from app.services import AdvisoryEstimator, ProjectService

logger = logging.getLogger(__name__)

router = APIRouter()


def _project_view(project: Project, service: ProjectService) -> dict:
    """프로젝트 응답: 저장 문서 + 상태 + 현재 집계 결과."""
    view = project.to_document()
    view["status"] = project.status.value
    view["summary"] = service.summarize(project).model_dump(mode="json")
    return view


# ==================== 프로젝트 ====================

@router.get("")
async def list_projects(
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    """볼 수 있는 프로젝트 목록 (최신순)"""
    projects = await service.projects.list_projects(session)

    return {
        "total": len(projects),
        "projects": [
            {
                "id": project.id,
                "name": project.name,
                "owner_id": project.owner_id,
                "complexity": project.complexity.value,
                "status": project.status.value,
                "effort_count": len(project.efforts or []),
                "created_at": project.created_at.isoformat(),
            }
            for project in projects
        ],
    }


@router.get("/form")
async def new_project_form(
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> ProjectForm:
    """신규 프로젝트 입력 폼 (모든 범위 항목 포함 상태)"""
    return await service.open_form(session)


@router.post("", status_code=201)
async def create_project(
    submission: ProjectSubmission,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    project = await service.submit_form(session, submission)
    return _project_view(project, service)


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    project = await service.projects.get(session, project_id)
    return _project_view(project, service)


@router.get("/{project_id}/form")
async def edit_project_form(
    project_id: str,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> ProjectForm:
    """기존 프로젝트 수정 폼 (현재 정의와 병합된 상태)"""
    return await service.open_form(session, project_id)


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    submission: ProjectSubmission,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    project = await service.submit_form(session, submission, project_id)
    return _project_view(project, service)


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    await service.projects.delete(session, project_id)
    return {"message": "프로젝트가 삭제되었습니다", "project_id": project_id}


# ==================== 공수 기록 ====================

@router.post("/{project_id}/efforts", status_code=201)
async def add_effort(
    project_id: str,
    effort: EffortInput,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    project = await service.add_effort(session, project_id, effort)
    return _project_view(project, service)


@router.put("/{project_id}/efforts")
async def replace_efforts(
    project_id: str,
    efforts: list[EffortInput],
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    """공수 기록 전체 교체 (하나라도 잘못되면 저장하지 않음)"""
    project = await service.replace_efforts(session, project_id, efforts)
    return _project_view(project, service)


@router.delete("/{project_id}/efforts/{effort_id}")
async def remove_effort(
    project_id: str,
    effort_id: str,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> dict:
    project = await service.remove_effort(session, project_id, effort_id)
    return _project_view(project, service)


# ==================== 보고서 ====================

@router.get("/{project_id}/report")
async def get_report(
    project_id: str,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> ProjectReport:
    """공수 보고서 (단계별 분포, 컴포넌트별 공수, 범위 요약)"""
    return await service.build_report(session, project_id)


@router.get("/{project_id}/report/export")
async def export_report(
    project_id: str,
    format: str = "markdown",
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
) -> Response:
    """
    보고서를 파일로 다운로드하는 API.

    지원하는 형식:
    - markdown: 마크다운 텍스트 파일 (.md)
    - json: 데이터 원본 파일 (.json)
    """
    report = await service.build_report(session, project_id)
    filename = f"{report.project_id}_report"

    if format == "markdown":
        return Response(
            content=report.to_markdown(),
            media_type="text/markdown",
            headers={
                "Content-Disposition": f'attachment; filename="{filename}.md"'
            }
        )
    elif format == "json":
        return Response(
            content=report.model_dump_json(indent=2),
            media_type="application/json",
            headers={
                "Content-Disposition": f'attachment; filename="{filename}.json"'
            }
        )
    else:
        raise HTTPException(
            status_code=400,
            detail=f"지원하지 않는 형식입니다: {format}"
        )


# ==================== 자문 견적 ====================

@router.post("/{project_id}/advisory-estimate")
async def request_advisory_estimate(
    project_id: str,
    save: bool = False,
    session: SessionContext = Depends(get_session),
    service: ProjectService = Depends(get_project_service),
    advisor: AdvisoryEstimator = Depends(get_advisory),
) -> EstimateResult:
    """
    Claude에게 참고용 견적을 요청합니다.
    save=true면 결과를 프로젝트에 기록합니다 (수동 공수 집계에는 영향 없음).
    """
    project = await service.projects.get(session, project_id)
    estimate = await advisor.estimate(project)

    if save:
        await service.save_estimate(session, project_id, estimate)
        logger.info(f"[Projects] 자문 견적 저장: {project_id}")

    return estimate
