"""
보고서 투영(Reporting Projection).

집계 결과(EffortSummary)를 차트가 바로 쓸 수 있는 라벨/값 목록으로 바꿉니다.
여기서는 반올림과 라벨 변경만 하며 별도의 계산은 하지 않습니다.
"""

from collections import OrderedDict
from typing import Sequence

from app.models import (
    EffortSummary,
    Project,
    ProjectReport,
    ScopeGroup,
    ScopeSelection,
    SeriesPoint,
)

# 단계 표시 순서: 분석 → 설계 → 개발 → 테스트 → 배포
PHASE_LABELS = OrderedDict([
    ("total_analysis", "분석"),
    ("total_design", "설계"),
    ("total_dev", "개발"),
    ("total_test", "테스트"),
    ("total_deploy", "배포"),
])

DISPLAY_PRECISION = 2


def phase_distribution(summary: EffortSummary) -> list[SeriesPoint]:
    """단계별 공수 분포 (소수 둘째 자리 반올림)."""
    return [
        SeriesPoint(label=label, value=round(getattr(summary, attr), DISPLAY_PRECISION))
        for attr, label in PHASE_LABELS.items()
    ]


def component_series(summary: EffortSummary) -> list[SeriesPoint]:
    """컴포넌트별 총 공수. 기록 입력 순서를 그대로 유지합니다."""
    return [
        SeriesPoint(label=record.component_name, value=round(record.total, DISPLAY_PRECISION))
        for record in summary.records
    ]


def group_scope(selections: Sequence[ScopeSelection]) -> list[ScopeGroup]:
    """범위 선택을 카테고리별로 묶습니다 (처음 등장한 카테고리 순서)."""
    groups: "OrderedDict[str, ScopeGroup]" = OrderedDict()
    for selection in selections:
        if selection.category not in groups:
            groups[selection.category] = ScopeGroup(category=selection.category)
        groups[selection.category].items.append(selection)
    return list(groups.values())


def build_report(project: Project, summary: EffortSummary, currency: str = "USD") -> ProjectReport:
    """프로젝트와 집계 결과로 보고서를 만듭니다."""
    return ProjectReport(
        project_id=project.id,
        project_name=project.name,
        complexity=project.complexity,
        currency=currency,
        summary=summary,
        phase_distribution=phase_distribution(summary),
        component_series=component_series(summary),
        scope_groups=group_scope(project.scope_selections),
    )
