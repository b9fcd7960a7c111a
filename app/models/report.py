"""공수 집계 결과 및 보고서 모델."""

from datetime import datetime
from pydantic import BaseModel, Field

from .project import ProjectComplexity, ScopeSelection


class RecordBreakdown(BaseModel):
    """공수 기록 하나를 단계별 일수로 펼친 결과 (반올림 전 값)."""

    record_id: str
    component_id: str
    component_name: str
    development: float = 0.0
    analysis: float = 0.0
    design: float = 0.0
    test: float = 0.0
    deploy: float = 0.0
    total: float = 0.0


class EffortSummary(BaseModel):
    """프로젝트 단위 공수 합계 (반올림 전 값)."""

    total_dev: float = 0.0
    total_analysis: float = 0.0
    total_design: float = 0.0
    total_test: float = 0.0
    total_deploy: float = 0.0
    grand_total_days: float = 0.0
    daily_rate: float = 0.0
    total_cost: float = 0.0
    timeline_weeks: float = 0.0
    record_count: int = 0
    component_count: int = 0
    records: list[RecordBreakdown] = Field(default_factory=list)


class SeriesPoint(BaseModel):
    """차트용 데이터 포인트."""

    label: str
    value: float


class ScopeGroup(BaseModel):
    """카테고리별로 묶인 범위 선택 목록."""

    category: str
    items: list[ScopeSelection] = Field(default_factory=list)

    @property
    def in_scope_count(self) -> int:
        return sum(1 for item in self.items if item.is_in_scope)


class ProjectReport(BaseModel):
    """프로젝트 공수/비용 보고서."""

    project_id: str
    project_name: str
    complexity: ProjectComplexity
    currency: str = "USD"
    generated_at: datetime = Field(default_factory=datetime.now)
    summary: EffortSummary
    phase_distribution: list[SeriesPoint] = Field(default_factory=list)
    component_series: list[SeriesPoint] = Field(default_factory=list)
    scope_groups: list[ScopeGroup] = Field(default_factory=list)

    def to_markdown(self) -> str:
        """마크다운 형식의 보고서 생성. 모든 수치는 표시 시점에만 반올림합니다."""
        lines = []
        summary = self.summary

        # 헤더
        lines.append(f"# {self.project_name} - 공수 보고서")
        lines.append("")
        lines.append(f"**복잡도**: {self.complexity.value} | **생성일**: {self.generated_at.strftime('%Y-%m-%d %H:%M')}")
        lines.append("")
        lines.append("---")
        lines.append("")

        # 1. 요약
        lines.append("## 1. 요약")
        lines.append("")
        lines.append("| 항목 | 값 |")
        lines.append("|------|-----|")
        lines.append(f"| 총 공수 | {summary.grand_total_days:.2f} M/D |")
        lines.append(f"| 예상 기간 | {summary.timeline_weeks:.1f}주 |")
        lines.append(f"| 예상 비용 | {summary.total_cost:,.2f} {self.currency} ({summary.daily_rate:,.2f}/일) |")
        lines.append(f"| 기술 컴포넌트 | {summary.component_count}종, {summary.record_count}건 |")
        lines.append("")

        # 2. 단계별 분포
        lines.append("## 2. 단계별 공수 분포")
        lines.append("")
        lines.append("| 단계 | 공수 (일) |")
        lines.append("|------|----------|")
        for point in self.phase_distribution:
            lines.append(f"| {point.label} | {point.value:.2f} |")
        lines.append("")

        # 3. 컴포넌트별 상세
        lines.append("## 3. 컴포넌트별 공수")
        lines.append("")
        if summary.records:
            lines.append("| 컴포넌트 | 개발 | 분석 | 설계 | 테스트 | 배포 | 합계 |")
            lines.append("|----------|------|------|------|--------|------|------|")
            for r in summary.records:
                lines.append(
                    f"| {r.component_name} | {r.development:.2f} | {r.analysis:.2f} | {r.design:.2f} "
                    f"| {r.test:.2f} | {r.deploy:.2f} | {r.total:.2f} |"
                )
        else:
            lines.append("아직 등록된 공수 기록이 없습니다.")
        lines.append("")

        # 4. 범위
        lines.append("## 4. 범위")
        lines.append("")
        for group in self.scope_groups:
            lines.append(f"### {group.category}")
            lines.append("")
            for item in group.items:
                mark = "x" if item.is_in_scope else " "
                lines.append(f"- [{mark}] {item.item}")
            lines.append("")

        # 푸터
        lines.append("---")
        lines.append("")
        lines.append("*본 보고서는 수동 공수 입력을 기반으로 계산되었습니다.*")

        return "\n".join(lines)
