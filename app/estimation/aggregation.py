"""
공수 집계 엔진.

부수효과 없는 순수 계산입니다. 같은 입력에는 항상 같은 결과를 돌려주며,
결과를 캐시하지 않고 매번 입력으로부터 다시 계산합니다.

계산식:
    단계 일수 = development_days * ratio / 100
    기록 합계 = development_days + 분석 + 설계 + 테스트 + 배포
    총 비용   = 총 공수(일) * 일 단가

합산 전에는 반올림하지 않습니다. 반올림은 표시(보고서) 단계에서만 합니다.
입력 기록은 생성 시점에 검증되었다고 가정합니다.
"""

from typing import Sequence

from app.models import EffortSummary, ProjectEffortRecord, RecordBreakdown


def phase_days(development_days: float, ratio: float) -> float:
    """개발 일수에 비율(%)을 적용한 단계 일수."""
    return development_days * ratio / 100


def breakdown_record(record: ProjectEffortRecord) -> RecordBreakdown:
    """공수 기록 하나를 단계별 일수로 펼칩니다."""
    dev = record.development_days
    analysis = phase_days(dev, record.analysis_ratio)
    design = phase_days(dev, record.design_ratio)
    test = phase_days(dev, record.test_ratio)
    deploy = phase_days(dev, record.deploy_ratio)

    return RecordBreakdown(
        record_id=record.id,
        component_id=record.component_id,
        component_name=record.component_name,
        development=dev,
        analysis=analysis,
        design=design,
        test=test,
        deploy=deploy,
        total=dev + analysis + design + test + deploy,
    )


def record_total(record: ProjectEffortRecord) -> float:
    return breakdown_record(record).total


def aggregate(
    records: Sequence[ProjectEffortRecord],
    daily_rate: float,
    working_days_per_week: int = 5,
) -> EffortSummary:
    """
    프로젝트 전체 공수를 집계합니다.

    Args:
        records: 공수 기록 목록 (비어있으면 모든 합계가 0)
        daily_rate: 일 단가
        working_days_per_week: 주 단위 기간 환산 기준

    Returns:
        EffortSummary: 단계별 합계, 총 공수, 비용, 기록별 상세 (입력 순서 유지)
    """
    breakdowns = [breakdown_record(record) for record in records]

    total_dev = sum(b.development for b in breakdowns)
    total_analysis = sum(b.analysis for b in breakdowns)
    total_design = sum(b.design for b in breakdowns)
    total_test = sum(b.test for b in breakdowns)
    total_deploy = sum(b.deploy for b in breakdowns)
    grand_total = total_dev + total_analysis + total_design + total_test + total_deploy

    timeline_weeks = grand_total / working_days_per_week if working_days_per_week > 0 else 0.0

    return EffortSummary(
        total_dev=total_dev,
        total_analysis=total_analysis,
        total_design=total_design,
        total_test=total_test,
        total_deploy=total_deploy,
        grand_total_days=grand_total,
        daily_rate=daily_rate,
        total_cost=grand_total * daily_rate,
        timeline_weeks=timeline_weeks,
        record_count=len(breakdowns),
        component_count=len({b.component_id for b in breakdowns}),
        records=breakdowns,
    )
