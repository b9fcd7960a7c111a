"""Effort aggregation engine unit tests.

Pure computation: phase days, record totals, project totals and cost.
"""

import pytest

from app.estimation import aggregate, breakdown_record, phase_days, record_total
from app.models import ProjectEffortRecord


def _record(record_id: str, component_id: str = "c1", dev: float = 10, **ratios) -> ProjectEffortRecord:
    return ProjectEffortRecord(
        id=record_id,
        component_id=component_id,
        component_name=f"Component {component_id}",
        development_days=dev,
        analysis_ratio=ratios.get("analysis", 0),
        design_ratio=ratios.get("design", 0),
        test_ratio=ratios.get("test", 0),
        deploy_ratio=ratios.get("deploy", 0),
    )


class TestRecordBreakdown:
    def test_phase_days(self):
        assert phase_days(10, 20) == pytest.approx(2.0)
        assert phase_days(0, 50) == 0

    def test_sample_record_breakdown(self, sample_record):
        b = breakdown_record(sample_record)
        assert b.development == pytest.approx(10)
        assert b.analysis == pytest.approx(2)
        assert b.design == pytest.approx(1)
        assert b.test == pytest.approx(3)
        assert b.deploy == pytest.approx(1)
        assert b.total == pytest.approx(17)

    def test_record_total_formula(self):
        record = _record("e-1", dev=8, analysis=15, design=5, test=25, deploy=5)
        assert record_total(record) == pytest.approx(8 * (1 + (15 + 5 + 25 + 5) / 100))

    def test_ratios_above_100_are_applied_as_is(self):
        record = _record("e-1", dev=10, analysis=150)
        assert breakdown_record(record).analysis == pytest.approx(15)

    def test_zero_ratios_total_equals_development(self):
        assert record_total(_record("e-1", dev=4)) == pytest.approx(4)


class TestAggregate:
    def test_empty_records_all_zero(self):
        summary = aggregate([], daily_rate=400)
        assert summary.total_dev == 0
        assert summary.total_analysis == 0
        assert summary.grand_total_days == 0
        assert summary.total_cost == 0
        assert summary.timeline_weeks == 0
        assert summary.record_count == 0
        assert summary.component_count == 0
        assert summary.records == []

    def test_cost_uses_daily_rate(self, sample_record):
        summary = aggregate([sample_record], daily_rate=400)
        assert summary.grand_total_days == pytest.approx(17)
        assert summary.total_cost == pytest.approx(6800)
        assert summary.daily_rate == 400

    def test_timeline_weeks(self, sample_record):
        summary = aggregate([sample_record], daily_rate=400, working_days_per_week=5)
        assert summary.timeline_weeks == pytest.approx(3.4)

    def test_zero_working_days_gives_zero_weeks(self, sample_record):
        summary = aggregate([sample_record], daily_rate=400, working_days_per_week=0)
        assert summary.timeline_weeks == 0

    def test_phase_totals_sum_to_grand_total(self):
        records = [
            _record("e-1", "c1", dev=10, analysis=20, design=10, test=30, deploy=10),
            _record("e-2", "c2", dev=3.5, analysis=12.5, design=7, test=40, deploy=5),
        ]
        s = aggregate(records, daily_rate=400)
        assert s.grand_total_days == pytest.approx(
            s.total_dev + s.total_analysis + s.total_design + s.total_test + s.total_deploy
        )
        assert s.grand_total_days == pytest.approx(sum(record_total(r) for r in records))

    def test_totals_are_order_independent(self):
        records = [
            _record("e-1", "c1", dev=10, analysis=20),
            _record("e-2", "c2", dev=3, test=33.3),
            _record("e-3", "c3", dev=7.25, deploy=12),
        ]
        forward = aggregate(records, daily_rate=400)
        backward = aggregate(list(reversed(records)), daily_rate=400)
        assert forward.grand_total_days == pytest.approx(backward.grand_total_days)
        assert forward.total_cost == pytest.approx(backward.total_cost)

    def test_records_keep_input_order(self):
        records = [_record("e-2", "c2"), _record("e-1", "c1")]
        summary = aggregate(records, daily_rate=400)
        assert [b.record_id for b in summary.records] == ["e-2", "e-1"]

    def test_component_count_is_distinct(self):
        records = [_record("e-1", "c1"), _record("e-2", "c1"), _record("e-3", "c2")]
        summary = aggregate(records, daily_rate=400)
        assert summary.record_count == 3
        assert summary.component_count == 2

    def test_no_rounding_before_summation(self):
        records = [_record(f"e-{i}", dev=1 / 3) for i in range(3)]
        summary = aggregate(records, daily_rate=400)
        assert summary.total_dev == pytest.approx(1.0)
