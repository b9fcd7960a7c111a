"""Reporting projection unit tests."""

import pytest

from app.estimation import (
    PHASE_LABELS,
    aggregate,
    build_report,
    component_series,
    group_scope,
    phase_distribution,
)
from app.models import ProjectEffortRecord, ScopeSelection


class TestPhaseDistribution:
    def test_labels_in_phase_order(self, sample_record):
        points = phase_distribution(aggregate([sample_record], daily_rate=400))
        assert [p.label for p in points] == ["분석", "설계", "개발", "테스트", "배포"]
        assert [p.label for p in points] == list(PHASE_LABELS.values())

    def test_values(self, sample_record):
        points = phase_distribution(aggregate([sample_record], daily_rate=400))
        assert [p.value for p in points] == [2.0, 1.0, 10.0, 3.0, 1.0]

    def test_values_rounded_to_two_decimals(self):
        record = ProjectEffortRecord(
            id="e-1", component_id="c1", component_name="Form",
            development_days=1 / 3, analysis_ratio=10,
        )
        points = phase_distribution(aggregate([record], daily_rate=400))
        assert points[2].value == 0.33
        assert points[0].value == 0.03

    def test_empty_summary(self):
        points = phase_distribution(aggregate([], daily_rate=400))
        assert len(points) == 5
        assert all(p.value == 0 for p in points)


class TestComponentSeries:
    def test_keeps_record_order(self, sample_record):
        second = sample_record.model_copy(update={
            "id": "e-2", "component_id": "c2", "component_name": "Grid", "development_days": 2,
        })
        series = component_series(aggregate([second, sample_record], daily_rate=400))
        assert [p.label for p in series] == ["Grid", "Form"]
        assert series[1].value == 17.0

    def test_duplicate_components_are_separate_points(self, sample_record):
        again = sample_record.model_copy(update={"id": "e-2"})
        series = component_series(aggregate([sample_record, again], daily_rate=400))
        assert len(series) == 2


class TestGroupScope:
    def test_groups_by_category_in_first_seen_order(self):
        selections = [
            ScopeSelection(definition_id="s1", category="분석", item="업무 분석"),
            ScopeSelection(definition_id="s6", category="테스트", item="통합 테스트", is_in_scope=False),
            ScopeSelection(definition_id="s2", category="분석", item="기술 분석"),
        ]
        groups = group_scope(selections)
        assert [g.category for g in groups] == ["분석", "테스트"]
        assert [s.definition_id for s in groups[0].items] == ["s1", "s2"]
        assert groups[0].in_scope_count == 2
        assert groups[1].in_scope_count == 0

    def test_empty(self):
        assert group_scope([]) == []


class TestBuildReport:
    def test_report_fields(self, sample_project):
        summary = aggregate(sample_project.efforts, daily_rate=400)
        report = build_report(sample_project, summary, currency="USD")

        assert report.project_id == "p-1"
        assert report.project_name == "CRM 고도화"
        assert report.summary.total_cost == pytest.approx(6800)
        assert len(report.phase_distribution) == 5
        assert report.component_series[0].label == "Form"
        assert [g.category for g in report.scope_groups] == ["분석", "테스트"]

    def test_to_markdown(self, sample_project):
        report = build_report(sample_project, aggregate(sample_project.efforts, daily_rate=400))
        md = report.to_markdown()

        assert "# CRM 고도화 - 공수 보고서" in md
        assert "17.00 M/D" in md
        assert "6,800.00 USD" in md
        assert "| 분석 | 2.00 |" in md
        assert "- [x] 업무 분석" in md
        assert "- [ ] 성능 테스트" in md

    def test_to_markdown_without_efforts(self, draft_project):
        report = build_report(draft_project, aggregate([], daily_rate=400))
        assert "아직 등록된 공수 기록이 없습니다." in report.to_markdown()
