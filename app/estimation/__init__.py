"""Effort estimation core: reconciliation, aggregation and reporting projection."""

from .aggregation import aggregate, breakdown_record, phase_days, record_total
from .reconciliation import missing_required_fields, reconcile_fields, reconcile_scope
from .reporting import (
    PHASE_LABELS,
    build_report,
    component_series,
    group_scope,
    phase_distribution,
)

__all__ = [
    "aggregate",
    "breakdown_record",
    "phase_days",
    "record_total",
    "reconcile_scope",
    "reconcile_fields",
    "missing_required_fields",
    "PHASE_LABELS",
    "phase_distribution",
    "component_series",
    "group_scope",
    "build_report",
]
