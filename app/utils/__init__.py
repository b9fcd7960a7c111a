"""유틸리티 모듈."""

from .ids import IdGenerator, RandomIdGenerator, SequentialIdGenerator, get_id_generator
from .validation import (
    require_text,
    validate_unique_ids,
    validate_effort_values,
)

__all__ = [
    "IdGenerator",
    "RandomIdGenerator",
    "SequentialIdGenerator",
    "get_id_generator",
    "require_text",
    "validate_unique_ids",
    "validate_effort_values",
]
