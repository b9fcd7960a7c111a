"""입력 유효성 검증 유틸리티.

정의/프로젝트 저장 전 필수 값 검증과 공수 입력 검증을 수행합니다.
"""

import math
from typing import Optional

from app.exceptions import InvalidEffortInputError, ValidationError


def require_text(value: Optional[str], field: str, context: str = "") -> str:
    """
    문자열 필수 값 검증.

    앞뒤 공백을 제거한 값이 비어있으면 ValidationError를 발생시킵니다.

    Args:
        value: 검증할 값
        field: 에러 메시지에 표시할 필드명 (예: "label", "item")
        context: 어떤 항목의 필드인지 (예: 정의 ID)

    Returns:
        공백이 제거된 값

    Raises:
        ValidationError: 값이 비어있는 경우
    """
    if value is None or not str(value).strip():
        where = f" ({context})" if context else ""
        raise ValidationError(f"'{field}' 값이 비어있습니다{where}", field=field)
    return str(value).strip()


def validate_unique_ids(ids: list[str], kind: str) -> None:
    """
    한 카탈로그 안에서 ID 중복 여부 검증.

    Raises:
        ValidationError: 중복 ID가 있는 경우
    """
    seen = set()
    duplicates = []
    for item_id in ids:
        if item_id in seen and item_id not in duplicates:
            duplicates.append(item_id)
        seen.add(item_id)

    if duplicates:
        raise ValidationError(
            f"{kind} 카탈로그에 중복된 ID가 있습니다",
            field="id",
            details={"field": "id", "duplicates": duplicates},
        )


def _is_valid_amount(value: float) -> bool:
    return math.isfinite(value) and value >= 0


def _detail_value(value: float):
    # NaN/Infinity는 JSON 응답에 그대로 담을 수 없으므로 문자열로 기록
    return value if math.isfinite(value) else str(value)


def validate_effort_values(
    development_days: float,
    analysis_ratio: float,
    design_ratio: float,
    test_ratio: float,
    deploy_ratio: float,
) -> None:
    """
    공수 입력값 검증.

    - 개발 일수는 0 이상의 유한한 숫자여야 함
    - 각 단계 비율(%)은 0 이상의 유한한 숫자여야 함 (합계 100 제한 없음, 상한 없음)

    Raises:
        InvalidEffortInputError: 음수, NaN 또는 무한대 값이 있는 경우
    """
    if not _is_valid_amount(development_days):
        raise InvalidEffortInputError(
            "개발 일수는 0 이상의 유한한 숫자여야 합니다",
            details={"field": "development_days", "value": _detail_value(development_days)},
        )

    ratios = {
        "analysis_ratio": analysis_ratio,
        "design_ratio": design_ratio,
        "test_ratio": test_ratio,
        "deploy_ratio": deploy_ratio,
    }
    invalid = {
        name: _detail_value(value)
        for name, value in ratios.items()
        if not _is_valid_amount(value)
    }
    if invalid:
        raise InvalidEffortInputError(
            "단계 비율은 0 이상의 유한한 숫자여야 합니다",
            details={"fields": invalid},
        )
