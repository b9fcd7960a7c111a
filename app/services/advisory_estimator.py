"""
자문 견적(Advisory Estimate) 서비스.

프로젝트 복잡도, 필드 값, 범위 선택을 Claude에 전달하여 참고용 견적을 받습니다.
수동 공수 집계와는 독립적이며, 결과는 집계 엔진에 사용되지 않습니다.
"""

import logging
from typing import Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from app.config import get_settings
from app.exceptions import AdvisoryError
from app.models import EstimateResult, FieldValue, Project, ProjectComplexity, ScopeSelection

from .claude_client import ClaudeClient, get_claude_client
from .prompts import ADVISORY_ESTIMATE_PROMPT

logger = logging.getLogger(__name__)


def _format_fields(fields: Sequence[FieldValue]) -> str:
    return "\n".join(f"- {f.label}: {f.value}" for f in fields) or "- (없음)"


def _format_scope(selections: Sequence[ScopeSelection], in_scope: bool) -> str:
    lines = [
        f"- [{s.category}] {s.item}"
        for s in selections
        if s.is_in_scope == in_scope
    ]
    return "\n".join(lines) or "- (없음)"


def build_advisory_prompt(
    complexity: ProjectComplexity,
    fields: Sequence[FieldValue],
    scope: Sequence[ScopeSelection],
    currency: str = "USD",
) -> str:
    """견적 요청용 사용자 프롬프트를 만듭니다. 범위 포함/제외 항목을 분리해서 전달합니다."""
    return f"""프로젝트 복잡도: {complexity.value}
통화: {currency}

## 프로젝트 정보 (메타데이터)
{_format_fields(fields)}

## 범위 포함 (공수 산정 대상)
{_format_scope(scope, True)}

## 범위 제외 (공수 없음, 리스크로만 언급)
{_format_scope(scope, False)}"""


class AdvisoryEstimator:
    """Claude 기반 참고 견적 생성기."""

    def __init__(
        self,
        client: Optional[ClaudeClient] = None,
        enabled: Optional[bool] = None,
        currency: Optional[str] = None,
    ):
        settings = get_settings()
        self._client = client
        self.enabled = settings.advisory_enabled if enabled is None else enabled
        self.currency = currency or settings.currency

    @property
    def client(self) -> ClaudeClient:
        if self._client is None:
            self._client = get_claude_client()
        return self._client

    async def estimate(self, project: Project) -> EstimateResult:
        """
        프로젝트에 대한 자문 견적을 요청합니다.

        Raises:
            AdvisoryError: 기능이 비활성화되었거나, 호출/응답 해석에 실패한 경우
        """
        if not self.enabled:
            raise AdvisoryError("자문 견적 기능이 비활성화되어 있습니다")

        user_prompt = build_advisory_prompt(
            project.complexity,
            project.custom_fields,
            project.scope_selections,
            currency=self.currency,
        )

        logger.info(f"[AdvisoryEstimator] 견적 요청: {project.id}")
        result = await self.client.complete_json(ADVISORY_ESTIMATE_PROMPT, user_prompt)

        if not isinstance(result, dict) or not result:
            raise AdvisoryError("자문 응답이 비어있거나 형식이 올바르지 않습니다")

        result.setdefault("currency", self.currency)
        try:
            estimate = EstimateResult.model_validate(result)
        except PydanticValidationError as e:
            raise AdvisoryError(
                "자문 응답이 견적 형식과 맞지 않습니다",
                details={"error": str(e)},
            ) from e

        logger.info(
            f"[AdvisoryEstimator] 견적 완료: {project.id} "
            f"({estimate.total_hours}h, {estimate.timeline_weeks}주)"
        )
        return estimate


_advisory_estimator: Optional[AdvisoryEstimator] = None


def get_advisory_estimator() -> AdvisoryEstimator:
    """Get or create advisory estimator singleton."""
    global _advisory_estimator
    if _advisory_estimator is None:
        _advisory_estimator = AdvisoryEstimator()
    return _advisory_estimator
