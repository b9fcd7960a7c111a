"""자문 견적(Advisory Estimate) 결과 모델."""

from pydantic import BaseModel, Field


class TaskBreakdown(BaseModel):
    """자문 견적의 작업 분해 항목."""

    title: str
    hours: float = 0.0
    description: str = ""
    role: str = Field(default="", description="담당 역할 (예: Backend Dev, UI Designer)")


class EstimateResult(BaseModel):
    """
    외부 자문 서비스가 제안한 견적입니다.
    수동 공수 집계를 대체하지 않는 참고 자료입니다.
    """

    total_hours: float = 0.0
    total_cost: float = 0.0
    currency: str = "USD"
    timeline_weeks: float = 0.0
    recommended_stack: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)
    tasks: list[TaskBreakdown] = Field(default_factory=list)
    summary: str = ""
