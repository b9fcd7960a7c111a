"""
견적 시스템 커스텀 예외 계층입니다.
각 서비스별 구조화된 에러 코드와 메시지를 제공합니다.
"""

from typing import Optional, Any


class EstimatorError(Exception):
    """견적 시스템 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class ValidationError(EstimatorError):
    """저장 전 필수 값(라벨, 항목명, 필수 필드 등) 누락 에러."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Any] = None):
        self.field = field
        if details is None and field is not None:
            details = {"field": field}
        super().__init__(message, error_code="ERR_VALID_001", details=details)


class InvalidEffortInputError(EstimatorError):
    """음수 개발 일수 또는 음수 비율 입력 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_EFFORT_001", details=details)


class ConflictError(EstimatorError):
    """중복 식별자 에러 (예: 이미 등록된 이메일)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_CONFLICT_001", details=details)


class NotFoundError(EstimatorError):
    """조회 실패 에러 (로그인, ID 기반 조회)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_NOT_FOUND_001", details=details)


class PermissionDeniedError(EstimatorError):
    """권한 없는 접근 에러 (다른 사용자의 프로젝트, 관리자 전용 기능)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PERM_001", details=details)


class PersistenceError(EstimatorError):
    """문서 저장소 관련 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_001", details=details)


class AdvisoryError(EstimatorError):
    """자문 견적(Claude) 호출 실패 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_ADVISORY_001", details=details)
