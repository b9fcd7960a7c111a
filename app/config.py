from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.
    """

    # 저장소 설정: JSON 문서가 저장될 폴더
    data_dir: str = "data"
    seed_default_definitions: bool = True  # 카탈로그가 비어있을 때 기본 정의를 채울지 여부

    # 비용 계산 설정
    daily_rate: float = 400.0  # 1 M/D 당 단가 (고정 환율, 단일 통화)
    currency: str = "USD"
    working_days_per_week: int = 5  # 주 단위 일정 환산 기준

    # 자문(Advisory) 견적 설정: Claude CLI 사용
    claude_model: str = "claude-sonnet-4-20250514"
    advisory_enabled: bool = True
    advisory_max_retries: int = 3
    advisory_timeout_seconds: int = 300

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"  # 모든 외부 접속 허용
    port: int = 8000
    allowed_origins: list[str] = ["*"]
    log_level: str = "INFO"

    class Config:
        # 설정을 읽어올 파일 지정
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
