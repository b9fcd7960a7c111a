"""식별자 생성기.

정의 저장소, 인증 서비스, 프로젝트 서비스에 주입되어 ID를 발급합니다.
테스트에서는 SequentialIdGenerator로 결정적인 ID를 사용할 수 있습니다.
"""

import itertools
import uuid
from abc import ABC, abstractmethod
from typing import Optional


class IdGenerator(ABC):
    """고유 ID 발급 인터페이스."""

    @abstractmethod
    def new_id(self) -> str:
        """새 ID를 반환합니다."""


class RandomIdGenerator(IdGenerator):
    """UUID4 기반 짧은 ID 생성기 (기본값 9자리)."""

    def __init__(self, length: int = 9):
        self.length = length

    def new_id(self) -> str:
        return uuid.uuid4().hex[: self.length]


class SequentialIdGenerator(IdGenerator):
    """접두사 + 일련번호 형식의 ID 생성기 (예: id-1, id-2)."""

    def __init__(self, prefix: str = "id", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


_id_generator: Optional[IdGenerator] = None


def get_id_generator() -> IdGenerator:
    """IdGenerator 싱글톤을 반환합니다."""
    global _id_generator
    if _id_generator is None:
        _id_generator = RandomIdGenerator()
    return _id_generator
