"""Claude Code CLI client service for advisory estimates.

Uses Claude CLI (claude -p) for all AI operations.

이 모듈은 Claude CLI를 래핑하여 비동기 AI 호출을 제공합니다.
호출 실패는 모두 AdvisoryError로 보고됩니다.

주요 기능:
- complete(): 텍스트 응답 요청
- complete_json(): JSON 응답 요청 (자동 파싱)

실행 환경:
- Claude CLI가 PATH에 설치되어 있어야 함
- ThreadPoolExecutor를 사용하여 동기 CLI 호출을 비동기로 래핑

재시도 전략:
- 최대 재시도 횟수는 설정값 (기본 3회)
- 지수 백오프 (2초, 4초, 8초)
"""

import json
import subprocess
import os
import sys
import asyncio
import logging
from typing import Any, Optional
from datetime import datetime
from concurrent.futures import ThreadPoolExecutor

from app.config import get_settings
from app.exceptions import AdvisoryError

logger = logging.getLogger(__name__)


class ClaudeClient:
    """
    Claude Code CLI 래퍼 클래스.

    Attributes:
        _max_retries: 최대 재시도 횟수
        _retry_delay: 초기 재시도 대기 시간(초)
        _timeout: CLI 한 번 실행의 제한 시간(초)
        _executor: CLI 실행용 ThreadPoolExecutor
    """

    def __init__(
        self,
        model: Optional[str] = None,
        max_retries: Optional[int] = None,
        retry_delay: float = 2,
        timeout: Optional[int] = None,
    ):
        settings = get_settings()
        self._model = model or settings.claude_model
        if max_retries is None:
            max_retries = settings.advisory_max_retries
        # 최소 1회는 CLI를 호출
        self._max_retries = max(1, max_retries)
        self._retry_delay = retry_delay
        self._timeout = timeout or settings.advisory_timeout_seconds

        # CPU 코어 수 기반 동적 workers 설정 (최소 2, 최대 4)
        cpu_count = os.cpu_count() or 4
        max_workers = min(4, max(2, cpu_count))
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

        logger.info(f"[ClaudeClient] CLI 모드 초기화 완료 (model={self._model}, workers={max_workers})")

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Send a completion request to Claude via CLI.

        Args:
            system_prompt: System-level instructions
            user_prompt: User message content

        Returns:
            Claude's response text
        """
        full_prompt = f"""{system_prompt}

---

{user_prompt}"""

        return await self._execute_claude_cli(full_prompt)

    async def complete_json(self, system_prompt: str, user_prompt: str) -> Any:
        """
        Send a completion request expecting JSON response.

        Returns:
            Parsed JSON response (dict or list)
        """
        full_prompt = f"""{system_prompt}

---

{user_prompt}

---

응답 형식: 반드시 유효한 JSON만 출력하세요. 설명이나 마크다운 코드 블록 없이 순수 JSON만 반환합니다."""

        response = await self._execute_claude_cli(full_prompt)
        return self._parse_json_response(response)

    def _get_env(self) -> dict:
        """Get environment with proper PATH for Claude CLI."""
        env = os.environ.copy()

        if sys.platform == "win32":
            extra_paths = [
                os.path.expanduser("~\\AppData\\Roaming\\npm"),
            ]
            path_separator = ";"
        else:
            extra_paths = [
                os.path.expanduser("~/.npm-global/bin"),
                "/usr/local/bin",
                "/opt/homebrew/bin",
            ]
            path_separator = ":"

        env["PATH"] = path_separator.join(extra_paths) + path_separator + env.get("PATH", "")
        return env

    def _run_claude_sync(self, prompt: str) -> str:
        """Run Claude CLI synchronously."""
        env = self._get_env()
        logger.info(f"[CLI] 프롬프트 길이: {len(prompt)} chars")

        start_time = datetime.now()
        use_shell = sys.platform == "win32"
        result = subprocess.run(
            ["claude", "-p", prompt, "--model", self._model, "--output-format", "text"],
            capture_output=True,
            text=True,
            timeout=self._timeout,
            env=env,
            shell=use_shell,
            encoding="utf-8",
        )

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[CLI] 완료: {elapsed:.1f}초, returncode={result.returncode}")

        if result.returncode != 0:
            error_msg = result.stderr or "Unknown error"
            logger.error(f"[CLI] 에러: {error_msg}")
            raise AdvisoryError("Claude CLI 실행에 실패했습니다", details={"stderr": error_msg})

        return result.stdout.strip()

    async def _execute_claude_cli(self, prompt: str) -> str:
        """
        Claude Code CLI를 비동기로 실행.

        지수 백오프(Exponential Backoff) 적용:
        - wait_time = _retry_delay * (2 ** attempt)

        Raises:
            AdvisoryError: 모든 시도가 실패한 경우
        """
        last_error: Optional[Exception] = None

        for attempt in range(self._max_retries):
            try:
                logger.info(f"[CLI] 시도 {attempt + 1}/{self._max_retries}")

                loop = asyncio.get_running_loop()
                result = await loop.run_in_executor(
                    self._executor, self._run_claude_sync, prompt
                )

                logger.info(f"[CLI] 시도 {attempt + 1} 성공")
                return result

            except (AdvisoryError, OSError, subprocess.SubprocessError) as e:
                last_error = e
                logger.error(f"[CLI] 시도 {attempt + 1} 실패: {type(e).__name__}: {e}")

                # 마지막 시도가 아니면 지수 백오프 대기
                if attempt < self._max_retries - 1:
                    wait_time = self._retry_delay * (2 ** attempt)
                    logger.info(f"[CLI] {wait_time}초 후 재시도...")
                    await asyncio.sleep(wait_time)

        logger.error(f"[CLI] 모든 시도 실패: {last_error}")
        if isinstance(last_error, AdvisoryError):
            raise last_error
        raise AdvisoryError(
            "Claude CLI 호출에 실패했습니다",
            details={"error": f"{type(last_error).__name__}: {last_error}"},
        )

    def _parse_json_response(self, response: Optional[str]) -> Any:
        """
        Claude 응답에서 JSON 파싱 (포맷팅 문제 처리 포함).

        파싱 전략 3단계:
        ┌─────────────────────────────────────────────────────────────┐
        │ 단계     │ 방법                     │ 성공 시               │
        ├─────────────────────────────────────────────────────────────┤
        │ 1. 직접  │ 마크다운 제거 후 파싱    │ 바로 반환             │
        │ 2. 추출  │ JSON 구조 찾아서 파싱    │ 추출된 JSON 반환      │
        │ 3. 실패  │ -                        │ AdvisoryError 발생    │
        └─────────────────────────────────────────────────────────────┘

        빈 응답은 빈 딕셔너리로 처리합니다.
        """
        if response is None or not response.strip():
            return {}

        # ========== 1단계: 마크다운 코드 블록 제거 ==========
        cleaned = response.strip()
        if cleaned.startswith("```json"):
            cleaned = cleaned[7:]
        elif cleaned.startswith("```"):
            cleaned = cleaned[3:]
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3]
        cleaned = cleaned.strip()

        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.warning(f"[JSON] 직접 파싱 실패: {e}")
            first_error = e

        # ========== 2단계: JSON 구조 추출 파싱 ==========
        starts = [idx for idx in (cleaned.find("{"), cleaned.find("[")) if idx != -1]
        if starts:
            start_idx = min(starts)
            bracket = cleaned[start_idx]
            closing = "}" if bracket == "{" else "]"

            # 괄호 깊이 추적하여 완전한 JSON 범위 찾기
            depth = 0
            end_idx = None
            for i, char in enumerate(cleaned[start_idx:], start_idx):
                if char == bracket:
                    depth += 1
                elif char == closing:
                    depth -= 1
                    if depth == 0:
                        end_idx = i + 1
                        break

            if end_idx is not None:
                try:
                    return json.loads(cleaned[start_idx:end_idx])
                except json.JSONDecodeError as e2:
                    logger.error(f"[JSON] 추출 파싱 실패: {e2}")

        # ========== 3단계: 최종 실패 ==========
        logger.error("[JSON] 최종 파싱 실패")
        raise AdvisoryError(
            "자문 응답을 JSON으로 해석할 수 없습니다",
            details={"error": str(first_error)},
        )


# Singleton instance for dependency injection
_claude_client: Optional[ClaudeClient] = None


def get_claude_client() -> ClaudeClient:
    """Get or create Claude client singleton."""
    global _claude_client
    if _claude_client is None:
        _claude_client = ClaudeClient()
    return _claude_client
