"""ClaudeClient unit tests.

Tests the JSON extraction logic that handles various AI response formats
and the retry behaviour around the CLI call. No real CLI is executed.
"""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from app.services.claude_client import ClaudeClient
from app.exceptions import AdvisoryError


@pytest.fixture
def client():
    """ClaudeClient instance (no CLI calls needed for _parse_json_response)."""
    return ClaudeClient(max_retries=3, retry_delay=0, timeout=5)


class TestParseJsonResponseEmpty:
    def test_none_response_returns_empty_dict(self, client):
        assert client._parse_json_response(None) == {}

    def test_empty_string_returns_empty_dict(self, client):
        assert client._parse_json_response("") == {}

    def test_whitespace_only_returns_empty_dict(self, client):
        assert client._parse_json_response("   \n\t  ") == {}


class TestParseJsonResponseValid:
    def test_valid_json_object(self, client):
        result = client._parse_json_response('{"total_hours": 120, "currency": "USD"}')
        assert result == {"total_hours": 120, "currency": "USD"}

    def test_valid_json_array(self, client):
        result = client._parse_json_response('[{"a": 1}, {"b": 2}]')
        assert isinstance(result, list)
        assert len(result) == 2

    def test_json_in_markdown_code_block(self, client):
        response = '```json\n{"tasks": [{"title": "분석"}]}\n```'
        result = client._parse_json_response(response)
        assert result["tasks"][0]["title"] == "분석"

    def test_json_in_plain_code_block(self, client):
        assert client._parse_json_response('```\n{"key": "value"}\n```') == {"key": "value"}


class TestParseJsonResponseWithSurroundingText:
    def test_leading_text_before_object(self, client):
        response = '견적 결과입니다:\n{"total_hours": 80, "risks": ["일정"]}'
        assert client._parse_json_response(response)["total_hours"] == 80

    def test_trailing_text_after_object(self, client):
        response = '{"summary": "요약"}\n이상입니다.'
        assert client._parse_json_response(response) == {"summary": "요약"}

    def test_leading_text_before_array(self, client):
        """The first opening bracket decides which structure is extracted."""
        result = client._parse_json_response('Analysis complete. [{"id": 1}, {"id": 2}]')
        assert result == [{"id": 1}, {"id": 2}]


class TestParseJsonResponseInvalid:
    def test_no_brackets_raises_error(self, client):
        with pytest.raises(AdvisoryError):
            client._parse_json_response("This is just plain text with no JSON at all")

    def test_broken_json_after_bracket_raises_error(self, client):
        with pytest.raises(AdvisoryError):
            client._parse_json_response("result: {broken json without closing")


class TestRetry:
    async def test_succeeds_after_failure(self, client):
        with patch.object(
            client,
            "_run_claude_sync",
            side_effect=[AdvisoryError("CLI 실패"), '{"summary": "ok"}'],
        ) as run:
            result = await client.complete_json("system", "user")

        assert result == {"summary": "ok"}
        assert run.call_count == 2

    async def test_gives_up_after_max_retries(self, client):
        with patch.object(
            client, "_run_claude_sync", side_effect=subprocess.TimeoutExpired("claude", 5)
        ) as run:
            with pytest.raises(AdvisoryError):
                await client.complete("system", "user")

        assert run.call_count == 3

    async def test_prompt_contains_both_parts(self, client):
        with patch.object(client, "_run_claude_sync", return_value="응답") as run:
            result = await client.complete("시스템 지시", "사용자 입력")

        assert result == "응답"
        prompt = run.call_args[0][0]
        assert "시스템 지시" in prompt
        assert "사용자 입력" in prompt


class TestRunClaudeSync:
    def test_nonzero_return_code_raises(self, client):
        completed = MagicMock(returncode=1, stderr="boom", stdout="")
        with patch("app.services.claude_client.subprocess.run", return_value=completed):
            with pytest.raises(AdvisoryError) as exc_info:
                client._run_claude_sync("prompt")
        assert exc_info.value.details == {"stderr": "boom"}

    def test_stdout_is_stripped(self, client):
        completed = MagicMock(returncode=0, stderr="", stdout="  {}\n")
        with patch("app.services.claude_client.subprocess.run", return_value=completed) as run:
            assert client._run_claude_sync("prompt") == "{}"

        args = run.call_args[0][0]
        assert args[:3] == ["claude", "-p", "prompt"]
        assert "--model" in args


class TestRetrySettings:
    async def test_zero_retries_still_calls_once(self):
        client = ClaudeClient(max_retries=0, retry_delay=0, timeout=5)
        with patch.object(
            client, "_run_claude_sync", side_effect=AdvisoryError("CLI 실패", details={"stderr": "boom"})
        ) as run:
            with pytest.raises(AdvisoryError) as exc_info:
                await client.complete("system", "user")

        assert run.call_count == 1
        assert exc_info.value.details == {"stderr": "boom"}

    def test_retries_from_settings(self):
        from app.config import get_settings

        client = ClaudeClient(retry_delay=0, timeout=5)
        assert client._max_retries == max(1, get_settings().advisory_max_retries)
