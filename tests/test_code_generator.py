"""
Tests for the CodeGenerator orchestrator.

This module tests:
- Prompt validation (no provider call on blank prompts)
- Success path wrapping extracted code
- Failure propagation from provider and extractor
- End-to-end scenarios over a mocked HTTP provider
"""

import httpx
import pytest
from unittest.mock import MagicMock

from promptpage.ai.codegen import CodeGenerator, GenerationResponse
from promptpage.ai.errors import (
    TransportError,
    UpstreamHTTPError,
    UpstreamProtocolError,
)
from promptpage.ai.monitoring import AILogger
from promptpage.ai.providers import OpenAIProvider

from tests.conftest import FakeProvider, chat_completion


class TestValidation:
    """Prompts rejected before any I/O."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prompt", [None, "", "   ", "\n\t  \n"])
    async def test_blank_prompt_makes_no_provider_call(self, fake_provider, prompt):
        generator = CodeGenerator(provider=fake_provider)

        result = await generator.generate(prompt)

        assert result.success is False
        assert result.code is None
        assert result.error_kind == "ValidationError"
        assert "empty" in result.error
        assert fake_provider.calls == []


class TestGenerate:
    """Sequencing of provider call and extraction."""

    @pytest.mark.asyncio
    async def test_hello_world_scenario(self, fake_provider):
        generator = CodeGenerator(provider=fake_provider)

        result = await generator.generate("Create a hello world page")

        assert result.success is True
        assert result.error is None
        assert result.code.html == "<html><body>Hi</body></html>"
        assert result.to_dict() == {
            "success": True,
            "code": {"html": "<html><body>Hi</body></html>"},
            "error": None,
        }

    @pytest.mark.asyncio
    async def test_prompt_and_deadline_forwarded_verbatim(self, fake_provider):
        generator = CodeGenerator(provider=fake_provider)

        await generator.generate("  make a clock  ", timeout=12.5)

        assert fake_provider.calls == [{"prompt": "  make a clock  ", "timeout": 12.5}]

    @pytest.mark.asyncio
    async def test_no_code_block_fails(self):
        provider = FakeProvider(text="I cannot help with that.")
        generator = CodeGenerator(provider=provider)

        result = await generator.generate("Create a page")

        assert result.success is False
        assert result.code is None
        assert result.error == "no code block found"
        assert result.error_kind == "ExtractionError"

    @pytest.mark.asyncio
    async def test_unterminated_block_succeeds(self):
        provider = FakeProvider(text="```html\n<html><body>truncated")
        generator = CodeGenerator(provider=provider)

        result = await generator.generate("Create a page")

        assert result.success is True
        assert result.code.html == "<html><body>truncated"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        TransportError("Provider request timed out after 1.0s", timed_out=True),
        UpstreamHTTPError("Provider returned HTTP 429", status_code=429, body="slow down"),
        UpstreamProtocolError("Provider returned no choices (empty response)"),
    ])
    async def test_provider_failure_surfaces_message(self, error):
        generator = CodeGenerator(provider=FakeProvider(error=error))

        result = await generator.generate("Create a page")

        assert result.success is False
        assert result.code is None
        assert result.error == str(error)
        assert result.error_kind == type(error).__name__

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_not_swallowed(self):
        generator = CodeGenerator(provider=FakeProvider(error=RuntimeError("bug")))

        with pytest.raises(RuntimeError):
            await generator.generate("Create a page")

    @pytest.mark.asyncio
    async def test_events_are_logged(self, fake_provider):
        monitor = MagicMock(spec=AILogger)
        generator = CodeGenerator(provider=fake_provider, monitor=monitor)

        await generator.generate("Create a page")

        monitor.log_request.assert_called_once()
        assert monitor.log_request.call_args.kwargs["model"] == "fake-model"
        monitor.log_response.assert_called_once()
        monitor.log_error.assert_not_called()

    @pytest.mark.asyncio
    async def test_failures_are_logged_with_stage(self):
        monitor = MagicMock(spec=AILogger)
        error = UpstreamHTTPError("Provider returned HTTP 500", status_code=500, body="{}")
        generator = CodeGenerator(provider=FakeProvider(error=error), monitor=monitor)

        await generator.generate("Create a page")

        kwargs = monitor.log_error.call_args.kwargs
        assert kwargs["stage"] == "provider"
        assert kwargs["metadata"] == {"status_code": 500, "body": "{}"}


class TestEndToEnd:
    """CodeGenerator over OpenAIProvider with a mocked HTTP transport."""

    async def _run(self, handler, prompt: str = "Create a hello world page") -> GenerationResponse:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            provider = OpenAIProvider(api_key="sk-test", model="gpt-4", http_client=http_client)
            return await CodeGenerator(provider=provider).generate(prompt)

    @pytest.mark.asyncio
    async def test_success(self):
        def handler(request):
            return httpx.Response(200, json=chat_completion("```html\n<html><body>Hi</body></html>\n```"))

        result = await self._run(handler)

        assert result.to_dict() == {
            "success": True,
            "code": {"html": "<html><body>Hi</body></html>"},
            "error": None,
        }

    @pytest.mark.asyncio
    async def test_http_500(self):
        def handler(request):
            return httpx.Response(500, json={"error": "rate limited"})

        result = await self._run(handler)

        assert result.success is False
        assert result.code is None
        assert "500" in result.error

    @pytest.mark.asyncio
    async def test_missing_choices(self):
        def handler(request):
            return httpx.Response(200, json={"id": "chatcmpl-1", "object": "chat.completion"})

        result = await self._run(handler)

        assert result.success is False
        assert "no choices" in result.error
        assert "empty response" in result.error

    @pytest.mark.asyncio
    async def test_blank_prompt_sends_nothing(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=chat_completion("```html\n\n```"))

        result = await self._run(handler, prompt="   ")

        assert result.success is False
        assert calls == []
