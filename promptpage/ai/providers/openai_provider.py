"""
OpenAI Provider - chat-completions client used for code generation.

Talks to the chat-completions endpoint directly over httpx so that every
failure mode of the wire (status, body, provider error object, empty
choice list) maps to its own error kind.

Request:
    POST <OPENAI_API_URL>
    Authorization: Bearer <api-key>
    Content-Type: application/json

    {"model": "<model>", "messages": [{"role": "system", ...}, {"role": "user", ...}]}

Response:
    {"choices": [{"message": {"role": "assistant", "content": "..."}}],
     "error": {"message": "...", "type": "..."}}

`error`, when present, wins over `choices`.

API Documentation: https://platform.openai.com/docs/api-reference/chat
"""

import asyncio
import json
import logging
import time
from typing import Any, Dict, Optional

import httpx

from promptpage.ai.errors import (
    ConfigurationError,
    RequestConstructionError,
    TransportError,
    UpstreamHTTPError,
    UpstreamProtocolError,
)
from promptpage.ai.providers.base import AIProvider, ProviderType
from promptpage.core.config import Settings, settings

logger = logging.getLogger("promptpage.ai.openai")


class OpenAIProvider(AIProvider):
    """
    OpenAI GPT provider implementation.

    The httpx client is meant to be shared: create it once at startup and
    pass it in. When none is given the provider creates its own and closes
    it in aclose().

    Usage:
        async with httpx.AsyncClient() as client:
            provider = OpenAIProvider(api_key="sk-...", http_client=client)
            text = await provider.generate("Create a landing page", timeout=45)
    """

    provider_type = ProviderType.OPENAI

    # Hard upper bound for one provider call, applied regardless of caller deadline
    REQUEST_TIMEOUT_SECONDS = 60.0

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        api_url: Optional[str] = None,
    ):
        """
        Initialize the OpenAI provider.

        Args:
            api_key: Bearer credential (required)
            model: Model name (default: settings.OPENAI_MODEL)
            http_client: Shared AsyncClient (default: a private one)
            api_url: Endpoint URL (default: settings.OPENAI_API_URL)

        Raises:
            ConfigurationError: If api_key is empty
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("OpenAI API key must be provided")

        self.api_key = api_key
        self.model = model or settings.OPENAI_MODEL
        self.api_url = api_url or settings.OPENAI_API_URL

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

        logger.info(f"OpenAI provider initialized with model: {self.model}")

    @classmethod
    def from_settings(
        cls,
        config: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "OpenAIProvider":
        """Build a provider from application settings."""
        return cls(
            api_key=config.OPENAI_API_KEY,
            model=config.OPENAI_MODEL,
            http_client=http_client,
            api_url=config.OPENAI_API_URL,
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    # -------------------------------------------------------------------------
    # REQUEST BUILDING
    # -------------------------------------------------------------------------

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [message.to_dict() for message in self.build_messages(prompt)],
        }

    def _get_headers(self) -> Dict[str, str]:
        """Get authorization headers for API requests."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _build_request(self, prompt: str) -> httpx.Request:
        try:
            body = json.dumps(self.build_payload(prompt)).encode("utf-8")
            return self._client.build_request(
                "POST",
                self.api_url,
                content=body,
                headers=self._get_headers(),
                timeout=httpx.Timeout(self.REQUEST_TIMEOUT_SECONDS),
            )
        except (TypeError, ValueError, httpx.InvalidURL) as e:
            raise RequestConstructionError(f"Could not build provider request: {e}") from e

    # -------------------------------------------------------------------------
    # GENERATION
    # -------------------------------------------------------------------------

    async def generate(self, prompt: str, timeout: Optional[float] = None) -> str:
        """
        Send the prompt and return the first choice's content verbatim.

        Args:
            prompt: The user's message
            timeout: Caller deadline in seconds; capped at REQUEST_TIMEOUT_SECONDS

        Returns:
            Raw model output

        Raises:
            RequestConstructionError, TransportError, UpstreamHTTPError,
            UpstreamProtocolError
        """
        start_time = time.time()
        request = self._build_request(prompt)

        deadline = self.REQUEST_TIMEOUT_SECONDS
        if timeout is not None:
            deadline = min(timeout, deadline)

        try:
            response = await asyncio.wait_for(self._client.send(request), timeout=deadline)
        except asyncio.TimeoutError as e:
            logger.error(f"OpenAI request exceeded deadline of {deadline:.1f}s")
            raise TransportError(
                f"Provider request timed out after {deadline:.1f}s", timed_out=True
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"OpenAI request timed out: {e}")
            raise TransportError(f"Provider request timed out: {e}", timed_out=True) from e
        except httpx.RequestError as e:
            logger.error(f"Network error calling OpenAI: {e}")
            raise TransportError(f"Network error calling provider: {e}") from e

        latency_ms = self._measure_latency(start_time)

        if response.status_code != 200:
            logger.error(f"OpenAI API error: {response.status_code} - {response.text}")
            raise UpstreamHTTPError(
                f"Provider returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        content = self._parse_content(response.text)
        logger.info(f"OpenAI request completed in {latency_ms:.0f}ms, {len(content)} chars")
        return content

    def _parse_content(self, body: str) -> str:
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise UpstreamProtocolError(f"Malformed provider response: {e}") from e

        if not isinstance(data, dict):
            raise UpstreamProtocolError("Malformed provider response: expected a JSON object")

        error = data.get("error")
        if error is not None:
            if isinstance(error, dict):
                message = error.get("message") or "unknown error"
                error_type = error.get("type")
            else:
                message = str(error) or "unknown error"
                error_type = None
            logger.warning(f"OpenAI reported error ({error_type}): {message}")
            raise UpstreamProtocolError(f"Provider error: {message}", error_type=error_type)

        choices = data.get("choices")
        if not choices:
            raise UpstreamProtocolError("Provider returned no choices (empty response)")

        try:
            content = choices[0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamProtocolError(f"Malformed provider response: missing {e}") from e

        if not isinstance(content, str):
            raise UpstreamProtocolError("Malformed provider response: content is not text")

        return content
