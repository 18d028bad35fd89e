"""
CodeGenerator - turns a prompt into an extracted HTML application.

Sequence: validate prompt -> provider call -> code block extraction.
Any stage failure ends the request; there are no retries and no
partial results.
"""

import logging
import time
import uuid
from typing import Any, Dict, Optional, TYPE_CHECKING

from promptpage.ai.codegen.contracts import GenerationResponse
from promptpage.ai.codegen.extractor import extract_code_block
from promptpage.ai.errors import (
    CodeGenError,
    TransportError,
    UpstreamHTTPError,
    ValidationError,
)
from promptpage.ai.monitoring.logger import AILogger, ai_logger

if TYPE_CHECKING:
    from promptpage.ai.providers.base import AIProvider

logger = logging.getLogger("promptpage.ai.codegen.generator")


class CodeGenerator:
    """
    Request orchestrator for prompt-to-HTML generation.

    Usage:
        generator = CodeGenerator(provider=openai_provider)
        result = await generator.generate("Create a hello world page")

        if result.success:
            html = result.code.html
    """

    def __init__(self, provider: "AIProvider", monitor: Optional[AILogger] = None):
        """
        Initialize the generator.

        Args:
            provider: Any AIProvider implementation
            monitor: Structured event logger (default: module singleton)
        """
        self._provider = provider
        self._monitor = monitor or ai_logger

    @property
    def provider(self) -> "AIProvider":
        return self._provider

    async def generate(
        self,
        prompt: Optional[str],
        timeout: Optional[float] = None,
    ) -> GenerationResponse:
        """
        Generate an HTML application from a prompt.

        Args:
            prompt: Natural-language description (must not be blank)
            timeout: Deadline in seconds for the provider call

        Returns:
            GenerationResponse, successful or failed, never partial
        """
        request_id = str(uuid.uuid4())
        start_time = time.time()
        stage = "validation"

        try:
            self._validate(prompt)

            self._monitor.log_request(
                request_id=request_id,
                prompt=prompt,
                provider=self._provider.provider_type.value,
                model=self._provider.model,
            )

            stage = "provider"
            raw_text = await self._provider.generate(prompt, timeout=timeout)

            stage = "extraction"
            block = extract_code_block(raw_text)

        except ValidationError as e:
            response = GenerationResponse.failed(
                str(e), e.kind, latency_ms=(time.time() - start_time) * 1000
            )
            logger.info(f"Rejected prompt: {e}")
            return response

        except CodeGenError as e:
            self._monitor.log_error(
                request_id=request_id,
                error=str(e),
                stage=stage,
                metadata=self._error_metadata(e),
            )
            response = GenerationResponse.failed(
                str(e), e.kind, latency_ms=(time.time() - start_time) * 1000
            )
            self._monitor.log_response(request_id, response)
            return response

        response = GenerationResponse.ok(
            block.content, latency_ms=(time.time() - start_time) * 1000
        )
        logger.info(
            f"Generated {len(block.content)} chars of {block.language or 'untagged'} code "
            f"in {response.latency_ms:.0f}ms"
        )
        self._monitor.log_response(request_id, response)
        return response

    def _validate(self, prompt: Optional[str]) -> None:
        if not isinstance(prompt, str) or not prompt.strip():
            raise ValidationError("Prompt must not be empty")

    def _error_metadata(self, error: CodeGenError) -> Optional[Dict[str, Any]]:
        if isinstance(error, UpstreamHTTPError):
            return {"status_code": error.status_code, "body": error.body[:500]}
        if isinstance(error, TransportError):
            return {"timed_out": error.timed_out}
        return None

    def __repr__(self) -> str:
        return f"CodeGenerator(provider={self._provider.provider_type.value}, model={self._provider.model})"
