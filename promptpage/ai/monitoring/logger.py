"""
AI Logger - Structured logging for code generation requests.

It captures:
- Request details (prompt size, provider, model)
- Response details (success, latency, generated size)
- Errors and the pipeline stage that produced them

Log Format:
==========
Each entry is a JSON object on one line, carrying the event name,
a request ID for tracing and a UTC timestamp.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from promptpage.ai.codegen.contracts import GenerationResponse
from promptpage.core.config import Settings, settings

logger = logging.getLogger("promptpage.ai")


def configure_ai_logger(config: Settings = settings) -> None:
    """Apply the configured level to the promptpage.ai logger and its stdout handler."""
    level = config.log_level
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)


configure_ai_logger()


def _preview(text: str, limit: int = 100) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class AILogger:
    """
    Structured logger for generation requests.

    Usage:
        ai_logger.log_request(request_id, prompt, provider="openai", model="gpt-4o")
        ai_logger.log_response(request_id, response)
        ai_logger.log_error(request_id, error="...", stage="provider")
    """

    def __init__(self):
        """Initialize the AI logger."""
        self._logger = logger

    def log_request(
        self,
        request_id: str,
        prompt: str,
        provider: str,
        model: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log a generation request.

        Args:
            request_id: Unique request identifier
            prompt: The prompt being sent (truncated for privacy)
            provider: AI provider name
            model: Model name
            metadata: Additional metadata
        """
        log_data = {
            "event": "ai_request",
            "request_id": request_id,
            "provider": provider,
            "model": model,
            "prompt_length": len(prompt),
            "prompt_preview": _preview(prompt),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.info(f"AI Request: {json.dumps(log_data)}")

    def log_response(
        self,
        request_id: str,
        response: GenerationResponse,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the outcome of a generation request."""
        log_data = {
            "event": "ai_response",
            "request_id": request_id,
            "success": response.success,
            "latency_ms": round(response.latency_ms, 2),
            "html_length": len(response.code.html) if response.code else 0,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if not response.success:
            log_data["error"] = response.error
            log_data["error_kind"] = response.error_kind

        if metadata:
            log_data["metadata"] = metadata

        level = logging.INFO if response.success else logging.WARNING
        self._logger.log(level, f"AI Response: {json.dumps(log_data)}")

    def log_error(
        self,
        request_id: str,
        error: str,
        stage: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an error in the generation pipeline.

        Args:
            request_id: Request identifier
            error: Error message
            stage: Where the error occurred (validation, provider, extraction)
            metadata: Additional context (status code, upstream body)
        """
        log_data = {
            "event": "ai_error",
            "request_id": request_id,
            "error": error,
            "stage": stage,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.error(f"AI Error: {json.dumps(log_data)}")


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
ai_logger = AILogger()
