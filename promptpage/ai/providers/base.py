"""
Base AI Provider - Abstract interface for all LLM providers.

This module defines the contract that all AI providers must follow.
A provider turns a prompt into raw model text; it knows nothing about
code fences or the response shape the API returns to its callers.

Design Pattern: Strategy Pattern
================================
The base class defines the interface, and each provider implements it.
The CodeGenerator works against AIProvider only, so another wire format
is added as another subclass without touching extraction or orchestration.

Example:
    provider = OpenAIProvider(api_key="sk-...")
    text = await provider.generate("Create a hello world page", timeout=30)
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from promptpage.ai.codegen.prompts import SYSTEM_PROMPT


class ProviderType(str, Enum):
    """Enum of supported AI providers."""
    OPENAI = "openai"


class MessageRole(str, Enum):
    """Roles allowed in the conversation sent to a provider."""
    SYSTEM = "system"
    USER = "user"


@dataclass(frozen=True)
class ProviderMessage:
    """One message of the conversation sent to the provider."""
    role: MessageRole
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role.value, "content": self.content}


class AIProvider(ABC):
    """
    Abstract base class for AI providers.

    Responsibilities:
    - Build the [system, user] conversation for a prompt
    - Issue exactly one request per call (no retries, no caching)
    - Return the model's raw text, or raise a ProviderError subclass

    Usage:
        class MyProvider(AIProvider):
            async def generate(self, prompt, timeout=None):
                # Implementation here
                pass
    """

    provider_type: ProviderType
    model: str

    @abstractmethod
    async def generate(self, prompt: str, timeout: Optional[float] = None) -> str:
        """
        Generate raw text for a prompt.

        Args:
            prompt: The caller's prompt, sent verbatim as the user message
            timeout: Caller deadline in seconds (None = only the client timeout)

        Returns:
            The first choice's text content, unmodified

        Raises:
            ProviderError: Any transport, HTTP or protocol failure
        """
        pass

    def build_messages(self, prompt: str) -> List[ProviderMessage]:
        """System prompt first, then the user's prompt."""
        return [
            ProviderMessage(role=MessageRole.SYSTEM, content=SYSTEM_PROMPT),
            ProviderMessage(role=MessageRole.USER, content=prompt),
        ]

    def _measure_latency(self, start_time: float) -> float:
        """Calculate latency in milliseconds."""
        return (time.time() - start_time) * 1000
