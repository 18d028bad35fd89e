"""
AI Providers Module - clients for LLM providers.

Each provider has the same interface, making them interchangeable:
    text = await provider.generate(prompt, timeout=30)
"""

from promptpage.ai.providers.base import AIProvider, MessageRole, ProviderMessage, ProviderType
from promptpage.ai.providers.openai_provider import OpenAIProvider

__all__ = [
    "AIProvider",
    "MessageRole",
    "ProviderMessage",
    "ProviderType",
    "OpenAIProvider",
]
