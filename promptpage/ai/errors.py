"""
Error taxonomy for the code generation pipeline.

Every stage catches its own native failures (httpx, json, parsing) and
re-raises one of these. The orchestrator converts them into the uniform
GenerationResponse; nothing below this module leaks to the HTTP layer.

    CodeGenError
    ├── ConfigurationError        missing credential at construction
    ├── ValidationError           empty/missing prompt
    ├── ProviderError
    │   ├── RequestConstructionError
    │   ├── TransportError        connection, DNS, timeout
    │   ├── UpstreamHTTPError     non-200 status (carries status + body)
    │   └── UpstreamProtocolError malformed body, provider error, no choices
    └── ExtractionError           no fenced code block
"""

from typing import Optional


class CodeGenError(Exception):
    """Base exception for all code generation errors."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class ConfigurationError(CodeGenError):
    """Raised when a provider is constructed without required configuration."""
    pass


class ValidationError(CodeGenError):
    """Raised when the caller's prompt is empty or missing."""
    pass


class ProviderError(CodeGenError):
    """Base exception for failures while calling the LLM provider."""
    pass


class RequestConstructionError(ProviderError):
    """Raised when the provider request cannot be serialized or built."""
    pass


class TransportError(ProviderError):
    """Raised on connection, DNS or timeout failures."""

    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out


class UpstreamHTTPError(ProviderError):
    """Raised when the provider answers with a non-200 status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UpstreamProtocolError(ProviderError):
    """Raised when the provider body is malformed, reports an error, or has no choices."""

    def __init__(self, message: str, error_type: Optional[str] = None):
        super().__init__(message)
        self.error_type = error_type


class ExtractionError(CodeGenError):
    """Raised when no fenced code block can be found in the model output."""
    pass
