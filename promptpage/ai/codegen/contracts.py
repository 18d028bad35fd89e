"""
Contracts for the code generation pipeline.

Dataclasses passed between the extractor, the generator and the HTTP layer.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CodeBlock:
    """First fenced block found in model output."""

    content: str
    """Text between the fences, outer blank lines removed."""

    language: Optional[str] = None
    """Info string after the opening fence (e.g. 'html')."""

    terminated: bool = True
    """False when no closing fence was found and the rest of the text was taken."""


@dataclass(frozen=True)
class ExtractedCode:
    """Generated application markup (inline style and script included)."""

    html: str


@dataclass
class GenerationResponse:
    """
    Uniform result of one generation request.

    Either fully successful (code set, error None) or fully failed
    (code None, error set). error_kind names the failing error class
    and is kept out of the public payload.
    """

    success: bool
    code: Optional[ExtractedCode] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    latency_ms: float = 0.0

    @classmethod
    def ok(cls, html: str, latency_ms: float = 0.0) -> "GenerationResponse":
        return cls(success=True, code=ExtractedCode(html=html), latency_ms=latency_ms)

    @classmethod
    def failed(cls, error: str, error_kind: str, latency_ms: float = 0.0) -> "GenerationResponse":
        return cls(success=False, error=error, error_kind=error_kind, latency_ms=latency_ms)

    def to_dict(self) -> Dict[str, Any]:
        """Public payload: success, code, error."""
        return {
            "success": self.success,
            "code": {"html": self.code.html} if self.code else None,
            "error": self.error,
        }
