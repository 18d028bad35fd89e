"""
Generate Router - API endpoint for prompt-to-HTML generation.

This router only handles HTTP concerns. Validation, the provider call and
code extraction all live in CodeGenerator.

Flow:
=====
    POST /api/generate {"prompt": "..."}
        -> CodeGenerator.generate
        -> {"success": true, "code": {"html": "..."}, "error": null}
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from promptpage.ai.codegen import CodeGenerator, GenerationResponse
from promptpage.core.config import settings
from promptpage.deps import get_code_generator


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])


# ---------------------------------------------------------------------------
# REQUEST/RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class GenerateRequest(BaseModel):
    """
    Request schema for the /api/generate endpoint.

    The prompt is optional here so that missing and blank prompts get the
    same error shape as every other failure.

    Example:
    {
        "prompt": "Create a hello world page"
    }
    """
    prompt: Optional[str] = Field(
        default=None,
        description="Natural-language description of the app to build",
    )


class CodePayload(BaseModel):
    html: str = Field(description="Complete HTML document with inline style and script")


class GenerateResponse(BaseModel):
    """
    Response schema for the /api/generate endpoint.

    Example:
    {
        "success": true,
        "code": {"html": "<!DOCTYPE html>..."},
        "error": null
    }
    """
    success: bool = Field(description="Whether code was generated")
    code: Optional[CodePayload] = Field(default=None, description="Generated code on success")
    error: Optional[str] = Field(default=None, description="Human-readable error on failure")


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------

ERROR_STATUS = {
    "ValidationError": status.HTTP_400_BAD_REQUEST,
    "TransportError": status.HTTP_504_GATEWAY_TIMEOUT,
}


def _status_for(result: GenerationResponse) -> int:
    if result.success:
        return status.HTTP_200_OK
    return ERROR_STATUS.get(result.error_kind, status.HTTP_502_BAD_GATEWAY)


def _json(result: GenerationResponse, status_code: int) -> JSONResponse:
    body = GenerateResponse(**result.to_dict())
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer unparseable bodies with 400 and the usual response shape."""
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    result = GenerationResponse.failed("Invalid request body", "ValidationError")
    return _json(result, status.HTTP_400_BAD_REQUEST)


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post("/generate", response_model=GenerateResponse)
async def generate_code(
    request: GenerateRequest,
    generator: Optional[CodeGenerator] = Depends(get_code_generator),
):
    """
    Generate a self-contained HTML application from a prompt.

    Status codes:
        200: code generated
        400: empty, missing or non-string prompt, or a body that is not JSON
        502: provider error, bad provider response, or no code block
        503: provider not configured
        504: provider unreachable or timed out
    """
    if generator is None:
        result = GenerationResponse.failed(
            "Code generation is not configured", "ConfigurationError"
        )
        return _json(result, status.HTTP_503_SERVICE_UNAVAILABLE)

    result = await generator.generate(
        request.prompt,
        timeout=settings.GENERATION_DEADLINE_SECONDS,
    )
    return _json(result, _status_for(result))
