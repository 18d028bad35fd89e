"""
Dependencies module - reusable FastAPI dependencies for route handlers.
"""

from typing import Optional

from fastapi import Request

from promptpage.ai.codegen import CodeGenerator


def get_code_generator(request: Request) -> Optional[CodeGenerator]:
    """
    Return the process-wide CodeGenerator built in the app lifespan.

    None means the provider is not configured (no API key); the route
    decides how to answer.
    """
    return getattr(request.app.state, "code_generator", None)
