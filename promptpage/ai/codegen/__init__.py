"""
Code Generation Module.

Usage:
    from promptpage.ai.codegen import CodeGenerator

    generator = CodeGenerator(provider=provider)
    result = await generator.generate("Create a pomodoro timer")

    if result.success:
        html = result.code.html
"""

from .contracts import CodeBlock, ExtractedCode, GenerationResponse
from .extractor import extract_code, extract_code_block
from .generator import CodeGenerator
from .prompts import SYSTEM_PROMPT

__all__ = [
    "CodeGenerator",
    "CodeBlock",
    "ExtractedCode",
    "GenerationResponse",
    "extract_code",
    "extract_code_block",
    "SYSTEM_PROMPT",
]
