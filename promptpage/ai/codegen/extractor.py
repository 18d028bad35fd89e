"""
Code block extraction from LLM output.

Models are told to answer with a single ```html block and nothing else,
but they do not always comply. The extractor tolerates prose around the
block, a missing language tag, several blocks (first one wins) and a
missing closing fence (the rest of the text is taken).

The function is pure: no I/O and no shared state.
"""

import logging
import re
from typing import List, Optional, Tuple

from promptpage.ai.errors import ExtractionError
from promptpage.ai.codegen.contracts import CodeBlock
from promptpage.ai.codegen.prompts import FENCE

logger = logging.getLogger("promptpage.ai.codegen.extractor")

NO_CODE_BLOCK = "no code block found"

# Lines end at "\n" only; str.splitlines also breaks on U+2028, \x0c, \x85 and more.
_LINE_BREAK = re.compile(r"(?<=\n)")


def _is_fence(line: str) -> bool:
    return line.lstrip(" \t").startswith(FENCE)


def _find_fence(lines: List[str], start: int) -> Optional[int]:
    for index in range(start, len(lines)):
        if _is_fence(lines[index]):
            return index
    return None


def _language_tag(line: str) -> Optional[str]:
    tag = line.lstrip(" \t")[len(FENCE):].strip()
    return tag or None


def _trim_blank_lines(lines: List[str]) -> str:
    """Drop whitespace-only lines at both ends and the final line break."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    if start == end:
        return ""

    kept = lines[start:end]
    kept[-1] = kept[-1].rstrip("\r\n")
    return "".join(kept)


def _split_block(text: str) -> Tuple[List[str], Optional[str], bool]:
    lines = _LINE_BREAK.split(text)

    opening = _find_fence(lines, 0)
    if opening is None:
        raise ExtractionError(NO_CODE_BLOCK)

    language = _language_tag(lines[opening])
    closing = _find_fence(lines, opening + 1)
    if closing is None:
        return lines[opening + 1:], language, False

    return lines[opening + 1:closing], language, True


def extract_code_block(text: str) -> CodeBlock:
    """
    Find the first fenced code block in text.

    Args:
        text: Raw model output

    Returns:
        CodeBlock with the inner text, language tag and termination flag

    Raises:
        ExtractionError: If no opening fence exists
    """
    if not text:
        raise ExtractionError(NO_CODE_BLOCK)

    body, language, terminated = _split_block(text)
    if not terminated:
        logger.warning("Code block has no closing fence, using the rest of the response")

    return CodeBlock(
        content=_trim_blank_lines(body),
        language=language,
        terminated=terminated,
    )


def extract_code(text: str) -> str:
    """Shortcut returning only the block's content."""
    return extract_code_block(text).content
