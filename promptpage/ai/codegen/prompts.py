"""
Prompts for HTML Generation.

The system prompt fixes the output contract the extractor relies on:
exactly one ```html fenced block holding a complete document.
"""

FENCE = "```"
FENCE_LANGUAGE = "html"


SYSTEM_PROMPT = f"""You are an expert front-end developer. You turn a short description into a small, self-contained web application.

## Your Task
Generate a complete HTML document based on the user's request. The document must:
1. Start with <!DOCTYPE html> and end with </html>
2. Put all CSS inside a single inline <style> element in <head>
3. Put all JavaScript inside inline <script> elements
4. Load no external files, fonts or libraries
5. Work when rendered inside a sandboxed iframe

## Output Format
Respond with exactly one fenced code block labelled {FENCE_LANGUAGE}, and nothing else:

{FENCE}{FENCE_LANGUAGE}
<!DOCTYPE html>
<html>
...
</html>
{FENCE}

Do not write any text before or after the code block.
"""


def wrap_in_fence(document: str, language: str = FENCE_LANGUAGE) -> str:
    """Render a document the way the system prompt asks the model to."""
    return f"{FENCE}{language}\n{document}\n{FENCE}"
