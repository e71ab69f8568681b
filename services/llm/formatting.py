"""
Post-processing of LLM output.

The model is asked for HTML but sometimes answers in plain text or light
Markdown; this converts such answers into a displayable fragment. Whatever
the model returns is sanitized, since the client renders it as raw HTML.
"""

import re

from core.sanitization import sanitize_workout_html

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")


def format_llm_response(text: str) -> str:
    """
    Convert an LLM answer into a safe HTML fragment.

    Answers that already contain block-level markup keep their structure.
    Otherwise the text is wrapped in a paragraph, blank lines become
    paragraph breaks, single newlines become <br>, and **bold** / *italic*
    become <strong> / <em>. The result is then reduced to the allowed tags
    with all attributes removed.
    """
    if "<h3>" in text or "<div>" in text:
        return sanitize_workout_html(text)

    formatted = text.replace("\n\n", "</p><p>").replace("\n", "<br>")
    formatted = _BOLD.sub(r"<strong>\1</strong>", formatted)
    formatted = _ITALIC.sub(r"<em>\1</em>", formatted)
    return sanitize_workout_html(f"<p>{formatted}</p>")
