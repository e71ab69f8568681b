"""
Input sanitization utilities.

Shared sanitization functions used before user-provided values are placed
into an LLM prompt, and the allowlist sanitizer for
HTML that comes back from it.
This module has no dependencies on models or services to avoid circular imports.
"""

import re

import nh3

from core.constants import MAX_PROMPT_VALUE_LENGTH


def sanitize_user_input(value: str, max_length: int = MAX_PROMPT_VALUE_LENGTH) -> str:
    """
    Sanitize user input by removing control characters and limiting length.

    This function is designed to prevent prompt injection attacks by:
    - Removing newlines, carriage returns, tabs, and control characters
    - Collapsing multiple spaces into one
    - Stripping leading/trailing whitespace
    - Truncating to a maximum length

    Args:
        value: Raw user-provided string
        max_length: Maximum allowed length (default: MAX_PROMPT_VALUE_LENGTH)

    Returns:
        Sanitized string safe for prompt inclusion
    """
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    sanitized = sanitized.strip()
    return sanitized[:max_length]


def humanize_key(key: str) -> str:
    """Capitalize the first letter of a form key ("legs" -> "Legs")."""
    return key[:1].upper() + key[1:]


# Markup allowed in generated workout HTML; every attribute is dropped
ALLOWED_WORKOUT_TAGS = frozenset({
    "p", "ul", "ol", "li", "strong", "b", "em", "i", "h3", "h4", "div", "br",
})


def sanitize_workout_html(html: str) -> str:
    """
    Reduce untrusted workout HTML to the allowed markup.

    Tags outside ALLOWED_WORKOUT_TAGS are unwrapped (their text is kept),
    except <script> and <style>, which are removed with their content. All
    attributes, including class, style, id and event handlers, are stripped.

    Args:
        html: HTML fragment, e.g. an LLM answer

    Returns:
        Sanitized HTML fragment
    """
    return nh3.clean(
        html,
        tags=set(ALLOWED_WORKOUT_TAGS),
        clean_content_tags={"script", "style"},
        attributes={},
        strip_comments=True,
    )
