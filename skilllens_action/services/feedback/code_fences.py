"""Trimming of oversized fenced code blocks in feedback text."""

import logging
import re
from typing import Optional

from skilllens_action.utils.logging import get_logger

logger = get_logger(__name__)

FENCE = "```"
ELLIPSIS = "…"
DEFAULT_MAX_FENCE_LENGTH = 200

# Shortest span between two fence delimiters, across newlines
FENCE_PATTERN = re.compile(r"```(.*?)```", re.DOTALL)


def redact_code_fences(
    body: str,
    max_len: int = DEFAULT_MAX_FENCE_LENGTH,
    log: Optional[logging.Logger] = None,
) -> str:
    """
    Truncate the content of every fenced block longer than `max_len`.

    A trimmed block keeps its first `max_len` characters followed by an
    ellipsis, inside the original delimiters. Shorter blocks and text
    outside fences are returned unchanged.
    """
    log = log or logger
    trimmed_count = 0

    def _trim(match: re.Match) -> str:
        nonlocal trimmed_count
        content = match.group(1)
        if len(content) <= max_len:
            return match.group(0)
        trimmed_count += 1
        return f"{FENCE}{content[:max_len]}{ELLIPSIS}{FENCE}"

    redacted = FENCE_PATTERN.sub(_trim, body)
    if trimmed_count:
        log.debug(f"Trimmed {trimmed_count} code block(s) longer than {max_len} chars")
    return redacted
