"""Detection of feedback that carries no review content."""

import logging
import re
from typing import Optional

from skilllens_action.utils.logging import get_logger

logger = get_logger(__name__)

# Approval emoji and the letters of "lgtm", matched as one character class
NOISE_PATTERN = re.compile(r"[👍👎✅❌🎉💯lgtm]+")
MAX_NOISE_LENGTH = 5


def _utf16_length(text: str) -> int:
    # Length in UTF-16 code units; emoji outside the BMP count as two
    return len(text.encode("utf-16-le")) // 2


def is_noisy(body: str, log: Optional[logging.Logger] = None) -> bool:
    """
    Return True when a comment is empty or only a short approval.

    Examples of noise: "", "   ", "LGTM", "👍", "✅🎉". Anything longer
    than five UTF-16 code units ("💯💯💯" is six), or with a character
    outside the approval set, is kept.
    """
    log = log or logger
    trimmed = body.strip().lower()
    if not trimmed:
        log.debug("Filtered noisy comment: empty")
        return True
    if _utf16_length(trimmed) <= MAX_NOISE_LENGTH and NOISE_PATTERN.fullmatch(trimmed):
        log.debug(f'Filtered noisy comment: "{trimmed}"')
        return True
    return False
