"""Tests for code fence redaction."""

import pytest

from skilllens_action.services.feedback.code_fences import ELLIPSIS, redact_code_fences


@pytest.mark.unit
def test_text_without_fences_is_unchanged():
    body = "Consider extracting this into a helper.\nAlso rename `x`."
    assert redact_code_fences(body) == body


@pytest.mark.unit
def test_short_code_blocks_are_unchanged():
    body = '```console\necho "hello"\n```'
    assert redact_code_fences(body, 200) == body


@pytest.mark.unit
def test_long_code_blocks_are_trimmed():
    body = "```" + "x" * 300 + "```"

    result = redact_code_fences(body, 200)

    assert result == "```" + "x" * 200 + ELLIPSIS + "```"
    assert len(result) < len(body)


@pytest.mark.unit
def test_block_at_the_limit_is_unchanged():
    body = "```" + "y" * 200 + "```"
    assert redact_code_fences(body, 200) == body


@pytest.mark.unit
def test_each_fence_is_handled_separately():
    long_block = "```python\n" + "a" * 50 + "\n```"
    short_block = "```\nok\n```"
    body = f"First:\n{long_block}\nthen:\n{short_block}\ndone"

    result = redact_code_fences(body, max_len=20)

    assert result.count(ELLIPSIS) == 1
    # "python\n" counts towards the limit
    assert "```python\n" + "a" * 13 + ELLIPSIS + "```" in result
    assert short_block in result
    assert result.startswith("First:\n")
    assert result.endswith("\ndone")
