from __future__ import annotations

import json
import logging
import re

from .json_utils import strip_code_fences

logger = logging.getLogger(__name__)

MAX_REPEAT_COUNT = 1000

_REPEAT_RE = re.compile(r'"(?P<char>\\.|[^"\\])"\.repeat\((?P<count>[^()]*)\)')
_COUNT_RE = re.compile(r"^\s*(\d+)\s*$")


def clean_response_text(raw: str, max_repeat_count: int = MAX_REPEAT_COUNT) -> str:
    """Turn raw model output into text that strict JSON parsing can accept.

    Code fences around the payload are dropped and ``"c".repeat(n)`` fragments
    are expanded into literal JSON strings of at most ``max_repeat_count``
    characters. Fragments with a count that is not a non-negative integer are
    left as they are.
    """
    text = raw if isinstance(raw, str) else str(raw)
    try:
        text = strip_code_fences(text)
        return _REPEAT_RE.sub(lambda match: _expand_repeat(match, max_repeat_count), text)
    except Exception as exc:
        logger.warning("Response cleaning failed, using partially cleaned text: %s", exc)
        return text


def _expand_repeat(match: re.Match[str], max_repeat_count: int) -> str:
    count_match = _COUNT_RE.match(match.group("count"))
    if count_match is None:
        return match.group(0)

    count = int(count_match.group(1))
    if count > max_repeat_count:
        logger.debug("Truncating repeat count %d to %d", count, max_repeat_count)
        count = max_repeat_count

    try:
        char = json.loads(f'"{match.group("char")}"')
    except ValueError:
        return match.group(0)
    return json.dumps(char * count, ensure_ascii=False)
