from __future__ import annotations

import re

_FENCE_TAG_RE = re.compile(r"^```(?:[A-Za-z][A-Za-z0-9_+-]*(?=\s))?")


def strip_code_fences(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```"):
        first_newline = stripped.find("\n")
        if first_newline == -1:
            stripped = _FENCE_TAG_RE.sub("", stripped, count=1)
        else:
            # first line holds the opening fence and its optional language tag
            stripped = stripped[first_newline + 1 :]

    stripped = stripped.rstrip()
    if stripped.endswith("```"):
        stripped = stripped[:-3]
    return stripped.strip()


def extract_json_array(text: str) -> str | None:
    start = text.find("[")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False

    for idx in range(start, len(text)):
        char = text[idx]

        if escaped:
            escaped = False
            continue

        if char == "\\":
            escaped = True
            continue

        if char == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return text[start : idx + 1]

    return None
