"""Best-effort cleanup of model output before JSON parsing."""

import json
import re

_LEADING_FENCE = re.compile(r"^```[\w+-]*\s*")
_TRAILING_FENCE = re.compile(r"\s*```$")
_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_WHITESPACE = re.compile(r"\s+")

_CLOSERS = {"{": "}", "[": "]"}


def sanitize(raw: str) -> str:
    """Strip code fences, trailing commas and stray whitespace from model output.

    Never raises. Steps are repeated until the text stops changing, so the
    result is a fixed point and ``sanitize(sanitize(x)) == sanitize(x)``.
    """
    text = raw if isinstance(raw, str) else ""
    while True:
        cleaned = _sanitize_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned


def _sanitize_once(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = _LEADING_FENCE.sub("", text)
    if text.endswith("```"):
        text = _TRAILING_FENCE.sub("", text)
    text = _TRAILING_COMMA.sub(r"\1", text)
    return _WHITESPACE.sub(" ", text).strip()


def decode_json(raw: str, opener: str = "{") -> object:
    """Sanitize and parse model output as JSON.

    If the cleaned text is not valid JSON on its own, retry on the span from the
    first ``opener`` to the last matching closer, which drops surrounding prose.
    Raises ``ValueError`` when neither attempt parses, including for oversized
    integer literals and nesting too deep to decode.
    """
    text = sanitize(raw)
    try:
        return _loads(text)
    except ValueError:
        closer = _CLOSERS[opener]
        start = text.find(opener)
        end = text.rfind(closer)
        if start == -1 or end <= start:
            raise
        return _loads(text[start : end + 1])


def _loads(text: str) -> object:
    try:
        return json.loads(text)
    except RecursionError as exc:
        raise ValueError("JSON nesting is too deep") from exc
