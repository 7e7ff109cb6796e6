"""Text helpers shared by the transcript pipeline."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

# Only these six entities are decoded; anything else is left untouched.
_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
}
_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity in _ENTITIES))


def decode_entities(text: str) -> str:
    """
    Decode the six basic HTML entities in a single left-to-right pass.

    Replaced text is never rescanned, so ``&amp;lt;`` becomes ``&lt;`` and not ``<``.

    Args:
        text: Text possibly containing HTML entities

    Returns:
        Decoded text
    """
    if not text:
        return ""
    return _ENTITY_PATTERN.sub(lambda match: _ENTITIES[match.group(0)], text)


def seconds_to_ms(value: str) -> int:
    """
    Convert a fractional seconds string to whole milliseconds.

    Rounds half away from zero. Decimal arithmetic keeps values such as
    ``"1.0005"`` from being skewed by binary float representation.

    Raises:
        ValueError: If *value* is not a finite number
    """
    try:
        seconds = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid time value: {value!r}")
    if not seconds.is_finite():
        raise ValueError(f"Invalid time value: {value!r}")
    return int((seconds * 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_timestamp(ms: int) -> str:
    """Format milliseconds as MM:SS, or HH:MM:SS past the hour."""
    total_seconds = ms // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def clean_code_fences(text: str) -> str:
    """Strip markdown code fences and blank lines around a model response."""
    text = re.sub(r"```(?:json)?\s*|\s*```", "", text or "")
    text = text.strip()
    return re.sub(r"\n\s*\n", "\n", text)
