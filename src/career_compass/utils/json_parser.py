"""Extract and repair JSON payloads from LLM responses.

The repair passes are best-effort and bounded: they fix the specific
malformations the completion backend is known to emit (code fences, prose
around the payload, trailing commas, bare keys, single quotes, raw newlines).
This is not a general JSON5 parser.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Literal

from career_compass.errors import ReconciliationFailure

logger = logging.getLogger(__name__)

Shape = Literal["object", "array"]

_FENCE = re.compile(r"```[A-Za-z0-9_+-]*")
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_BARE_KEY = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)\s*:")
_SINGLE_QUOTED = re.compile(r"([{\[:,]\s*)'([^'\"]*)'")
_WHITESPACE = re.compile(r"\s+")

_DELIMITERS: dict[str, tuple[str, str]] = {
    "object": ("{", "}"),
    "array": ("[", "]"),
}


def strip_code_fences(text: str) -> str:
    """Remove ``` markers (with optional language tag) wherever they appear."""
    return _FENCE.sub("", text)


def extract_boundaries(text: str, shape: Shape = "object") -> str | None:
    """Slice from the first opening delimiter to the last closing one."""
    opener, closer = _DELIMITERS[shape]
    start = text.find(opener)
    end = text.rfind(closer)
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def remove_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA.sub(r"\1", text)


def quote_bare_keys(text: str) -> str:
    return _BARE_KEY.sub(r'\1"\2":', text)


def convert_single_quotes(text: str) -> str:
    return _SINGLE_QUOTED.sub(r'\1"\2"', text)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


# Order matters: later passes assume the earlier ones ran.
REPAIR_PASSES = (
    remove_trailing_commas,
    quote_bare_keys,
    convert_single_quotes,
    collapse_whitespace,
)


def repair_json(text: str) -> str:
    """Apply every repair pass in order."""
    for repair in REPAIR_PASSES:
        text = repair(text)
    return text


def _loads(text: str) -> Any | None:
    try:
        return json.loads(text)
    except (ValueError, TypeError, RecursionError):
        # ValueError covers JSONDecodeError and over-long integer literals
        return None


def extract_payload(text: str | None, shape: Shape = "object") -> Any | ReconciliationFailure:
    """Extract a JSON payload from raw completion text.

    Never raises. Tries in order:
    1. Strict parse of the whole text (well-formed input is returned untouched)
    2. Strip code fences, slice the outermost delimiters, strict parse
    3. Apply the repair passes to the slice and parse again

    Returns the parsed value, or a ReconciliationFailure sentinel.
    """
    if not text or not text.strip():
        return ReconciliationFailure.NO_JSON_FOUND

    opener, _ = _DELIMITERS[shape]
    stripped = text.strip()

    # 1) Direct parse
    if stripped.startswith(opener):
        parsed = _loads(stripped)
        if parsed is not None:
            return parsed

    # 2) Fences + boundaries
    candidate = extract_boundaries(strip_code_fences(stripped), shape)
    if candidate is None:
        return ReconciliationFailure.NO_JSON_FOUND
    parsed = _loads(candidate)
    if parsed is not None:
        return parsed

    # 3) Repair
    repaired = repair_json(candidate)
    parsed = _loads(repaired)
    if parsed is not None:
        return parsed

    logger.debug("Unparseable payload after repair: %s", repaired[:200])
    return ReconciliationFailure.UNPARSEABLE
