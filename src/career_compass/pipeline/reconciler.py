"""Response reconciler: raw completion text -> validated domain result."""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from career_compass.errors import ReconciliationFailure
from career_compass.pipeline.schemas import (
    Choice,
    Count,
    FieldKind,
    Nested,
    NestedList,
    ObjectSpec,
    ResultSchema,
    Score,
    Text,
    TextList,
)
from career_compass.utils.json_parser import extract_payload

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            match = _NUMBER.search(value)
            if not match:
                return None
            number = float(match.group())
        else:
            return None
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _text(value: Any) -> str | None:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def normalize_field(kind: FieldKind, value: Any) -> Any:
    if isinstance(kind, Score):
        number = _as_number(value)
        if number is None:
            return kind.default
        return int(round(min(100.0, max(0.0, number))))
    if isinstance(kind, Count):
        number = _as_number(value)
        if number is None:
            return kind.default
        return max(kind.minimum, int(round(number)))
    if isinstance(kind, Text):
        text = _text(value)
        return text if text else kind.default
    if isinstance(kind, TextList):
        if not isinstance(value, list):
            return []
        return [t for t in (_text(v) for v in value) if t]
    if isinstance(kind, Choice):
        return kind.policy.map(value)
    if isinstance(kind, Nested):
        return normalize_object(value if isinstance(value, dict) else {}, kind.spec)
    if isinstance(kind, NestedList):
        return normalize_list(value, kind.spec)
    raise TypeError(f"Unknown field kind: {kind!r}")


def normalize_object(tree: dict, spec: ObjectSpec) -> dict:
    """Return a dict holding exactly the spec's fields, each coerced or defaulted."""
    return {key: normalize_field(kind, tree.get(key)) for key, kind in spec.fields.items()}


def normalize_list(value: Any, spec: ObjectSpec, max_items: int | None = None) -> list[dict]:
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        if not isinstance(item, dict):
            continue
        normalized = normalize_object(item, spec)
        if all(normalized.get(key) for key in spec.required_text):
            items.append(normalized)
    return items[:max_items] if max_items is not None else items


def normalize(tree: Any, schema: ResultSchema) -> dict | list[dict]:
    """Walk a parsed payload against ``schema``. Idempotent."""
    if schema.shape == "array":
        return normalize_list(tree, schema.spec, schema.max_items)
    return normalize_object(tree if isinstance(tree, dict) else {}, schema.spec)


def reconcile(
    raw: str | None, schema: ResultSchema
) -> BaseModel | list[BaseModel] | ReconciliationFailure:
    """Extract, repair, parse and normalize ``raw`` into ``schema.model``.

    Never raises; returns a ReconciliationFailure when nothing usable is found.
    """
    payload = extract_payload(raw, schema.shape)
    if isinstance(payload, ReconciliationFailure):
        logger.warning("Reconciliation failed for %s: %s", schema.name, payload.value)
        logger.debug("Raw completion (truncated): %r", (raw or "")[:500])
        return payload

    expected = list if schema.shape == "array" else dict
    if not isinstance(payload, expected):
        logger.warning("Reconciliation failed for %s: payload is %s", schema.name, type(payload).__name__)
        return ReconciliationFailure.SCHEMA_MISMATCH

    normalized = normalize(payload, schema)
    try:
        if schema.shape == "array":
            return [schema.model.model_validate(item) for item in normalized]
        return schema.model.model_validate(normalized)
    except ValidationError as exc:
        logger.warning("Normalized %s payload failed validation: %s", schema.name, exc.error_count())
        return ReconciliationFailure.SCHEMA_MISMATCH
