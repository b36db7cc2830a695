"""Exception types and reconciliation failure sentinels."""

from __future__ import annotations

from enum import Enum


class CareerCompassError(Exception):
    """Base class for errors raised by career_compass."""


class InputValidationError(CareerCompassError, ValueError):
    """The request is malformed or lacks required facts.

    This is the only error an analysis call surfaces to its caller.
    ``missing_fields`` lists the absent fact-bundle fields, in a stable order.
    """

    def __init__(self, message: str, missing_fields: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.missing_fields = list(missing_fields or [])


class BackendUnavailable(CareerCompassError):
    """The completion backend or external read API could not be reached."""


class EmptyCompletion(BackendUnavailable):
    """The completion backend answered without any text content."""


class ReconciliationFailure(str, Enum):
    """Why a raw completion could not be turned into a domain result."""

    NO_JSON_FOUND = "no_json_found"
    UNPARSEABLE = "unparseable"
    SCHEMA_MISMATCH = "schema_mismatch"
