"""Outcome kinds a Result can carry (closed set).

Exactly one status holds for any Result instance. OK is the only success
status; every other member is a failure kind.

Statuses:
- OK: Operation succeeded (payload may be present)
- ERROR: Generic business failure
- FORBIDDEN: Caller is authenticated but not allowed
- UNAUTHORIZED: Caller is not authenticated
- INVALID: Input failed validation (carries ValidationError entries)
- NOT_FOUND: Requested resource does not exist
- CONFLICT: Resource state conflict (duplicate, version mismatch)
- CRITICAL_ERROR: Unexpected infrastructural failure
- UNAVAILABLE: Dependency temporarily unavailable
"""

from enum import Enum


class ResultStatus(str, Enum):
    """Outcome kind of a Result (declaration order is significant)."""

    OK = "ok"
    ERROR = "error"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    CRITICAL_ERROR = "critical_error"
    UNAVAILABLE = "unavailable"
