"""Domain helpers for account permissions and saved-search options."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from .validation import ValidationError

PERMISSION_NORMAL = "normal"
PERMISSION_ADMIN = "admin"
PERMISSION_DEMO = "demo"
PERMISSIONS = (PERMISSION_NORMAL, PERMISSION_ADMIN, PERMISSION_DEMO)

ONE_YEAR = 365
VALID_SAVED_SEARCH_TIME_PERIODS = (None, 1, 3, 7, 14, 30, ONE_YEAR)

DEMO_AVATAR_PATH = "/assets/images/demo_avatar.png"

# Query options a saved search can carry, besides its id, owner and rank.
SAVED_SEARCH_OPTIONS = (
    "repos",
    "authors",
    "paths",
    "messages",
    "branches",
    "unapproved_only",
    "email_changes",
    "email_comments",
    "time_period",
)
SAVED_SEARCH_FIELDS = ("id", "user_id", "user_order") + SAVED_SEARCH_OPTIONS

MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def validate_time_period(value: Any, field: str = "saved_search_time_period") -> int | None:
    """Return the value when it is an allowed time period, else raise ValidationError."""
    # bool is an int subclass; True must not pass as 1.
    if isinstance(value, bool) or value not in VALID_SAVED_SEARCH_TIME_PERIODS:
        raise ValidationError(field, "is invalid")
    return value


def validate_permission(value: str | None) -> str:
    if value not in PERMISSIONS:
        raise ValidationError("permission", "is invalid")
    return value


def check_saved_search_options(options: Mapping[str, Any], allowed: Iterable[str] = SAVED_SEARCH_FIELDS) -> None:
    """Reject option names a saved search does not have."""
    allowed_set = set(allowed)
    for key in options:
        if key not in allowed_set:
            raise ValidationError(key, "is not a saved search option")
    if "time_period" in options:
        validate_time_period(options["time_period"], field="time_period")


def next_user_order(existing: Iterable[int | None]) -> int:
    """Rank for a new saved search: one above the current maximum, or 0."""
    ranks = [rank for rank in existing if rank is not None]
    return max(ranks) + 1 if ranks else 0


def coerce_id(value: Any) -> int | None:
    """Convert an external id (path segment, form value) to the integer key space."""
    if isinstance(value, bool):
        return None
    try:
        key = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    # Ids outside a signed 64-bit column can never match a row.
    if not MIN_ID <= key <= MAX_ID:
        return None
    return key
