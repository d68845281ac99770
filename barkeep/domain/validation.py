"""Field-level validation errors."""
from __future__ import annotations


class ValidationError(Exception):
    """Raised when a field holds a value outside its allowed set.

    ``errors`` maps field names to messages, the shape returned to API clients.
    """

    def __init__(self, field: str, message: str = "is invalid"):
        super().__init__(f"{field} {message}")
        self.field = field
        self.message = message
        self.errors: dict[str, list[str]] = {field: [message]}
