from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a tool call against its cached schema.

    Either valid (no error) or invalid with a reason. Reasons have stable
    prefixes, `Tool not found: ` and `Missing required parameter: `, so callers
    can match on the cause.
    """

    error: str | None = None

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls()

    @classmethod
    def invalid(cls, reason: str) -> ValidationResult:
        return cls(error=reason)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if self.is_valid:
            return "ValidationResult(valid)"
        return f"ValidationResult(invalid: {self.error})"
