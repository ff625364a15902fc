"""Typed calculation errors. Raised before any cost is computed."""
from typing import Any


class CalculationError(Exception):
    """Base error for rejected calculation input."""

    code = "INVALID_INPUT"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "field": self.field}


class InvalidArea(CalculationError):
    """Area value <= 0 or an unsupported unit."""

    code = "INVALID_AREA"


class InvalidRate(CalculationError):
    """Negative or non-finite rate, quantity or percentage."""

    code = "INVALID_RATE"


class InvalidContingencyBase(CalculationError):
    """Contingency base is neither pre_tax nor post_tax."""

    code = "INVALID_CONTINGENCY_BASE"
