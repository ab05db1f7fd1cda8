"""Input validation for engine records.

Invalid inputs fail fast. Nothing here clamps a value into range.
"""

from decimal import Decimal

# Upper bounds on year counts used as compounding exponents
MAX_LOAN_TERM_YEARS = 50
MAX_PROJECTION_YEAR = 100


class InvalidInputError(ValueError):
    """A calculation input violates its contract (negative price, bad term, ...)."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


def require_non_negative(field: str, value: Decimal) -> None:
    if value < 0:
        raise InvalidInputError(field, f"must be >= 0, got {value}")


def require_positive(field: str, value: Decimal | int) -> None:
    if value <= 0:
        raise InvalidInputError(field, f"must be > 0, got {value}")


def require_percent(field: str, value: Decimal) -> None:
    """Percent expressed on a 0-100 scale."""
    if value < 0 or value > 100:
        raise InvalidInputError(field, f"must be between 0 and 100, got {value}")


def require_fraction(field: str, value: Decimal) -> None:
    """Rate expressed as a fraction in [0, 1]."""
    if value < 0 or value > 1:
        raise InvalidInputError(field, f"must be between 0 and 1, got {value}")


def require_growth_rate(field: str, value: Decimal) -> None:
    """Growth rates may be negative but never -100% or worse."""
    if value <= -1:
        raise InvalidInputError(field, f"must be > -1, got {value}")


def require_at_most(field: str, value: Decimal | int, limit: Decimal | int) -> None:
    if value > limit:
        raise InvalidInputError(field, f"must be <= {limit}, got {value}")
