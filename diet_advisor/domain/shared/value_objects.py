"""
Shared value objects.

Immutable, validated domain primitives.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from diet_advisor.domain.shared.errors import InvalidHbA1cError

HBA1C_MIN_EXCLUSIVE = 0.0
HBA1C_MAX_INCLUSIVE = 25.0


class HbA1c(BaseModel):
    """
    HbA1c reading value object (percent).

    Valid range is (0, 25]: zero and negatives are rejected,
    25 itself is accepted.

    Example:
        >>> reading = HbA1c(value=5.7)
        >>> str(reading)
        '5.7'
        >>> HbA1c.from_input("6,5").value
        6.5
    """

    model_config = ConfigDict(frozen=True)

    value: float = Field(
        ...,
        gt=HBA1C_MIN_EXCLUSIVE,
        le=HBA1C_MAX_INCLUSIVE,
        description="HbA1c percentage",
    )

    @field_validator("value")
    @classmethod
    def finite(cls, v: float) -> float:
        """Reject NaN and infinities."""
        if not math.isfinite(v):
            raise ValueError("HbA1c must be a finite number")
        return v

    def __str__(self) -> str:
        """Render as entered, in fixed-point (5.7, 7, 0.00001)."""
        text = format(Decimal(repr(self.value)), "f")
        return text[:-2] if text.endswith(".0") else text

    def __repr__(self) -> str:
        """Debug representation."""
        return f"HbA1c({self.value!r})"

    def __hash__(self) -> int:
        """Allow use as dict key."""
        return hash(self.value)

    @classmethod
    def from_input(cls, raw: Any) -> HbA1c:
        """
        Parse a raw form or JSON value.

        Accepts numbers and numeric strings; a decimal comma is
        treated as a decimal point.

        Args:
            raw: User supplied value

        Returns:
            Validated HbA1c

        Raises:
            InvalidHbA1cError: If not a finite number in (0, 25]
        """
        if isinstance(raw, bool) or raw is None:
            raise InvalidHbA1cError(f"HbA1c is not a number: {raw!r}")

        if isinstance(raw, str):
            text = raw.strip().replace(",", ".")
            try:
                number = float(text)
            except ValueError as e:
                raise InvalidHbA1cError(f"HbA1c is not a number: {raw!r}") from e
        elif isinstance(raw, (int, float)):
            number = float(raw)
        else:
            raise InvalidHbA1cError(f"HbA1c is not a number: {raw!r}")

        try:
            return cls(value=number)
        except PydanticValidationError as e:
            raise InvalidHbA1cError(f"HbA1c out of range: {number}") from e
