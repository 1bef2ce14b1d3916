"""A worked `EvaluableStruct`: a square whose four sides must match."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .errors import ValidationError
from .validator import Validator


@dataclass
class Square:
    side1_length: float
    side2_length: float
    side3_length: float
    side4_length: float

    def validate(self, *args: Any) -> Optional[ValidationError]:
        if not (self.side1_length == self.side2_length == self.side3_length == self.side4_length):
            return ValidationError("not a square - sides are not equal")
        return None


def create_square(side_length: float, validator: Validator) -> Optional[Square]:
    """Build a square and return it only if `validator` accepts it."""
    sq = Square(side_length, side_length, side_length, side_length)
    if validator.struct(sq) is not None:
        return None
    return sq
