"""Domain helpers for car records."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")
# Years are stored in a signed 64-bit INTEGER column.
YEAR_MIN = -(2**63)
YEAR_MAX = 2**63 - 1
YEAR_MAX_DIGITS = len(str(YEAR_MAX))


@dataclass(frozen=True)
class Car:
    id: str
    year: int
    make: str
    model: str

    def to_dict(self) -> dict:
        return {"id": self.id, "year": self.year, "make": self.make, "model": self.model}


def parse_year(value: str | None) -> Optional[int]:
    """Return the integer year, or None when value is not a 64-bit integer literal."""
    if value is None or not YEAR_PATTERN.fullmatch(value):
        return None
    if len(value.lstrip("+-").lstrip("0")) > YEAR_MAX_DIGITS:
        return None
    year = int(value)
    if not YEAR_MIN <= year <= YEAR_MAX:
        return None
    return year
