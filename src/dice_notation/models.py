from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1


@dataclass(frozen=True)
class DiceTerm:
    """Roll ``abs(count)`` dice with ``sides`` faces; a negative count negates each die."""

    count: int
    sides: int


@dataclass(frozen=True)
class ConstantTerm:
    value: int


Term: TypeAlias = DiceTerm | ConstantTerm


@dataclass(frozen=True)
class RolledTerm:
    term: Term
    values: tuple[int, ...]

    @property
    def subtotal(self) -> int:
        return sum(self.values)
