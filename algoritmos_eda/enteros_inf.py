"""Integers extended with a positive infinity."""

from __future__ import annotations

from functools import total_ordering

_INT_INF = 1_000_000_000


@total_ordering
class EntInf:
    """An integer value that saturates at +infinity."""

    INT_INF = _INT_INF

    __slots__ = ("num",)

    def __init__(self, num: int = 0) -> None:
        self.num = num

    @staticmethod
    def _coerce(other: object) -> EntInf | None:
        if isinstance(other, EntInf):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return EntInf(other)
        return None

    def __add__(self, other: object) -> EntInf:
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        if self.num == _INT_INF or b.num == _INT_INF or self.num >= _INT_INF - b.num:
            return EntInf(_INT_INF)
        return EntInf(self.num + b.num)

    def __eq__(self, other: object) -> bool:
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self.num == b.num

    def __hash__(self) -> int:
        return hash(self.num)

    def __lt__(self, other: object) -> bool:
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        if self.num == _INT_INF:
            return False
        if b.num == _INT_INF:
            return True
        return self.num < b.num

    def __gt__(self, other: object) -> bool:
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return b < self

    def __str__(self) -> str:
        return "+Inf" if self.num == _INT_INF else str(self.num)

    def __repr__(self) -> str:
        return f"EntInf({self})"


INFINITO = EntInf(_INT_INF)