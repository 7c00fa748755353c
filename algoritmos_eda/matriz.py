"""Two-dimensional matrices."""

from __future__ import annotations

from typing import Any


class Matriz:
    """A rectangular grid of values, indexable as ``m[f][c]``."""

    def __init__(self, filas: int = 0, columnas: int = 0, valor: Any = None) -> None:
        self._datos = [[valor] * columnas for _ in range(filas)]

    def __getitem__(self, f: int) -> list:
        return self._datos[f]

    def at(self, f: int, c: int) -> Any:
        """Return the cell at (f, c); raise IndexError if it does not exist."""
        if not self.pos_correcta(f, c):
            raise IndexError(f"Posicion ({f}, {c}) fuera de la matriz")
        return self._datos[f][c]

    def numfils(self) -> int:
        return len(self._datos)

    def numcols(self) -> int:
        return len(self._datos[0]) if self._datos else 0

    def pos_correcta(self, f: int, c: int) -> bool:
        return 0 <= f < self.numfils() and 0 <= c < self.numcols()

    def __str__(self) -> str:
        return "".join(
            "".join(f"{x} " for x in fila) + "\n" for fila in self._datos
        )