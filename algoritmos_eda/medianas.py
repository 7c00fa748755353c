"""Queue that yields the median of its elements."""

from __future__ import annotations

import operator
from typing import Iterable, Union

from .priority_queue import PriorityQueue

SIN_ELEMENTOS = "ECSA"


class ColaMedianas:
    """Keeps the lower half in a max-heap and the upper half in a min-heap."""

    def __init__(self) -> None:
        self._menores = PriorityQueue(antes=operator.gt)
        self._mayores = PriorityQueue()

    def _equilibrar(self) -> None:
        if len(self._menores) > len(self._mayores) + 1:
            self._mayores.push(self._menores.pop())
        elif len(self._mayores) > len(self._menores) + 1:
            self._menores.push(self._mayores.pop())

    def insertar(self, x: int) -> None:
        if self.vacia() or not x > self.mediana():
            self._menores.push(x)
        else:
            self._mayores.push(x)
        self._equilibrar()

    def vacia(self) -> bool:
        return self._menores.empty() and self._mayores.empty()

    def mediana(self) -> int:
        """The median; the lower one when the size is even."""
        if self.vacia():
            raise IndexError("cola vacia")
        if len(self._menores) >= len(self._mayores):
            return self._menores.top()
        return self._mayores.top()

    def quitar_mediana(self) -> int:
        """Remove and return the median."""
        if self.vacia():
            raise IndexError("cola vacia")
        if len(self._menores) >= len(self._mayores):
            return self._menores.pop()
        return self._mayores.pop()


def procesar_eventos(eventos: Iterable[int]) -> list[Union[int, str]]:
    """Positive values arrive; any other value asks for (and removes) the median."""
    cola = ColaMedianas()
    salida: list[Union[int, str]] = []
    for x in eventos:
        if x > 0:
            cola.insertar(x)
        elif cola.vacia():
            salida.append(SIN_ELEMENTOS)
        else:
            salida.append(cola.quitar_mediana())
    return salida


def resolver_medianas(texto: str) -> str:
    """Process cases ``n e1 .. en`` until the input ends, one line per case."""
    it = (int(t) for t in texto.split())
    lineas = []
    for n in it:
        eventos = [next(it, None) for _ in range(n)]
        if None in eventos:
            raise EOFError("Entrada incompleta")
        lineas.append("".join(f"{r} " for r in procesar_eventos(eventos)) + "\n")
    return "".join(lineas)