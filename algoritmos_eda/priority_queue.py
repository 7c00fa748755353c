"""Binary-heap priority queue and heapsort with a custom ordering."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, MutableSequence

Antes = Callable[[Any, Any], bool]


class PriorityQueue:
    """Priority queue where ``antes(a, b)`` means ``a`` leaves before ``b``."""

    def __init__(self, elementos: Iterable[Any] = (), antes: Antes = operator.lt) -> None:
        self._antes = antes
        self._datos: list = list(elementos)
        for i in range(len(self._datos) // 2 - 1, -1, -1):
            self._hundir(i)

    def push(self, x: Any) -> None:
        self._datos.append(x)
        self._flotar(len(self._datos) - 1)

    def __len__(self) -> int:
        return len(self._datos)

    def empty(self) -> bool:
        return not self._datos

    def top(self) -> Any:
        if not self._datos:
            raise IndexError("La cola vacia no tiene top")
        return self._datos[0]

    def pop(self) -> Any:
        """Remove and return the element with the highest priority."""
        if not self._datos:
            raise IndexError("Imposible eliminar el primero de una cola vacia")
        prim = self._datos[0]
        ultimo = self._datos.pop()
        if self._datos:
            self._datos[0] = ultimo
            self._hundir(0)
        return prim

    def _flotar(self, i: int) -> None:
        datos, antes = self._datos, self._antes
        elem = datos[i]
        hueco = i
        while hueco > 0 and antes(elem, datos[(hueco - 1) // 2]):
            padre = (hueco - 1) // 2
            datos[hueco] = datos[padre]
            hueco = padre
        datos[hueco] = elem

    def _hundir(self, i: int) -> None:
        datos, antes = self._datos, self._antes
        n = len(datos)
        elem = datos[i]
        hueco = i
        hijo = 2 * hueco + 1
        while hijo < n:
            if hijo + 1 < n and antes(datos[hijo + 1], datos[hijo]):
                hijo += 1
            if antes(datos[hijo], elem):
                datos[hueco] = datos[hijo]
                hueco = hijo
                hijo = 2 * hueco + 1
            else:
                break
        datos[hueco] = elem


def _hundir_max(v: MutableSequence, n: int, j: int, cmp: Antes) -> None:
    elem = v[j]
    hueco = j
    hijo = 2 * hueco + 1
    while hijo < n:
        if hijo + 1 < n and cmp(v[hijo], v[hijo + 1]):
            hijo += 1
        if cmp(elem, v[hijo]):
            v[hueco] = v[hijo]
            hueco = hijo
            hijo = 2 * hueco + 1
        else:
            break
    v[hueco] = elem


def heapsort(v: MutableSequence, antes: Antes = operator.lt) -> None:
    """Sort ``v`` in place so that it is ascending with respect to ``antes``."""
    n = len(v)
    for i in range((n - 1) // 2, -1, -1):
        _hundir_max(v, n, i, antes)
    for i in range(n - 1, 0, -1):
        v[i], v[0] = v[0], v[i]
        _hundir_max(v, i, 0, antes)


def compara_sin_mayusculas(a: str, b: str) -> bool:
    """Case-insensitive 'less than' for strings."""
    return a.lower() < b.lower()