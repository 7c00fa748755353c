"""Indexed priority queue over the elements ``0..n-1``."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional

Antes = Callable[[Any, Any], bool]


@dataclass
class Par:
    """An element together with its priority."""

    elem: int
    prioridad: Any


class IndexPQ:
    """Binary heap whose element priorities can be changed in O(log n)."""

    def __init__(self, n: int, antes: Antes = operator.lt) -> None:
        self._antes = antes
        self._datos: list[Par] = []
        self._posiciones: list[Optional[int]] = [None] * n

    def _posicion(self, e: int) -> Optional[int]:
        if not 0 <= e < len(self._posiciones):
            raise IndexError(f"Elemento fuera de rango: {e}")
        return self._posiciones[e]

    def push(self, e: int, p: Any) -> None:
        if self._posicion(e) is not None:
            raise ValueError("No se pueden insertar elementos repetidos.")
        self._datos.append(Par(e, p))
        self._flotar(len(self._datos) - 1)

    def update(self, e: int, p: Any) -> None:
        """Set the priority of ``e``, inserting it if it is not present."""
        i = self._posicion(e)
        if i is None:
            self.push(e, p)
            return
        self._datos[i].prioridad = p
        if i > 0 and self._antes(p, self._datos[(i - 1) // 2].prioridad):
            self._flotar(i)
        else:
            self._hundir(i)

    def __len__(self) -> int:
        return len(self._datos)

    def empty(self) -> bool:
        return not self._datos

    def top(self) -> Par:
        if not self._datos:
            raise IndexError("No se puede consultar el primero de una cola vacia")
        return self._datos[0]

    def pop(self) -> Par:
        """Remove and return the pair with the highest priority."""
        if not self._datos:
            raise IndexError("No se puede eliminar el primero de una cola vacia.")
        prim = self._datos[0]
        self._posiciones[prim.elem] = None
        ultimo = self._datos.pop()
        if self._datos:
            self._datos[0] = ultimo
            self._posiciones[ultimo.elem] = 0
            self._hundir(0)
        return prim

    def _colocar(self, hueco: int, par: Par) -> None:
        self._datos[hueco] = par
        self._posiciones[par.elem] = hueco

    def _flotar(self, i: int) -> None:
        datos, antes = self._datos, self._antes
        parmov = datos[i]
        hueco = i
        while hueco > 0 and antes(parmov.prioridad, datos[(hueco - 1) // 2].prioridad):
            padre = (hueco - 1) // 2
            self._colocar(hueco, datos[padre])
            hueco = padre
        self._colocar(hueco, parmov)

    def _hundir(self, i: int) -> None:
        datos, antes = self._datos, self._antes
        n = len(datos)
        parmov = datos[i]
        hueco = i
        hijo = 2 * hueco + 1
        while hijo < n:
            if hijo + 1 < n and antes(datos[hijo + 1].prioridad, datos[hijo].prioridad):
                hijo += 1
            if antes(datos[hijo].prioridad, parmov.prioridad):
                self._colocar(hueco, datos[hijo])
                hueco = hijo
                hijo = 2 * hueco + 1
            else:
                break
        self._colocar(hueco, parmov)