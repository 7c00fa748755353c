"""Undirected weighted graphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .grafo import Fuente, _iter_tokens, _siguiente


def _numero(token: Any) -> Any:
    if isinstance(token, (int, float)):
        return token
    try:
        return int(token)
    except ValueError:
        return float(token)


@dataclass(frozen=True)
class Arista:
    """Undirected edge between ``v`` and ``w`` with a value."""

    v: int
    w: int
    valor: Any

    def uno(self) -> int:
        """One of the endpoints."""
        return self.v

    def otro(self, u: int) -> int:
        """The endpoint that is not ``u``."""
        return self.w if u == self.v else self.v

    def __lt__(self, other: Arista) -> bool:
        if not isinstance(other, Arista):
            return NotImplemented
        return self.valor < other.valor

    def __gt__(self, other: Arista) -> bool:
        if not isinstance(other, Arista):
            return NotImplemented
        return other.valor < self.valor

    def __str__(self) -> str:
        return f"({self.v}, {self.w}, {self.valor})"


class GrafoValorado:
    """Undirected weighted graph with vertices ``0..v-1``."""

    def __init__(self, v: int) -> None:
        self._v = v
        self._a = 0
        self._ady: list[list[Arista]] = [[] for _ in range(v)]

    @classmethod
    def leer(cls, tokens: Fuente, primer: int = 0) -> GrafoValorado:
        """Build a graph from ``V E v1 w1 c1 ... vE wE cE``."""
        it = _iter_tokens(tokens)
        g = cls(int(_siguiente(it)))
        for _ in range(int(_siguiente(it))):
            v = int(_siguiente(it))
            w = int(_siguiente(it))
            c = _numero(_siguiente(it))
            g.pon_arista(Arista(v - primer, w - primer, c))
        return g

    def num_vertices(self) -> int:
        return self._v

    def num_aristas(self) -> int:
        return self._a

    def _comprobar(self, v: int) -> None:
        if not 0 <= v < self._v:
            raise ValueError("Vertice inexistente")

    def pon_arista(self, arista: Arista) -> None:
        v = arista.uno()
        w = arista.otro(v)
        self._comprobar(v)
        self._comprobar(w)
        self._a += 1
        self._ady[v].append(arista)
        self._ady[w].append(arista)

    def ady(self, v: int) -> tuple[Arista, ...]:
        """Edges incident to ``v``, in insertion order."""
        self._comprobar(v)
        return tuple(self._ady[v])

    def aristas(self) -> list[Arista]:
        """Every edge once, listed from its lower endpoint (loops excluded)."""
        return [
            arista
            for v, adys in enumerate(self._ady)
            for arista in adys
            if v < arista.otro(v)
        ]

    def __str__(self) -> str:
        lineas = [f"{self._v} vértices, {self._a} aristas\n"]
        for v, adys in enumerate(self._ady):
            lineas.append(f"{v}: " + "".join(f"{a} " for a in adys) + "\n")
        return "".join(lineas)