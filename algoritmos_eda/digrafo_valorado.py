"""Directed weighted graphs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .grafo import Fuente, _iter_tokens, _siguiente
from .grafo_valorado import _numero


@dataclass(frozen=True)
class AristaDirigida:
    """Directed edge ``desde -> hasta`` with a value."""

    desde: int
    hasta: int
    valor: Any

    def __lt__(self, other: AristaDirigida) -> bool:
        if not isinstance(other, AristaDirigida):
            return NotImplemented
        return self.valor < other.valor

    def __gt__(self, other: AristaDirigida) -> bool:
        if not isinstance(other, AristaDirigida):
            return NotImplemented
        return other.valor < self.valor

    def __str__(self) -> str:
        return f"({self.desde}, {self.hasta}, {self.valor})"


class DigrafoValorado:
    """Directed weighted graph with vertices ``0..v-1``."""

    def __init__(self, v: int) -> None:
        self._v = v
        self._a = 0
        self._ady: list[list[AristaDirigida]] = [[] for _ in range(v)]

    @classmethod
    def leer(cls, tokens: Fuente, primer: int = 0) -> DigrafoValorado:
        """Build a digraph from ``V E v1 w1 c1 ... vE wE cE``."""
        it = _iter_tokens(tokens)
        g = cls(int(_siguiente(it)))
        for _ in range(int(_siguiente(it))):
            v = int(_siguiente(it))
            w = int(_siguiente(it))
            c = _numero(_siguiente(it))
            g.pon_arista(AristaDirigida(v - primer, w - primer, c))
        return g

    def num_vertices(self) -> int:
        return self._v

    def num_aristas(self) -> int:
        return self._a

    def _comprobar(self, v: int) -> None:
        if not 0 <= v < self._v:
            raise ValueError("Vertice inexistente")

    def pon_arista(self, arista: AristaDirigida) -> None:
        self._comprobar(arista.desde)
        self._comprobar(arista.hasta)
        self._a += 1
        self._ady[arista.desde].append(arista)

    def hay_arista(self, v: int, w: int) -> bool:
        """Whether there is an edge from ``v`` to ``w``."""
        self._comprobar(v)
        return any(a.hasta == w for a in self._ady[v])

    def ady(self, v: int) -> tuple[AristaDirigida, ...]:
        """Edges leaving ``v``, in insertion order."""
        self._comprobar(v)
        return tuple(self._ady[v])

    def inverso(self) -> DigrafoValorado:
        """Return the digraph with every edge reversed, keeping values."""
        inv = DigrafoValorado(self._v)
        for adys in self._ady:
            for a in adys:
                inv.pon_arista(AristaDirigida(a.hasta, a.desde, a.valor))
        return inv

    def __str__(self) -> str:
        lineas = [f"{self._v} vértices, {self._a} aristas\n"]
        for v, adys in enumerate(self._ady):
            lineas.append(f"{v}: " + "".join(f"{a} " for a in adys) + "\n")
        return "".join(lineas)