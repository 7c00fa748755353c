"""Directed graphs stored as adjacency lists."""

from __future__ import annotations

from .grafo import Fuente, _iter_tokens, _siguiente


class Digrafo:
    """Directed graph with vertices ``0..v-1``."""

    def __init__(self, v: int) -> None:
        self._v = v
        self._a = 0
        self._ady: list[list[int]] = [[] for _ in range(v)]

    @classmethod
    def leer(cls, tokens: Fuente, primer: int = 0) -> Digrafo:
        """Build a digraph from ``V E v1 w1 ... vE wE``."""
        it = _iter_tokens(tokens)
        g = cls(int(_siguiente(it)))
        for _ in range(int(_siguiente(it))):
            v = int(_siguiente(it))
            w = int(_siguiente(it))
            g.pon_arista(v - primer, w - primer)
        return g

    def num_vertices(self) -> int:
        return self._v

    def num_aristas(self) -> int:
        return self._a

    def _comprobar(self, v: int) -> None:
        if not 0 <= v < self._v:
            raise ValueError("Vertice inexistente")

    def pon_arista(self, v: int, w: int) -> None:
        """Add the directed edge v->w."""
        self._comprobar(v)
        self._comprobar(w)
        self._a += 1
        self._ady[v].append(w)

    def hay_arista(self, u: int, v: int) -> bool:
        """Whether there is an edge from ``u`` to ``v``."""
        self._comprobar(u)
        return v in self._ady[u]

    def ady(self, v: int) -> tuple[int, ...]:
        """Successors of ``v``, in insertion order."""
        self._comprobar(v)
        return tuple(self._ady[v])

    def inverso(self) -> Digrafo:
        """Return the digraph with every edge reversed."""
        inv = Digrafo(self._v)
        for v, adys in enumerate(self._ady):
            for w in adys:
                inv.pon_arista(w, v)
        return inv

    def __str__(self) -> str:
        lineas = [f"{self._v} vértices, {self._a} aristas\n"]
        for v, adys in enumerate(self._ady):
            lineas.append(f"{v}: " + "".join(f"{w} " for w in adys) + "\n")
        return "".join(lineas)