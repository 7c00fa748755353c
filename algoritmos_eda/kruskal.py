"""Minimum spanning tree by Kruskal's algorithm."""

from __future__ import annotations

from typing import Any

from .conjuntos_disjuntos import ConjuntosDisjuntos
from .grafo_valorado import Arista, GrafoValorado
from .priority_queue import PriorityQueue


class ARMKruskal:
    """Minimum spanning tree (or forest) of a weighted undirected graph."""

    def __init__(self, g: GrafoValorado) -> None:
        self._arm: list[Arista] = []
        self._coste: Any = 0
        pq = PriorityQueue(g.aristas())
        cjtos = ConjuntosDisjuntos(g.num_vertices())
        objetivo = g.num_vertices() - 1
        while not pq.empty():
            a = pq.pop()
            v = a.uno()
            w = a.otro(v)
            if not cjtos.unidos(v, w):
                cjtos.unir(v, w)
                self._arm.append(a)
                self._coste += a.valor
                if len(self._arm) == objetivo:
                    break

    def coste(self) -> Any:
        """Total value of the chosen edges."""
        return self._coste

    def arm(self) -> list[Arista]:
        """The chosen edges, in the order they were taken."""
        return list(self._arm)