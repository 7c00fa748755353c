"""Shortest paths in weighted digraphs."""

from __future__ import annotations

import math
from collections import deque
from typing import Any, Optional

from .digrafo_valorado import AristaDirigida, DigrafoValorado
from .index_pq import IndexPQ


def _comprobar(g: DigrafoValorado, v: int) -> None:
    if not 0 <= v < g.num_vertices():
        raise ValueError("Vertice inexistente")


class Dijkstra:
    """Shortest distances from ``origen`` by Dijkstra's algorithm.

    Vertices that cannot be reached keep the distance ``infinito``.
    """

    def __init__(self, g: DigrafoValorado, origen: int, infinito: Any = math.inf) -> None:
        _comprobar(g, origen)
        n = g.num_vertices()
        self._origen = origen
        self._infinito = infinito
        self._dist: list[Any] = [infinito] * n
        self._ult: list[Optional[AristaDirigida]] = [None] * n
        # number of tight incoming edges seen for each vertex
        self._formas: list[int] = [0] * n
        self._dist[origen] = 0
        pq = IndexPQ(n)
        pq.push(origen, 0)
        while not pq.empty():
            v = pq.pop().elem
            for a in g.ady(v):
                self._relajar(a, pq)

    def _relajar(self, a: AristaDirigida, pq: IndexPQ) -> None:
        v, w = a.desde, a.hasta
        nueva = self._dist[v] + a.valor
        if self._dist[w] > nueva:
            self._dist[w] = nueva
            self._ult[w] = a
            pq.update(w, nueva)
            self._formas[w] = 1
        elif self._dist[w] == nueva:
            self._formas[w] += 1

    def _comprobar(self, v: int) -> None:
        if not 0 <= v < len(self._dist):
            raise ValueError("Vertice inexistente")

    def hay_camino(self, v: int) -> bool:
        self._comprobar(v)
        return self._dist[v] != self._infinito

    def distancia(self, v: int) -> Any:
        """Length of a shortest path to ``v`` (``infinito`` if unreachable)."""
        self._comprobar(v)
        return self._dist[v]

    def camino(self, v: int) -> list[AristaDirigida]:
        """Edges of a shortest path from the source to ``v``."""
        if not self.hay_camino(v):
            raise ValueError("No existe camino")
        cam: list[AristaDirigida] = []
        x = v
        while x != self._origen:
            a = self._ult[x]
            cam.append(a)
            x = a.desde
        cam.reverse()
        return cam


def _saltos_bfs(g: DigrafoValorado, origen: int) -> list[Optional[int]]:
    saltos: list[Optional[int]] = [None] * g.num_vertices()
    saltos[origen] = 0
    cola = deque([origen])
    while cola:
        v = cola.popleft()
        for a in g.ady(v):
            if saltos[a.hasta] is None:
                saltos[a.hasta] = saltos[v] + 1
                cola.append(a.hasta)
    return saltos


class GrafoCiudad:
    """Compares the shortest route by length with the one by number of streets."""

    def __init__(self, g: DigrafoValorado, origen: int, destino: int) -> None:
        _comprobar(g, origen)
        _comprobar(g, destino)
        n = g.num_vertices()
        self._destino = destino
        self._saltos = _saltos_bfs(g, origen)
        dist: list[tuple[Any, int]] = [(math.inf, 0)] * n
        dist[origen] = (0, 0)
        pq = IndexPQ(n)
        pq.push(origen, dist[origen])
        while not pq.empty():
            v = pq.pop().elem
            dv, av = dist[v]
            for a in g.ady(v):
                w = a.hasta
                nueva = dv + a.valor
                dw, aw = dist[w]
                if dw > nueva:
                    dist[w] = (nueva, av + 1)
                    pq.update(w, dist[w])
                elif dw == nueva and aw > av + 1:
                    dist[w] = (dw, av + 1)
                    pq.update(w, dist[w])
        self._dist = dist

    def hay_camino(self) -> bool:
        return self._saltos[self._destino] is not None

    def iguales(self) -> bool:
        """Whether some shortest route uses as few streets as the fewest possible."""
        return self.hay_camino() and self._saltos[self._destino] == self._dist[self._destino][1]

    def longitud(self) -> Any:
        """Length of the shortest route (infinite if there is none)."""
        return self._dist[self._destino][0]


def caminos_al_cole(g: DigrafoValorado) -> int:
    """Ways to go from vertex 0 to the last vertex by a shortest route.

    Multiplies, along one shortest path, the number of tight incoming edges
    of each vertex reached. Returns 0 when there is no route.
    """
    n = g.num_vertices()
    if n == 0:
        raise ValueError("Grafo sin vertices")
    d = Dijkstra(g, 0)
    destino = n - 1
    if not d.hay_camino(destino):
        return 0
    return math.prod(d._formas[a.hasta] for a in d.camino(destino))