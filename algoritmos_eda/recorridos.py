"""Traversals of undirected graphs and of grids."""

from __future__ import annotations

from collections import deque
from typing import Optional, Sequence

from .grafo import Grafo

_DIRECCIONES = ((1, 0), (0, 1), (-1, 0), (0, -1))


class CaminoMasCorto:
    """Shortest paths (in number of edges) from a source vertex, found by BFS."""

    def __init__(self, g: Grafo, s: int) -> None:
        n = g.num_vertices()
        if not 0 <= s < n:
            raise ValueError("Vertice inexistente")
        self._s = s
        self._ant: list[Optional[int]] = [None] * n
        self._dist: list[Optional[int]] = [None] * n
        self._dist[s] = 0
        cola = deque([s])
        while cola:
            v = cola.popleft()
            for w in g.ady(v):
                if self._dist[w] is None:
                    self._ant[w] = v
                    self._dist[w] = self._dist[v] + 1
                    cola.append(w)

    def _comprobar(self, v: int) -> None:
        if not 0 <= v < len(self._dist):
            raise ValueError("Vertice inexistente")

    def hay_camino(self, v: int) -> bool:
        self._comprobar(v)
        return self._dist[v] is not None

    def distancia(self, v: int) -> int:
        """Number of edges on a shortest path from the source to ``v``."""
        if not self.hay_camino(v):
            raise ValueError("No existe camino")
        return self._dist[v]

    def camino(self, v: int) -> list[int]:
        """Vertices of a shortest path from the source to ``v``, both included."""
        if not self.hay_camino(v):
            raise ValueError("No existe camino")
        cam = []
        x = v
        while x != self._s:
            cam.append(x)
            x = self._ant[x]
        cam.append(self._s)
        cam.reverse()
        return cam


def es_bipartito(g: Grafo, s: int) -> bool:
    """Whether the component of ``s`` can be two-coloured."""
    if not 0 <= s < g.num_vertices():
        raise ValueError("Vertice inexistente")
    color: dict[int, int] = {s: 0}
    cola = deque([s])
    while cola:
        v = cola.popleft()
        for w in g.ady(v):
            if w not in color:
                color[w] = 1 - color[v]
                cola.append(w)
            elif color[w] == color[v]:
                return False
    return True


def _tam_componente(g: Grafo, origen: int, visit: list[bool]) -> int:
    visit[origen] = True
    pila = [origen]
    tam = 0
    while pila:
        v = pila.pop()
        tam += 1
        for w in g.ady(v):
            if not visit[w]:
                visit[w] = True
                pila.append(w)
    return tam


def maxima_componente_conexa(g: Grafo) -> int:
    """Number of vertices in the largest connected component (0 if empty)."""
    visit = [False] * g.num_vertices()
    return max(
        (_tam_componente(g, v, visit) for v in range(g.num_vertices()) if not visit[v]),
        default=0,
    )


def inalcanzables(g: Grafo, s: int, ttl: int) -> int:
    """Vertices not reached from ``s`` (1-based) within ``ttl`` hops.

    A source outside ``1..V`` reaches nothing, so every vertex is counted.
    """
    n = g.num_vertices()
    if not 0 < s <= n:
        return n
    origen = s - 1
    dist: list[Optional[int]] = [None] * n
    dist[origen] = 0
    alcanzados = 1
    cola = deque([origen])
    while cola:
        v = cola.popleft()
        if dist[v] + 1 > ttl:
            continue
        for w in g.ady(v):
            if dist[w] is None:
                dist[w] = dist[v] + 1
                alcanzados += 1
                cola.append(w)
    return n - alcanzados


class Manchas:
    """Connected regions of ``'#'`` cells in a grid (4-neighbourhood)."""

    def __init__(self, mapa: Sequence[str]) -> None:
        filas = len(mapa)
        columnas = len(mapa[0]) if filas else 0
        visit = [[False] * columnas for _ in range(filas)]
        self._num = 0
        self._maximo = 0

        def negra(i: int, j: int) -> bool:
            return 0 <= i < filas and 0 <= j < len(mapa[i]) and j < columnas and mapa[i][j] == "#"

        for i in range(filas):
            for j in range(columnas):
                if visit[i][j] or not negra(i, j):
                    continue
                self._num += 1
                visit[i][j] = True
                pila = [(i, j)]
                tam = 0
                while pila:
                    fi, fj = pila.pop()
                    tam += 1
                    for di, dj in _DIRECCIONES:
                        ni, nj = fi + di, fj + dj
                        if negra(ni, nj) and not visit[ni][nj]:
                            visit[ni][nj] = True
                            pila.append((ni, nj))
                self._maximo = max(self._maximo, tam)

    def num(self) -> int:
        """Number of regions."""
        return self._num

    def maximo(self) -> int:
        """Size of the largest region (0 if there is none)."""
        return self._maximo