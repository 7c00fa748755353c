"""Algorithms on directed graphs."""

from __future__ import annotations

from collections import deque
from typing import Optional

from .digrafo import Digrafo

_MAX = 10000


class CicloDirigido:
    """Detects a directed cycle and records the first one found by DFS.

    The recorded cycle starts and ends at the same vertex.
    """

    def __init__(self, g: Digrafo) -> None:
        n = g.num_vertices()
        visit = [False] * n
        apilado = [False] * n
        ant: list[Optional[int]] = [None] * n
        self._ciclo: list[int] = []
        for raiz in range(n):
            if visit[raiz]:
                continue
            visit[raiz] = apilado[raiz] = True
            pila = [(raiz, iter(g.ady(raiz)))]
            while pila:
                v, it = pila[-1]
                w = next(it, None)
                if w is None:
                    apilado[v] = False
                    pila.pop()
                elif not visit[w]:
                    ant[w] = v
                    visit[w] = apilado[w] = True
                    pila.append((w, iter(g.ady(w))))
                elif apilado[w]:
                    self._ciclo = self._reconstruir(ant, v, w)
                    return

    @staticmethod
    def _reconstruir(ant: list, v: int, w: int) -> list[int]:
        tramo = []
        x = v
        while x != w:
            tramo.append(x)
            x = ant[x]
        tramo.reverse()
        return [v, w, *tramo]

    def hay_ciclo(self) -> bool:
        return bool(self._ciclo)

    def ciclo(self) -> list[int]:
        """Vertices of the cycle found, or an empty list."""
        return list(self._ciclo)


def orden_topologico(g: Digrafo) -> list[int]:
    """Reverse DFS postorder of ``g``; a topological order if ``g`` is a DAG."""
    n = g.num_vertices()
    visit = [False] * n
    postorden: list[int] = []
    for raiz in range(n):
        if visit[raiz]:
            continue
        visit[raiz] = True
        pila = [(raiz, iter(g.ady(raiz)))]
        while pila:
            v, it = pila[-1]
            for w in it:
                if not visit[w]:
                    visit[w] = True
                    pila.append((w, iter(g.ady(w))))
                    break
            else:
                postorden.append(v)
                pila.pop()
    postorden.reverse()
    return postorden


def sumidero(g: Digrafo) -> Optional[int]:
    """First vertex with no outgoing edges and an edge from every other vertex."""
    inv = g.inverso()
    n = g.num_vertices()
    for v in range(n):
        if not g.ady(v) and len(inv.ady(v)) == n - 1:
            return v
    return None


def _siguientes(v: int) -> tuple[int, int, int]:
    return (v + 1) % _MAX, (v * 2) % _MAX, v // 3


def pulsaciones_minimas(origen: int, destino: int) -> int:
    """Fewest of +1, *2, /3 (modulo 10000) needed to go from origen to destino."""
    for x in (origen, destino):
        if not 0 <= x < _MAX:
            raise ValueError(f"Valor fuera de rango: {x}")
    if origen == destino:
        return 0
    distancia: dict[int, int] = {origen: 0}
    cola = deque([origen])
    while cola:
        v = cola.popleft()
        for w in _siguientes(v):
            if w not in distancia:
                distancia[w] = distancia[v] + 1
                if w == destino:
                    return distancia[w]
                cola.append(w)
    raise ValueError("Destino inalcanzable")