"""Undirected graphs stored as adjacency lists."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Union

Fuente = Union[str, Iterable[Any]]


def _iter_tokens(fuente: Fuente) -> Iterator[Any]:
    """Return an iterator over the tokens of a string or an iterable."""
    if isinstance(fuente, str):
        return iter(fuente.split())
    return iter(fuente)


def _siguiente(it: Iterator[Any]) -> Any:
    try:
        return next(it)
    except StopIteration:
        raise EOFError("Entrada incompleta") from None


class Grafo:
    """Undirected graph with vertices ``0..v-1``."""

    def __init__(self, v: int) -> None:
        self._v = v
        self._a = 0
        self._ady: list[list[int]] = [[] for _ in range(v)]

    @classmethod
    def leer(cls, tokens: Fuente, primer: int = 0) -> Grafo:
        """Build a graph from ``V E v1 w1 ... vE wE``.

        ``primer`` is the index of the first vertex in the input. When
        ``tokens`` is an iterator, only the tokens of this graph are consumed.
        """
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
        """Add the edge v-w."""
        self._comprobar(v)
        self._comprobar(w)
        self._a += 1
        self._ady[v].append(w)
        self._ady[w].append(v)

    def ady(self, v: int) -> tuple[int, ...]:
        """Vertices adjacent to ``v``, in insertion order."""
        self._comprobar(v)
        return tuple(self._ady[v])

    def __str__(self) -> str:
        lineas = [f"{self._v} vértices, {self._a} aristas\n"]
        for v, adys in enumerate(self._ady):
            lineas.append(f"{v}: " + "".join(f"{w} " for w in adys) + "\n")
        return "".join(lineas)