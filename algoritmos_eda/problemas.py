"""Solvers for judge-style problems that read cases from text and write answers."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, Optional

from .caminos_minimos import Dijkstra, GrafoCiudad, caminos_al_cole
from .digrafo import Digrafo
from .digrafo_valorado import AristaDirigida, DigrafoValorado
from .dirigidos import CicloDirigido, orden_topologico, pulsaciones_minimas, sumidero
from .grafo import Grafo
from .medianas import resolver_medianas
from .recorridos import Manchas, inalcanzables, maxima_componente_conexa
from .voraz import (
    resolver_defensa,
    resolver_maraton,
    resolver_parches,
    resolver_pasadizos,
    resolver_trabajos,
)

SEPARADOR = "---\n"


class _Lector:
    """Reads whitespace-separated tokens from a text."""

    def __init__(self, texto: str) -> None:
        self._it: Iterator[str] = iter(texto.split())

    def token(self) -> str:
        tok = next(self._it, None)
        if tok is None:
            raise EOFError("Entrada incompleta")
        return tok

    def entero(self) -> int:
        return int(self.token())

    def caso(self) -> Optional[int]:
        """The integer that opens a new case, or None at the end of the input."""
        tok = next(self._it, None)
        return None if tok is None else int(tok)


def _digrafo_doble(lector: _Lector, n: int, c: int) -> DigrafoValorado:
    """Read ``c`` 1-based streets ``v w len`` as edges in both directions."""
    g = DigrafoValorado(n)
    for _ in range(c):
        v, w, longitud = lector.entero() - 1, lector.entero() - 1, lector.entero()
        g.pon_arista(AristaDirigida(v, w, longitud))
        g.pon_arista(AristaDirigida(w, v, longitud))
    return g


def _grafo(lector: _Lector, n: int, a: int, primer: int = 1) -> Grafo:
    g = Grafo(n)
    for _ in range(a):
        g.pon_arista(lector.entero() - primer, lector.entero() - primer)
    return g


def _digrafo(lector: _Lector, n: int, a: int, primer: int) -> Digrafo:
    g = Digrafo(n)
    for _ in range(a):
        g.pon_arista(lector.entero() - primer, lector.entero() - primer)
    return g


def _resolver_ciudad(texto: str) -> str:
    lector = _Lector(texto)
    salida = []
    while (n := lector.caso()) is not None:
        g = _digrafo_doble(lector, n, lector.entero())
        for _ in range(lector.entero()):
            origen, destino = lector.entero() - 1, lector.entero() - 1
            ciudad = GrafoCiudad(g, origen, destino)
            if not ciudad.hay_camino():
                salida.append("SIN CAMINO\n")
            else:
                veredicto = "SI" if ciudad.iguales() else "NO"
                salida.append(f"{ciudad.longitud()} {veredicto}\n")
        salida.append(SEPARADOR)
    return "".join(salida)


def resolver_mejor_camino(texto: str) -> str:
    """Shortest route length and whether it also uses the fewest streets."""
    return _resolver_ciudad(texto)


def resolver_calles(texto: str) -> str:
    """Same question as :func:`resolver_mejor_camino`, for another judge."""
    return _resolver_ciudad(texto)


def resolver_red(texto: str) -> str:
    """Nodes a packet cannot reach from a source within a TTL."""
    lector = _Lector(texto)
    salida = []
    while (n := lector.caso()) is not None:
        g = _grafo(lector, n, lector.entero())
        for _ in range(lector.entero()):
            s, ttl = lector.entero(), lector.entero()
            salida.append(f"{inalcanzables(g, s, ttl)}\n")
        salida.append(SEPARADOR)
    return "".join(salida)


def resolver_amigos(texto: str) -> str:
    """Size of the largest group of friends, for a counted number of cases."""
    lector = _Lector(texto)
    salida = []
    for _ in range(lector.entero()):
        n = lector.entero()
        g = _grafo(lector, n, lector.entero())
        salida.append(f"{maxima_componente_conexa(g)}\n")
    return "".join(salida)


def resolver_manchas(texto: str) -> str:
    """Number of black regions in a picture and the size of the largest."""
    lector = _Lector(texto)
    salida = []
    while (filas := lector.caso()) is not None:
        lector.entero()  # columns: the rows themselves carry the width
        mapa = [lector.token() for _ in range(filas)]
        manchas = Manchas(mapa)
        salida.append(f"{manchas.num()} {manchas.maximo()}\n")
    return "".join(salida)


def resolver_tareas(texto: str) -> str:
    """An order for dependent tasks, or ``Imposible`` if they form a cycle."""
    lector = _Lector(texto)
    salida = []
    while (n := lector.caso()) is not None:
        g = _digrafo(lector, n, lector.entero(), 1)
        if CicloDirigido(g).hay_ciclo():
            salida.append("Imposible\n")
        else:
            salida.append(" ".join(str(v + 1) for v in orden_topologico(g)) + "\n")
    return "".join(salida)


def resolver_sumidero(texto: str) -> str:
    """Whether a digraph with 0-based vertices has a universal sink."""
    lector = _Lector(texto)
    salida = []
    while (n := lector.caso()) is not None:
        g = _digrafo(lector, n, lector.entero(), 0)
        s = sumidero(g)
        salida.append("NO\n" if s is None else f"SI {s}\n")
    return "".join(salida)


def resolver_pulsaciones(texto: str) -> str:
    """Fewest key presses on the broken calculator for each pair."""
    lector = _Lector(texto)
    salida = []
    while (origen := lector.caso()) is not None:
        salida.append(f"{pulsaciones_minimas(origen, lector.entero())}\n")
    return "".join(salida)


def resolver_paginas(texto: str) -> str:
    """Least time to go from the first web page to the last, loads included."""
    lector = _Lector(texto)
    salida = []
    while (n := lector.caso()) is not None and n != 0:
        carga = [lector.entero() for _ in range(n)]
        g = DigrafoValorado(n)
        for _ in range(lector.entero()):
            a, b, tiempo = lector.entero() - 1, lector.entero() - 1, lector.entero()
            g.pon_arista(AristaDirigida(a, b, tiempo + carga[b]))
        dijkstra = Dijkstra(g, 0)
        if dijkstra.hay_camino(n - 1):
            salida.append(f"{carga[0] + dijkstra.distancia(n - 1)}\n")
        else:
            salida.append("IMPOSIBLE\n")
    return "".join(salida)


def resolver_cole(texto: str) -> str:
    """Number of shortest ways from home (first vertex) to school (last)."""
    lector = _Lector(texto)
    salida = []
    while (n := lector.caso()) is not None:
        g = _digrafo_doble(lector, n, lector.entero())
        salida.append(f"{caminos_al_cole(g)}\n")
    return "".join(salida)


PROBLEMAS: dict[str, Callable[[str], str]] = {
    "mejor-camino": resolver_mejor_camino,
    "calles": resolver_calles,
    "red": resolver_red,
    "amigos": resolver_amigos,
    "manchas": resolver_manchas,
    "tareas": resolver_tareas,
    "sumidero": resolver_sumidero,
    "pulsaciones": resolver_pulsaciones,
    "paginas": resolver_paginas,
    "cole": resolver_cole,
    "medianas": resolver_medianas,
    "parches": resolver_parches,
    "defensa": resolver_defensa,
    "maraton": resolver_maraton,
    "pasadizos": resolver_pasadizos,
    "trabajos": resolver_trabajos,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Solve the chosen problem for the cases in a file or on standard input."""
    parser = argparse.ArgumentParser(description="Resuelve problemas de juez.")
    parser.add_argument("problema", choices=sorted(PROBLEMAS))
    parser.add_argument("fichero", nargs="?", help="fichero de casos (por defecto, la entrada estándar)")
    args = parser.parse_args(argv)
    if args.fichero:
        with open(args.fichero, encoding="utf-8") as f:
            texto = f.read()
    else:
        texto = sys.stdin.read()
    sys.stdout.write(PROBLEMAS[args.problema](texto))
    return 0


if __name__ == "__main__":
    sys.exit(main())