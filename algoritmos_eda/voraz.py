"""Greedy algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional, Sequence

_DESCANSO = 10


@dataclass(frozen=True)
class Pelicula:
    """A film starting at ``inicio`` minutes and lasting ``duracion``."""

    inicio: int
    duracion: int

    @property
    def fin(self) -> int:
        return self.inicio + self.duracion


@dataclass(frozen=True)
class Edificio:
    """A building spanning from ``w`` (west) to ``e`` (east)."""

    w: int
    e: int


@dataclass(frozen=True)
class Trabajo:
    """A job covering the interval from ``c`` to ``f``."""

    c: int
    f: int


def parches(agujeros: Iterable[int], longitud: int) -> int:
    """Patches of length ``longitud`` needed to cover sorted hole positions."""
    it = iter(agujeros)
    inicio = next(it, None)
    if inicio is None:
        return 0
    n = 1
    for x in it:
        if inicio + longitud < x:
            inicio = x
            n += 1
    return n


def _mezclar(izq: list, der: list) -> list:
    res = []
    i = j = 0
    while i < len(izq) and j < len(der):
        if izq[i] <= der[j]:
            res.append(izq[i])
            i += 1
        else:
            res.append(der[j])
            j += 1
    res.extend(izq[i:])
    res.extend(der[j:])
    return res


def merge_sort(v: Iterable) -> list:
    """Return a new ascending list with the elements of ``v`` (stable)."""
    datos = list(v)
    if len(datos) <= 1:
        return datos
    m = len(datos) // 2
    return _mezclar(merge_sort(datos[:m]), merge_sort(datos[m:]))


def defensa(invasores: Sequence[int], defensores: Sequence[int]) -> int:
    """Most cities saved, a team saving a city if it is at least as strong."""
    if len(invasores) != len(defensores):
        raise ValueError("Debe haber tantos equipos como ciudades")
    inv = merge_sort(invasores)
    salvadas = 0
    for d in merge_sort(defensores):
        if d >= inv[salvadas]:
            salvadas += 1
    return salvadas


def maraton(peliculas: Iterable[Pelicula]) -> int:
    """Most films watchable with a break of 10 minutes between them."""
    orden = sorted(peliculas, key=lambda p: p.fin)
    if not orden:
        return 0
    ahora = orden[0].fin
    vistas = 1
    for p in orden[1:]:
        if p.inicio >= ahora + _DESCANSO:
            vistas += 1
            ahora = p.fin
    return vistas


def pasadizos(edificios: Iterable[Edificio]) -> int:
    """Fewest tunnels so that every building is crossed by one."""
    orden = sorted(edificios, key=lambda b: b.w)
    if not orden:
        return 0
    total = len(orden)
    prev_e = orden[0].e
    for b in orden[1:]:
        if b.w < prev_e:
            total -= 1
            prev_e = min(prev_e, b.e)
        else:
            prev_e = b.e
    return total


def cubrir_trabajos(c: int, f: int, trabajos: Iterable[Trabajo]) -> Optional[int]:
    """Fewest jobs covering from ``c`` to ``f``, or None if impossible."""
    orden = sorted(trabajos, key=lambda t: (t.c, -t.f))
    if not orden:
        return None
    if c + 1 == f:
        return 0
    if orden[0].c > c:
        return None
    ult_c, ult_f = c, orden[0].f
    n = 1
    for t in orden[1:]:
        if ult_f >= f:
            break
        n += 1
        if t.c > ult_f:
            return None
        if t.c <= ult_c and t.f >= ult_f:
            ult_f = t.f
            n -= 1
        elif t.c > ult_c and t.f <= ult_f:
            n -= 1
        else:
            ult_c, ult_f = ult_f, t.f
    return n


def _enteros(texto: str) -> Iterator[int]:
    return (int(t) for t in texto.split())


def _tomar(it: Iterator[int], k: int) -> list[int]:
    valores = list(islice(it, k))
    if len(valores) < k:
        raise EOFError("Entrada incompleta")
    return valores


def resolver_parches(texto: str) -> str:
    it = _enteros(texto)
    lineas = []
    for n in it:
        (longitud,) = _tomar(it, 1)
        lineas.append(f"{parches(_tomar(it, n), longitud)}\n")
    return "".join(lineas)


def resolver_defensa(texto: str) -> str:
    it = _enteros(texto)
    lineas = []
    for n in it:
        invasores = _tomar(it, n)
        defensores = _tomar(it, n)
        lineas.append(f"{defensa(invasores, defensores)}\n")
    return "".join(lineas)


def resolver_maraton(texto: str) -> str:
    it = _enteros(texto.replace(":", " "))
    lineas = []
    for n in it:
        if n == 0:
            break
        pelis = []
        for _ in range(n):
            hh, mm, duracion = _tomar(it, 3)
            pelis.append(Pelicula(hh * 60 + mm, duracion))
        lineas.append(f"{maraton(pelis)}\n")
    return "".join(lineas)


def resolver_pasadizos(texto: str) -> str:
    it = _enteros(texto)
    lineas = []
    for n in it:
        if n == 0:
            break
        edificios = [Edificio(*_tomar(it, 2)) for _ in range(n)]
        lineas.append(f"{pasadizos(edificios)}\n")
    return "".join(lineas)


def resolver_trabajos(texto: str) -> str:
    it = _enteros(texto)
    lineas = []
    for c in it:
        f, n = _tomar(it, 2)
        if not c and not f and not n:
            break
        trabajos = [Trabajo(*_tomar(it, 2)) for _ in range(n)]
        res = cubrir_trabajos(c, f, trabajos)
        lineas.append("Imposible\n" if res is None else f"{res}\n")
    return "".join(lineas)