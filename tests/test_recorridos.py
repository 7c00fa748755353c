import pytest

from algoritmos_eda.grafo import Grafo
from algoritmos_eda.recorridos import (
    CaminoMasCorto,
    Manchas,
    es_bipartito,
    inalcanzables,
    maxima_componente_conexa,
)


def _grafo(n, aristas):
    g = Grafo(n)
    for v, w in aristas:
        g.pon_arista(v, w)
    return g


@pytest.fixture
def malla():
    return _grafo(7, [(0, 1), (1, 2), (2, 3), (0, 4), (4, 3), (1, 4), (5, 6)])


def test_camino_es_valido_y_minimo(malla):
    c = CaminoMasCorto(malla, 0)
    for v in range(5):
        cam = c.camino(v)
        assert cam[0] == 0
        assert cam[-1] == v
        assert len(cam) == c.distancia(v) + 1
        for a, b in zip(cam, cam[1:]):
            assert b in malla.ady(a)
        for w in malla.ady(v):
            assert abs(c.distancia(w) - c.distancia(v)) <= 1


def test_origen_distancia_cero(malla):
    c = CaminoMasCorto(malla, 2)
    assert c.distancia(2) == 0
    assert c.camino(2) == [2]


def test_sin_camino(malla):
    c = CaminoMasCorto(malla, 0)
    assert not c.hay_camino(5)
    with pytest.raises(ValueError):
        c.camino(5)
    with pytest.raises(ValueError):
        c.distancia(6)


def test_origen_inexistente(malla):
    with pytest.raises(ValueError):
        CaminoMasCorto(malla, 7)


def test_bipartito():
    ciclo_par = _grafo(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    ciclo_impar = _grafo(3, [(0, 1), (1, 2), (2, 0)])
    assert es_bipartito(ciclo_par, 0) is True
    assert es_bipartito(ciclo_impar, 0) is False


def test_bipartito_solo_mira_la_componente():
    g = _grafo(5, [(0, 1), (2, 3), (3, 4), (4, 2)])
    assert es_bipartito(g, 0) is True
    assert es_bipartito(g, 2) is False


def test_maxima_componente(malla):
    assert maxima_componente_conexa(malla) == 5
    aislados = Grafo(4)
    assert maxima_componente_conexa(aislados) == 1
    assert maxima_componente_conexa(Grafo(0)) == 0


def test_maxima_componente_todo_conexo():
    n = 3000
    g = _grafo(n, [(i, i + 1) for i in range(n - 1)])
    assert maxima_componente_conexa(g) == n


def test_inalcanzables(malla):
    n = malla.num_vertices()
    assert inalcanzables(malla, 0, 3) == n
    assert inalcanzables(malla, n + 1, 3) == n
    assert inalcanzables(malla, 1, 0) == n - 1
    assert inalcanzables(malla, 1, 100) == n - maxima_componente_conexa(malla)


def test_inalcanzables_monotono(malla):
    valores = [inalcanzables(malla, 1, ttl) for ttl in range(5)]
    assert valores == sorted(valores, reverse=True)


def test_manchas_una_llena():
    mapa = ["###", "###"]
    m = Manchas(mapa)
    assert m.num() == 1
    assert m.maximo() == 6


def test_manchas_vacia():
    m = Manchas(["...", "..."])
    assert m.num() == 0
    assert m.maximo() == 0


def test_manchas_diagonal_no_conecta():
    mapa = ["#.", ".#"]
    m = Manchas(mapa)
    assert m.num() == 2
    assert m.maximo() == 1


def test_manchas_invariantes():
    mapa = ["#..##", "#..#.", "..##.", "#...."]
    m = Manchas(mapa)
    negras = sum(fila.count("#") for fila in mapa)
    assert m.maximo() <= negras
    assert m.num() <= negras
    assert m.num() == 3