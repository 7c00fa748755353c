import pytest

from algoritmos_eda.digrafo import Digrafo
from algoritmos_eda.dirigidos import (
    CicloDirigido,
    orden_topologico,
    pulsaciones_minimas,
    sumidero,
)


def _digrafo(n, aristas):
    g = Digrafo(n)
    for v, w in aristas:
        g.pon_arista(v, w)
    return g


DAG = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (5, 4)]


def test_dag_sin_ciclo():
    c = CicloDirigido(_digrafo(6, DAG))
    assert c.hay_ciclo() is False
    assert c.ciclo() == []


def test_ciclo_encontrado_es_valido():
    g = _digrafo(6, [(0, 1), (1, 2), (2, 3), (3, 1), (4, 5)])
    c = CicloDirigido(g)
    assert c.hay_ciclo() is True
    ciclo = c.ciclo()
    assert ciclo[0] == ciclo[-1]
    for a, b in zip(ciclo, ciclo[1:]):
        assert g.hay_arista(a, b)


def test_autoarista_es_ciclo():
    c = CicloDirigido(_digrafo(2, [(0, 1), (1, 1)]))
    assert c.ciclo() == [1, 1]


def test_ciclo_largo_sin_recursion():
    n = 5000
    g = _digrafo(n, [(i, (i + 1) % n) for i in range(n)])
    ciclo = CicloDirigido(g).ciclo()
    assert len(ciclo) == n + 1
    assert sorted(set(ciclo)) == list(range(n))


def test_orden_topologico_respeta_aristas():
    g = _digrafo(6, DAG)
    orden = orden_topologico(g)
    assert sorted(orden) == list(range(6))
    pos = {v: i for i, v in enumerate(orden)}
    for v, w in DAG:
        assert pos[v] < pos[w]


def test_orden_topologico_cadena_larga():
    n = 4000
    g = _digrafo(n, [(i + 1, i) for i in range(n - 1)])
    assert orden_topologico(g) == list(range(n - 1, -1, -1))


def test_sumidero():
    g = _digrafo(4, [(0, 2), (1, 2), (3, 2), (0, 1)])
    assert sumidero(g) == 2


def test_sin_sumidero():
    assert sumidero(_digrafo(3, [(0, 1), (1, 2)])) is None
    assert sumidero(_digrafo(3, [(0, 2), (2, 1), (1, 2)])) is None


def test_sumidero_un_vertice():
    assert sumidero(Digrafo(1)) == 0


def test_pulsaciones_mismo_valor():
    assert pulsaciones_minimas(42, 42) == 0


@pytest.mark.parametrize("a", [0, 7, 9999, 1234])
def test_pulsaciones_un_paso(a):
    assert pulsaciones_minimas(a, (a + 1) % 10000) == 1
    assert pulsaciones_minimas(a, a // 3) <= 1


@pytest.mark.parametrize("a,b", [(0, 9999), (13, 500), (9000, 3), (1, 8191)])
def test_pulsaciones_desigualdad_triangular(a, b):
    d = pulsaciones_minimas(a, b)
    assert d >= 1
    for siguiente in ((a + 1) % 10000, (a * 2) % 10000, a // 3):
        assert d <= 1 + pulsaciones_minimas(siguiente, b)


def test_pulsaciones_fuera_de_rango():
    with pytest.raises(ValueError):
        pulsaciones_minimas(10000, 1)
    with pytest.raises(ValueError):
        pulsaciones_minimas(1, -1)