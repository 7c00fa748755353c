import random

import pytest

from algoritmos_eda.medianas import ColaMedianas, procesar_eventos, resolver_medianas


def _mediana_esperada(valores):
    return sorted(valores)[(len(valores) - 1) // 2]


@pytest.mark.parametrize("semilla", range(5))
def test_mediana_coincide_con_modelo(semilla):
    rng = random.Random(semilla)
    cola = ColaMedianas()
    primero = rng.randint(1, 50)
    cola.insertar(primero)
    modelo = [primero]
    for _ in range(300):
        quitar = rng.random() < 0.4
        if quitar and len(modelo) > 0:
            esperado = _mediana_esperada(modelo)
            assert cola.mediana() == esperado
            assert cola.quitar_mediana() == esperado
            modelo.remove(esperado)
        else:
            x = rng.randint(1, 50)
            cola.insertar(x)
            modelo.append(x)
            assert cola.mediana() == _mediana_esperada(modelo)
    assert cola.vacia() == (len(modelo) == 0)


def test_vacia_tras_insertar_y_quitar():
    cola = ColaMedianas()
    assert cola.vacia()
    cola.insertar(4)
    assert not cola.vacia()
    assert cola.quitar_mediana() == 4
    assert cola.vacia()


def test_cola_vacia_lanza():
    cola = ColaMedianas()
    with pytest.raises(IndexError):
        cola.mediana()
    with pytest.raises(IndexError):
        cola.quitar_mediana()


def test_eventos_sin_elementos():
    assert procesar_eventos([0, 0]) == ["ECSA", "ECSA"]


def test_eventos_insertar_y_pedir():
    assert procesar_eventos([7, 0, 0]) == [7, "ECSA"]
    assert procesar_eventos([5]) == []


def test_resolver_varios_casos():
    assert resolver_medianas("2\n4 0\n1\n0\n") == "4 \nECSA \n"


def test_resolver_entrada_incompleta():
    with pytest.raises(EOFError):
        resolver_medianas("3\n1 2\n")