import pytest

from algoritmos_eda.enteros_inf import INFINITO, EntInf


def test_infinity_prints_as_plus_inf():
    assert str(EntInf(1000000000)) == "+Inf"
    assert str(EntInf(5) + INFINITO) == "+Inf"


def test_finite_prints_number():
    assert str(EntInf(7)) == "7"


def test_default_is_zero():
    assert EntInf() == EntInf(0)


def test_addition_of_finite_values():
    assert EntInf(2) + EntInf(3) == EntInf(5)


@pytest.mark.parametrize("n", [0, 5, 123456])
def test_adding_infinity_saturates(n):
    assert EntInf(n) + INFINITO == INFINITO
    assert INFINITO + EntInf(n) == INFINITO


def test_overflow_saturates_to_infinity():
    assert EntInf(999999999) + EntInf(1) == INFINITO
    assert EntInf(600000000) + EntInf(600000000) == INFINITO


def test_infinity_is_greatest():
    assert EntInf(999999999) < INFINITO
    assert not (INFINITO < INFINITO)
    assert INFINITO > EntInf(0)
    assert not (INFINITO > INFINITO)


def test_ordering_between_finite_values():
    assert EntInf(1) < EntInf(2)
    assert EntInf(2) > EntInf(1)
    assert not (EntInf(2) < EntInf(2))


def test_inequality_and_hash():
    assert EntInf(4) != EntInf(5)
    assert len({EntInf(4), EntInf(4), INFINITO}) == 2


def test_plain_int_is_accepted():
    assert EntInf(3) + 4 == EntInf(7)
    assert EntInf(3) == 3