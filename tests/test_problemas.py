import pytest

from algoritmos_eda.problemas import (
    main,
    resolver_amigos,
    resolver_calles,
    resolver_cole,
    resolver_manchas,
    resolver_mejor_camino,
    resolver_paginas,
    resolver_pulsaciones,
    resolver_red,
    resolver_sumidero,
    resolver_tareas,
)


def test_mejor_camino_single_street():
    assert resolver_mejor_camino("2 1\n1 2 7\n1\n1 2\n") == "7 SI\n---\n"


def test_mejor_camino_without_path():
    assert resolver_mejor_camino("3 1\n1 2 5\n1\n1 3\n") == "SIN CAMINO\n---\n"


def test_mejor_camino_longer_route_is_not_fewest_streets():
    salida = resolver_mejor_camino("3 3\n1 2 1\n2 3 1\n1 3 5\n1\n1 3\n")
    assert salida.splitlines()[0].endswith(" NO")
    assert salida.endswith("---\n")


def test_calles_agrees_with_mejor_camino():
    texto = "4 4\n1 2 3\n2 4 3\n1 3 2\n3 4 4\n2\n1 4\n4 1\n3 1\n1 2 1\n1\n1 3\n"
    assert resolver_calles(texto) == resolver_mejor_camino(texto)
    assert resolver_calles(texto).count("---\n") == 2


def test_red_invalid_source_reaches_nothing():
    assert resolver_red("3 2\n1 2\n2 3\n1\n0 5\n") == "3\n---\n"


def test_red_large_ttl_reaches_connected_graph():
    assert resolver_red("3 2\n1 2\n2 3\n1\n1 10\n") == "0\n---\n"


def test_red_ttl_limits_reach():
    salida = resolver_red("3 2\n1 2\n2 3\n2\n1 0\n1 1\n").splitlines()
    assert salida[0] == "2"
    assert int(salida[1]) < int(salida[0])
    assert salida[2] == "---"


def test_amigos_chain_is_one_group():
    assert resolver_amigos("1\n5 4\n1 2\n2 3\n3 4\n4 5\n") == "5\n"


def test_amigos_counts_cases():
    salida = resolver_amigos("2\n3 0\n2 1\n1 2\n")
    assert salida == "1\n2\n"


def test_manchas_single_cell():
    assert resolver_manchas("1 1\n#\n") == "1 1\n"


def test_manchas_empty_picture():
    assert resolver_manchas("2 3\n...\n...\n") == "0 0\n"


def test_tareas_cycle_is_impossible():
    assert resolver_tareas("2 2\n1 2\n2 1\n") == "Imposible\n"


def test_tareas_order_respects_dependencies():
    aristas = [(1, 2), (1, 3), (3, 2), (4, 1), (5, 4)]
    texto = "5 5\n" + "".join(f"{a} {b}\n" for a, b in aristas)
    orden = [int(x) for x in resolver_tareas(texto).split()]
    assert sorted(orden) == [1, 2, 3, 4, 5]
    for a, b in aristas:
        assert orden.index(a) < orden.index(b)


def test_sumidero_found():
    assert resolver_sumidero("3 2\n0 2\n1 2\n") == "SI 2\n"


def test_sumidero_missing():
    assert resolver_sumidero("2 0\n") == "NO\n"


def test_pulsaciones_same_number():
    assert resolver_pulsaciones("5 5\n") == "0\n"


def test_pulsaciones_out_of_range():
    with pytest.raises(ValueError):
        resolver_pulsaciones("10000 1\n")


def test_paginas_single_page_is_its_load():
    assert resolver_paginas("1\n5\n0\n0\n") == "5\n"


def test_paginas_unreachable():
    assert resolver_paginas("2\n3 4\n0\n0\n") == "IMPOSIBLE\n"


def test_paginas_stops_at_zero():
    assert resolver_paginas("0\n1\n5\n0\n") == ""


def test_cole_no_route():
    assert resolver_cole("2 0\n") == "0\n"


def test_cole_single_route():
    assert resolver_cole("2 1\n1 2 3\n") == "1\n"


def test_incomplete_input_raises():
    with pytest.raises(EOFError):
        resolver_sumidero("3 2\n0 2\n")


def test_main_reads_file(tmp_path, capsys):
    fichero = tmp_path / "casos.txt"
    fichero.write_text("3 2\n0 2\n1 2\n", encoding="utf-8")
    assert main(["sumidero", str(fichero)]) == 0
    assert capsys.readouterr().out == "SI 2\n"


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["desconocido"])