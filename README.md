# algoritmos-eda

Classic data structures and algorithms for graphs, priority queues and
greedy strategies, together with solvers for a set of judge-style
problems that read their test cases as plain text. No third-party
dependencies.

## What is inside

- `algoritmos_eda.enteros_inf` – `EntInf`, integers that saturate at
  `+Inf` (the constant `INFINITO`).
- `algoritmos_eda.matriz` – `Matriz`, a rectangular grid indexable as
  `m[f][c]`, with `at`, `numfils`, `numcols` and `pos_correcta`.
- `algoritmos_eda.conjuntos_disjuntos` – `ConjuntosDisjuntos`, union-find
  with union by size and path compression.
- `algoritmos_eda.priority_queue` – `PriorityQueue` (binary heap ordered by
  an `antes(a, b)` function), in-place `heapsort` and the case-insensitive
  comparison `compara_sin_mayusculas`.
- `algoritmos_eda.index_pq` – `IndexPQ`, an indexed priority queue over
  `0..n-1` whose priorities can be changed with `update`; entries are `Par`.
- `algoritmos_eda.grafo`, `digrafo`, `grafo_valorado`, `digrafo_valorado` –
  `Grafo`, `Digrafo`, `GrafoValorado` (with `Arista`) and `DigrafoValorado`
  (with `AristaDirigida`). Each can be built with `leer(tokens, primer)`
  from a string or an iterable of tokens.
- `algoritmos_eda.kruskal` – `ARMKruskal`, minimum spanning tree with
  `coste()` and `arm()`.
- `algoritmos_eda.recorridos` – BFS shortest paths (`CaminoMasCorto`),
  `es_bipartito`, `maxima_componente_conexa`, `inalcanzables` (vertices out
  of reach within a TTL) and `Manchas`, which counts `'#'` regions in a
  character map.
- `algoritmos_eda.dirigidos` – `CicloDirigido`, `orden_topologico`,
  `sumidero` and `pulsaciones_minimas` (fewest `+1`, `*2`, `/3` steps
  modulo 10000).
- `algoritmos_eda.caminos_minimos` – `Dijkstra`, `GrafoCiudad` (shortest
  route compared with the route using fewest streets) and
  `caminos_al_cole`.
- `algoritmos_eda.medianas` – `ColaMedianas`, a queue that serves medians,
  with `procesar_eventos` and `resolver_medianas`.
- `algoritmos_eda.voraz` – greedy solutions: `parches`, `merge_sort`,
  `defensa`, `maraton` (`Pelicula`), `pasadizos` (`Edificio`) and
  `cubrir_trabajos` (`Trabajo`), each with a `resolver_*` text solver.
- `algoritmos_eda.problemas` – text-in, text-out solvers for the graph
  problems and the `main` entry point of the command line.

Errors are raised as Python exceptions: `ValueError` for missing vertices
or impossible requests, `IndexError` for empty queues or positions out of
range, and `EOFError` when a problem's input ends in the middle of a case.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algoritmos_eda.conjuntos_disjuntos import ConjuntosDisjuntos
from algoritmos_eda.grafo import Grafo
from algoritmos_eda.recorridos import maxima_componente_conexa

g = Grafo(5)
g.pon_arista(0, 1)
g.pon_arista(1, 2)
g.pon_arista(3, 4)
print(maxima_componente_conexa(g))   # 3

cjtos = ConjuntosDisjuntos(4)
cjtos.unir(0, 3)
print(cjtos.unidos(0, 3), cjtos.num_cjtos())   # True 3
```

Each `resolver_*` function takes the whole input of a problem as a string
and returns the text the judge expects as output:

```python
from algoritmos_eda.voraz import resolver_parches

print(resolver_parches("3 1\n1 2 3\n"), end="")   # 2
```

## Command line

The `algoritmos-eda` command solves one judge problem. It reads the test
cases from the given file, or from standard input when no file is given,
and writes the answers to standard output:

```
algoritmos-eda parches casos.txt
algoritmos-eda --help
```

The available problems are `amigos`, `calles`, `cole`, `defensa`,
`manchas`, `maraton`, `medianas`, `mejor-camino`, `paginas`, `parches`,
`pasadizos`, `pulsaciones`, `red`, `sumidero`, `tareas` and `trabajos`.