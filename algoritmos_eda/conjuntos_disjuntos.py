"""Disjoint-set forest with union by size and path compression."""

from __future__ import annotations


class ConjuntosDisjuntos:
    """Partition of the elements ``0..n-1``."""

    def __init__(self, n: int) -> None:
        self._ncjtos = n
        self._padre = list(range(n))
        self._tam = [1] * n

    def buscar(self, a: int) -> int:
        """Return the representative of the set containing ``a``."""
        if not 0 <= a < len(self._padre):
            raise IndexError(f"Elemento inexistente: {a}")
        raiz = a
        while self._padre[raiz] != raiz:
            raiz = self._padre[raiz]
        while self._padre[a] != raiz:
            self._padre[a], a = raiz, self._padre[a]
        return raiz

    def unir(self, a: int, b: int) -> None:
        """Merge the sets containing ``a`` and ``b``."""
        i, j = self.buscar(a), self.buscar(b)
        if i == j:
            return
        if self._tam[i] > self._tam[j]:
            self._tam[i] += self._tam[j]
            self._padre[j] = i
        else:
            self._tam[j] += self._tam[i]
            self._padre[i] = j
        self._ncjtos -= 1

    def unidos(self, a: int, b: int) -> bool:
        return self.buscar(a) == self.buscar(b)

    def cardinal(self, a: int) -> int:
        """Number of elements in the set containing ``a``."""
        return self._tam[self.buscar(a)]

    def num_cjtos(self) -> int:
        return self._ncjtos