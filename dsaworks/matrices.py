"""Lower triangular matrices in compact storage and sparse matrices."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class Order(Enum):
    """How the lower triangle is laid out in its one-dimensional store."""

    ROW_MAJOR = "row"
    COLUMN_MAJOR = "column"


class LowerTriangularMatrix:
    """An n-by-n lower triangular matrix holding only its n(n+1)/2 lower entries.

    Indexes are 1-based, as ``m[i, j]``. Entries above the diagonal read as
    zero; assignments to them are ignored.
    """

    def __init__(self, n: int, order: Order = Order.ROW_MAJOR) -> None:
        if n < 0:
            raise ValueError("dimension must be non-negative")
        self.n = n
        self.order = order
        self._store = [0] * (n * (n + 1) // 2)

    def _check(self, i: int, j: int) -> None:
        if not (1 <= i <= self.n and 1 <= j <= self.n):
            raise IndexError(f"position ({i}, {j}) outside a {self.n}x{self.n} matrix")

    def _offset(self, i: int, j: int) -> int:
        if self.order is Order.ROW_MAJOR:
            return i * (i - 1) // 2 + j - 1
        return self.n * (j - 1) - (j - 2) * (j - 1) // 2 + (i - j)

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = key
        self._check(i, j)
        if i >= j:
            return self._store[self._offset(i, j)]
        return 0

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = key
        self._check(i, j)
        if i >= j:
            self._store[self._offset(i, j)] = value

    def rows(self) -> Iterator[list[int]]:
        """Yield each row of the full matrix, zeros included."""
        for i in range(1, self.n + 1):
            yield [self[i, j] for j in range(1, self.n + 1)]

    def __str__(self) -> str:
        return "\n".join(" ".join(str(x) for x in row) for row in self.rows())

    def __repr__(self) -> str:
        return f"LowerTriangularMatrix(n={self.n}, order={self.order})"


@dataclass(frozen=True)
class Element:
    """A non-zero entry of a sparse matrix at 0-based row i, column j."""

    i: int
    j: int
    x: int


class SparseMatrix:
    """An m-by-n matrix stored as its non-zero elements in row-major order."""

    def __init__(self, m: int, n: int, elements: Iterable[Element] = ()) -> None:
        if m < 0 or n < 0:
            raise ValueError("dimensions must be non-negative")
        self.m = m
        self.n = n
        ordered = sorted(elements, key=lambda e: (e.i, e.j))
        for e in ordered:
            if not (0 <= e.i < m and 0 <= e.j < n):
                raise ValueError(f"element at ({e.i}, {e.j}) outside a {m}x{n} matrix")
        for a, b in zip(ordered, ordered[1:]):
            if (a.i, a.j) == (b.i, b.j):
                raise ValueError(f"duplicate element at ({a.i}, {a.j})")
        self.elements: tuple[Element, ...] = tuple(ordered)

    def __add__(self, other: SparseMatrix) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if (self.m, self.n) != (other.m, other.n):
            raise ValueError(
                f"cannot add {self.m}x{self.n} and {other.m}x{other.n} matrices"
            )
        a, b = self.elements, other.elements
        i = j = 0
        out: list[Element] = []
        while i < len(a) and j < len(b):
            ka, kb = (a[i].i, a[i].j), (b[j].i, b[j].j)
            if ka < kb:
                out.append(a[i])
                i += 1
            elif kb < ka:
                out.append(b[j])
                j += 1
            else:
                out.append(Element(a[i].i, a[i].j, a[i].x + b[j].x))
                i += 1
                j += 1
        out.extend(a[i:])
        out.extend(b[j:])
        return SparseMatrix(self.m, self.n, out)

    def to_dense(self) -> list[list[int]]:
        """Return the full matrix as a list of rows."""
        dense = [[0] * self.n for _ in range(self.m)]
        for e in self.elements:
            dense[e.i][e.j] = e.x
        return dense

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (self.m, self.n, self.elements) == (other.m, other.n, other.elements)

    def __str__(self) -> str:
        return "\n".join(" ".join(str(x) for x in row) for row in self.to_dense())

    def __repr__(self) -> str:
        return f"SparseMatrix({self.m}, {self.n}, {list(self.elements)!r})"