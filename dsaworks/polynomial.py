"""Polynomials stored as a list of (coefficient, exponent) terms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    coeff: int
    exp: int


class Polynomial:
    """A polynomial whose terms are kept in descending order of exponent."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self.terms: tuple[Term, ...] = tuple(
            sorted(terms, key=lambda t: t.exp, reverse=True)
        )

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        a, b = self.terms, other.terms
        i = j = 0
        out: list[Term] = []
        while i < len(a) and j < len(b):
            if a[i].exp > b[j].exp:
                out.append(a[i])
                i += 1
            elif a[i].exp < b[j].exp:
                out.append(b[j])
                j += 1
            else:
                out.append(Term(a[i].coeff + b[j].coeff, a[i].exp))
                i += 1
                j += 1
        out.extend(a[i:])
        out.extend(b[j:])
        return Polynomial(out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms == other.terms

    def __str__(self) -> str:
        return "+".join(f"{t.coeff}x{t.exp}" for t in self.terms)

    def __repr__(self) -> str:
        return f"Polynomial({list(self.terms)!r})"