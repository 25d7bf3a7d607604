import pytest

from dsaworks.polynomial import Polynomial, Term


def test_terms_sorted_descending():
    p = Polynomial([Term(1, 0), Term(3, 2), Term(5, 1)])
    assert [t.exp for t in p] == [2, 1, 0]


def test_str_format():
    assert str(Polynomial([Term(3, 2), Term(5, 1)])) == "3x2+5x1"


def test_add_combines_equal_exponents():
    p = Polynomial([Term(3, 2), Term(5, 1)])
    q = Polynomial([Term(4, 2), Term(6, 0)])
    total = p + q
    assert {t.exp: t.coeff for t in total} == {2: 3 + 4, 1: 5, 0: 6}


def test_add_commutes():
    p = Polynomial([Term(2, 3), Term(1, 1)])
    q = Polynomial([Term(7, 3), Term(9, 2)])
    assert p + q == q + p


def test_add_empty_identity():
    p = Polynomial([Term(2, 3), Term(1, 1)])
    assert p + Polynomial() == p


@pytest.mark.parametrize("x", [0, 1, 2, -3])
def test_add_evaluates_as_sum(x):
    p = Polynomial([Term(2, 3), Term(1, 1), Term(4, 0)])
    q = Polynomial([Term(-1, 3), Term(5, 2)])

    def value(poly):
        return sum(t.coeff * x ** t.exp for t in poly)

    assert value(p + q) == value(p) + value(q)


def test_length():
    assert len(Polynomial([Term(1, 1), Term(2, 0)]) + Polynomial([Term(3, 5)])) == 3