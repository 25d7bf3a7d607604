import pytest

from dsaworks.matrices import Element, LowerTriangularMatrix, Order, SparseMatrix


def _filled(order):
    m = LowerTriangularMatrix(4, order)
    value = 1
    for i in range(1, 5):
        for j in range(1, i + 1):
            m[i, j] = value
            value += 1
    return m


EXPECTED = [[1, 0, 0, 0], [2, 3, 0, 0], [4, 5, 6, 0], [7, 8, 9, 10]]


@pytest.mark.parametrize("order", list(Order))
def test_lower_triangular_rows(order):
    assert list(_filled(order).rows()) == EXPECTED


def test_orders_agree():
    assert list(_filled(Order.ROW_MAJOR).rows()) == list(_filled(Order.COLUMN_MAJOR).rows())


@pytest.mark.parametrize("order", list(Order))
def test_every_lower_entry_round_trips(order):
    m = LowerTriangularMatrix(5, order)
    for i in range(1, 6):
        for j in range(1, i + 1):
            m[i, j] = 100 * i + j
    for i in range(1, 6):
        for j in range(1, i + 1):
            assert m[i, j] == 100 * i + j


def test_upper_assignment_ignored():
    m = LowerTriangularMatrix(3)
    m[1, 3] = 7
    assert m[1, 3] == 0


def test_out_of_range_index():
    m = LowerTriangularMatrix(3)
    m[1, 1] = 5
    with pytest.raises(IndexError):
        _ = m[4, 1]
    with pytest.raises(IndexError):
        m[0, 1] = 2
    assert m[1, 1] == 5


def test_str_first_line():
    assert str(_filled(Order.ROW_MAJOR)).splitlines()[0] == "1 0 0 0"


def _sparse(m, n, triples):
    return SparseMatrix(m, n, [Element(i, j, x) for i, j, x in triples])


def test_sparse_add_matches_dense_sum():
    a = _sparse(3, 4, [(0, 1, 3), (1, 2, 4), (2, 0, 5)])
    b = _sparse(3, 4, [(0, 1, 2), (2, 3, 7)])
    total = (a + b).to_dense()
    da, db = a.to_dense(), b.to_dense()
    for r in range(3):
        for c in range(4):
            assert total[r][c] == da[r][c] + db[r][c]


def test_sparse_add_commutes():
    a = _sparse(2, 2, [(0, 0, 1), (1, 1, 2)])
    b = _sparse(2, 2, [(0, 1, 5), (1, 1, 3)])
    assert a + b == b + a


def test_sparse_elements_sorted():
    s = _sparse(3, 3, [(2, 2, 1), (0, 1, 2), (1, 0, 3)])
    assert [(e.i, e.j) for e in s.elements] == sorted((e.i, e.j) for e in s.elements)


def test_sparse_dimension_mismatch():
    with pytest.raises(ValueError):
        _sparse(2, 2, []) + _sparse(2, 3, [])


def test_sparse_element_out_of_range():
    with pytest.raises(ValueError):
        _sparse(2, 2, [(2, 0, 1)])


def test_sparse_str():
    assert str(_sparse(2, 2, [(1, 1, 9)])) == "0 0\n0 9"