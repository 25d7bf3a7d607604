import math

import pytest

from dsaworks.recursion import (
    AccumulatingSum,
    countdown,
    fast_power,
    hanoi,
    nested,
    power,
    sum_iterative,
    sum_to,
    taylor_exp,
    taylor_exp_horner,
    taylor_exp_iterative,
    tree_recursion,
)


def test_nested_below_hundred_gives_ninety_one():
    assert nested(95) == 91
    assert all(nested(n) == nested(95) for n in range(0, 101))


def test_nested_above_hundred_subtracts_ten():
    assert nested(150) == 140


@pytest.mark.parametrize("m,n", [(9, 3), (2, 10), (3, 0), (-2, 5), (7, 1)])
def test_power_matches_builtin(m, n):
    assert power(m, n) == m ** n
    assert fast_power(m, n) == m ** n


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        power(2, -1)
    with pytest.raises(ValueError):
        fast_power(2, -1)


@pytest.mark.parametrize("n", [0, 1, 5, 30])
def test_sums_agree(n):
    assert sum_to(n) == sum(range(n + 1))
    assert sum_iterative(n) == sum_to(n)


def test_sum_to_negative_rejected():
    with pytest.raises(ValueError):
        sum_to(-1)


def test_countdown():
    assert countdown(3) == [3, 2, 1]
    assert countdown(0) == []


def test_tree_recursion_shape():
    calls = tree_recursion(3)
    assert calls[0] == 3
    assert len(calls) == 2 ** 3 - 1
    assert calls[1:4] == calls[4:] == tree_recursion(2)


def test_accumulating_sum_keeps_state():
    f = AccumulatingSum()
    assert f(5) == 25
    assert f(5) == 50
    assert f.counter == 10


def test_taylor_exp_converges():
    assert taylor_exp(4, 15) == pytest.approx(taylor_exp_iterative(4, 15))
    assert taylor_exp(1, 20) == pytest.approx(math.e)


def test_taylor_exp_is_repeatable():
    expected = taylor_exp_iterative(2, 10)
    first = taylor_exp(2, 10)
    second = taylor_exp(2, 10)
    assert first == pytest.approx(expected)
    assert second == pytest.approx(expected)
    assert first == second


def test_horner_reaches_one_term_less():
    for x in (1, 2, 3):
        for n in (1, 5, 10):
            assert taylor_exp_horner(x, n) == pytest.approx(taylor_exp_iterative(x, n - 1))


def test_taylor_zero_terms():
    assert taylor_exp(3, 0) == 1.0
    assert taylor_exp_iterative(3, 0) == 1.0
    assert taylor_exp_horner(3, 0) == 0.0


def _play(moves, n):
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for src, dst in moves:
        disc = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disc
        pegs[dst].append(disc)
    return pegs


@pytest.mark.parametrize("n", [1, 2, 4, 6])
def test_hanoi_moves_are_legal_and_complete(n):
    moves = list(hanoi(n, 1, 2, 3))
    assert len(moves) == 2 ** n - 1
    pegs = _play(moves, n)
    assert pegs[3] == list(range(n, 0, -1))
    assert pegs[1] == pegs[2] == []


def test_hanoi_single_disc():
    assert list(hanoi(1, 1, 2, 3)) == [(1, 3)]
    assert list(hanoi(0, 1, 2, 3)) == []