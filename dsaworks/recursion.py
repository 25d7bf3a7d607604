"""Classic recursive routines: sums, powers, Taylor series and Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator


def nested(n: int) -> int:
    """Nested recursion: the function calls itself with its own result."""
    if n > 100:
        return n - 10
    return nested(nested(n + 11))


def _check_exponent(n: int) -> None:
    if n < 0:
        raise ValueError("exponent must be non-negative")


def power(m: int, n: int) -> int:
    """Compute m ** n with one recursive call per unit of the exponent."""
    _check_exponent(n)
    if n == 0:
        return 1
    return power(m, n - 1) * m


def fast_power(m: int, n: int) -> int:
    """Compute m ** n by repeated squaring."""
    _check_exponent(n)
    if n == 0:
        return 1
    if n % 2 == 0:
        return fast_power(m * m, n // 2)
    return m * fast_power(m * m, (n - 1) // 2)


def sum_to(n: int) -> int:
    """Sum of 1..n, computed recursively."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    return sum_to(n - 1) + n


def sum_iterative(n: int) -> int:
    """Sum of 1..n, computed with a loop."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def countdown(n: int) -> list[int]:
    """Values visited by a tail-recursive countdown from n to 1."""
    if n > 0:
        return [n, *countdown(n - 1)]
    return []


def tree_recursion(n: int) -> list[int]:
    """Values visited by a function that calls itself twice per level."""
    if n > 0:
        return [n, *tree_recursion(n - 1), *tree_recursion(n - 1)]
    return []


class AccumulatingSum:
    """A recursive sum whose counter survives between calls.

    Each call adds n to a shared counter on the way down and adds the
    counter's final value once per level on the way back up.
    """

    def __init__(self) -> None:
        self.counter = 0

    def __call__(self, n: int) -> int:
        if n > 0:
            self.counter += 1
            return self(n - 1) + self.counter
        return 0


def taylor_exp(x: float, n: int) -> float:
    """Approximate e**x with n terms of its Taylor series, recursively."""
    numerator = 1.0
    denominator = 1.0

    def expand(k: int) -> float:
        nonlocal numerator, denominator
        if k == 0:
            return 1.0
        partial = expand(k - 1)
        numerator *= x
        denominator *= k
        return partial + numerator / denominator

    return expand(n)


def taylor_exp_horner(x: float, n: int) -> float:
    """Approximate e**x by Horner's rule, folding from the n-th level down.

    The accumulator starts at zero, so the series reaches the x**(n-1) term.
    """
    total = 0.0
    for k in range(n, 0, -1):
        total = 1 + x * total / k
    return total


def taylor_exp_iterative(x: float, n: int) -> float:
    """Approximate e**x with n terms of its Taylor series, using a loop."""
    total = 1.0
    numerator = 1.0
    denominator = 1.0
    for k in range(1, n + 1):
        numerator *= x
        denominator *= k
        total += numerator / denominator
    return total


def hanoi(n: int, source: int, via: int, target: int) -> Iterator[tuple[int, int]]:
    """Yield the (from, to) moves that carry n discs from source to target."""
    if n > 0:
        yield from hanoi(n - 1, source, target, via)
        yield (source, target)
        yield from hanoi(n - 1, via, source, target)