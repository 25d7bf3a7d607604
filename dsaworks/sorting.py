"""Comparison and distribution sorts, plus merging of sorted runs."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence


def _partition(a: list[int], low: int, high: int) -> int:
    """Partition a[low:high] around a[low]; return the pivot's final index."""
    pivot = a[low]
    i, j = low, high
    while True:
        i += 1
        while i < high and a[i] <= pivot:
            i += 1
        j -= 1
        while a[j] > pivot:
            j -= 1
        if i < j:
            a[i], a[j] = a[j], a[i]
        else:
            break
    a[low], a[j] = a[j], a[low]
    return j


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, using quicksort with the first element as pivot."""
    a = list(items)
    pending = [(0, len(a))]
    while pending:
        low, high = pending.pop()
        if high - low > 1:
            j = _partition(a, low, high)
            pending.append((low, j))
            pending.append((j + 1, high))
    return a


def radix_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of non-negative integers, by least-significant digit."""
    a = list(items)
    if any(x < 0 for x in a):
        raise ValueError("radix sort needs non-negative integers")
    if not a:
        return a
    passes = len(str(max(a))) if max(a) else 0
    divisor = 1
    for _ in range(passes):
        bins: list[list[int]] = [[] for _ in range(10)]
        for x in a:
            bins[x // divisor % 10].append(x)
        a = [x for b in bins for x in b]
        divisor *= 10
    return a


def merge(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    i = j = 0
    out: list[int] = []
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            out.append(first[i])
            i += 1
        else:
            out.append(second[j])
            j += 1
    out.extend(first[i:])
    out.extend(second[j:])
    return out


def merge_halves(items: MutableSequence[int], low: int, mid: int, high: int) -> None:
    """Merge the sorted runs items[low..mid] and items[mid+1..high] in place."""
    if not 0 <= low <= mid + 1 <= high + 1 <= len(items):
        raise IndexError("run bounds out of range")
    items[low:high + 1] = merge(items[low:mid + 1], items[mid + 1:high + 1])


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, using recursive merge sort."""
    a = list(items)

    def sort(low: int, high: int) -> None:
        if low < high:
            mid = low + (high - low) // 2
            sort(low, mid)
            sort(mid + 1, high)
            merge_halves(a, low, mid, high)

    sort(0, len(a) - 1)
    return a


def selection_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, using selection sort."""
    a = list(items)
    for i in range(len(a) - 1):
        k = min(range(i, len(a)), key=a.__getitem__)
        a[i], a[k] = a[k], a[i]
    return a


def shell_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy, using Shell sort with halving gaps."""
    a = list(items)
    gap = len(a) // 2
    while gap >= 1:
        for j in range(gap, len(a)):
            temp = a[j]
            i = j - gap
            while i >= 0 and a[i] > temp:
                a[i + gap] = a[i]
                i -= gap
            a[i + gap] = temp
        gap //= 2
    return a