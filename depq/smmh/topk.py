from typing import Any

from depq.smmh.symmetric_min_max_heap import SymmetricMinMaxHeap


def get_topk(heap: SymmetricMinMaxHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    The K elements with the highest priority are retrieved, highest first.
    The heap itself is left untouched.

    Parameters
    ----------
    heap : SymmetricMinMaxHeap
        A SymmetricMinMaxHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    pairs = heap.pairs
    pairs.sort(key=lambda x: x[0], reverse=True)
    return [e for _, e in pairs[:k]]


def get_bottomk(heap: SymmetricMinMaxHeap, k: int) -> list[Any]:
    """
    Function to get the bottom-K elements from a heap.

    Mirror of `get_topk`: the K elements with the lowest priority, lowest
    first.

    Parameters
    ----------
    heap : SymmetricMinMaxHeap
        A SymmetricMinMaxHeap object
    k : int
        The number of 'bottom-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'bottom-K' elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    pairs = heap.pairs
    pairs.sort(key=lambda x: x[0])
    return [e for _, e in pairs[:k]]
