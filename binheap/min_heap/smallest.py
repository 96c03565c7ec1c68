from typing import Any

from binheap.min_heap.min_heap import MinHeap


def nsmallest(heap: MinHeap, k: int) -> list[Any]:
    """
    Function to get the K elements with the lowest priority from a heap.

    The heap itself is left untouched; the elements are drained from a
    shallow copy of it.

    Parameters
    ----------
    heap : MinHeap
        A MinHeap object
    k : int
        The number of elements to retrieve.

    Returns
    -------
    list[Any]
        Up to K elements, in ascending order of priority.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = heap.copy()
    return [scratch.pop() for _ in range(min(k, len(scratch)))]
