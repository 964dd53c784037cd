from typing import Any

from src.dary_heap.dary_heap import DaryHeap


def get_topk(heap: DaryHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    The K largest elements are returned in non-increasing order. The heap
    passed in is left untouched: its contents are copied into a scratch
    heap of the same degree, which is then drained K times.

    Parameters
    ----------
    heap : DaryHeap
        A DaryHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, largest first.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = DaryHeap.from_elements(heap.to_list(), heap.degree)
    return [scratch.extract_max() for _ in range(min(k, len(scratch)))]
