from typing import Any

from binheap.binary_heap.binary_heap import BinaryHeap


def get_topk(heap: BinaryHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    The elements are returned in extraction order, i.e. sorted by the heap's
    comparator with the highest priority first. For a min heap these are the
    K smallest elements; for a max heap the K largest. The heap passed in is
    not modified.

    Parameters
    ----------
    heap : BinaryHeap
        A BinaryHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements. Fewer than K if the heap holds fewer elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = heap.copy()
    return [scratch.pop() for _ in range(min(k, len(scratch)))]
