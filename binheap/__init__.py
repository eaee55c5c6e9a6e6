from binheap.binary_heap.binary_heap import BinaryHeap
from binheap.binary_heap.topk import get_topk

__all__ = ["BinaryHeap", "get_topk"]
