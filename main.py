from binheap import BinaryHeap, get_topk


priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]
elements = ["low", "very_low", "medium", "low_med", "high", "lowest"]
tasks = list(zip(priorities, elements))

# Highest priority value first
print("Creating max heap...")
heap = BinaryHeap(lambda a, b: a[0] > b[0], tasks)

# Test basic properties
print(f"Heap size: {heap.count}")
print(f"Is empty: {heap.is_empty()}")
print(f"Top: {heap.top}")
print(f"Layout: {heap}")
print(f"Top 3: {get_topk(heap, 3)}")

while heap:
    print(heap.pop())
