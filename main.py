import logging

from binheap import MinHeap, nsmallest

logging.basicConfig(level=logging.DEBUG)

priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]
elements = ["low", "very_low", "medium", "low_med", "high", "lowest"]

print("Creating min heap...")
heap = MinHeap(elements, priorities)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Minimum: {heap.peek()}")
print(f"Three smallest: {nsmallest(heap, 3)}")

heap.push("urgent", 0.5)
print(f"Minimum after push: {heap.peek()}")

print("Draining in priority order:")
while not heap.is_empty():
    print(f"  {heap.pop()}")

heap.clear()
print(f"Pop from empty heap: {heap.pop()}")
