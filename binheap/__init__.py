from binheap.min_heap.min_heap import MinHeap
from binheap.min_heap.smallest import nsmallest
