from src.dary_heap import DaryHeap, get_topk


elements = [3, 5, 1, 9, 2, 8, 7]

# Create a ternary heap (d=3)
print("Creating ternary heap...")
heap = DaryHeap.from_elements(elements, d=3)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"First leaf index: {heap.first_leaf_index()}")
heap.print_heap_by_depth()

heap.max_heap_insert(6)
heap.heap_increase_key(len(heap) - 1, 10)
print(f"Top 3: {get_topk(heap, 3)}")
print(f"Extracted max: {heap.extract_max()}")
heap.print_heap_by_depth()
