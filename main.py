from depq import SymmetricMinMaxHeap, get_topk


priorities = [5, 3, 8, 1, 9, 2]
elements = ["five", "three", "eight", "one", "nine", "two"]

print("Creating symmetric min-max heap...")
heap = SymmetricMinMaxHeap(elements, priorities)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Min: {heap.peek_min()}, max: {heap.peek_max()}")
print(f"Top 3: {get_topk(heap, 3)}")
print(heap.to_dot(include_indices=True, include_elements=True))

print(f"Removed min: {heap.remove_min()}, removed max: {heap.remove_max()}")
print(f"Valid: {heap._validate()}")
