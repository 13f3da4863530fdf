from depq.smmh.symmetric_min_max_heap import EmptyQueueError, SymmetricMinMaxHeap
from depq.smmh.topk import get_bottomk, get_topk
