from src.dary_heap.dary_heap import DaryHeap
from src.dary_heap.topk import get_topk
