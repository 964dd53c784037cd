from src.dary_heap.dary_heap import DaryHeap
from src.dary_heap.exceptions import (
    HeapError,
    HeapUnderflowError,
    IndexOutOfRangeError,
    InvalidDegreeError,
    KeyDecreaseRejectedError,
    NullInputError,
)
from src.dary_heap.topk import get_topk
