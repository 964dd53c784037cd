class HeapError(Exception):
    """Base class for every error raised by a DaryHeap."""


class InvalidDegreeError(HeapError, ValueError):
    pass


class NullInputError(HeapError, ValueError):
    pass


class HeapUnderflowError(HeapError, RuntimeError):
    pass


class IndexOutOfRangeError(HeapError, IndexError):
    pass


class KeyDecreaseRejectedError(HeapError, ValueError):
    pass
