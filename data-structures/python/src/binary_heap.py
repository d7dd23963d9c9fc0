import operator
from typing import TypeVar, Generic, List, Iterable, Callable, Optional

T = TypeVar('T')

Comparator = Callable[[T, T], bool]


class Heap(Generic[T]):
    """Binary heap ordered by a caller-supplied predicate.

    ``comparator(a, b)`` returns True when ``a`` belongs above ``b``. Storage is
    one-indexed: slot 0 holds a ``None`` sentinel so that the parent of ``i`` is
    ``i // 2`` and its children are ``2 * i`` and ``2 * i + 1``.

    ``None`` cannot be stored, since ``extract_root`` returns it to signal an
    empty heap; ``insert(None)`` raises ``TypeError``. If the comparator raises,
    the exception propagates and the heap is left as it was.
    """

    def __init__(self, comparator: Comparator) -> None:
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._count: int = 0
        self._items: List[Optional[T]] = [None]
        self._comparator: Comparator = comparator

    @classmethod
    def new_min(cls) -> 'Heap[T]':
        return cls(operator.lt)

    @classmethod
    def new_max(cls) -> 'Heap[T]':
        return cls(operator.gt)

    @classmethod
    def from_array(cls, arr: Iterable[T], comparator: Comparator) -> 'Heap[T]':
        """Build a heap from an iterable in O(n).

        Note: Creates a shallow copy of the input.
        """
        heap: Heap[T] = cls(comparator)
        for value in arr:
            heap._check_value(value)
            heap._items.append(value)
        heap._count = len(heap._items) - 1
        for i in range(heap._count // 2, 0, -1):
            value = heap._items[i]
            heap._move(heap._sift_down_path(value, i, heap._count), i, value)
        return heap

    def insert(self, value: T) -> None:
        self._check_value(value)
        path = self._sift_up_path(value, self._count + 1)
        self._items.append(value)
        self._count += 1
        self._move(path, self._count, value)

    add = insert

    def extract_root(self) -> Optional[T]:
        """Remove and return the root, or None if the heap is empty."""
        if self.is_empty():
            return None
        if self._count == 1:
            self._count = 0
            return self._items.pop()
        last = self._items[self._count]
        path = self._sift_down_path(last, 1, self._count - 1)
        root = self._items[1]
        self._items.pop()
        self._count -= 1
        self._move(path, 1, last)
        return root

    def peek(self) -> Optional[T]:
        if self.is_empty():
            return None
        return self._items[1]

    def to_list(self) -> List[T]:
        """Live elements in storage order (heap order, not sorted order)."""
        return self._items[1:]

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        del self._items[1:]
        self._count = 0

    def copy(self) -> 'Heap[T]':
        clone: Heap[T] = Heap(self._comparator)
        clone._items = self._items.copy()
        clone._count = self._count
        return clone

    def _check_value(self, value: T) -> None:
        if value is None:
            raise TypeError("heap elements cannot be None")

    def _parent_idx(self, idx: int) -> int:
        return idx // 2

    def _left_child_idx(self, idx: int) -> int:
        return idx * 2

    def _right_child_idx(self, idx: int) -> int:
        return self._left_child_idx(idx) + 1

    def _children_present(self, idx: int, count: int) -> bool:
        return self._left_child_idx(idx) <= count

    def _preferred_child_idx(self, idx: int, count: int) -> int:
        left = self._left_child_idx(idx)
        right = self._right_child_idx(idx)
        # Bound by the live count, not by len(self._items).
        if right > count:
            return left
        if self._comparator(self._items[left], self._items[right]):
            return left
        return right

    # The path helpers only read storage; _move writes once every comparison
    # has returned.
    def _sift_up_path(self, value: T, idx: int) -> List[int]:
        path = []
        while idx > 1:
            parent = self._parent_idx(idx)
            if not self._comparator(value, self._items[parent]):
                break
            path.append(parent)
            idx = parent
        return path

    def _sift_down_path(self, value: T, idx: int, count: int) -> List[int]:
        path = []
        while self._children_present(idx, count):
            child = self._preferred_child_idx(idx, count)
            if not self._comparator(self._items[child], value):
                break
            path.append(child)
            idx = child
        return path

    def _move(self, path: List[int], hole: int, value: T) -> None:
        items = self._items
        for idx in path:
            items[hole] = items[idx]
            hole = idx
        items[hole] = value

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __repr__(self) -> str:
        return f"Heap({self.to_list()})"

    def __str__(self) -> str:
        return f"Heap(size={self._count})"

    def __iter__(self) -> 'Heap[T]':
        return self

    def __next__(self) -> T:
        value = self.extract_root()
        if value is None:
            raise StopIteration
        return value


def MinHeap() -> Heap:
    return Heap.new_min()


def MaxHeap() -> Heap:
    return Heap.new_max()
