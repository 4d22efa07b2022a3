"""A first-in, first-out queue of arbitrary elements."""

from collections import deque
from typing import Any, Callable, Iterable, Iterator, Optional

SearchFn = Callable[[Any, Any], bool]


class Queue:
    """FIFO queue that also supports search and removal by predicate."""

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._items: deque = deque(elements)

    def put(self, element: Any) -> None:
        """Append an element at the end of the queue."""
        self._items.append(element)

    def get(self) -> Optional[Any]:
        """Remove and return the first element, or None if the queue is empty."""
        return self._items.popleft() if self._items else None

    def apply(self, fn: Callable[[Any], Any]) -> None:
        """Call fn on every element, front to back."""
        for element in self._items:
            fn(element)

    def search(self, searchfn: SearchFn, key: Any) -> Optional[Any]:
        """Return the first element for which searchfn(element, key) is true."""
        return next((element for element in self._items if searchfn(element, key)), None)

    def remove(self, searchfn: SearchFn, key: Any) -> Optional[Any]:
        """Remove and return the first element matching searchfn, or None."""
        for index, element in enumerate(self._items):
            if searchfn(element, key):
                del self._items[index]
                return element
        return None

    def concat(self, other: "Queue") -> None:
        """Move every element of other to the end of this queue, leaving other empty."""
        if other is self:
            raise ValueError("cannot concatenate a queue with itself")
        self._items.extend(other._items)
        other._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)