from typing import Generic, Optional, TypeVar

from gstack.errors import EmptyStackError

DEFAULT_INITIAL_CAPACITY = 16

E = TypeVar("E")


class GenericStack(Generic[E]):
    """A last-in-first-out container backed by a growable buffer of slots.

    Not safe for concurrent mutation; callers sharing an instance between
    threads must synchronize externally.
    """

    def __init__(self) -> None:
        self._buffer: list[Optional[E]] = [None] * DEFAULT_INITIAL_CAPACITY
        self._size = 0

    def push(self, element: E) -> None:
        self._ensure_capacity()
        self._buffer[self._size] = element
        self._size += 1

    def pop(self) -> E:
        if self._size == 0:
            raise EmptyStackError()

        self._size -= 1
        result = self._buffer[self._size]
        # Drop the obsolete reference so the element can be reclaimed
        self._buffer[self._size] = None
        return result  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._size == 0

    def _ensure_capacity(self) -> None:
        if len(self._buffer) == self._size:
            grown: list[Optional[E]] = [None] * (2 * self._size + 1)
            grown[: self._size] = self._buffer
            self._buffer = grown
