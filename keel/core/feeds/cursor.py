'''
Pull-based record cursor protocol and adapters over Python iterables.

A cursor advances with move_next(), exposes the record it stopped on as
current, can be rewound with reset() and must be released with close().
'''

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Generic, Protocol, TypeVar, runtime_checkable

__all__ = ['IterableCursor', 'RecordCursor', 'SequenceCursor']

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)


@runtime_checkable
class RecordCursor(Protocol[T_co]):

    '''
    Lazy, restartable source of records.

    Consumed by ConcatCursor and downstream feed stages. Implementations
    may hold external resources, which close() releases.
    '''

    @property
    def current(self) -> T_co | None:

        '''Return the record the last successful move_next() stopped on.'''

        ...

    def move_next(self) -> bool:

        '''
        Advance to the next record.

        Returns:
            bool: True if a record is available as current, False when exhausted
        '''

        ...

    def reset(self) -> None:

        '''Rewind to the position before the first record.'''

        ...

    def close(self) -> None:

        '''Release any resources held by the cursor.'''

        ...


class SequenceCursor(Generic[T]):

    '''
    Cursor over an in-memory sequence of records.

    Args:
        records (Sequence[T | None]): Records in emission order.
    '''

    def __init__(self, records: Sequence[T | None]) -> None:

        self._records = records
        self._index = -1
        self._current: T | None = None

    @property
    def current(self) -> T | None:

        return self._current

    def move_next(self) -> bool:

        if self._index + 1 >= len(self._records):
            self._index = len(self._records)
            self._current = None
            return False

        self._index += 1
        self._current = self._records[self._index]
        return True

    def reset(self) -> None:

        self._index = -1
        self._current = None

    def close(self) -> None:

        self._current = None


class IterableCursor(Generic[T]):

    '''
    Cursor over iterables produced on demand by a factory.

    Each reset() discards the active iterator and calls the factory again,
    so generators backed by files or sockets are reopened from the start.

    Args:
        factory (Callable[[], Iterable[T | None]]): Returns a fresh iterable per pass.
    '''

    def __init__(self, factory: Callable[[], Iterable[T | None]]) -> None:

        self._factory = factory
        self._iterator: Iterator[T | None] | None = None
        self._current: T | None = None
        self._exhausted = False

    @property
    def current(self) -> T | None:

        return self._current

    def move_next(self) -> bool:

        if self._exhausted:
            return False

        if self._iterator is None:
            self._iterator = iter(self._factory())

        try:
            self._current = next(self._iterator)
        except StopIteration:
            self._current = None
            self._exhausted = True
            return False

        return True

    def reset(self) -> None:

        self._release_iterator()
        self._current = None
        self._exhausted = False

    def close(self) -> None:

        self._release_iterator()
        self._current = None
        self._exhausted = True

    def _release_iterator(self) -> None:

        '''Close the active iterator when it supports closing, then drop it.'''

        iterator, self._iterator = self._iterator, None
        close = getattr(iterator, 'close', None)
        if callable(close):
            close()
