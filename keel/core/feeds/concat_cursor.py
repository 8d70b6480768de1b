'''
Concatenate two time-ordered record cursors into one.

The first cursor is drained completely, then the second. At the splice
point, records of the second cursor whose end time does not advance past
the last record emitted from the first can be suppressed.
'''

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from types import TracebackType
from typing import Generic, TypeVar

from keel.core.feeds.cursor import RecordCursor
from keel.core.feeds.records import TimestampedRecord

__all__ = ['ConcatCursor', 'ConcatPhase']

_log = logging.getLogger(__name__)

R = TypeVar('R', bound=TimestampedRecord)


class ConcatPhase(Enum):

    '''Position of a ConcatCursor relative to the splice point.'''

    DRAINING_FIRST = 'DRAINING_FIRST'
    DRAINING_SECOND = 'DRAINING_SECOND'
    EXHAUSTED = 'EXHAUSTED'


class ConcatCursor(Generic[R]):

    '''
    Lazy concatenation of two record cursors with optional splice deduplication.

    Owns both underlying cursors: close() releases them and reset()
    rewinds them. Also usable as an iterator and as a context manager.

    Args:
        first (RecordCursor[R]): Cursor drained first.
        second (RecordCursor[R]): Cursor drained once first is exhausted.
        skip_duplicate_end_times (bool): Drop records of second whose end time
            is not after the end time of the last record emitted from first.
    '''

    def __init__(
        self,
        first: RecordCursor[R],
        second: RecordCursor[R],
        skip_duplicate_end_times: bool,
    ) -> None:

        self._first = first
        self._second = second
        self._skip_duplicate_end_times = skip_duplicate_end_times
        self._phase = ConcatPhase.DRAINING_FIRST
        self._current: R | None = None
        self._last_end_time: datetime | None = None

    @property
    def current(self) -> R | None:

        '''Return the record the last successful move_next() stopped on.'''

        return self._current

    @property
    def phase(self) -> ConcatPhase:

        return self._phase

    @property
    def last_end_time(self) -> datetime | None:

        '''Return the end time captured at the splice, None before it or if first emitted nothing.'''

        return self._last_end_time

    def move_next(self) -> bool:

        '''
        Advance to the next record of the concatenated stream.

        Returns:
            bool: True if a record is available as current, False when both cursors are exhausted
        '''

        if self._phase is ConcatPhase.DRAINING_FIRST:
            if self._first.move_next():
                self._current = self._first.current
                return True
            self._enter_second()

        if self._phase is ConcatPhase.DRAINING_SECOND:
            while self._second.move_next():
                record = self._second.current
                if self._is_duplicate(record):
                    continue
                self._current = record
                return True
            self._phase = ConcatPhase.EXHAUSTED

        self._current = None
        return False

    def reset(self) -> None:

        '''Rewind both cursors and restart from the first one.'''

        self._first.reset()
        self._second.reset()
        self._phase = ConcatPhase.DRAINING_FIRST
        self._current = None
        self._last_end_time = None

    def close(self) -> None:

        '''
        Release both underlying cursors.

        Each cursor is closed independently; a failure closing one is logged
        and does not prevent closing the other. Nothing is raised.
        '''

        self._close_safely(self._first, 'first')
        self._close_safely(self._second, 'second')
        self._phase = ConcatPhase.EXHAUSTED
        self._current = None

    def _enter_second(self) -> None:

        '''Capture the splice end time and switch to draining the second cursor.'''

        last = self._current
        self._last_end_time = last.end_time if last is not None else None
        self._phase = ConcatPhase.DRAINING_SECOND

    def _is_duplicate(self, record: R | None) -> bool:

        if not self._skip_duplicate_end_times:
            return False
        if self._last_end_time is None or record is None:
            return False
        return record.end_time <= self._last_end_time

    @staticmethod
    def _close_safely(cursor: RecordCursor[R], name: str) -> None:

        try:
            cursor.close()
        except Exception:
            _log.warning('failed to close %s cursor of ConcatCursor', name, exc_info=True)

    def __iter__(self) -> ConcatCursor[R]:

        return self

    def __next__(self) -> R | None:

        if self.move_next():
            return self._current
        raise StopIteration

    def __enter__(self) -> ConcatCursor[R]:

        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:

        self.close()
