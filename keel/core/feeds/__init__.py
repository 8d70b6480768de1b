'''
Data feed primitives: timestamped records, cursors and cursor concatenation.
'''

from __future__ import annotations

from keel.core.feeds.concat_cursor import ConcatCursor, ConcatPhase
from keel.core.feeds.cursor import IterableCursor, RecordCursor, SequenceCursor
from keel.core.feeds.records import DataPoint, TimestampedRecord

__all__ = [
    'ConcatCursor',
    'ConcatPhase',
    'DataPoint',
    'IterableCursor',
    'RecordCursor',
    'SequenceCursor',
    'TimestampedRecord',
]
