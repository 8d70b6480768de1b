'''
Timestamped record types flowing through data feed cursors.

Cursors only rely on the TimestampedRecord protocol; DataPoint is the
plain record produced by in-memory and replayed feeds.
'''

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol, runtime_checkable

__all__ = ['DataPoint', 'TimestampedRecord']


@runtime_checkable
class TimestampedRecord(Protocol):

    '''Any record exposing the time at which its period ends.'''

    @property
    def end_time(self) -> datetime: ...


@dataclass(frozen=True)
class DataPoint:

    '''
    A single market data observation covering [time, end_time].

    Args:
        symbol (str): Instrument the observation belongs to.
        time (datetime): Start of the observed period.
        end_time (datetime): End of the observed period, not before time.
        value (Decimal): Observed value, typically a price.
    '''

    symbol: str
    time: datetime
    end_time: datetime
    value: Decimal

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        if self.end_time < self.time:
            msg = 'DataPoint.end_time cannot precede time'
            raise ValueError(msg)
