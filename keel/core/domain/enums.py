'''
Enumerated types for the keel order domain.

Defines order type, lifecycle status, direction, duration and security
type enums used by Order, its variants and the order requests.
'''

from __future__ import annotations

from enum import Enum


__all__ = ['OrderDirection', 'OrderDuration', 'OrderStatus', 'OrderType', 'SecurityType']


class OrderType(Enum):

    '''
    Closed set of supported order kinds.

    Values are the display names used when rendering an order.
    '''

    MARKET = 'Market'
    LIMIT = 'Limit'
    STOP_MARKET = 'StopMarket'
    STOP_LIMIT = 'StopLimit'
    MARKET_ON_OPEN = 'MarketOnOpen'
    MARKET_ON_CLOSE = 'MarketOnClose'


class OrderStatus(Enum):

    '''
    Order lifecycle states.

    NONE until the factory marks the order NEW. Later transitions are
    driven by execution and brokerage layers.
    '''

    NONE = 'NONE'
    NEW = 'NEW'
    SUBMITTED = 'SUBMITTED'
    PARTIALLY_FILLED = 'PARTIALLY_FILLED'
    FILLED = 'FILLED'
    CANCELED = 'CANCELED'
    INVALID = 'INVALID'


class OrderDirection(Enum):

    '''Buy, sell or hold classification derived from quantity sign.'''

    BUY = 'BUY'
    SELL = 'SELL'
    HOLD = 'HOLD'


class OrderDuration(Enum):

    '''Time in force. DAY is not honoured by backtests.'''

    GOOD_TIL_CANCELED = 'GOOD_TIL_CANCELED'
    DAY = 'DAY'


class SecurityType(Enum):

    '''Asset class of the traded symbol.'''

    BASE = 'BASE'
    EQUITY = 'EQUITY'
    OPTION = 'OPTION'
    COMMODITY = 'COMMODITY'
    FOREX = 'FOREX'
    FUTURE = 'FUTURE'
    CFD = 'CFD'
    CRYPTO = 'CRYPTO'
