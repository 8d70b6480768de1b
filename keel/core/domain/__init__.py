'''
Order domain types for keel.

Re-exports the enums, the abstract Order and its six variants, the
submit and update requests, the order factory and the order errors.
'''

from __future__ import annotations

from keel.core.domain.enums import (
    OrderDirection,
    OrderDuration,
    OrderStatus,
    OrderType,
    SecurityType,
)
from keel.core.domain.errors import (
    InvalidOrderTypeError,
    OrderError,
    OrderIdMismatchError,
)
from keel.core.domain.limit_order import LimitOrder
from keel.core.domain.market_on_close_order import MarketOnCloseOrder
from keel.core.domain.market_on_open_order import MarketOnOpenOrder
from keel.core.domain.market_order import MarketOrder
from keel.core.domain.order import Order
from keel.core.domain.order_factory import create_order
from keel.core.domain.stop_limit_order import StopLimitOrder
from keel.core.domain.stop_market_order import StopMarketOrder
from keel.core.domain.submit_order_request import SubmitOrderRequest
from keel.core.domain.update_order_request import UpdateOrderRequest

__all__ = [
    'InvalidOrderTypeError',
    'LimitOrder',
    'MarketOnCloseOrder',
    'MarketOnOpenOrder',
    'MarketOrder',
    'Order',
    'OrderDirection',
    'OrderDuration',
    'OrderError',
    'OrderIdMismatchError',
    'OrderStatus',
    'OrderType',
    'SecurityType',
    'StopLimitOrder',
    'StopMarketOrder',
    'SubmitOrderRequest',
    'UpdateOrderRequest',
    'create_order',
]
