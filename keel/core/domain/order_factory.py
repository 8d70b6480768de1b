'''
Build the matching Order variant for a SubmitOrderRequest.
'''

from __future__ import annotations

import logging

from keel.core.domain.enums import OrderStatus, OrderType
from keel.core.domain.errors import InvalidOrderTypeError
from keel.core.domain.limit_order import LimitOrder
from keel.core.domain.market_on_close_order import MarketOnCloseOrder
from keel.core.domain.market_on_open_order import MarketOnOpenOrder
from keel.core.domain.market_order import MarketOrder
from keel.core.domain.order import Order
from keel.core.domain.stop_limit_order import StopLimitOrder
from keel.core.domain.stop_market_order import StopMarketOrder
from keel.core.domain.submit_order_request import SubmitOrderRequest

__all__ = ['create_order']

_log = logging.getLogger(__name__)


def create_order(request: SubmitOrderRequest) -> Order:

    '''
    Create the Order variant that matches a submission request.

    The returned order is marked NEW, carries the request's order id, and
    takes the request's tag whenever one is present.

    Args:
        request (SubmitOrderRequest): Submission to build an order for.

    Returns:
        Order: Newly constructed order.

    Raises:
        InvalidOrderTypeError: The request names an order type with no variant.
    '''

    order_type = request.order_type
    tag = request.tag if request.tag is not None else ''
    order: Order

    if order_type is OrderType.MARKET:
        order = MarketOrder(
            symbol=request.symbol,
            quantity=request.quantity,
            time=request.time,
            tag=tag,
            security_type=request.security_type,
        )
    elif order_type is OrderType.LIMIT:
        order = LimitOrder(
            symbol=request.symbol,
            quantity=request.quantity,
            limit_price=request.limit_price,
            time=request.time,
            tag=tag,
            security_type=request.security_type,
        )
    elif order_type is OrderType.STOP_MARKET:
        order = StopMarketOrder(
            symbol=request.symbol,
            quantity=request.quantity,
            stop_price=request.stop_price,
            time=request.time,
            tag=tag,
            security_type=request.security_type,
        )
    elif order_type is OrderType.STOP_LIMIT:
        order = StopLimitOrder(
            symbol=request.symbol,
            quantity=request.quantity,
            stop_price=request.stop_price,
            limit_price=request.limit_price,
            time=request.time,
            tag=tag,
            security_type=request.security_type,
        )
    elif order_type is OrderType.MARKET_ON_OPEN:
        order = MarketOnOpenOrder(
            symbol=request.symbol,
            security_type=request.security_type,
            quantity=request.quantity,
            time=request.time,
            tag=tag,
        )
    elif order_type is OrderType.MARKET_ON_CLOSE:
        order = MarketOnCloseOrder(
            symbol=request.symbol,
            security_type=request.security_type,
            quantity=request.quantity,
            time=request.time,
            tag=tag,
        )
    else:
        msg = f'Unsupported order type: {order_type!r}'
        raise InvalidOrderTypeError(msg, order_type=order_type)

    order.status = OrderStatus.NEW
    order.id = request.order_id
    if request.tag is not None:
        order.tag = request.tag

    _log.debug(
        'created order: id=%s type=%s symbol=%s quantity=%s',
        order.id,
        order_type.value,
        order.symbol,
        order.quantity,
    )

    return order
