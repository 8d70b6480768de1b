'''
Stop limit order variant, triggering a limit order at the stop price.
'''

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from keel.core.domain.enums import OrderType
from keel.core.domain.order import Order
from keel.core.domain.update_order_request import UpdateOrderRequest

__all__ = ['StopLimitOrder']

_ZERO = Decimal(0)


@dataclass(kw_only=True)
class StopLimitOrder(Order):

    '''
    Order that becomes a limit order once the stop price trades.

    Args:
        stop_price (Decimal): Trigger price.
        limit_price (Decimal): Limit applied after triggering.
    '''

    ORDER_TYPE: ClassVar[OrderType] = OrderType.STOP_LIMIT

    stop_price: Decimal = _ZERO
    limit_price: Decimal = _ZERO

    @property
    def value(self) -> Decimal:

        '''Return quantity valued at the limit price.'''

        return self.quantity * self.limit_price

    def apply_update_order_request(self, request: UpdateOrderRequest) -> None:

        super().apply_update_order_request(request)
        if request.stop_price is not None:
            self.stop_price = request.stop_price
        if request.limit_price is not None:
            self.limit_price = request.limit_price
