'''
Stop market order variant, triggering a market order at the stop price.
'''

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from keel.core.domain.enums import OrderType
from keel.core.domain.order import Order
from keel.core.domain.update_order_request import UpdateOrderRequest

__all__ = ['StopMarketOrder']

_ZERO = Decimal(0)


@dataclass(kw_only=True)
class StopMarketOrder(Order):

    '''
    Order that becomes a market order once the stop price trades.

    Args:
        stop_price (Decimal): Trigger price.
    '''

    ORDER_TYPE: ClassVar[OrderType] = OrderType.STOP_MARKET

    stop_price: Decimal = _ZERO

    @property
    def value(self) -> Decimal:

        '''Return quantity valued at the stop price.'''

        return self.quantity * self.stop_price

    def apply_update_order_request(self, request: UpdateOrderRequest) -> None:

        super().apply_update_order_request(request)
        if request.stop_price is not None:
            self.stop_price = request.stop_price
