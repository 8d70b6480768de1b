'''
Limit order variant, valued and updated at its limit price.
'''

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from keel.core.domain.enums import OrderType
from keel.core.domain.order import Order
from keel.core.domain.update_order_request import UpdateOrderRequest

__all__ = ['LimitOrder']

_ZERO = Decimal(0)


@dataclass(kw_only=True)
class LimitOrder(Order):

    '''
    Order executed at the limit price or better.

    Args:
        limit_price (Decimal): Worst acceptable execution price.
    '''

    ORDER_TYPE: ClassVar[OrderType] = OrderType.LIMIT

    limit_price: Decimal = _ZERO

    @property
    def value(self) -> Decimal:

        '''Return quantity valued at the limit price.'''

        return self.quantity * self.limit_price

    def apply_update_order_request(self, request: UpdateOrderRequest) -> None:

        super().apply_update_order_request(request)
        if request.limit_price is not None:
            self.limit_price = request.limit_price
