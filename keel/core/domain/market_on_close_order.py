'''
Market on close order variant, executed in the closing auction.
'''

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from keel.core.domain.enums import OrderType, SecurityType
from keel.core.domain.order import Order

__all__ = ['MarketOnCloseOrder']


@dataclass(kw_only=True)
class MarketOnCloseOrder(Order):

    '''
    Market order filled at the session close.

    Args:
        security_type (SecurityType): Asset class of the symbol, required.
    '''

    ORDER_TYPE: ClassVar[OrderType] = OrderType.MARKET_ON_CLOSE

    security_type: SecurityType = field()

    @property
    def value(self) -> Decimal:

        return self.quantity * self.price
