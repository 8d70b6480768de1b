'''
Market on open order variant, executed in the opening auction.
'''

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from keel.core.domain.enums import OrderType, SecurityType
from keel.core.domain.order import Order

__all__ = ['MarketOnOpenOrder']


@dataclass(kw_only=True)
class MarketOnOpenOrder(Order):

    '''
    Market order filled at the next session open.

    Args:
        security_type (SecurityType): Asset class of the symbol, required.
    '''

    ORDER_TYPE: ClassVar[OrderType] = OrderType.MARKET_ON_OPEN

    security_type: SecurityType = field()

    @property
    def value(self) -> Decimal:

        return self.quantity * self.price
