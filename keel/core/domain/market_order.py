'''
Market order variant, filled at the prevailing price.
'''

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from keel.core.domain.enums import OrderType
from keel.core.domain.order import Order

__all__ = ['MarketOrder']


@dataclass(kw_only=True)
class MarketOrder(Order):

    '''Order executed immediately at the market price.'''

    ORDER_TYPE: ClassVar[OrderType] = OrderType.MARKET

    @property
    def value(self) -> Decimal:

        '''Return quantity valued at the current reference price.'''

        return self.quantity * self.price
