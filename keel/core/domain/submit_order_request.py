'''
SubmitOrderRequest dataclass carrying a new order submission.

Requests are immutable and consumed once by the order factory.
'''

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from keel.core.domain.enums import OrderType, SecurityType

__all__ = ['SubmitOrderRequest']

_ZERO = Decimal(0)


@dataclass(frozen=True)
class SubmitOrderRequest:

    '''
    A request to create and submit a new order.

    Args:
        order_id (int): Identifier assigned by the order management layer.
        order_type (OrderType): Kind of order to build.
        symbol (str): Traded instrument identifier, must be non-empty.
        security_type (SecurityType): Asset class of the symbol.
        quantity (int): Signed quantity, positive buys and negative sells.
        time (datetime): Submission time.
        limit_price (Decimal): Limit price, used by limit-style orders.
        stop_price (Decimal): Stop trigger price, used by stop-style orders.
        tag (str | None): Free-form annotation, None when absent.
    '''

    order_id: int
    order_type: OrderType
    symbol: str
    security_type: SecurityType
    quantity: int
    time: datetime
    limit_price: Decimal = _ZERO
    stop_price: Decimal = _ZERO
    tag: str | None = None

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        if not self.symbol:
            msg = 'SubmitOrderRequest.symbol must be a non-empty string'
            raise ValueError(msg)
