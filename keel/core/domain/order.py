'''
Abstract Order entity describing a trade instruction through its lifecycle.

Orders are mutable: quantity and tag change through update requests,
status and broker ids are written by execution and brokerage layers.
The order type is fixed per variant and never changes.
'''

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from keel.core.domain.enums import (
    OrderDirection,
    OrderDuration,
    OrderStatus,
    OrderType,
    SecurityType,
)
from keel.core.domain.errors import OrderIdMismatchError
from keel.core.domain.update_order_request import UpdateOrderRequest

__all__ = ['Order']

_log = logging.getLogger(__name__)

_ZERO = Decimal(0)


@dataclass(kw_only=True)
class Order(ABC):

    '''
    A trade instruction with a fixed kind, mutable quantity and tag, and a status.

    Construct one of the concrete variants. All fields are keyword-only and
    default to the empty order, so a bare variant call yields the blank order
    used when hydrating from storage.

    Args:
        symbol (str): Traded instrument identifier.
        quantity (int): Signed quantity, positive buys and negative sells.
        time (datetime): Creation time supplied by the caller.
        tag (str): Free-form annotation.
        security_type (SecurityType): Asset class of the symbol.
        id (int): Order identifier assigned by the order management layer.
        contingent_id (int): Id of an order to process first, 0 for none.
        broker_ids (list[int]): Brokerage identifiers, appended as the order is split.
        price (Decimal): Variant-dependent reference price.
        status (OrderStatus): Current lifecycle state.
        duration (OrderDuration): Time in force.
    '''

    ORDER_TYPE: ClassVar[OrderType]

    symbol: str = ''
    quantity: int = 0
    time: datetime = datetime.min
    tag: str = ''
    security_type: SecurityType = SecurityType.BASE
    id: int = 0
    contingent_id: int = 0
    broker_ids: list[int] = field(default_factory=list)
    price: Decimal = _ZERO
    status: OrderStatus = OrderStatus.NONE
    duration: OrderDuration = OrderDuration.GOOD_TIL_CANCELED

    @property
    def order_type(self) -> OrderType:

        '''Return the order kind of this variant.'''

        return self.ORDER_TYPE

    @property
    def direction(self) -> OrderDirection:

        '''Return BUY, SELL or HOLD based on the sign of quantity.'''

        if self.quantity > 0:
            return OrderDirection.BUY
        if self.quantity < 0:
            return OrderDirection.SELL
        return OrderDirection.HOLD

    @property
    def absolute_quantity(self) -> int:

        '''Return the unsigned quantity.'''

        return abs(self.quantity)

    @property
    @abstractmethod
    def value(self) -> Decimal:

        '''
        Return the notional value of the order.

        Limit-style variants value at their limit or stop price, market-style
        variants at the current reference price.

        Returns:
            Decimal: Signed notional, a pure function of the order's own fields.
        '''

    def add_broker_id(self, broker_id: int) -> None:

        '''
        Append a brokerage identifier for a split of this order.

        Args:
            broker_id (int): Identifier assigned by the brokerage.
        '''

        self.broker_ids.append(broker_id)

    def apply_update_order_request(self, request: UpdateOrderRequest) -> None:

        '''
        Modify this order in place to match an update request.

        Only quantity and tag are touched here. Variants that carry their own
        prices override this, call it first, then apply their price fields.

        Args:
            request (UpdateOrderRequest): Update targeting this order.

        Raises:
            OrderIdMismatchError: The request targets a different order id.
        '''

        if request.order_id != self.id:
            msg = (
                f'Attempted to apply update for order {request.order_id} '
                f'to order {self.id}'
            )
            raise OrderIdMismatchError(msg, order_id=self.id, request_order_id=request.order_id)

        if request.quantity is not None:
            self.quantity = request.quantity
        if request.tag is not None:
            self.tag = request.tag

        _log.debug(
            'applied update to order: id=%s quantity=%s tag=%r',
            self.id,
            self.quantity,
            self.tag,
        )

    def __str__(self) -> str:

        plural = '' if self.quantity == 1 else 's'
        return f'{self.order_type.value} order for {self.quantity} unit{plural} of {self.symbol}'
