'''
UpdateOrderRequest dataclass carrying changes to a live order.

Every optional field distinguishes absent (None, no change requested)
from a present value, including zero and the empty string.
'''

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

__all__ = ['UpdateOrderRequest']


@dataclass(frozen=True)
class UpdateOrderRequest:

    '''
    A request to modify an existing order in place.

    Args:
        order_id (int): Id of the order to update.
        quantity (int | None): New signed quantity, None to keep the current one.
        tag (str | None): New tag, None to keep the current one.
        limit_price (Decimal | None): New limit price for limit-style orders.
        stop_price (Decimal | None): New stop price for stop-style orders.
    '''

    order_id: int
    quantity: int | None = None
    tag: str | None = None
    limit_price: Decimal | None = None
    stop_price: Decimal | None = None
