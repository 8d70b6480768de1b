'''
Exceptions raised by the order model.

Both conditions are caller errors: they abort the construction or
update attempt and propagate unchanged.
'''

from __future__ import annotations

__all__ = ['InvalidOrderTypeError', 'OrderError', 'OrderIdMismatchError']


class OrderError(Exception):

    '''
    Base exception for all order model failures.

    Args:
        message (str): Human-readable error description
    '''

    def __init__(self, message: str) -> None:

        super().__init__(message)
        self.message = message


class InvalidOrderTypeError(OrderError):

    '''
    Raised when an order type is not one the factory can build.

    Args:
        message (str): Human-readable error description
        order_type (object): The unrecognised order type value
    '''

    def __init__(self, message: str, order_type: object) -> None:

        super().__init__(message)
        self.order_type = order_type


class OrderIdMismatchError(OrderError):

    '''
    Raised when an update request targets a different order.

    Args:
        message (str): Human-readable error description
        order_id (int): Id of the order the update was applied to
        request_order_id (int): Id carried by the update request
    '''

    def __init__(self, message: str, order_id: int, request_order_id: int) -> None:

        super().__init__(message)
        self.order_id = order_id
        self.request_order_id = request_order_id
