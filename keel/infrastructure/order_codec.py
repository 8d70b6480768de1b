'''
JSON serialization of orders via orjson.

Serialized orders carry their order type, which selects the variant on
hydration. Decimals are written as strings to keep full precision.

Hydration walks the variant's dataclass fields: scalar values are coerced
to Decimal, datetime or enum members from the field annotations, list
fields such as broker_ids are coerced item by item, and fields without a
default (security_type on the auction variants) must be present.
'''

from __future__ import annotations

import dataclasses
import enum
import types
from datetime import datetime
from decimal import Decimal
from typing import Any, Union, get_args, get_origin, get_type_hints

import orjson

from keel.core.domain.errors import InvalidOrderTypeError
from keel.core.domain.limit_order import LimitOrder
from keel.core.domain.market_on_close_order import MarketOnCloseOrder
from keel.core.domain.market_on_open_order import MarketOnOpenOrder
from keel.core.domain.market_order import MarketOrder
from keel.core.domain.order import Order
from keel.core.domain.stop_limit_order import StopLimitOrder
from keel.core.domain.stop_market_order import StopMarketOrder

__all__ = ['deserialize_order', 'serialize_order']

_TYPE_KEY = 'order_type'

_ORDER_REGISTRY: dict[str, type[Order]] = {
    cls.ORDER_TYPE.value: cls
    for cls in (
        MarketOrder,
        LimitOrder,
        StopMarketOrder,
        StopLimitOrder,
        MarketOnOpenOrder,
        MarketOnCloseOrder,
    )
}


def _encode_decimal(obj: Any) -> str:

    '''Encode order prices as strings; orjson calls this for types it cannot write.'''

    if isinstance(obj, Decimal):
        return str(obj)
    msg = f'Order field of type {type(obj).__name__} cannot be encoded'
    raise TypeError(msg)


def _field_value(value: Any, annotation: Any) -> Any:

    '''
    Convert one decoded JSON value to the type its order field declares.

    Args:
        value (Any): Value as returned by orjson.loads
        annotation (Any): Resolved annotation of the order field

    Returns:
        Any: Value of the declared type, None stays None
    '''

    if value is None:
        return None

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [a for a in get_args(annotation) if a is not type(None)]
        return _field_value(value, members[0]) if members else value
    if origin is list:
        (item_annotation,) = get_args(annotation)
        return [_field_value(item, item_annotation) for item in value]
    if annotation is Decimal:
        return Decimal(str(value))
    if annotation is datetime:
        return datetime.fromisoformat(str(value))
    if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
        return annotation(value)
    return value


def _required_fields(cls: type[Order]) -> set[str]:

    return {
        f.name
        for f in dataclasses.fields(cls)
        if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
    }


def serialize_order(order: Order) -> bytes:

    '''
    Serialize an order, tagged with its order type.

    Args:
        order (Order): Order of any variant

    Returns:
        bytes: orjson-encoded payload
    '''

    payload = dataclasses.asdict(order)
    payload[_TYPE_KEY] = order.order_type.value
    return orjson.dumps(payload, default=_encode_decimal)


def deserialize_order(payload: bytes | str) -> Order:

    '''
    Hydrate an order of the variant named in the payload.

    Optional fields missing from the payload keep the variant's defaults.
    Unknown keys are ignored.

    Args:
        payload (bytes | str): Output of serialize_order

    Returns:
        Order: Hydrated order

    Raises:
        InvalidOrderTypeError: The payload names no known order type.
        ValueError: The payload lacks a field the variant requires.
    '''

    raw: dict[str, Any] = orjson.loads(payload)
    type_name = raw.pop(_TYPE_KEY, None)
    cls = _ORDER_REGISTRY.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        msg = f'Unknown order type in payload: {type_name!r}'
        raise InvalidOrderTypeError(msg, order_type=type_name)

    missing = _required_fields(cls) - raw.keys()
    if missing:
        msg = f'{cls.__name__} payload missing required fields: {", ".join(sorted(missing))}'
        raise ValueError(msg)

    hints = get_type_hints(cls)
    names = {f.name for f in dataclasses.fields(cls)}
    values = {k: _field_value(v, hints[k]) for k, v in raw.items() if k in names}
    return cls(**values)
