'''
Tests for keel.core.domain order variants and enums.
'''

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from keel.core.domain import (
    LimitOrder,
    MarketOnCloseOrder,
    MarketOnOpenOrder,
    MarketOrder,
    Order,
    OrderDirection,
    OrderDuration,
    OrderStatus,
    OrderType,
    SecurityType,
    StopLimitOrder,
    StopMarketOrder,
)

_TS = datetime(2026, 1, 1, tzinfo=timezone.utc)
_SYMBOL = 'SPY'


def _market(quantity: int = 10, price: Decimal = Decimal('0')) -> MarketOrder:
    return MarketOrder(symbol=_SYMBOL, quantity=quantity, time=_TS, price=price)


def test_order_type_members() -> None:
    expected = {
        OrderType.MARKET,
        OrderType.LIMIT,
        OrderType.STOP_MARKET,
        OrderType.STOP_LIMIT,
        OrderType.MARKET_ON_OPEN,
        OrderType.MARKET_ON_CLOSE,
    }
    assert set(OrderType) == expected


def test_order_status_members() -> None:
    expected = {
        OrderStatus.NONE,
        OrderStatus.NEW,
        OrderStatus.SUBMITTED,
        OrderStatus.PARTIALLY_FILLED,
        OrderStatus.FILLED,
        OrderStatus.CANCELED,
        OrderStatus.INVALID,
    }
    assert set(OrderStatus) == expected


def test_enum_values_are_strings() -> None:
    for enum_cls in (OrderType, OrderStatus, OrderDirection, OrderDuration, SecurityType):
        for member in enum_cls:
            assert isinstance(member.value, str)


def test_order_is_abstract() -> None:
    with pytest.raises(TypeError):
        Order()  # type: ignore[abstract]


def test_blank_order_defaults() -> None:
    order = MarketOrder()
    assert order.symbol == ''
    assert order.quantity == 0
    assert order.time == datetime.min
    assert order.tag == ''
    assert order.id == 0
    assert order.contingent_id == 0
    assert order.broker_ids == []
    assert order.price == Decimal('0')
    assert order.status == OrderStatus.NONE
    assert order.duration == OrderDuration.GOOD_TIL_CANCELED
    assert order.security_type == SecurityType.BASE


def test_fielded_order_defaults_security_type_to_base() -> None:
    order = LimitOrder(symbol=_SYMBOL, quantity=5, limit_price=Decimal('10'), time=_TS)
    assert order.security_type == SecurityType.BASE
    assert order.status == OrderStatus.NONE


def test_broker_ids_not_shared_between_orders() -> None:
    first = _market()
    second = _market()
    first.add_broker_id(101)
    assert second.broker_ids == []


def test_add_broker_id_appends_in_order() -> None:
    order = _market()
    order.add_broker_id(7)
    order.add_broker_id(3)
    assert order.broker_ids == [7, 3]


@pytest.mark.parametrize(
    ('order', 'expected'),
    [
        (MarketOrder(), OrderType.MARKET),
        (LimitOrder(), OrderType.LIMIT),
        (StopMarketOrder(), OrderType.STOP_MARKET),
        (StopLimitOrder(), OrderType.STOP_LIMIT),
        (MarketOnOpenOrder(security_type=SecurityType.EQUITY), OrderType.MARKET_ON_OPEN),
        (MarketOnCloseOrder(security_type=SecurityType.EQUITY), OrderType.MARKET_ON_CLOSE),
    ],
)
def test_variant_order_type(order: Order, expected: OrderType) -> None:
    assert order.order_type is expected


def test_order_type_is_read_only() -> None:
    order = _market()
    with pytest.raises(AttributeError):
        order.order_type = OrderType.LIMIT  # type: ignore[misc]
    assert order.order_type is OrderType.MARKET


def test_market_on_open_requires_security_type() -> None:
    with pytest.raises(TypeError):
        MarketOnOpenOrder(symbol=_SYMBOL, quantity=1, time=_TS)  # type: ignore[call-arg]


def test_market_on_close_requires_security_type() -> None:
    with pytest.raises(TypeError):
        MarketOnCloseOrder(symbol=_SYMBOL, quantity=1, time=_TS)  # type: ignore[call-arg]


@pytest.mark.parametrize('variant', [MarketOnOpenOrder, MarketOnCloseOrder])
def test_blank_auction_order_requires_security_type(variant: type[Order]) -> None:
    with pytest.raises(TypeError, match='security_type'):
        variant()


def test_auction_order_keeps_given_security_type() -> None:
    order = MarketOnOpenOrder(symbol=_SYMBOL, quantity=1, security_type=SecurityType.OPTION)
    assert order.security_type == SecurityType.OPTION


@pytest.mark.parametrize(
    ('quantity', 'expected'),
    [
        (5, OrderDirection.BUY),
        (1, OrderDirection.BUY),
        (-3, OrderDirection.SELL),
        (-1, OrderDirection.SELL),
        (0, OrderDirection.HOLD),
    ],
)
def test_direction_follows_quantity_sign(quantity: int, expected: OrderDirection) -> None:
    assert _market(quantity=quantity).direction is expected


@pytest.mark.parametrize('quantity', [-250, -1, 0, 1, 250])
def test_absolute_quantity(quantity: int) -> None:
    assert _market(quantity=quantity).absolute_quantity == abs(quantity)


def test_market_order_value_uses_price() -> None:
    assert _market(quantity=10, price=Decimal('2.5')).value == Decimal('25')


def test_market_order_value_signed() -> None:
    assert _market(quantity=-4, price=Decimal('3')).value == Decimal('-12')


def test_limit_order_value_uses_limit_price() -> None:
    order = LimitOrder(symbol=_SYMBOL, quantity=3, limit_price=Decimal('101.5'), price=Decimal('1'))
    assert order.value == Decimal('304.5')


def test_stop_market_order_value_uses_stop_price() -> None:
    order = StopMarketOrder(symbol=_SYMBOL, quantity=-2, stop_price=Decimal('95'))
    assert order.value == Decimal('-190')


def test_stop_limit_order_value_uses_limit_price() -> None:
    order = StopLimitOrder(
        symbol=_SYMBOL,
        quantity=2,
        stop_price=Decimal('99'),
        limit_price=Decimal('100'),
    )
    assert order.value == Decimal('200')


def test_market_on_open_and_close_value_use_price() -> None:
    moo = MarketOnOpenOrder(security_type=SecurityType.EQUITY, quantity=4, price=Decimal('5'))
    moc = MarketOnCloseOrder(security_type=SecurityType.EQUITY, quantity=4, price=Decimal('5'))
    assert moo.value == Decimal('20')
    assert moc.value == Decimal('20')


def test_value_is_decimal() -> None:
    assert isinstance(_market(price=Decimal('1.25')).value, Decimal)


def test_str_single_unit() -> None:
    assert str(_market(quantity=1)) == 'Market order for 1 unit of SPY'


def test_str_multiple_units() -> None:
    order = LimitOrder(symbol=_SYMBOL, quantity=10, limit_price=Decimal('1'))
    assert str(order) == 'Limit order for 10 units of SPY'


def test_str_zero_quantity_is_plural() -> None:
    assert str(_market(quantity=0)) == 'Market order for 0 units of SPY'


def test_str_negative_one_is_plural() -> None:
    assert str(_market(quantity=-1)) == 'Market order for -1 units of SPY'


def test_str_uses_order_type_display_name() -> None:
    order = MarketOnCloseOrder(symbol='IBM', security_type=SecurityType.EQUITY, quantity=2)
    assert str(order) == 'MarketOnClose order for 2 units of IBM'


def test_status_mutation() -> None:
    order = _market()
    order.status = OrderStatus.SUBMITTED
    assert order.status == OrderStatus.SUBMITTED
