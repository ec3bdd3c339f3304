"""Order items and order ids taken from transaction responses."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from .coins import parse_dec
from .config import TxResponse
from .errors import SdkError, err_unmarshal_json

logger = logging.getLogger(__name__)

_ORDER_ID_KEY = "orderid"


@dataclass(frozen=True)
class OrderItem:
    """One order to place: product, side, price and quantity."""

    product: str
    side: str
    price: Decimal
    quantity: Decimal


def build_order_items(
    products: Sequence[str],
    sides: Sequence[str],
    prices: Sequence[str],
    quantities: Sequence[str],
) -> list[OrderItem]:
    """Build order items from parallel sequences of order fields."""
    count = len(products)
    if not len(sides) == len(prices) == len(quantities) == count:
        raise SdkError("failed. order params must have the same counts")
    return [
        OrderItem(
            product=product,
            side=side,
            price=parse_dec(price),
            quantity=parse_dec(quantity),
        )
        for product, side, price, quantity in zip(products, sides, prices, quantities)
    ]


def _order_ids_in(value: str) -> list[str]:
    results = json.loads(value)
    if results is None:
        return []
    if not isinstance(results, list) or not all(isinstance(r, dict) for r in results):
        raise ValueError("order results must be a JSON array of objects")
    return [result.get(_ORDER_ID_KEY, "") for result in results]


def get_order_ids_from_response(tx_response: TxResponse) -> list[str]:
    """Collect the order ids reported in the message events of a transaction."""
    if len(tx_response.logs) != 1:
        raise SdkError("failed. only ONE msg could be in an order StdTx")

    order_ids: list[str] = []
    for event in tx_response.logs[0].events:
        if event.type != "message":
            continue
        for attribute in event.attributes:
            if attribute.key != "orders":
                continue
            try:
                order_ids.extend(_order_ids_in(attribute.value))
            except ValueError as exc:
                logger.warning("%s", err_unmarshal_json(str(exc)))
    return order_ids