"""Staking records and helpers for validator addresses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from .address import val_address_from_bech32
from .errors import SdkError


@dataclass(frozen=True)
class Delegator:
    """Delegation state of an account."""

    delegator_address: bytes
    validator_addresses: list[bytes] = field(default_factory=list)
    shares: Decimal = Decimal(0)
    tokens: Decimal = Decimal(0)
    is_proxy: bool = False
    total_delegated_tokens: Decimal = Decimal(0)
    proxy_address: bytes = b""


@dataclass(frozen=True)
class UndelegationInfo:
    """Tokens being undelegated and when they become free."""

    delegator_address: bytes
    quantity: Decimal
    completion_time: datetime


@dataclass(frozen=True)
class DelegatorResponse:
    """Delegation state joined with undelegation info."""

    delegator_address: bytes
    validator_addresses: list[bytes]
    shares: Decimal
    tokens: Decimal
    unbonded_tokens: Decimal
    completion_time: datetime
    is_proxy: bool
    total_delegated_tokens: Decimal
    proxy_address: bytes


def parse_val_addresses(val_addrs: Iterable[str]) -> list[bytes]:
    """Decode bech32 validator addresses."""
    result = []
    for text in val_addrs:
        try:
            result.append(val_address_from_bech32(text))
        except SdkError as exc:
            raise SdkError(f"invalid validator address: {text}") from exc
    return result


def convert_to_delegator_response(
    delegator: Delegator, undelegation: UndelegationInfo
) -> DelegatorResponse:
    """Combine a delegator and its undelegation info into one response."""
    return DelegatorResponse(
        delegator_address=delegator.delegator_address,
        validator_addresses=list(delegator.validator_addresses),
        shares=delegator.shares,
        tokens=delegator.tokens,
        unbonded_tokens=undelegation.quantity,
        completion_time=undelegation.completion_time,
        is_proxy=delegator.is_proxy,
        total_delegated_tokens=delegator.total_delegated_tokens,
        proxy_address=delegator.proxy_address,
    )