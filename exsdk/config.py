"""Client configuration, broadcast modes, response records and client interfaces."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .coins import DecCoins, parse_dec_coins
from .errors import SdkError

_CHAIN_ID_RE = re.compile(r"([a-z]*)-([1-9][0-9]*)")
_CHAIN_ID_MAX_LEN = 48


class BroadcastMode(str, Enum):
    """How a transaction is broadcast to a node."""

    SYNC = "sync"
    ASYNC = "async"
    BLOCK = "block"


@dataclass(frozen=True)
class ClientConfig:
    """Base configuration of a client."""

    node_uri: str
    chain_id: str
    chain_id_int: int
    broadcast_mode: str
    gas: int
    gas_adjustment: float
    fees: DecCoins = field(default_factory=DecCoins)
    gas_prices: DecCoins = field(default_factory=DecCoins)


@dataclass(frozen=True)
class Attribute:
    key: str
    value: str


@dataclass
class StringEvent:
    type: str
    attributes: list[Attribute] = field(default_factory=list)


@dataclass
class MessageLog:
    msg_index: int = 0
    log: str = ""
    events: list[StringEvent] = field(default_factory=list)


@dataclass
class TxResponse:
    """Result of a broadcast transaction."""

    height: int = 0
    txhash: str = ""
    code: int = 0
    codespace: str = ""
    data: str = ""
    raw_log: str = ""
    logs: list[MessageLog] = field(default_factory=list)
    info: str = ""
    gas_wanted: int = 0
    gas_used: int = 0
    timestamp: str = ""


def parse_chain_id(chain_id: str) -> int:
    """Return the numeric epoch of a chain id such as ``name-66``."""
    chain_id = chain_id.strip()
    if len(chain_id) > _CHAIN_ID_MAX_LEN:
        raise SdkError(f"chain-id '{chain_id}' cannot exceed {_CHAIN_ID_MAX_LEN} chars")
    match = _CHAIN_ID_RE.fullmatch(chain_id)
    if match is None or not match.group(1):
        raise SdkError(f"{chain_id}: invalid chain-id format")
    return int(match.group(2))


def new_client_config(
    node_uri: str,
    chain_id: str,
    broadcast_mode: str,
    fees: str,
    gas: int,
    gas_adjustment: float,
    gas_prices: str,
) -> ClientConfig:
    """Build a client configuration from textual settings."""
    fee_coins = parse_dec_coins(fees) if fees else DecCoins()
    price_coins = DecCoins()
    if gas_prices:
        if gas_adjustment <= 1:
            raise SdkError(
                "failed. gasAdjustment must be greater than 1 with the auto gas calculating"
            )
        price_coins = parse_dec_coins(gas_prices)
    chain_id_int = parse_chain_id(chain_id)
    return ClientConfig(
        node_uri=node_uri,
        chain_id=chain_id,
        chain_id_int=chain_id_int,
        broadcast_mode=broadcast_mode,
        gas=gas,
        gas_adjustment=gas_adjustment,
        fees=fee_coins,
        gas_prices=price_coins,
    )


class BaseClient(ABC):
    """Behaviour expected from the client that module clients build on."""

    @property
    @abstractmethod
    def config(self) -> ClientConfig:
        """The client's configuration."""

    @abstractmethod
    def query(self, path: str, key: bytes | None = None) -> tuple[bytes, int]:
        """Run an ABCI query and return the result with its height."""

    @abstractmethod
    def query_store(self, key: bytes, store_name: str, end_path: str) -> tuple[bytes, int]:
        """Query a store directly and return the result with its height."""

    @abstractmethod
    def broadcast(self, tx_bytes: bytes, broadcast_mode: str) -> TxResponse:
        """Broadcast encoded transaction bytes."""

    @abstractmethod
    def build_and_broadcast(
        self,
        from_name: str,
        passphrase: str,
        memo: str,
        msgs: Sequence[Any],
        acc_number: int,
        seq_number: int,
    ) -> TxResponse:
        """Build, sign and broadcast a transaction holding the messages."""


class Module(ABC):
    """A named module of the SDK."""

    @abstractmethod
    def name(self) -> str:
        """The module's name."""