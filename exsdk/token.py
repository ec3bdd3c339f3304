"""Client for the token module: token queries and token transactions."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from .address import acc_address_to_bech32, to_cosmos_address
from .coins import DecCoin, DecCoins, parse_dec_coin, parse_dec_coins
from .config import BaseClient, Module, TxResponse
from .errors import SdkError, err_unmarshal_json
from .params import (
    KeyInfo,
    check_key_params,
    check_query_token_info_params,
    check_send_params,
    check_token_edit_params,
    check_token_issue_params,
    check_transfer_units_params,
)
from .transfer import TransferUnit

MODULE_NAME = "token"
QUERIER_ROUTE = MODULE_NAME


def _to_decimal(value: Any, name: str) -> Decimal:
    if value is None or value == "":
        return Decimal(0)
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise SdkError(f"field {name}: invalid decimal {value!r}") from exc


@dataclass(frozen=True)
class TokenResp:
    """Token information as returned by a node."""

    description: str = ""
    symbol: str = ""
    original_symbol: str = ""
    whole_name: str = ""
    original_total_supply: Decimal = Decimal(0)
    type: int = 0
    owner: str = ""
    mintable: bool = False
    total_supply: Decimal = Decimal(0)

    @classmethod
    def from_dict(cls, data: Any) -> TokenResp:
        """Build token info from a decoded JSON object."""
        if not isinstance(data, dict):
            raise SdkError(f"cannot decode {type(data).__name__} into TokenResp")
        try:
            return cls(
                description=str(data.get("description") or ""),
                symbol=str(data.get("symbol") or ""),
                original_symbol=str(data.get("original_symbol") or ""),
                whole_name=str(data.get("whole_name") or ""),
                original_total_supply=_to_decimal(
                    data.get("original_total_supply"), "original_total_supply"
                ),
                type=int(data.get("type") or 0),
                owner=str(data.get("owner") or ""),
                mintable=bool(data.get("mintable", False)),
                total_supply=_to_decimal(data.get("total_supply"), "total_supply"),
            )
        except (TypeError, ValueError) as exc:
            raise SdkError(f"cannot decode TokenResp: {exc}") from exc


@dataclass(frozen=True)
class MsgTokenSend:
    """Transfer of coins from one account to another."""

    from_address: bytes
    to_address: bytes
    amount: DecCoins


@dataclass(frozen=True)
class MsgMultiSend:
    """Transfer of coins from one account to several receivers."""

    from_address: bytes
    transfers: tuple[TransferUnit, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MsgTokenIssue:
    """Issue of a new token."""

    description: str
    symbol: str
    original_symbol: str
    whole_name: str
    total_supply: str
    owner: bytes
    mintable: bool


@dataclass(frozen=True)
class MsgTokenMint:
    """Increase of a token's total supply by its owner."""

    amount: DecCoin
    owner: bytes


@dataclass(frozen=True)
class MsgTokenBurn:
    """Decrease of a token's total supply from the owner's account."""

    amount: DecCoin
    owner: bytes


@dataclass(frozen=True)
class MsgTokenModify:
    """Edit of a token's description or whole name by its owner."""

    symbol: str
    description: str
    whole_name: str
    is_description_modified: bool
    is_whole_name_modified: bool
    owner: bytes


def _decode_json(raw: bytes | str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise err_unmarshal_json(str(exc)) from exc


class TokenClient(Module):
    """Token operations built on a base client."""

    def __init__(self, base_client: BaseClient) -> None:
        self.base_client = base_client

    def name(self) -> str:
        return MODULE_NAME

    def query_token_info(self, owner_addr: str, symbol: str) -> list[TokenResp]:
        """Return the token with ``symbol``, or else every token owned by ``owner_addr``."""
        check_query_token_info_params(owner_addr, symbol)

        if symbol:
            path = f"custom/{QUERIER_ROUTE}/info/{symbol}"
            try:
                raw, _ = self.base_client.query(path, None)
            except Exception as exc:
                raise SdkError(f"failed. token {symbol} doesn't exist") from exc
            return [TokenResp.from_dict(_decode_json(raw))]

        path = f"custom/{QUERIER_ROUTE}/tokens/{owner_addr}"
        try:
            raw, _ = self.base_client.query(path, None)
        except Exception as exc:
            raise SdkError(f"failed. {owner_addr} doesn't own any tokens: {exc}") from exc
        decoded = _decode_json(raw)
        if decoded is None:
            return []
        if not isinstance(decoded, list):
            raise SdkError("cannot decode token list: expected a JSON array")
        return [TokenResp.from_dict(item) for item in decoded]

    def _broadcast(
        self, from_info: KeyInfo, passwd: str, memo: str, msg: Any, acc_num: int, seq_num: int
    ) -> TxResponse:
        return self.base_client.build_and_broadcast(
            from_info.name, passwd, memo, [msg], acc_num, seq_num
        )

    def send(
        self,
        from_info: KeyInfo,
        passwd: str,
        to_addr: str,
        coins: str,
        memo: str,
        acc_num: int,
        seq_num: int,
    ) -> TxResponse:
        """Transfer coins to a bech32 or hex receiver address."""
        check_send_params(from_info, passwd, to_addr)
        try:
            to_address = to_cosmos_address(to_addr)
        except SdkError as exc:
            raise SdkError(f"failed. parse Address [{to_addr}] error: {exc}") from exc
        try:
            amount = parse_dec_coins(coins)
        except SdkError as exc:
            raise SdkError(f"failed. parse DecCoins [{coins}] error: {exc}") from exc
        msg = MsgTokenSend(from_info.address, to_address, amount)
        return self._broadcast(from_info, passwd, memo, msg, acc_num, seq_num)

    def multi_send(
        self,
        from_info: KeyInfo,
        passwd: str,
        transfers: Sequence[TransferUnit],
        memo: str,
        acc_num: int,
        seq_num: int,
    ) -> TxResponse:
        """Transfer coins to several receivers in one transaction."""
        check_transfer_units_params(from_info, passwd, transfers)
        msg = MsgMultiSend(from_info.address, tuple(transfers))
        return self._broadcast(from_info, passwd, memo, msg, acc_num, seq_num)

    def issue(
        self,
        from_info: KeyInfo,
        passwd: str,
        org_symbol: str,
        whole_name: str,
        total_supply: str,
        token_desc: str,
        memo: str,
        mintable: bool,
        acc_num: int,
        seq_num: int,
    ) -> TxResponse:
        """Issue a new token owned by the sender."""
        check_token_issue_params(from_info, passwd, org_symbol, whole_name, token_desc)
        msg = MsgTokenIssue(
            description=token_desc,
            symbol="",
            original_symbol=org_symbol,
            whole_name=whole_name,
            total_supply=total_supply,
            owner=from_info.address,
            mintable=mintable,
        )
        return self._broadcast(from_info, passwd, memo, msg, acc_num, seq_num)

    def mint(
        self, from_info: KeyInfo, passwd: str, coin: str, memo: str, acc_num: int, seq_num: int
    ) -> TxResponse:
        """Increase the total supply of a token owned by the sender."""
        check_key_params(from_info, passwd)
        try:
            amount = parse_dec_coin(coin)
        except SdkError as exc:
            raise SdkError(f"failed : parse Coins [{coin}] error: {exc}") from exc
        msg = MsgTokenMint(amount, from_info.address)
        return self._broadcast(from_info, passwd, memo, msg, acc_num, seq_num)

    def burn(
        self, from_info: KeyInfo, passwd: str, coin: str, memo: str, acc_num: int, seq_num: int
    ) -> TxResponse:
        """Burn an amount of a token from the sender's account."""
        check_key_params(from_info, passwd)
        try:
            amount = parse_dec_coin(coin)
        except SdkError as exc:
            raise SdkError(f"failed : parse Coins [{coin}] error: {exc}") from exc
        msg = MsgTokenBurn(amount, from_info.address)
        return self._broadcast(from_info, passwd, memo, msg, acc_num, seq_num)

    def edit(
        self,
        from_info: KeyInfo,
        passwd: str,
        symbol: str,
        description: str,
        whole_name: str,
        memo: str,
        is_desc_edit: bool,
        is_whole_name_edit: bool,
        acc_num: int,
        seq_num: int,
    ) -> TxResponse:
        """Edit the description or whole name of a token owned by the sender."""
        check_token_edit_params(
            from_info, passwd, symbol, description, whole_name, is_desc_edit, is_whole_name_edit
        )
        msg = MsgTokenModify(
            symbol=symbol,
            description=description,
            whole_name=whole_name,
            is_description_modified=is_desc_edit,
            is_whole_name_modified=is_whole_name_edit,
            owner=from_info.address,
        )
        return self._broadcast(from_info, passwd, memo, msg, acc_num, seq_num)

    def owner_of(self, from_info: KeyInfo) -> str:
        """Bech32 form of the key's account address."""
        return acc_address_to_bech32(from_info.address)