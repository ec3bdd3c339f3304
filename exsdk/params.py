"""Quick validity checks for the inputs of client operations."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .address import get_config
from .errors import SdkError
from .transfer import TransferUnit

TOKEN_DESC_LEN_LIMIT = 256
COUNT_DEFAULT = 10
PER_PAGE_DEFAULT = 50
PER_PAGE_MAX = 200
BECH32_ADDR_LEN = 41
ETH_ADDR_WITH_PREFIX_LEN = 42
ETH_ADDR_WITHOUT_PREFIX_LEN = 40

_WHOLE_NAME_RE = re.compile(r"[a-zA-Z0-9\t\n\v\f\r ]{1,30}")
_SIDES = ("BUY", "SELL")


@dataclass(frozen=True)
class KeyInfo:
    """A named key with the account address it controls."""

    name: str
    address: bytes
    pub_key: bytes = b""


def _byte_len(text: str) -> int:
    return len(text.encode())


def _check_no_duplicates(values: Iterable[str], message: str) -> None:
    seen: set[str] = set()
    for value in values:
        if value in seen:
            raise SdkError(message.format(value))
        seen.add(value)


def check_key_params(from_info: KeyInfo | None, passwd: str) -> None:
    """Basic check of the key and its passphrase."""
    if from_info is None:
        raise SdkError("failed. input invalid keys info")
    if not passwd:
        raise SdkError("failed. no password input")


def check_pool_name_params(from_info: KeyInfo | None, passwd: str, pool_name: str) -> None:
    """Check the inputs naming a farm pool."""
    check_key_params(from_info, passwd)
    if not pool_name:
        raise SdkError("failed. empty pool name")


def check_create_pool_params(
    from_info: KeyInfo | None,
    passwd: str,
    pool_name: str,
    min_lock_amount: str,
    yield_token: str,
) -> None:
    """Check the inputs for creating a farm pool."""
    check_pool_name_params(from_info, passwd, pool_name)
    if not min_lock_amount or not yield_token:
        raise SdkError("failed. empty min lock token or empty yield token")


def check_proposal_operation(from_info: KeyInfo | None, passwd: str, proposal_id: int) -> None:
    """Check the inputs of an operation on a proposal."""
    check_key_params(from_info, passwd)
    if proposal_id <= 0:
        raise SdkError("failed. proposal ID must be positive")


def _is_whole_name_valid(whole_name: str) -> bool:
    return _WHOLE_NAME_RE.fullmatch(whole_name) is not None


def check_token_edit_params(
    from_info: KeyInfo | None,
    passwd: str,
    symbol: str,
    description: str,
    whole_name: str,
    is_desc_edit: bool,
    is_whole_name_edit: bool,
) -> None:
    """Check the inputs for editing token info."""
    check_key_params(from_info, passwd)
    if not symbol:
        raise SdkError("failed. empty symbol")
    if is_whole_name_edit and not _is_whole_name_valid(whole_name):
        raise SdkError(f"failed. invalid whole name of token: {whole_name}")
    if is_desc_edit and _byte_len(description) > TOKEN_DESC_LEN_LIMIT:
        raise SdkError("failed. invalid token description")


def check_product_params(from_info: KeyInfo | None, passwd: str, product: str) -> None:
    """Check the inputs naming a product."""
    check_key_params(from_info, passwd)
    if not product:
        raise SdkError("failed. empty product")


def check_dex_assets_params(
    from_info: KeyInfo | None, passwd: str, base_asset: str, quote_asset: str
) -> None:
    """Check the inputs naming a pair of dex assets."""
    check_key_params(from_info, passwd)
    if not base_asset:
        raise SdkError("failed. empty base asset")
    if not quote_asset:
        raise SdkError("failed. empty quote asset")


def check_query_token_info_params(owner_addr: str, symbol: str) -> None:
    """Check that a token query has an owner or a symbol."""
    if not owner_addr and not symbol:
        raise SdkError("failed. empty input")


def check_token_issue_params(
    from_info: KeyInfo | None,
    passwd: str,
    org_symbol: str,
    whole_name: str,
    token_desc: str,
) -> None:
    """Check the inputs for issuing a token."""
    check_key_params(from_info, passwd)
    if not org_symbol:
        raise SdkError("failed. empty original symbol")
    desc_len = _byte_len(token_desc)
    if desc_len == 0 or desc_len > TOKEN_DESC_LEN_LIMIT:
        raise SdkError("failed. invalid token description")
    if not whole_name:
        raise SdkError("failed. empty whole name")


def check_transfer_units_params(
    from_info: KeyInfo | None, passwd: str, transfers: Sequence[TransferUnit]
) -> None:
    """Check the inputs of a multi-send."""
    check_key_params(from_info, passwd)
    if not transfers:
        raise SdkError("failed. no receiver input")
    if not all(transfer.coins.is_all_positive() for transfer in transfers):
        raise SdkError("failed. only positive amount of coins is available")


def check_add_shares_params(from_info: KeyInfo | None, passwd: str, val_addrs: Sequence[str]) -> None:
    """Check the inputs of voting for several validators."""
    check_key_params(from_info, passwd)
    if not val_addrs:
        raise SdkError("failed. no validator address input")
    _check_no_duplicates(val_addrs, "failed. validator address: {} is duplicated")


def check_send_params(from_info: KeyInfo | None, passwd: str, to_addr: str) -> None:
    """Check the inputs of a transfer."""
    check_key_params(from_info, passwd)
    if _byte_len(to_addr) not in (
        BECH32_ADDR_LEN,
        ETH_ADDR_WITHOUT_PREFIX_LEN,
        ETH_ADDR_WITH_PREFIX_LEN,
    ):
        raise SdkError("failed. invalid receiver address with incorrect length")


def check_new_order_params(
    from_info: KeyInfo | None,
    passwd: str,
    products: Sequence[str],
    sides: Sequence[str],
    prices: Sequence[str],
    quantities: Sequence[str],
) -> None:
    """Check the inputs for placing orders."""
    check_key_params(from_info, passwd)
    count = len(products)
    if count == 0:
        raise SdkError("failed. no product input")
    if len(sides) != count:
        raise SdkError("failed. invalid param side counts")
    if len(prices) != count:
        raise SdkError("failed. invalid param price counts")
    if len(quantities) != count:
        raise SdkError("failed. invalid param quantity counts")
    if any(side not in _SIDES for side in sides):
        raise SdkError('failed. side must only be "BUY" or "SELL"')


def check_cancel_order_params(from_info: KeyInfo | None, passwd: str, order_ids: Iterable[str]) -> None:
    """Check the inputs for cancelling orders."""
    check_key_params(from_info, passwd)
    _check_no_duplicates(order_ids, "failed. duplicated orderID: {}")


def check_query_order_detail_params(order_id: str) -> None:
    """Check the input of an order detail query."""
    if not order_id:
        raise SdkError("failed. empty order ID")


def check_query_tickers_params(*args: int) -> int:
    """Return the ticker count to query, defaulting when none is given."""
    if len(args) > 1:
        raise SdkError("failed. invalid params input for tickers query")
    if not args:
        return COUNT_DEFAULT
    count = args[0]
    if count < 0:
        raise SdkError('failed. "count" is negative')
    return count


def _check_params_paging(start: int, end: int, page: int, per_page: int) -> int:
    if min(start, end, page, per_page) < 0:
        raise SdkError('failed. "start","end","page","perPage" must be positive')
    if start > end:
        raise SdkError('failed. "start" isn\'t allowed to be larger than "end"')
    if per_page == 0:
        return PER_PAGE_DEFAULT
    return min(per_page, PER_PAGE_MAX)


def check_query_recent_tx_record_params(
    product: str, start: int, end: int, page: int, per_page: int
) -> int:
    """Check a recent tx record query and return the page size to use."""
    if not product:
        raise SdkError("failed. empty product")
    return _check_params_paging(start, end, page, per_page)


def check_query_orders_params(
    addr: str, product: str, side: str, start: int, end: int, page: int, per_page: int
) -> int:
    """Check an orders query and return the page size to use."""
    is_valid_acc_addr(addr)
    if not product:
        raise SdkError("failed. empty product")
    if side not in _SIDES:
        raise SdkError('failed. "side" must only be "BUY" or "SELL"')
    return _check_params_paging(start, end, page, per_page)


def check_query_transactions_params(
    addr: str, type_code: int, start: int, end: int, page: int, per_page: int
) -> int:
    """Check a transactions query and return the page size to use."""
    is_valid_acc_addr(addr)
    if type_code < 0:
        raise SdkError("failed. type code isn't allowed to be negative")
    return _check_params_paging(start, end, page, per_page)


def check_query_height_params(height: int) -> None:
    """Check a block height used in a query."""
    if height < 0:
        raise SdkError("failed. negative height is not available")


def is_valid_acc_addr(addr: str) -> None:
    """Check the length and prefix of an account address string."""
    if _byte_len(addr) != BECH32_ADDR_LEN or not addr.startswith(get_config().account_prefix):
        raise SdkError(f"failed. invalid account address: {addr}")


def check_query_tx_result_params(event_strs: Sequence[str], page: int, per_page: int) -> None:
    """Check a tx search by event strings."""
    if not event_strs:
        raise SdkError("failed. empty event to search")
    if page <= 0:
        raise SdkError("failed. page must be greater than 0")
    if per_page <= 0:
        raise SdkError("failed. limit number in a page must be greater than 0")