# exsdk

Client-side building blocks for working with an ExChain-style node. The
package has no dependencies outside the standard library.

## Modules

- `exsdk.address`: bech32 encoding and decoding (`encode_bech32`,
  `decode_bech32`), account and validator address parsing and formatting
  (`acc_address_from_bech32`, `acc_address_to_bech32`,
  `val_address_from_bech32`, `val_address_to_bech32`, `acc_address_from_hex`),
  prefix conversion (`acc_addr_prefix_convert`, `val_addr_prefix_convert`),
  and hex-style helpers (`is_valid_hex_address`, `to_cosmos_address`,
  `to_hex_address`, `format_key_to_hash`, `eth_address`, `eth_addresses`).
  The prefixes in use live in a process-wide `AddressConfig` returned by
  `get_config()`; it defaults to `ex` / `exvaloper`. The prefix conversion
  functions leave that configuration set to the destination prefix.
- `exsdk.coins`: decimals with at most 18 fractional digits (`parse_dec`) and
  decimal coins (`DecCoin`, `DecCoins`, `parse_dec_coin`, `parse_dec_coins`).
  `parse_dec_coins` sorts coins by denomination and rejects duplicates and
  non-positive amounts.
- `exsdk.config`: `ClientConfig` and `new_client_config`, `parse_chain_id`,
  `BroadcastMode`, the response records `TxResponse`, `MessageLog`,
  `StringEvent` and `Attribute`, and the abstract `BaseClient` and `Module`
  classes.
- `exsdk.params`: quick validity checks for transaction and query inputs
  (`check_key_params`, `check_send_params`, `check_token_issue_params`,
  `check_new_order_params`, `check_query_orders_params` and others), and the
  `KeyInfo` record of a named key and its address. Paging checks return the
  page size to use: 50 when none is given, at most 200.
- `exsdk.transfer`: `TransferUnit` and `parse_transfers_str` for multi-send
  lists of `<address> <coins>` lines.
- `exsdk.orders`: `OrderItem`, `build_order_items`, and
  `get_order_ids_from_response`, which collects order ids from the `orders`
  attributes of `message` events.
- `exsdk.response`: `get_data_from_base_response` and
  `unmarshal_list_response` decode the payload of a backend JSON response into
  a dataclass or any callable.
- `exsdk.staking`: `parse_val_addresses`, the `Delegator`,
  `UndelegationInfo` and `DelegatorResponse` records, and
  `convert_to_delegator_response`.
- `exsdk.token`: `TokenClient` for querying token info and for sending,
  multi-sending, issuing, minting, burning and editing tokens, with the message
  records it hands to the base client (`MsgTokenSend`, `MsgMultiSend`,
  `MsgTokenIssue`, `MsgTokenMint`, `MsgTokenBurn`, `MsgTokenModify`) and the
  `TokenResp` query result.

Errors are raised as `exsdk.errors.SdkError`, a subclass of `ValueError`.

## What it does not do

The package does not connect to a node, encode or sign transactions, or keep
keys. `TokenClient` checks its inputs, builds the message and passes it to a
`BaseClient` that you supply; that object does the querying, signing and
broadcasting. There is no command-line program.

## Install

```
pip install .
```

## Examples

Converting an address between chain prefixes:

```python
from exsdk.address import acc_addr_prefix_convert

print(acc_addr_prefix_convert("ex", "ex1qj5c07sm6jetjz8f509qtrxgh4psxkv3ddyq7u", "okexchain"))
```

Parsing a multi-send list:

```python
from exsdk.transfer import parse_transfers_str

units = parse_transfers_str(
    "ex1qj5c07sm6jetjz8f509qtrxgh4psxkv3ddyq7u 1.024okt\n"
    "ex1qwuag8gx408m9ej038vzx50ntt0x4yrq38yf06 2.048btc,2.048okt"
)
```

Building a client configuration:

```python
from exsdk.config import BroadcastMode, new_client_config

config = new_client_config(
    "http://localhost:26657", "exchain-65", BroadcastMode.BLOCK,
    "", 200000, 1.1, "0.00000001okt",
)
```

Sending tokens with a client of your own that implements `BaseClient`:

```python
from exsdk.params import KeyInfo
from exsdk.token import TokenClient

password = "password"
tokens = TokenClient(my_base_client)
response = tokens.send(key_info, password, receiver, "10.24okt", "memo", 1, 2)
```

## Tests

```
pip install .[test]
pytest
```