"""Fixed-precision decimals and decimal coin amounts."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .errors import SdkError

PRECISION = 18
_MAX_DEC_BIT_LEN = 315

_DENOM = r"[a-z][a-z0-9/_.\-]{0,127}"
_DENOM_RE = re.compile(_DENOM)
_DEC_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")
_COIN_RE = re.compile(rf"([0-9]+(?:\.[0-9]+)?|\.[0-9]+)\s*({_DENOM})")


def parse_dec(text: str) -> Decimal:
    """Parse a decimal string with at most 18 fractional digits."""
    if not text:
        raise SdkError("decimal string is empty")
    if not _DEC_RE.fullmatch(text):
        raise SdkError(f"invalid decimal string: {text!r}")
    _, _, fraction = text.partition(".")
    if len(fraction) > PRECISION:
        raise SdkError(
            f"invalid precision; max: {PRECISION}, got: {len(fraction)}"
        )
    value = Decimal(text)
    if int(abs(value).scaleb(PRECISION)).bit_length() > _MAX_DEC_BIT_LEN:
        raise SdkError(f"decimal out of range: {text}")
    return value


def _check_amount(amount: Decimal) -> Decimal:
    try:
        amount = amount if isinstance(amount, Decimal) else Decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise SdkError(f"invalid coin amount: {amount!r}") from exc
    if not amount.is_finite():
        raise SdkError(f"invalid coin amount: {amount}")
    if amount < 0:
        raise SdkError(f"negative coin amount: {amount}")
    exponent = amount.normalize().as_tuple().exponent
    if isinstance(exponent, int) and -exponent > PRECISION:
        raise SdkError(f"coin amount exceeds precision of {PRECISION}: {amount}")
    return amount


@dataclass(frozen=True)
class DecCoin:
    """An amount of a single denomination."""

    denom: str
    amount: Decimal

    def __post_init__(self) -> None:
        if not _DENOM_RE.fullmatch(self.denom):
            raise SdkError(f"invalid denom: {self.denom}")
        object.__setattr__(self, "amount", _check_amount(self.amount))

    def is_positive(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return f"{self.amount:.{PRECISION}f}{self.denom}"


@dataclass(frozen=True)
class DecCoins(Sequence):
    """An ordered collection of decimal coins."""

    coins: tuple[DecCoin, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coins", tuple(self.coins))

    def __getitem__(self, index):
        return self.coins[index]

    def __len__(self) -> int:
        return len(self.coins)

    def __iter__(self) -> Iterator[DecCoin]:
        return iter(self.coins)

    def __str__(self) -> str:
        return ",".join(str(coin) for coin in self.coins)

    def is_all_positive(self) -> bool:
        """True when there is at least one coin and every amount is positive."""
        return bool(self.coins) and all(coin.is_positive() for coin in self.coins)


def parse_dec_coin(text: str) -> DecCoin:
    """Parse an expression such as ``10.24okt`` into a coin."""
    match = _COIN_RE.fullmatch(text.strip())
    if match is None:
        raise SdkError(f"invalid decimal coin expression: {text}")
    amount_text, denom = match.groups()
    try:
        amount = parse_dec(amount_text)
    except SdkError as exc:
        raise SdkError(f"failed to parse decimal coin amount {amount_text}: {exc}") from exc
    return DecCoin(denom, amount)


def _validate(coins: Iterable[DecCoin]) -> None:
    previous: DecCoin | None = None
    for coin in coins:
        if not coin.is_positive():
            raise SdkError(f"invalid decimal coins: non-positive amount of {coin.denom}")
        if previous is not None and previous.denom >= coin.denom:
            raise SdkError(f"invalid decimal coins: duplicate denom {coin.denom}")
        previous = coin


def parse_dec_coins(text: str) -> DecCoins:
    """Parse a comma separated list of coins, sorted by denomination."""
    text = text.strip()
    if not text:
        return DecCoins()
    coins = sorted((parse_dec_coin(part) for part in text.split(",")), key=lambda c: c.denom)
    _validate(coins)
    return DecCoins(tuple(coins))