"""Multi-send transfer units and their text form."""

from __future__ import annotations

from dataclasses import dataclass, field

from .address import acc_address_from_bech32
from .coins import DecCoins, parse_dec_coins
from .errors import SdkError


@dataclass(frozen=True)
class TransferUnit:
    """One receiver of a multi-send and the coins it gets."""

    to: bytes = b""
    coins: DecCoins = field(default_factory=DecCoins)


def parse_transfers_str(text: str) -> list[TransferUnit]:
    """Parse lines of ``<bech32 address> <coins>`` into transfer units.

    Example::

        ex1... 1okt
        ex1... 2okt,3btc
    """
    transfers = []
    for line in text.strip().split("\n"):
        parts = line.split(" ")
        if len(parts) != 2:
            raise SdkError("invalid text to parse")
        addr_text, coins_text = parts
        transfers.append(
            TransferUnit(
                to=acc_address_from_bech32(addr_text),
                coins=parse_dec_coins(coins_text),
            )
        )
    return transfers