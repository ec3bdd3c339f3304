"""Client-side helpers for an ExChain-style blockchain: addresses, coins, input checks and token messages."""

__version__ = "0.1.0"