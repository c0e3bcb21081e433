"""
Token pairs packed into a single 64-bit integer.

The token with the lower code sits in bits 32-63 (the base token) and the
other in bits 0-31 (the quote token), so the packed value does not depend on
argument order. Canonical strings are written base first, e.g. "DAI-BTC".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .errors import InvalidPair, UnsupportedTokenPair
from .token import BTC, DAI, ETH, MAX_CODE, REN, TUSD, Token, parse_token_code

logger = logging.getLogger(__name__)

CODE_BITS = 32
CODE_MASK = 0xFFFFFFFF
MAX_PAIR = 2**64 - 1


@dataclass(frozen=True, order=True)
class Pair:
    """Numerical representation of a token pairing."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Pair value must be an int")
        if self.value < 0 or self.value > MAX_PAIR:
            raise ValueError("Pair value must fit in an unsigned 64-bit integer")

    @classmethod
    def from_codes(cls, high: int, low: int) -> "Pair":
        for code in (high, low):
            if not isinstance(code, int) or code < 0 or code > MAX_CODE:
                raise ValueError(f"token code out of range: {code}")
        return cls((high << CODE_BITS) | low)

    @property
    def base_code(self) -> int:
        return self.value >> CODE_BITS

    @property
    def quote_code(self) -> int:
        return self.value & CODE_MASK

    def base_token(self) -> Token:
        """Token in the high 32 bits; raises UnsupportedTokenCode if unknown."""
        return parse_token_code(self.base_code)

    def quote_token(self) -> Token:
        """Token in the low 32 bits; raises UnsupportedTokenCode if unknown."""
        return parse_token_code(self.quote_code)

    def tokens(self) -> tuple[Token, Token]:
        return self.base_token(), self.quote_token()

    @property
    def is_supported(self) -> bool:
        return self in PAIR_NAMES

    def format(self) -> str:
        """Canonical "BASE-QUOTE" string; raises InvalidPair for unsupported pairs."""
        try:
            return PAIR_NAMES[self]
        except KeyError:
            raise InvalidPair(self) from None

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        name = PAIR_NAMES.get(self)
        if name is None:
            return f"Pair(0x{self.value:016x})"
        return name


def make_pair(send: Token, receive: Token) -> Pair:
    """Pack two tokens into a Pair; argument order does not matter."""
    if send.code < receive.code:
        return Pair.from_codes(send.code, receive.code)
    return Pair.from_codes(receive.code, send.code)


PAIR_DAI_BTC = make_pair(DAI, BTC)
PAIR_DAI_ETH = make_pair(DAI, ETH)
PAIR_DAI_REN = make_pair(DAI, REN)
PAIR_DAI_TUSD = make_pair(DAI, TUSD)

PAIR_BTC_ETH = make_pair(BTC, ETH)
PAIR_BTC_REN = make_pair(BTC, REN)
PAIR_BTC_TUSD = make_pair(BTC, TUSD)

# Supported pairs and their canonical names. New pairs are added here only.
PAIR_NAMES: MappingProxyType[Pair, str] = MappingProxyType(
    {
        PAIR_DAI_BTC: "DAI-BTC",
        PAIR_DAI_ETH: "DAI-ETH",
        PAIR_DAI_REN: "DAI-REN",
        PAIR_DAI_TUSD: "DAI-TUSD",
        PAIR_BTC_ETH: "BTC-ETH",
        PAIR_BTC_REN: "BTC-REN",
        PAIR_BTC_TUSD: "BTC-TUSD",
    }
)

PAIRS: tuple[Pair, ...] = tuple(PAIR_NAMES)

_PAIRS_BY_NAME = MappingProxyType({name: pair for pair, name in PAIR_NAMES.items()})


def parse_pair(pair: Any) -> Pair:
    """Parse a canonical pair string, ignoring case and surrounding whitespace."""
    if not isinstance(pair, str):
        raise InvalidPair(pair)
    try:
        return _PAIRS_BY_NAME[pair.strip().upper()]
    except KeyError:
        logger.debug("No pair mapping for name=%s", pair)
        raise InvalidPair(pair) from None


def supported_pair(send: Token, receive: Token) -> Pair:
    """Like make_pair, but only for pairs in PAIRS."""
    pair = make_pair(send, receive)
    if not pair.is_supported:
        base, quote = sorted((send, receive), key=lambda token: token.code)
        raise UnsupportedTokenPair(base, quote)
    return pair
