"""Token definitions and lookups by alias or numeric code."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional

from .blockchain import BlockchainName
from .errors import UnsupportedToken, UnsupportedTokenCode

logger = logging.getLogger(__name__)

MAX_CODE = 2**32 - 1

# Quote tokens range from 1 to 1023.
QUOTE_CODE_MIN = 1
QUOTE_CODE_MAX = 1023
CODE_DAI = 100
CODE_BTC = 200

# Base tokens range from 1024 to MAX_CODE.
BASE_CODE_MIN = 1024
CODE_ETH = 1024
CODE_REN = 1025
CODE_DGX = 1026
CODE_ZRX = 1027
CODE_OMG = 1028
CODE_PAX = 1029
CODE_GUSD = 1030
CODE_TUSD = 1031
CODE_USDC = 1032
CODE_WBTC = 1033

BIPS_DENOMINATOR = 10_000
DGX_TRANSFER_FEE_BIPS = 13


@dataclass(frozen=True)
class Token:
    """A supported token: symbol, numeric code, decimals and origin chain."""

    name: str
    code: int
    decimals: int
    blockchain: BlockchainName

    def __post_init__(self) -> None:
        if not isinstance(self.code, int):
            raise TypeError("code must be an int")
        if self.code < 0 or self.code > MAX_CODE:
            raise ValueError("code must fit in an unsigned 32-bit integer")
        if not isinstance(self.decimals, int) or self.decimals < 0:
            raise ValueError("decimals must be a non-negative integer")

    @property
    def is_quote(self) -> bool:
        return QUOTE_CODE_MIN <= self.code <= QUOTE_CODE_MAX

    @property
    def is_base(self) -> bool:
        return self.code >= BASE_CODE_MIN

    def format(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.format()

    def additional_transaction_fee(self, amount: int) -> Optional[int]:
        """
        Extra fee charged by the token contract on transfer, in raw units.

        Only DGX charges one (13 bips on top of the transferred amount).
        Returns None for tokens without a transfer fee.
        """
        if self == DGX:
            return calculate_fee_from_bips(amount, DGX_TRANSFER_FEE_BIPS)
        return None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "code": self.code,
            "decimals": self.decimals,
            "blockchain": self.blockchain.value,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "Token":
        """Resolve a serialized token against the registry."""
        token = parse_token_code(payload.get("code"))
        if token.to_dict() != {
            "name": payload.get("name"),
            "code": payload.get("code"),
            "decimals": payload.get("decimals"),
            "blockchain": payload.get("blockchain"),
        }:
            raise UnsupportedToken(payload.get("name"))
        return token


def calculate_fee_from_bips(value: int, bips: int) -> int:
    """
    Fee that must be added to `value` so the recipient still gets `value`
    after the contract takes `bips` of the gross amount.
    """
    if not isinstance(value, int):
        raise TypeError("value must be an int")
    if not isinstance(bips, int):
        raise TypeError("bips must be an int")
    if bips < 0 or bips >= BIPS_DENOMINATOR:
        raise ValueError("bips must be in [0, 10000)")
    return value * bips // (BIPS_DENOMINATOR - bips)


DAI = Token("DAI", CODE_DAI, 18, BlockchainName.ERC20)
BTC = Token("BTC", CODE_BTC, 8, BlockchainName.BITCOIN)
ETH = Token("ETH", CODE_ETH, 18, BlockchainName.ETHEREUM)
REN = Token("REN", CODE_REN, 18, BlockchainName.ERC20)
DGX = Token("DGX", CODE_DGX, 9, BlockchainName.ERC20)
ZRX = Token("ZRX", CODE_ZRX, 18, BlockchainName.ERC20)
OMG = Token("OMG", CODE_OMG, 18, BlockchainName.ERC20)
PAX = Token("PAX", CODE_PAX, 18, BlockchainName.ERC20)
GUSD = Token("GUSD", CODE_GUSD, 2, BlockchainName.ERC20)
TUSD = Token("TUSD", CODE_TUSD, 18, BlockchainName.ERC20)
USDC = Token("USDC", CODE_USDC, 6, BlockchainName.ERC20)
WBTC = Token("WBTC", CODE_WBTC, 8, BlockchainName.ERC20)

SUPPORTED_TOKENS: tuple[Token, ...] = (
    DAI,
    BTC,
    ETH,
    REN,
    DGX,
    ZRX,
    OMG,
    PAX,
    GUSD,
    TUSD,
    USDC,
    WBTC,
)

# Lowercase aliases accepted by parse_token.
TOKEN_ALIASES: MappingProxyType[Token, tuple[str, ...]] = MappingProxyType(
    {
        DAI: ("dai", "maker-dai", "makerdai"),
        BTC: ("btc", "bitcoin", "xbt"),
        ETH: ("eth", "ethereum", "ether"),
        REN: ("ren", "republictoken", "republic token"),
        DGX: ("dgx", "digix-gold-token", "dgt"),
        ZRX: ("zrx", "zerox", "0x"),
        OMG: ("omg", "omisego", "omise-go"),
        PAX: ("pax", "paxosstandardtoken", "paxos-standard-token"),
        GUSD: ("gusd", "gemini-dollar", "geminidollar"),
        TUSD: ("tusd", "trueusd", "true-usd"),
        USDC: ("usdc", "usd-coin", "usdcoin"),
        WBTC: ("wbtc", "wrappedbtc", "wrappedbitcoin"),
    }
)

_TOKENS_BY_ALIAS = MappingProxyType(
    {alias: token for token, aliases in TOKEN_ALIASES.items() for alias in aliases}
)
_TOKENS_BY_CODE = MappingProxyType({token.code: token for token in SUPPORTED_TOKENS})


def parse_token(token: Any) -> Token:
    """Parse a token name or alias, ignoring case and surrounding whitespace."""
    if not isinstance(token, str):
        raise UnsupportedToken(token)
    try:
        return _TOKENS_BY_ALIAS[token.strip().lower()]
    except KeyError:
        logger.debug("No token mapping for alias=%s", token)
        raise UnsupportedToken(token) from None


def parse_token_code(code: Any) -> Token:
    """Look up a registered token by its numeric code."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise UnsupportedTokenCode(code)
    try:
        return _TOKENS_BY_CODE[code]
    except KeyError:
        logger.debug("No token mapping for code=%s", code)
        raise UnsupportedTokenCode(code) from None
