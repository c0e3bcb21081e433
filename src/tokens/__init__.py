from .amount import TokenAmount
from .blockchain import BlockchainName, parse_blockchain
from .errors import (
    InvalidPair,
    TokenError,
    UnsupportedBlockchain,
    UnsupportedToken,
    UnsupportedTokenCode,
    UnsupportedTokenPair,
)
from .pair import (
    PAIR_BTC_ETH,
    PAIR_BTC_REN,
    PAIR_BTC_TUSD,
    PAIR_DAI_BTC,
    PAIR_DAI_ETH,
    PAIR_DAI_REN,
    PAIR_DAI_TUSD,
    PAIRS,
    Pair,
    make_pair,
    parse_pair,
    supported_pair,
)
from .registry import check_registry
from .token import (
    BTC,
    DAI,
    DGX,
    ETH,
    GUSD,
    OMG,
    PAX,
    REN,
    SUPPORTED_TOKENS,
    TUSD,
    USDC,
    WBTC,
    ZRX,
    Token,
    calculate_fee_from_bips,
    parse_token,
    parse_token_code,
)

__all__ = [
    "BlockchainName",
    "parse_blockchain",
    "Token",
    "TokenAmount",
    "SUPPORTED_TOKENS",
    "DAI",
    "BTC",
    "ETH",
    "REN",
    "DGX",
    "ZRX",
    "OMG",
    "PAX",
    "GUSD",
    "TUSD",
    "USDC",
    "WBTC",
    "parse_token",
    "parse_token_code",
    "calculate_fee_from_bips",
    "Pair",
    "PAIRS",
    "PAIR_DAI_BTC",
    "PAIR_DAI_ETH",
    "PAIR_DAI_REN",
    "PAIR_DAI_TUSD",
    "PAIR_BTC_ETH",
    "PAIR_BTC_REN",
    "PAIR_BTC_TUSD",
    "make_pair",
    "parse_pair",
    "supported_pair",
    "check_registry",
    "TokenError",
    "UnsupportedBlockchain",
    "UnsupportedToken",
    "UnsupportedTokenCode",
    "InvalidPair",
    "UnsupportedTokenPair",
]
