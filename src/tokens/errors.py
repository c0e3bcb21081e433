"""Registry exceptions for unsupported blockchains, tokens and pairs."""

from __future__ import annotations

from typing import Any


class TokenError(Exception):
    """Base class for registry errors."""


class UnsupportedBlockchain(TokenError, ValueError):
    """Blockchain name is not in the registry."""

    def __init__(self, blockchain: Any):
        self.blockchain = blockchain
        super().__init__(f"unsupported blockchain: {blockchain}")


class UnsupportedToken(TokenError, ValueError):
    """Token alias did not match any registered token."""

    def __init__(self, token: Any):
        self.token = token
        super().__init__(f"unsupported token: {token}")


class UnsupportedTokenCode(TokenError, ValueError):
    """Numeric code is not assigned to a registered token."""

    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"unsupported token code: {code}")


class InvalidPair(TokenError, ValueError):
    """Pair string or value has no canonical form."""

    def __init__(self, pair: Any):
        self.pair = pair
        super().__init__(f"invalid token pair: {pair}")


class UnsupportedTokenPair(TokenError, ValueError):
    """Both tokens exist but are not traded as a pair."""

    def __init__(self, base: Any, quote: Any):
        self.base = base
        self.quote = quote
        super().__init__(f"unsupported token pair: {base}-{quote}")
