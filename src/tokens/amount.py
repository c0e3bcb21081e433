"""Raw token amounts with decimal handling and transfer fees."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .token import Token


@dataclass(frozen=True)
class TokenAmount:
    """
    Represents an amount of a registered token.

    Internally stores the raw integer in the token's smallest unit.
    Provides human-readable formatting.
    """

    raw: int
    token: Token

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int):
            raise TypeError("raw must be an int")
        if not isinstance(self.token, Token):
            raise TypeError("token must be a Token")

    @classmethod
    def from_human(cls, amount: str | Decimal, token: Token) -> "TokenAmount":
        """Create from human-readable amount (e.g., '1.5' BTC)."""
        if isinstance(amount, float):
            raise TypeError("amount must be a string or Decimal, not float")
        if isinstance(amount, str):
            decimal_amount = Decimal(amount)
        elif isinstance(amount, Decimal):
            decimal_amount = amount
        else:
            raise TypeError("amount must be a string or Decimal")

        raw_decimal = decimal_amount.scaleb(token.decimals)
        if raw_decimal != raw_decimal.to_integral_value():
            raise ValueError("amount has more precision than decimals allow")
        return cls(raw=int(raw_decimal), token=token)

    @property
    def human(self) -> Decimal:
        """Returns human-readable decimal."""
        return Decimal(self.raw).scaleb(-self.token.decimals)

    def transaction_fee(self) -> Optional[int]:
        return self.token.additional_transaction_fee(self.raw)

    def with_transaction_fee(self) -> "TokenAmount":
        """Gross amount to send so the recipient receives this amount."""
        fee = self.transaction_fee()
        if fee is None:
            return self
        return TokenAmount(self.raw + fee, self.token)

    def __add__(self, other: "TokenAmount") -> "TokenAmount":
        if not isinstance(other, TokenAmount):
            return NotImplemented
        if self.token != other.token:
            raise ValueError("TokenAmount tokens must match")
        return TokenAmount(self.raw + other.raw, self.token)

    def __str__(self) -> str:
        return f"{self.human} {self.token}"
