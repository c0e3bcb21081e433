"""Blockchains that registered tokens originate from."""

from __future__ import annotations

import logging
from enum import Enum

from .errors import UnsupportedBlockchain

logger = logging.getLogger(__name__)


class BlockchainName(str, Enum):
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    ZCASH = "zcash"
    # ERC20 tokens are issued on Ethereum.
    ERC20 = "erc20"

    def __str__(self) -> str:
        return self.value


def parse_blockchain(name: str) -> BlockchainName:
    """Resolve a blockchain label, ignoring case and surrounding whitespace."""
    if not isinstance(name, str):
        raise UnsupportedBlockchain(name)
    try:
        return BlockchainName(name.strip().lower())
    except ValueError:
        logger.debug("No blockchain for name=%s", name)
        raise UnsupportedBlockchain(name) from None
