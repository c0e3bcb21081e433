"""Random registry values for property-style tests."""

from __future__ import annotations

import random

from tokens import PAIRS, SUPPORTED_TOKENS, Pair, Token


def random_token(rng: random.Random) -> Token:
    return rng.choice(SUPPORTED_TOKENS)


def random_pair(rng: random.Random) -> Pair:
    return rng.choice(PAIRS)


def random_token_pairs(rng: random.Random, count: int = 200) -> list[tuple[Token, Token]]:
    """Pairs of distinct tokens drawn uniformly from the registry."""
    result = []
    while len(result) < count:
        first, second = random_token(rng), random_token(rng)
        if first != second:
            result.append((first, second))
    return result
