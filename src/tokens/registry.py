"""Consistency audit over the token, alias and pair tables."""

from __future__ import annotations

from collections import Counter

from .errors import TokenError
from .pair import PAIR_NAMES, make_pair
from .token import (
    BASE_CODE_MIN,
    MAX_CODE,
    QUOTE_CODE_MAX,
    QUOTE_CODE_MIN,
    SUPPORTED_TOKENS,
    TOKEN_ALIASES,
)

MIN_ALIASES = 2
MAX_ALIASES = 4


def check_registry() -> list[str]:
    """
    Return a list of problems found in the registry tables.

    An empty list means every code is unique and in range, every alias
    resolves to exactly one token, and every supported pair decodes to
    registered tokens whose names match the pair's canonical string.
    """
    problems: list[str] = []
    problems.extend(_check_tokens())
    problems.extend(_check_aliases())
    problems.extend(_check_pairs())
    return problems


def _check_tokens() -> list[str]:
    problems = []
    for field in ("code", "name"):
        counts = Counter(getattr(token, field) for token in SUPPORTED_TOKENS)
        for value, count in counts.items():
            if count > 1:
                problems.append(f"duplicate token {field}: {value}")

    for token in SUPPORTED_TOKENS:
        in_quote = QUOTE_CODE_MIN <= token.code <= QUOTE_CODE_MAX
        in_base = BASE_CODE_MIN <= token.code <= MAX_CODE
        if not (in_quote or in_base):
            problems.append(f"{token}: code {token.code} outside quote and base ranges")
    return problems


def _check_aliases() -> list[str]:
    problems = []
    owners: dict[str, str] = {}
    for token in SUPPORTED_TOKENS:
        aliases = TOKEN_ALIASES.get(token, ())
        if not MIN_ALIASES <= len(aliases) <= MAX_ALIASES:
            problems.append(f"{token}: expected 2-4 aliases, found {len(aliases)}")
        if token.name.lower() not in aliases:
            problems.append(f"{token}: name is not one of its aliases")
        for alias in aliases:
            if alias != alias.strip().lower():
                problems.append(f"{token}: alias {alias!r} is not normalized")
            if alias in owners:
                problems.append(f"alias {alias!r} shared by {owners[alias]} and {token}")
            owners[alias] = token.name

    for token in TOKEN_ALIASES:
        if token not in SUPPORTED_TOKENS:
            problems.append(f"{token}: has aliases but is not a supported token")
    return problems


def _check_pairs() -> list[str]:
    problems = []
    counts = Counter(PAIR_NAMES.values())
    for name, count in counts.items():
        if count > 1:
            problems.append(f"duplicate pair name: {name}")

    for pair, name in PAIR_NAMES.items():
        try:
            base, quote = pair.tokens()
        except TokenError as exc:
            problems.append(f"{name}: {exc}")
            continue
        if make_pair(quote, base) != pair:
            problems.append(f"{name}: tokens are not in canonical order")
        if name != f"{base}-{quote}":
            problems.append(f"{name}: name does not match tokens {base}-{quote}")
    return problems
