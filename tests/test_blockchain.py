"""Tests for tokens.blockchain."""

import pytest

from tokens import BlockchainName, UnsupportedBlockchain, parse_blockchain


class TestBlockchainName:
    def test_enum_values(self):
        assert BlockchainName.BITCOIN.value == "bitcoin"
        assert BlockchainName.ETHEREUM.value == "ethereum"
        assert BlockchainName.ZCASH.value == "zcash"
        assert BlockchainName.ERC20.value == "erc20"

    def test_str_is_value(self):
        assert str(BlockchainName.ZCASH) == "zcash"
        assert BlockchainName.ERC20 == "erc20"


class TestParseBlockchain:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("bitcoin", BlockchainName.BITCOIN),
            (" Ethereum ", BlockchainName.ETHEREUM),
            ("ZCASH", BlockchainName.ZCASH),
            ("erc20\n", BlockchainName.ERC20),
        ],
    )
    def test_known_names(self, text, expected):
        assert parse_blockchain(text) is expected

    @pytest.mark.parametrize("text", ["", "solana", None])
    def test_unknown_names_raise(self, text):
        with pytest.raises(UnsupportedBlockchain) as excinfo:
            parse_blockchain(text)
        assert excinfo.value.blockchain == text


def test_unsupported_blockchain_is_constructible():
    err = UnsupportedBlockchain("dogecoin")
    assert err.blockchain == "dogecoin"
    assert str(err) == "unsupported blockchain: dogecoin"
