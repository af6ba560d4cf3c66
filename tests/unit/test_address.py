"""
Unit tests for Solana address validation.
"""

import pytest
from conftest import base58_encode

from solana_holdings.core.address import (
    TOKEN_PROGRAM_ID,
    AddressError,
    _base58_decode,
    is_valid_address,
    validate_address,
)

SYSTEM_PROGRAM = "11111111111111111111111111111111"


def test_validate_token_program_id():
    assert validate_address(TOKEN_PROGRAM_ID) is True


def test_validate_all_zero_key():
    # 32 leading '1's decode to 32 zero bytes
    assert validate_address(SYSTEM_PROGRAM) is True
    assert _base58_decode(SYSTEM_PROGRAM) == b"\x00" * 32


def test_encoded_pubkey_is_valid():
    address = base58_encode(bytes(range(1, 33)))
    assert is_valid_address(address)
    assert _base58_decode(address) == bytes(range(1, 33))


def test_leading_zero_bytes_preserved():
    raw = b"\x00\x00" + bytes(range(30))
    assert _base58_decode(base58_encode(raw)) == raw


@pytest.mark.parametrize("bad", ["0OIl", "not-an-address!", "Mint111", "ünïcode"])
def test_invalid_characters_or_length(bad):
    with pytest.raises(AddressError):
        validate_address(bad)


def test_empty_address():
    with pytest.raises(AddressError, match="empty"):
        validate_address("")


def test_wrong_length_reports_bytes():
    short = base58_encode(b"\x01" * 31)
    with pytest.raises(AddressError, match="31 bytes"):
        validate_address(short)


def test_is_valid_address_never_raises():
    assert is_valid_address("definitely not valid") is False
    assert is_valid_address(TOKEN_PROGRAM_ID) is True
