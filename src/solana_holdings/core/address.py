"""
Solana address utilities: validation and Base58 decoding.

A Solana account address is the Base58 text encoding of a 32-byte
Ed25519 public key. Unlike Bitcoin-style addresses there is no version byte
and no checksum, so validation is: every character is in the Base58
alphabet and the decoded payload is exactly 32 bytes long.

Reference: https://solana.com/docs/core/accounts
"""

from __future__ import annotations

# Base58 alphabet (same as Bitcoin)
_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_MAP = {char: i for i, char in enumerate(_ALPHABET)}

PUBKEY_LENGTH = 32

# SPL Token program: owner of every classic fungible token account
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


class AddressError(Exception):
    """Raised for invalid Solana addresses."""

    pass


def validate_address(address: str) -> bool:
    """
    Validate a Solana address (alphabet + decoded length check).

    Args:
        address: Solana address string (Base58 encoded)

    Returns:
        True if valid

    Raises:
        AddressError: if the address is malformed or has the wrong length
    """
    if not address:
        raise AddressError("Address is empty")

    try:
        raw = _base58_decode(address)
    except (KeyError, UnicodeEncodeError) as e:
        raise AddressError(f"Invalid Base58 encoding: {e}") from None

    if len(raw) != PUBKEY_LENGTH:
        raise AddressError(
            f"Invalid address length: {len(raw)} bytes (expected {PUBKEY_LENGTH})"
        )

    return True


def is_valid_address(address: str) -> bool:
    """
    Check if a Solana address is valid without raising exceptions.

    Returns:
        bool: True if valid, False otherwise
    """
    try:
        return validate_address(address)
    except AddressError:
        return False


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _base58_decode(s: str) -> bytes:
    """Decode a Base58-encoded string to bytes."""
    n = 0
    for char in s.encode("ascii"):
        n = n * 58 + _ALPHABET_MAP[char]

    if n == 0:
        result = b""
    else:
        byte_length = (n.bit_length() + 7) // 8
        result = n.to_bytes(byte_length, "big")

    # Each leading '1' in Base58 is a 0x00 byte
    pad_size = 0
    for char in s.encode("ascii"):
        if char == _ALPHABET[0]:
            pad_size += 1
        else:
            break

    return b"\x00" * pad_size + result

