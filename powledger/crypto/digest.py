#!/usr/bin/env python3
"""
Block fingerprinting and proof-of-work difficulty predicate

Every function here is pure and safe to call from any thread.
"""

import hashlib
import json
from typing import Optional


def canonical_encoding(id: int, timestamp: int, previous_hash: str, data: str, nonce: int) -> bytes:
    """
    Canonical byte encoding of the five hashed block fields

    Compact JSON with sorted keys and unescaped non-ASCII text, UTF-8 encoded.
    """
    block_data = {
        'id': id,
        'timestamp': timestamp,
        'previous_hash': previous_hash,
        'data': data,
        'nonce': nonce
    }
    encoded = json.dumps(block_data, sort_keys=True, separators=(',', ':'), ensure_ascii=False)
    return encoded.encode('utf-8')


def fingerprint(id: int, timestamp: int, previous_hash: str, data: str, nonce: int) -> str:
    """SHA-256 of the canonical encoding, as lower-case hex"""
    return hashlib.sha256(canonical_encoding(id, timestamp, previous_hash, data, nonce)).hexdigest()


def hash_to_binary_representation(digest: bytes) -> str:
    """Render each byte as an 8-bit zero-padded binary string, concatenated in order"""
    return ''.join(format(byte, '08b') for byte in digest)


HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def _decode_hex(hex_digest: str) -> Optional[bytes]:
    # bytes.fromhex skips whitespace, so plain hex digits are checked first
    if not isinstance(hex_digest, str) or len(hex_digest) % 2:
        return None
    if not HEX_DIGITS.issuperset(hex_digest):
        return None
    return bytes.fromhex(hex_digest)


def meets_difficulty(hex_digest: str, required_leading_zero_bits: int) -> bool:
    """
    Check that a hex digest has at least the required count of leading zero bits

    Args:
        hex_digest: Block hash as a hex string
        required_leading_zero_bits: Difficulty level

    Returns:
        bool: True if the binary rendering starts with that many '0' characters.
        A digest that is not valid hex never meets difficulty.
    """
    digest = _decode_hex(hex_digest)
    if digest is None:
        return False
    target = '0' * required_leading_zero_bits
    return hash_to_binary_representation(digest).startswith(target)


def count_leading_zero_bits(hex_digest: str) -> int:
    """Count leading zero bits of a hex digest (0 for undecodable input)"""
    digest = _decode_hex(hex_digest)
    if not digest:
        return 0
    bits = hash_to_binary_representation(digest)
    return len(bits) - len(bits.lstrip('0'))
