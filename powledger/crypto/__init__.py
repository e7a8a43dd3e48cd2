"""
powledger digest engine: block fingerprints and the difficulty predicate
"""

from .digest import (
    fingerprint, canonical_encoding, hash_to_binary_representation,
    meets_difficulty, count_leading_zero_bits
)

__all__ = [
    'fingerprint',
    'canonical_encoding',
    'hash_to_binary_representation',
    'meets_difficulty',
    'count_leading_zero_bits',
]
