#!/usr/bin/env python3
"""
Block validation against its predecessor
Checks linkage, difficulty, ordering and integrity, in that order
"""

from ..blockchain.block import Block
from ..config import resolve_difficulty
from ..crypto.digest import fingerprint, meets_difficulty
from .results import RejectReason, ValidationResult


def validate_block(candidate: Block, predecessor: Block, difficulty: int = None) -> ValidationResult:
    """
    Validate a candidate block against the block it claims to follow

    Args:
        candidate: The later block
        predecessor: The current tip, or chain[i-1] during a chain walk
        difficulty: Required leading zero bits (defaults to configuration)

    Returns:
        ValidationResult: accepted, or the first failed check with the candidate's id
    """
    difficulty = resolve_difficulty(difficulty)

    # 1. Linkage is checked on the candidate's previous_hash, never its own hash
    if candidate.previous_hash != predecessor.hash:
        return ValidationResult.reject(
            RejectReason.BROKEN_LINKAGE, candidate.id,
            f"block with id {candidate.id} has wrong previous hash"
        )

    # 2. Proof of work
    if not meets_difficulty(candidate.hash, difficulty):
        return ValidationResult.reject(
            RejectReason.INSUFFICIENT_DIFFICULTY, candidate.id,
            f"block with id {candidate.id} has invalid difficulty"
        )

    # 3. Sequence
    if candidate.id != predecessor.id + 1:
        return ValidationResult.reject(
            RejectReason.NON_SEQUENTIAL_ID, candidate.id,
            f"block with id {candidate.id} is not the next block after the latest: {predecessor.id}"
        )

    # 4. Integrity, compared as hex strings
    try:
        calculated_hash = fingerprint(
            candidate.id,
            candidate.timestamp,
            candidate.previous_hash,
            candidate.data,
            candidate.nonce
        )
    except UnicodeEncodeError:
        # A field with no canonical encoding has no matching fingerprint
        calculated_hash = None
    if calculated_hash != candidate.hash:
        return ValidationResult.reject(
            RejectReason.HASH_MISMATCH, candidate.id,
            f"block with id {candidate.id} has invalid hash"
        )

    return ValidationResult.accept()


class BlockValidator:
    """Block validator bound to a fixed difficulty"""

    def __init__(self, difficulty: int = None):
        self.difficulty = resolve_difficulty(difficulty)

    def validate(self, candidate: Block, predecessor: Block) -> ValidationResult:
        return validate_block(candidate, predecessor, self.difficulty)
