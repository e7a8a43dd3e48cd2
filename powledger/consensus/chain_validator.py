#!/usr/bin/env python3
"""
Full chain validation
"""

from typing import Sequence

from ..blockchain.block import Block
from ..config import resolve_difficulty
from ..config.genesis_block import is_genesis_block
from .block_validator import validate_block
from .results import RejectReason, ValidationResult


def validate_chain(chain: Sequence[Block], difficulty: int = None) -> ValidationResult:
    """
    Validate an entire chain

    The root must be the agreed genesis block; every later block is checked
    against the one before it. Stops at the first failure.

    Returns:
        ValidationResult: valid, or the first failure tagged with its index
    """
    difficulty = resolve_difficulty(difficulty)

    if not chain:
        return ValidationResult.reject(
            RejectReason.INVALID_GENESIS, detail="chain is empty"
        ).at_index(0)

    genesis = chain[0]
    if not is_genesis_block(genesis):
        return ValidationResult.reject(
            RejectReason.INVALID_GENESIS, genesis.id,
            f"block with id {genesis.id} is not the agreed genesis block"
        ).at_index(0)

    for i in range(1, len(chain)):
        result = validate_block(chain[i], chain[i - 1], difficulty)
        if not result:
            return result.at_index(i)

    return ValidationResult.accept()
