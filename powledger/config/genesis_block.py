#!/usr/bin/env python3
"""
powledger Genesis Block - Hardcoded for Network Consensus
Every node starts from the same genesis hash, nonce and payload so that
independently started chains can link to each other.
"""

import time

from . import GENESIS_PREVIOUS_HASH, resolve_difficulty
from ..blockchain.block import Block
from ..crypto.digest import meets_difficulty
from ..exceptions import GenesisConfigurationError

# Genesis Block Constants (Hardcoded for all nodes)
GENESIS_BLOCK_ID = 0
GENESIS_BLOCK_HASH = "0000f816a87f806bb0073dcf026a64fb40c946b5abee2573702828694d5b4c43"
GENESIS_NONCE = 2836  # Pre-mined nonce
GENESIS_DATA = "genesis!"


def make_genesis() -> Block:
    """
    Get the hardcoded genesis block

    The timestamp is the wall-clock time at construction, so it is not part
    of genesis identity.
    """
    return Block(
        id=GENESIS_BLOCK_ID,
        hash=GENESIS_BLOCK_HASH,
        previous_hash=GENESIS_PREVIOUS_HASH,
        timestamp=int(time.time()),
        data=GENESIS_DATA,
        nonce=GENESIS_NONCE
    )


def is_genesis_block(block: Block) -> bool:
    """
    Check that a block is the agreed genesis block

    Args:
        block: Block to check

    Returns:
        bool: True if id, sentinel, hash, nonce and payload all match
    """
    return (
        block.id == GENESIS_BLOCK_ID and
        block.previous_hash == GENESIS_PREVIOUS_HASH and
        block.hash == GENESIS_BLOCK_HASH and
        block.nonce == GENESIS_NONCE and
        block.data == GENESIS_DATA
    )


def verify_genesis_configuration(difficulty: int = None) -> None:
    """
    Startup self-test: the genesis hash must satisfy the difficulty predicate

    Raises:
        GenesisConfigurationError: if the configured difficulty rejects the genesis hash
    """
    difficulty = resolve_difficulty(difficulty)
    if not meets_difficulty(GENESIS_BLOCK_HASH, difficulty):
        raise GenesisConfigurationError(
            f"Genesis hash {GENESIS_BLOCK_HASH} does not meet difficulty {difficulty}"
        )
