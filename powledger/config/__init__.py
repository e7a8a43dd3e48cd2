#!/usr/bin/env python3
"""
powledger Configuration Module
Centralized consensus configuration and constants
"""

# ==========================================
# CONSENSUS CONFIGURATION
# ==========================================

# Reference proof-of-work target: the bit rendering of a block hash must
# start with this literal prefix
DIFFICULTY_PREFIX = "00"

# Difficulty expressed as the number of leading zero bits required
BLOCKCHAIN_DIFFICULTY = len(DIFFICULTY_PREFIX)

# SHA-256 digests are 32 bytes, so at most 256 leading zero bits
DIGEST_SIZE_BYTES = 32
MIN_DIFFICULTY = 0
MAX_DIFFICULTY = DIGEST_SIZE_BYTES * 8

# Sentinel stored in the genesis block's previous_hash field
GENESIS_PREVIOUS_HASH = "genesis"

# Field ranges of the block record layout
MAX_U64 = 2 ** 64 - 1
MIN_I64 = -(2 ** 63)
MAX_I64 = 2 ** 63 - 1


def get_difficulty() -> int:
    """Get current consensus difficulty setting (leading zero bits)"""
    return BLOCKCHAIN_DIFFICULTY

def get_mining_target(difficulty: int = None) -> str:
    """Get the zero-character prefix a hash's bit rendering must start with"""
    if difficulty is None:
        difficulty = BLOCKCHAIN_DIFFICULTY
    return "0" * difficulty

def validate_difficulty(difficulty: int) -> bool:
    """Validate difficulty setting"""
    if isinstance(difficulty, bool) or not isinstance(difficulty, int):
        return False
    return MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY

def resolve_difficulty(difficulty: int = None) -> int:
    """Return the given difficulty, or the configured default, checking its range"""
    if difficulty is None:
        return BLOCKCHAIN_DIFFICULTY
    if not validate_difficulty(difficulty):
        raise ValueError(
            f"Difficulty must be an int between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {difficulty!r}"
        )
    return difficulty

def get_all_config() -> dict:
    """Get all configuration as dictionary"""
    return {
        'difficulty_prefix': DIFFICULTY_PREFIX,
        'blockchain_difficulty': BLOCKCHAIN_DIFFICULTY,
        'digest_size_bytes': DIGEST_SIZE_BYTES,
        'min_difficulty': MIN_DIFFICULTY,
        'max_difficulty': MAX_DIFFICULTY,
        'genesis_previous_hash': GENESIS_PREVIOUS_HASH,
    }
