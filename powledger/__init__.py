#!/usr/bin/env python3
"""
powledger: validation and fork-resolution core of a minimal proof-of-work ledger
"""

from .blockchain.block import Block, encode_chain, decode_chain
from .config.genesis_block import make_genesis, is_genesis_block, verify_genesis_configuration
from .consensus import (
    RejectReason, ValidationResult, BlockValidator, ForkChoice, ForkResolver,
    validate_block, validate_chain, resolve
)
from .concurrency import ThreadSafeLedger, SyncResult
from .crypto.digest import fingerprint, meets_difficulty
from .exceptions import (
    LedgerError, ConsensusError, NoValidChainError, MalformedBlockError,
    GenesisConfigurationError
)

__version__ = "0.1.0"

__all__ = [
    'Block', 'encode_chain', 'decode_chain',
    'make_genesis', 'is_genesis_block', 'verify_genesis_configuration',
    'RejectReason', 'ValidationResult', 'BlockValidator', 'ForkChoice', 'ForkResolver',
    'validate_block', 'validate_chain', 'resolve',
    'ThreadSafeLedger', 'SyncResult',
    'fingerprint', 'meets_difficulty',
    'LedgerError', 'ConsensusError', 'NoValidChainError', 'MalformedBlockError',
    'GenesisConfigurationError',
]
