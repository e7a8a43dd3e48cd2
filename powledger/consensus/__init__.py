#!/usr/bin/env python3
"""
powledger Consensus Module
Block validation, chain validation and fork choice
"""

from .results import RejectReason, ValidationResult
from .block_validator import BlockValidator, validate_block
from .chain_validator import validate_chain
from .fork_resolver import ForkChoice, ForkResolver, resolve, get_fork_resolver, fork_resolver

__all__ = [
    'RejectReason',
    'ValidationResult',
    'BlockValidator',
    'validate_block',
    'validate_chain',
    'ForkChoice',
    'ForkResolver',
    'resolve',
    'get_fork_resolver',
    'fork_resolver',
]
