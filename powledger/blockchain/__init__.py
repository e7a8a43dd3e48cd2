"""
Block record and chain serialization
"""

from .block import Block, BLOCK_FIELDS, encode_chain, decode_chain

__all__ = [
    'Block',
    'BLOCK_FIELDS',
    'encode_chain',
    'decode_chain',
]
