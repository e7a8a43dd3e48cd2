#!/usr/bin/env python3
"""
Block record for the powledger chain
This layout is the serialization contract shared with the mining, network
and storage collaborators.
"""

import json
import time
from dataclasses import dataclass, asdict
from typing import Dict, List, Sequence

from ..config import MAX_U64, MIN_I64, MAX_I64
from ..crypto.digest import fingerprint
from ..exceptions import MalformedBlockError


BLOCK_FIELDS = ('id', 'hash', 'previous_hash', 'timestamp', 'data', 'nonce')


@dataclass(frozen=True)
class Block:
    """
    Immutable linked, hash-stamped record

    frozen=True keeps accepted blocks from being modified after the fact;
    validators only ever read them.
    """
    id: int
    hash: str
    previous_hash: str
    timestamp: int
    data: str
    nonce: int

    @classmethod
    def create(cls, id: int, previous_hash: str, data: str, nonce: int = 0,
               timestamp: int = None) -> 'Block':
        """Build a block whose hash is the fingerprint of its own fields"""
        if timestamp is None:
            timestamp = int(time.time())
        block_hash = fingerprint(id, timestamp, previous_hash, data, nonce)
        return cls(
            id=id,
            hash=block_hash,
            previous_hash=previous_hash,
            timestamp=timestamp,
            data=data,
            nonce=nonce
        )

    def calculate_hash(self) -> str:
        """Recompute the fingerprint from this block's fields"""
        return fingerprint(self.id, self.timestamp, self.previous_hash, self.data, self.nonce)

    def to_dict(self) -> Dict:
        """Convert block to dictionary format"""
        return asdict(self)

    @classmethod
    def from_dict(cls, block_dict: Dict) -> 'Block':
        """
        Create Block from dictionary

        Raises:
            MalformedBlockError: missing fields, wrong types or out-of-range values
        """
        if not isinstance(block_dict, dict):
            raise MalformedBlockError(f"Block must be a JSON object, got {type(block_dict).__name__}")

        missing = [name for name in BLOCK_FIELDS if name not in block_dict]
        if missing:
            raise MalformedBlockError(f"Block is missing fields: {', '.join(missing)}")

        block_id = _require_int(block_dict, 'id', 0, MAX_U64)
        nonce = _require_int(block_dict, 'nonce', 0, MAX_U64)
        timestamp = _require_int(block_dict, 'timestamp', MIN_I64, MAX_I64)

        for name in ('hash', 'previous_hash', 'data'):
            if not isinstance(block_dict[name], str):
                raise MalformedBlockError(f"Block field '{name}' must be a string")
            # json.loads lets lone surrogates through; they have no UTF-8 encoding
            try:
                block_dict[name].encode('utf-8')
            except UnicodeEncodeError as e:
                raise MalformedBlockError(f"Block field '{name}' is not valid UTF-8 text") from e

        return cls(
            id=block_id,
            hash=block_dict['hash'],
            previous_hash=block_dict['previous_hash'],
            timestamp=timestamp,
            data=block_dict['data'],
            nonce=nonce
        )

    def to_json(self) -> str:
        """Serialize block to JSON"""
        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_json(cls, json_str: str) -> 'Block':
        """Deserialize block from JSON"""
        return cls.from_dict(_loads(json_str))

    def __str__(self) -> str:
        return (
            f"Block #{self.id}\n"
            f"  Hash: {self.hash[:16]}...\n"
            f"  Prev: {self.previous_hash[:16]}...\n"
            f"  Nonce: {self.nonce}\n"
            f"  Data: {self.data}"
        )


def _require_int(block_dict: Dict, name: str, low: int, high: int) -> int:
    value = block_dict[name]
    # bool is an int subclass but never a valid field value
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedBlockError(f"Block field '{name}' must be an integer")
    if not low <= value <= high:
        raise MalformedBlockError(f"Block field '{name}' out of range: {value}")
    return value


def _loads(json_str: str):
    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise MalformedBlockError(f"Invalid JSON: {e}") from e


def encode_chain(chain: Sequence[Block]) -> str:
    """Serialize a chain to a JSON array of block objects"""
    return json.dumps([block.to_dict() for block in chain], sort_keys=True)


def decode_chain(json_str: str) -> List[Block]:
    """Deserialize a chain from a JSON array of block objects"""
    data = _loads(json_str)
    if not isinstance(data, list):
        raise MalformedBlockError("Chain must be a JSON array")
    return [Block.from_dict(block_data) for block_data in data]
