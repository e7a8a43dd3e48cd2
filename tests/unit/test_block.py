"""
Unit tests for Block record.

Tests cover:
- Block creation and hash derivation
- Immutability
- Serialization contract (dict / JSON / chain)
- Rejection of malformed serialized blocks
"""
import dataclasses
import json
import time

import pytest

from powledger.blockchain.block import Block, BLOCK_FIELDS, encode_chain, decode_chain
from powledger.config import MAX_U64, MIN_I64
from powledger.crypto.digest import fingerprint
from powledger.exceptions import MalformedBlockError, LedgerError


class TestBlockCreation:
    """Test block instantiation and field initialization"""

    def test_create_calculates_hash_from_fields(self):
        block = Block.create(1, "ab" * 32, "payload", nonce=9, timestamp=1000)

        assert block.hash == fingerprint(1, 1000, "ab" * 32, "payload", 9)
        assert block.calculate_hash() == block.hash

    def test_create_timestamp_auto_generated(self):
        before = int(time.time())
        block = Block.create(1, "ab" * 32, "payload")
        after = int(time.time())

        assert before <= block.timestamp <= after
        assert isinstance(block.timestamp, int)

    def test_block_is_immutable(self, sample_block):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_block.nonce = 0

    def test_blocks_compare_by_value(self):
        a = Block.create(1, "p", "d", nonce=1, timestamp=5)
        b = Block.create(1, "p", "d", nonce=1, timestamp=5)
        assert a == b

    def test_str_shows_id(self, sample_block):
        assert f"Block #{sample_block.id}" in str(sample_block)


class TestBlockSerialization:
    """Test the shared record layout"""

    def test_to_dict_has_exactly_the_layout_fields(self, sample_block):
        assert set(sample_block.to_dict()) == set(BLOCK_FIELDS)

    def test_dict_round_trip(self, sample_block):
        assert Block.from_dict(sample_block.to_dict()) == sample_block

    def test_json_round_trip_preserves_every_field(self, genesis_block):
        restored = Block.from_json(genesis_block.to_json())
        for name in BLOCK_FIELDS:
            assert getattr(restored, name) == getattr(genesis_block, name)

    def test_json_round_trip_extreme_values(self):
        block = Block(id=MAX_U64, hash="ff" * 32, previous_hash="ee" * 32,
                      timestamp=MIN_I64, data="ünïcode ✓", nonce=MAX_U64)
        assert Block.from_json(block.to_json()) == block

    def test_chain_round_trip(self, build_chain):
        chain = build_chain(3)
        assert decode_chain(encode_chain(chain)) == chain

    def test_from_dict_accepts_sample(self, sample_block_dict):
        block = Block.from_dict(sample_block_dict)
        assert block.id == 7
        assert block.nonce == 42


class TestMalformedBlocks:
    """Test rejection at the serialization boundary"""

    @pytest.mark.parametrize("field", BLOCK_FIELDS)
    def test_missing_field(self, sample_block_dict, field):
        del sample_block_dict[field]
        with pytest.raises(MalformedBlockError, match=field):
            Block.from_dict(sample_block_dict)

    @pytest.mark.parametrize("field,value", [
        ("id", -1),
        ("id", MAX_U64 + 1),
        ("nonce", -1),
        ("nonce", 2 ** 64),
        ("timestamp", 2 ** 63),
        ("timestamp", -(2 ** 63) - 1),
    ])
    def test_out_of_range_integers(self, sample_block_dict, field, value):
        sample_block_dict[field] = value
        with pytest.raises(MalformedBlockError, match="out of range"):
            Block.from_dict(sample_block_dict)

    @pytest.mark.parametrize("field,value", [
        ("id", "7"),
        ("id", True),
        ("nonce", 1.5),
        ("hash", 123),
        ("previous_hash", None),
        ("data", ["list"]),
    ])
    def test_wrong_types(self, sample_block_dict, field, value):
        sample_block_dict[field] = value
        with pytest.raises(MalformedBlockError):
            Block.from_dict(sample_block_dict)

    @pytest.mark.parametrize("field", ["hash", "previous_hash", "data"])
    def test_lone_surrogate_rejected(self, sample_block_dict, field):
        sample_block_dict[field] = "\ud800"
        with pytest.raises(MalformedBlockError, match="UTF-8"):
            Block.from_dict(sample_block_dict)

    def test_escaped_surrogate_in_chain_json_rejected(self, sample_block_dict):
        # json.loads turns the escape into a lone surrogate code point
        text = json.dumps([sample_block_dict]).replace('"payload"', '"\\ud800"')
        with pytest.raises(MalformedBlockError, match="data"):
            decode_chain(text)

    def test_not_an_object(self):
        with pytest.raises(MalformedBlockError):
            Block.from_dict([1, 2, 3])

    def test_invalid_json(self):
        with pytest.raises(MalformedBlockError, match="Invalid JSON"):
            Block.from_json("{not json")

    def test_chain_must_be_array(self, sample_block_dict):
        with pytest.raises(MalformedBlockError, match="array"):
            decode_chain(json.dumps(sample_block_dict))

    def test_malformed_block_error_is_value_error(self):
        assert issubclass(MalformedBlockError, ValueError)
        assert issubclass(MalformedBlockError, LedgerError)
