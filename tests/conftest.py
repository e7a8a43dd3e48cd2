"""
Pytest fixtures and test configuration for powledger test suite.
"""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from powledger.blockchain.block import Block
from powledger.config import BLOCKCHAIN_DIFFICULTY
from powledger.config.genesis_block import make_genesis
from powledger.crypto.digest import meets_difficulty


FIXED_TIMESTAMP = 1609459200  # 2021-01-01 00:00:00 UTC


# ============================================================================
# Mining Helpers (stand-in for the external mining loop)
# ============================================================================

def _search_nonce(block_id, previous_hash, data, timestamp, want_valid, difficulty):
    nonce = 0
    while True:
        block = Block.create(block_id, previous_hash, data, nonce, timestamp)
        if meets_difficulty(block.hash, difficulty) == want_valid:
            return block
        nonce += 1


@pytest.fixture
def mine():
    """Return a function that mines a block on top of a predecessor"""
    def _mine(previous, data="block data", block_id=None, previous_hash=None,
              timestamp=FIXED_TIMESTAMP, difficulty=BLOCKCHAIN_DIFFICULTY):
        if block_id is None:
            block_id = previous.id + 1
        if previous_hash is None:
            previous_hash = previous.hash
        return _search_nonce(block_id, previous_hash, data, timestamp, True, difficulty)
    return _mine


@pytest.fixture
def mine_weak():
    """Return a function that builds a block whose hash misses the difficulty target"""
    def _mine_weak(previous, data="weak block", difficulty=BLOCKCHAIN_DIFFICULTY):
        return _search_nonce(previous.id + 1, previous.hash, data, FIXED_TIMESTAMP, False, difficulty)
    return _mine_weak


@pytest.fixture
def build_chain(mine):
    """Return a function that builds a valid chain of the given length"""
    def _build_chain(length, tag="chain", genesis=None):
        chain = [genesis or make_genesis()]
        while len(chain) < length:
            chain.append(mine(chain[-1], data=f"{tag} block {len(chain)}"))
        return chain
    return _build_chain


# ============================================================================
# Block Fixtures
# ============================================================================

@pytest.fixture
def genesis_block():
    """Create the agreed genesis block"""
    return make_genesis()


@pytest.fixture
def sample_block(genesis_block, mine):
    """Create a valid block following genesis"""
    return mine(genesis_block, data="first block")


@pytest.fixture
def sample_block_dict():
    """Serialized block in the shared record layout"""
    return {
        "id": 7,
        "hash": "00" + "ab" * 31,
        "previous_hash": "11" * 32,
        "timestamp": FIXED_TIMESTAMP,
        "data": "payload",
        "nonce": 42,
    }


# ============================================================================
# Test Markers
# ============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "integration: marks integration tests")
    config.addinivalue_line("markers", "concurrency: marks concurrency/threading tests")
