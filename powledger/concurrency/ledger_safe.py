#!/usr/bin/env python3
"""
Thread-Safe Ledger
Single-writer owner of the authoritative chain. Validation runs on
immutable snapshots; appends and replacements go through the write lock.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..blockchain.block import Block, encode_chain
from ..config import resolve_difficulty
from ..config.genesis_block import is_genesis_block, make_genesis, verify_genesis_configuration
from ..consensus.block_validator import validate_block
from ..consensus.chain_validator import validate_chain
from ..consensus.fork_resolver import ForkResolver
from ..consensus.results import ValidationResult
from ..exceptions import GenesisConfigurationError, NoValidChainError
from .thread_safety import AdvancedRWLock, AtomicCounter, synchronized

logger = logging.getLogger(__name__)


class SyncResult(Enum):
    """Outcome of reconciling the local chain with a remote one"""
    REPLACED = "replaced"
    NO_CHANGES = "no_changes"
    NO_VALID_CHAIN = "no_valid_chain"


@dataclass
class LedgerStats:
    """Ledger statistics"""
    blocks_accepted: int = 0
    blocks_rejected: int = 0
    chains_replaced: int = 0
    unresolved_forks: int = 0


class ThreadSafeLedger:
    """
    Thread-safe chain holder

    Mirrors a node's view of the chain: seeded with genesis, grown one
    validated block at a time, or replaced wholesale by fork choice.
    """

    def __init__(self, difficulty: int = None, genesis: Optional[Block] = None):
        self.difficulty = resolve_difficulty(difficulty)
        self._chain_lock = AdvancedRWLock("ledger_chain")
        self._state_version = AtomicCounter()
        self._fork_resolver = ForkResolver(self.difficulty)
        self._stats = LedgerStats()

        verify_genesis_configuration(self.difficulty)

        if genesis is None:
            genesis = make_genesis()
        elif not is_genesis_block(genesis):
            raise GenesisConfigurationError(f"Block with id {genesis.id} is not the agreed genesis block")

        self._chain: List[Block] = [genesis]

        logger.info("[LEDGER] Ledger initialized")
        logger.info(f"   [DIFFICULTY] Target Difficulty: {self.difficulty} leading zero bits")
        logger.info(f"   [GENESIS] Hash: {genesis.hash}")

    @property
    def state_version(self) -> int:
        """Incremented on every chain modification"""
        return self._state_version.value

    @property
    @synchronized('read')
    def latest_block(self) -> Block:
        """Current chain tip"""
        return self._tip()

    def _tip(self) -> Block:
        if not self._chain:
            raise RuntimeError("There should be at least one valid block")
        return self._chain[-1]

    @synchronized('write')
    def try_add_block(self, block: Block) -> ValidationResult:
        """
        Validate a block against the current tip and append it if valid

        Returns:
            ValidationResult: the judgment; the chain is unchanged on rejection
        """
        result = validate_block(block, self._tip(), self.difficulty)
        if not result:
            self._stats.blocks_rejected += 1
            logger.warning(f"[REJECT] could not add block {block.id} - {result.reason.value}: {result.detail}")
            return result

        self._chain.append(block)
        self._state_version.increment()
        self._stats.blocks_accepted += 1
        logger.info(f"[ACCEPT] Block {block.id} added to chain (length: {len(self._chain)})")
        return result

    def sync_with_chain(self, remote: Sequence[Block]) -> SyncResult:
        """
        Reconcile with a remote chain using fork choice

        Both chains are validated on snapshots outside the lock. If the local
        chain changed in the meantime, fork choice runs again on the new tip.

        Returns:
            SyncResult: REPLACED if the remote chain was adopted, NO_CHANGES if
            the local chain was kept, NO_VALID_CHAIN if neither chain is valid
        """
        remote = tuple(remote)

        while True:
            with self._chain_lock.read_lock():
                local = tuple(self._chain)
                version = self._state_version.value

            try:
                choice = self._fork_resolver.choose(local, remote)
            except NoValidChainError as e:
                with self._chain_lock.write_lock():
                    if self._state_version.value != version:
                        continue
                    self._stats.unresolved_forks += 1
                logger.error(f"[FORK] Unresolved fork: {e}")
                return SyncResult.NO_VALID_CHAIN

            if not choice.adopted_remote:
                if not choice.remote_result:
                    logger.warning(f"[FORK] Remote chain rejected: {choice.remote_result.describe()}")
                else:
                    logger.info(f"[FORK] Keeping local chain ({len(local)} vs {len(remote)} blocks)")
                return SyncResult.NO_CHANGES

            with self._chain_lock.write_lock():
                if self._state_version.value != version:
                    logger.debug("[FORK] Local chain changed during validation, retrying fork choice")
                    continue
                self._chain = list(choice.chain)
                self._state_version.increment()
                self._stats.chains_replaced += 1

            if not choice.local_result:
                logger.warning(f"[FORK] Local chain invalid: {choice.local_result.describe()}")
            logger.info(f"[FORK] Replacing chain: {len(local)} -> {len(remote)} blocks")
            return SyncResult.REPLACED

    @synchronized('read')
    def get_chain_copy(self) -> Tuple[Block, ...]:
        """Immutable snapshot of the chain"""
        return tuple(self._chain)

    @synchronized('read')
    def get_chain_length(self) -> int:
        """Get current chain length"""
        return len(self._chain)

    @synchronized('read')
    def get_block_by_id(self, block_id: int) -> Optional[Block]:
        # ids are sequential from genesis, so id == position
        if 0 <= block_id < len(self._chain):
            return self._chain[block_id]
        return None

    def validate(self) -> ValidationResult:
        """Run the chain validator on a snapshot"""
        return validate_chain(self.get_chain_copy(), self.difficulty)

    def to_json(self) -> str:
        """Serialize the chain snapshot to JSON"""
        return encode_chain(self.get_chain_copy())

    def get_stats(self) -> LedgerStats:
        """Get ledger statistics"""
        with self._chain_lock.read_lock():
            return LedgerStats(**vars(self._stats))
