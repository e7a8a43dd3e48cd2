#!/usr/bin/env python3
"""
Fork Resolution
Chooses between the local chain and a competing remote chain
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from ..blockchain.block import Block
from ..config import resolve_difficulty
from ..exceptions import NoValidChainError
from .chain_validator import validate_chain
from .results import ValidationResult

logger = logging.getLogger(__name__)

LOCAL = "local"
REMOTE = "remote"


@dataclass(frozen=True)
class ForkChoice:
    """Outcome of comparing two candidate chains"""
    chain: Sequence[Block]
    source: str  # LOCAL or REMOTE
    local_result: ValidationResult
    remote_result: ValidationResult

    @property
    def adopted_remote(self) -> bool:
        return self.source == REMOTE


class ForkResolver:
    """
    Resolves forks with the longest valid chain rule

    Both valid: the longer chain wins, and a tie goes to the remote chain.
    One valid: that one wins. Neither valid: NoValidChainError.
    """

    def __init__(self, difficulty: int = None):
        self.difficulty = resolve_difficulty(difficulty)

    def choose(self, local: Sequence[Block], remote: Sequence[Block]) -> ForkChoice:
        """
        Validate both chains and pick one

        The chosen chain object is returned as-is; neither input is modified.

        Raises:
            NoValidChainError: if both chains are invalid
        """
        local_result = validate_chain(local, self.difficulty)
        remote_result = validate_chain(remote, self.difficulty)

        if local_result and remote_result:
            source = LOCAL if len(local) > len(remote) else REMOTE
        elif local_result:
            source = LOCAL
        elif remote_result:
            source = REMOTE
        else:
            raise NoValidChainError(local_result, remote_result)

        chain = local if source == LOCAL else remote
        logger.debug(f"Fork choice: {source} chain selected "
                     f"(local {len(local)} blocks {local_result.describe()}, "
                     f"remote {len(remote)} blocks {remote_result.describe()})")
        return ForkChoice(
            chain=chain,
            source=source,
            local_result=local_result,
            remote_result=remote_result
        )

    def resolve(self, local: Sequence[Block], remote: Sequence[Block]) -> Sequence[Block]:
        """Return the chain the node should adopt"""
        return self.choose(local, remote).chain


def resolve(local: Sequence[Block], remote: Sequence[Block], difficulty: int = None) -> Sequence[Block]:
    """Resolve a fork between two chains (see ForkResolver)"""
    return ForkResolver(difficulty).resolve(local, remote)


# Default fork resolver instance at the configured difficulty
fork_resolver = ForkResolver()

def get_fork_resolver() -> ForkResolver:
    """Get the default fork resolver instance"""
    return fork_resolver
