#!/usr/bin/env python3
"""
Validation outcomes returned by the block and chain validators
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RejectReason(Enum):
    """Why a block (or a chain's root) was rejected"""
    BROKEN_LINKAGE = "broken_linkage"
    INSUFFICIENT_DIFFICULTY = "insufficient_difficulty"
    NON_SEQUENTIAL_ID = "non_sequential_id"
    HASH_MISMATCH = "hash_mismatch"
    INVALID_GENESIS = "invalid_genesis"


@dataclass(frozen=True)
class ValidationResult:
    """
    Judgment on a block or chain

    Truthy when valid. On rejection `reason` is set, `block_id` names the
    responsible block (when there is one) and `index` its position in the
    chain being walked.
    """
    reason: Optional[RejectReason] = None
    block_id: Optional[int] = None
    index: Optional[int] = None
    detail: str = ""

    @classmethod
    def accept(cls) -> 'ValidationResult':
        return cls()

    @classmethod
    def reject(cls, reason: RejectReason, block_id: Optional[int] = None,
               detail: str = "") -> 'ValidationResult':
        return cls(reason=reason, block_id=block_id, detail=detail)

    def at_index(self, index: int) -> 'ValidationResult':
        """Same result tagged with a chain position"""
        return ValidationResult(
            reason=self.reason, block_id=self.block_id, index=index, detail=self.detail
        )

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.is_valid

    def describe(self) -> str:
        if self.is_valid:
            return "valid"
        where = f" at index {self.index}" if self.index is not None else ""
        return f"{self.reason.value}{where}: {self.detail}"
