#!/usr/bin/env python3
"""
powledger Thread Safety Module
Single-writer ownership of the authoritative chain

Usage:
    from powledger.concurrency import ThreadSafeLedger
"""

from .thread_safety import AdvancedRWLock, AtomicCounter, LockStats, synchronized
from .ledger_safe import ThreadSafeLedger, SyncResult, LedgerStats

__all__ = [
    'AdvancedRWLock', 'AtomicCounter', 'LockStats', 'synchronized',
    'ThreadSafeLedger', 'SyncResult', 'LedgerStats',
]
