#!/usr/bin/env python3
"""
Thread safety primitives for the ledger host
Reader-writer lock with writer preference, an atomic counter, and a
method decorator that locks the owning instance
"""

import functools
import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class LockStats:
    """Thread safety statistics for monitoring"""
    acquisitions: int = 0
    contentions: int = 0
    max_wait_time: float = 0.0


class AdvancedRWLock:
    """
    Reader-Writer lock with writer preference

    Many readers may hold the lock at once; a writer holds it alone. Waiting
    writers block new readers so a stream of reads cannot starve a write.
    """

    def __init__(self, name: str):
        self.name = name
        self._readers = 0
        self._writers = 0
        self._waiting_writers = 0
        self._condition = threading.Condition(threading.Lock())
        self._stats = LockStats()

    def _record_wait(self, start_time: float):
        wait_time = time.time() - start_time
        self._stats.max_wait_time = max(self._stats.max_wait_time, wait_time)

    @contextmanager
    def read_lock(self):
        """Acquire shared read lock"""
        start_time = time.time()
        with self._condition:
            while self._writers > 0 or self._waiting_writers > 0:
                self._stats.contentions += 1
                self._condition.wait()
            self._readers += 1
            self._stats.acquisitions += 1
            self._record_wait(start_time)

        logger.debug(f"Thread {threading.get_ident()} acquired read lock {self.name} (readers: {self._readers})")
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write_lock(self):
        """Acquire exclusive write lock"""
        start_time = time.time()
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._readers > 0 or self._writers > 0:
                    self._stats.contentions += 1
                    self._condition.wait()
            finally:
                self._waiting_writers -= 1
            self._writers += 1
            self._stats.acquisitions += 1
            self._record_wait(start_time)

        logger.debug(f"Thread {threading.get_ident()} acquired write lock {self.name}")
        try:
            yield
        finally:
            with self._condition:
                self._writers -= 1
                self._condition.notify_all()

    def get_stats(self) -> LockStats:
        """Get lock statistics for monitoring"""
        return self._stats


class AtomicCounter:
    """Thread-safe counter"""

    def __init__(self, initial: int = 0):
        self._value = initial
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Atomically increment and return new value"""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


def synchronized(mode: str = 'write', lock_attr: str = '_chain_lock'):
    """
    Decorator for method synchronization on the instance's lock

    Args:
        mode: 'read' or 'write' lock mode
        lock_attr: Name of the AdvancedRWLock attribute on the instance
    """
    if mode not in ('read', 'write'):
        raise ValueError(f"Lock mode must be 'read' or 'write', got {mode!r}")

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            lock = getattr(self, lock_attr)
            lock_ctx = lock.read_lock() if mode == 'read' else lock.write_lock()
            with lock_ctx:
                return func(self, *args, **kwargs)

        return wrapper
    return decorator
