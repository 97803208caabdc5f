"""Readers-writer lock guarding ResourceTable access.

Lookups and validation passes are readers; imports are writers. The access
pattern is read-mostly (many lookups, an occasional bulk re-import), so:

- Any number of threads may read concurrently
- A writer gets exclusive access and is preferred over new readers
- A thread may re-enter the read lock it already holds
- Acquisition accepts an optional timeout (raises TimeoutError)

Prohibited transitions (raise RuntimeError instead of deadlocking):
    read -> write   upgrade: the writer would wait for its own read lock
    write -> read   downgrade: table writers never read-validate mid-import
    write -> write  reentrancy: a nested import is a programming error

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     with lock.read():  # reentrant
        ...         pass
        >>> with lock.write(timeout=1.0):
        ...     pass
    """

    __slots__ = ("_condition", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        # thread ident -> reentrant read depth
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the shared lock for the duration of the block.

        Args:
            timeout: Seconds to wait; None waits forever, 0.0 never blocks

        Raises:
            RuntimeError: If the calling thread holds the write lock
            TimeoutError: If the lock was not acquired in time
            ValueError: If timeout is negative
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the exclusive lock for the duration of the block.

        Args:
            timeout: Seconds to wait; None waits forever, 0.0 never blocks

        Raises:
            RuntimeError: If the calling thread holds any lock already
            TimeoutError: If the lock was not acquired in time
            ValueError: If timeout is negative
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    @property
    def reader_count(self) -> int:
        """Distinct threads holding the read lock (reentrancy counts once)."""
        with self._condition:
            return len(self._readers)

    @property
    def writer_active(self) -> bool:
        with self._condition:
            return self._writer is not None

    @property
    def writers_waiting(self) -> int:
        """Writers blocked in acquisition. Non-zero also blocks new readers."""
        with self._condition:
            return self._waiting_writers

    def _acquire_read(self, timeout: float | None) -> None:
        deadline = _deadline(timeout)
        me = threading.get_ident()

        with self._condition:
            depth = self._readers.get(me)
            if depth is not None:
                self._readers[me] = depth + 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)

            self._wait_until(
                lambda: self._writer is None and self._waiting_writers == 0,
                deadline,
                "read",
            )
            self._readers[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._readers.get(me)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if depth > 1:
                self._readers[me] = depth - 1
                return
            del self._readers[me]
            if not self._readers:
                self._condition.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        deadline = _deadline(timeout)
        me = threading.get_ident()

        with self._condition:
            if me in self._readers:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                self._wait_until(
                    lambda: self._writer is None and not self._readers,
                    deadline,
                    "write",
                )
                self._writer = me
            finally:
                # Readers wait on _waiting_writers; a timed-out writer must wake them.
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._condition.notify_all()

    def _wait_until(
        self, predicate: Callable[[], bool], deadline: float | None, mode: str
    ) -> None:
        """Wait on the condition until predicate holds. Caller holds the condition."""
        while not predicate():
            if deadline is None:
                self._condition.wait()
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                msg = f"Timed out waiting for {mode} lock"
                raise TimeoutError(msg)
            self._condition.wait(timeout=remaining)


def _deadline(timeout: float | None) -> float | None:
    if timeout is None:
        return None
    if timeout < 0:
        msg = f"Timeout must be non-negative, got {timeout}"
        raise ValueError(msg)
    return time.monotonic() + timeout
