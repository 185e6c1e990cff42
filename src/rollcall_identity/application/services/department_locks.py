"""Per-department serialization of head identifier allocation."""

import asyncio

from rollcall_identity.domain.account import HeadIdentifierSequence


class DepartmentLockRegistry:
    """Hand out one ``asyncio.Lock`` per department code.

    Holding the lock across read, compute and write keeps two concurrent
    creations in the same process from computing the same next identifier.
    Departments that map to the same code (e.g. "Physics" and "Phy") share a
    lock because they share an identifier space.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    def lock_for(self, department: str | None) -> asyncio.Lock:
        code = HeadIdentifierSequence.department_code(department)
        lock = self._locks.get(code)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[code] = lock
        return lock
