import asyncio

from ...domain.constants.storage_constants import CACHE_MUTEX_SPIN_SECONDS


class BusyWaitMutex:
    """
    Spin-wait lock on a boolean flag for one event loop.

    Checking and setting the flag happen without an await in between, so
    coroutines of the same process cannot both acquire it. It offers no
    protection across processes or devices, and it is not re-entrant.
    """

    def __init__(self, spin_seconds: float = CACHE_MUTEX_SPIN_SECONDS) -> None:
        self._spin_seconds = spin_seconds
        self._is_writing = False

    @property
    def locked(self) -> bool:
        return self._is_writing

    async def acquire(self) -> None:
        while self._is_writing:
            await asyncio.sleep(self._spin_seconds)
        self._is_writing = True

    def release(self) -> None:
        self._is_writing = False

    async def __aenter__(self) -> "BusyWaitMutex":
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.release()
