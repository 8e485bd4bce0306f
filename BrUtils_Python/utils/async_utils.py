import asyncio
from typing import Callable, Optional


async def delay(ms: float, callback: Optional[Callable[[], object]] = None) -> None:
    """Sleep for `ms` milliseconds, then run the optional callback."""
    await asyncio.sleep(ms / 1000)
    if callable(callback):
        callback()
