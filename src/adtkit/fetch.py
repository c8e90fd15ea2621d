"""Produce `RemoteData` values for awaitables, following the request lifecycle."""

from __future__ import annotations

import logging
from typing import AsyncIterator
from typing import Awaitable
from typing import Callable
from typing import TypeVar

from adtkit.remote_data import LOADING
from adtkit.remote_data import Failure
from adtkit.remote_data import RemoteData
from adtkit.remote_data import Success

logger = logging.getLogger(__name__)

D = TypeVar("D")


async def track(
    awaitable: Awaitable[D],
    *,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> Failure[BaseException] | Success[D]:
    """
    Await `awaitable`, returning `Success(result)` or `Failure(exception)`.

    Only exceptions matching `catch` become a `Failure`. Anything else,
    including `asyncio.CancelledError` with the default `catch`, propagates.
    """
    try:
        return Success(await awaitable)
    except catch as e:
        logger.debug("tracked awaitable failed: %r", e)
        return Failure(e)


async def transitions(
    factory: Callable[[], Awaitable[D]],
    *,
    attempts: int = 1,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> AsyncIterator[RemoteData[BaseException, D]]:
    """
    Yield the states of a request made by calling `factory`.

    Each attempt yields `Loading` followed by the attempt's `Failure` or
    `Success`. Failed attempts are retried, calling `factory` again, until one
    succeeds or `attempts` have been made. An exception raised by `factory`
    itself counts as a failed attempt.
    """
    if attempts < 1:
        raise ValueError("attempts must be >= 1")

    async def request() -> D:
        return await factory()

    for attempt in range(1, attempts + 1):
        if attempt > 1:
            logger.debug("retrying request, attempt %d of %d", attempt, attempts)
        yield LOADING
        result = await track(request(), catch=catch)
        yield result
        if isinstance(result, Success):
            return
