"""Bridge futures to ``(error, value)`` style callbacks.

Usage:
    from hookkit.promisify import future_to_callback

    def on_done(error, value=None):
        ...

    future_to_callback(task)(on_done)
    result = await task  # the task still resolves normally

The callback is attached as a done-callback, so it runs from the event loop
(or, for ``concurrent.futures.Future``, from the thread that settled it)
after the future settles. An exception raised by the callback goes to the
loop's exception handler, never to code awaiting the future.
"""

import asyncio
import concurrent.futures
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

# Completion callback signature: callback(error) or callback(None, value)
Callback = Callable[..., Any]


def future_to_callback(
    future: asyncio.Future | concurrent.futures.Future,
) -> Callable[[Callback], None]:
    """Return a function that subscribes a callback to ``future``'s settlement.

    Args:
        future: An asyncio Future/Task or a concurrent.futures.Future.
            Bare coroutines are rejected: they can be awaited only once, so
            subscribing would take the result away from their owner.

    Returns:
        ``subscribe(callback)``. On success the callback receives
        ``(None, value)``; on failure ``(error,)``; on cancellation
        ``(CancelledError(),)``. It is called exactly once per subscription.

    Raises:
        TypeError: If ``future`` has no ``add_done_callback``
    """
    if not hasattr(future, "add_done_callback"):
        raise TypeError(
            f"Expected a Future or Task, got {type(future).__name__}; "
            "wrap coroutines with asyncio.ensure_future() and keep the Task"
        )

    def subscribe(callback: Callback) -> None:
        def on_done(settled: Any) -> None:
            if settled.cancelled():
                logger.debug("Future %r was cancelled", settled)
                callback(asyncio.CancelledError())
                return
            error = settled.exception()
            if error is not None:
                callback(error)
            else:
                callback(None, settled.result())

        future.add_done_callback(on_done)

    return subscribe
