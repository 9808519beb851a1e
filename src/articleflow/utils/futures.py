"""Promise-style continuations for asyncio futures.

``then`` and ``catch`` each return a new future, so a workflow can be written
as a chain without a coroutine driving it::

    catch(then(then(connect(), fetch), create), on_error)

A continuation may return a plain value or another future; a returned future
is adopted and the chain settles with its outcome.
"""

import asyncio
from collections.abc import Callable
from typing import Any


def then(future: asyncio.Future, on_fulfilled: Callable[[Any], Any]) -> asyncio.Future:
    """Run ``on_fulfilled`` with the result of ``future`` once it succeeds.

    A failed ``future`` skips ``on_fulfilled`` and the returned future fails
    with the same exception.
    """
    chained = future.get_loop().create_future()

    def _settle(source: asyncio.Future) -> None:
        if source.cancelled():
            chained.cancel()
            return
        exc = source.exception()
        if exc is not None:
            chained.set_exception(exc)
            return
        try:
            outcome = on_fulfilled(source.result())
        except Exception as e:
            chained.set_exception(e)
            return
        _resolve(chained, outcome)

    future.add_done_callback(_settle)
    return chained


def catch(future: asyncio.Future, on_rejected: Callable[[BaseException], Any]) -> asyncio.Future:
    """Run ``on_rejected`` with the exception of ``future`` if it fails.

    A successful ``future`` passes its result through untouched.
    """
    chained = future.get_loop().create_future()

    def _settle(source: asyncio.Future) -> None:
        if source.cancelled():
            chained.cancel()
            return
        exc = source.exception()
        if exc is None:
            chained.set_result(source.result())
            return
        try:
            outcome = on_rejected(exc)
        except Exception as e:
            chained.set_exception(e)
            return
        _resolve(chained, outcome)

    future.add_done_callback(_settle)
    return chained


def _resolve(target: asyncio.Future, outcome: Any) -> None:
    if not asyncio.isfuture(outcome):
        target.set_result(outcome)
        return

    def _adopt(inner: asyncio.Future) -> None:
        if inner.cancelled():
            target.cancel()
        elif inner.exception() is not None:
            target.set_exception(inner.exception())
        else:
            target.set_result(inner.result())

    outcome.add_done_callback(_adopt)
