"""Future creation with explicit resolvers.

The succession hand-off is exposed as a ``concurrent.futures.Future``: it
supports callback registration, blocking ``result()`` and can be awaited from
asyncio code through ``asyncio.wrap_future``.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class MissingResolversError(RuntimeError):
    """Raised when a future factory produces futures that cannot be resolved."""

    pass


@dataclass(frozen=True)
class FutureWithResolvers(Generic[T]):
    """A future together with the callables that settle it."""

    future: Future[T]
    resolve: Callable[[T], None]
    reject: Callable[[BaseException], None]


def create_future_with_resolvers(
    factory: Callable[[], Any] = Future,
) -> FutureWithResolvers[Any]:
    """Create a future and expose its resolve/reject callables.

    Args:
        factory: Zero-argument callable building the future. Defaults to
            ``concurrent.futures.Future``.

    Returns:
        FutureWithResolvers bundling the future and its resolvers

    Raises:
        MissingResolversError: If the produced object has no callable
            ``set_result``/``set_exception``.
    """
    future = factory()
    resolve = getattr(future, "set_result", None)
    reject = getattr(future, "set_exception", None)

    if not callable(resolve) or not callable(reject):
        raise MissingResolversError(
            f"{type(future).__name__} does not provide set_result/set_exception"
        )

    return FutureWithResolvers(future=future, resolve=resolve, reject=reject)
