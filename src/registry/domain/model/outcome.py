"""Three-way lookup outcomes and the functions that compose them.

An ``Outcome[T]`` is exactly one of:

* ``Absent``  - nothing to return (bad input, or nothing stored)
* ``Found``   - a value was produced
* ``Failed``  - something broke; carries the original exception

Steps are chained with ``bind`` / ``bind_async`` / ``chain``. Once a step
yields ``Absent`` or ``Failed`` every later step is skipped and that
outcome is the result. An exception raised inside a step is captured as
``Failed`` at that step, so a broken step can never be mistaken for an
empty one.

Only ``Exception`` is captured. ``asyncio.CancelledError`` and other
``BaseException`` subclasses propagate untouched.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class Absent:
    """No value could be produced."""


@dataclass(frozen=True)
class Found(Generic[T]):
    """A value was produced."""

    value: T


@dataclass(frozen=True)
class Failed:
    """An operational error occurred. ``error`` is the exception as raised."""

    error: Exception


Outcome = Union[Absent, Found[T], Failed]

ABSENT = Absent()


# --- Constructors -------------------------------------------------------------


def from_optional(value: T | None) -> Outcome[T]:
    """Lift an optional value: None becomes Absent, anything else Found."""
    if value is None:
        return ABSENT
    return Found(value)


async def capture(awaitable: Awaitable[T | None]) -> Outcome[T]:
    """Await *awaitable* and classify how it terminated."""
    try:
        value = await awaitable
    except Exception as exc:
        return Failed(exc)
    return from_optional(value)


# --- Composition --------------------------------------------------------------


def bind(outcome: Outcome[T], step: Callable[[T], Outcome[U]]) -> Outcome[U]:
    if not isinstance(outcome, Found):
        return outcome
    try:
        return step(outcome.value)
    except Exception as exc:
        return Failed(exc)


async def bind_async(
    outcome: Outcome[T], step: Callable[[T], Awaitable[Outcome[U]]]
) -> Outcome[U]:
    """Asynchronous ``bind``: *step* is a coroutine function.

    The step is only called (and awaited) when *outcome* is Found.
    """
    if not isinstance(outcome, Found):
        return outcome
    try:
        return await step(outcome.value)
    except Exception as exc:
        return Failed(exc)


async def chain(
    outcome: Outcome[Any], *steps: Callable[[Any], Awaitable[Outcome[Any]]]
) -> Outcome[Any]:
    """Run *steps* in order with ``bind_async``, stopping at the first non-Found."""
    current: Outcome[Any] = outcome
    for step in steps:
        if not isinstance(current, Found):
            break
        current = await bind_async(current, step)
    return current


def map_found(outcome: Outcome[T], fn: Callable[[T], U]) -> Outcome[U]:
    return bind(outcome, lambda value: Found(fn(value)))


def where(outcome: Outcome[T], predicate: Callable[[T], bool]) -> Outcome[T]:
    """Keep a Found value only if *predicate* holds; otherwise Absent."""
    return bind(outcome, lambda value: outcome if predicate(value) else ABSENT)


# --- Elimination --------------------------------------------------------------


def match(
    outcome: Outcome[T],
    *,
    absent: Callable[[], R],
    found: Callable[[T], R],
    failed: Callable[[Exception], R],
) -> R:
    """Fold an outcome into a single value, one callback per tag."""
    if isinstance(outcome, Found):
        return found(outcome.value)
    if isinstance(outcome, Failed):
        return failed(outcome.error)
    if isinstance(outcome, Absent):
        return absent()
    raise TypeError(f"Not an outcome: {outcome!r}")
