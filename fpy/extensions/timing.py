"""
timers and cooperative scheduling on top of the asyncio event loop.

every timer object owns at most one pending callback: starting it again
cancels the previous registration, stopping an idle timer does nothing.
timers use the running loop unless one is passed in; any object with
`call_later`/`call_soon` returning cancellable handles will do.
"""
from __future__ import annotations
import asyncio
import logging
import time
from abc import ABC, abstractmethod
from enum import Enum
from itertools import batched
from typing import Awaitable
from ..types import *
from ..config import settings
from ..protocol import iter_

log = logging.getLogger(__name__)


def _resolve_loop(loop: Any = None) -> Any:
    return loop if loop is not None else asyncio.get_running_loop()


# --- awaitable helpers ---

async def sleep(ms: float) -> None:
    await asyncio.sleep(ms / 1000)


def next_tick(f: Callable[[], Any], loop: Any = None) -> asyncio.Handle:
    """run f at the loop's next opportunity"""
    return _resolve_loop(loop).call_soon(f)


def then(f: Callable[[T], U]) -> Callable[[Awaitable[T]], Awaitable[U]]:
    async def chained(awaitable: Awaitable[T]) -> U:
        return f(await awaitable)
    return chained


def pcatch(f: Callable[[Exception], U]) -> Callable[[Awaitable[T]], Awaitable[Union[T, U]]]:
    """recover from a failed awaitable with f(exception)"""
    async def guarded(awaitable: Awaitable[T]) -> Union[T, U]:
        try:
            return await awaitable
        except Exception as e:
            log.debug("pcatch recovering from %s: %s", type(e).__name__, e)
            return f(e)
    return guarded


async def _run_batch(f: RightAccumulator[T, U], acc: U, source: Iterator[T], size: int) -> U:
    for n, chunk in enumerate(batched(source, size), 1):
        for x in chunk:
            acc = f(x, acc)
        log.debug("batch finished chunk %d (%d items)", n, len(chunk))
        # hand control back to the loop between chunks
        await asyncio.sleep(0)
    return acc


def batch(f: RightAccumulator[T, U], seed: U, xs: Iterable[T], size: Optional[int] = None) -> Awaitable[U]:
    """
    right fold over a long sequence in fixed-size synchronous chunks, yielding to
    the event loop between chunks. the returned awaitable resolves to the final
    accumulator once the source is exhausted.
    """
    size = settings.BATCH_SIZE if size is None else size
    if size <= 0:
        raise ValueError("batch size must be positive")
    return _run_batch(f, seed, iter_(xs), size)


# --- memoised async calls ---

class CacheState(Enum):
    EMPTY = "empty"
    PENDING = "pending"
    READY = "ready"


class Cached(Generic[T]):
    """
    memoises a zero-argument async function. concurrent callers during the first
    computation share it; a failed computation leaves the cache empty again.
    """

    def __init__(self, f: Callable[[], Awaitable[T]]):
        self._f = f
        self._state = CacheState.EMPTY
        self._value: Optional[T] = None
        self._task: Optional[asyncio.Future] = None

    @property
    def state(self) -> CacheState:
        return self._state

    async def __call__(self) -> T:
        if self._state is CacheState.READY:
            return self._value
        if self._state is CacheState.EMPTY:
            self._state = CacheState.PENDING
            self._task = asyncio.ensure_future(self._f())
            log.debug("cache computing %r", self._f)

        task = self._task
        try:
            value = await task
        except Exception:
            if self._task is task:
                self._state, self._task = CacheState.EMPTY, None
            raise

        if self._task is task:
            self._state, self._value, self._task = CacheState.READY, value, None
        return value

    def clear(self) -> None:
        self._state, self._value, self._task = CacheState.EMPTY, None, None

    def __repr__(self) -> str:
        return f"Cached(state={self._state.value})"


def cache(f: Callable[[], Awaitable[T]]) -> Cached[T]:
    return Cached(f)


def benchmark(f: Callable[[int], Any], n: Optional[int] = None) -> float:
    """run f(i) n times and return the elapsed wall time in milliseconds"""
    runs = settings.BENCHMARK_RUNS if n is None else n
    start = time.perf_counter()
    for i in range(runs):
        f(i)
    elapsed = (time.perf_counter() - start) * 1000
    log.debug("benchmark %s: %d runs in %.2fms", getattr(f, '__name__', f), runs, elapsed)
    return elapsed


# --- timers ---

class _ScheduledCallback(ABC):
    def __init__(self, f: Callable[[], Any], ms: float, loop: Any = None):
        self.f = f
        self.ms = ms
        self._loop = loop
        self._handle = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def _schedule(self) -> Any:
        return _resolve_loop(self._loop).call_later(self.ms / 1000, self._fire)

    @abstractmethod
    def _fire(self) -> None:
        """react to the scheduled callback coming due"""
        pass

    def start(self):
        """(re)start, replacing any pending callback"""
        if self._handle is not None:
            self.stop()
        self._handle = self._schedule()
        log.debug("%s started (%sms)", type(self).__name__, self.ms)
        return self

    def stop(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            log.debug("%s stopped", type(self).__name__)
        return self


class Looper(_ScheduledCallback):
    """calls f every ms milliseconds until stopped"""

    def _fire(self) -> None:
        # reschedule first so f can stop the looper
        self._handle = self._schedule()
        self.f()


class Timer(_ScheduledCallback):
    """calls f once, ms milliseconds after start"""

    def _fire(self) -> None:
        self._handle = None
        self.f()


def debounce(f: Callable[[T], Any], ms: Optional[float] = None, loop: Any = None) -> Callable[[T], None]:
    """
    delay f(x) by ms milliseconds; a call arriving before the delay runs out
    replaces the pending one.
    """
    delay = settings.DEBOUNCE_MS if ms is None else ms
    pending = None

    def debounced(x: T) -> None:
        nonlocal pending
        if pending is not None:
            pending.cancel()
        pending = _resolve_loop(loop).call_later(delay / 1000, f, x)

    return debounced
