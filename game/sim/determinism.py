"""
Determinism helpers.

Goals:
- Thread an explicit seed through every random draw (no hidden global RNG)
- Compose draws into bigger generators while keeping their order fixed
- Provide stable sub-seeds derived from a base seed (avoid hidden coupling between drivers)

Non-goals:
- Cryptographic security
- Perfect cross-language reproducibility (this is Python's Mersenne Twister)

A `SeededValue` is a computation `seed -> (value, next_seed)`. Running the same
composition from the same seed always yields the same value and the same next seed.
"""

from __future__ import annotations

import functools
import random
import zlib
from typing import Any, Callable, Generator, Generic, Iterable, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Seed = int

_SEED_MASK = 0xFFFFFFFF
_BASE_SEED: Seed = 1


def normalize_seed(seed: int) -> Seed:
    return int(seed) & _SEED_MASK


def set_sim_seed(seed: int) -> None:
    """Set the base seed used by the game loop and tooling."""
    global _BASE_SEED
    _BASE_SEED = normalize_seed(seed)


def get_sim_seed() -> Seed:
    return _BASE_SEED


def derive_seed(seed: Seed, tag: str) -> Seed:
    """
    Independent sub-seed for `tag`.

    Parallel drivers must each take their own derived seed rather than share one.
    """
    # Use stable hashing (NEVER Python's built-in hash(), which is randomized per process).
    crc = zlib.crc32(str(tag).encode("utf-8")) & _SEED_MASK
    return (normalize_seed(seed) ^ crc) & _SEED_MASK


class SeededValue(Generic[T]):
    """A deterministic random computation producing a `T`."""

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[Seed], Tuple[T, Seed]]):
        self._run = run

    def run(self, seed: Seed) -> Tuple[T, Seed]:
        return self._run(normalize_seed(seed))

    def eval(self, seed: Seed) -> T:
        return self.run(seed)[0]

    def map(self, fn: Callable[[T], U]) -> "SeededValue[U]":
        def _run(seed: Seed) -> Tuple[U, Seed]:
            value, seed = self._run(seed)
            return fn(value), seed

        return SeededValue(_run)

    def bind(self, fn: Callable[[T], "SeededValue[U]"]) -> "SeededValue[U]":
        def _run(seed: Seed) -> Tuple[U, Seed]:
            value, seed = self._run(seed)
            return fn(value)._run(seed)

        return SeededValue(_run)


def pure(value: T) -> SeededValue[T]:
    """Wrap a plain value; consumes no entropy and passes the seed through."""
    return SeededValue(lambda seed: (value, seed))


def _draw(sample: Callable[[random.Random], T]) -> SeededValue[T]:
    def _run(seed: Seed) -> Tuple[T, Seed]:
        rng = random.Random(seed)
        value = sample(rng)
        return value, rng.getrandbits(32)

    return SeededValue(_run)


def rand_int(lo: int, hi: int) -> SeededValue[int]:
    """Integer in [lo, hi], both ends included."""
    return _draw(lambda rng: rng.randint(int(lo), int(hi)))


def rand_float(lo: float, hi: float) -> SeededValue[float]:
    """Uniform float between lo and hi."""
    return _draw(lambda rng: rng.uniform(float(lo), float(hi)))


def sequence(values: Iterable[SeededValue[T]]) -> SeededValue[list[T]]:
    """Run computations left to right, collecting their results."""
    items = list(values)

    def _run(seed: Seed) -> Tuple[list[T], Seed]:
        out: list[T] = []
        for sv in items:
            value, seed = sv._run(seed)
            out.append(value)
        return out, seed

    return SeededValue(_run)


def replicate(n: int, value: SeededValue[T]) -> SeededValue[list[T]]:
    """Run the same computation `n` times; each run gets the previous run's seed."""
    return sequence([value] * max(0, int(n)))


def seeded(fn: Callable[..., Generator[SeededValue[Any], Any, T]]) -> Callable[..., SeededValue[T]]:
    """
    Write a generator as straight-line code.

    Inside the decorated generator function, `x = yield some_seeded_value` runs the
    computation and binds its result; the function's `return` value becomes the
    result of the whole computation. Equivalent to a chain of `bind` calls.
    """

    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> SeededValue[T]:
        def _run(seed: Seed) -> Tuple[T, Seed]:
            gen = fn(*args, **kwargs)
            try:
                step = next(gen)
                while True:
                    value, seed = step._run(seed)
                    step = gen.send(value)
            except StopIteration as stop:
                return stop.value, seed

        return SeededValue(_run)

    return wrapper
