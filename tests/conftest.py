"""Shared fixtures for rfcuuid tests."""

import random
from collections.abc import Callable, Iterable

import pytest


class ScriptedRandom(random.Random):
    """Random source whose random() replays a fixed script, cycling."""

    def __init__(self, values: Iterable[float]):
        super().__init__(0)
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class FakeClock:
    """Settable millisecond clock."""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for random sources returning the given floats in order."""

    def factory(*values: float) -> ScriptedRandom:
        return ScriptedRandom(values)

    return factory


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock starting at 2024-01-01T00:00:00Z."""
    return FakeClock(1_704_067_200_000)
