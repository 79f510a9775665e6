"""Pytest fixtures for cancersim tests."""

import pytest


class ScriptedRandom:
    """Random source that returns preset values in order and records draws."""

    def __init__(self, values, default=None):
        self.values = list(values)
        self.default = default
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        if self.values:
            return self.values.pop(0)
        if self.default is None:
            raise AssertionError(f"Unexpected random draw #{self.draws}")
        return self.default


@pytest.fixture
def always_zero() -> ScriptedRandom:
    """Random source that always draws 0.0, below every threshold."""
    return ScriptedRandom([], default=0.0)


@pytest.fixture
def always_high() -> ScriptedRandom:
    """Random source that always draws 0.99, above every rule threshold."""
    return ScriptedRandom([], default=0.99)


@pytest.fixture
def no_draws() -> ScriptedRandom:
    """Random source that fails the test if it is ever drawn from."""
    return ScriptedRandom([])


@pytest.fixture
def scripted():
    """Factory for random sources with a fixed draw sequence."""
    return ScriptedRandom
