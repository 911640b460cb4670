"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def register():
    """Provide a private MemoryRegister."""
    from deskcalc import MemoryRegister

    return MemoryRegister()


@pytest.fixture
def calculator(register):
    """Provide a fresh CalculatorState wired to a private register."""
    from deskcalc import CalculatorState

    return CalculatorState(memory=register)


@pytest.fixture
def shared_memory():
    """Provide the process-wide register, zeroed before and after the test."""
    from deskcalc import default_register

    shared = default_register()
    shared.clear()
    yield shared
    shared.clear()


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test numbers."""
    return [
        0,
        1,
        -1,
        0.5,
        -0.5,
        100,
        -100,
        1e10,
        -1e10,
        1e-10,
        -1e-10,
        0.1 + 0.2,  # Floating point edge case
    ]
