"""Shared fixtures for the Encrypto test suite."""

import dataclasses

import pytest

from encrypto.security import params


@pytest.fixture
def fast_kdf(monkeypatch):
    """
    Swap the version-2 suite for one with tiny Argon2 costs.

    Only the costs change; sizes and the envelope layout stay the same, so
    tests that derive many keys exercise the same code paths quickly.
    """
    fast = dataclasses.replace(
        params.SUITES[params.CURRENT_VERSION],
        time_cost=1,
        memory_cost=64,
        parallelism=1,
    )
    monkeypatch.setitem(params.SUITES, params.CURRENT_VERSION, fast)
    return fast
