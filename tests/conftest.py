# tests/conftest.py
import pytest

import dimensional.units.registry as regmod
from dimensional.units.registry import DEFAULT_REGISTRY as _ureg


@pytest.fixture(scope="session")
def ureg():
    return _ureg


@pytest.fixture()
def reg():
    """Fresh, fully-bootstrapped UnitsRegistry for isolation per test."""
    return regmod._bootstrap_default_registry()


@pytest.fixture()
def patched_default(monkeypatch, reg):
    """Temporarily replace DEFAULT_REGISTRY with an isolated instance."""
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", reg)
    yield reg
