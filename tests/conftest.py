"""Pytest configuration and fixtures for macroabm tests."""

import os

import pytest

import macroabm.events  # noqa: F401 - register all events
from macroabm import logging
from macroabm.model import Model


@pytest.fixture
def clean_registry():
    """
    Save registry state, clear it for the test, then restore it.

    Request explicitly from tests that register throwaway roles/events.
    """
    # noinspection PyProtectedMember
    from macroabm.core.registry import (
        _EVENT_REGISTRY,
        _ROLE_REGISTRY,
        clear_registry,
    )

    saved_roles = dict(_ROLE_REGISTRY)
    saved_events = dict(_EVENT_REGISTRY)

    clear_registry()

    yield

    _ROLE_REGISTRY.clear()
    _ROLE_REGISTRY.update(saved_roles)
    _EVENT_REGISTRY.clear()
    _EVENT_REGISTRY.update(saved_events)


@pytest.fixture
def tiny_model() -> Model:
    """A small model for fast integration tests."""
    return Model.init(
        n_cons=6,
        n_cap=3,
        n_workers=30,
        k=3.0,
        alpha=0.5,
        r_f=0.01,
        price_k=2.0,
        wb=1.0,
    )


@pytest.fixture(autouse=True)
def mute_macroabm_logs(caplog):
    # DEBUG on the coverage run so every logging branch executes
    if os.environ.get("COVERAGE_RUN") == "true":
        level = logging.DEBUG
    else:
        level = logging.ERROR

    caplog.set_level(level, logger="macroabm")
    logging.getLogger("macroabm").setLevel(level)
