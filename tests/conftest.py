"""Pytest fixtures shared by the test suite."""

from __future__ import annotations

import os

# Set environment variables BEFORE importing the package so config getters
# never fall back to a developer's real .env values.
os.environ.setdefault("OPENROUTER_API_KEY", "test-openrouter-key")
os.environ.setdefault("GENERATION_MODEL_NAME", "test/model")
os.environ.setdefault("OPENROUTER_CHAT_ENDPOINT", "https://llm.test/v1/chat/completions")

import itertools
from collections.abc import Callable
from pathlib import Path

import pytest

from tests.helpers import FakeHumanizer
from text_humanizer.rate_limit import RateLimiter


@pytest.fixture
def fake_humanizer() -> FakeHumanizer:
    return FakeHumanizer()


@pytest.fixture
def ticking_clock() -> Callable[[], float]:
    """Clock that advances 5 seconds on every read."""
    counter = itertools.count(start=1000, step=5)
    return lambda: float(next(counter))


@pytest.fixture
def limiter(ticking_clock: Callable[[], float]) -> RateLimiter:
    return RateLimiter(limit=10, window=60, min_interval=0, clock=ticking_clock)


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HUMANIZER_DATA_DIR", str(tmp_path))
    return tmp_path
