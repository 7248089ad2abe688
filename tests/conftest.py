"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass
from datetime import datetime

from recordkit import ConstraintViolationError, RecordBase, record
from recordkit.config import settings as settings_module


@record
@dataclass(frozen=True, slots=True)
class FixtureCounter:
    count: int = 0
    label: str = "x"


@record
@dataclass(frozen=True)
class FixtureReading:
    value: float = 0.0
    recorded_at: datetime = datetime.min

    def validate(self, candidate: "FixtureReading") -> None:
        # recorded_at is stamped by storage, never by callers
        if candidate.recorded_at > datetime.min:
            raise ConstraintViolationError("recorded_at cannot be changed")


class FixtureAccount(RecordBase):
    __slots__ = ("_balance", "_owner")

    def __init__(self, balance: int = 0, owner: str = "") -> None:
        self._balance = balance
        self._owner = owner

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def is_overdrawn(self) -> bool:
        return self._balance < 0


@pytest.fixture
def counter_cls():
    return FixtureCounter


@pytest.fixture
def reading_cls():
    return FixtureReading


@pytest.fixture
def account_cls():
    return FixtureAccount


@pytest.fixture
def configure_settings(monkeypatch):
    """Replace process-wide settings for one test."""

    def _configure(**overrides):
        new = settings_module.RecordKitSettings(_env_file=None, **overrides)
        monkeypatch.setattr(settings_module, "_settings", new)
        return new

    return _configure
