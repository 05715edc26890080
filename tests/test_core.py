"""Tests for core utilities: Clock, value types, errors."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from layered.core.clock import DEFAULT_FIXED_TIME, FixedClock, SystemClock
from layered.core.errors import LayeredError, StorageError, UserNotFoundError
from layered.core.types import Email, Name


# ---- Clock ----

def test_system_clock_is_timezone_aware():
    ts = SystemClock().now()
    assert ts.tzinfo is not None
    assert ts.utcoffset() is not None


def test_system_clock_tracks_wall_clock():
    before = datetime.now().astimezone()
    ts = SystemClock().now()
    after = datetime.now().astimezone()
    assert before <= ts <= after


def test_fixed_clock_default():
    clock = FixedClock()
    assert clock.now() == DEFAULT_FIXED_TIME
    assert clock.now().utcoffset() == timedelta(hours=9)


def test_fixed_clock_stable_across_calls():
    clock = FixedClock()
    assert len({clock.now() for _ in range(10)}) == 1


def test_fixed_clock_from_iso():
    clock = FixedClock.from_iso("2020-01-02T03:04:05+00:00")
    assert clock.now() == datetime(2020, 1, 2, 3, 4, 5, tzinfo=clock.now().tzinfo)
    assert clock.now().utcoffset() == timedelta(0)


def test_fixed_clock_from_bad_iso():
    with pytest.raises(ValueError):
        FixedClock.from_iso("not a timestamp")


# ---- Name / Email ----

def test_name_is_hashable_and_equal_by_value():
    assert Name("a") == Name("a")
    assert len({Name("a"), Name("a"), Name("b")}) == 2


def test_name_ordering():
    assert sorted([Name("b"), Name("c"), Name("a")]) == [Name("a"), Name("b"), Name("c")]


def test_name_is_immutable():
    name = Name("a")
    with pytest.raises(AttributeError):
        name.name = "b"


def test_str_of_value_types():
    assert str(Name("user_a")) == "user_a"
    assert str(Email("user_a@example.com")) == "user_a@example.com"


# ---- Errors ----

def test_error_hierarchy():
    assert issubclass(UserNotFoundError, LayeredError)
    assert issubclass(StorageError, LayeredError)


def test_user_not_found_carries_name():
    err = UserNotFoundError(Name("ghost"))
    assert err.name == Name("ghost")
    assert "ghost" in str(err)
