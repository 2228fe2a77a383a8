import pytest

from feap.tick import (
    CHECK_TICK_THRESHOLD,
    MAX_CHANGE_AGE,
    CheckChangeTicks,
    ComponentTicks,
    Tick,
)


def test_default_tick_is_zero():
    assert Tick() == Tick(0)


def test_max_tick_matches_max_change_age():
    assert Tick(MAX_CHANGE_AGE) == Tick.MAX
    assert Tick(0).relative_to(Tick(2 * CHECK_TICK_THRESHOLD)) == Tick.MAX


def test_relative_to_subtracts():
    assert Tick(100).relative_to(Tick(40)) == Tick(60)


def test_relative_to_wraps_below_zero():
    assert Tick(0).relative_to(Tick(1)) == Tick(0xFFFFFFFF)


def test_relative_to_round_trip():
    base = Tick(4_000_000_000)
    later = Tick(5)
    age = later.relative_to(base)
    assert later.relative_to(age) == base


@pytest.mark.parametrize("value", [-1, 2**32])
def test_out_of_range_tick_is_rejected(value):
    with pytest.raises(ValueError):
        Tick(value)


def test_present_tick_returns_a_copy():
    check = CheckChangeTicks(Tick(9))
    present = check.present_tick()
    present.tick = 1
    assert check.present_tick() == Tick(9)


def test_recent_tick_is_left_alone():
    tick = Tick(50)
    assert tick.check_tick(CheckChangeTicks(Tick(60))) is False
    assert tick == Tick(50)


def test_tick_exactly_at_max_age_is_left_alone():
    tick = Tick(0)
    assert tick.check_tick(CheckChangeTicks(Tick(MAX_CHANGE_AGE))) is False
    assert tick == Tick(0)


def test_old_tick_is_clamped():
    tick = Tick(0)
    check = CheckChangeTicks(Tick(MAX_CHANGE_AGE + 10))
    assert tick.check_tick(check) is True
    assert tick == Tick(10)
    assert check.present_tick().relative_to(tick) == Tick.MAX


def test_clamped_tick_is_stable_on_recheck():
    tick = Tick(3)
    check = CheckChangeTicks(Tick((MAX_CHANGE_AGE + 1000) & 0xFFFFFFFF))
    tick.check_tick(check)
    assert tick.check_tick(check) is False


def test_component_ticks_hold_both_ticks():
    ticks = ComponentTicks(added=Tick(1), changed=Tick(2))
    check = CheckChangeTicks(Tick(MAX_CHANGE_AGE + 5))
    assert ticks.added.check_tick(check) is True
    assert ticks.changed.check_tick(check) is True
    assert ticks.added == ticks.changed