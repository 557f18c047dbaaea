"""Tests for ResourcePool depletion and replenishment."""
from __future__ import annotations

import pytest

from config import FUEL, HUNGER, RESOURCE_DEPLETION_DISTANCE, RESOURCE_KINDS, SLEEP
from haul.resources import ResourcePool


def test_starts_full():
    pool = ResourcePool()
    assert pool.levels == {FUEL: 100.0, HUNGER: 100.0, SLEEP: 100.0}
    assert not pool.is_exhausted()


def test_depletion_is_asymmetric_by_kind():
    pool = ResourcePool()
    pool.deplete(100.0)

    assert pool.fuel == pytest.approx(90.0)
    assert pool.hunger == pytest.approx(100.0 - 100.0 / 1500 * 100)
    assert pool.sleep == pytest.approx(92.0)
    assert pool.fuel < pool.sleep < pool.hunger


def test_full_depletion_distance_empties_each_resource():
    for kind in RESOURCE_KINDS:
        pool = ResourcePool()
        pool.deplete(RESOURCE_DEPLETION_DISTANCE[kind])
        assert pool.levels[kind] == pytest.approx(0.0, abs=1e-9)
        assert pool.is_exhausted()


def test_levels_never_go_negative():
    pool = ResourcePool()
    pool.deplete(5000.0)
    assert all(level == 0.0 for level in pool.levels.values())
    assert pool.exhausted_kind() == FUEL


def test_replenish_caps_at_hundred():
    pool = ResourcePool()
    pool.levels[SLEEP] = 95.0
    assert pool.replenish(SLEEP, 20.0) == 100.0
    assert pool.is_full(SLEEP)


def test_exactly_zero_counts_as_exhausted():
    pool = ResourcePool()
    pool.fuel = 0.0
    assert pool.is_exhausted()
    assert pool.exhausted_kind() == FUEL


def test_reset_refills_everything():
    pool = ResourcePool()
    pool.deplete(800.0)
    pool.reset()
    assert all(level == 100.0 for level in pool.levels.values())


def test_custom_depletion_distances():
    pool = ResourcePool({FUEL: 10.0, HUNGER: 20.0, SLEEP: 40.0})
    pool.deplete(5.0)
    assert pool.levels == pytest.approx({FUEL: 50.0, HUNGER: 75.0, SLEEP: 87.5})
