"""Tests for delivery contracts and payouts."""
from __future__ import annotations

import random

import pytest

from haul.ledger import DeliveryLedger


class _ScriptedRng:
    """Returns a fixed tier roll and always the low end of the tier."""

    def __init__(self, roll: float) -> None:
        self.roll = roll

    def random(self) -> float:
        return self.roll

    def randrange(self, low: int, high: int) -> int:
        return low


@pytest.mark.parametrize(
    "roll, expected",
    [(0.0, 100), (0.59, 100), (0.6, 800), (0.89, 800), (0.9, 1500), (0.999, 1500)],
)
def test_tier_boundaries(roll, expected):
    ledger = DeliveryLedger(_ScriptedRng(roll))
    assert ledger.contract.target == expected


def test_new_contract_starts_with_full_remaining():
    ledger = DeliveryLedger(random.Random(1))
    assert ledger.contract.remaining == ledger.contract.target
    assert isinstance(ledger.contract.target, int)


def test_distribution_is_right_skewed():
    ledger = DeliveryLedger(random.Random(11))
    draws = [ledger.draw_distance() for _ in range(5000)]

    assert all(100 <= d < 2800 for d in draws)
    short = sum(1 for d in draws if d < 800) / len(draws)
    medium = sum(1 for d in draws if 800 <= d < 1500) / len(draws)
    long_haul = sum(1 for d in draws if d >= 1500) / len(draws)
    assert short == pytest.approx(0.6, abs=0.03)
    assert medium == pytest.approx(0.3, abs=0.03)
    assert long_haul == pytest.approx(0.1, abs=0.02)


def test_no_payout_while_miles_remain():
    ledger = DeliveryLedger(random.Random(2))
    ledger.advance(ledger.contract.target - 0.5)
    assert ledger.try_settle() == 0
    assert ledger.money == 0


def test_settle_pays_original_target_not_overshoot():
    ledger = DeliveryLedger(random.Random(3))
    target = ledger.contract.target
    ledger.advance(target + 37.25)

    assert ledger.try_settle() == target
    assert ledger.money == target
    assert ledger.completed == 1
    assert ledger.contract.remaining == ledger.contract.target


def test_money_over_many_settlements_matches_sum_of_targets():
    ledger = DeliveryLedger(random.Random(4))
    overshoots = [0.0, 0.01, 12.5, 300.0, 0.5, 999.0]
    expected = 0
    for overshoot in overshoots:
        expected += ledger.contract.target
        ledger.advance(ledger.contract.target + overshoot)
        ledger.try_settle()

    assert ledger.money == expected
    assert ledger.completed == len(overshoots)


def test_reset_clears_money_and_draws_contract():
    ledger = DeliveryLedger(random.Random(5))
    ledger.advance(5000)
    ledger.try_settle()
    ledger.reset()
    assert ledger.money == 0
    assert ledger.completed == 0
    assert ledger.contract.remaining == ledger.contract.target
