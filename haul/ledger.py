"""Delivery contracts and the money they pay."""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from config import DELIVERY_TIERS
from haul.entities import DeliveryContract

log = logging.getLogger(__name__)


class DeliveryLedger:
    """Tracks the active contract and settles it when its miles run out.

    A settled contract pays its full original length in dollars; any overshoot
    past the drop-off is neither charged nor carried into the next contract.
    """

    def __init__(self, rng: random.Random, tiers: Optional[List[Tuple[float, int, int]]] = None) -> None:
        self.rng = rng
        self.tiers = tiers or DELIVERY_TIERS
        self.money: int = 0
        self.completed: int = 0
        self.contract = self.initial_new_contract()

    def reset(self) -> None:
        self.money = 0
        self.completed = 0
        self.contract = self.initial_new_contract()

    def draw_distance(self) -> int:
        roll = self.rng.random()
        for cumulative, low, high in self.tiers:
            if roll < cumulative:
                return self.rng.randrange(low, high)
        _, low, high = self.tiers[-1]
        return self.rng.randrange(low, high)

    def initial_new_contract(self) -> DeliveryContract:
        target = self.draw_distance()
        self.contract = DeliveryContract(target=target, remaining=float(target))
        return self.contract

    def advance(self, distance_delta: float) -> float:
        self.contract.remaining -= distance_delta
        return self.contract.remaining

    def try_settle(self) -> int:
        """Pay out the active contract if it is done; return the amount paid."""
        if self.contract.remaining > 0:
            return 0
        payout = self.contract.target
        self.money += payout
        self.completed += 1
        self.initial_new_contract()
        log.info("Delivery complete: +$%d (next run %d mi)", payout, self.contract.target)
        return payout
