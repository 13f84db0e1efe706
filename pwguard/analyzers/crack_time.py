"""
Crack-Time Estimator
=====================

Projects the smart-attack keyspace onto three attacker profiles and
renders the result as a short human-readable duration.

Default rates (guesses per second), configurable under ``[strength]``:

    online        1e3    throttled login endpoint, distributed botnet
    offline       1e11   stolen hash database, single modern GPU rig
    offline_fast  1e13   fast unsalted hash on a cloud / ASIC cluster

The average attacker succeeds halfway through the keyspace, so the
projection divides ``max(1, keyspace / 2)`` by the rate.

References:
    - Hashcat benchmark results, https://hashcat.net/
    - NIST SP 800-63B (2017), Section 5.2.2 Rate Limiting.
"""

from __future__ import annotations

import math
from typing import Optional

from pwguard.core.models import AttackScenario, CrackTimeEstimate, CrackTimes
from shared.config import StrengthConfig

_MINUTE = 60.0
_HOUR = 60.0
_DAY = 24.0
_MONTH_DAYS = 30.0
_YEAR_MONTHS = 12.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_crack_time(seconds: float) -> str:
    """Render *seconds* as a rounded duration.

    >>> format_crack_time(0.2)
    'instantly'
    >>> format_crack_time(90)
    '2 minutes'
    """
    if seconds < 1:
        return "instantly"
    if math.isinf(seconds):
        return "forever"

    if seconds < 60:
        return _plural(_round_half_up(seconds), "second")

    minutes = seconds / _MINUTE
    if minutes < 60:
        return _plural(_round_half_up(minutes), "minute")

    hours = minutes / _HOUR
    if hours < 24:
        return _plural(_round_half_up(hours), "hour")

    days = hours / _DAY
    if days < 30:
        return _plural(_round_half_up(days), "day")

    months = days / _MONTH_DAYS
    if months < 12:
        return _plural(_round_half_up(months), "month")

    years = months / _YEAR_MONTHS
    if years < 1e3:
        return _plural(_round_half_up(years), "year")
    if years < 1e6:
        return _plural(_round_half_up(years / 1e3), "thousand year")
    if years < 1e9:
        return _plural(_round_half_up(years / 1e6), "million year")
    return _plural(_round_half_up(years / 1e9), "billion year")


class CrackTimeEstimator:
    """Converts a keyspace into per-profile crack-time estimates."""

    def __init__(self, config: Optional[StrengthConfig] = None) -> None:
        cfg = config or StrengthConfig()
        self._rates: dict[AttackScenario, float] = {
            AttackScenario.ONLINE: cfg.online_rate,
            AttackScenario.OFFLINE: cfg.offline_rate,
            AttackScenario.OFFLINE_FAST: cfg.offline_fast_rate,
        }

    @property
    def rates(self) -> dict[AttackScenario, float]:
        return dict(self._rates)

    def estimate(self, smart_keyspace: float, scenario: AttackScenario) -> CrackTimeEstimate:
        average_guesses = max(1.0, smart_keyspace / 2)
        seconds = average_guesses / self._rates[scenario]
        return CrackTimeEstimate(
            seconds=seconds,
            human_readable=format_crack_time(seconds),
            attack_scenario=scenario,
        )

    def estimate_all(self, smart_keyspace: float) -> CrackTimes:
        return CrackTimes(
            online=self.estimate(smart_keyspace, AttackScenario.ONLINE),
            offline=self.estimate(smart_keyspace, AttackScenario.OFFLINE),
            offline_fast=self.estimate(smart_keyspace, AttackScenario.OFFLINE_FAST),
        )
