import math

import pytest

from pwguard.analyzers.crack_time import CrackTimeEstimator, format_crack_time
from pwguard.core.models import AttackScenario
from shared.config import StrengthConfig

_DAY = 86400
_MONTH = 30 * _DAY
_YEAR = 12 * _MONTH


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "instantly"),
        (0.99, "instantly"),
        (1, "1 second"),
        (1.2, "1 second"),
        (30, "30 seconds"),
        (60, "1 minute"),
        (90, "2 minutes"),
        (3600, "1 hour"),
        (5 * 3600, "5 hours"),
        (_DAY, "1 day"),
        (45 * _DAY, "2 months"),
        (_YEAR, "1 year"),
        (250 * _YEAR, "250 years"),
        (5000 * _YEAR, "5 thousand years"),
        (2e6 * _YEAR, "2 million years"),
        (3e9 * _YEAR, "3 billion years"),
        (math.inf, "forever"),
    ],
)
def test_format_crack_time(seconds, expected):
    assert format_crack_time(seconds) == expected


def test_single_guess_is_instant():
    times = CrackTimeEstimator().estimate_all(1.0)
    assert times.online.human_readable == "instantly"
    assert times.online.seconds == pytest.approx(1e-3)


def test_average_is_half_the_keyspace():
    estimate = CrackTimeEstimator().estimate(2e3, AttackScenario.ONLINE)
    assert estimate.seconds == pytest.approx(1.0)
    assert estimate.human_readable == "1 second"
    assert estimate.attack_scenario is AttackScenario.ONLINE


def test_rates_from_config():
    estimator = CrackTimeEstimator(StrengthConfig(online_rate=10.0))
    assert estimator.estimate(200, AttackScenario.ONLINE).seconds == pytest.approx(10.0)
    assert estimator.rates[AttackScenario.OFFLINE] == 1e11


def test_scenarios_are_ordered_by_speed():
    times = CrackTimeEstimator().estimate_all(1e20)
    assert times.online.seconds > times.offline.seconds > times.offline_fast.seconds
