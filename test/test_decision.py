import pytest

from fuzzycore.config import load_config
from fuzzycore.decision import CAUTIOUS, FIGHT, FLEE, DecisionMaker, choose_action
from fuzzycore.errors import ConfigError
from fuzzycore.variable import Evaluation


@pytest.fixture
def decision_maker(health_variable, enemies_variable):
    return DecisionMaker(health_variable, enemies_variable)


@pytest.mark.parametrize(
    "health, enemies, expected",
    [
        (45.0, 3.0, CAUTIOUS),
        (85.0, 1.0, FIGHT),
        (10.0, 1.0, FLEE),
        (85.0, 9.0, FLEE),
        (50.0, 5.0, CAUTIOUS),
    ],
)
def test_decide(decision_maker, health, enemies, expected):
    assert decision_maker.decide(health, enemies).action == expected


def test_decision_carries_evaluations(decision_maker):
    decision = decision_maker.decide(45.0, 3.0)
    assert decision.health.medium == pytest.approx(0.75)
    assert decision.enemies.low == pytest.approx(0.5)
    assert decision.health_crisp == pytest.approx(3905.0 / 98.0)
    assert 0.0 < decision.enemies_crisp < 10.0


def test_choose_action_prefers_fight_on_ties():
    health = Evaluation(0.0, 0.5, 0.5)
    enemies = Evaluation(0.5, 0.0, 0.5)
    assert choose_action(health, enemies) == FIGHT


def test_from_config(config_path):
    maker = DecisionMaker.from_config(load_config(config_path))
    assert maker.decide(45.0, 3.0).action == CAUTIOUS


def test_from_config_missing_variable():
    cfg = {"variables": {"health": {"low": [0, 0, 30, 50], "medium": [30, 50, 70],
                                    "high": [50, 70, 100, 100]}}}
    with pytest.raises(ConfigError):
        DecisionMaker.from_config(cfg)
