"""
Fight-or-flee behavior selection on top of two fuzzy variables.

This module wires a "health" and an "enemies" FuzzyVariable together and maps
their dominant categories onto an action. It serves as the reference
application of the inference core and does not take part in inference
itself.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from fuzzycore.config import load_variables
from fuzzycore.errors import ConfigError
from fuzzycore.variable import Evaluation, FuzzyVariable

decision_log = logging.getLogger("decision")

FIGHT = "Fight!"
FLEE = "Flee!"
CAUTIOUS = "Be cautious, assess further!"


@dataclass(frozen=True)
class Decision:
    """
    Outcome of one decision cycle.

    Attributes:
        action (str): One of FIGHT, FLEE or CAUTIOUS.
        health (Evaluation): Degrees of the health input.
        enemies (Evaluation): Degrees of the enemy-density input.
        health_crisp (float): Defuzzified health value.
        enemies_crisp (float): Defuzzified enemy-density value.
    """

    action: str
    health: Evaluation
    enemies: Evaluation
    health_crisp: float
    enemies_crisp: float


def choose_action(health: Evaluation, enemies: Evaluation) -> str:
    if health.is_high() and enemies.is_low():
        return FIGHT
    elif health.is_low() or enemies.is_high():
        return FLEE
    return CAUTIOUS


class DecisionMaker:
    """
    Evaluates health and enemy density and picks an action.

    Attributes:
        health (FuzzyVariable): The health variable.
        enemies (FuzzyVariable): The enemy-density variable.
    """

    def __init__(self, health: FuzzyVariable, enemies: FuzzyVariable) -> None:
        self.health = health
        self.enemies = enemies
        decision_log.info("DecisionMaker initialized and ready.")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "DecisionMaker":
        """
        Builds a DecisionMaker from a loaded configuration dictionary.

        Raises:
            ConfigError: If 'health' or 'enemies' is not defined.
        """
        variables = load_variables(config)
        for name in ("health", "enemies"):
            if name not in variables:
                raise ConfigError(f"Variable '{name}' is required by DecisionMaker")
        return cls(variables["health"], variables["enemies"])

    def decide(self, health: float, enemies: float) -> Decision:
        decision_log.debug(
            "--- Decision Cycle Start (health= %.3f, enemies= %.3f) ---", health, enemies
        )
        health_eval = self.health.evaluate(health)
        enemies_eval = self.enemies.evaluate(enemies)

        decision = Decision(
            action=choose_action(health_eval, enemies_eval),
            health=health_eval,
            enemies=enemies_eval,
            health_crisp=self.health.crisp_value(health_eval),
            enemies_crisp=self.enemies.crisp_value(enemies_eval),
        )
        decision_log.info("Health: %s", self.health.describe(health_eval))
        decision_log.info("Enemies: %s", self.enemies.describe(enemies_eval))
        decision_log.debug("--- Decision Cycle End (action= %s) ---", decision.action)
        return decision
