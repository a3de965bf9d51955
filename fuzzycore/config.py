"""
Loads fuzzy variable definitions from a TOML configuration file.

Each variable is a table with three parameter lists, one per category:

    [variables.health]
    low    = [0.0, 0.0, 30.0, 50.0]
    medium = [30.0, 50.0, 70.0]
    high   = [50.0, 70.0, 100.0, 100.0]

Three numbers build a Triangle, four build a Trapezoid. The file is only
read; definitions are never written back.
"""

import logging
import os
import tomllib
from typing import Any, Dict, List

from fuzzycore.errors import ConfigError
from fuzzycore.shapes import MembershipShape, Trapezoid, Triangle
from fuzzycore.variable import LABELS, FuzzyVariable

config_log = logging.getLogger("config")

# Reference configuration shipped as package data next to this module.
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "fuzzy_config.toml")


def load_config(path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    with open(path, "rb") as f:
        cfg = tomllib.load(f)
    config_log.info("Configuration file '%s' loaded.", path)
    return cfg


def build_shape(params: List[float]) -> MembershipShape:
    """
    Builds a membership shape from its breakpoints.

    Args:
        params (List[float]): [a, b, c] for a triangle or [a, b, c, d] for a
            trapezoid.

    Returns:
        MembershipShape: The constructed shape.

    Raises:
        ConfigError: If the number of breakpoints is neither 3 nor 4.
        InvalidShapeError: If the breakpoints are out of order.
    """
    values = [float(p) for p in params]
    if len(values) == 3:
        return Triangle(*values)
    elif len(values) == 4:
        return Trapezoid(*values)
    raise ConfigError(f"Invalid membership function shape: {params}")


def build_variable(name: str, table: Dict[str, Any]) -> FuzzyVariable:
    missing = [label for label in LABELS if label not in table]
    if missing:
        raise ConfigError(f"Variable '{name}' is missing categories: {missing}")
    shapes = {label: build_shape(table[label]) for label in LABELS}
    return FuzzyVariable(name=name, **shapes)


def load_variables(cfg: Dict[str, Any]) -> Dict[str, FuzzyVariable]:
    """Builds every variable listed under [variables] in a loaded config."""
    tables = cfg.get("variables", {})
    if not tables:
        raise ConfigError("No [variables] defined in configuration")
    variables = {name: build_variable(name, table) for name, table in tables.items()}
    config_log.info("Built %d fuzzy variables: %s", len(variables), ", ".join(variables))
    return variables
