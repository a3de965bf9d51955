# test/conftest.py
import logging

import pytest

from fuzzycore.config import DEFAULT_CONFIG_PATH
from fuzzycore.shapes import Trapezoid, Triangle
from fuzzycore.variable import FuzzyVariable
from utils.logger import LOGGER_NAMES

CONFIG_PATH = DEFAULT_CONFIG_PATH


@pytest.fixture
def config_path():
    return CONFIG_PATH


@pytest.fixture
def health_variable():
    """Reference health variable over [0, 100]."""
    return FuzzyVariable(
        Trapezoid(0.0, 0.0, 30.0, 50.0),
        Triangle(30.0, 50.0, 70.0),
        Trapezoid(50.0, 70.0, 100.0, 100.0),
        name="health",
    )


@pytest.fixture
def enemies_variable():
    """Reference enemy-density variable over [0, 10]."""
    return FuzzyVariable(
        Trapezoid(0.0, 0.0, 2.0, 4.0),
        Triangle(2.0, 5.0, 8.0),
        Trapezoid(6.0, 8.0, 10.0, 10.0),
        name="enemies",
    )


@pytest.fixture(autouse=True)
def _reset_loggers():
    """Drop handlers installed by setup_logging so tests don't leak streams."""
    yield
    for name in LOGGER_NAMES:
        log = logging.getLogger(name)
        for h in list(log.handlers):
            log.removeHandler(h)
            h.close()
        log.propagate = True
