"""Pytest configuration and fixtures."""

import logging

import pytest

from cvspin.models.config import AppConfig, LoggingConfig, SpinConfig
from cvspin.models.parameters import (
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
)
from cvspin.services.spin import SpinGenerator
from cvspin.utils import correlation
from cvspin.utils.sources import fixed_clock, fixed_entropy


# Shifted by the coarse interval this leaves a counter of 5
COARSE_TICKS_FIVE = 5 << 24


@pytest.fixture(autouse=True)
def reset_correlation_vector():
    """Clear the context correlation vector around each test."""
    token = correlation._correlation_vector.set(None)
    yield
    correlation._correlation_vector.reset(token)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def default_parameters():
    """Coarse interval, short periodicity, two bytes of entropy."""
    return SpinParameters(
        interval=SpinCounterInterval.COARSE,
        periodicity=SpinCounterPeriodicity.SHORT,
        entropy=SpinEntropy.TWO,
    )


@pytest.fixture
def fixed_generator():
    """Generator with a frozen clock and replayed entropy bytes 0x01 0x02 0x03 0x04."""
    return SpinGenerator(
        clock=fixed_clock(COARSE_TICKS_FIVE),
        entropy_source=fixed_entropy(b"\x01\x02\x03\x04"),
    )


@pytest.fixture
def validating_generator():
    """Fixed generator that validates base vectors before spinning."""
    return SpinGenerator(
        validate_during_creation=True,
        clock=fixed_clock(COARSE_TICKS_FIVE),
        entropy_source=fixed_entropy(b"\x01\x02\x03\x04"),
    )


@pytest.fixture
def test_config():
    """Create test configuration."""
    return AppConfig(
        spin=SpinConfig(
            validate_during_creation=False,
            interval=SpinCounterInterval.COARSE,
            periodicity=SpinCounterPeriodicity.SHORT,
            entropy=SpinEntropy.TWO,
        ),
        logging=LoggingConfig(level="INFO", format="text"),
    )
