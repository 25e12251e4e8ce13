"""Fixtures for use case tests"""

import pytest

from vc_request_client.adapter import InMemoryFlowCorrelator
from vc_request_client.config import create_test_config
from vc_request_client.domain import FixedClock, ServiceConfig


@pytest.fixture
def config() -> ServiceConfig:
    return create_test_config()


@pytest.fixture
def correlator(fixed_clock: FixedClock) -> InMemoryFlowCorrelator:
    return InMemoryFlowCorrelator(clock=fixed_clock)
