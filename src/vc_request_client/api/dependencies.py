"""Dependency injection container for FastAPI"""

from datetime import timedelta
from typing import Optional

from vc_request_client.adapter import InMemoryFlowCorrelator
from vc_request_client.application import (
    GetFlowStatusImpl,
    HandleCallbackImpl,
    RequestIssuanceImpl,
    RequestPresentationImpl,
)
from vc_request_client.config import load_or_create_config
from vc_request_client.domain import Clock, ServiceConfig, SystemClock
from vc_request_client.port.input import (
    GetFlowStatus,
    HandleCallback,
    RequestIssuance,
    RequestPresentation,
)
from vc_request_client.port.output import FlowCorrelator


class DependencyContainer:
    """
    Dependency injection container for the request client host.

    Manages singleton instances of services and use cases.
    """

    def __init__(self, config: Optional[ServiceConfig] = None, clock: Optional[Clock] = None):
        """
        Initialize container with optional configuration.

        Args:
            config: Client configuration (if None, loaded on first use)
            clock: Clock (if None, system clock)
        """
        self._config = config
        self._clock = clock
        self._correlator: Optional[FlowCorrelator] = None
        self._request_issuance: Optional[RequestIssuance] = None
        self._request_presentation: Optional[RequestPresentation] = None
        self._handle_callback: Optional[HandleCallback] = None
        self._get_flow_status: Optional[GetFlowStatus] = None

    def get_config(self) -> ServiceConfig:
        if self._config is None:
            self._config = load_or_create_config()
        return self._config

    def get_clock(self) -> Clock:
        if self._clock is None:
            self._clock = SystemClock()
        return self._clock

    def get_correlator(self) -> FlowCorrelator:
        """Get flow correlator (singleton)"""
        if self._correlator is None:
            self._correlator = InMemoryFlowCorrelator(
                clock=self.get_clock(),
                max_age=timedelta(seconds=self.get_config().flow_max_age_seconds),
            )
        return self._correlator

    def get_request_issuance(self) -> RequestIssuance:
        """Get RequestIssuance use case (singleton)"""
        if self._request_issuance is None:
            self._request_issuance = RequestIssuanceImpl(
                correlator=self.get_correlator(), config=self.get_config(), clock=self.get_clock()
            )
        return self._request_issuance

    def get_request_presentation(self) -> RequestPresentation:
        """Get RequestPresentation use case (singleton)"""
        if self._request_presentation is None:
            self._request_presentation = RequestPresentationImpl(
                correlator=self.get_correlator(), config=self.get_config(), clock=self.get_clock()
            )
        return self._request_presentation

    def get_handle_callback(self) -> HandleCallback:
        """Get HandleCallback use case (singleton)"""
        if self._handle_callback is None:
            self._handle_callback = HandleCallbackImpl(correlator=self.get_correlator(), clock=self.get_clock())
        return self._handle_callback

    def get_get_flow_status(self) -> GetFlowStatus:
        """Get GetFlowStatus use case (singleton)"""
        if self._get_flow_status is None:
            self._get_flow_status = GetFlowStatusImpl(correlator=self.get_correlator())
        return self._get_flow_status


# Global container instance
_container: Optional[DependencyContainer] = None


def get_container() -> DependencyContainer:
    """Get or create global dependency container"""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


def set_container(container: DependencyContainer) -> None:
    """Set global dependency container (useful for testing)"""
    global _container
    _container = container


# FastAPI dependency functions
def get_request_issuance_use_case() -> RequestIssuance:
    return get_container().get_request_issuance()


def get_request_presentation_use_case() -> RequestPresentation:
    return get_container().get_request_presentation()


def get_handle_callback_use_case() -> HandleCallback:
    return get_container().get_handle_callback()


def get_get_flow_status_use_case() -> GetFlowStatus:
    return get_container().get_get_flow_status()


def get_service_config() -> ServiceConfig:
    return get_container().get_config()
