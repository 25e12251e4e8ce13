"""In-memory implementation of FlowCorrelator"""

import asyncio
import logging
from datetime import timedelta
from typing import Dict

from returns.result import Failure, Result, Success

from vc_request_client.domain import Clock, CorrelationState, FlowState, is_expired, is_live
from vc_request_client.port.output import FlowCorrelator, FlowNotFound

LOGGER = logging.getLogger(__name__)


class InMemoryFlowCorrelator(FlowCorrelator):
    """
    In-memory implementation of FlowCorrelator.

    Flows are kept in a dictionary keyed by correlation token. Every
    read-check-write happens under one asyncio.Lock, which makes
    compare_and_set atomic per token.

    Expiry policy: a live flow is expired once it is older than ``max_age``.
    Expired flows no longer count as live and are evicted on the next put.
    """

    def __init__(self, clock: Clock, max_age: timedelta = timedelta(minutes=10)):
        """
        Initialize correlator with empty storage.

        Args:
            clock: Clock for checking expiration
            max_age: Age after which a live flow counts as expired
        """
        self.clock = clock
        self.max_age = max_age
        self._flows: Dict[str, FlowState] = {}
        self._lock = asyncio.Lock()

    async def get(self, state: CorrelationState) -> Result[FlowState, FlowNotFound]:
        async with self._lock:
            flow = self._flows.get(state.value)

        if flow is None:
            return Failure(FlowNotFound(state=state.value))
        return Success(flow)

    async def put(self, flow: FlowState) -> Result[None, Exception]:
        async with self._lock:
            expired = [key for key, f in self._flows.items() if is_expired(f, self.max_age, self.clock)]
            for key in expired:
                del self._flows[key]
            self._flows[flow.state.value] = flow

        if expired:
            LOGGER.debug("Evicted %d expired flows", len(expired))
        return Success(None)

    async def compare_and_set(
        self, state: CorrelationState, expected: FlowState, next_flow: FlowState
    ) -> Result[bool, Exception]:
        """
        Replace the stored flow only if it still equals ``expected``.

        Args:
            state: Correlation token
            expected: Flow the caller computed its transition from
            next_flow: Flow to store

        Returns:
            Success(True) if replaced, Success(False) otherwise
        """
        if next_flow.state != state:
            return Failure(ValueError(f"Flow for {next_flow.state} cannot be stored under {state}"))

        async with self._lock:
            current = self._flows.get(state.value)
            if current is None or (current is not expected and current != expected):
                return Success(False)
            self._flows[state.value] = next_flow

        return Success(True)

    async def is_live(self, state: CorrelationState) -> bool:
        async with self._lock:
            flow = self._flows.get(state.value)
        return flow is not None and is_live(flow) and not is_expired(flow, self.max_age, self.clock)

    async def delete(self, state: CorrelationState) -> Result[None, Exception]:
        async with self._lock:
            if state.value not in self._flows:
                return Failure(FlowNotFound(state=state.value))
            del self._flows[state.value]
        return Success(None)

    async def get_all_expired(self) -> Result[list[FlowState], Exception]:
        async with self._lock:
            flows = list(self._flows.values())

        return Success([f for f in flows if is_expired(f, self.max_age, self.clock)])

    async def count(self) -> Result[int, Exception]:
        async with self._lock:
            return Success(len(self._flows))

    async def clear(self) -> Result[None, Exception]:
        """Clear all flows (useful for testing)"""
        async with self._lock:
            self._flows.clear()
        return Success(None)
