"""Flow correlator port - Interface for flow state storage keyed by correlation token"""

from abc import ABC, abstractmethod

from returns.result import Result

from vc_request_client.domain import CorrelationState, FlowState


class FlowNotFound(Exception):
    """Raised when no flow is stored for a correlation token"""

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Flow not found: {state}")


class FlowCorrelator(ABC):
    """
    Storage for in-flight and completed flows.

    Writes to an existing flow go through ``compare_and_set`` so that
    concurrent callbacks for the same token cannot both apply a transition.
    Expiry of flows that never complete is the implementation's policy; the
    callback interpreter never looks at wall-clock age.
    """

    @abstractmethod
    async def get(self, state: CorrelationState) -> Result[FlowState, FlowNotFound]:
        """
        Retrieve a flow by correlation token.

        Returns:
            Success(FlowState) or Failure(FlowNotFound)
        """
        pass

    @abstractmethod
    async def put(self, flow: FlowState) -> Result[None, Exception]:
        """
        Store a flow unconditionally under its own token.

        Returns:
            Success(None) or Failure(exception)
        """
        pass

    @abstractmethod
    async def compare_and_set(
        self, state: CorrelationState, expected: FlowState, next_flow: FlowState
    ) -> Result[bool, Exception]:
        """
        Replace a flow only if it still equals ``expected``.

        Returns:
            Success(True) if replaced, Success(False) if the stored flow
            changed or is gone, Failure(exception) on storage errors
        """
        pass

    @abstractmethod
    async def is_live(self, state: CorrelationState) -> bool:
        """Check whether a flow exists, has not completed and has not expired"""
        pass

    @abstractmethod
    async def delete(self, state: CorrelationState) -> Result[None, Exception]:
        pass

    @abstractmethod
    async def get_all_expired(self) -> Result[list[FlowState], Exception]:
        """
        Get live flows past the implementation's expiry policy (for cleanup).

        Returns:
            Success(list of expired flows) or Failure(exception)
        """
        pass

    @abstractmethod
    async def count(self) -> Result[int, Exception]:
        pass
