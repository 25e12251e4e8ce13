"""Get flow status use case - Report where a flow is"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from returns.result import Result

from vc_request_client.domain import CorrelationState, FlowState


@dataclass(frozen=True)
class GetFlowStatusResponse:
    """
    Response from get flow status use case.

    Attributes:
        flow: Current flow state
        is_live: Whether the flow can still receive events
        is_completed: Whether the flow reached a terminal state
        is_successful: Whether the flow succeeded
    """

    flow: FlowState
    is_live: bool
    is_completed: bool
    is_successful: bool


class GetFlowStatusError(Exception):
    """Error during flow status retrieval"""

    pass


class GetFlowStatus(ABC):
    """Use case: Retrieve the status of a flow by correlation token"""

    @abstractmethod
    async def execute(self, state: CorrelationState) -> Result[GetFlowStatusResponse, GetFlowStatusError]:
        pass
