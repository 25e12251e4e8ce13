"""GetFlowStatus use case implementation"""

from returns.result import Failure, Result, Success

from vc_request_client.domain import CorrelationState, is_successful, is_terminal
from vc_request_client.port.input import GetFlowStatus, GetFlowStatusError, GetFlowStatusResponse
from vc_request_client.port.output import FlowCorrelator, FlowNotFound


class GetFlowStatusImpl(GetFlowStatus):
    def __init__(self, correlator: FlowCorrelator):
        self.correlator = correlator

    async def execute(self, state: CorrelationState) -> Result[GetFlowStatusResponse, GetFlowStatusError]:
        get_result = await self.correlator.get(state)
        if isinstance(get_result, Failure):
            error = get_result.failure()
            if isinstance(error, FlowNotFound):
                return Failure(GetFlowStatusError(f"Flow not found: {state}"))
            return Failure(GetFlowStatusError(f"Failed to retrieve flow: {error}"))

        flow = get_result.unwrap()
        live = await self.correlator.is_live(state)
        return Success(
            GetFlowStatusResponse(
                flow=flow,
                is_live=live,
                is_completed=is_terminal(flow),
                is_successful=is_successful(flow),
            )
        )
