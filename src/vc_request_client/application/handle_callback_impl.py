"""HandleCallback use case implementation - the callback interpreter"""

import logging
from typing import Final

from returns.result import Failure, Result, Success

from vc_request_client.domain import (
    CallbackError,
    CallbackEvent,
    Clock,
    ConcurrentUpdate,
    CorrelationState,
    StaleEvent,
    UnknownCorrelation,
    interpret,
    is_terminal,
)
from vc_request_client.port.input import HandleCallback, HandleCallbackResponse
from vc_request_client.port.output import FlowCorrelator

LOGGER = logging.getLogger(__name__)

MAX_ATTEMPTS: Final[int] = 5


class HandleCallbackImpl(HandleCallback):
    """
    Implementation of HandleCallback use case.

    Each attempt reads the flow, computes the transition and stores it with
    compare_and_set against the flow it read. Losing the race means another
    callback for the same token changed the flow first; the event is then
    re-interpreted against the new state, which is how a late
    request_retrieved becomes stale once a terminal event has landed.
    """

    def __init__(self, correlator: FlowCorrelator, clock: Clock):
        self.correlator = correlator
        self.clock = clock

    async def execute(self, event: CallbackEvent) -> Result[HandleCallbackResponse, CallbackError]:
        state = CorrelationState(value=event.state)

        for _ in range(MAX_ATTEMPTS):
            get_result = await self.correlator.get(state)
            if isinstance(get_result, Failure):
                LOGGER.warning("Dropping %s callback for unknown state %s", event.code, state)
                return Failure(UnknownCorrelation(state=state.value))

            flow = get_result.unwrap()
            transition = interpret(flow, event, self.clock)
            if isinstance(transition, Failure):
                error = transition.failure()
                if isinstance(error, StaleEvent):
                    LOGGER.debug(error.message)
                else:
                    LOGGER.warning(error.message)
                return Failure(error)

            next_flow = transition.unwrap()
            if next_flow is flow:
                return Success(HandleCallbackResponse(flow=flow, changed=False))

            cas_result = await self.correlator.compare_and_set(state, flow, next_flow)
            if isinstance(cas_result, Failure):
                raise cas_result.failure()
            if cas_result.unwrap():
                if is_terminal(next_flow):
                    LOGGER.info("Flow %s completed: %s", state, next_flow.status)
                else:
                    LOGGER.info("Flow %s is now %s", state, next_flow.status)
                return Success(HandleCallbackResponse(flow=next_flow, changed=True))

            LOGGER.debug("Flow %s changed concurrently, retrying %s", state, event.code)

        return Failure(ConcurrentUpdate(state=state.value))
