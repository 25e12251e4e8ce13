"""Handle callback use case - Interpret a callback event against its flow"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from returns.result import Result

from vc_request_client.domain import CallbackError, CallbackEvent, FlowState


@dataclass(frozen=True)
class HandleCallbackResponse:
    """
    Response from handle callback use case.

    Attributes:
        flow: Flow state after the event
        changed: False when the event was accepted without a transition
            (repeated request_retrieved)
    """

    flow: FlowState
    changed: bool = True


class HandleCallback(ABC):
    """
    Use case: Apply an inbound callback to its flow.

    Flow:
    1. Look up the flow by the event's state token
    2. Compute the next state
    3. Store it atomically against the state it was computed from
    4. Retry from 1 if another callback for the same token won the race

    Failures are expected outcomes, not faults: UnknownCorrelation for a token
    no request was issued for, StaleEvent for a flow that already completed.
    """

    @abstractmethod
    async def execute(self, event: CallbackEvent) -> Result[HandleCallbackResponse, CallbackError]:
        pass
