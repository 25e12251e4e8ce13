"""Flow state machine for issuance and presentation callbacks

A flow is one issuance or presentation interaction, keyed by the correlation
token (``state``) sent in the request. It moves through:

1. PENDING - request built and registered, nothing heard back yet
2. RETRIEVED - wallet fetched the request (QR scanned / link opened)
3. SUCCEEDED - issuance_successful or presentation_verified
4. FAILED - issuance_error or presentation_error

SUCCEEDED and FAILED are terminal. Events are not assumed to arrive in order:
a terminal event may arrive while the flow is still PENDING, and anything
arriving after a terminal event is stale.

Flow states are immutable; ``interpret`` computes the next state from the
current one and an event, and never touches storage.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Final, List, Optional

from returns.result import Failure, Result, Success

from vc_request_client.domain.callback_event import CallbackEvent, ErrorDetail
from vc_request_client.domain.clock import Clock
from vc_request_client.domain.errors import CallbackError, StaleEvent, UnexpectedEvent
from vc_request_client.domain.value_objects import CallbackCode, CorrelationState, FlowKind


class FlowStatus(str, Enum):
    PENDING: Final[str] = "pending"
    RETRIEVED: Final[str] = "retrieved"
    SUCCEEDED: Final[str] = "succeeded"
    FAILED: Final[str] = "failed"

    def __str__(self) -> str:
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self in (FlowStatus.SUCCEEDED, FlowStatus.FAILED)


@dataclass(frozen=True)
class FlowState:
    """
    Snapshot of one flow.

    Attributes:
        state: Correlation token identifying the flow
        kind: Issuance or presentation
        status: Current position in the state machine
        include_receipt: Whether the request asked for a receipt
        created_at: When the request was registered
        updated_at: When the last accepted event was applied
        request_id: Service-side request identifier, known after the first callback
        error: Service error for FAILED flows
        receipt: Wallet receipt for SUCCEEDED presentations that asked for one
        subject: Presenting wallet's DID for SUCCEEDED presentations
        verified_credentials_data: Presented credential data for SUCCEEDED presentations
    """

    state: CorrelationState
    kind: FlowKind
    status: FlowStatus
    created_at: datetime
    updated_at: datetime
    include_receipt: bool = False
    request_id: Optional[str] = None
    error: Optional[ErrorDetail] = None
    receipt: Optional[Any] = None
    subject: Optional[str] = None
    verified_credentials_data: Optional[List[Any]] = None

    def __post_init__(self) -> None:
        if self.updated_at < self.created_at:
            raise ValueError(
                f"updated_at ({self.updated_at}) cannot be before created_at ({self.created_at})"
            )
        if self.status is FlowStatus.FAILED and self.error is None:
            raise ValueError("Failed flow must carry an error")
        if self.include_receipt and self.kind is FlowKind.ISSUANCE:
            raise ValueError("Only presentation flows can ask for a receipt")


# ======================
# Factory
# ======================


def create_pending_flow(
    state: CorrelationState,
    kind: FlowKind,
    clock: Clock,
    include_receipt: bool = False,
) -> FlowState:
    """
    Create the PENDING flow for a request that was just built.

    Args:
        state: Correlation token of the request's callback
        kind: Issuance or presentation
        clock: Clock for timestamp generation
        include_receipt: Whether the presentation request set includeReceipt

    Returns:
        New FlowState in PENDING status
    """
    now = clock.now()
    return FlowState(
        state=state,
        kind=kind,
        status=FlowStatus.PENDING,
        created_at=now,
        updated_at=now,
        include_receipt=include_receipt,
    )


# ======================
# Transition
# ======================


def interpret(flow: FlowState, event: CallbackEvent, clock: Clock) -> Result[FlowState, CallbackError]:
    """
    Apply a callback event to a flow.

    A repeated request_retrieved on a RETRIEVED flow is tolerated and returns
    the very same flow object, so callers can tell "accepted, nothing changed"
    apart from a transition with ``is``.

    Args:
        flow: Current flow state (its token must match event.state)
        event: Inbound callback
        clock: Clock for timestamp generation

    Returns:
        Success with the next state, Failure(StaleEvent) for a completed flow,
        or Failure(UnexpectedEvent) for a code of the other flow kind
    """
    if flow.status.is_terminal:
        return Failure(StaleEvent(state=flow.state.value, status=str(flow.status), code=str(event.code)))

    if event.code is CallbackCode.REQUEST_RETRIEVED:
        if flow.status is FlowStatus.RETRIEVED:
            return Success(flow)
        return Success(
            replace(
                flow,
                status=FlowStatus.RETRIEVED,
                updated_at=clock.now(),
                request_id=event.request_id,
            )
        )

    if event.code.flow_kind is not flow.kind:
        return Failure(UnexpectedEvent(state=flow.state.value, kind=str(flow.kind), code=str(event.code)))

    now = clock.now()
    if event.code.is_error:
        return Success(
            replace(
                flow,
                status=FlowStatus.FAILED,
                updated_at=now,
                request_id=event.request_id,
                error=event.error or ErrorDetail(code=str(event.code)),
            )
        )

    return Success(
        replace(
            flow,
            status=FlowStatus.SUCCEEDED,
            updated_at=now,
            request_id=event.request_id,
            receipt=event.receipt if flow.include_receipt else None,
            subject=event.subject,
            verified_credentials_data=event.verified_credentials_data,
        )
    )


# ======================
# Query Functions
# ======================


def is_terminal(flow: FlowState) -> bool:
    """Check if flow is completed (succeeded or failed)"""
    return flow.status.is_terminal


def is_live(flow: FlowState) -> bool:
    """Check if flow can still accept events"""
    return not flow.status.is_terminal


def is_successful(flow: FlowState) -> bool:
    return flow.status is FlowStatus.SUCCEEDED


def is_expired(flow: FlowState, max_age: timedelta, clock: Clock) -> bool:
    """
    Check if a live flow has waited longer than max_age.

    Completed flows are never expired.
    """
    if flow.status.is_terminal:
        return False
    return clock.now() - flow.created_at >= max_age
