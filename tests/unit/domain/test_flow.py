"""Tests for the flow state machine"""

from dataclasses import replace
from datetime import timedelta

import pytest

from vc_request_client.domain import (
    CallbackCode,
    CallbackEvent,
    CorrelationState,
    ErrorDetail,
    FixedClock,
    FlowKind,
    FlowState,
    FlowStatus,
    StaleEvent,
    UnexpectedEvent,
    create_pending_flow,
    interpret,
    is_expired,
    is_live,
    is_successful,
    is_terminal,
)


def _event(code: CallbackCode, **extra) -> CallbackEvent:
    return CallbackEvent(request_id="req-1", state="state_abc123", code=code, **extra)


@pytest.fixture
def issuance_flow(state: CorrelationState, fixed_clock: FixedClock) -> FlowState:
    return create_pending_flow(state, FlowKind.ISSUANCE, fixed_clock)


@pytest.fixture
def presentation_flow(state: CorrelationState, fixed_clock: FixedClock) -> FlowState:
    return create_pending_flow(state, FlowKind.PRESENTATION, fixed_clock, include_receipt=True)


class TestFlowState:
    """Tests for FlowState invariants"""

    def test_create_pending_flow(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        assert issuance_flow.status is FlowStatus.PENDING
        assert issuance_flow.created_at == fixed_clock.now()
        assert issuance_flow.updated_at == issuance_flow.created_at
        assert issuance_flow.request_id is None

    def test_updated_before_created_rejected(self, issuance_flow: FlowState):
        with pytest.raises(ValueError, match="cannot be before"):
            replace(issuance_flow, updated_at=issuance_flow.created_at - timedelta(seconds=1))

    def test_failed_without_error_rejected(self, issuance_flow: FlowState):
        with pytest.raises(ValueError, match="must carry an error"):
            replace(issuance_flow, status=FlowStatus.FAILED)

    def test_issuance_cannot_ask_for_receipt(self, state: CorrelationState, fixed_clock: FixedClock):
        with pytest.raises(ValueError, match="receipt"):
            create_pending_flow(state, FlowKind.ISSUANCE, fixed_clock, include_receipt=True)


class TestInterpretIssuance:
    """Tests for interpret on issuance flows"""

    def test_pending_to_retrieved(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        fixed_clock.advance(timedelta(seconds=5))

        result = interpret(issuance_flow, _event(CallbackCode.REQUEST_RETRIEVED), fixed_clock)

        flow = result.unwrap()
        assert flow.status is FlowStatus.RETRIEVED
        assert flow.request_id == "req-1"
        assert flow.updated_at == fixed_clock.now()
        assert issuance_flow.status is FlowStatus.PENDING

    def test_retrieved_to_succeeded(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        retrieved = interpret(issuance_flow, _event(CallbackCode.REQUEST_RETRIEVED), fixed_clock).unwrap()

        flow = interpret(retrieved, _event(CallbackCode.ISSUANCE_SUCCESSFUL), fixed_clock).unwrap()

        assert flow.status is FlowStatus.SUCCEEDED
        assert is_terminal(flow)
        assert is_successful(flow)
        assert not is_live(flow)

    def test_terminal_event_before_retrieved(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        """Out-of-order delivery: completion may arrive while still pending"""
        flow = interpret(issuance_flow, _event(CallbackCode.ISSUANCE_SUCCESSFUL), fixed_clock).unwrap()
        assert flow.status is FlowStatus.SUCCEEDED

    def test_error_keeps_service_error(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        error = ErrorDetail(code="IssuanceFlowFailed", message="user cancelled")

        flow = interpret(issuance_flow, _event(CallbackCode.ISSUANCE_ERROR, error=error), fixed_clock).unwrap()

        assert flow.status is FlowStatus.FAILED
        assert flow.error == error
        assert not is_successful(flow)

    def test_error_without_details_uses_code(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        flow = interpret(issuance_flow, _event(CallbackCode.ISSUANCE_ERROR), fixed_clock).unwrap()
        assert flow.error.code == "issuance_error"

    def test_repeated_retrieved_is_no_op(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        retrieved = interpret(issuance_flow, _event(CallbackCode.REQUEST_RETRIEVED), fixed_clock).unwrap()
        fixed_clock.advance(timedelta(seconds=1))

        again = interpret(retrieved, _event(CallbackCode.REQUEST_RETRIEVED), fixed_clock).unwrap()

        assert again is retrieved

    @pytest.mark.parametrize(
        "code",
        [CallbackCode.REQUEST_RETRIEVED, CallbackCode.ISSUANCE_SUCCESSFUL, CallbackCode.ISSUANCE_ERROR],
    )
    def test_event_after_completion_is_stale(self, issuance_flow: FlowState, fixed_clock: FixedClock, code):
        completed = interpret(issuance_flow, _event(CallbackCode.ISSUANCE_SUCCESSFUL), fixed_clock).unwrap()

        result = interpret(completed, _event(code), fixed_clock)

        assert isinstance(result.failure(), StaleEvent)
        assert result.failure().state == "state_abc123"

    def test_stale_after_failure(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        failed = interpret(issuance_flow, _event(CallbackCode.ISSUANCE_ERROR), fixed_clock).unwrap()

        result = interpret(failed, _event(CallbackCode.ISSUANCE_SUCCESSFUL), fixed_clock)

        assert isinstance(result.failure(), StaleEvent)

    @pytest.mark.parametrize("code", [CallbackCode.PRESENTATION_VERIFIED, CallbackCode.PRESENTATION_ERROR])
    def test_presentation_code_unexpected(self, issuance_flow: FlowState, fixed_clock: FixedClock, code):
        result = interpret(issuance_flow, _event(code), fixed_clock)

        assert isinstance(result.failure(), UnexpectedEvent)
        assert result.failure().kind == "issuance"


class TestInterpretPresentation:
    """Tests for interpret on presentation flows"""

    def test_verified_keeps_receipt_and_claims(self, presentation_flow: FlowState, fixed_clock: FixedClock):
        event = _event(
            CallbackCode.PRESENTATION_VERIFIED,
            receipt={"id_token": "eyJ..."},
            subject="did:ion:holder",
            verified_credentials_data=[{"issuer": "did:ion:abc"}],
        )

        flow = interpret(presentation_flow, event, fixed_clock).unwrap()

        assert flow.status is FlowStatus.SUCCEEDED
        assert flow.receipt == {"id_token": "eyJ..."}
        assert flow.subject == "did:ion:holder"
        assert flow.verified_credentials_data == [{"issuer": "did:ion:abc"}]

    def test_receipt_dropped_when_not_requested(
        self, state: CorrelationState, fixed_clock: FixedClock
    ):
        flow = create_pending_flow(state, FlowKind.PRESENTATION, fixed_clock)

        result = interpret(flow, _event(CallbackCode.PRESENTATION_VERIFIED, receipt={"x": 1}), fixed_clock)

        assert result.unwrap().receipt is None

    def test_presentation_error(self, presentation_flow: FlowState, fixed_clock: FixedClock):
        flow = interpret(presentation_flow, _event(CallbackCode.PRESENTATION_ERROR), fixed_clock).unwrap()
        assert flow.status is FlowStatus.FAILED

    def test_issuance_code_unexpected(self, presentation_flow: FlowState, fixed_clock: FixedClock):
        result = interpret(presentation_flow, _event(CallbackCode.ISSUANCE_SUCCESSFUL), fixed_clock)
        assert isinstance(result.failure(), UnexpectedEvent)


class TestIsExpired:
    """Tests for is_expired"""

    def test_not_expired_before_max_age(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        fixed_clock.advance(timedelta(minutes=9))
        assert not is_expired(issuance_flow, timedelta(minutes=10), fixed_clock)

    def test_expired_at_max_age(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        fixed_clock.advance(timedelta(minutes=10))
        assert is_expired(issuance_flow, timedelta(minutes=10), fixed_clock)

    def test_completed_flow_never_expires(self, issuance_flow: FlowState, fixed_clock: FixedClock):
        completed = interpret(issuance_flow, _event(CallbackCode.ISSUANCE_SUCCESSFUL), fixed_clock).unwrap()
        fixed_clock.advance(timedelta(days=1))

        assert not is_expired(completed, timedelta(minutes=10), fixed_clock)
