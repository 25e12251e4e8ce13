"""Tests for the RequestIssuance and RequestPresentation use cases"""

import asyncio

from vc_request_client.adapter import InMemoryFlowCorrelator
from vc_request_client.application import RequestIssuanceImpl, RequestPresentationImpl
from vc_request_client.domain import FixedClock, FlowKind, FlowStatus, ServiceConfig
from vc_request_client.port.input import (
    RequestIssuanceError,
    RequestIssuanceRequest,
    RequestPresentationError,
    RequestPresentationRequest,
)


class TestRequestIssuance:
    """Tests for RequestIssuanceImpl"""

    def test_registers_pending_flow(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestIssuanceImpl(correlator, config, fixed_clock)

        response = asyncio.run(use_case.execute(RequestIssuanceRequest())).unwrap()

        flow = asyncio.run(correlator.get(response.state)).unwrap()
        assert flow.kind is FlowKind.ISSUANCE
        assert flow.status is FlowStatus.PENDING
        assert response.request.callback.state == response.state.value

    def test_payload_uses_config(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestIssuanceImpl(correlator, config, fixed_clock)

        payload = asyncio.run(use_case.execute(RequestIssuanceRequest())).unwrap().request.to_payload()

        assert payload["authority"] == "did:web:issuer.example.com"
        assert payload["callback"]["url"] == "http://localhost:8000/api/callback"
        assert payload["callback"]["headers"] == {"api-key": "test-api-key"}
        assert payload["registration"] == {"clientName": "Verifiable Credential Expert Sample"}
        assert payload["issuance"]["type"] == "VerifiedCredentialExpert"

    def test_pin_from_config(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestIssuanceImpl(correlator, config, fixed_clock)

        response = asyncio.run(use_case.execute(RequestIssuanceRequest())).unwrap()

        assert len(response.pin) == 4
        assert response.request.issuance.pin.value == response.pin
        assert response.request.issuance.pin.length == 4

    def test_pin_can_be_turned_off(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestIssuanceImpl(correlator, config, fixed_clock)

        response = asyncio.run(
            use_case.execute(RequestIssuanceRequest(claims={"given_name": "Megan"}, with_pin=False))
        ).unwrap()

        assert response.pin is None
        assert "pin" not in response.request.to_payload()["issuance"]
        assert response.request.to_payload()["issuance"]["claims"] == {"given_name": "Megan"}

    def test_pin_forced_on_uses_default_length(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestIssuanceImpl(correlator, config.model_copy(update={"issuance_pin_length": 0}), fixed_clock)

        response = asyncio.run(use_case.execute(RequestIssuanceRequest(with_pin=True))).unwrap()

        assert len(response.pin) == 6

    def test_invalid_claims_fail_without_registering(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestIssuanceImpl(correlator, config, fixed_clock)

        result = asyncio.run(use_case.execute(RequestIssuanceRequest(claims={"nickname": "meg"})))

        assert isinstance(result.failure(), RequestIssuanceError)
        assert asyncio.run(correlator.count()).unwrap() == 0

    def test_each_request_gets_its_own_state(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestIssuanceImpl(correlator, config, fixed_clock)

        first = asyncio.run(use_case.execute(RequestIssuanceRequest())).unwrap()
        second = asyncio.run(use_case.execute(RequestIssuanceRequest())).unwrap()

        assert first.state != second.state
        assert asyncio.run(correlator.count()).unwrap() == 2


class TestRequestPresentation:
    """Tests for RequestPresentationImpl"""

    def test_registers_pending_flow_with_receipt(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestPresentationImpl(correlator, config, fixed_clock)

        response = asyncio.run(use_case.execute(RequestPresentationRequest(include_receipt=True))).unwrap()

        flow = asyncio.run(correlator.get(response.state)).unwrap()
        assert flow.kind is FlowKind.PRESENTATION
        assert flow.include_receipt is True
        assert response.request.presentation.include_receipt is True

    def test_defaults_from_config(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestPresentationImpl(correlator, config, fixed_clock)

        payload = asyncio.run(use_case.execute(RequestPresentationRequest())).unwrap().request.to_payload()

        assert payload["authority"] == "did:web:verifier.example.com"
        assert payload["presentation"]["requestedCredentials"] == [
            {
                "type": "VerifiedCredentialExpert",
                "purpose": "To prove you are a Verified Credential Expert",
                "acceptedIssuers": ["did:web:issuer.example.com"],
            }
        ]

    def test_caller_overrides(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestPresentationImpl(correlator, config, fixed_clock)

        request = RequestPresentationRequest(
            credential_type="EmployeeCard", purpose="Building access", accepted_issuers=["did:ion:contoso"]
        )
        credential = asyncio.run(use_case.execute(request)).unwrap().request.presentation.requested_credentials[0]

        assert credential.type == "EmployeeCard"
        assert credential.purpose == "Building access"
        assert credential.accepted_issuers == ("did:ion:contoso",)

    def test_invalid_issuer_fails(
        self, correlator: InMemoryFlowCorrelator, config: ServiceConfig, fixed_clock: FixedClock
    ):
        use_case = RequestPresentationImpl(correlator, config, fixed_clock)

        result = asyncio.run(use_case.execute(RequestPresentationRequest(accepted_issuers=["contoso"])))

        assert isinstance(result.failure(), RequestPresentationError)
        assert asyncio.run(correlator.count()).unwrap() == 0
