"""
Basic usage example for the request client

This script demonstrates:
1. Building an issuance request with a PIN
2. Building a presentation request asking for a receipt
3. Feeding request service callbacks through the interpreter
4. Reading the final flow status
"""

import asyncio
import json

from vc_request_client.adapter import InMemoryFlowCorrelator
from vc_request_client.application import (
    GetFlowStatusImpl,
    HandleCallbackImpl,
    RequestIssuanceImpl,
    RequestPresentationImpl,
)
from vc_request_client.config import create_test_config
from vc_request_client.domain import CallbackEvent, SystemClock
from vc_request_client.port.input import RequestIssuanceRequest, RequestPresentationRequest


async def main():
    """Run the example"""

    print("=" * 60)
    print("Verifiable Credential Request Client - Basic Usage Example")
    print("=" * 60)

    # 1. Setup
    config = create_test_config()
    clock = SystemClock()
    correlator = InMemoryFlowCorrelator(clock=clock)

    request_issuance = RequestIssuanceImpl(correlator, config, clock)
    request_presentation = RequestPresentationImpl(correlator, config, clock)
    handle_callback = HandleCallbackImpl(correlator, clock)
    get_flow_status = GetFlowStatusImpl(correlator)

    # 2. Issuance
    print("\n1. Building issuance request...")
    issuance = (await request_issuance.execute(RequestIssuanceRequest())).unwrap()
    print(json.dumps(issuance.request.to_payload(), indent=2))
    print(f"  PIN to show the user: {issuance.pin}")

    # 3. Presentation
    print("\n2. Building presentation request...")
    presentation = (await request_presentation.execute(RequestPresentationRequest(include_receipt=True))).unwrap()
    print(json.dumps(presentation.request.to_payload(), indent=2))

    # 4. Callbacks, delivered out of order for the issuance
    print("\n3. Processing callbacks...")
    events = [
        {"requestId": "req-1", "requestStatus": "issuance_successful", "state": issuance.state.value},
        {"requestId": "req-1", "requestStatus": "request_retrieved", "state": issuance.state.value},
        {"requestId": "req-2", "requestStatus": "request_retrieved", "state": presentation.state.value},
        {
            "requestId": "req-2",
            "requestStatus": "presentation_verified",
            "state": presentation.state.value,
            "subject": "did:ion:holder",
            "verifiedCredentialsData": [{"issuer": config.issuer_authority, "claims": {"firstName": "Megan"}}],
            "receipt": {"vp_token": "eyJ..."},
        },
    ]
    for body in events:
        result = await handle_callback.execute(CallbackEvent.model_validate(body))
        outcome = result.map(lambda r: str(r.flow.status)).value_or(None)
        if outcome is None:
            outcome = f"ignored ({result.failure().message})"
        print(f"  {body['requestStatus']:<24} -> {outcome}")

    # 5. Final status
    print("\n4. Final status...")
    for state in (issuance.state, presentation.state):
        status = (await get_flow_status.execute(state)).unwrap()
        print(f"  {status.flow.kind}: {status.flow.status} (successful={status.is_successful})")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
