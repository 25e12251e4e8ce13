"""Common test fixtures for unit tests"""

from datetime import datetime, timezone

import pytest

from vc_request_client.domain import (
    CallbackParams,
    CorrelationState,
    CredentialParams,
    FixedClock,
    IssuanceParams,
    PresentationParams,
)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Fixed clock at 2024-01-15 12:00:00 UTC"""
    return FixedClock(datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def state() -> CorrelationState:
    """Sample correlation token"""
    return CorrelationState(value="state_abc123")


@pytest.fixture
def callback_params() -> CallbackParams:
    """Callback without api key, fixed state"""
    return CallbackParams(url="https://host.example.com/api/callback", state="state_abc123")


@pytest.fixture
def issuance_params(callback_params: CallbackParams) -> IssuanceParams:
    """Minimal issuance parameters"""
    return IssuanceParams(
        authority="did:ion:issuer",
        manifest="https://example/manifest.json",
        credential_type="VerifiedCredentialExpert",
        callback=callback_params,
    )


@pytest.fixture
def presentation_params(callback_params: CallbackParams) -> PresentationParams:
    """Presentation parameters asking for one credential with a receipt"""
    return PresentationParams(
        authority="did:ion:verifier",
        requested_credentials=[
            CredentialParams(
                credential_type="VerifiedCredentialExpert",
                purpose="demo",
                accepted_issuers=["did:ion:abc"],
            )
        ],
        callback=callback_params,
        include_receipt=True,
    )
