"""Tests for payload models and their wire serialization"""

import json

import pytest

from vc_request_client.domain import (
    Callback,
    CallbackHeaders,
    ClaimSet,
    IssuanceRequest,
    IssuanceSection,
    IssuerRegistration,
    PinSpec,
    PresentationRequest,
    PresentationSection,
    RequestedCredential,
    VerifierRegistration,
)


def _contains_null(value) -> bool:
    if value is None:
        return True
    if isinstance(value, dict):
        return any(_contains_null(v) for v in value.values())
    if isinstance(value, list):
        return any(_contains_null(v) for v in value)
    return False


@pytest.fixture
def callback() -> Callback:
    return Callback(url="https://host.example.com/api/callback", state="state_abc123")


class TestCallback:
    """Tests for Callback"""

    def test_headers_absent_when_unset(self, callback: Callback):
        assert callback.to_payload() == {"url": "https://host.example.com/api/callback", "state": "state_abc123"}

    def test_api_key_header_uses_wire_name(self, callback: Callback):
        with_headers = callback.model_copy(update={"headers": CallbackHeaders(api_key="secret")})
        assert with_headers.to_payload()["headers"] == {"api-key": "secret"}

    def test_immutable(self, callback: Callback):
        with pytest.raises(Exception):
            callback.state = "other"


class TestRegistration:
    """Tests for registration sections"""

    def test_issuer_registration_omits_unset_fields(self):
        registration = IssuerRegistration(client_name="Contoso")
        assert registration.to_payload() == {"clientName": "Contoso"}

    def test_issuer_registration_wire_names(self):
        registration = IssuerRegistration(
            client_name="Contoso",
            logo_url="https://contoso.example/logo.png",
            terms_of_service_url="https://contoso.example/tos",
        )
        assert set(registration.to_payload()) == {"clientName", "logoUrl", "termsOfServiceUrl"}

    def test_empty_verifier_registration_is_empty_object(self):
        assert VerifierRegistration().to_payload() == {}


class TestIssuanceSection:
    """Tests for IssuanceSection"""

    def test_pin_and_claims_absent_when_unset(self):
        section = IssuanceSection(type="VerifiedCredentialExpert", manifest="https://example/manifest.json")
        assert section.to_payload() == {"type": "VerifiedCredentialExpert", "manifest": "https://example/manifest.json"}

    def test_empty_claims_collapse_to_unset(self):
        section = IssuanceSection(
            type="VerifiedCredentialExpert",
            manifest="https://example/manifest.json",
            claims=ClaimSet(email="  "),
        )
        assert section.claims is None
        assert "claims" not in section.to_payload()

    def test_unset_claims_are_omitted_not_empty_strings(self):
        claims = ClaimSet(given_name="Megan", family_name="")
        assert claims.to_payload() == {"given_name": "Megan"}

    def test_pin_length_bounds_enforced(self):
        with pytest.raises(ValueError):
            PinSpec(value="123", length=3)
        with pytest.raises(ValueError):
            PinSpec(value="1" * 17, length=17)


class TestIssuanceRequest:
    """Tests for IssuanceRequest serialization"""

    def test_wire_document(self, callback: Callback):
        request = IssuanceRequest(
            include_qr_code=True,
            callback=callback,
            authority="did:ion:issuer",
            registration=IssuerRegistration(client_name="Contoso"),
            issuance=IssuanceSection(
                type="VerifiedCredentialExpert",
                manifest="https://example/manifest.json",
                pin=PinSpec(value="123456", length=6),
            ),
        )

        assert request.to_payload() == {
            "includeQRCode": True,
            "callback": {"url": "https://host.example.com/api/callback", "state": "state_abc123"},
            "authority": "did:ion:issuer",
            "registration": {"clientName": "Contoso"},
            "issuance": {
                "type": "VerifiedCredentialExpert",
                "manifest": "https://example/manifest.json",
                "pin": {"value": "123456", "length": 6},
            },
        }

    def test_json_has_no_nulls(self, callback: Callback):
        request = IssuanceRequest(
            callback=callback,
            authority="did:ion:issuer",
            issuance=IssuanceSection(type="VerifiedCredentialExpert", manifest="https://example/manifest.json"),
        )

        document = json.loads(request.to_json())

        assert "null" not in request.to_json()
        assert not _contains_null(document)
        assert document["registration"] == {}

    def test_accepts_wire_names_on_input(self):
        """A wire document parses back into the model"""
        request = IssuanceRequest.model_validate(
            {
                "includeQRCode": False,
                "callback": {"url": "https://h.example/cb", "state": "s1", "headers": {"api-key": "k"}},
                "authority": "did:ion:issuer",
                "registration": {},
                "issuance": {"type": "T", "manifest": "https://example/m.json"},
            }
        )
        assert request.callback.headers.api_key == "k"

    def test_relative_manifest_rejected(self):
        with pytest.raises(ValueError):
            IssuanceSection(type="T", manifest="manifest.json")

    def test_unknown_keys_rejected(self, callback: Callback):
        with pytest.raises(ValueError):
            IssuanceSection(type="T", manifest="https://example/m.json", unexpected="x")


class TestPresentationRequest:
    """Tests for PresentationRequest serialization"""

    def test_wire_document(self, callback: Callback):
        request = PresentationRequest(
            callback=callback,
            authority="did:ion:verifier",
            registration=VerifierRegistration(client_name="Verifier", purpose="demo"),
            presentation=PresentationSection(
                include_receipt=True,
                requested_credentials=(
                    RequestedCredential(type="VerifiedCredentialExpert", purpose="demo", accepted_issuers=("did:ion:abc",)),
                ),
            ),
        )

        assert request.to_payload() == {
            "includeQRCode": False,
            "callback": {"url": "https://host.example.com/api/callback", "state": "state_abc123"},
            "authority": "did:ion:verifier",
            "registration": {"clientName": "Verifier", "purpose": "demo"},
            "presentation": {
                "includeReceipt": True,
                "requestedCredentials": [
                    {"type": "VerifiedCredentialExpert", "purpose": "demo", "acceptedIssuers": ["did:ion:abc"]}
                ],
            },
        }

    def test_requested_credentials_required(self):
        with pytest.raises(ValueError):
            PresentationSection(requested_credentials=())

    def test_accepted_issuers_deduplicated_in_order(self):
        credential = RequestedCredential(
            type="T", purpose="p", accepted_issuers=("did:ion:b", "did:ion:a", "did:ion:b")
        )
        assert credential.accepted_issuers == ("did:ion:b", "did:ion:a")
