"""Outbound request payloads for the credential request service

This module models the two JSON documents a client posts to the request
service:

- IssuanceRequest: ask the service to issue a credential to a wallet
- PresentationRequest: ask a wallet to present credentials to a verifier

Wire format rules:

- Keys are the service's fixed camelCase names (``includeQRCode``,
  ``requestedCredentials``, ``api-key``...), declared as field aliases.
- An optional field that is unset is left out of the document entirely. The
  service reads the presence of an optional key as a feature switch, so
  neither ``null`` nor an empty object/list may stand in for "unset".
  Empty ``headers`` and ``claims`` are collapsed to unset at construction.

All models are frozen; build them through ``request_builder`` rather than
directly so that caller input is validated first.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vc_request_client.domain.pin import MAX_PIN_LENGTH, MIN_PIN_LENGTH, DEFAULT_PIN_LENGTH
from vc_request_client.domain.value_objects import is_absolute_http_url


class WireModel(BaseModel):
    """Base for payload sections: immutable, aliased, strict about unknown keys"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def to_payload(self) -> Dict[str, Any]:
        """JSON-compatible dict with wire keys and unset optionals omitted"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialized JSON document with wire keys and unset optionals omitted"""
        return self.model_dump_json(by_alias=True, exclude_none=True)


# ======================
# Callback
# ======================


class CallbackHeaders(WireModel):
    """HTTP headers the service must send back with every callback"""

    api_key: str = Field(..., alias="api-key", min_length=1, description="Key the callback endpoint checks")


class Callback(WireModel):
    """
    Where and how the service reports flow progress.

    Attributes:
        url: Externally reachable callback endpoint
        state: Correlation token echoed in every callback
        headers: Optional authorization headers for the callback endpoint
    """

    url: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    headers: Optional[CallbackHeaders] = None


# ======================
# Registration
# ======================


class IssuerRegistration(WireModel):
    """Issuer details the wallet displays during issuance"""

    client_name: Optional[str] = Field(None, alias="clientName")
    logo_url: Optional[str] = Field(None, alias="logoUrl")
    terms_of_service_url: Optional[str] = Field(None, alias="termsOfServiceUrl")


class VerifierRegistration(WireModel):
    """Verifier details the wallet displays during presentation"""

    client_name: Optional[str] = Field(None, alias="clientName")
    purpose: Optional[str] = None


# ======================
# Issuance
# ======================


class PinSpec(WireModel):
    """
    PIN the user must enter in the wallet to accept the credential.

    ``value`` is either the plain PIN or its salted hash, base64 encoded.
    """

    value: str = Field(..., min_length=1)
    length: int = Field(DEFAULT_PIN_LENGTH, ge=MIN_PIN_LENGTH, le=MAX_PIN_LENGTH)


class ClaimSet(WireModel):
    """Claims asserted about the subject (ID token hint flow)"""

    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None

    @field_validator("email", "given_name", "family_name", mode="before")
    @classmethod
    def blank_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_empty(self) -> bool:
        return self.email is None and self.given_name is None and self.family_name is None


class IssuanceSection(WireModel):
    """
    What to issue.

    Attributes:
        type: Credential type, must match the type declared in the manifest
        manifest: URL of the credential manifest
        pin: Optional PIN (PIN code flow)
        claims: Optional claims (ID token hint flow)
    """

    type: str = Field(..., min_length=1)
    manifest: str = Field(..., min_length=1)
    pin: Optional[PinSpec] = None
    claims: Optional[ClaimSet] = None

    @field_validator("manifest")
    @classmethod
    def validate_manifest(cls, v: str) -> str:
        if not is_absolute_http_url(v):
            raise ValueError(f"Manifest must be an absolute http(s) URL: {v}")
        return v

    @field_validator("claims")
    @classmethod
    def empty_claims_are_unset(cls, v: Optional[ClaimSet]) -> Optional[ClaimSet]:
        if v is not None and v.is_empty():
            return None
        return v


class IssuanceRequest(WireModel):
    """Issuance request payload"""

    include_qr_code: bool = Field(False, alias="includeQRCode")
    callback: Callback
    authority: str = Field(..., min_length=1)
    registration: IssuerRegistration = Field(default_factory=IssuerRegistration)
    issuance: IssuanceSection


# ======================
# Presentation
# ======================


class RequestedCredential(WireModel):
    """
    One credential the verifier asks the wallet for.

    Attributes:
        type: Credential type as declared by the issuer's manifest
        purpose: Why the verifier needs it
        accepted_issuers: DIDs of issuers whose credentials are accepted
    """

    type: str = Field(..., min_length=1)
    purpose: str = Field(..., min_length=1)
    accepted_issuers: Tuple[str, ...] = Field((), alias="acceptedIssuers")

    @field_validator("accepted_issuers")
    @classmethod
    def drop_duplicate_issuers(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Keep the first occurrence of each issuer"""
        return tuple(dict.fromkeys(v))


class PresentationSection(WireModel):
    """What the wallet must present"""

    include_receipt: bool = Field(False, alias="includeReceipt")
    requested_credentials: Tuple[RequestedCredential, ...] = Field(..., alias="requestedCredentials", min_length=1)


class PresentationRequest(WireModel):
    """Presentation request payload"""

    include_qr_code: bool = Field(False, alias="includeQRCode")
    callback: Callback
    authority: str = Field(..., min_length=1)
    registration: VerifierRegistration = Field(default_factory=VerifierRegistration)
    presentation: PresentationSection

