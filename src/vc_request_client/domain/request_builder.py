"""Request builder - validated construction of outbound payloads

Turns caller parameters into ``IssuanceRequest`` / ``PresentationRequest``
instances. Every check that can be made locally is made here, before any
network call: a rejected request raises a ``ValidationError`` subclass and is
never sent.

Builders are pure functions: no I/O, no shared state. The only randomness is
the generated correlation token and, when asked for, a generated PIN.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from vc_request_client.domain.errors import (
    EmptyRequestedCredentials,
    InvalidAcceptedIssuer,
    InvalidAuthority,
    InvalidCallbackUrl,
    InvalidFieldType,
    InvalidManifest,
    InvalidPinLength,
    InvalidPinValue,
    MissingField,
    UnknownClaim,
)
from vc_request_client.domain.payload import (
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
from vc_request_client.domain.pin import (
    DEFAULT_PIN_LENGTH,
    PinValue,
    PlaintextPin,
    generate_pin,
    validate_pin_length,
)
from vc_request_client.domain.value_objects import (
    CorrelationState,
    is_absolute_http_url,
    is_did,
)

LOGGER = logging.getLogger(__name__)

RECOGNIZED_CLAIMS = ("email", "given_name", "family_name")


# ======================
# Parameters
# ======================


@dataclass(frozen=True)
class PinRequest:
    """
    PIN protection for an issuance.

    Attributes:
        length: Number of digits the wallet asks for (4 to 16)
        value: PIN to send, plain or hashed. Generated when None.
    """

    length: int = DEFAULT_PIN_LENGTH
    value: Optional[PinValue] = None


@dataclass(frozen=True)
class CallbackParams:
    """
    Callback target for a request.

    Attributes:
        url: Absolute URL the request service posts events to
        state: Correlation token, generated when None
        api_key: Value for the ``api-key`` header sent with callbacks
    """

    url: str
    state: Optional[str] = None
    api_key: Optional[str] = None


@dataclass(frozen=True)
class IssuanceParams:
    """Caller input for an issuance request"""

    authority: str
    manifest: str
    credential_type: str
    callback: CallbackParams
    include_qr_code: bool = False
    pin: Optional[PinRequest] = None
    claims: Optional[Mapping[str, Optional[str]]] = None
    client_name: Optional[str] = None
    logo_url: Optional[str] = None
    terms_of_service_url: Optional[str] = None


@dataclass(frozen=True)
class CredentialParams:
    """One credential asked for in a presentation request"""

    credential_type: str
    purpose: str
    accepted_issuers: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class PresentationParams:
    """Caller input for a presentation request"""

    authority: str
    requested_credentials: Sequence[CredentialParams]
    callback: CallbackParams
    include_qr_code: bool = False
    include_receipt: bool = False
    client_name: Optional[str] = None
    purpose: Optional[str] = None


# ======================
# Builders
# ======================


def build_issuance_request(params: IssuanceParams) -> IssuanceRequest:
    """
    Build a validated issuance request.

    Args:
        params: Caller input

    Returns:
        Immutable IssuanceRequest ready for serialization

    Raises:
        ValidationError: If any input is missing or malformed
    """
    authority = _require_did(params.authority)
    if not is_absolute_http_url(params.manifest):
        raise InvalidManifest(params.manifest)
    credential_type = _require_text(params.credential_type, "credential type")

    pin = _build_pin(params.pin) if params.pin is not None else None
    claims = _build_claims(params.claims) if params.claims is not None else None

    if pin is not None and claims is not None:
        # The service tells PIN code and ID token hint flows apart by itself
        LOGGER.info("Issuance request carries both a PIN and claims")

    return IssuanceRequest(
        include_qr_code=params.include_qr_code,
        callback=_build_callback(params.callback),
        authority=authority,
        registration=IssuerRegistration(
            client_name=_optional_text(params.client_name, "client name"),
            logo_url=_optional_text(params.logo_url, "logo URL"),
            terms_of_service_url=_optional_text(params.terms_of_service_url, "terms of service URL"),
        ),
        issuance=IssuanceSection(
            type=credential_type,
            manifest=params.manifest,
            pin=pin,
            claims=claims,
        ),
    )


def build_presentation_request(params: PresentationParams) -> PresentationRequest:
    """
    Build a validated presentation request.

    Requested credentials keep the caller's order; duplicate accepted issuers
    within one credential are dropped.

    Args:
        params: Caller input

    Returns:
        Immutable PresentationRequest ready for serialization

    Raises:
        ValidationError: If any input is missing or malformed
    """
    authority = _require_did(params.authority)
    if not params.requested_credentials:
        raise EmptyRequestedCredentials()

    credentials = tuple(_build_requested_credential(c) for c in params.requested_credentials)

    return PresentationRequest(
        include_qr_code=params.include_qr_code,
        callback=_build_callback(params.callback),
        authority=authority,
        registration=VerifierRegistration(
            client_name=_optional_text(params.client_name, "client name"),
            purpose=_optional_text(params.purpose, "registration purpose"),
        ),
        presentation=PresentationSection(
            include_receipt=params.include_receipt,
            requested_credentials=credentials,
        ),
    )


# ======================
# Helpers
# ======================


def _require_did(authority: str) -> str:
    if not isinstance(authority, str) or not is_did(authority):
        raise InvalidAuthority(authority)
    return authority


def _require_text(value: Optional[str], name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise InvalidFieldType(name, value)
    if not value or not value.strip():
        raise MissingField(name)
    return value


def _optional_text(value: Optional[str], name: str) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise InvalidFieldType(name, value)
    if value is None or not value.strip():
        return None
    return value


def _build_callback(params: CallbackParams) -> Callback:
    if not is_absolute_http_url(params.url):
        raise InvalidCallbackUrl(params.url)

    if params.state is None:
        state = CorrelationState.generate()
    else:
        state = CorrelationState(value=_require_text(params.state, "callback state"))
    api_key = _optional_text(params.api_key, "api key")

    return Callback(
        url=params.url,
        state=state.value,
        headers=CallbackHeaders(api_key=api_key) if api_key else None,
    )


def _build_pin(request: PinRequest) -> PinSpec:
    if not validate_pin_length(request.length):
        raise InvalidPinLength(request.length)

    value = request.value
    if value is None:
        value = PlaintextPin(value=generate_pin(request.length))
    elif isinstance(value, PlaintextPin) and len(value.value) != request.length:
        raise InvalidPinValue(f"PIN has {len(value.value)} digits but length is {request.length}")

    return PinSpec(value=value.value, length=request.length)


def _build_claims(claims: Mapping[str, Optional[str]]) -> Optional[ClaimSet]:
    for name in claims:
        if name not in RECOGNIZED_CLAIMS:
            raise UnknownClaim(name)

    claim_set = ClaimSet(**{name: _optional_text(value, name) for name, value in claims.items()})
    return None if claim_set.is_empty() else claim_set


def _build_requested_credential(params: CredentialParams) -> RequestedCredential:
    for issuer in params.accepted_issuers:
        if not isinstance(issuer, str) or not is_did(issuer):
            raise InvalidAcceptedIssuer(issuer)

    return RequestedCredential(
        type=_require_text(params.credential_type, "credential type"),
        purpose=_require_text(params.purpose, "purpose"),
        accepted_issuers=tuple(dict.fromkeys(params.accepted_issuers)),
    )
