"""Domain layer - payloads, PIN policy, request builder and flow state machine"""

from vc_request_client.domain.clock import Clock, FixedClock, SystemClock
from vc_request_client.domain.errors import (
    CallbackError,
    ConcurrentUpdate,
    EmptyRequestedCredentials,
    InvalidAcceptedIssuer,
    InvalidAuthority,
    InvalidCallbackUrl,
    InvalidFieldType,
    InvalidManifest,
    InvalidPinLength,
    InvalidPinValue,
    MissingField,
    StaleEvent,
    UnexpectedEvent,
    UnknownClaim,
    UnknownCorrelation,
    ValidationError,
)
from vc_request_client.domain.value_objects import (
    CallbackCode,
    CorrelationState,
    FlowKind,
    is_absolute_http_url,
    is_did,
)
from vc_request_client.domain.pin import (
    DEFAULT_PIN_LENGTH,
    MAX_PIN_LENGTH,
    MIN_PIN_LENGTH,
    HashedPin,
    PinValue,
    PlaintextPin,
    generate_pin,
    hash_pin,
    validate_pin_length,
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
from vc_request_client.domain.request_builder import (
    CallbackParams,
    CredentialParams,
    IssuanceParams,
    PinRequest,
    PresentationParams,
    build_issuance_request,
    build_presentation_request,
)
from vc_request_client.domain.service_config import CALLBACK_PATH, ServiceConfig
from vc_request_client.domain.callback_event import CallbackEvent, ErrorDetail
from vc_request_client.domain.flow import (
    FlowState,
    FlowStatus,
    create_pending_flow,
    interpret,
    is_expired,
    is_live,
    is_successful,
    is_terminal,
)

__all__ = [
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    # Errors
    "CallbackError",
    "ConcurrentUpdate",
    "EmptyRequestedCredentials",
    "InvalidAcceptedIssuer",
    "InvalidAuthority",
    "InvalidCallbackUrl",
    "InvalidFieldType",
    "InvalidManifest",
    "InvalidPinLength",
    "InvalidPinValue",
    "MissingField",
    "StaleEvent",
    "UnexpectedEvent",
    "UnknownClaim",
    "UnknownCorrelation",
    "ValidationError",
    # Value objects
    "CallbackCode",
    "CorrelationState",
    "FlowKind",
    "is_absolute_http_url",
    "is_did",
    # PIN policy
    "DEFAULT_PIN_LENGTH",
    "MAX_PIN_LENGTH",
    "MIN_PIN_LENGTH",
    "HashedPin",
    "PinValue",
    "PlaintextPin",
    "generate_pin",
    "hash_pin",
    "validate_pin_length",
    # Payload model
    "Callback",
    "CallbackHeaders",
    "ClaimSet",
    "IssuanceRequest",
    "IssuanceSection",
    "IssuerRegistration",
    "PinSpec",
    "PresentationRequest",
    "PresentationSection",
    "RequestedCredential",
    "VerifierRegistration",
    # Request builder
    "CallbackParams",
    "CredentialParams",
    "IssuanceParams",
    "PinRequest",
    "PresentationParams",
    "build_issuance_request",
    "build_presentation_request",
    # Configuration
    "CALLBACK_PATH",
    "ServiceConfig",
    # Callback events and flows
    "CallbackEvent",
    "ErrorDetail",
    "FlowState",
    "FlowStatus",
    "create_pending_flow",
    "interpret",
    "is_expired",
    "is_live",
    "is_successful",
    "is_terminal",
]
