"""Value objects for the domain layer"""

import re
import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Final
from urllib.parse import urlsplit

# did:<method>:<method-specific-id>, method names are lowercase alphanumerics
DID_PATTERN: Final = re.compile(r"^did:[a-z0-9]+:(?:[A-Za-z0-9._%-]*:)*[A-Za-z0-9._%-]+$")


def is_did(value: str) -> bool:
    """Check whether value is syntactically a DID"""
    return bool(value) and DID_PATTERN.match(value) is not None


def is_absolute_http_url(value: str) -> bool:
    """Check whether value is an absolute http or https URL"""
    if not isinstance(value, str) or not value or value != value.strip():
        return False
    parts = urlsplit(value)
    return parts.scheme in ("http", "https") and bool(parts.netloc)


@dataclass(frozen=True)
class CorrelationState:
    """
    Opaque token linking an outbound request to its callbacks.

    Generated by the caller, echoed back by the request service in every
    callback as ``state``.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("CorrelationState cannot be blank")

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def generate() -> "CorrelationState":
        """Generate a cryptographically random correlation token"""
        return CorrelationState(value=secrets.token_urlsafe(32))


class FlowKind(str, Enum):
    """Kind of interaction a flow was opened for"""

    ISSUANCE: Final[str] = "issuance"
    PRESENTATION: Final[str] = "presentation"

    def __str__(self) -> str:
        return self.value


class CallbackCode(str, Enum):
    """
    Event codes the request service posts to the callback endpoint

    REQUEST_RETRIEVED: wallet scanned the QR code / opened the deep link
    ISSUANCE_SUCCESSFUL / ISSUANCE_ERROR: outcome of an issuance flow
    PRESENTATION_VERIFIED / PRESENTATION_ERROR: outcome of a presentation flow
    """

    REQUEST_RETRIEVED: Final[str] = "request_retrieved"
    ISSUANCE_SUCCESSFUL: Final[str] = "issuance_successful"
    ISSUANCE_ERROR: Final[str] = "issuance_error"
    PRESENTATION_VERIFIED: Final[str] = "presentation_verified"
    PRESENTATION_ERROR: Final[str] = "presentation_error"

    def __str__(self) -> str:
        return self.value

    @property
    def flow_kind(self) -> FlowKind | None:
        """Flow kind this code terminates, None for request_retrieved"""
        if self in (CallbackCode.ISSUANCE_SUCCESSFUL, CallbackCode.ISSUANCE_ERROR):
            return FlowKind.ISSUANCE
        if self in (CallbackCode.PRESENTATION_VERIFIED, CallbackCode.PRESENTATION_ERROR):
            return FlowKind.PRESENTATION
        return None

    @property
    def is_success(self) -> bool:
        return self in (CallbackCode.ISSUANCE_SUCCESSFUL, CallbackCode.PRESENTATION_VERIFIED)

    @property
    def is_error(self) -> bool:
        return self in (CallbackCode.ISSUANCE_ERROR, CallbackCode.PRESENTATION_ERROR)
