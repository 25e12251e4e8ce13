"""Error types for request building and callback interpretation

Request-building errors are exceptions: they are raised synchronously by the
request builder and never leave the process. Callback errors are immutable
values returned inside ``Failure`` by the flow state machine and the callback
use case, mirroring how flow transitions report their outcome.
"""

from dataclasses import dataclass


# ======================
# Validation (raised)
# ======================


class ValidationError(ValueError):
    """Base error for an outbound request that cannot be built"""

    pass


class InvalidAuthority(ValidationError):
    """Authority is missing or not a DID"""

    def __init__(self, authority: str):
        self.authority = authority
        super().__init__(f"Authority must be a DID (did:<method>:<id>), got: {authority!r}")


class InvalidAcceptedIssuer(ValidationError):
    """Accepted issuer is not a DID"""

    def __init__(self, issuer: str):
        self.issuer = issuer
        super().__init__(f"Accepted issuer must be a DID, got: {issuer!r}")


class InvalidCallbackUrl(ValidationError):
    """Callback URL is not an absolute http(s) URL"""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Callback URL must be an absolute http(s) URL, got: {url!r}")


class InvalidManifest(ValidationError):
    """Manifest URL is not an absolute http(s) URL"""

    def __init__(self, manifest: str):
        self.manifest = manifest
        super().__init__(f"Manifest must be an absolute http(s) URL, got: {manifest!r}")


class InvalidPinLength(ValidationError):
    """PIN length outside the accepted range"""

    def __init__(self, length: object):
        self.length = length
        super().__init__(f"PIN length must be between 4 and 16, got: {length!r}")


class InvalidPinValue(ValidationError):
    """PIN value does not fit its declared representation"""

    pass


class MissingField(ValidationError):
    """Required field is empty"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} cannot be blank")


class InvalidFieldType(ValidationError):
    """Text field holds a value that is not a string"""

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a string, got: {type(value).__name__}")


class EmptyRequestedCredentials(ValidationError):
    """Presentation request asks for no credentials"""

    def __init__(self) -> None:
        super().__init__("Presentation request must contain at least one requested credential")


class UnknownClaim(ValidationError):
    """Claim name is not one the issuance payload carries"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown claim: {name!r}. Must be one of email, given_name, family_name")


# ======================
# Callback interpretation (returned)
# ======================


@dataclass(frozen=True)
class CallbackError:
    """Base error type for callback interpretation"""

    message: str = ""


@dataclass(frozen=True)
class UnknownCorrelation(CallbackError):
    """Callback references a state token no flow was registered for"""

    state: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", f"No flow registered for state {self.state!r}")


@dataclass(frozen=True)
class StaleEvent(CallbackError):
    """Callback arrived for a flow that already completed"""

    state: str = ""
    status: str = ""
    code: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Flow {self.state!r} is already {self.status}; ignoring {self.code}",
        )


@dataclass(frozen=True)
class UnexpectedEvent(CallbackError):
    """Callback code belongs to the other kind of flow"""

    state: str = ""
    kind: str = ""
    code: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Event {self.code} does not apply to {self.kind} flow {self.state!r}",
        )


@dataclass(frozen=True)
class ConcurrentUpdate(CallbackError):
    """Flow kept changing underneath the interpreter"""

    state: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", f"Could not apply callback to flow {self.state!r}: concurrent updates")
