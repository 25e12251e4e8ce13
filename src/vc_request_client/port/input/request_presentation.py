"""Request presentation use case - Build a presentation request and open its flow"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from returns.result import Result

from vc_request_client.domain import CorrelationState, PresentationRequest


@dataclass(frozen=True)
class RequestPresentationRequest:
    """
    Request to start a presentation.

    Attributes:
        credential_type: Credential type to ask for. None uses the configured type.
        purpose: Why the credential is needed. None uses the configured purpose.
        accepted_issuers: Issuer DIDs to accept. None uses the configured issuers.
        include_receipt: Ask the service to return the wallet's raw response
        include_qr_code: Ask the service to return a QR code
    """

    credential_type: Optional[str] = None
    purpose: Optional[str] = None
    accepted_issuers: Optional[Sequence[str]] = None
    include_receipt: bool = False
    include_qr_code: bool = False


@dataclass(frozen=True)
class RequestPresentationResponse:
    """
    Response from request presentation use case.

    Attributes:
        state: Correlation token of the new flow
        request: Payload to post to the request service
    """

    state: CorrelationState
    request: PresentationRequest


class RequestPresentationError(Exception):
    """Error while starting a presentation"""

    pass


class RequestPresentation(ABC):
    """
    Use case: Start a presentation flow.

    Flow:
    1. Build and validate the presentation payload
    2. Register the flow as PENDING under the callback state
    3. Return the payload for the transport layer to post
    """

    @abstractmethod
    async def execute(
        self, request: RequestPresentationRequest
    ) -> Result[RequestPresentationResponse, RequestPresentationError]:
        pass
