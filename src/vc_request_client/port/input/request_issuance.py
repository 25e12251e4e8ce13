"""Request issuance use case - Build an issuance request and open its flow"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

from returns.result import Result

from vc_request_client.domain import CorrelationState, IssuanceRequest


@dataclass(frozen=True)
class RequestIssuanceRequest:
    """
    Request to start an issuance.

    Attributes:
        claims: Optional subject claims (ID token hint flow)
        with_pin: Protect issuance with a PIN. None follows configuration.
        include_qr_code: Ask the service to return a QR code
    """

    claims: Optional[Dict[str, Optional[str]]] = None
    with_pin: Optional[bool] = None
    include_qr_code: bool = False


@dataclass(frozen=True)
class RequestIssuanceResponse:
    """
    Response from request issuance use case.

    Attributes:
        state: Correlation token of the new flow
        request: Payload to post to the request service
        pin: Plaintext PIN to show the user, if the issuance is PIN protected
    """

    state: CorrelationState
    request: IssuanceRequest
    pin: Optional[str] = None


class RequestIssuanceError(Exception):
    """Error while starting an issuance"""

    pass


class RequestIssuance(ABC):
    """
    Use case: Start an issuance flow.

    Flow:
    1. Build and validate the issuance payload
    2. Register the flow as PENDING under the callback state
    3. Return the payload for the transport layer to post
    """

    @abstractmethod
    async def execute(self, request: RequestIssuanceRequest) -> Result[RequestIssuanceResponse, RequestIssuanceError]:
        pass
