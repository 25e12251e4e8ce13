"""Input ports - Use case interfaces"""

from vc_request_client.port.input.request_issuance import (
    RequestIssuance,
    RequestIssuanceRequest,
    RequestIssuanceResponse,
    RequestIssuanceError,
)
from vc_request_client.port.input.request_presentation import (
    RequestPresentation,
    RequestPresentationRequest,
    RequestPresentationResponse,
    RequestPresentationError,
)
from vc_request_client.port.input.handle_callback import (
    HandleCallback,
    HandleCallbackResponse,
)
from vc_request_client.port.input.get_flow_status import (
    GetFlowStatus,
    GetFlowStatusResponse,
    GetFlowStatusError,
)

__all__ = [
    # Request Issuance
    "RequestIssuance",
    "RequestIssuanceRequest",
    "RequestIssuanceResponse",
    "RequestIssuanceError",
    # Request Presentation
    "RequestPresentation",
    "RequestPresentationRequest",
    "RequestPresentationResponse",
    "RequestPresentationError",
    # Handle Callback
    "HandleCallback",
    "HandleCallbackResponse",
    # Get Flow Status
    "GetFlowStatus",
    "GetFlowStatusResponse",
    "GetFlowStatusError",
]
