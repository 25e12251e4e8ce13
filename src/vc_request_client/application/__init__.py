"""Application layer - Use case implementations

This layer orchestrates the request builder, the flow state machine and the
flow correlator.
"""

from vc_request_client.application.request_issuance_impl import RequestIssuanceImpl
from vc_request_client.application.request_presentation_impl import RequestPresentationImpl
from vc_request_client.application.handle_callback_impl import HandleCallbackImpl
from vc_request_client.application.get_flow_status_impl import GetFlowStatusImpl

__all__ = [
    "RequestIssuanceImpl",
    "RequestPresentationImpl",
    "HandleCallbackImpl",
    "GetFlowStatusImpl",
]
