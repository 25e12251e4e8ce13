"""API models - Request and response DTOs"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class IssuanceRequestModel(BaseModel):
    """Request to start an issuance"""

    claims: Optional[Dict[str, Optional[str]]] = Field(
        None, description="Subject claims: email, given_name, family_name (ID token hint flow)"
    )
    with_pin: Optional[bool] = Field(None, description="Protect issuance with a PIN (default: configuration)")
    include_qr_code: bool = Field(False, description="Ask the request service for a QR code")


class PresentationRequestModel(BaseModel):
    """Request to start a presentation"""

    credential_type: Optional[str] = Field(None, description="Credential type (default: configuration)")
    purpose: Optional[str] = Field(None, description="Why the credential is requested")
    accepted_issuers: Optional[List[str]] = Field(None, description="Accepted issuer DIDs")
    include_receipt: bool = Field(False, description="Ask for the wallet's raw response")
    include_qr_code: bool = Field(False, description="Ask the request service for a QR code")


class FlowRequestResponseModel(BaseModel):
    """Payload built for a new flow"""

    state: str = Field(..., description="Correlation token of the flow")
    payload: Dict[str, Any] = Field(..., description="Request payload to post to the request service")
    pin: Optional[str] = Field(None, description="PIN to show the user (PIN protected issuance)")


class CallbackResponseModel(BaseModel):
    """Acknowledgement of a callback"""

    status: str = Field(..., description="accepted or ignored")
    flow_status: Optional[str] = Field(None, description="Flow status after the callback")


class FlowStatusResponseModel(BaseModel):
    """Status of a flow"""

    state: str = Field(..., description="Correlation token")
    kind: str = Field(..., description="issuance or presentation")
    status: str = Field(..., description="pending, retrieved, succeeded or failed")
    is_live: bool = Field(..., description="Whether the flow can still receive events")
    is_completed: bool = Field(..., description="Whether the flow reached a final state")
    is_successful: bool = Field(..., description="Whether the flow succeeded")
    request_id: Optional[str] = Field(None, description="Request service identifier")
    error: Optional[Dict[str, Any]] = Field(None, description="Request service error (failed flows)")
    receipt: Optional[Any] = Field(None, description="Wallet receipt (presentations with includeReceipt)")
    subject: Optional[str] = Field(None, description="Presenting wallet DID")
    verified_credentials_data: Optional[List[Any]] = Field(None, description="Presented credential data")


class ErrorResponseModel(BaseModel):
    """Standard error response"""

    error: str = Field(..., description="Error code")
    error_description: str = Field(..., description="Human-readable error description")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
