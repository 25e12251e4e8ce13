"""Inbound callback events posted by the request service

The service reports progress of a flow by posting JSON to the callback URL
given in the request. Each event echoes the request's ``state`` token and
carries a ``code`` discriminator (the service names the field
``requestStatus``; both spellings are accepted).

Unknown keys are ignored: the service adds fields over time and a callback
must not be rejected for carrying more than this client reads.
"""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from vc_request_client.domain.value_objects import CallbackCode


class ErrorDetail(BaseModel):
    """Error reported by the service for a failed flow"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: str = Field(..., min_length=1, description="Service error code")
    message: Optional[str] = Field(None, description="Human-readable error message")


class CallbackEvent(BaseModel):
    """
    One callback event.

    Attributes:
        request_id: Service-side identifier of the request
        state: Correlation token from the originating request
        code: Event code
        error: Error details (error codes only)
        receipt: Raw wallet response (presentations with includeReceipt only)
        subject: DID of the wallet that presented (presentation_verified)
        verified_credentials_data: Verified credential claims (presentation_verified)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    request_id: str = Field(..., validation_alias=AliasChoices("requestId", "request_id"), min_length=1)
    state: str = Field(..., min_length=1)
    code: CallbackCode = Field(..., validation_alias=AliasChoices("code", "requestStatus"))
    error: Optional[ErrorDetail] = None
    receipt: Optional[Any] = None
    subject: Optional[str] = None
    verified_credentials_data: Optional[List[Any]] = Field(
        None, validation_alias=AliasChoices("verifiedCredentialsData", "verified_credentials_data")
    )

    @field_validator("state")
    @classmethod
    def validate_state_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("state cannot be blank")
        return v
