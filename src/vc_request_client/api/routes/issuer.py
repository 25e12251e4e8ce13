"""Issuer API endpoints"""

from fastapi import APIRouter, Depends, HTTPException
from returns.result import Failure

from vc_request_client.api.dependencies import get_request_issuance_use_case
from vc_request_client.api.models import ErrorResponseModel, FlowRequestResponseModel, IssuanceRequestModel
from vc_request_client.port.input import RequestIssuance, RequestIssuanceRequest

router = APIRouter(prefix="/api/issuer", tags=["Issuer"])


@router.post(
    "/issuance-request",
    response_model=FlowRequestResponseModel,
    response_model_exclude_none=True,
    status_code=201,
    summary="Build issuance request",
    description="Build an issuance request payload and register its flow",
    responses={400: {"model": ErrorResponseModel}},
)
async def issuance_request(
    request: IssuanceRequestModel,
    request_issuance_uc: RequestIssuance = Depends(get_request_issuance_use_case),
) -> FlowRequestResponseModel:
    """
    Start an issuance flow.

    Returns the payload the transport layer posts to the request service and,
    for PIN protected issuance, the PIN to show the user.
    """
    result = await request_issuance_uc.execute(
        RequestIssuanceRequest(
            claims=request.claims,
            with_pin=request.with_pin,
            include_qr_code=request.include_qr_code,
        )
    )

    if isinstance(result, Failure):
        raise HTTPException(
            status_code=400,
            detail=ErrorResponseModel(
                error="invalid_request",
                error_description=str(result.failure()),
            ).model_dump(),
        )

    response = result.unwrap()
    return FlowRequestResponseModel(
        state=response.state.value,
        payload=response.request.to_payload(),
        pin=response.pin,
    )
