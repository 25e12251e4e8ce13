"""Verifier API endpoints"""

from fastapi import APIRouter, Depends, HTTPException
from returns.result import Failure

from vc_request_client.api.dependencies import get_request_presentation_use_case
from vc_request_client.api.models import ErrorResponseModel, FlowRequestResponseModel, PresentationRequestModel
from vc_request_client.port.input import RequestPresentation, RequestPresentationRequest

router = APIRouter(prefix="/api/verifier", tags=["Verifier"])


@router.post(
    "/presentation-request",
    response_model=FlowRequestResponseModel,
    response_model_exclude_none=True,
    status_code=201,
    summary="Build presentation request",
    description="Build a presentation request payload and register its flow",
    responses={400: {"model": ErrorResponseModel}},
)
async def presentation_request(
    request: PresentationRequestModel,
    request_presentation_uc: RequestPresentation = Depends(get_request_presentation_use_case),
) -> FlowRequestResponseModel:
    result = await request_presentation_uc.execute(
        RequestPresentationRequest(
            credential_type=request.credential_type,
            purpose=request.purpose,
            accepted_issuers=request.accepted_issuers,
            include_receipt=request.include_receipt,
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
    return FlowRequestResponseModel(state=response.state.value, payload=response.request.to_payload())
