"""Callback and status API endpoints"""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from pydantic import ValidationError
from returns.result import Failure

from vc_request_client.api.dependencies import (
    get_get_flow_status_use_case,
    get_handle_callback_use_case,
    get_service_config,
)
from vc_request_client.api.models import CallbackResponseModel, ErrorResponseModel, FlowStatusResponseModel
from vc_request_client.domain import (
    CallbackEvent,
    CorrelationState,
    ServiceConfig,
    StaleEvent,
    UnknownCorrelation,
)
from vc_request_client.port.input import GetFlowStatus, HandleCallback

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Callback"])


@router.post(
    "/callback",
    response_model=CallbackResponseModel,
    response_model_exclude_none=True,
    summary="Receive callback",
    description="Endpoint the request service posts flow events to",
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        409: {"model": ErrorResponseModel},
    },
)
async def receive_callback(
    request: Request,
    api_key: Optional[str] = Header(None, alias="api-key"),
    config: ServiceConfig = Depends(get_service_config),
    handle_callback_uc: HandleCallback = Depends(get_handle_callback_use_case),
) -> CallbackResponseModel:
    """
    Process a callback event.

    Events for unknown or already completed flows are acknowledged and
    dropped so the request service stops redelivering them.
    """
    if config.api_key and not secrets.compare_digest(
        (api_key or "").encode("utf-8"), config.api_key.encode("utf-8")
    ):
        raise HTTPException(
            status_code=401,
            detail=ErrorResponseModel(
                error="unauthorized", error_description="Missing or invalid api-key header"
            ).model_dump(),
        )

    try:
        event = CallbackEvent.model_validate(await request.json())
    except (ValueError, ValidationError) as e:
        raise HTTPException(
            status_code=400,
            detail=ErrorResponseModel(
                error="invalid_callback", error_description=f"Invalid callback body: {e}"
            ).model_dump(),
        )

    result = await handle_callback_uc.execute(event)

    if isinstance(result, Failure):
        error = result.failure()
        if isinstance(error, (UnknownCorrelation, StaleEvent)):
            return CallbackResponseModel(status="ignored")
        raise HTTPException(
            status_code=409,
            detail=ErrorResponseModel(error="callback_rejected", error_description=error.message).model_dump(),
        )

    return CallbackResponseModel(status="accepted", flow_status=str(result.unwrap().flow.status))


@router.get(
    "/status/{state}",
    response_model=FlowStatusResponseModel,
    response_model_exclude_none=True,
    summary="Get flow status",
    description="Status of the flow opened for a correlation token",
    responses={404: {"model": ErrorResponseModel}},
)
async def get_flow_status(
    state: str,
    get_flow_status_uc: GetFlowStatus = Depends(get_get_flow_status_use_case),
) -> FlowStatusResponseModel:
    try:
        correlation_state = CorrelationState(value=state)
    except ValueError:
        raise HTTPException(
            status_code=404,
            detail=ErrorResponseModel(
                error="flow_not_found", error_description=f"Flow not found: {state!r}"
            ).model_dump(),
        )

    result = await get_flow_status_uc.execute(correlation_state)

    if isinstance(result, Failure):
        raise HTTPException(
            status_code=404,
            detail=ErrorResponseModel(
                error="flow_not_found", error_description=str(result.failure())
            ).model_dump(),
        )

    response = result.unwrap()
    flow = response.flow
    return FlowStatusResponseModel(
        state=flow.state.value,
        kind=str(flow.kind),
        status=str(flow.status),
        is_live=response.is_live,
        is_completed=response.is_completed,
        is_successful=response.is_successful,
        request_id=flow.request_id,
        error=flow.error.model_dump(exclude_none=True) if flow.error else None,
        receipt=flow.receipt,
        subject=flow.subject,
        verified_credentials_data=flow.verified_credentials_data,
    )
