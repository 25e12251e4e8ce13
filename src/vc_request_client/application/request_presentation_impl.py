"""RequestPresentation use case implementation"""

import logging

from returns.result import Failure, Result, Success

from vc_request_client.domain import (
    CallbackParams,
    Clock,
    CorrelationState,
    CredentialParams,
    FlowKind,
    PresentationParams,
    ServiceConfig,
    ValidationError,
    build_presentation_request,
    create_pending_flow,
)
from vc_request_client.port.input import (
    RequestPresentation,
    RequestPresentationRequest,
    RequestPresentationResponse,
    RequestPresentationError,
)
from vc_request_client.port.output import FlowCorrelator

LOGGER = logging.getLogger(__name__)


class RequestPresentationImpl(RequestPresentation):
    """Implementation of RequestPresentation use case"""

    def __init__(self, correlator: FlowCorrelator, config: ServiceConfig, clock: Clock):
        self.correlator = correlator
        self.config = config
        self.clock = clock

    async def execute(
        self, request: RequestPresentationRequest
    ) -> Result[RequestPresentationResponse, RequestPresentationError]:
        accepted_issuers = (
            self.config.accepted_issuers if request.accepted_issuers is None else request.accepted_issuers
        )
        try:
            presentation_request = build_presentation_request(
                PresentationParams(
                    authority=self.config.verifier_authority,
                    requested_credentials=[
                        CredentialParams(
                            credential_type=request.credential_type or self.config.credential_type,
                            purpose=request.purpose or self.config.purpose,
                            accepted_issuers=tuple(accepted_issuers),
                        )
                    ],
                    callback=CallbackParams(url=self.config.callback_url, api_key=self.config.api_key),
                    include_qr_code=request.include_qr_code,
                    include_receipt=request.include_receipt,
                    client_name=self.config.client_name,
                    purpose=request.purpose or self.config.purpose,
                )
            )
        except ValidationError as e:
            return Failure(RequestPresentationError(f"Invalid presentation request: {e}"))

        state = CorrelationState(value=presentation_request.callback.state)
        flow = create_pending_flow(
            state=state,
            kind=FlowKind.PRESENTATION,
            clock=self.clock,
            include_receipt=request.include_receipt,
        )

        save_result = await self.correlator.put(flow)
        if isinstance(save_result, Failure):
            return Failure(RequestPresentationError(f"Failed to register flow: {save_result.failure()}"))

        LOGGER.info("Presentation flow %s registered", state)

        return Success(RequestPresentationResponse(state=state, request=presentation_request))
