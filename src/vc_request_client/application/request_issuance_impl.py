"""RequestIssuance use case implementation"""

import logging
from typing import Optional

from returns.result import Failure, Result, Success

from vc_request_client.domain import (
    DEFAULT_PIN_LENGTH,
    CallbackParams,
    Clock,
    CorrelationState,
    FlowKind,
    IssuanceParams,
    PinRequest,
    PlaintextPin,
    ServiceConfig,
    ValidationError,
    build_issuance_request,
    create_pending_flow,
    generate_pin,
)
from vc_request_client.port.input import (
    RequestIssuance,
    RequestIssuanceRequest,
    RequestIssuanceResponse,
    RequestIssuanceError,
)
from vc_request_client.port.output import FlowCorrelator

LOGGER = logging.getLogger(__name__)


class RequestIssuanceImpl(RequestIssuance):
    """
    Implementation of RequestIssuance use case.

    Builds the payload from configuration plus the caller's claims, and
    registers the PENDING flow before the payload leaves the process so that
    no callback can arrive for an unknown token.
    """

    def __init__(self, correlator: FlowCorrelator, config: ServiceConfig, clock: Clock):
        self.correlator = correlator
        self.config = config
        self.clock = clock

    async def execute(self, request: RequestIssuanceRequest) -> Result[RequestIssuanceResponse, RequestIssuanceError]:
        with_pin = self.config.pin_enabled if request.with_pin is None else request.with_pin

        pin_value: Optional[str] = None
        pin_request: Optional[PinRequest] = None
        try:
            if with_pin:
                pin_length = self.config.issuance_pin_length or DEFAULT_PIN_LENGTH
                pin_value = generate_pin(pin_length)
                pin_request = PinRequest(length=pin_length, value=PlaintextPin(value=pin_value))

            issuance_request = build_issuance_request(
                IssuanceParams(
                    authority=self.config.issuer_authority,
                    manifest=self.config.credential_manifest,
                    credential_type=self.config.credential_type,
                    callback=CallbackParams(url=self.config.callback_url, api_key=self.config.api_key),
                    include_qr_code=request.include_qr_code,
                    pin=pin_request,
                    claims=request.claims,
                    client_name=self.config.client_name,
                    logo_url=self.config.logo_url,
                    terms_of_service_url=self.config.terms_of_service_url,
                )
            )
        except ValidationError as e:
            return Failure(RequestIssuanceError(f"Invalid issuance request: {e}"))

        state = CorrelationState(value=issuance_request.callback.state)
        flow = create_pending_flow(state=state, kind=FlowKind.ISSUANCE, clock=self.clock)

        save_result = await self.correlator.put(flow)
        if isinstance(save_result, Failure):
            return Failure(RequestIssuanceError(f"Failed to register flow: {save_result.failure()}"))

        LOGGER.info("Issuance flow %s registered (pin=%s)", state, pin_request is not None)

        return Success(RequestIssuanceResponse(state=state, request=issuance_request, pin=pin_value))
