"""Client configuration

Settings shared by every request this client builds: who issues and verifies,
which credential, where callbacks go and how they are authenticated. All
configuration is immutable and validated.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from vc_request_client.domain.pin import validate_pin_length
from vc_request_client.domain.value_objects import is_absolute_http_url, is_did

CALLBACK_PATH = "/api/callback"


class ServiceConfig(BaseModel):
    """
    Configuration for the request client.

    Attributes:
        issuer_authority: DID of the issuer
        verifier_authority: DID of the verifier
        credential_manifest: URL of the credential manifest
        credential_type: Credential type issued and requested
        public_url: Externally reachable base URL of the callback host
        api_key: Key the service must send back in the ``api-key`` callback header
        issuance_pin_length: PIN length for PIN protected issuance, 0 disables PINs
        client_name: Display name shown in the wallet
        logo_url: Issuer logo shown in the wallet
        terms_of_service_url: Issuer terms shown in the wallet
        purpose: Why the verifier asks for the credential
        accepted_issuers: Issuer DIDs accepted in presentations (defaults to the issuer)
        flow_max_age_seconds: Age after which a live flow counts as expired
    """

    model_config = ConfigDict(frozen=True)

    issuer_authority: str = Field(..., description="Issuer DID")
    verifier_authority: str = Field(..., description="Verifier DID")
    credential_manifest: str = Field(..., description="Credential manifest URL")
    credential_type: str = Field(..., min_length=1, description="Credential type")
    public_url: str = Field(..., description="Public base URL of the callback host")
    api_key: Optional[str] = Field(None, description="Callback api-key header value")
    issuance_pin_length: int = Field(0, ge=0, description="PIN length, 0 disables PINs")
    client_name: Optional[str] = Field(None, description="Display name shown in the wallet")
    logo_url: Optional[str] = Field(None, description="Issuer logo URL")
    terms_of_service_url: Optional[str] = Field(None, description="Issuer terms of service URL")
    purpose: str = Field("the verifier needs to see your credential", description="Presentation purpose")
    accepted_issuers: List[str] = Field(default_factory=list, description="Accepted issuer DIDs")
    flow_max_age_seconds: int = Field(600, gt=0, description="Expiry for flows without a final callback")

    @field_validator("issuer_authority", "verifier_authority")
    @classmethod
    def validate_did(cls, v: str) -> str:
        if not is_did(v):
            raise ValueError(f"Authority must be a DID: {v}")
        return v

    @field_validator("credential_manifest", "public_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not is_absolute_http_url(v):
            raise ValueError(f"Must be an absolute http(s) URL: {v}")
        return v

    @field_validator("issuance_pin_length")
    @classmethod
    def validate_pin(cls, v: int) -> int:
        if v != 0 and not validate_pin_length(v):
            raise ValueError(f"issuance_pin_length must be 0 or between 4 and 16, got {v}")
        return v

    @field_validator("accepted_issuers")
    @classmethod
    def validate_accepted_issuers(cls, v: List[str]) -> List[str]:
        for issuer in v:
            if not is_did(issuer):
                raise ValueError(f"Accepted issuer must be a DID: {issuer}")
        return v

    @model_validator(mode="before")
    @classmethod
    def default_accepted_issuers(cls, data: Any) -> Any:
        """Accept the configured issuer when no issuers are listed"""
        if isinstance(data, dict) and not data.get("accepted_issuers") and data.get("issuer_authority"):
            data = {**data, "accepted_issuers": [data["issuer_authority"]]}
        return data

    @property
    def callback_url(self) -> str:
        """Absolute URL of the callback endpoint"""
        return self.public_url.rstrip("/") + CALLBACK_PATH

    @property
    def pin_enabled(self) -> bool:
        return self.issuance_pin_length > 0
