"""Configuration loader for the request client"""

import logging
import os
from typing import Any, Dict

from vc_request_client.domain import ServiceConfig

LOGGER = logging.getLogger(__name__)

# environment variable -> ServiceConfig field
ENV_FIELDS: Dict[str, str] = {
    "VC_ISSUER_AUTHORITY": "issuer_authority",
    "VC_VERIFIER_AUTHORITY": "verifier_authority",
    "VC_CREDENTIAL_MANIFEST": "credential_manifest",
    "VC_CREDENTIAL_TYPE": "credential_type",
    "VC_PUBLIC_URL": "public_url",
    "VC_API_KEY": "api_key",
    "VC_ISSUANCE_PIN_LENGTH": "issuance_pin_length",
    "VC_CLIENT_NAME": "client_name",
    "VC_LOGO_URL": "logo_url",
    "VC_TERMS_OF_SERVICE_URL": "terms_of_service_url",
    "VC_PURPOSE": "purpose",
    "VC_FLOW_MAX_AGE_SECONDS": "flow_max_age_seconds",
}

REQUIRED_ENV = (
    "VC_ISSUER_AUTHORITY",
    "VC_CREDENTIAL_MANIFEST",
    "VC_CREDENTIAL_TYPE",
    "VC_PUBLIC_URL",
)


def load_config_from_env() -> ServiceConfig | None:
    """
    Load client configuration from environment variables.

    Environment variables:
    - VC_ISSUER_AUTHORITY: Issuer DID
    - VC_VERIFIER_AUTHORITY: Verifier DID (default: issuer DID)
    - VC_CREDENTIAL_MANIFEST: Credential manifest URL
    - VC_CREDENTIAL_TYPE: Credential type
    - VC_PUBLIC_URL: Public base URL the request service calls back
    - VC_API_KEY: Value of the api-key callback header
    - VC_ISSUANCE_PIN_LENGTH: PIN length, 0 disables PINs (default: 0)
    - VC_ACCEPTED_ISSUERS: Comma separated issuer DIDs (default: issuer DID)
    - VC_CLIENT_NAME, VC_LOGO_URL, VC_TERMS_OF_SERVICE_URL, VC_PURPOSE: Wallet display
    - VC_FLOW_MAX_AGE_SECONDS: Expiry for flows without a final callback

    Returns:
        ServiceConfig if environment is properly configured, None otherwise

    Raises:
        pydantic.ValidationError: If a variable is set to an invalid value
    """
    if not all(os.getenv(name) for name in REQUIRED_ENV):
        return None

    values: Dict[str, Any] = {
        field: os.environ[name] for name, field in ENV_FIELDS.items() if os.getenv(name)
    }
    values.setdefault("verifier_authority", values["issuer_authority"])

    accepted_issuers = os.getenv("VC_ACCEPTED_ISSUERS")
    if accepted_issuers:
        values["accepted_issuers"] = [i.strip() for i in accepted_issuers.split(",") if i.strip()]

    return ServiceConfig.model_validate(values)


def create_test_config() -> ServiceConfig:
    """
    Create a configuration for tests and local development.

    Returns:
        ServiceConfig pointing at example identifiers and localhost
    """
    return ServiceConfig(
        issuer_authority="did:web:issuer.example.com",
        verifier_authority="did:web:verifier.example.com",
        credential_manifest="https://verifiedid.example.com/manifests/VerifiedCredentialExpert",
        credential_type="VerifiedCredentialExpert",
        public_url="http://localhost:8000",
        api_key="test-api-key",
        issuance_pin_length=4,
        client_name="Verifiable Credential Expert Sample",
        purpose="To prove you are a Verified Credential Expert",
    )


def load_or_create_config() -> ServiceConfig:
    """
    Load configuration from environment or create test config.

    Returns:
        ServiceConfig
    """
    config = load_config_from_env()
    if config is None:
        LOGGER.warning("No environment configuration found, using test config")
        config = create_test_config()
    else:
        LOGGER.info("Loaded configuration from environment")

    return config
