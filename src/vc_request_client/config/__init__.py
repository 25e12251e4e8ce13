"""Configuration module"""

from vc_request_client.config.loader import (
    create_test_config,
    load_config_from_env,
    load_or_create_config,
)

__all__ = ["load_config_from_env", "create_test_config", "load_or_create_config"]
