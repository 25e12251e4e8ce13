"""API layer - FastAPI host for the request client"""

from vc_request_client.api.app import app, create_app

__all__ = ["app", "create_app"]
