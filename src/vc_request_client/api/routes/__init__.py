from vc_request_client.api.routes import callback, issuer, verifier

__all__ = ["callback", "issuer", "verifier"]
