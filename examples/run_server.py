"""
Run the request client API server

This script starts the FastAPI server hosting the callback endpoint.
"""

import logging

import uvicorn

from vc_request_client.api import app

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("Starting Verifiable Credential Request Client")
    print("=" * 60)
    print("\nEndpoints:")
    print("  - Docs: http://localhost:8000/docs")
    print("  - Health: http://localhost:8000/health")
    print("\nRequest endpoints:")
    print("  - POST /api/issuer/issuance-request")
    print("  - POST /api/verifier/presentation-request")
    print("\nRequest service endpoints:")
    print("  - POST /api/callback")
    print("  - GET /api/status/{state}")
    print("\n" + "=" * 60)

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info",
        access_log=True,
    )
