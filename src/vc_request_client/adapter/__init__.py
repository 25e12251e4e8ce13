"""Adapter layer - Infrastructure implementations"""

from vc_request_client.adapter.output import InMemoryFlowCorrelator

__all__ = [
    "InMemoryFlowCorrelator",
]
