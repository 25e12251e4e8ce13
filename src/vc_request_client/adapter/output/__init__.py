"""Output adapters - Infrastructure implementations of output ports"""

from vc_request_client.adapter.output.persistence import InMemoryFlowCorrelator

__all__ = [
    "InMemoryFlowCorrelator",
]
