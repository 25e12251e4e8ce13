"""Output ports - Interfaces for external dependencies"""

from vc_request_client.port.output.flow_correlator import FlowCorrelator, FlowNotFound

__all__ = [
    "FlowCorrelator",
    "FlowNotFound",
]
