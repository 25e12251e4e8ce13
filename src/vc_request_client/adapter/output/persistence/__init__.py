from vc_request_client.adapter.output.persistence.in_memory_flow_correlator import InMemoryFlowCorrelator

__all__ = ["InMemoryFlowCorrelator"]
