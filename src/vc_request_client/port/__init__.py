"""Port layer - Interfaces between domain and adapters

Input Ports (Use Cases):
- RequestIssuance: Build an issuance request and open its flow
- RequestPresentation: Build a presentation request and open its flow
- HandleCallback: Interpret a callback event against its flow
- GetFlowStatus: Report where a flow is

Output Ports (External Dependencies):
- FlowCorrelator: Flow state storage keyed by correlation token
"""

from vc_request_client.port.input import *
from vc_request_client.port.output import *
