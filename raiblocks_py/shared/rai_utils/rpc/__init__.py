__all__ = [
    "RaiRpcTransport",
    "IRaiNodeService",
    "RaiNodeServiceDefaultImpl",
    "classify_response",
    "encode_request",
    "get_node_service",
    "resolve_endpoint",
]

from .endpoint import resolve_endpoint
from .rai_node_service_default_impl import RaiNodeServiceDefaultImpl
from .rai_node_service_interface import IRaiNodeService
from .rai_rpc_transport import RaiRpcTransport, encode_request
from .rai_rpc_utils import get_node_service
from .response_classifier import classify_response
