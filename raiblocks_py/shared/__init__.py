__all__ = [
    "ClientConfiguration",
    "RpcResult",
    "Success",
    "ProtocolError",
    "TransportFailure",
    "LookupMiss",
]

from .configuration import ClientConfiguration
from .models import LookupMiss, ProtocolError, RpcResult, Success, TransportFailure
