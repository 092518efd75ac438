__all__ = [
    "ClientConfiguration",
    "RpcResult",
    "Success",
    "ProtocolError",
    "TransportFailure",
    "LookupMiss",
    "Denomination",
    "convert",
    "RaiRpcTransport",
    "IRaiNodeService",
    "RaiNodeServiceDefaultImpl",
    "HistoryReconciler",
    "RaiSession",
]

from .shared import ClientConfiguration, LookupMiss, ProtocolError, RpcResult, Success, TransportFailure
from .shared.rai_utils import Denomination, convert
from .shared.rai_utils.rpc import IRaiNodeService, RaiNodeServiceDefaultImpl, RaiRpcTransport
from .extended import HistoryReconciler, RaiSession
