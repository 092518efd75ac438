import logging
from typing import Callable

from raiblocks_py.shared.models import ProtocolError, RpcResult, TransportFailure

logger = logging.getLogger(__name__)

Notifier = Callable[[RpcResult], None]


def log_notifier(result: RpcResult) -> None:
    """Default notifier: every failed call leaves a trace in the log."""
    if isinstance(result, ProtocolError):
        logger.error("[rai_rpc] %s", result.message)
    elif isinstance(result, TransportFailure):
        if result.status is None:
            logger.error("[rai_rpc] Transport failure: %s", result.reason)
        else:
            logger.error("[rai_rpc] Transport failure (HTTP %s): %s", result.status, result.reason)


def silent_notifier(_result: RpcResult) -> None:
    pass
